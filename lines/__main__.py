import sys

from lines.main import main

sys.exit(main())
