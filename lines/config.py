from pydantic import BaseModel, field_validator
from typing import Literal
import os
from dotenv import load_dotenv

from lines.utils import OVERFLOW_POLICIES

# Constants
DEFAULT_WIDTH = 72

# Environment variables read by load_config()
ENV_VARS = {
    "width": "LINES_LENGTH",
    "prefix": "LINES_PREFIX",
    "suffix": "LINES_SUFFIX",
    "overflow": "LINES_OVERFLOW",
}


class Settings(BaseModel):
    width: int = DEFAULT_WIDTH  # Total line length, prefix and suffix included
    prefix: str = ""
    suffix: str = ""
    overflow: Literal["drop", "break", "overflow"] = "drop"

    @field_validator("overflow", mode="before")
    @classmethod
    def normalize_overflow(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in OVERFLOW_POLICIES:
                raise ValueError(
                    f"must be one of {', '.join(OVERFLOW_POLICIES)} (got {value!r})"
                )
        return value

    @property
    def effective_width(self) -> int:
        """Width left for the text itself once prefix and suffix are added."""
        return self.width - len(self.prefix) - len(self.suffix)


def load_config() -> Settings:
    """Load settings from the environment (and a .env file) or return defaults.

    Raises pydantic.ValidationError when a variable holds an invalid value.
    """
    load_dotenv()

    data = {}
    for field_name, env_var in ENV_VARS.items():
        value = os.getenv(env_var)
        if value is not None:
            data[field_name] = value

    return Settings(**data)
