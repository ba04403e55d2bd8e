import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from unit_ext.result import Err, Ok, Result
from unit_ext.ret import ret_err, ret_ok

DEFAULT_LOG_LEVEL = "WARNING"


def parse_log_level(name: str) -> Result[int, ValueError]:
    """Map a level name such as ``"debug"`` to its ``logging`` constant."""
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    match level:
        case int(value):
            return ret_ok(None, value)
        case _:
            return ret_err(None, ValueError(f"Unknown log level: {name!r}"))


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the ``unit-ext`` command."""

    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls) -> Result["Settings", ValueError]:
        """Creates settings from the environment, loading a .env file first."""
        load_dotenv()
        match parse_log_level(os.getenv("UNIT_EXT_LOG_LEVEL", DEFAULT_LOG_LEVEL)):
            case Ok(level):
                return ret_ok(None, cls(log_level=level))
            case Err(e):
                return ret_err(None, e)
