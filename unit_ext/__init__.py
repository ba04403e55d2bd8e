"""unit_ext: build return values from side-effecting expressions."""

from .result import Err, Ok, Option, Result
from .ret import (
    ret, ret_default, ret_err, ret_err_default, ret_none, ret_ok,
    ret_ok_default, ret_some, ret_some_default,
)
from .discard import discard_ret, discard_self

__all__ = [
    # Result
    "Ok", "Err", "Result", "Option",
    # Constructors
    "ret", "ret_default", "ret_err", "ret_err_default", "ret_none",
    "ret_ok", "ret_ok_default", "ret_some", "ret_some_default",
    # Discard
    "discard_ret", "discard_self",
]
