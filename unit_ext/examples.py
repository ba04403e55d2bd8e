"""Example chains that run a logging side effect inline.

Each function builds one small pipeline and returns its value. Run
``unit-ext demo`` to print them all.
"""

import logging
from collections.abc import Callable

from unit_ext.discard import discard_self
from unit_ext.result import Err, Ok, Option, Result
from unit_ext.ret import ret, ret_default, ret_err, ret_none, ret_ok, ret_some

logger = logging.getLogger(__name__)

U8_MAX = 255


def parse_u8(text: str) -> Result[int, ValueError]:
    """Parse ``text`` as an unsigned 8-bit integer.

    Only ASCII digits with an optional leading ``+`` are accepted; no
    whitespace or underscores.
    """
    if not (text.isascii() and text.removeprefix("+").isdigit()):
        return ret_err(None, ValueError(f"invalid digit found in {text!r}"))
    value = int(text)
    if not 0 <= value <= U8_MAX:
        return ret_err(None, ValueError(f"{value} is out of range for an unsigned byte"))
    return ret_ok(None, value)


def filtered_or_warn(value: Option[int] = 10) -> Option[int]:
    return (
        value * 2
        if value is not None and value > 5
        else ret_none(logger.warning("Value too small"), int)
    )


def mapped_with_log(value: Option[int] = 10) -> int:
    if value is not None:
        return ret(logger.info("Some(%d)", value), value + 10)
    return ret_default(logger.info("Default value"), int)


def reverse_in_place(values: list[int] | None = None) -> list[int]:
    arr = values if values is not None else [1, 2, 3, 4]
    return ret(arr.reverse(), arr)


def parse_or_none(text: str = "10") -> Option[int]:
    match parse_u8(text):
        case Ok(v):
            return ret_some(logger.debug("Got here"), v + 10)
        case Err(e):
            return ret_none(logger.error("%s", e), int)


def match_parse(text: str = "15") -> Option[int]:
    match parse_u8(text):
        case Ok(v):
            return v + 15
        case Err(e):
            return ret_none(logger.error("%s", e))


def discard_then_some(value: Option[int] = 0) -> Option[int]:
    return ret_some(discard_self(value), 1)


EXAMPLES: dict[str, Callable[[], object]] = {
    "filtered_or_warn": filtered_or_warn,
    "mapped_with_log": mapped_with_log,
    "reverse_in_place": reverse_in_place,
    "parse_or_none": parse_or_none,
    "match_parse": match_parse,
    "discard_then_some": discard_then_some,
}
