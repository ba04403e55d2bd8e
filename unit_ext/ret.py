"""Constructors that turn a no-value expression into a useful value.

Every helper takes the value of a side-effecting expression as its first
argument (``logger.info(...)``, ``print(...)``, ``list.sort()``, ...), which
is always ``None``, ignores it, and builds the value the surrounding
expression needs::

    lambda e: ret_none(logger.warning("bad input: %s", e))
    lambda v: ret_some(logger.debug("got %d", v), v + 10)

The receiver is never read. Type parameters that cannot be inferred from
the arguments are passed as classes (``ret_none(None, int)``); they only
pin the static type and, for the ``*_default`` helpers, supply the
zero-argument constructor.
"""

from collections.abc import Callable
from typing import TypeVar

from unit_ext.result import Err, Ok, Option, Result

T = TypeVar("T")
E = TypeVar("E")


def ret(unit: None, value: T) -> T:
    """Returns ``value``.

    Mostly useful for symmetry with the other ``ret_*`` helpers::

        ret(print("24"), 42) == 42
    """
    return value


def ret_default(unit: None, factory: Callable[[], T]) -> T:
    """Returns ``factory()``, e.g. ``ret_default(None, list) == []``.

    Exceptions raised by ``factory`` propagate unchanged.
    """
    return factory()


def ret_none(unit: None, tp: type[T] | None = None) -> Option[T]:
    """Returns ``None``.

    ``tp`` only narrows the static type (``ret_none(None, int)`` is an
    ``int | None``) and is never used at runtime.
    """
    return None


def ret_some(unit: None, value: T) -> Option[T]:
    """Returns ``value`` as a present optional."""
    return value


def ret_some_default(unit: None, factory: Callable[[], T]) -> Option[T]:
    """Returns ``factory()`` as a present optional."""
    return ret_some(unit, ret_default(unit, factory))


def ret_err(unit: None, error: E) -> Result[T, E]:
    """Returns ``Err(error)``."""
    return Err(error)


def ret_err_default(unit: None, factory: Callable[[], E]) -> Result[T, E]:
    """Returns ``Err(factory())``."""
    return ret_err(unit, ret_default(unit, factory))


def ret_ok(unit: None, value: T) -> Result[T, E]:
    """Returns ``Ok(value)``."""
    return Ok(value)


def ret_ok_default(unit: None, factory: Callable[[], T]) -> Result[T, E]:
    """Returns ``Ok(factory())``."""
    return ret_ok(unit, ret_default(unit, factory))
