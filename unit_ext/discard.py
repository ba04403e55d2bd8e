"""Helpers that drop a value and yield ``None``.

``discard_self(f())`` marks the result of ``f()`` as intentionally unused.
Linters that report unused call results see the value passed as an
argument, so the call doubles as a greppable acknowledgement point. The
``None`` it returns can feed straight into a ``ret_*`` helper::

    ret_some(discard_self(cache.pop(key)), 1)
"""

from typing import Any


def discard_self(value: Any) -> None:
    """Discards ``value`` and returns ``None``."""
    del value


def discard_ret(value: Any) -> None:
    """Alias for :func:`discard_self`."""
    discard_self(value)
