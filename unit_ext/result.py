"""Wrapper types built by the ``ret_*`` helpers.

``ret_ok`` and ``ret_err`` produce ``Ok`` and ``Err``; ``ret_some`` and
``ret_none`` produce an ``Option``, which is plain ``T | None``.
"""

from dataclasses import dataclass
from typing import TypeVar, Generic

T = TypeVar("T")
E = TypeVar("E")

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

type Result[T, E] = Ok[T] | Err[E]

# Absence is ``None``; there is no separate present wrapper.
type Option[T] = T | None
