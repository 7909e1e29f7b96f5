"""Tagged result type for per-record operations.

A :data:`Result` is either :class:`Ok` carrying a value or :class:`Err`
carrying an :class:`ErrorKind` and a human-readable detail.  The sync
orchestrator branches on the tag instead of catching generic exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification of a failed operation."""

    NETWORK = "network"
    SERVER = "server"
    CLIENT = "client"
    SYNC_ITEM = "sync_item"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    Attributes:
        kind: What class of failure occurred.
        detail: Message suitable for display next to the record.
    """

    kind: ErrorKind
    detail: str

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
