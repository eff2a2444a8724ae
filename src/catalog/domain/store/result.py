"""Outcome of a single store call.

Every store operation returns either a ``Success`` carrying its output
value or a ``Failure`` describing what went wrong. There are no
sentinel values: a failed ``generate_id`` has no id at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(Enum):
    CONNECTION_ISSUE = "connection_issue"
    ERROR = "error"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str = ""

    @staticmethod
    def connection_issue(message: str = "") -> Failure:
        return Failure(FailureKind.CONNECTION_ISSUE, message)

    @staticmethod
    def error(message: str = "") -> Failure:
        return Failure(FailureKind.ERROR, message)


OperationResult = Union[Success[T], Failure]
