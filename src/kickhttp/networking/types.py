"""Result container returned by the transport collaborator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Mapping, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome with request metadata."""

    value: T
    meta: Mapping[str, Any] = field(default_factory=dict)

    ok: ClassVar[bool] = True
    error: ClassVar[None] = None


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome with request metadata."""

    error: E
    meta: Mapping[str, Any] = field(default_factory=dict)

    ok: ClassVar[bool] = False
    value: ClassVar[None] = None


Result = Union[Ok[T], Err[E]]
