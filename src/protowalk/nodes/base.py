"""Base node class and container capability for the protowalk AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Position:
    """Source location of a node in a .proto file."""

    filename: str = ""
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True, slots=True, kw_only=True)
class Visitee:
    """Base class for all schema AST nodes.

    Every node can be handed to a handler during a walk. Nodes are
    immutable; the walker never creates, reorders or drops them.

    """

    kind: ClassVar[str] = "visitee"

    position: Position = Position()


@runtime_checkable
class ElementContainer(Protocol):
    """A node that owns an ordered, possibly empty sequence of children."""

    @property
    def elements(self) -> Sequence[Visitee]: ...
