"""Field nodes for the protowalk AST."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from protowalk.nodes.base import Visitee
from protowalk.nodes.declarations import Option


@dataclass(frozen=True, slots=True)
class NormalField(Visitee):
    """Message field: [repeated|optional|required] Type name = 1 [opts];"""

    kind = "normal_field"

    name: str
    type: str
    sequence: int
    repeated: bool = False
    optional: bool = False
    required: bool = False
    options: Sequence[Option] = ()


@dataclass(frozen=True, slots=True)
class MapField(Visitee):
    """Map field: map<KeyType, Type> name = 1 [opts];"""

    kind = "map_field"

    name: str
    key_type: str
    type: str
    sequence: int
    options: Sequence[Option] = ()


@dataclass(frozen=True, slots=True)
class OneOfField(Visitee):
    """Field declared inside a oneof body."""

    kind = "oneof_field"

    name: str
    type: str
    sequence: int
    options: Sequence[Option] = ()


@dataclass(frozen=True, slots=True)
class EnumField(Visitee):
    """Enum value: NAME = 1 [opts];

    Value options live in ``elements`` so they are visited like any
    other child.
    """

    kind = "enum_field"

    name: str
    integer: int
    elements: Sequence[Visitee] = ()
