"""Composite definition nodes for the protowalk AST.

Each class here owns an ordered ``elements`` sequence and satisfies the
ElementContainer capability.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from protowalk.nodes.base import Visitee


@dataclass(frozen=True, slots=True)
class Proto(Visitee):
    """Root node representing a complete .proto file."""

    kind = "proto"

    filename: str = ""
    elements: Sequence[Visitee] = ()


@dataclass(frozen=True, slots=True)
class Message(Visitee):
    """Message definition: message Name { ... }

    ``is_extend`` marks an ``extend Name { ... }`` block, which shares
    the message body grammar.
    """

    kind = "message"

    name: str
    is_extend: bool = False
    elements: Sequence[Visitee] = ()


@dataclass(frozen=True, slots=True)
class Group(Visitee):
    """Proto2 group: repeated group Name = 1 { ... }"""

    kind = "group"

    name: str
    sequence: int
    optional: bool = False
    repeated: bool = False
    required: bool = False
    elements: Sequence[Visitee] = ()


@dataclass(frozen=True, slots=True)
class Enum(Visitee):
    """Enum definition: enum Name { ... }"""

    kind = "enum"

    name: str
    elements: Sequence[Visitee] = ()


@dataclass(frozen=True, slots=True)
class Oneof(Visitee):
    """Oneof definition: oneof name { ... }"""

    kind = "oneof"

    name: str
    elements: Sequence[Visitee] = ()


@dataclass(frozen=True, slots=True)
class Service(Visitee):
    """Service definition: service Name { rpc ... }"""

    kind = "service"

    name: str
    elements: Sequence[Visitee] = ()


@dataclass(frozen=True, slots=True)
class RPC(Visitee):
    """RPC method: rpc Name (stream Req) returns (Resp) { option ... }"""

    kind = "rpc"

    name: str
    request_type: str
    returns_type: str
    streams_request: bool = False
    streams_returns: bool = False
    elements: Sequence[Visitee] = ()
