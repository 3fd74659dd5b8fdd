"""Protocol Buffers schema AST nodes.

Node Categories:
    Base: Visitee, Position, ElementContainer
    Definitions: Proto, Message, Group, Enum, Oneof, Service, RPC
    Fields: NormalField, MapField, OneOfField, EnumField
    Declarations: Syntax, Edition, Package, Import, Option, Reserved,
        Extensions, Comment

All nodes are frozen, slotted dataclasses. Definitions (and EnumField)
own an ordered ``elements`` tuple; every other variant is a leaf.
"""

from protowalk.nodes.base import ElementContainer, Position, Visitee
from protowalk.nodes.containers import elements_of, is_container
from protowalk.nodes.declarations import (
    Comment,
    Edition,
    Extensions,
    Import,
    Option,
    Package,
    Reserved,
    Syntax,
)
from protowalk.nodes.definitions import RPC, Enum, Group, Message, Oneof, Proto, Service
from protowalk.nodes.fields import EnumField, MapField, NormalField, OneOfField

NODE_TYPES: tuple[type[Visitee], ...] = (
    Proto,
    Syntax,
    Edition,
    Package,
    Import,
    Option,
    Message,
    Group,
    Enum,
    EnumField,
    Oneof,
    OneOfField,
    NormalField,
    MapField,
    Service,
    RPC,
    Reserved,
    Extensions,
    Comment,
)

__all__ = [
    "NODE_TYPES",
    "RPC",
    "Comment",
    "Edition",
    "ElementContainer",
    "Enum",
    "EnumField",
    "Extensions",
    "Group",
    "Import",
    "MapField",
    "Message",
    "NormalField",
    "OneOfField",
    "Oneof",
    "Option",
    "Package",
    "Position",
    "Proto",
    "Reserved",
    "Service",
    "Syntax",
    "Visitee",
    "elements_of",
    "is_container",
]
