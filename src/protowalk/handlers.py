"""Typed handler adapters.

Each ``with_<variant>`` function wraps a callback that only understands
one node variant into a generic Handler. The adapter forwards a node to
the callback when the node is of that variant and does nothing otherwise:

    >>> names = []
    >>> walk(None, proto, with_message(lambda ctx, m: names.append(m.name)))

Variants never inherit from one another, so ``with_message`` never sees
a Group, an extend block is a Message with ``is_extend`` set, and so on.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from protowalk.exceptions import InvalidNodeTypeError
from protowalk.nodes import (
    RPC,
    Comment,
    Edition,
    Enum,
    EnumField,
    Extensions,
    Group,
    Import,
    MapField,
    Message,
    NormalField,
    Oneof,
    OneOfField,
    Option,
    Package,
    Reserved,
    Service,
    Syntax,
    Visitee,
)
from protowalk.walker import Handler

V = TypeVar("V", bound=Visitee)


def with_kind(node_type: type[V], apply: Callable[[Any, V], None]) -> Handler:
    """Return a Handler that calls ``apply`` only for nodes of ``node_type``.

    Raises:
        InvalidNodeTypeError: If ``node_type`` is not a Visitee subclass.
    """
    if not (isinstance(node_type, type) and issubclass(node_type, Visitee)):
        raise InvalidNodeTypeError(node_type)

    def handler(ctx: Any, node: Visitee) -> None:
        match node:
            case node_type():
                apply(ctx, node)
            case _:
                pass

    handler.__name__ = f"with_{node_type.kind}"
    handler.__qualname__ = handler.__name__
    return handler


def combine(*handlers: Handler) -> Handler:
    """Fold several handlers into one that calls them in the given order."""

    def handler(ctx: Any, node: Visitee) -> None:
        for each in handlers:
            each(ctx, node)

    return handler


def with_syntax(apply: Callable[[Any, Syntax], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a Syntax."""
    return with_kind(Syntax, apply)


def with_edition(apply: Callable[[Any, Edition], None]) -> Handler:
    """Handler that calls ``apply`` when the node is an Edition."""
    return with_kind(Edition, apply)


def with_package(apply: Callable[[Any, Package], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a Package."""
    return with_kind(Package, apply)


def with_import(apply: Callable[[Any, Import], None]) -> Handler:
    """Handler that calls ``apply`` when the node is an Import."""
    return with_kind(Import, apply)


def with_option(apply: Callable[[Any, Option], None]) -> Handler:
    """Handler that calls ``apply`` when the node is an Option.

    Only options that are children of a container are visited; inline
    field options are part of the field payload.
    """
    return with_kind(Option, apply)


def with_message(apply: Callable[[Any, Message], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a Message (or extend block)."""
    return with_kind(Message, apply)


def with_group(apply: Callable[[Any, Group], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a Group."""
    return with_kind(Group, apply)


def with_enum(apply: Callable[[Any, Enum], None]) -> Handler:
    """Handler that calls ``apply`` when the node is an Enum."""
    return with_kind(Enum, apply)


def with_enum_field(apply: Callable[[Any, EnumField], None]) -> Handler:
    """Handler that calls ``apply`` when the node is an EnumField."""
    return with_kind(EnumField, apply)


def with_oneof(apply: Callable[[Any, Oneof], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a Oneof."""
    return with_kind(Oneof, apply)


def with_oneof_field(apply: Callable[[Any, OneOfField], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a OneOfField."""
    return with_kind(OneOfField, apply)


def with_normal_field(apply: Callable[[Any, NormalField], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a NormalField."""
    return with_kind(NormalField, apply)


def with_map_field(apply: Callable[[Any, MapField], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a MapField."""
    return with_kind(MapField, apply)


def with_service(apply: Callable[[Any, Service], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a Service."""
    return with_kind(Service, apply)


def with_rpc(apply: Callable[[Any, RPC], None]) -> Handler:
    """Handler that calls ``apply`` when the node is an RPC."""
    return with_kind(RPC, apply)


def with_reserved(apply: Callable[[Any, Reserved], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a Reserved statement."""
    return with_kind(Reserved, apply)


def with_extensions(apply: Callable[[Any, Extensions], None]) -> Handler:
    """Handler that calls ``apply`` when the node is an Extensions statement."""
    return with_kind(Extensions, apply)


def with_comment(apply: Callable[[Any, Comment], None]) -> Handler:
    """Handler that calls ``apply`` when the node is a standalone Comment."""
    return with_kind(Comment, apply)
