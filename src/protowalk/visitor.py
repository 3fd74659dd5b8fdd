"""Visitor interface for schema AST nodes.

Subclass Visitor and override the ``visit_<kind>`` methods of interest;
with_visitor() turns the instance into an ordinary Handler, so it can be
mixed with typed adapters in the same walk:

    >>> class MessageCounter(Visitor):
    ...     def __init__(self):
    ...         self.count = 0
    ...
    ...     def visit_message(self, ctx, message):
    ...         self.count += 1
    >>> counter = MessageCounter()
    >>> walk(None, proto, with_visitor(counter))
"""

from __future__ import annotations

from typing import Any

from protowalk.nodes import (
    NODE_TYPES,
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
    Proto,
    Reserved,
    Service,
    Syntax,
    Visitee,
)
from protowalk.walker import Handler


class Visitor:
    """Base visitor with a no-op method per node variant."""

    def visit_proto(self, ctx: Any, proto: Proto) -> None:
        pass

    def visit_syntax(self, ctx: Any, syntax: Syntax) -> None:
        pass

    def visit_edition(self, ctx: Any, edition: Edition) -> None:
        pass

    def visit_package(self, ctx: Any, package: Package) -> None:
        pass

    def visit_import(self, ctx: Any, import_: Import) -> None:
        pass

    def visit_option(self, ctx: Any, option: Option) -> None:
        pass

    def visit_message(self, ctx: Any, message: Message) -> None:
        pass

    def visit_group(self, ctx: Any, group: Group) -> None:
        pass

    def visit_enum(self, ctx: Any, enum: Enum) -> None:
        pass

    def visit_enum_field(self, ctx: Any, field: EnumField) -> None:
        pass

    def visit_oneof(self, ctx: Any, oneof: Oneof) -> None:
        pass

    def visit_oneof_field(self, ctx: Any, field: OneOfField) -> None:
        pass

    def visit_normal_field(self, ctx: Any, field: NormalField) -> None:
        pass

    def visit_map_field(self, ctx: Any, field: MapField) -> None:
        pass

    def visit_service(self, ctx: Any, service: Service) -> None:
        pass

    def visit_rpc(self, ctx: Any, rpc: RPC) -> None:
        pass

    def visit_reserved(self, ctx: Any, reserved: Reserved) -> None:
        pass

    def visit_extensions(self, ctx: Any, extensions: Extensions) -> None:
        pass

    def visit_comment(self, ctx: Any, comment: Comment) -> None:
        pass


# node class -> Visitor method name, built once
_VISIT_METHODS: dict[type[Visitee], str] = {cls: f"visit_{cls.kind}" for cls in NODE_TYPES}


def with_visitor(visitor: Visitor) -> Handler:
    """Return a Handler that dispatches each node to ``visitor.visit_<kind>``.

    Nodes whose class is not a known variant are ignored.
    """

    def handler(ctx: Any, node: Visitee) -> None:
        method_name = _VISIT_METHODS.get(type(node))
        if method_name is not None:
            getattr(visitor, method_name)(ctx, node)

    return handler
