"""protowalk — typed traversal of Protocol Buffers schema ASTs.

Walks an already-parsed .proto AST in deterministic pre-order and hands
every node to an ordered list of handlers. Linters, generators and
formatters get to observe every element of a schema without writing
their own recursion or type checks.

Quickstart:
    >>> from protowalk import Message, Option, Proto, walk, with_message
    >>> proto = Proto(elements=(Message("Greeting", elements=(Option("deprecated", "true"),)),))
    >>> names = []
    >>> walk(None, proto, with_message(lambda ctx, m: names.append(m.name)))
    >>> names
    ['Greeting']

Architecture:
Parser (external) → AST nodes → walk() → handlers

Building blocks:
1. **Nodes**: frozen dataclasses, one per schema element; containers own
   an ordered ``elements`` tuple
2. **walk()**: pre-order, depth-first; every handler sees a node before
   any of its descendants; the root itself is never delivered
3. **Typed adapters**: ``with_message``, ``with_option``, ... wrap a
   variant-specific callback into a generic Handler
4. **Visitor**: one ``visit_<kind>`` method per variant, adapted with
   ``with_visitor``

Errors:
Handler exceptions propagate out of walk() untouched and stop the walk.
The walker has one error of its own, ``NotAContainerError``, for a root
that cannot have children.

"""

from protowalk.config import DEFAULT_CONFIG, WalkConfig
from protowalk.context import WalkContext
from protowalk.exceptions import (
    ErrorCode,
    InvalidConfigError,
    InvalidNodeTypeError,
    NotAContainerError,
    ProtoWalkError,
)
from protowalk.handlers import (
    combine,
    with_comment,
    with_edition,
    with_enum,
    with_enum_field,
    with_extensions,
    with_group,
    with_import,
    with_kind,
    with_map_field,
    with_message,
    with_normal_field,
    with_oneof,
    with_oneof_field,
    with_option,
    with_package,
    with_reserved,
    with_rpc,
    with_service,
    with_syntax,
)
from protowalk.nodes import (
    RPC,
    Comment,
    Edition,
    ElementContainer,
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
    Position,
    Proto,
    Reserved,
    Service,
    Syntax,
    Visitee,
    elements_of,
    is_container,
)
from protowalk.visitor import Visitor, with_visitor
from protowalk.walker import Handler, iter_nodes, walk

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "RPC",
    "Comment",
    "Edition",
    "ElementContainer",
    "Enum",
    "EnumField",
    "ErrorCode",
    "Extensions",
    "Group",
    "Handler",
    "Import",
    "InvalidConfigError",
    "InvalidNodeTypeError",
    "MapField",
    "Message",
    "NormalField",
    "NotAContainerError",
    "OneOfField",
    "Oneof",
    "Option",
    "Package",
    "Position",
    "Proto",
    "ProtoWalkError",
    "Reserved",
    "Service",
    "Syntax",
    "Visitee",
    "Visitor",
    "WalkConfig",
    "WalkContext",
    "combine",
    "elements_of",
    "is_container",
    "iter_nodes",
    "walk",
    "with_comment",
    "with_edition",
    "with_enum",
    "with_enum_field",
    "with_extensions",
    "with_group",
    "with_import",
    "with_kind",
    "with_map_field",
    "with_message",
    "with_normal_field",
    "with_oneof",
    "with_oneof_field",
    "with_option",
    "with_package",
    "with_reserved",
    "with_rpc",
    "with_service",
    "with_syntax",
    "with_visitor",
]
