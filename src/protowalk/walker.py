"""Pre-order traversal of a schema AST.

walk() visits every node below a container root, in stored child order,
and hands each node to every handler before descending into it:

    Proto
    ├── Package          1
    ├── Message          2
    │   ├── Option       3
    │   └── NormalField  4
    └── Service          5
        └── RPC          6

The root itself is never delivered. Handlers run synchronously on the
caller's thread; an exception raised by a handler propagates out of
walk() and abandons the rest of the traversal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from protowalk.config import DEFAULT_CONFIG, WalkConfig
from protowalk.exceptions import NotAContainerError
from protowalk.nodes import Visitee, elements_of

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Visitee], None]
"""Callback invoked once per visited node: ``handler(ctx, node)``."""


def walk(
    ctx: Any,
    root: Visitee,
    *handlers: Handler,
    config: WalkConfig = DEFAULT_CONFIG,
) -> None:
    """Call each handler, in order, on every node below ``root``.

    Args:
        ctx: Passed unchanged as the first argument of every handler call
        root: Container node whose descendants are visited (usually a Proto)
        *handlers: Handlers invoked per node, in the given order
        config: Traversal strategy and cancellation behavior

    Raises:
        NotAContainerError: If ``root`` has no child elements to walk.
    """
    children = elements_of(root)
    if children is None:
        raise NotAContainerError(root)

    logger.debug(
        "Walking %s with %d handler(s) (%s)", _kind(root), len(handlers), config.strategy
    )

    check_cancel = config.stop_when_cancelled
    for node in _traverse(children, config):
        if check_cancel and getattr(ctx, "cancelled", False):
            logger.debug("Walk cancelled before %s", _kind(node))
            return
        for handler in handlers:
            handler(ctx, node)


def iter_nodes(root: Visitee, config: WalkConfig = DEFAULT_CONFIG) -> Iterator[Visitee]:
    """Yield every node below ``root`` in the order walk() delivers them.

    Raises:
        NotAContainerError: If ``root`` has no child elements to walk.
    """
    children = elements_of(root)
    if children is None:
        raise NotAContainerError(root)
    return _traverse(children, config)


def _traverse(children: Sequence[Visitee], config: WalkConfig) -> Iterator[Visitee]:
    if config.strategy == "iterative":
        return _iter_stack(children)
    return _iter_recursive(children)


def _iter_recursive(children: Sequence[Visitee]) -> Iterator[Visitee]:
    for child in children:
        yield child
        grandchildren = elements_of(child)
        if grandchildren is not None:
            yield from _iter_recursive(grandchildren)


def _iter_stack(children: Sequence[Visitee]) -> Iterator[Visitee]:
    # Each frame is (siblings, next index); the top frame is the deepest
    # container still being iterated.
    stack: list[tuple[Sequence[Visitee], int]] = [(children, 0)]
    while stack:
        siblings, index = stack.pop()
        if index >= len(siblings):
            continue
        child = siblings[index]
        stack.append((siblings, index + 1))
        yield child
        grandchildren = elements_of(child)
        if grandchildren:
            stack.append((grandchildren, 0))


def _kind(node: object) -> str:
    return getattr(node, "kind", type(node).__name__)
