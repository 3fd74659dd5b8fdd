"""Container capability dispatch.

ElementContainer is the one definition of "has children": the composite
variants satisfy it through their ``elements`` field, leaf variants do
not, and any other object exposing ``elements`` is walked the same way.
"""

from __future__ import annotations

from collections.abc import Sequence

from protowalk.nodes.base import ElementContainer, Visitee


def elements_of(node: Visitee) -> Sequence[Visitee] | None:
    """Return the ordered children of ``node``, or None if it is a leaf."""
    match node:
        case ElementContainer():
            return node.elements
        case _:
            return None


def is_container(node: object) -> bool:
    """True if ``node`` owns child elements."""
    return elements_of(node) is not None  # type: ignore[arg-type]
