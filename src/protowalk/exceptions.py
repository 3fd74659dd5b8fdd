"""Exceptions for protowalk.

Exception Hierarchy:
ProtoWalkError (base)
├── NotAContainerError      # walk() root has no child elements (also TypeError)
├── InvalidNodeTypeError    # typed adapter target is not a node class (also TypeError)
└── InvalidConfigError      # WalkConfig field holds an unsupported value (also ValueError)

Handler exceptions are never wrapped: whatever a handler raises reaches
the caller of walk() unchanged. A typed adapter ignoring a node of the
wrong variant is not an error.

"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes for protowalk errors.

    Format: PW-{CATEGORY}-{NUMBER}
    Categories: WLK (walker), HDL (handler construction), CFG (configuration)
    """

    # Walker errors (PW-WLK-xxx)
    NOT_A_CONTAINER = "PW-WLK-001"

    # Handler construction errors (PW-HDL-xxx)
    NOT_A_NODE_TYPE = "PW-HDL-001"

    # Configuration errors (PW-CFG-xxx)
    INVALID_STRATEGY = "PW-CFG-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'walker', 'handler', 'config')."""
        prefix = self.value.split("-")[1]
        return {
            "WLK": "walker",
            "HDL": "handler",
            "CFG": "config",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ProtoWalkError(Exception):
    """Base exception for protowalk errors."""

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(self._format())

    def _format(self) -> str:
        if self.code is None:
            return self.message
        return f"[{self.code.value}] {self.message}"


class NotAContainerError(ProtoWalkError, TypeError):
    """walk() was handed a root that does not own child elements."""

    def __init__(self, root: Any) -> None:
        self.root = root
        kind = getattr(root, "kind", type(root).__name__)
        super().__init__(
            f"walk() requires a container root, got {kind!r} ({type(root).__name__})",
            code=ErrorCode.NOT_A_CONTAINER,
        )


class InvalidNodeTypeError(ProtoWalkError, TypeError):
    """A typed adapter was asked to filter on something that is not a node class."""

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(
            f"Typed handlers filter on Visitee subclasses, got {target!r}",
            code=ErrorCode.NOT_A_NODE_TYPE,
        )


class InvalidConfigError(ProtoWalkError, ValueError):
    """A WalkConfig field holds an unsupported value."""

    def __init__(self, field: str, value: Any, allowed: tuple[str, ...], *, code: ErrorCode) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid {field} {value!r}; expected one of: {', '.join(allowed)}",
            code=code,
        )
