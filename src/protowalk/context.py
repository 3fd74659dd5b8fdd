"""Walk context: caller values plus a cancellation flag.

walk() threads its ``ctx`` argument through every handler call without
looking at it. WalkContext is a convenient carrier for that argument; any
object works. The walker only reads ``ctx.cancelled``, and only when
``WalkConfig.stop_when_cancelled`` is enabled.

Example:
    >>> ctx = WalkContext()
    >>> ctx.set("messages", [])
    >>> walk(ctx, proto, with_message(lambda c, m: c.get("messages").append(m.name)))
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class WalkContext:
    """Mutable per-walk state owned by the caller.

    Attributes:
        values: Arbitrary caller data shared across handlers
        cancelled: Set by cancel(); honored only by walks configured with
            ``stop_when_cancelled``
    """

    values: dict[str, object] = field(default_factory=dict)
    cancelled: bool = False

    def get(self, key: str, default: object = None) -> object:
        return self.values.get(key, default)

    def set(self, key: str, value: object) -> None:
        self.values[key] = value

    def cancel(self) -> None:
        """Request that cancellation-aware walks stop before the next node."""
        self.cancelled = True
