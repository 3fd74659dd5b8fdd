"""Walk configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from protowalk.exceptions import ErrorCode, InvalidConfigError

Strategy = Literal["recursive", "iterative"]

STRATEGIES: tuple[str, ...] = ("recursive", "iterative")


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Options controlling how walk() descends the tree.

    Attributes:
        strategy: "recursive" descends with the call stack (nesting depth of
            real schemas is small). "iterative" keeps an explicit stack and
            has no depth limit. Both deliver nodes in the same order.
        stop_when_cancelled: Check ``ctx.cancelled`` before delivering each
            node and stop quietly once it is true. Off by default: the
            context is a carrier and the walker does not inspect it.
    """

    strategy: Strategy = "recursive"
    stop_when_cancelled: bool = False

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise InvalidConfigError("strategy", self.strategy, STRATEGIES, code=ErrorCode.INVALID_STRATEGY)


DEFAULT_CONFIG = WalkConfig()
