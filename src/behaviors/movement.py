"""
Movement behaviors a robot can be equipped with.
"""
from .base import MovementBehavior, BehaviorInfo


class Flying(MovementBehavior):
    """Can fly."""

    INFO = BehaviorInfo(
        id="flying",
        name="Flying",
        short_desc="Flies through the air",
        category="Movement",
    )

    def move(self) -> str:
        return "날 수 있어요."


class Walking(MovementBehavior):
    """Walks on the ground and cannot fly."""

    INFO = BehaviorInfo(
        id="walking",
        name="Walking",
        short_desc="Walks only, cannot fly",
        category="Movement",
    )

    def move(self) -> str:
        return "전 걸을 수 있어요. 날 수 없어요."
