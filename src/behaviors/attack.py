"""
Attack behaviors a robot can be equipped with.
"""
from .base import AttackBehavior, BehaviorInfo


class Missile(AttackBehavior):
    """Long-range missile attack."""

    INFO = BehaviorInfo(
        id="missile",
        name="Missile",
        short_desc="Fires missiles",
        category="Attack",
    )

    def attack(self) -> str:
        return "미사일을 갖고있어요."


class Punch(AttackBehavior):
    """Close-range punch."""

    INFO = BehaviorInfo(
        id="punch",
        name="Punch",
        short_desc="Throws a strong punch",
        category="Attack",
    )

    def attack(self) -> str:
        return "강력한 펀치를 갖고있어요."
