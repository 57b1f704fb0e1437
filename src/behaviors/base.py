"""
Base behavior classes for the robot strategy demo.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class BehaviorInfo:
    """Metadata about a behavior for display and lookup."""
    id: str
    name: str
    short_desc: str   # One-line summary
    category: str     # "Attack" or "Movement"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'short_desc': self.short_desc,
            'category': self.category,
        }


class _Behavior:
    """Shared plumbing for stateless behaviors."""

    INFO: BehaviorInfo

    @classmethod
    def get_info(cls) -> BehaviorInfo:
        """Get behavior metadata."""
        return cls.INFO

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AttackBehavior(_Behavior, ABC):
    """
    Abstract base class for all attack behaviors.

    A robot holds one attack behavior at a time and delegates
    ``Robot.attack()`` to it. Implementations hold no state, so one
    instance can be shared by any number of robots.
    """

    # Override this in subclasses
    INFO: BehaviorInfo = BehaviorInfo(
        id="attack",
        name="Attack",
        short_desc="Abstract base class",
        category="Attack",
    )

    @abstractmethod
    def attack(self) -> str:
        """
        Describe this attack.

        Returns:
            The fixed description of the attack capability
        """
        pass


class MovementBehavior(_Behavior, ABC):
    """
    Abstract base class for all movement behaviors.

    Same contract as AttackBehavior, for ``Robot.move()``.
    """

    # Override this in subclasses
    INFO: BehaviorInfo = BehaviorInfo(
        id="movement",
        name="Movement",
        short_desc="Abstract base class",
        category="Movement",
    )

    @abstractmethod
    def move(self) -> str:
        """
        Describe this way of moving.

        Returns:
            The fixed description of the movement capability
        """
        pass
