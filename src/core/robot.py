"""
Robot entity for the strategy demo.

A Robot does not know how it attacks or moves. It holds one attack
behavior and one movement behavior and delegates to whichever is
currently assigned.
"""
import logging
from typing import Optional, List

from ..behaviors.base import AttackBehavior, MovementBehavior

logger = logging.getLogger(__name__)


class BehaviorNotAssigned(RuntimeError):
    """Raised when a robot is asked to act before the behavior is set."""

    def __init__(self, robot_name: str, capability: str):
        self.robot_name = robot_name
        self.capability = capability
        super().__init__(f"Robot '{robot_name}' has no {capability} behavior assigned")


class Robot:
    """
    A named robot whose attack and movement are pluggable strategies.

    Behaviors are aggregated, not owned: the same behavior instance can be
    shared across robots and outlives any of them.
    """

    def __init__(self, name: str):
        self._name = name
        self._attack_behavior: Optional[AttackBehavior] = None
        self._movement_behavior: Optional[MovementBehavior] = None
        self.action_log: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    @property
    def attack_behavior(self) -> Optional[AttackBehavior]:
        return self._attack_behavior

    @property
    def movement_behavior(self) -> Optional[MovementBehavior]:
        return self._movement_behavior

    def set_attack_behavior(self, behavior: AttackBehavior):
        """Replace the current attack behavior."""
        logger.debug(f"{self._name}: attack behavior {self._attack_behavior!r} -> {behavior!r}")
        self._attack_behavior = behavior

    def set_movement_behavior(self, behavior: MovementBehavior):
        """Replace the current movement behavior."""
        logger.debug(f"{self._name}: movement behavior {self._movement_behavior!r} -> {behavior!r}")
        self._movement_behavior = behavior

    def attack(self) -> str:
        """
        Attack using the currently assigned behavior.

        Returns:
            The attack behavior's description

        Raises:
            BehaviorNotAssigned: If no attack behavior has been set
        """
        if self._attack_behavior is None:
            logger.warning(f"{self._name}: attack() called with no attack behavior")
            raise BehaviorNotAssigned(self._name, "attack")
        text = self._attack_behavior.attack()
        self.action_log.append(text)
        return text

    def move(self) -> str:
        """
        Move using the currently assigned behavior.

        Raises:
            BehaviorNotAssigned: If no movement behavior has been set
        """
        if self._movement_behavior is None:
            logger.warning(f"{self._name}: move() called with no movement behavior")
            raise BehaviorNotAssigned(self._name, "movement")
        text = self._movement_behavior.move()
        self.action_log.append(text)
        return text

    def introduce(self) -> str:
        return f"My name is {self._name}"

    def explain_last_action(self) -> str:
        """Get the description produced by the last action."""
        if self.action_log:
            return self.action_log[-1]
        return "No actions yet"

    def reset(self):
        """Clear the action log. Assigned behaviors are kept."""
        self.action_log = []

    def __repr__(self) -> str:
        return (
            f"Robot(name={self._name}, movement={self._movement_behavior!r}, "
            f"attack={self._attack_behavior!r})"
        )
