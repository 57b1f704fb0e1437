"""
Named robots from the demo.

TaekwonV and Atom differ only by name, so they are plain Robots built by
factory functions rather than subclasses.
"""
from typing import Optional

from .robot import Robot
from ..behaviors.registry import get_attack_behavior, get_movement_behavior

TAEKWON_V = "태권브이"
ATOM = "아톰"
SUNGARD = "선가드"


def build_robot(name: str, movement_id: Optional[str] = None,
                attack_id: Optional[str] = None) -> Robot:
    """
    Create a robot and equip it from registry IDs.

    Args:
        name: Robot name
        movement_id: Movement behavior ID, or None to leave unset
        attack_id: Attack behavior ID, or None to leave unset

    Raises:
        ValueError: If either ID is unknown
    """
    robot = Robot(name)
    if movement_id is not None:
        robot.set_movement_behavior(get_movement_behavior(movement_id))
    if attack_id is not None:
        robot.set_attack_behavior(get_attack_behavior(attack_id))
    return robot


def taekwon_v(name: str = TAEKWON_V) -> Robot:
    return Robot(name)


def atom(name: str = ATOM) -> Robot:
    return Robot(name)


def sungard(name: str = SUNGARD) -> Robot:
    # Added later than the other two; reuses existing behaviors as-is
    return Robot(name)
