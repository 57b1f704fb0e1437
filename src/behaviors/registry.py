"""
Behavior registry - central place to access all available behaviors.

Adding a behavior means writing a new class and listing it here;
Robot itself never changes.
"""
from typing import Dict, List, Type

from .base import AttackBehavior, MovementBehavior, BehaviorInfo
from .attack import Missile, Punch
from .movement import Flying, Walking


ATTACK_BEHAVIORS: Dict[str, Type[AttackBehavior]] = {
    'missile': Missile,
    'punch': Punch,
}

MOVEMENT_BEHAVIORS: Dict[str, Type[MovementBehavior]] = {
    'flying': Flying,
    'walking': Walking,
}


def _lookup(table: Dict[str, type], behavior_id: str, kind: str):
    if behavior_id not in table:
        available = ", ".join(table.keys())
        raise ValueError(f"Unknown {kind} behavior: {behavior_id}. Available: {available}")
    return table[behavior_id]()


def get_attack_behavior(behavior_id: str) -> AttackBehavior:
    """
    Get an attack behavior instance by ID.

    Raises:
        ValueError: If behavior_id is not found
    """
    return _lookup(ATTACK_BEHAVIORS, behavior_id, "attack")


def get_movement_behavior(behavior_id: str) -> MovementBehavior:
    """
    Get a movement behavior instance by ID.

    Raises:
        ValueError: If behavior_id is not found
    """
    return _lookup(MOVEMENT_BEHAVIORS, behavior_id, "movement")


def list_behaviors() -> List[BehaviorInfo]:
    """
    Get info about all available behaviors, attacks first.

    Returns:
        List of BehaviorInfo objects
    """
    classes = list(ATTACK_BEHAVIORS.values()) + list(MOVEMENT_BEHAVIORS.values())
    return [cls.INFO for cls in classes]


def get_behaviors_by_category() -> Dict[str, List[BehaviorInfo]]:
    """
    Get behaviors grouped by category.

    Returns:
        Dict mapping category names to lists of BehaviorInfo
    """
    by_category: Dict[str, List[BehaviorInfo]] = {}

    for info in list_behaviors():
        if info.category not in by_category:
            by_category[info.category] = []
        by_category[info.category].append(info)

    return by_category
