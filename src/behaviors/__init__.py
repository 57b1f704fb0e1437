"""
Interchangeable behaviors for robots.

Each behavior encapsulates one way of attacking or moving, so robots can
be equipped and re-equipped at runtime without changing the Robot class.
"""
from .base import AttackBehavior, MovementBehavior, BehaviorInfo
from .attack import Missile, Punch
from .movement import Flying, Walking
from .registry import (
    ATTACK_BEHAVIORS,
    MOVEMENT_BEHAVIORS,
    get_attack_behavior,
    get_movement_behavior,
    list_behaviors,
)

__all__ = [
    'AttackBehavior',
    'MovementBehavior',
    'BehaviorInfo',
    'Missile',
    'Punch',
    'Flying',
    'Walking',
    'ATTACK_BEHAVIORS',
    'MOVEMENT_BEHAVIORS',
    'get_attack_behavior',
    'get_movement_behavior',
    'list_behaviors',
]
