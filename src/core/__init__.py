from .robot import Robot, BehaviorNotAssigned
from .roster import build_robot, taekwon_v, atom, sungard

__all__ = ["Robot", "BehaviorNotAssigned", "build_robot", "taekwon_v", "atom", "sungard"]
