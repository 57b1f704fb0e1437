"""
Demo script to walk through the robot strategy example.
"""
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.behaviors import Missile, Walking
from src.behaviors.registry import get_behaviors_by_category
from src.core.roster import atom, sungard
from src.client.scenario import run_scenario, report


def demo_behaviors():
    """Show all available behaviors."""
    print("=" * 60)
    print("AVAILABLE BEHAVIORS")
    print("=" * 60)

    for category, infos in get_behaviors_by_category().items():
        print(f"\n{category}:")
        for info in infos:
            print(f"  {info.id:<10} {info.short_desc}")


def demo_default_scenario():
    """Run the two-robot scenario."""
    print("\n" + "=" * 60)
    print("DEFAULT SCENARIO")
    print("=" * 60)

    for line in run_scenario():
        print(line)


def demo_swap_at_runtime():
    """Ground Atom without touching the Robot class."""
    print("\n" + "=" * 60)
    print("RUNTIME SWAP")
    print("=" * 60)

    robot = atom()
    robot.set_movement_behavior(Walking())
    robot.set_attack_behavior(Missile())

    for line in report(robot):
        print(line)


def demo_new_robot():
    """A new robot reuses the existing missile attack."""
    print("\n" + "=" * 60)
    print("NEW ROBOT")
    print("=" * 60)

    robot = sungard()
    robot.set_movement_behavior(Walking())
    robot.set_attack_behavior(Missile())

    for line in report(robot):
        print(line)


if __name__ == "__main__":
    print("Robot Strategy Pattern - Demo")

    demo_behaviors()
    demo_default_scenario()
    demo_swap_at_runtime()
    demo_new_robot()

    print("\n" + "=" * 60)
    print("Demo complete!")
