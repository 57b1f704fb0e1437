"""
Driver for the robot strategy demo.

Builds the robots, equips them, and reports what each one can do.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.robot import Robot
from ..core.roster import TAEKWON_V, ATOM, build_robot


@dataclass
class RobotSetup:
    """Which behaviors a robot is equipped with."""
    name: str
    movement_id: str
    attack_id: str


@dataclass
class ScenarioConfig:
    """Robots to run, in order."""
    robots: List[RobotSetup] = field(default_factory=lambda: [
        RobotSetup(name=TAEKWON_V, movement_id="walking", attack_id="missile"),
        RobotSetup(name=ATOM, movement_id="flying", attack_id="punch"),
    ])


DEFAULT_SCENARIO = ScenarioConfig()


def report(robot: Robot) -> List[str]:
    """Introduce the robot, then move, then attack."""
    return [robot.introduce(), robot.move(), robot.attack()]


def run_scenario(config: Optional[ScenarioConfig] = None) -> List[str]:
    """
    Run every robot in the scenario.

    Args:
        config: Scenario to run (defaults to DEFAULT_SCENARIO)

    Returns:
        Output lines, with a blank line between robots
    """
    config = config or DEFAULT_SCENARIO

    lines: List[str] = []
    for i, setup in enumerate(config.robots):
        robot = build_robot(setup.name, setup.movement_id, setup.attack_id)
        if i > 0:
            lines.append("")
        lines.extend(report(robot))

    return lines


def main():
    for line in run_scenario():
        print(line)


if __name__ == "__main__":
    main()
