from .scenario import RobotSetup, ScenarioConfig, DEFAULT_SCENARIO, run_scenario, main

__all__ = ["RobotSetup", "ScenarioConfig", "DEFAULT_SCENARIO", "run_scenario", "main"]
