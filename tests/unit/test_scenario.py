"""
Tests for the demo driver.
"""
from src.client.scenario import (
    RobotSetup,
    ScenarioConfig,
    DEFAULT_SCENARIO,
    run_scenario,
    main,
)

EXPECTED_OUTPUT = [
    "My name is 태권브이",
    "전 걸을 수 있어요. 날 수 없어요.",
    "미사일을 갖고있어요.",
    "",
    "My name is 아톰",
    "날 수 있어요.",
    "강력한 펀치를 갖고있어요.",
]


class TestScenario:
    """Tests for run_scenario and main."""

    def test_default_scenario(self):
        assert run_scenario() == EXPECTED_OUTPUT

    def test_default_config(self):
        names = [setup.name for setup in DEFAULT_SCENARIO.robots]
        assert names == ["태권브이", "아톰"]

    def test_main_prints_exact_output(self, capsys):
        main()
        captured = capsys.readouterr()
        assert captured.out == "\n".join(EXPECTED_OUTPUT) + "\n"

    def test_swapped_behaviors(self):
        """Test the same robots with swapped behaviors."""
        config = ScenarioConfig(robots=[
            RobotSetup(name="태권브이", movement_id="flying", attack_id="punch"),
            RobotSetup(name="아톰", movement_id="walking", attack_id="missile"),
        ])
        lines = run_scenario(config)

        assert lines[1] == "날 수 있어요."
        assert lines[6] == "미사일을 갖고있어요."

    def test_single_robot_has_no_separator(self):
        config = ScenarioConfig(robots=[
            RobotSetup(name="선가드", movement_id="walking", attack_id="missile"),
        ])
        assert run_scenario(config) == [
            "My name is 선가드",
            "전 걸을 수 있어요. 날 수 없어요.",
            "미사일을 갖고있어요.",
        ]
