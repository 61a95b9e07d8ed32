from runner.execution import RunnerConfig, StaticSettingsProvider


class TestRunnerConfig:
    def test_defaults(self):
        config = RunnerConfig()
        assert config.interpreter_path == "python"
        assert config.show_source_in_preview is True
        assert config.show_exit_status is False

    def test_empty_mapping_yields_defaults(self):
        assert RunnerConfig.from_mapping({}) == RunnerConfig()
        assert RunnerConfig.from_mapping(None) == RunnerConfig()

    def test_partial_mapping_merges_over_defaults(self):
        config = RunnerConfig.from_mapping({"interpreter_path": "python3"})
        assert config == RunnerConfig(interpreter_path="python3")

    def test_unknown_keys_are_ignored(self):
        config = RunnerConfig.from_mapping({"show_exit_status": True, "theme": "dark"})
        assert config == RunnerConfig(show_exit_status=True)

    def test_mapping_round_trip(self):
        config = RunnerConfig(
            interpreter_path="/usr/bin/python3",
            show_source_in_preview=False,
            show_exit_status=True,
        )
        assert config.to_mapping() == {
            "interpreter_path": "/usr/bin/python3",
            "show_source_in_preview": False,
            "show_exit_status": True,
        }
        assert RunnerConfig.from_mapping(config.to_mapping()) == config


def test_static_provider_defaults_when_no_config_given():
    assert StaticSettingsProvider().get_config() == RunnerConfig()
