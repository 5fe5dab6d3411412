"""Tests for configuration loading."""

from autofix.config import Config


class TestDefaults:
    def test_defaults(self):
        config = Config()
        assert config.FIX_MAX_PASSES == 10
        assert config.FIX_METRICS is False
        assert config.METRICS_DIR == ".autofix/metrics"
        assert config.LOG_DIR == ".autofix/logs"
        assert config.LOG_LEVEL == "INFO"


class TestYaml:
    def test_load_explicit_file(self, tmp_path):
        path = tmp_path / "autofix.yaml"
        path.write_text("max_passes: 3\nmetrics: true\nlog_level: debug\n")

        config = Config.load(str(path))

        assert config.FIX_MAX_PASSES == 3
        assert config.FIX_METRICS is True
        assert config.LOG_LEVEL == "DEBUG"

    def test_finds_file_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".autofix.yml").write_text("max_passes: 4\n")
        monkeypatch.chdir(tmp_path)

        assert Config.load().FIX_MAX_PASSES == 4

    def test_missing_explicit_file_uses_defaults(self, tmp_path):
        config = Config.load(str(tmp_path / "nope.yaml"))
        assert config.FIX_MAX_PASSES == 10

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("max_passes: [1, 2\n")

        assert Config.load(str(path)).FIX_MAX_PASSES == 10

    def test_non_mapping_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        assert Config.load(str(path)).FIX_MAX_PASSES == 10

    def test_bad_value_uses_default(self):
        assert Config({"max_passes": "many"}).FIX_MAX_PASSES == 10

    def test_pass_limit_below_one_uses_default(self):
        assert Config({"max_passes": 0}).FIX_MAX_PASSES == 10


class TestEnvironment:
    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("AUTOFIX_MAX_PASSES", "7")
        monkeypatch.setenv("AUTOFIX_METRICS", "true")

        config = Config({"max_passes": 3, "metrics": False})

        assert config.FIX_MAX_PASSES == 7
        assert config.FIX_METRICS is True

    def test_bad_env_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("AUTOFIX_MAX_PASSES", "lots")
        assert Config().FIX_MAX_PASSES == 10

    def test_env_bool_false(self, monkeypatch):
        monkeypatch.setenv("AUTOFIX_METRICS", "no")
        assert Config({"metrics": True}).FIX_METRICS is False
