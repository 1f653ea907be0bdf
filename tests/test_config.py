"""Config tests"""

import pytest
import yaml

from src.todo.config import CONFIG_ENV_VAR, Config


def test_missing_file_gives_defaults(tmp_path):
    config = Config.from_yaml(tmp_path / "missing.yaml")
    assert config.log_level == "INFO"
    assert config.output_format == "text"
    assert config.default_priority == "P1"
    assert config.seed is None
    assert config.seed_items() is None


def test_load_values(tmp_path):
    path = tmp_path / "app_config.yaml"
    path.write_text(
        """
log:
  level: DEBUG
  file: null
display:
  format: json
defaults:
  priority: P2
seed:
  - name: first
    completed: true
  - name: second
    priority: P3
""",
        encoding="utf-8",
    )
    config = Config.from_yaml(path)
    assert config.log_level == "DEBUG"
    assert config.log_file is None
    assert config.output_format == "json"
    assert config.default_priority == "P2"

    items = config.seed_items()
    assert [(i.name, i.completed, i.priority) for i in items] == [
        ("first", True, "P1"),
        ("second", False, "P3"),
    ]


def test_empty_seed_means_empty_store(tmp_path):
    path = tmp_path / "app_config.yaml"
    path.write_text("seed: []\n", encoding="utf-8")
    assert Config.from_yaml(path).seed_items() == []


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "app_config.yaml"
    path.write_text("", encoding="utf-8")
    assert Config.from_yaml(path) == Config()


def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("defaults:\n  priority: P7\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert Config.from_yaml().default_priority == "P7"


def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("log: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        Config.from_yaml(path)


def test_bundled_config_loads(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = Config.from_yaml()
    assert config.default_priority == "P1"
    assert config.seed is None
