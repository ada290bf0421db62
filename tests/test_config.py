import logging

from scaffold._config import ScaffoldConfig, config
from scaffold._config.config import parse_inflections


def test_config_is_a_singleton():
    assert ScaffoldConfig() is config


def test_defaults(monkeypatch, restore_config):
    for name in ("LOG_LEVEL", "LOG_TO_FILE", "LOG_FILE", "SCAFFOLD_EAGER_LOAD", "SCAFFOLD_INFLECTIONS"):
        monkeypatch.delenv(name, raising=False)

    config.reload()

    assert config.to_dict() == {
        "log_level": "INFO",
        "log_to_file": False,
        "log_file": None,
        "eager_load": False,
        "inflections": {},
    }
    assert config.validate() == []


def test_reload_reads_environment(monkeypatch, restore_config, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_TO_FILE", "true")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "scaffold.log"))
    monkeypatch.setenv("SCAFFOLD_EAGER_LOAD", "1")
    monkeypatch.setenv("SCAFFOLD_INFLECTIONS", "html=HTML,ssl=SSL")

    config.reload()

    assert config.log_level == "DEBUG"
    assert config.log_to_file is True
    assert config.log_file == tmp_path / "scaffold.log"
    assert config.eager_load is True
    assert config.inflections == {"html": "HTML", "ssl": "SSL"}


def test_validate_reports_issues(monkeypatch, restore_config):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    monkeypatch.setenv("LOG_TO_FILE", "true")
    monkeypatch.delenv("LOG_FILE", raising=False)

    config.reload()
    issues = config.validate()

    assert len(issues) == 2
    assert any("LOG_LEVEL" in issue for issue in issues)
    assert any("LOG_FILE" in issue for issue in issues)


def test_parse_inflections_skips_malformed_items(caplog):
    with caplog.at_level(logging.WARNING):
        result = parse_inflections(" html = HTML , , nonsense, ssl=not valid, api=API")

    assert result == {"html": "HTML", "api": "API"}
    assert "nonsense" in caplog.text
    assert "not valid" in caplog.text
