from nodeselect.config import load_config


def test_env_override(monkeypatch, tmp_path):
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text("output:\n  format: html\nselector:\n  flavor: xml\n", encoding="utf-8")
    monkeypatch.setenv("NODESELECT_OUTPUT__FORMAT", "json")
    monkeypatch.setenv("NODESELECT_OUTPUT__STRIP", "false")
    config = load_config(cfg_file)
    assert config.output.format == "json"
    assert config.output.strip is False
    assert config.selector.flavor == "xml"


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml", env_prefix="NODESELECT_TEST")
    assert config.selector.flavor == "html"
    assert config.output.format == "text"
    assert config.logging.level == "WARNING"


def test_yaml_values_expand_env(monkeypatch, tmp_path):
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text("logging:\n  level: $SELECT_LEVEL\n", encoding="utf-8")
    monkeypatch.setenv("SELECT_LEVEL", "DEBUG")
    assert load_config(cfg_file).logging.level == "DEBUG"
