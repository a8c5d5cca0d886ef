"""Tests for engine settings."""

from pathlib import Path

import pytest

from nestview import ConfigError, EngineSettings, configure, get_settings


def test_defaults():
    settings = EngineSettings()
    assert settings.reattach_on_every_render is False
    assert settings.attach_on_add is False
    assert settings.strict_parenting is False
    assert settings.warn_on_missing_target is True
    assert settings.template_dir is None


def test_load_missing_file_returns_defaults(tmp_path):
    assert EngineSettings.load(tmp_path / "nestview.yaml") == EngineSettings()


def test_load_yaml(tmp_path):
    path = tmp_path / "nestview.yaml"
    path.write_text("reattach_on_every_render: true\ntemplate_dir: templates\n")
    settings = EngineSettings.load(path)
    assert settings.reattach_on_every_render is True
    assert settings.template_dir == Path("templates")


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "nestview.yaml"
    path.write_text("")
    assert EngineSettings.load(path) == EngineSettings()


def test_load_invalid_raises_config_error(tmp_path):
    path = tmp_path / "nestview.yaml"
    path.write_text("reattach_everything: yes\n")
    with pytest.raises(ConfigError, match="Invalid settings") as exc:
        EngineSettings.load(path)
    assert exc.value.path == path


def test_load_malformed_yaml_raises_config_error(tmp_path):
    path = tmp_path / "nestview.yaml"
    path.write_text("strict_parenting: [\n")
    with pytest.raises(ConfigError, match="Invalid YAML") as exc:
        EngineSettings.load(path)
    assert exc.value.path == path


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("NESTVIEW_REATTACH_ON_EVERY_RENDER", "1")
    monkeypatch.setenv("NESTVIEW_STRICT_PARENTING", "no")
    monkeypatch.setenv("NESTVIEW_TEMPLATE_DIR", str(tmp_path))

    settings = EngineSettings.from_env(EngineSettings(strict_parenting=True))

    assert settings.reattach_on_every_render is True
    assert settings.strict_parenting is False
    assert settings.template_dir == tmp_path


def test_get_settings_reads_env_once(monkeypatch):
    monkeypatch.setenv("NESTVIEW_ATTACH_ON_ADD", "true")
    first = get_settings()
    monkeypatch.setenv("NESTVIEW_ATTACH_ON_ADD", "false")
    assert get_settings() is first
    assert first.attach_on_add is True


def test_configure_overrides():
    configured = configure(attach_on_add=True)
    assert get_settings() is configured
    assert configured.attach_on_add is True


def test_configure_with_settings():
    settings = EngineSettings(strict_parenting=True)
    assert configure(settings) is settings
    assert get_settings().strict_parenting is True
