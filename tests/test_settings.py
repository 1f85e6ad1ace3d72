"""
Tests for Settings
==================
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from markovtext import settings
from markovtext.errors import InvalidConfiguration


def test_defaults_loaded():
    assert settings.get_setting("markov.context_length") == 4
    assert settings.get_setting("markov.generate_length") == 500
    assert settings.get_setting("corpus.default_path") == "./corpus.txt"


def test_missing_setting_returns_default():
    assert settings.get_setting("markov.nope", 7) == 7
    assert settings.get_setting("markov.context_length.deeper") is None


def test_require_setting(monkeypatch):
    monkeypatch.setattr(settings, "load_app_config", lambda: {"markov": {}})
    with pytest.raises(InvalidConfiguration, match="markov.context_length must be set"):
        settings.require_setting("markov.context_length")


def test_resolve_path_relative(tmp_path):
    assert settings.resolve_path("corpus.txt", base=tmp_path) == (tmp_path / "corpus.txt").resolve()


def test_resolve_path_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert settings.resolve_path("./corpus.txt") == (tmp_path / "corpus.txt").resolve()


def test_resolve_path_absolute(tmp_path):
    target = tmp_path / "x.txt"
    assert settings.resolve_path(str(target)) == target


def test_resolve_path_requires_value():
    with pytest.raises(ValueError):
        settings.resolve_path(None)


def test_lookup_nested():
    data = {"a": {"b": {"c": 3}}, "s": "text"}
    assert settings.lookup(data, "a.b.c") == 3
    assert settings.lookup(data, "a.x", "dflt") == "dflt"
    assert settings.lookup(data, "s.t") is None


def test_load_custom_config(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("markov:\n  context_length: 6\n", encoding="utf-8")
    assert settings.load_app_config(path) == {"markov": {"context_length": 6}}


def test_empty_config_is_empty_mapping(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert settings.load_app_config(path) == {}


def test_non_mapping_config_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        settings.load_app_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        settings.load_app_config(tmp_path / "absent.yaml")
