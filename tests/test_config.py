import logging

import pytest

from slang import config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("SLANG_LOG_LEVEL", "SLANG_MAX_STEPS", "SLANG_PRELUDE_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, logging.WARNING),
        ("", logging.WARNING),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" error ", logging.ERROR),
        ("chatty", logging.WARNING),
    ]
)
def test_log_level(monkeypatch, raw, expected):
    if raw is not None:
        monkeypatch.setenv("SLANG_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        ("", None),
        ("10", 10),
        (" 250 ", 250),
        ("0", None),
        ("-5", None),
    ]
)
def test_max_steps(monkeypatch, raw, expected):
    if raw is not None:
        monkeypatch.setenv("SLANG_MAX_STEPS", raw)
    assert config.get_max_steps() == expected


def test_max_steps_rejects_garbage(monkeypatch):
    monkeypatch.setenv("SLANG_MAX_STEPS", "lots")
    with pytest.raises(ValueError, match="SLANG_MAX_STEPS"):
        config.get_max_steps()


def test_default_prelude_is_packaged():
    path = config.get_prelude_path()
    assert path.name == "core.slang"
    assert path.parent.name == "prelude"
    assert path.is_file()


def test_prelude_path_directory(monkeypatch, tmp_path):
    monkeypatch.setenv("SLANG_PRELUDE_PATH", str(tmp_path))
    assert config.get_prelude_path() == tmp_path / "core.slang"


def test_prelude_path_file(monkeypatch, tmp_path):
    target = tmp_path / "mine.slang"
    monkeypatch.setenv("SLANG_PRELUDE_PATH", str(target))
    assert config.get_prelude_path() == target
