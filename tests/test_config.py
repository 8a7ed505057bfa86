from __future__ import annotations

import pytest

from m64edit import config, log


@pytest.fixture
def settings_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "settings_file", config.settings_file)
    monkeypatch.setattr(config, "echo_log", False)
    yield tmp_path
    log.unsubscribe(log.print_message)


def test_version_str() -> None:
    assert config.version_str(".") == ".".join(map(str, config.version))


def test_init_reads_strict_ascii(settings_dir, log_messages) -> None:
    (settings_dir / "settings.json").write_text('{"strict_ascii": true}')

    config.init(str(settings_dir))

    assert config.strict_ascii is True
    assert config.use_strict_ascii(None) is True
    assert config.use_strict_ascii(False) is False
    assert log_messages[-1].level == log.LogLevel.INFO


def test_init_without_settings_file(settings_dir) -> None:
    config.init(str(settings_dir))
    assert config.strict_ascii is False
    assert config.echo_log is False
    assert config.read_settings() == {}


def test_init_echo_prints_info_and_above(settings_dir, capsys) -> None:
    config.init(str(settings_dir), echo=True)
    log.debug("hidden")
    log.info("shown")

    out = capsys.readouterr().out
    assert "[INFO] shown" in out
    assert "hidden" not in out


def test_init_echo_from_settings(settings_dir, capsys) -> None:
    (settings_dir / "settings.json").write_text('{"echo_log": true}')
    config.init(str(settings_dir))
    config.init(str(settings_dir))
    log.warn("once")

    assert capsys.readouterr().out.count("[WARN] once") == 1


def test_init_echo_off_by_default(settings_dir, capsys) -> None:
    config.init(str(settings_dir))
    log.error("quiet")
    assert capsys.readouterr().out == ""
