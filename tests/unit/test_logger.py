"""Unit tests for build session logging."""

import pytest
from loguru import logger

from polycv import __version__
from polycv.contexts.rendering.logger import _log_debug, _log_info, setup_rendering_logger


@pytest.mark.unit
def test_log_file_gets_session_header(tmp_path):
    log_file = setup_rendering_logger(tmp_path / "build_1", browser="/usr/bin/chromium")
    _log_info("hello")

    logger.remove()
    text = log_file.read_text(encoding="utf-8")

    assert log_file == tmp_path / "build_1" / "render.log"
    assert f"polycv: {__version__}" in text
    assert "Browser: /usr/bin/chromium" in text
    assert "[render] hello" in text


@pytest.mark.unit
def test_console_hides_debug_unless_verbose(tmp_path, capsys):
    setup_rendering_logger(tmp_path / "quiet")
    _log_debug("hidden detail")
    _log_info("visible line")
    logger.remove()

    out = capsys.readouterr().out
    assert "visible line" in out
    assert "hidden detail" not in out
    assert "Working directory" not in out

    setup_rendering_logger(tmp_path / "verbose", verbose=True)
    _log_debug("shown detail")
    logger.remove()

    assert "shown detail" in capsys.readouterr().out
