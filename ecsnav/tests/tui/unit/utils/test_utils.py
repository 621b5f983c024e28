"""Unit tests for logging setup, clipboard access and SSH key resolution."""

from __future__ import annotations

import logging
from pathlib import Path

import pyperclip
import pytest
from textual.logging import TextualHandler

from ecsnav.utils.clipboard import copy_to_clipboard
from ecsnav.utils.logging_setup import configure_logging, parse_log_level
from ecsnav.utils.ssh_keys import resolve_key_path


class TestParseLogLevel:
    """Test level name mapping."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            (None, logging.ERROR),
            ("", logging.ERROR),
            ("info", logging.INFO),
            ("WARN", logging.WARNING),
            ("warning", logging.WARNING),
            ("debug", logging.DEBUG),
            ("verbose", logging.DEBUG),
        ],
    )
    def test_levels(self, name: str | None, expected: int) -> None:
        assert parse_log_level(name) == expected


class TestConfigureLogging:
    """Test handler installation on the package logger."""

    @pytest.fixture(autouse=True)
    def _reset_logger(self):
        logger = logging.getLogger("ecsnav")
        saved = (list(logger.handlers), logger.level, logger.propagate)
        yield
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])
        logger.propagate = saved[2]

    def test_textual_handler_installed(self) -> None:
        level = configure_logging("info")
        logger = logging.getLogger("ecsnav")
        assert level == logging.INFO
        assert logger.level == logging.INFO
        assert any(isinstance(h, TextualHandler) for h in logger.handlers)
        assert logger.propagate is False

    def test_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "ecsnav.log"
        configure_logging("debug", str(log_file))
        logging.getLogger("ecsnav.test").debug("hello")
        for handler in logging.getLogger("ecsnav").handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging("info")
        configure_logging("info")
        assert len(logging.getLogger("ecsnav").handlers) == 1


class TestClipboard:
    """Test best-effort clipboard copies."""

    def test_copy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        copied: list[str] = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        assert copy_to_clipboard("10.0.0.1") is True
        assert copied == ["10.0.0.1"]

    def test_unavailable_clipboard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(text: str) -> None:
            raise pyperclip.PyperclipException("no clipboard")

        monkeypatch.setattr(pyperclip, "copy", fail)
        assert copy_to_clipboard("10.0.0.1") is False


class TestResolveKeyPath:
    """Test SSH key option resolution."""

    def test_empty(self) -> None:
        assert resolve_key_path("") == ""

    def test_existing_path(self, tmp_path: Path) -> None:
        key = tmp_path / "id_ed25519"
        key.write_text("key", encoding="utf-8")
        assert resolve_key_path(str(key)) == str(key)

    def test_name_in_key_dir(self, tmp_path: Path) -> None:
        assert resolve_key_path("deploy.pem", str(tmp_path)) == str(tmp_path / "deploy.pem")
