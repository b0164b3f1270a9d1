from io import StringIO
from pathlib import Path

import pytest

from staticroot import Resolver
from staticroot.utils import logging
from staticroot.utils.logging import LogLevel


@pytest.fixture
def stream(monkeypatch: pytest.MonkeyPatch) -> StringIO:
	res = StringIO()
	monkeypatch.setattr(logging, "ERR", res)
	monkeypatch.setattr(logging, "COLOR", False)
	monkeypatch.setattr(logging.Term, "BOLD", "")
	monkeypatch.setattr(logging.Term, "RESET", "")
	monkeypatch.setattr(logging, "LOG_LEVEL", LogLevel.Info)
	return res


def test_levels(stream: StringIO):
	assert logging.logged(LogLevel.Error)
	assert logging.logged(LogLevel.Info)
	assert not logging.logged(LogLevel.Debug)
	logging.debug("hidden")
	logging.info("shown", size=3)
	assert stream.getvalue() == "[staticroot] shown size=3\n"


def test_set_level(stream: StringIO):
	assert logging.setLevel("debug") is LogLevel.Debug
	logging.debug("now shown")
	assert "now shown" in stream.getvalue()
	logging.setLevel(LogLevel.Error)
	logging.warning("hidden")
	assert "hidden" not in stream.getvalue()


def test_entry(stream: StringIO):
	entry = logging.error("Could not read", "EIO", origin="test", path="/a b")
	assert entry.level is LogLevel.Error
	assert entry.value == "EIO"
	assert entry.context == {"path": "/a b"}
	assert stream.getvalue() == "[test] [EIO] Could not read path='/a b'\n"


def test_exception(stream: StringIO):
	try:
		raise RuntimeError("boom")
	except RuntimeError as e:
		assert logging.exception(e, "While testing") is e
	assert stream.getvalue().startswith("!!! EXCP While testing: [RuntimeError] boom\n")


def test_rejections_are_logged_at_debug(stream: StringIO, tmp_path: Path):
	resolver = Resolver("/static", tmp_path)
	assert resolver.resolve("/static/missing.txt") is None
	assert stream.getvalue() == ""
	logging.setLevel(LogLevel.Debug)
	assert resolver.resolve("/static/missing.txt") is None
	assert resolver.resolve("/other") is None
	lines = stream.getvalue().splitlines()
	assert lines == [
		"[staticroot] Rejected request path path=/static/missing.txt reason=unresolvable",
		"[staticroot] Rejected request path path=/other reason='outside mount'",
	]


# EOF
