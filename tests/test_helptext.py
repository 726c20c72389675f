import io
import os
import platform
import subprocess
import urllib.error
import urllib.request
from datetime import datetime, timezone

import pytest

from catman import helptext


class _Response(io.BytesIO):
    status = 200


@pytest.fixture
def offline(monkeypatch):
    def fail(*args, **kwargs):
        raise urllib.error.URLError("offline")

    monkeypatch.setattr(urllib.request, "urlopen", fail)


def test_is_root_true_for_uid_zero(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 0, raising=False)
    assert helptext.is_root() is True


def test_is_root_false_for_other_uid(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 1000, raising=False)
    assert helptext.is_root() is False


def test_kernel_version_strips_output(monkeypatch):
    def fake_run(cmd, **kwargs):
        assert cmd == ["uname", "-r"]
        return subprocess.CompletedProcess(cmd, 0, stdout="6.1.0-test\n", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert helptext.kernel_version() == "6.1.0-test"


def test_kernel_version_unknown_on_failure(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError("uname")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert helptext.kernel_version() == "unknown"


def test_kernel_version_unknown_on_nonzero_exit(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert helptext.kernel_version() == "unknown"


def test_get_version_falls_back_when_offline(offline):
    assert helptext.get_version() == "0.0.1 beta"


def test_get_version_uses_remote(monkeypatch):
    monkeypatch.setattr(
        urllib.request, "urlopen", lambda url, *a, **k: _Response(b"  2.5\n")
    )
    assert helptext.get_version("http://localhost/VERSION") == "2.5"


def test_get_version_falls_back_on_empty_body(monkeypatch):
    monkeypatch.setattr(
        urllib.request, "urlopen", lambda url, *a, **k: _Response(b"   \n")
    )
    assert helptext.get_version("http://localhost/VERSION") == helptext.LOCAL_VERSION


def test_usage_text_header_line():
    moment = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    text = helptext.usage_text("1.2", "6.1.0", moment)
    first = text.splitlines()[0]
    assert first == "catman version 1.2 (Thu, 02 Jan 2025 03:04:05 +0000)"


def test_usage_text_lists_commands():
    moment = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    lines = helptext.usage_text("1.2", "6.1.0", moment).splitlines()
    assert lines[1] == "kernel version: 6.1.0"
    assert lines[2] == f"python version: {platform.python_version()}"
    assert lines[3] == ""
    assert lines[4] == "Usage:"
    assert "  -i, --install NAME    Install package" in lines
    assert lines[-1] == "  -d, --delete NAME     Delete package"


def test_print_help_outputs_usage(offline, monkeypatch, capsys):
    monkeypatch.setattr(
        subprocess,
        "run",
        lambda cmd, **k: subprocess.CompletedProcess(cmd, 0, stdout="5.0\n", stderr=""),
    )
    helptext.print_help()
    out = capsys.readouterr().out
    assert out.startswith("catman version 0.0.1 beta (")
    assert "kernel version: 5.0\n" in out
    assert "  -l, --list            List installed packages\n" in out