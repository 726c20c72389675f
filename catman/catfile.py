"""Reading of ``.cat`` package metadata files (a simple INI-like format)."""

from __future__ import annotations

import os
from collections.abc import Iterator


class KeyNotFoundError(LookupError):
    """Raised when a requested key is absent from a metadata file."""


def _scan_lines(path: str | os.PathLike) -> Iterator[str]:
    """Yield the lines of a file without their line terminators."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        text = handle.read()
    if not text:
        return
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    for piece in pieces:
        yield piece.removesuffix("\r")


def _is_header(line: str) -> bool:
    return line.startswith("[") and line.endswith("]")


def _split_pair(line: str) -> tuple[str, str]:
    key, _, value = line.partition("=")
    return key.strip(), value.strip()


def get(path: str | os.PathLike, key: str) -> str:
    """Return the value of ``key`` (optionally ``Section.key``), with quotes removed."""
    section = ""
    if "." in key:
        section, key = key.split(".", 1)

    in_section = section == ""
    for raw in _scan_lines(path):
        line = raw.strip()
        if _is_header(line):
            in_section = line.strip("[]") == section
            continue
        if in_section and "=" in line:
            k, v = _split_pair(line)
            if k == key:
                return v.strip('"')
    raise KeyNotFoundError(f"key {key} not found")


def is_valid(path: str | os.PathLike) -> bool:
    """Tell whether the file can be read and defines both ``name`` and ``version``."""
    found_name = found_version = False
    try:
        for line in _scan_lines(path):
            if "=" in line:
                k, _ = _split_pair(line)
                if k == "name":
                    found_name = True
                if k == "version":
                    found_version = True
            if found_name and found_version:
                return True
    except OSError:
        return False
    return False


def keys(path: str | os.PathLike) -> list[str]:
    """Return every key defined in the file, in order, across all sections."""
    return [_split_pair(line)[0] for line in _scan_lines(path) if "=" in line]


def values(path: str | os.PathLike) -> list[str]:
    """Return every value defined in the file, in order, across all sections."""
    return [_split_pair(line)[1] for line in _scan_lines(path) if "=" in line]


def exists(path: str | os.PathLike) -> bool:
    """Tell whether a path exists; errors other than absence count as existing."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def read_all(path: str | os.PathLike) -> dict[str, str]:
    """Return all key/value pairs; later definitions override earlier ones."""
    return dict(_split_pair(line) for line in _scan_lines(path) if "=" in line)


def get_section(path: str | os.PathLike, section: str) -> list[str]:
    """Return the non-empty, non-comment lines of a section; empty if unreadable."""
    header = f"[{section}]"
    lines: list[str] = []
    in_section = False
    try:
        for raw in _scan_lines(path):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if _is_header(line):
                in_section = line == header
                continue
            if in_section:
                lines.append(line)
    except OSError:
        return []
    return lines