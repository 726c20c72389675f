import json
import time
from pathlib import Path

import pytest

from catman.registry import InstalledPackage, PackageRegistry, default_db_path


@pytest.fixture
def registry(tmp_path):
    return PackageRegistry(tmp_path / "db" / "installed.json")


def test_missing_database_is_empty(registry):
    assert registry.load() == []
    assert registry.packages() == []


def test_default_db_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_db_path() == tmp_path / ".catman" / "installed.json"
    assert PackageRegistry().path == tmp_path / ".catman" / "installed.json"


def test_add_creates_directory_and_records(registry):
    assert registry.add("vim", "9.0", installed_at=100) is True
    assert registry.path.exists()
    assert registry.packages() == [InstalledPackage("vim", "9.0", 100)]


def test_add_defaults_to_current_time(registry):
    before = int(time.time())
    registry.add("vim", "9.0")
    after = int(time.time())
    (pkg,) = registry.packages()
    assert before <= pkg.installed_at <= after


def test_add_duplicate_name_is_ignored(registry):
    registry.add("vim", "9.0", installed_at=1)
    assert registry.add("vim", "9.1", installed_at=2) is False
    assert registry.packages() == [InstalledPackage("vim", "9.0", 1)]


def test_remove_filters_by_name(registry):
    registry.add("a", "1", installed_at=1)
    registry.add("b", "2", installed_at=2)
    registry.remove("a")
    assert [p.name for p in registry.packages()] == ["b"]


def test_remove_unknown_keeps_others(registry):
    registry.add("a", "1", installed_at=1)
    registry.remove("zzz")
    assert registry.packages() == [InstalledPackage("a", "1", 1)]


def test_save_format(registry):
    registry.save([InstalledPackage("a", "1", 5)])
    assert registry.path.read_text(encoding="utf-8") == (
        '[\n  {\n    "name": "a",\n    "version": "1",\n    "installed_at": 5\n  }\n]'
    )


def test_save_empty_writes_array(registry):
    registry.save([])
    assert json.loads(registry.path.read_text(encoding="utf-8")) == []


def test_load_tolerates_missing_fields_and_null(tmp_path):
    path = Path(tmp_path) / "installed.json"
    path.write_text('[{"name": "x"}]', encoding="utf-8")
    assert PackageRegistry(path).load() == [InstalledPackage("x", "", 0)]
    path.write_text("null", encoding="utf-8")
    assert PackageRegistry(path).load() == []


def test_load_rejects_bad_json(tmp_path):
    path = tmp_path / "installed.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        PackageRegistry(path).load()


def test_load_rejects_non_array(tmp_path):
    path = tmp_path / "installed.json"
    path.write_text('{"name": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        PackageRegistry(path).load()


def test_add_propagates_corrupt_database(tmp_path):
    path = tmp_path / "installed.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        PackageRegistry(path).add("a", "1")