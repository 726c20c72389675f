"""Record of installed packages, kept as a JSON file in the user's home."""

from __future__ import annotations

import json
import os
import time
from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass
class InstalledPackage:
    """A package recorded as installed."""

    name: str
    version: str
    installed_at: int


def default_db_path() -> Path:
    """Return ``$HOME/.catman/installed.json``."""
    return Path(os.environ.get("HOME", "")) / ".catman" / "installed.json"


class PackageRegistry:
    """Reads and updates the installed-packages database."""

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self.path = Path(path) if path is not None else default_db_path()

    def load(self) -> list[InstalledPackage]:
        """Return the recorded packages; a missing database means none."""
        try:
            data = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        entries = json.loads(data)
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise ValueError(f"{self.path}: expected a JSON array of packages")
        packages = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError(f"{self.path}: expected package objects")
            packages.append(
                InstalledPackage(
                    name=str(entry.get("name", "")),
                    version=str(entry.get("version", "")),
                    installed_at=int(entry.get("installed_at", 0)),
                )
            )
        return packages

    def save(self, packages: list[InstalledPackage]) -> None:
        """Write the given packages to the database, creating its directory."""
        data = json.dumps([asdict(p) for p in packages], indent=2, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(data, encoding="utf-8")

    def add(self, name: str, version: str, installed_at: int | None = None) -> bool:
        """Record a package unless one of that name exists; return whether it was added."""
        packages = self.load()
        if any(p.name == name for p in packages):
            return False
        when = int(time.time()) if installed_at is None else installed_at
        packages.append(InstalledPackage(name, version, when))
        self.save(packages)
        return True

    def remove(self, name: str) -> None:
        """Drop every record of the named package."""
        self.save([p for p in self.load() if p.name != name])

    def packages(self) -> list[InstalledPackage]:
        """Return the recorded packages."""
        return self.load()