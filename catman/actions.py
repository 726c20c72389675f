"""The operations behind each command: install, search, list and delete."""

from __future__ import annotations

import json
import subprocess
import tempfile
import time
import urllib.error
import urllib.request
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from catman import catfile
from catman.mirrors import PACKAGE_LIST_URL, build_script_url, metadata_url
from catman.net import FetchError, download_file
from catman.registry import InstalledPackage, PackageRegistry


def _elapsed(start: float) -> str:
    return f"{time.perf_counter() - start:.3f}s"


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return [piece.removesuffix("\r") for piece in pieces]


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except OSError:
        pass


def install_module(module_name: str) -> None:
    """Download a package's metadata, confirm, then run its build script."""
    start = time.perf_counter()
    temp_dir = Path(tempfile.gettempdir())
    metadata_file = temp_dir / f"{module_name}.cat"
    build_file = temp_dir / f"{module_name}.sh"

    meta_start = time.perf_counter()
    try:
        download_file(metadata_url(module_name), metadata_file)
    except (FetchError, OSError) as error:
        print("* Failed to download metadata:", error)
        return
    print(f"* Metadata downloaded in {_elapsed(meta_start)}")

    try:
        name = catfile.get(metadata_file, "Metadata.name")
    except (catfile.KeyNotFoundError, OSError) as error:
        print("* Error reading name from metadata:", error.args[0] if error.args else error)
        return
    try:
        version = catfile.get(metadata_file, "Metadata.version")
    except (catfile.KeyNotFoundError, OSError) as error:
        print("* Error reading version from metadata:", error.args[0] if error.args else error)
        return
    description = catfile.get_section(metadata_file, "Description")

    print(
        f"* You are about to install \033[1;36m{name}\033[0m "
        f"version \033[1;33m{version}\033[0m"
    )
    for line in description:
        print(f"* {line}")

    try:
        answer = input("\n* Do you wish to continue? (y/n) > ")
    except EOFError:
        answer = ""
    if answer.strip().lower() != "y":
        print("* Installation aborted.")
        return

    build_start = time.perf_counter()
    try:
        download_file(build_script_url(module_name), build_file)
    except (FetchError, OSError) as error:
        print("* Failed to download build script:", error)
        return
    print(f"* Build script downloaded in {_elapsed(build_start)}")

    print("* executing install script...")
    try:
        result = subprocess.run(["sh", str(build_file)])
    except OSError as error:
        print("* Error executing install script:", error)
        return
    if result.returncode != 0:
        print(f"* Error executing install script: exit status {result.returncode}")
        return

    _remove_quietly(metadata_file)
    _remove_quietly(build_file)

    try:
        PackageRegistry().add(name, version)
    except (OSError, ValueError) as error:
        print("* Failed to record installed package:", error)

    print(f"* Installed {name} into user binary directory.")
    print(f"* Total installation time: {_elapsed(start)}")


def match_packages(lines: Iterable[str], query: str) -> list[str]:
    """Return the lines containing ``query``, ignoring case."""
    needle = query.lower()
    return [line for line in lines if needle in line.lower()]


def parse_package_entry(entry: str) -> tuple[str, str]:
    """Split an ``id@version/name`` list entry into ``(name, version)``."""
    package_id, sep, name = entry.partition("/")
    if not sep:
        return entry, ""
    _, _, version = package_id.partition("@")
    return name, version


def _fetch_package_list(url: str) -> list[str]:
    with urllib.request.urlopen(url) as response:
        if response.status != 200:
            raise urllib.error.HTTPError(url, response.status, "", None, None)
        body = response.read()
    return _split_lines(body.decode("utf-8", errors="replace"))


def search(query: str) -> None:
    """Print the entries of the remote package list that match ``query``."""
    start = time.perf_counter()
    print(f"* Searching for packages: {json.dumps(query, ensure_ascii=False)}")

    try:
        lines = _fetch_package_list(PACKAGE_LIST_URL)
    except urllib.error.HTTPError as error:
        error.close()
        print("* Failed to fetch packages list: HTTP", error.code)
        return
    except (urllib.error.URLError, OSError, ValueError) as error:
        print("* Error fetching packages list:", error)
        return

    matches = match_packages(lines, query)
    if not matches:
        print("* No packages found matching", query)
    else:
        print(f"* Found {len(matches)} package(s):")
        for entry in matches:
            name, version = parse_package_entry(entry)
            if version:
                print(f"*  - {name} (version {version})")
            else:
                print(f"*  - {name}")

    print(f"* Search completed in {_elapsed(start)}")


def format_installed(package: InstalledPackage) -> str:
    """Render one installed package as a line of the list output."""
    when = datetime.fromtimestamp(package.installed_at).strftime("%Y-%m-%d %H:%M:%S")
    return f"- {package.name} (version: {package.version}) installed at {when}"


def list_packages() -> None:
    """Print every installed package with its install time."""
    try:
        packages = PackageRegistry().load()
    except (OSError, ValueError) as error:
        print("Error reading installed packages:", error)
        return

    print(f"Total installed packages: {len(packages)}\n")
    for package in packages:
        print(format_installed(package))


def delete_module(package_name: str) -> None:
    """Forget an installed package."""
    print("Deleting package:", package_name)
    try:
        PackageRegistry().remove(package_name)
    except (OSError, ValueError) as error:
        print("Error updating installed packages:", error)