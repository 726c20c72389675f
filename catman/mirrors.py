"""Locations of the package repository and its files."""

RAW_BASE = "https://raw.example.com/catman-files/main/packages"
PACKAGE_LIST_URL = f"{RAW_BASE}/package_list"
VERSION_URL = "https://raw.example.com/catman-files/main/VERSION"

METADATA_URL_TEMPLATE = RAW_BASE + "/{0}/{0}.cat"
BUILD_SCRIPT_URL_TEMPLATE = RAW_BASE + "/{0}/{0}.sh"


def metadata_url(package_name: str) -> str:
    """Return the URL of a package's ``.cat`` metadata file."""
    return METADATA_URL_TEMPLATE.format(package_name)


def build_script_url(package_name: str) -> str:
    """Return the URL of a package's ``.sh`` build script."""
    return BUILD_SCRIPT_URL_TEMPLATE.format(package_name)