"""Downloading files and fetching the remote version string over HTTP."""

from __future__ import annotations

import os
import shutil
import urllib.error
import urllib.request


class FetchError(Exception):
    """Raised when a remote resource cannot be retrieved."""


def download_file(url: str, path: str | os.PathLike) -> None:
    """Save the body of ``url`` to ``path``, whatever the response status."""
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as error:
        response = error
    except (urllib.error.URLError, OSError, ValueError) as error:
        raise FetchError(str(error)) from error

    with response, open(path, "wb") as out:
        try:
            shutil.copyfileobj(response, out)
        except OSError as error:
            raise FetchError(str(error)) from error


def fetch_version(url: str, timeout: float = 5.0) -> str:
    """Return the raw body at ``url``; a status other than 200 is an error."""
    try:
        response = urllib.request.urlopen(url, timeout=timeout)
    except urllib.error.HTTPError as error:
        error.close()
        raise FetchError(f"bad status code: {error.code}") from error
    except (urllib.error.URLError, OSError, ValueError) as error:
        raise FetchError(f"failed to fetch version: {error}") from error

    with response:
        if response.status != 200:
            raise FetchError(f"bad status code: {response.status}")
        try:
            body = response.read()
        except OSError as error:
            raise FetchError(f"failed to read version body: {error}") from error
    return body.decode("utf-8", errors="replace")