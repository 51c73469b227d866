"""Downloading files over HTTP into the working directory."""

from __future__ import annotations

import http.client
import os
import shutil
import urllib.error
import urllib.request
from dataclasses import dataclass, field

_MEGABYTE = 1 << 20


class DownloadError(Exception):
    """A download could not be completed."""


@dataclass(frozen=True)
class DownloadInfo:
    """Where a file came from and where it was saved; size in whole megabytes."""

    url: str
    file_name: str
    directory: str
    size: int


def _base_name(url: str) -> str:
    stripped = url.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


@dataclass
class Downloader:
    """Fetches files by URL and saves them under their last path element."""

    errors: list[str] = field(default_factory=list)

    def download_file(self, url: str) -> DownloadInfo:
        """Download ``url`` into the working directory.

        Raises DownloadError for a URL that is not http or https, a failed
        request, a status other than 200, or a file that cannot be written.
        """
        if not url.startswith(("http://", "https://")):
            raise DownloadError(f"invalid URL: {url}")
        file_name = _base_name(url)
        directory = "."
        full_path = os.path.join(directory, file_name)
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as exc:
            raise DownloadError(f"error creating directory: {exc}") from exc

        try:
            response = urllib.request.urlopen(url)
        except urllib.error.HTTPError as exc:
            raise DownloadError(f"error downloading file: {exc.code} {exc.reason}") from exc
        except (OSError, http.client.HTTPException) as exc:
            raise DownloadError(f"error downloading file: {exc}") from exc

        with response:
            if response.status != 200:
                raise DownloadError(
                    f"error downloading file: {response.status} {response.reason}"
                )
            try:
                out = open(full_path, "wb")
            except OSError as exc:
                raise DownloadError(f"error creating file: {exc}") from exc
            with out:
                try:
                    shutil.copyfileobj(response, out)
                except (OSError, http.client.HTTPException) as exc:
                    raise DownloadError(f"error writing file: {exc}") from exc
                downloaded = out.tell()

        return DownloadInfo(
            url=url,
            file_name=file_name,
            directory=directory,
            size=int(downloaded / _MEGABYTE),
        )