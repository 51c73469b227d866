"""Compressing files and folders into ZIP archives."""

from __future__ import annotations

import os
import zipfile
from collections.abc import Iterator


def _walk(path: str) -> Iterator[str]:
    """Yield ``path`` and, for a directory, everything below it in name order."""
    yield path
    if os.path.isdir(path) and not os.path.islink(path):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def zip_file_or_folder(source: str, target: str) -> None:
    """Write ``source``, a file or a folder, into the ZIP archive ``target``.

    Entries are deflated and named relative to the folder holding ``source``;
    folders get entries of their own ending in ``/``. Raises OSError on failure.
    """
    base = os.path.dirname(source) or "."
    with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        os.lstat(source)
        for path in _walk(source):
            name = os.path.relpath(path, base).replace(os.sep, "/")
            archive.write(path, name)