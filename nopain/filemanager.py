"""Creating, writing, moving, copying and removing files and folders."""

from __future__ import annotations

import logging
import os
import shutil

FOLDER_CREATED = "\nFolder '%s' Created"
FILE_CREATED = "\nFile '%s' Created"
FOLDER_REMOVED = "\nFolder '%s' Removed"
FILE_REMOVED = "\nFile '%s' Removed"

logger = logging.getLogger(__name__)


def create_single_folder(folder_name: str) -> bool:
    """Create one folder; its parent must exist. Raises OSError on failure."""
    os.mkdir(folder_name, 0o777)
    logger.info(FOLDER_CREATED, folder_name)
    return True


def create_many_folders(folder_name: str) -> bool:
    """Create a folder and any missing parents. Raises OSError on failure."""
    os.makedirs(folder_name, 0o777, exist_ok=True)
    logger.info(FOLDER_CREATED, folder_name)
    return True


def create_single_file(dir_name: str, file_name: str) -> bool:
    """Create, or truncate, ``file_name`` in ``dir_name``. Raises OSError on failure."""
    path = dir_name + "/" + file_name
    with open(path, "wb"):
        pass
    logger.info(FILE_CREATED, path)
    return True


def create_many_files(dir_name: str, *args: str) -> bool:
    """Create every named file in ``dir_name``. Raises OSError on the first failure."""
    return all(create_single_file(dir_name, name) for name in args)


def move_file(file_name: str, origin: str, destination: str) -> bool:
    """Move ``file_name`` from ``origin`` to ``destination``. Raises OSError on failure."""
    os.rename(origin + "/" + file_name, destination + "/" + file_name)
    return True


def write_file(folder_name: str, file_name: str, content: str) -> bool:
    """Append ``content`` to an existing file. Raises OSError on failure."""
    descriptor = os.open(folder_name + "/" + file_name, os.O_WRONLY | os.O_APPEND)
    with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
        handle.write(content)
    return True


def remove_file(folder_name: str, file_name: str) -> bool:
    """Remove one file. Raises OSError on failure."""
    path = folder_name + "/" + file_name
    os.remove(path)
    logger.info(FILE_REMOVED, path)
    return True


def remove_folder(folder_name: str) -> bool:
    """Remove a path and everything below it; a missing path is not an error."""
    if os.path.isdir(folder_name) and not os.path.islink(folder_name):
        shutil.rmtree(folder_name)
    elif os.path.lexists(folder_name):
        os.remove(folder_name)
    logger.info(FOLDER_REMOVED, folder_name)
    return True


def copy_folder(src: str, dest: str) -> None:
    """Copy a folder and its contents into ``dest``, creating it as needed."""
    os.makedirs(dest, exist_ok=True)
    with os.scandir(src) as scanned:
        entries = sorted(scanned, key=lambda entry: entry.name)
    for entry in entries:
        target = os.path.join(dest, entry.name)
        if entry.is_dir(follow_symlinks=False):
            copy_folder(entry.path, target)
        else:
            copy_file(entry.path, target)


def copy_file(src: str, dest: str) -> None:
    """Copy the contents of ``src`` to ``dest``, replacing ``dest``."""
    shutil.copyfile(src, dest)