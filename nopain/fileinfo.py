"""Inspection of files and directories."""

from __future__ import annotations

import os
import stat
from datetime import datetime

from nopain.collection_utils import contains_string

_IMAGE_EXTENSIONS = (".png", ".gif", ".jpg", ".jiff")
_DOCUMENT_EXTENSIONS = (".txt", ".pdf", ".docx", ".ppt", ".pptx")
_AUDIO_EXTENSIONS = (".mp3", ".aac", ".wav", ".flac")
_VIDEO_EXTENSIONS = (".mp4", ".mkv", ".avi", ".flv")

_RULE = "-" * 125


def _format_mtime(nanoseconds: int) -> str:
    """Render a modification time as ``YYYY-MM-DD HH:MM:SS.fff +hhmm ZONE``."""
    seconds, fraction = divmod(nanoseconds, 10**9)
    moment = datetime.fromtimestamp(seconds).astimezone()
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if fraction:
        text += "." + f"{fraction:09d}".rstrip("0")
    return f"{text} {moment.strftime('%z')} {moment.tzname() or ''}".rstrip()


def file_extension(path: str) -> str:
    """The extension of the last path element, dot included, or ``""``."""
    base = path.rsplit("/", 1)[-1]
    index = base.rfind(".")
    return base[index:] if index >= 0 else ""


def file_type(extension: str) -> str:
    """Classify an extension as Image, Document, Audio, Video or Other."""
    if contains_string(_IMAGE_EXTENSIONS, extension):
        return "Image"
    if contains_string(_DOCUMENT_EXTENSIONS, extension):
        return "Document"
    if contains_string(_AUDIO_EXTENSIONS, extension):
        return "Audio"
    if contains_string(_VIDEO_EXTENSIONS, extension):
        return "Video"
    return "Other"


def describe_file(file_name: str) -> str:
    """Return a description of a file: name, extension, size, type, time, mode.

    Raises OSError when the file cannot be examined.
    """
    info = os.stat(file_name)
    extension = file_extension(file_name)
    lines = [
        "",
        f"File Name: {os.path.basename(file_name)}",
        f"Extension: {extension}",
        f"Size: {info.st_size}  bytes",
        f"Type: {file_type(extension)}",
        f"Last Modified: {_format_mtime(info.st_mtime_ns)}",
        f"Permissions: {stat.filemode(info.st_mode)}",
    ]
    return "\n".join(lines) + "\n"


def list_files(directory: str) -> str:
    """Return a table of the entries of ``directory``, sorted by name.

    Raises OSError when the directory cannot be read.
    """
    names = sorted(os.listdir(directory))
    lines = [
        "",
        f"All Files in '{directory}':",
        _RULE,
        "NAME\t\t\t\tTYPE\t\t\tSIZE(Bytes)\t\t\tLAST MODIFIED",
        _RULE,
    ]
    for name in names:
        info = os.lstat(os.path.join(directory, name))
        kind = file_type(file_extension(name))
        lines.append(
            f"{name}\t\t\t{kind}\t\t\t{info.st_size}\t\t\t{_format_mtime(info.st_mtime_ns)}"
        )
    return "\n".join(lines) + "\n"


def is_dir(path: str) -> bool:
    """True when ``path`` is a directory; raises OSError when it cannot be examined."""
    return stat.S_ISDIR(os.stat(path).st_mode)


def dir_exists(path: str) -> bool:
    """True when a directory exists at ``path``."""
    return os.path.isdir(path)


def file_exists(folder: str, file_name: str) -> bool:
    """True when ``file_name`` exists inside ``folder``."""
    return os.path.exists(folder + "/" + file_name)


def current_folder() -> str:
    """The name of the working directory, or ``""`` when it cannot be found."""
    try:
        cwd = os.getcwd()
    except OSError:
        return ""
    stripped = cwd.rstrip(os.sep)
    return os.path.basename(stripped) if stripped else os.sep