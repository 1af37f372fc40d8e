"""Loose JSON field extraction, string helpers and file reading."""

from __future__ import annotations

import re

from .context import log

_WS = "[ \n\r]*"
_C_SPACE = frozenset(" \t\n\v\f\r")


def get_value(text: str, key: str) -> str:
    """Return the string value of ``key`` in JSON-like text, or ''."""
    if not text:
        log(f"Input string is empty, cannot get value for key {key}")
        return ""
    pattern = ".*" + re.escape(key) + _WS + '"' + _WS + ":" + _WS + '"' + _WS + '([^"]*)'
    match = re.search(pattern, text)
    return match.group(1) if match else ""


def get_array(text: str, key: str) -> list[str]:
    """Return the items of the array value of ``key``, quotes removed."""
    if not text:
        log(f"Input string is empty, cannot get array of value for key {key}")
        return []
    pattern = ".*" + re.escape(key) + _WS + '"' + _WS + ":" + _WS + r"[\[ \n\r]*([^\]]*)"
    match = re.search(pattern, text)
    values = match.group(1) if match else ""
    return split(remove_char(values, '"'), ",")


def split(text: str, delim: str) -> list[str]:
    """Split on a regular expression; a trailing empty piece is dropped."""
    parts = re.split(delim, text)
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def remove_char(text: str, char: str) -> str:
    """Return ``text`` without any occurrence of ``char``."""
    return text.replace(char, "")


def remove_spaces(text: str) -> str:
    """Return ``text`` without whitespace characters."""
    return "".join(ch for ch in text if ch not in _C_SPACE)


def read_lines(filename: str) -> list[str]:
    """Read a file as a list of lines split on newline.

    Raises ValueError for an empty name and OSError if the file cannot be read.
    """
    if not filename:
        log("File name is empty, exiting")
        raise ValueError("file name is empty")
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError:
        log(f"Failed to open file: {filename}")
        raise
    return content.split("\n")