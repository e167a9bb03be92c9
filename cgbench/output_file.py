"""Hierarchical key=value result reports."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class OutputFile:
    """A tree of key/value elements rendered as ``key1::key2=value`` lines.

    The root carries the benchmark name and version; descendants carry keys
    and values only.
    """

    eol = "\n"
    key_separator = "::"

    def __init__(self, name: str = "", version: str = "", key: str = "", value: str = "") -> None:
        self.name = name
        self.version = version
        self.key = key
        self.value = value
        self.descendants: list[OutputFile] = []

    def add(self, key: str, value: object) -> OutputFile:
        """Append a descendant element and return it."""
        child = OutputFile(key=key, value=_format_value(value))
        self.descendants.append(child)
        return child

    def get(self, key: str) -> OutputFile | None:
        """The first descendant with ``key``, or None."""
        return next((child for child in self.descendants if child.key == key), None)

    def _generate_recursive(self, prefix: str) -> str:
        lines = [f"{prefix}{self.key}={self.value}{self.eol}"]
        child_prefix = prefix + self.key + self.key_separator
        lines.extend(child._generate_recursive(child_prefix) for child in self.descendants)
        return "".join(lines)

    def generate(self) -> str:
        """Render the whole report as text."""
        header = f"{self.name}\nversion={self.version}{self.eol}"
        return header + "".join(child._generate_recursive("") for child in self.descendants)

    def filename(self, now: datetime | None = None) -> str:
        """Report file name stamped with the given (default: current local) time."""
        stamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")
        return f"{self.name}_{self.version}_{stamp}.txt"

    def write(self, directory: str | Path = ".", now: datetime | None = None) -> Path:
        """Write the report into ``directory`` and return the file's path."""
        path = Path(directory) / self.filename(now)
        path.write_text(self.generate(), encoding="utf-8")
        return path