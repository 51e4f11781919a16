# SPDX-License-Identifier: MIT

from pathlib import Path


class RecordParseWarning(Exception):
    """A single post could not be read. The post is skipped, the scan continues."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidMonth(ValueError):
    """An explicitly requested month does not resolve to a calendar month."""


class PostsDirectoryNotFound(FileNotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Posts directory not found: {path}")
        self.path = path
