# SPDX-License-Identifier: MIT

import datetime
from pathlib import Path
from typing import Any, Optional

import pendulum
from yaml import YAMLError, load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from hugo_calendar.error import PostsDirectoryNotFound, RecordParseWarning
from hugo_calendar.model.post import PostFrontMatter, PostRecord

FRONT_MATTER_DELIMITER = "---"


class PostRepository:
    """
    Reads Hugo posts from a posts directory.

    Every file named `post_filename` below the directory is treated as one post
    (Hugo page bundles). Only the front matter and the body text are looked at.
    """

    def __init__(self, posts_path: Path, post_filename: str = "index.md") -> None:
        self.posts_path = posts_path
        self.post_filename = post_filename

    def get_post_paths(self) -> list[Path]:
        if not self.posts_path.is_dir():
            raise PostsDirectoryNotFound(self.posts_path)
        return sorted(
            path for path in self.posts_path.rglob(self.post_filename) if path.is_file()
        )

    def get_post_records(
        self, filter_text: str = ""
    ) -> tuple[list[PostRecord], list[RecordParseWarning]]:
        """
        Read every post below the posts directory.

        Args:
            filter_text: Text to look for in each post body, empty to disable

        Returns:
            Tuple of (records, warnings). A post that cannot be read produces a
            warning instead of a record.

        Raises:
            PostsDirectoryNotFound: If the posts directory does not exist
        """
        records: list[PostRecord] = []
        warnings: list[RecordParseWarning] = []

        for path in self.get_post_paths():
            try:
                records.append(self.read_post(path, filter_text))
            except RecordParseWarning as warning:
                warnings.append(warning)

        return records, warnings

    def read_post(self, path: Path, filter_text: str = "") -> PostRecord:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RecordParseWarning(path, str(e)) from e

        front_matter, body = self.parse_front_matter(path, content)

        return {
            "path": path,
            "date": front_matter["date"],
            "is_draft": front_matter["draft"],
            "matches_filter": filter_text != "" and filter_text in body,
        }

    def parse_front_matter(
        self, path: Path, content: str
    ) -> tuple[PostFrontMatter, str]:
        """Split a post into its parsed front matter and the body that follows it."""
        lines = content.splitlines()
        front_matter_lines: list[str] = []
        in_front_matter = False
        body_start: Optional[int] = None

        for index, line in enumerate(lines):
            if line.rstrip() == FRONT_MATTER_DELIMITER:
                if not in_front_matter:
                    in_front_matter = True
                    continue
                body_start = index + 1
                break
            if in_front_matter:
                front_matter_lines.append(line)

        if body_start is None:
            raise RecordParseWarning(path, "front matter not properly closed")

        try:
            raw: Any = load("\n".join(front_matter_lines), Loader=Loader)
        except (YAMLError, ValueError) as e:
            # Out of range YAML dates such as 2024-02-30 raise ValueError
            raise RecordParseWarning(path, f"invalid YAML: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise RecordParseWarning(path, "front matter is not a mapping")

        draft = raw.get("draft", False)
        if draft is None:
            draft = False
        if not isinstance(draft, bool):
            raise RecordParseWarning(
                path, f"draft must be true or false, got {draft!r}"
            )

        title = raw.get("title")

        front_matter: PostFrontMatter = {
            "title": None if title is None else str(title),
            "date": self.__parse_date(path, raw.get("date")),
            "draft": draft,
        }
        return front_matter, "\n".join(lines[body_start:])

    def __parse_date(self, path: Path, value: Any) -> pendulum.Date:
        if value is None:
            raise RecordParseWarning(path, "missing date")

        parsed: Any = value
        if isinstance(value, str):
            try:
                parsed = pendulum.parse(value.strip(), exact=True)
            except ValueError as e:
                raise RecordParseWarning(path, f"invalid date {value!r}") from e

        # datetime is a date subclass, the time of day is dropped without a
        # time zone shift so the date stays as written
        if not isinstance(parsed, datetime.date):
            raise RecordParseWarning(path, f"invalid date {value!r}")
        return pendulum.date(parsed.year, parsed.month, parsed.day)
