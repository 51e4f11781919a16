"""
Tests for reading Hugo posts and their front matter.
"""

import pendulum
import pytest

from hugo_calendar.error import PostsDirectoryNotFound, RecordParseWarning
from hugo_calendar.repository.post import PostRepository


def repository_for(project):
    return PostRepository(project / "content" / "posts")


class TestGetPostPaths:
    """Tests for finding post files."""

    def test_missing_posts_directory(self, tmp_path):
        repository = PostRepository(tmp_path / "nope" / "content" / "posts")

        with pytest.raises(PostsDirectoryNotFound):
            repository.get_post_paths()

    def test_only_index_files_sorted(self, hugo_project, write_post):
        write_post(hugo_project, "b-post", "date: 2024-01-02")
        write_post(hugo_project, "a-post", "date: 2024-01-01")
        write_post(hugo_project, "2024/nested", "date: 2024-01-03")
        (hugo_project / "content" / "posts" / "a-post" / "notes.md").write_text("x")

        paths = repository_for(hugo_project).get_post_paths()

        posts = hugo_project / "content" / "posts"
        assert paths == [
            posts / "2024" / "nested" / "index.md",
            posts / "a-post" / "index.md",
            posts / "b-post" / "index.md",
        ]

    def test_custom_post_filename(self, hugo_project):
        post = hugo_project / "content" / "posts" / "hello.md"
        post.write_text("---\ndate: 2024-01-01\n---\n")

        repository = PostRepository(hugo_project / "content" / "posts", "*.md")

        assert repository.get_post_paths() == [post]


class TestReadPost:
    """Tests for reading a single post."""

    def test_yaml_date(self, hugo_project, write_post):
        path = write_post(hugo_project, "one", "title: One\ndate: 2024-01-05")

        record = repository_for(hugo_project).read_post(path)

        assert record["date"] == pendulum.date(2024, 1, 5)
        assert record["is_draft"] is False
        assert record["matches_filter"] is False
        assert record["path"] == path

    def test_timestamp_keeps_written_date(self, hugo_project, write_post):
        path = write_post(hugo_project, "one", "date: 2024-01-05T10:00:00+01:00")

        record = repository_for(hugo_project).read_post(path)

        assert record["date"] == pendulum.date(2024, 1, 5)

    def test_quoted_date_string(self, hugo_project, write_post):
        path = write_post(hugo_project, "one", 'date: "2024-01-05T22:15:00Z"')

        record = repository_for(hugo_project).read_post(path)

        assert record["date"] == pendulum.date(2024, 1, 5)

    def test_draft(self, hugo_project, write_post):
        path = write_post(hugo_project, "one", "date: 2024-01-05\ndraft: true")

        assert repository_for(hugo_project).read_post(path)["is_draft"] is True

    def test_filter_matches_body_only(self, hugo_project, write_post):
        path = write_post(
            hugo_project,
            "one",
            "title: gallery post\ndate: 2024-01-05",
            "Some text\n{{< gallery >}}\n",
        )
        repository = repository_for(hugo_project)

        assert repository.read_post(path, "{{< gallery")["matches_filter"] is True
        assert repository.read_post(path, "shortcode")["matches_filter"] is False
        assert repository.read_post(path, "")["matches_filter"] is False

    def test_filter_does_not_look_at_front_matter(self, hugo_project, write_post):
        path = write_post(hugo_project, "one", "title: gallery\ndate: 2024-01-05")

        record = repository_for(hugo_project).read_post(path, "gallery")

        assert record["matches_filter"] is False

    @pytest.mark.parametrize(
        "front_matter",
        [
            "title: No date",
            "date: not a date",
            "date: 2024-02-30",
            "date: [2024, 1, 5]",
            "date: 2024-01-05\ndraft: maybe",
            "title: [unclosed",
            "- just\n- a list",
        ],
    )
    def test_bad_front_matter(self, hugo_project, write_post, front_matter):
        path = write_post(hugo_project, "bad", front_matter)

        with pytest.raises(RecordParseWarning) as excinfo:
            repository_for(hugo_project).read_post(path)

        assert excinfo.value.path == path

    def test_unclosed_front_matter(self, hugo_project):
        post_dir = hugo_project / "content" / "posts" / "open"
        post_dir.mkdir()
        path = post_dir / "index.md"
        path.write_text("---\ndate: 2024-01-05\n\nBody without closing line\n")

        with pytest.raises(RecordParseWarning, match="not properly closed"):
            repository_for(hugo_project).read_post(path)


class TestGetPostRecords:
    """Tests for reading every post."""

    def test_bad_post_does_not_stop_the_scan(self, hugo_project, write_post):
        write_post(hugo_project, "a", "date: 2024-01-05")
        bad = write_post(hugo_project, "b", "title: [unclosed")
        write_post(hugo_project, "c", "date: 2024-01-06\ndraft: true")

        records, warnings = repository_for(hugo_project).get_post_records()

        assert [record["date"] for record in records] == [
            pendulum.date(2024, 1, 5),
            pendulum.date(2024, 1, 6),
        ]
        assert [warning.path for warning in warnings] == [bad]

    def test_empty_posts_directory(self, hugo_project):
        assert repository_for(hugo_project).get_post_records() == ([], [])
