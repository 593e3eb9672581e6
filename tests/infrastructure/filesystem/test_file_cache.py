from pathlib import Path

import pytest

from src.infrastructure.filesystem.file_cache import FileCache, is_within


class TestExists:
    def test_existing_file(self, workdir: Path) -> None:
        assert FileCache(workdir).exists("existing.ts")

    def test_missing_file(self, workdir: Path) -> None:
        assert not FileCache(workdir).exists("nonexistent.ts")

    def test_directory_is_not_a_file(self, workdir: Path) -> None:
        assert not FileCache(workdir).exists("subdir")

    def test_only_negative_lookups_are_cached_on_exists(self, workdir: Path) -> None:
        cache = FileCache(workdir)
        cache.exists("existing.ts")
        cache.exists("nonexistent.ts")

        stats = cache.get_stats()
        assert stats.files_checked == 1
        assert stats.files_loaded == 0

    def test_negative_lookup_survives_file_creation(self, workdir: Path) -> None:
        cache = FileCache(workdir)
        assert not cache.exists("late.ts")

        (workdir / "late.ts").write_text("now here", encoding="utf-8")

        assert not cache.exists("late.ts")
        assert FileCache(workdir).exists("late.ts")

    def test_nested_paths(self, workdir: Path) -> None:
        cache = FileCache(workdir)
        assert cache.exists("subdir/nested.ts")
        assert cache.get_content("subdir/nested.ts") == "nested content"


class TestContent:
    def test_returns_content(self, workdir: Path) -> None:
        assert FileCache(workdir).get_content("existing.ts") == "line 1\nline 2\nline 3\n"

    def test_missing_file_returns_none(self, workdir: Path) -> None:
        assert FileCache(workdir).get_content("nonexistent.ts") is None

    def test_content_is_loaded_once(self, workdir: Path) -> None:
        cache = FileCache(workdir)
        cache.get_content("existing.ts")
        cache.get_content("existing.ts")

        assert cache.get_stats().files_loaded == 1

    def test_equivalent_paths_share_an_entry(self, workdir: Path) -> None:
        cache = FileCache(workdir)
        cache.get_content("existing.ts")
        cache.get_content("./existing.ts")
        cache.get_content("subdir/../existing.ts")

        stats = cache.get_stats()
        assert stats.files_checked == 1
        assert stats.files_loaded == 1

    def test_undecodable_file_is_treated_as_absent(self, workdir: Path) -> None:
        (workdir / "binary.bin").write_bytes(b"\xff\xfe\x00\x81")
        cache = FileCache(workdir)

        assert cache.get_content("binary.bin") is None
        assert cache.get_lines("binary.bin") is None
        assert cache.get_stats().files_loaded == 0


class TestLines:
    def test_lines_keep_trailing_empty_line(self, workdir: Path) -> None:
        lines = FileCache(workdir).get_lines("existing.ts")
        assert lines == ["line 1", "line 2", "line 3", ""]

    def test_line_count_includes_trailing_newline(self, workdir: Path) -> None:
        assert FileCache(workdir).get_line_count("existing.ts") == 4

    def test_line_count_without_trailing_newline(self, workdir: Path) -> None:
        assert FileCache(workdir).get_line_count("test.ts") == 3

    def test_line_count_missing_file(self, workdir: Path) -> None:
        assert FileCache(workdir).get_line_count("nonexistent.ts") is None


class TestWorkingDirectoryBoundary:
    @pytest.fixture
    def secret(self, workdir: Path) -> Path:
        path = workdir.parent / "secret.txt"
        path.write_text("TOP SECRET", encoding="utf-8")
        return path

    def test_parent_relative_path_is_not_read(self, workdir: Path, secret: Path) -> None:
        cache = FileCache(workdir)

        assert not cache.exists("../secret.txt")
        assert cache.get_content("../secret.txt") is None
        assert cache.get_lines("../secret.txt") is None
        assert cache.get_line_count("../secret.txt") is None

    def test_absolute_path_is_not_read(self, workdir: Path, secret: Path) -> None:
        cache = FileCache(workdir)

        assert not cache.exists(str(secret))
        assert cache.get_content(str(secret)) is None

    def test_escaping_through_subdirectory_is_not_read(
        self, workdir: Path, secret: Path
    ) -> None:
        assert FileCache(workdir).get_content("subdir/../../secret.txt") is None

    def test_rejected_paths_are_not_counted(self, workdir: Path, secret: Path) -> None:
        cache = FileCache(workdir)
        cache.get_content("../secret.txt")

        stats = cache.get_stats()
        assert stats.files_checked == 0
        assert stats.files_loaded == 0


class TestIsWithin:
    def test_paths_inside_root(self, workdir: Path) -> None:
        assert is_within(workdir, "a/b.ts")
        assert is_within(workdir, ".")
        assert is_within(workdir, "subdir/../existing.ts")

    def test_paths_outside_root(self, workdir: Path) -> None:
        assert not is_within(workdir, "..")
        assert not is_within(workdir, "../project-other/x.ts")
        assert not is_within(workdir, "/tmp/x")
