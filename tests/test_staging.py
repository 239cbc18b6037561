import re

import pytest

from minigit.errors import MiniGitError, StorageError
from minigit.file_helpers import get_object
from minigit.ignore import add_ignore_pattern, is_ignored, wildcard_to_regex
from minigit.staging_helpers import get_staging_info, stage_file, staged_paths


def test_stage_file_records_digest(repo, write_file):
    write_file("a.txt", "alpha")

    result = stage_file(repo, "a.txt")

    assert result.status == "staged"
    assert result.path == "a.txt"
    assert get_staging_info(repo) == {"a.txt": result.digest}
    assert get_object(repo, result.digest) == b"alpha"


def test_staging_same_file_twice_keeps_one_entry(repo, write_file):
    write_file("a.txt", "alpha")

    first = stage_file(repo, "a.txt")
    second = stage_file(repo, "a.txt")

    assert first.digest == second.digest
    assert get_staging_info(repo) == {"a.txt": first.digest}


def test_restaging_modified_file_overwrites_digest(repo, write_file):
    write_file("a.txt", "v1")
    first = stage_file(repo, "a.txt")
    write_file("a.txt", "v2")
    second = stage_file(repo, "a.txt")

    assert first.digest != second.digest
    assert get_staging_info(repo) == {"a.txt": second.digest}


def test_absolute_and_nested_paths_become_repo_relative(repo, write_file):
    path = write_file("docs/guide.md", "# guide")

    result = stage_file(repo, path)

    assert result.path == "docs/guide.md"


def test_paths_relative_to_subdirectory(repo, write_file, monkeypatch):
    write_file("src/app.py", "print('hi')")
    monkeypatch.chdir(repo / "src")

    result = stage_file(repo, "app.py")

    assert result.path == "src/app.py"


def test_ignored_file_is_not_staged(repo, write_file):
    write_file("build.log", "noise")
    add_ignore_pattern(repo, "*.log")

    result = stage_file(repo, "build.log")

    assert result.status == "ignored"
    assert result.digest is None
    assert get_staging_info(repo) == {}


def test_missing_file_raises_storage_error(repo):
    with pytest.raises(StorageError):
        stage_file(repo, "nope.txt")
    assert get_staging_info(repo) == {}


def test_file_outside_repository_is_rejected(repo, tmp_path_factory):
    outside = tmp_path_factory.mktemp("outside") / "x.txt"
    outside.write_text("x")

    with pytest.raises(MiniGitError):
        stage_file(repo, outside)


def test_staged_paths_are_sorted(repo, write_file):
    for name in ("b.txt", "a.txt", "c.txt"):
        write_file(name, name)
        stage_file(repo, name)

    assert staged_paths(repo) == ["a.txt", "b.txt", "c.txt"]


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("*.log", "build.log", True),
        ("*.log", "logs/build.log", True),
        ("*.log", "build.log.txt", False),
        ("file?.txt", "file1.txt", True),
        ("file?.txt", "file10.txt", False),
        ("a.b", "axb", False),
        ("notes.txt", "notes.txt", True),
    ],
)
def test_wildcard_patterns(pattern, path, expected):
    assert bool(re.match(wildcard_to_regex(pattern), path)) is expected


def test_metadata_directory_is_always_ignored(repo):
    assert is_ignored(repo, ".minigit/index")
    assert not is_ignored(repo, "readme.md")


def test_blank_lines_in_ignore_file_are_skipped(repo):
    (repo / ".minigit" / "ignore").write_text("\n\n*.tmp\n\n")

    assert is_ignored(repo, "a.tmp")
    assert not is_ignored(repo, "")


def test_corrupt_index_raises_storage_error(repo):
    (repo / ".minigit" / "index").write_text("{not json")

    with pytest.raises(StorageError):
        get_staging_info(repo)
