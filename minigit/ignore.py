from pathlib import Path
import re

from .config import config
from .errors import StorageError
from .repo_utils import get_ignore_path

def get_ignore_patterns(repo_root: Path) -> list[str]:
    ignore_path = get_ignore_path(repo_root)
    if not ignore_path.exists():
        return []
    try:
        lines = ignore_path.read_text().splitlines()
    except OSError as e:
        raise StorageError(f"failed to read ignore file: {e}") from e
    return [line.strip() for line in lines if line.strip()]

def wildcard_to_regex(pattern: str) -> str:
    return "^" + re.escape(pattern).replace(r"\*", ".*").replace(r"\?", ".") + "$"

def is_ignored(repo_root: Path, relative_path: str) -> bool:
    if relative_path.split("/")[0] == config.repo.repo_dir_name:
        return True
    return any(re.match(wildcard_to_regex(pattern), relative_path) for pattern in get_ignore_patterns(repo_root))

def add_ignore_pattern(repo_root: Path, pattern: str) -> None:
    try:
        with get_ignore_path(repo_root).open("a") as f:
            f.write(f"{pattern}\n")
    except OSError as e:
        raise StorageError(f"failed to update ignore file: {e}") from e
