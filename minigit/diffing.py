from pathlib import Path

from .commit_helpers import get_commit_info
from .models import DiffResult

def diff_snapshots(changes_from: dict[str, str], changes_to: dict[str, str]) -> DiffResult:
    result = DiffResult()
    for path, digest in changes_from.items():
        if path not in changes_to:
            result.deleted.append(path)
        elif changes_to[path] != digest:
            result.modified.append(path)
    for path in changes_to:
        if path not in changes_from:
            result.added.append(path)
    result.added.sort()
    result.deleted.sort()
    result.modified.sort()
    return result

def diff_commits(repo_root: Path, commit_hash1: str, commit_hash2: str) -> DiffResult:
    commit_info1 = get_commit_info(repo_root, commit_hash1)
    commit_info2 = get_commit_info(repo_root, commit_hash2)
    return diff_snapshots(commit_info1.changes, commit_info2.changes)
