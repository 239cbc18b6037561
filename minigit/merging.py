from pathlib import Path

from loguru import logger

from .branching import get_branch_info, get_current_branch, record_branch_commit
from .commit_helpers import get_commit_info, write_commit
from .errors import MergeConflictError, MiniGitError, NotFoundError
from .models import CommitInfo

def merge_snapshots(ours: dict[str, str], theirs: dict[str, str]) -> tuple[dict[str, str], list[str]]:
    merged = dict(ours)
    conflicts = []
    for path, digest in theirs.items():
        if path not in merged:
            merged[path] = digest
        elif merged[path] != digest:
            conflicts.append(path)
    return merged, sorted(conflicts)

def merge_branch(repo_root: Path, branch_name: str) -> str:
    """Merge the head snapshot of `branch_name` into the current branch.

    Every path of the target snapshot is checked before anything is written:
    if any path exists on both sides with different content, the merge is
    aborted with a MergeConflictError listing all such paths, and no commit
    or branch record is touched. Otherwise a merge commit with both heads as
    parents is recorded on the current branch only.
    """
    target_info = get_branch_info(repo_root, branch_name)
    current_branch = get_current_branch(repo_root)
    if current_branch == branch_name:
        raise MiniGitError(f"cannot merge branch '{branch_name}' into itself")
    current_info = get_branch_info(repo_root, current_branch)

    if current_info.head is None:
        raise NotFoundError(f"branch '{current_branch}' has no commits")
    if target_info.head is None:
        raise NotFoundError(f"branch '{branch_name}' has no commits")

    current_commit = get_commit_info(repo_root, current_info.head)
    target_commit = get_commit_info(repo_root, target_info.head)

    merged, conflicts = merge_snapshots(current_commit.changes, target_commit.changes)
    if conflicts:
        logger.warning(f"merge of '{branch_name}' into '{current_branch}' aborted: {len(conflicts)} conflict(s)")
        raise MergeConflictError(conflicts)

    merge_commit_info = CommitInfo(
        message=f"Merge branch {branch_name} into {current_branch}",
        changes=merged,
        parent=(current_info.head, target_info.head),
    )
    merge_commit_hash = write_commit(repo_root, merge_commit_info)
    record_branch_commit(repo_root, current_branch, current_info, merge_commit_hash)
    return merge_commit_hash
