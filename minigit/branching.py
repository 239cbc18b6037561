from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .errors import MiniGitError, NotFoundError, StorageError
from .models import BranchInfo
from .repo_utils import get_branches_dir, get_head, update_head

def get_branch_path(repo_root: Path, branch_name: str) -> Path:
    return get_branches_dir(repo_root) / branch_name

def is_valid_branch_name(branch_name: str) -> bool:
    return bool(branch_name) and "/" not in branch_name and "\\" not in branch_name and not branch_name.startswith(".")

def validate_branch_name(branch_name: str) -> None:
    if not is_valid_branch_name(branch_name):
        raise MiniGitError(f"invalid branch name '{branch_name}'")

def branch_exists(repo_root: Path, branch_name: str) -> bool:
    if not is_valid_branch_name(branch_name):
        return False
    return get_branch_path(repo_root, branch_name).is_file()

def list_branches(repo_root: Path) -> list[str]:
    branches_dir = get_branches_dir(repo_root)
    if not branches_dir.is_dir():
        return []
    return sorted(path.name for path in branches_dir.iterdir() if path.is_file())

def get_branch_info(repo_root: Path, branch_name: str) -> BranchInfo:
    if not branch_exists(repo_root, branch_name):
        raise NotFoundError(f"branch '{branch_name}' does not exist")
    try:
        return BranchInfo.model_validate_json(get_branch_path(repo_root, branch_name).read_text())
    except OSError as e:
        raise StorageError(f"failed to read branch '{branch_name}': {e}") from e
    except ValidationError as e:
        raise StorageError(f"branch '{branch_name}' is corrupt") from e

def update_branch_info(repo_root: Path, branch_name: str, info: BranchInfo) -> None:
    try:
        get_branch_path(repo_root, branch_name).write_text(info.model_dump_json(indent=4))
    except OSError as e:
        raise StorageError(f"failed to write branch '{branch_name}': {e}") from e

def get_current_branch(repo_root: Path) -> str:
    return get_head(repo_root)

def get_current_branch_info(repo_root: Path) -> BranchInfo:
    return get_branch_info(repo_root, get_current_branch(repo_root))

def record_branch_commit(repo_root: Path, branch_name: str, info: BranchInfo, commit_hash: str) -> None:
    info.head = commit_hash
    info.history.append(commit_hash)
    update_branch_info(repo_root, branch_name, info)
    logger.debug(f"branch '{branch_name}' now at {commit_hash}")

def start_branch(repo_root: Path, branch_name: str) -> bool:
    """Switch HEAD to `branch_name`, creating the branch from the current one if needed.

    A new branch starts at the current branch's head and inherits a copy of
    its history, so `log` on the new branch shows the commits it was forked
    from. An existing branch record is left as it is.

    Returns True if a new branch record was created.
    """
    validate_branch_name(branch_name)
    created = False
    if not branch_exists(repo_root, branch_name):
        current = get_current_branch_info(repo_root)
        update_branch_info(repo_root, branch_name, BranchInfo(head=current.head, history=list(current.history)))
        logger.debug(f"created branch '{branch_name}' at {current.head}")
        created = True
    update_head(repo_root, branch_name)
    return created

def switch_branch(repo_root: Path, branch_name: str) -> None:
    if not branch_exists(repo_root, branch_name):
        raise NotFoundError(f"branch '{branch_name}' does not exist")
    update_head(repo_root, branch_name)
