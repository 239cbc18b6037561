from pathlib import Path
import json

from loguru import logger
from pydantic import ValidationError

from .branching import get_current_branch, get_current_branch_info, record_branch_commit
from .errors import NotFoundError
from .file_helpers import get_object, put_object
from .models import CommitInfo, LogEntry
from .staging_helpers import clear_staging_info, get_staging_info

def serialize_commit(info: CommitInfo) -> bytes:
    return json.dumps(info.model_dump(mode="json"), indent=4, sort_keys=True).encode()

def write_commit(repo_root: Path, info: CommitInfo) -> str:
    return put_object(repo_root, serialize_commit(info))

def get_commit_info(repo_root: Path, commit_hash: str) -> CommitInfo:
    data = get_object(repo_root, commit_hash)
    try:
        return CommitInfo.model_validate_json(data)
    except ValidationError as e:
        raise NotFoundError(f"commit {commit_hash} does not exist") from e

def create_commit(repo_root: Path, message: str) -> str:
    branch_name = get_current_branch(repo_root)
    branch_info = get_current_branch_info(repo_root)
    commit_info = CommitInfo(
        message=message,
        changes=dict(get_staging_info(repo_root)),
        parent=branch_info.head,
    )
    commit_hash = write_commit(repo_root, commit_info)
    record_branch_commit(repo_root, branch_name, branch_info, commit_hash)
    clear_staging_info(repo_root)
    logger.debug(f"committed {len(commit_info.changes)} file(s) as {commit_hash}")
    return commit_hash

def commit_log(repo_root: Path) -> list[LogEntry]:
    branch_info = get_current_branch_info(repo_root)
    return [
        LogEntry(commit_hash=commit_hash, commit=get_commit_info(repo_root, commit_hash))
        for commit_hash in reversed(branch_info.history)
    ]
