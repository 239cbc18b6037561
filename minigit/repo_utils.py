from pathlib import Path

from loguru import logger

from .config import config
from .errors import MiniGitError, NotFoundError, StorageError
from .models import BranchInfo

def find_repo_root(start: Path | None = None) -> Path | None:
    start = (start or Path.cwd()).resolve()
    for directory in [start] + list(start.parents):
        if (directory / config.repo.repo_dir_name).is_dir():
            return directory
        if directory == Path.home():    # won't look past home directory
            return None
    return None

def require_repo_root(start: Path | None = None) -> Path:
    repo_root = find_repo_root(start)
    if repo_root is None:
        raise MiniGitError("not in a minigit repository")
    return repo_root

def get_repo_dir(repo_root: Path) -> Path:
    return repo_root / config.repo.repo_dir_name

def get_objects_dir(repo_root: Path) -> Path:
    return get_repo_dir(repo_root) / "objects"

def get_branches_dir(repo_root: Path) -> Path:
    return get_repo_dir(repo_root) / "branches"

def get_index_path(repo_root: Path) -> Path:
    return get_repo_dir(repo_root) / "index"

def get_head_path(repo_root: Path) -> Path:
    return get_repo_dir(repo_root) / "HEAD"

def get_ignore_path(repo_root: Path) -> Path:
    return get_repo_dir(repo_root) / "ignore"

def get_head(repo_root: Path) -> str:
    head_path = get_head_path(repo_root)
    if not head_path.exists():
        raise NotFoundError("HEAD file does not exist")
    try:
        return head_path.read_text().strip()
    except OSError as e:
        raise StorageError(f"failed to read HEAD: {e}") from e

def update_head(repo_root: Path, branch_name: str) -> None:
    try:
        get_head_path(repo_root).write_text(branch_name)
    except OSError as e:
        raise StorageError(f"failed to write HEAD: {e}") from e
    logger.debug(f"HEAD -> {branch_name}")

def init_repo(directory: Path) -> Path:
    repo_dir = get_repo_dir(directory)
    if repo_dir.exists():
        raise MiniGitError(f"repository already exists in {repo_dir}")
    default_branch = config.repo.default_branch
    try:
        get_objects_dir(directory).mkdir(parents=True)
        get_branches_dir(directory).mkdir()
        update_head(directory, default_branch)
        (get_branches_dir(directory) / default_branch).write_text(BranchInfo().model_dump_json(indent=4))
        get_index_path(directory).write_text("{}")
        get_ignore_path(directory).write_text("")
    except OSError as e:
        raise StorageError(f"failed to create {repo_dir}: {e}") from e
    logger.debug(f"initialized repository at {repo_dir}")
    return repo_dir
