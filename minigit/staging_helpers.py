from pathlib import Path
import json

from loguru import logger

from .errors import MiniGitError, StorageError
from .file_helpers import put_object, read_file_bytes
from .ignore import is_ignored
from .models import AddResult, StagingInfo
from .repo_utils import get_index_path

def get_staging_info(repo_root: Path) -> StagingInfo:
    index_path = get_index_path(repo_root)
    if not index_path.exists():
        return {}
    try:
        return json.loads(index_path.read_text())
    except OSError as e:
        raise StorageError(f"failed to read staging index: {e}") from e
    except json.JSONDecodeError as e:
        raise StorageError(f"staging index is corrupt: {e}") from e

def update_staging_info(repo_root: Path, info: StagingInfo) -> None:
    try:
        get_index_path(repo_root).write_text(json.dumps(info, indent=4, sort_keys=True))
    except OSError as e:
        raise StorageError(f"failed to write staging index: {e}") from e

def clear_staging_info(repo_root: Path) -> None:
    update_staging_info(repo_root, {})

def staged_paths(repo_root: Path) -> list[str]:
    return sorted(get_staging_info(repo_root))

def to_repo_relative(repo_root: Path, path: Path | str) -> str:
    full_path = (Path.cwd() / path).resolve()
    try:
        return full_path.relative_to(repo_root.resolve()).as_posix()
    except ValueError:
        raise MiniGitError(f"{path} is outside the repository at {repo_root}") from None

def stage_file(repo_root: Path, path: Path | str) -> AddResult:
    relative_path = to_repo_relative(repo_root, path)
    if is_ignored(repo_root, relative_path):
        logger.debug(f"{relative_path} matches an ignore pattern")
        return AddResult(path=relative_path, status="ignored")

    content = read_file_bytes(repo_root / relative_path)
    digest = put_object(repo_root, content)
    staging_info = get_staging_info(repo_root)
    staging_info[relative_path] = digest
    update_staging_info(repo_root, staging_info)
    logger.debug(f"staged {relative_path} as {digest}")
    return AddResult(path=relative_path, status="staged", digest=digest)
