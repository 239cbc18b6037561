from pathlib import Path
import hashlib
import string

from loguru import logger

from .errors import NotFoundError, StorageError
from .repo_utils import get_objects_dir

def hash_bytes(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()

def is_digest(value: str) -> bool:
    return len(value) == 40 and all(c in string.hexdigits[:16] for c in value)

def get_object_path(repo_root: Path, digest: str) -> Path:
    return get_objects_dir(repo_root) / digest

def object_exists(repo_root: Path, digest: str) -> bool:
    return is_digest(digest) and get_object_path(repo_root, digest).is_file()

def put_object(repo_root: Path, data: bytes) -> str:
    digest = hash_bytes(data)
    # rewritten even if present: same digest means same bytes
    try:
        get_object_path(repo_root, digest).write_bytes(data)
    except OSError as e:
        raise StorageError(f"failed to write object {digest}: {e}") from e
    logger.debug(f"wrote object {digest} ({len(data)} bytes)")
    return digest

def get_object(repo_root: Path, digest: str) -> bytes:
    if not object_exists(repo_root, digest):
        raise NotFoundError(f"object {digest} does not exist")
    try:
        return get_object_path(repo_root, digest).read_bytes()
    except OSError as e:
        raise StorageError(f"failed to read object {digest}: {e}") from e

def read_file_bytes(filepath: Path) -> bytes:
    try:
        return filepath.read_bytes()
    except OSError as e:
        raise StorageError(f"cannot read {filepath}: {e}") from e
