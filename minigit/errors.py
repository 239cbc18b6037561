class MiniGitError(Exception):
    pass


class NotFoundError(MiniGitError):
    """A missing object, branch or commit."""


class StorageError(MiniGitError):
    """Reading or writing repository storage failed."""


class MergeConflictError(MiniGitError):
    def __init__(self, paths: list[str]):
        self.paths = paths
        super().__init__(f"merge conflicts in {len(paths)} file(s): {', '.join(paths)}")
