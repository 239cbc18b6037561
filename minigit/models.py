from pydantic import BaseModel, Field
from typing import Literal, TypeAlias

# None for a root commit, one digest for an ordinary commit, two for a merge
ParentRef: TypeAlias = str | tuple[str, str] | None

StagingInfo: TypeAlias = dict[str, str]

class CommitInfo(BaseModel):
    model_config = {"frozen": True}

    message: str
    changes: dict[str, str]
    parent: ParentRef = None

    @property
    def parents(self) -> list[str]:
        if self.parent is None:
            return []
        if isinstance(self.parent, str):
            return [self.parent]
        return list(self.parent)

    @property
    def is_merge(self) -> bool:
        return len(self.parents) == 2

class BranchInfo(BaseModel):
    head: str | None = None
    history: list[str] = Field(default_factory=list)

class AddResult(BaseModel):
    path: str
    status: Literal["staged", "ignored"]
    digest: str | None = None

class LogEntry(BaseModel):
    commit_hash: str
    commit: CommitInfo

class DiffResult(BaseModel):
    added: list[str] = Field(default_factory=list)
    deleted: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.added or self.deleted or self.modified)
