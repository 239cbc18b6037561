from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Callable
import shlex
import sys

from loguru import logger

from .errors import MergeConflictError, MiniGitError
from .repo_utils import init_repo, require_repo_root
from .ignore import add_ignore_pattern
from .staging_helpers import stage_file, staged_paths
from .commit_helpers import commit_log, create_commit
from .branching import (
    get_current_branch,
    list_branches,
    start_branch,
    switch_branch,
)
from .diffing import diff_commits
from .merging import merge_branch

def map_command(command: str) -> Callable:
    commandsMap = {
        "init": init,
        "add": add,
        "status": status,
        "commit": commit,
        "log": log,
        "diff": diff,
        "branch": branch,
        "checkout": checkout,
        "merge": merge,
        "ignore": ignore,
    }
    if command not in commandsMap:
        raise MiniGitError(f"Unknown command: {command}")
    return commandsMap[command]

def init(args):
    repo_dir = init_repo(Path.cwd())
    print(f"Initialized empty minigit repository in {repo_dir}")

def add(args):
    repo_root = require_repo_root()
    for filepath in args.files:
        result = stage_file(repo_root, filepath)
        if result.status == "ignored":
            print(f"Ignored {result.path}")
        else:
            print(f"Staged {result.path}")

def status(args):
    repo_root = require_repo_root()
    print(f"On branch {get_current_branch(repo_root)}")
    paths = staged_paths(repo_root)
    if not paths:
        print("No files staged.")
        return
    print("Staged files:")
    for filepath in paths:
        print(f"  {filepath}")

def commit(args):
    repo_root = require_repo_root()
    commit_hash = create_commit(repo_root, args.message)
    print(f"Committed with hash {commit_hash}")

def log(args):
    repo_root = require_repo_root()
    for entry in commit_log(repo_root):
        print(f"Commit: {entry.commit_hash}")
        if entry.commit.is_merge:
            print(f"Merge: {' '.join(entry.commit.parents)}")
        print(f"Message: {entry.commit.message}\n")

def diff(args):
    repo_root = require_repo_root()
    result = diff_commits(repo_root, args.commit1, args.commit2)
    if result.is_empty():
        print("No differences")
        return
    print("Diffs between commits")
    for filepath in result.deleted:
        print(f"Deleted: {filepath}")
    for filepath in result.modified:
        print(f"Modified: {filepath}")
    for filepath in result.added:
        print(f"Added: {filepath}")

def branch(args):
    repo_root = require_repo_root()
    if args.name is None:
        current_branch = get_current_branch(repo_root)
        for branch_name in list_branches(repo_root):
            prefix = "*" if branch_name == current_branch else " "
            print(f"{prefix} {branch_name}")
        return
    if start_branch(repo_root, args.name):
        print(f"Created branch {args.name}")
    print(f"Switched to branch {args.name}")

def checkout(args):
    repo_root = require_repo_root()
    switch_branch(repo_root, args.name)
    print(f"Switched to branch {args.name}")

def merge(args):
    repo_root = require_repo_root()
    try:
        merge_commit_hash = merge_branch(repo_root, args.name)
    except MergeConflictError as e:
        print("Merge conflicts detected")
        for conflict in e.paths:
            print(f"Conflict: {conflict}")
        print("Merge aborted due to conflicts")
        raise
    print(f"Merge successful. Created merge commit {merge_commit_hash}")

def ignore(args):
    repo_root = require_repo_root()
    add_ignore_pattern(repo_root, args.pattern)
    print(f"Added {args.pattern} to ignore file")

def run_shell(parser: ArgumentParser, input_func: Callable[[str], str] = input) -> None:
    """Read commands line by line until `exit`, `quit` or end of input.

    A failing command is reported and the loop keeps going.
    """
    print("MiniGit Version Control System")
    print("Available commands: init, add, commit, log, diff, branch, checkout, merge, status, ignore, exit")
    while True:
        try:
            line = input_func("minigit> ")
        except EOFError:
            print()
            return
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            continue
        if not tokens:
            continue
        if tokens[0] in ("exit", "quit"):
            print("Exiting MiniGit.")
            return
        if tokens[0] == "shell":
            print("error: already in a shell", file=sys.stderr)
            continue
        try:
            args = parser.parse_args(tokens)
        except SystemExit:
            # argparse has already printed usage
            continue
        run_command(args)

def run_command(args: Namespace) -> bool:
    try:
        map_command(args.command)(args)
    except MergeConflictError:
        # already reported by `merge`
        return False
    except MiniGitError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"error: {e}", file=sys.stderr)
        return False
    except Exception as e:
        logger.opt(exception=e).debug(f"{args.command} failed unexpectedly")
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return False
    return True
