import sys

import argparse
from minigit.commands import run_command, run_shell
from minigit.config import config
from minigit.logger import setup_logging

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minigit", description="MiniGit CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init command
    subparsers.add_parser("init", help="Initialize a new minigit repository")

    # add command
    add_parser = subparsers.add_parser("add", help="Stage files for the next commit")
    add_parser.add_argument("files", nargs="+", help="Files to stage")

    # status command
    subparsers.add_parser("status", help="Show the current branch and staged files")

    # commit command
    commit_parser = subparsers.add_parser("commit", help="Commit staged files")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message")

    # log command
    subparsers.add_parser("log", help="Show the current branch's commit history")

    # diff command
    diff_parser = subparsers.add_parser("diff", help="Compare the snapshots of two commits")
    diff_parser.add_argument("commit1", help="Commit hash to compare from")
    diff_parser.add_argument("commit2", help="Commit hash to compare to")

    # branch command
    branch_parser = subparsers.add_parser("branch", help="Create and switch to a branch, or list branches")
    branch_parser.add_argument("name", nargs="?", help="Branch name (omit to list branches)")

    # checkout command
    checkout_parser = subparsers.add_parser("checkout", help="Switch to an existing branch")
    checkout_parser.add_argument("name", help="Branch name to switch to")

    # merge command
    merge_parser = subparsers.add_parser("merge", help="Merge a branch into the current branch")
    merge_parser.add_argument("name", help="Branch name to merge from")

    # ignore command
    ignore_parser = subparsers.add_parser("ignore", help="Add a wildcard pattern to the ignore file")
    ignore_parser.add_argument("pattern", help="Pattern using * and ?")

    # shell command
    subparsers.add_parser("shell", help="Run commands interactively")

    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging(config.logging)
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "shell":
        run_shell(parser)
        return 0
    return 0 if run_command(args) else 1


if __name__ == "__main__":
    sys.exit(main())
