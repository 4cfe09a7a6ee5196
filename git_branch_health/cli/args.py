"""Command-line argument parsing for git-branch-health."""

import argparse
from typing import List, Optional

from git_branch_health.__version__ import __version__


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-branch-health",
        description="Branch health, rebase-conflict forecasts and merged-branch cleanup for Git repositories",
        epilog="PR detection: set GITHUB_TOKEN for repositories hosted on GitHub.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-branch-health {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "-C", "--repo", default=".", metavar="PATH", help="Path inside the repository (default: .)"
    )
    parser.add_argument(
        "--no-fetch", action="store_true", help="Do not fetch from the remote before analyzing"
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers for branch analysis (default: auto-detect)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Force sequential processing (disable parallelism)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("report", help="Show the health of every local branch (default)")

    for name, help_text in (
        ("rebase-preview", "Forecast conflicts of rebasing a branch, without changing anything"),
        ("rebase", "Show the conflict forecast, then rebase the branch"),
    ):
        rebase_parser = subparsers.add_parser(name, help=help_text)
        rebase_parser.add_argument("branch", help="Branch to rebase")
        rebase_parser.add_argument(
            "--onto", metavar="BASE", help="Branch to rebase onto (default: resolved base branch)"
        )

    prune_parser = subparsers.add_parser("prune-merged", help="Delete branches merged into develop or main")
    prune_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - show what would be deleted without actually deleting",
    )
    prune_parser.add_argument(
        "--force", action="store_true", help="Delete with 'git branch -D' instead of '-d'"
    )

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "report"
    return args
