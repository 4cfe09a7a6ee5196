"""Command-line interface for git-branch-health"""

import sys
from typing import List, Optional

from rich.console import Console

from git_branch_health.cli.args import parse_args
from git_branch_health.config import Config
from git_branch_health.core import BranchHealthKeeper
from git_branch_health.logging_config import setup_logging
from git_branch_health.services.display_service import DisplayService
from git_branch_health.utils.threading import get_threading_info

console = Console()


def _run_command(args, keeper: BranchHealthKeeper, display: DisplayService) -> int:
    if args.command == "report":
        base_branch = keeper.get_base_branch()
        display.display_health_report(keeper.get_health_report(), base_branch)
        return 0

    if args.command in ("rebase-preview", "rebase"):
        base_branch = args.onto or keeper.get_base_branch()
        preview, needs_force_push = keeper.preview_rebase(args.branch, base_branch)
        display.display_rebase_preview(args.branch, base_branch, preview, needs_force_push)
        if args.command == "rebase":
            keeper.rebase(args.branch, base_branch)
            message = f"Rebased {args.branch} onto {base_branch}"
            if needs_force_push:
                message += " (force push required)"
            console.print(f"\n[green]{message}[/green]")
        return 0

    if args.command == "prune-merged":
        preview = keeper.preview_delete_merged()
        display.display_delete_preview(preview)
        if not preview.deletable or keeper.config.dry_run:
            return 0
        result = keeper.delete_merged(preview)
        console.print()
        display.display_delete_result(result)
        return 1 if result.has_failures else 0

    console.print(f"[red]Unknown command: {args.command}[/red]")
    return 2


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = None
    try:
        args = parse_args(argv)

        setup_logging(verbose=args.verbose, debug=args.debug)

        config = Config(
            fetch=not args.no_fetch,
            sequential=args.sequential,
            workers=args.workers,
            dry_run=getattr(args, "dry_run", False),
            force_delete=getattr(args, "force", False),
            verbose=args.verbose,
            debug=args.debug,
        )

        if args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            threading_info = get_threading_info()
            console.print("[yellow]Threading Information:[/yellow]")
            console.print(f"  Python version: {threading_info['python_version']}")
            console.print(f"  CPU count: {threading_info['cpu_count']}")
            console.print(f"  Optimal workers: {threading_info['optimal_workers']}")
            console.print(f"  Free-threading enabled: {threading_info['free_threading']}")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                if key == "github_token" and value:
                    value = "***"
                console.print(f"  {key}: {value}")

        keeper = BranchHealthKeeper(args.repo, config)
        display = DisplayService(verbose=args.verbose, debug=args.debug, preview_limit=config.preview_limit)
        try:
            return _run_command(args, keeper, display)
        finally:
            keeper.close()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]", markup=True)
        if args is not None and args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
