"""Display and formatting service for branch health output"""
from typing import List

from rich.console import Console
from rich.table import Table

from git_branch_health.constants import SYMBOL_CURRENT_BRANCH, SYMBOL_HEALTH
from git_branch_health.formatters import (
    format_conflict_preview,
    format_merged_branch,
    simplify_delete_error,
)
from git_branch_health.logging_config import get_logger
from git_branch_health.models.batch import BatchDeletePreview, BatchDeleteResult
from git_branch_health.models.conflict import ConflictPreview
from git_branch_health.models.health import HealthLevel, ScoredBranch

console = Console()
logger = get_logger(__name__)


def _optional_count(value) -> str:
    return "-" if value is None else str(value)


def _branches(count: int) -> str:
    return f"{count} branch{'es' if count != 1 else ''}"


class DisplayService:
    def __init__(self, verbose: bool = False, debug: bool = False, preview_limit: int = 10):
        self.verbose = verbose
        self.debug_mode = debug
        self.preview_limit = preview_limit

    def display_health_report(self, branches: List[ScoredBranch], base_branch: str) -> None:
        """Display a table of branches with their health."""
        table = Table(title=f"Branch health (base: {base_branch})")
        for label in ("Branch", "Health", "Score", "Ahead", "Behind", "Develop ↑↓", "PR", "Issues"):
            table.add_column(label)

        for branch in branches:
            status = branch.status
            health = branch.health
            name = status.name + (SYMBOL_CURRENT_BRANCH if status.is_active else "")
            develop = f"{_optional_count(status.ahead_develop)}/{_optional_count(status.behind_develop)}"
            pr = f"#{status.pr.number} {status.pr.state.value}" if status.pr else ""

            if health is None:
                table.add_row(name, "?", "", str(status.ahead), str(status.behind), develop, pr, "")
                continue

            table.add_row(
                name,
                f"{SYMBOL_HEALTH[health.icon]} {health.level.value}",
                str(health.score),
                str(status.ahead),
                str(status.behind),
                develop,
                pr,
                "; ".join(health.issues),
                style=health.color,
            )

        console.print(table)

        counts = {level: 0 for level in HealthLevel}
        for branch in branches:
            if branch.health is not None:
                counts[branch.health.level] += 1
        console.print(
            f"\nTotal: {len(branches)}  "
            f"[green]healthy: {counts[HealthLevel.HEALTHY]}[/green]  "
            f"[yellow]attention: {counts[HealthLevel.ATTENTION]}[/yellow]  "
            f"[red]critical: {counts[HealthLevel.CRITICAL]}[/red]"
        )

    def display_rebase_preview(
        self, branch_name: str, base_branch: str, preview: ConflictPreview, needs_force_push: bool
    ) -> None:
        console.print(f"Rebase [bold]{branch_name}[/bold] onto [bold]{base_branch}[/bold]\n")
        color = "yellow" if preview.has_conflicts or preview.error else "green"
        console.print(
            format_conflict_preview(preview, needs_force_push, limit=self.preview_limit),
            style=color,
            markup=False,
        )
        if preview.error and self.verbose:
            console.print(f"[dim]{preview.error}[/dim]", markup=True)

    def display_delete_preview(self, preview: BatchDeletePreview) -> None:
        """List the merged branches that would be deleted and those skipped."""
        if not preview.deletable:
            message = "No merged branches to delete."
            reasons = []
            if preview.active:
                reasons.append(f"{len(preview.active)} active")
            if preview.protected:
                reasons.append(f"{len(preview.protected)} protected")
            if reasons:
                message += (
                    f" Found {preview.total_merged_branches} merged branch(es)"
                    f" but all are {' or '.join(reasons)}."
                )
            console.print(message)
            return

        console.print(f"Merged {_branches(len(preview.deletable))} to delete:")
        for candidate in preview.deletable[: self.preview_limit]:
            console.print(f"  • {format_merged_branch(candidate)}", markup=False)
        if len(preview.deletable) > self.preview_limit:
            console.print(f"  ... and {len(preview.deletable) - self.preview_limit} more")

        if preview.skipped:
            parts = []
            if preview.active:
                parts.append(f"{len(preview.active)} active")
            if preview.protected:
                parts.append(f"{len(preview.protected)} protected")
            console.print(f"\n[dim](Skipping {_branches(preview.skipped)}: {', '.join(parts)})[/dim]")

    def display_delete_result(self, result: BatchDeleteResult) -> None:
        """Report every deleted branch and every failure with its reason."""
        if result.succeeded:
            console.print(f"[green]Deleted {_branches(len(result.succeeded))}:[/green]")
            for name in result.succeeded:
                console.print(f"  - {name}", markup=False)

        if result.failed:
            console.print(f"\n[red]Could not delete {_branches(len(result.failed))}:[/red]\n")
            for failure in result.failed:
                console.print(f"  Branch: {failure.name}", markup=False)
                console.print(f"  Reason: {simplify_delete_error(failure.error)}", markup=False)
                console.print(f"  Fix:    git branch -D {failure.name}\n", markup=False)
