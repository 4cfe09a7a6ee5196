"""Planning and executing deletion of merged branches"""

from typing import Iterable

from git_branch_health.exceptions import CommandFailure
from git_branch_health.logging_config import get_logger
from git_branch_health.models.batch import (
    BatchDeletePreview,
    BatchDeleteResult,
    FailedDeletion,
    MergedBranchCandidate,
)
from git_branch_health.models.branch import BranchStatus
from git_branch_health.services.git import BranchCommands, GitGateway
from git_branch_health.services.health_service import is_protected_branch

logger = get_logger(__name__)

REASON_ACTIVE = "Currently checked out"
REASON_PROTECTED = "Protected branch"


def preview_delete_merged_branches(branches: Iterable[BranchStatus]) -> BatchDeletePreview:
    """Partition merged branches into deletable, protected and active.

    Branches not merged into develop or main are ignored. The checked-out
    branch is never deletable, even when its name is also protected.
    """
    preview = BatchDeletePreview()

    for branch in branches:
        if not branch.is_merged:
            continue

        candidate = MergedBranchCandidate(
            name=branch.name,
            merged_into_develop=bool(branch.merged_into_develop),
            merged_into_main=bool(branch.merged_into_main),
            is_active=branch.is_active,
            is_protected=is_protected_branch(branch.name),
            merged_at_develop=branch.merged_at_develop,
            merged_at_main=branch.merged_at_main,
        )

        if candidate.is_active:
            candidate.reason = REASON_ACTIVE
            preview.active.append(candidate)
        elif candidate.is_protected:
            candidate.reason = REASON_PROTECTED
            preview.protected.append(candidate)
        else:
            preview.deletable.append(candidate)

    logger.debug(
        f"Merged branches: {len(preview.deletable)} deletable, "
        f"{len(preview.protected)} protected, {len(preview.active)} active"
    )
    return preview


class BatchService:
    """Deletes branches one by one and reports each outcome."""

    def __init__(self, gateway: GitGateway):
        self.commands = BranchCommands(gateway)

    def batch_delete_branches(self, branch_names: Iterable[str], force: bool = False) -> BatchDeleteResult:
        """Delete each branch independently; failures are collected, never raised."""
        result = BatchDeleteResult()

        for branch_name in branch_names:
            try:
                self.commands.delete_branch(branch_name, force=force)
                result.succeeded.append(branch_name)
            except CommandFailure as e:
                logger.warning(f"Could not delete {branch_name}: {e.diagnostic}")
                result.failed.append(FailedDeletion(name=branch_name, error=str(e)))

        return result
