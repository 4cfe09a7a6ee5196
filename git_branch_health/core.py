"""Core functionality for git-branch-health"""

from typing import List, Optional, Tuple, Union

from git_branch_health.config import Config
from git_branch_health.exceptions import RepositoryNotFoundError
from git_branch_health.logging_config import get_logger
from git_branch_health.models.batch import BatchDeletePreview, BatchDeleteResult
from git_branch_health.models.branch import BranchStatus
from git_branch_health.models.conflict import ConflictPreview
from git_branch_health.models.health import ScoredBranch
from git_branch_health.services.batch_service import BatchService, preview_delete_merged_branches
from git_branch_health.services.branch_status_service import BranchStatusService
from git_branch_health.services.conflict_service import ConflictService
from git_branch_health.services.git import BaseBranchResolver, BranchCommands, GitGateway, detect_repo_root
from git_branch_health.services.health_service import score_branches, sort_by_health
from git_branch_health.services.review_requests import ReviewRequestLookup, build_review_lookup

logger = get_logger(__name__)


class BranchHealthKeeper:
    """Branch analysis for one working copy.

    Holds no state between calls: every method re-reads the repository.
    """

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict, None] = None,
        review_lookup: Optional[ReviewRequestLookup] = None,
        gateway: Optional[GitGateway] = None,
    ):
        """Initialize BranchHealthKeeper.

        Args:
            repo_path: Any path inside the working copy
            config: Configuration dict or Config object
            review_lookup: Review-request lookup; built from the origin remote when omitted
            gateway: Gateway to run git through; mainly for tests

        Raises:
            RepositoryNotFoundError: If repo_path is not inside a Git repository
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config or Config()

        if gateway is None:
            root = detect_repo_root(repo_path)
            if root is None:
                raise RepositoryNotFoundError(repo_path)
            gateway = GitGateway(root)

        self.repo_path = gateway.repo_path
        self.gateway = gateway
        if review_lookup is None:
            review_lookup = build_review_lookup(self.repo_path, self.config)
        self.review_lookup = review_lookup

        self.base_resolver = BaseBranchResolver(self.gateway)
        self.branch_status_service = BranchStatusService(
            self.repo_path, self.config, self.gateway, self.review_lookup
        )
        self.conflict_service = ConflictService(self.gateway)
        self.batch_service = BatchService(self.gateway)
        self.commands = BranchCommands(self.gateway)

    def get_base_branch(self) -> str:
        return self.base_resolver.resolve()

    def get_branch_statuses(self) -> List[BranchStatus]:
        return self.branch_status_service.get_branch_statuses()

    def get_health_report(self) -> List[ScoredBranch]:
        """Statuses with health, in display order."""
        return sort_by_health(score_branches(self.get_branch_statuses()))

    def preview_rebase(self, branch_name: str, base_branch: Optional[str] = None) -> Tuple[ConflictPreview, bool]:
        """Forecast conflicts of rebasing branch_name and whether a force push would follow.

        Returns:
            Tuple of (preview, needs_force_push)
        """
        base_branch = base_branch or self.get_base_branch()
        preview = self.conflict_service.preview_rebase_conflicts(branch_name, base_branch)
        needs_force_push = self.conflict_service.would_require_force_push(branch_name)
        return preview, needs_force_push

    def rebase(self, branch_name: str, base_branch: Optional[str] = None) -> None:
        """Rebase branch_name onto base_branch (the resolved base by default)."""
        self.commands.rebase_branch(branch_name, base_branch or self.get_base_branch())

    def preview_delete_merged(self) -> BatchDeletePreview:
        return preview_delete_merged_branches(self.get_branch_statuses())

    def delete_merged(self, preview: Optional[BatchDeletePreview] = None) -> BatchDeleteResult:
        """Delete every deletable merged branch; honors dry_run and force_delete."""
        preview = preview or self.preview_delete_merged()
        names = [candidate.name for candidate in preview.deletable]

        if self.config.dry_run:
            logger.info(f"Dry run: would delete {len(names)} branches")
            return BatchDeleteResult()

        return self.batch_service.batch_delete_branches(names, force=self.config.force_delete)

    def close(self) -> None:
        self.review_lookup.close()
