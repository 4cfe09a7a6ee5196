"""Service for computing per-branch ahead/behind and merge status"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional, Union, TYPE_CHECKING

from git_branch_health.constants import DEVELOP_REF, MAIN_REF
from git_branch_health.exceptions import CommandFailure
from git_branch_health.logging_config import get_logger
from git_branch_health.models.branch import BranchStatus
from git_branch_health.services.git import BaseBranchResolver, BranchQueries, GitGateway
from git_branch_health.services.review_requests import ReviewRequestLookup
from git_branch_health.utils.threading import get_optimal_worker_count

if TYPE_CHECKING:
    from git_branch_health.config import Config

logger = get_logger(__name__)


@dataclass
class AnalysisContext:
    """Facts shared by every branch in one analysis run."""
    base: str
    develop_ref: Optional[str] = None
    main_ref: Optional[str] = None
    current_branch: Optional[str] = None


class BranchStatusService:
    """Computes a BranchStatus for every local branch."""

    def __init__(
        self,
        repo_path: str,
        config: Union["Config", dict],
        gateway: Optional[GitGateway] = None,
        review_lookup: Optional[ReviewRequestLookup] = None,
    ):
        """Initialize the service.

        Args:
            repo_path: Path to the working copy
            config: Configuration dictionary or Config object
            gateway: Gateway to run git through (defaults to one for repo_path)
            review_lookup: Review-request lookup used to attach PR data
        """
        self.repo_path = repo_path
        self.config = config
        self.gateway = gateway or GitGateway(repo_path)
        self.queries = BranchQueries(self.gateway)
        self.base_resolver = BaseBranchResolver(self.gateway)
        self.review_lookup = review_lookup or ReviewRequestLookup()
        self.fetch_enabled = config.get("fetch", True)
        # Debug mode runs sequentially so log lines stay in order
        self.sequential = config.get("sequential", False) or config.get("debug", False)
        self.workers = config.get("workers")

    def _fetch(self) -> None:
        """Best-effort fetch; stale remote-tracking refs are acceptable."""
        try:
            self.queries.fetch()
        except CommandFailure as e:
            logger.warning(f"Failed to fetch from remote (continuing anyway): {e}")

    def build_context(self) -> AnalysisContext:
        """Resolve the base branch, integration refs and current branch."""
        base = self.base_resolver.resolve()
        develop_ref = DEVELOP_REF if self.queries.ref_exists(DEVELOP_REF) else None
        main_ref = MAIN_REF if self.queries.ref_exists(MAIN_REF) else None
        current_branch = self.queries.get_current_branch()

        logger.debug(
            f"Analysis context: base={base}, develop={develop_ref}, main={main_ref}, current={current_branch}"
        )
        return AnalysisContext(base, develop_ref, main_ref, current_branch)

    def get_branch_status(self, branch_name: str, context: AnalysisContext) -> BranchStatus:
        """Compute the status of one branch.

        Raises:
            CommandFailure: If a count query fails (e.g. the branch was deleted meanwhile)
        """
        logger.debug(f"Checking status for branch: {branch_name}")
        ahead, behind = self.queries.count_ahead_behind(context.base, branch_name)

        ahead_develop = behind_develop = None
        merged_into_develop = None
        merged_at_develop = None
        if context.develop_ref:
            ahead_develop, behind_develop = self.queries.count_ahead_behind(context.develop_ref, branch_name)
            merged_into_develop = self.queries.is_merged_into(branch_name, context.develop_ref)
            if merged_into_develop:
                merged_at_develop = self.queries.get_merged_at(branch_name, context.develop_ref)

        ahead_main = behind_main = None
        merged_into_main = None
        merged_at_main = None
        if context.main_ref:
            ahead_main, behind_main = self.queries.count_ahead_behind(context.main_ref, branch_name)
            merged_into_main = self.queries.is_merged_into(branch_name, context.main_ref)
            if merged_into_main:
                merged_at_main = self.queries.get_merged_at(branch_name, context.main_ref)

        return BranchStatus(
            name=branch_name,
            ahead=ahead,
            behind=behind,
            is_active=branch_name == context.current_branch,
            ahead_develop=ahead_develop,
            behind_develop=behind_develop,
            ahead_main=ahead_main,
            behind_main=behind_main,
            merged_into_develop=merged_into_develop,
            merged_into_main=merged_into_main,
            merged_at_develop=merged_at_develop,
            merged_at_main=merged_at_main,
        )

    def _analyze_branch(self, branch_name: str, context: AnalysisContext) -> Optional[BranchStatus]:
        """Compute one branch's status with PR data; None if it must be skipped."""
        try:
            status = self.get_branch_status(branch_name, context)
        except CommandFailure as e:
            logger.warning(f"Skipping branch {branch_name}: {e}")
            return None

        if self.review_lookup:
            status.pr = self.review_lookup.resolve(branch_name)
        return status

    def get_branch_statuses(self) -> List[BranchStatus]:
        """Compute statuses for all local branches, in enumeration order."""
        if self.fetch_enabled:
            self._fetch()

        context = self.build_context()
        branches = self.queries.get_local_branches()
        if not branches:
            return []

        results: Dict[str, BranchStatus] = {}
        if self.sequential or len(branches) == 1:
            for branch_name in branches:
                status = self._analyze_branch(branch_name, context)
                if status is not None:
                    results[branch_name] = status
        else:
            max_workers = min(get_optimal_worker_count(self.workers), len(branches))
            logger.debug(f"Analyzing {len(branches)} branches using {max_workers} workers")
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                future_to_branch = {
                    executor.submit(self._analyze_branch, branch_name, context): branch_name
                    for branch_name in branches
                }
                for future in as_completed(future_to_branch):
                    status = future.result()
                    if status is not None:
                        results[future_to_branch[future]] = status

        return [results[name] for name in branches if name in results]
