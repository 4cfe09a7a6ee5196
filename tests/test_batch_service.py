"""Tests for merged-branch cleanup"""
from datetime import datetime, timezone

from git_branch_health.exceptions import CommandFailure
from git_branch_health.models.branch import BranchStatus
from git_branch_health.services.batch_service import (
    REASON_ACTIVE,
    REASON_PROTECTED,
    BatchService,
    preview_delete_merged_branches,
)
from git_branch_health.services.git import GitGateway


class TestPreviewDeleteMergedBranches:
    """Test partitioning of merged branches."""

    def test_partition(self):
        merged_at = datetime(2024, 3, 1, tzinfo=timezone.utc)
        branches = [
            BranchStatus(name="feature/done", ahead=0, behind=2, merged_into_develop=True,
                         merged_at_develop=merged_at),
            BranchStatus(name="feature/open", ahead=3, behind=0, merged_into_develop=False,
                         merged_into_main=False),
            BranchStatus(name="develop", ahead=0, behind=0, merged_into_main=True),
            BranchStatus(name="feature/here", ahead=0, behind=0, is_active=True, merged_into_main=True),
            BranchStatus(name="feature/unknown", ahead=1, behind=1),
        ]

        preview = preview_delete_merged_branches(branches)

        assert [c.name for c in preview.deletable] == ["feature/done"]
        assert preview.deletable[0].merged_into_develop is True
        assert preview.deletable[0].merged_into_main is False
        assert preview.deletable[0].merged_at_develop == merged_at
        assert preview.deletable[0].reason is None

        assert [c.name for c in preview.protected] == ["develop"]
        assert preview.protected[0].reason == REASON_PROTECTED
        assert [c.name for c in preview.active] == ["feature/here"]
        assert preview.active[0].reason == REASON_ACTIVE

        assert preview.total_merged_branches == 3
        assert preview.skipped == 2

    def test_active_protected_branch_counts_as_active(self):
        branches = [BranchStatus(name="main", ahead=0, behind=0, is_active=True, merged_into_main=True)]
        preview = preview_delete_merged_branches(branches)

        assert [c.name for c in preview.active] == ["main"]
        assert preview.active[0].is_protected is True
        assert preview.protected == []

    def test_nothing_merged(self):
        preview = preview_delete_merged_branches([BranchStatus(name="feature/x", ahead=1, behind=0)])
        assert preview.total_merged_branches == 0
        assert preview.deletable == []


class TestBatchDeleteBranches:
    """Test per-branch deletion outcomes."""

    def test_failures_do_not_stop_the_batch(self, fake_gateway):
        failure = CommandFailure(
            ["branch", "-d", "feature/b"], "/fake/repo", "error: the branch 'feature/b' is not fully merged.", 1
        )
        gateway = fake_gateway({
            ("branch", "-d", "feature/a"): "Deleted branch feature/a (was abc123).",
            ("branch", "-d", "feature/b"): failure,
            ("branch", "-d", "feature/c"): "Deleted branch feature/c (was def456).",
        })

        result = BatchService(gateway).batch_delete_branches(["feature/a", "feature/b", "feature/c"])

        assert result.succeeded == ["feature/a", "feature/c"]
        assert len(result.failed) == 1
        assert result.failed[0].name == "feature/b"
        assert "not fully merged" in result.failed[0].error
        assert result.has_failures is True

    def test_force_uses_capital_d(self, fake_gateway):
        gateway = fake_gateway({("branch", "-D", "feature/a"): ""})
        result = BatchService(gateway).batch_delete_branches(["feature/a"], force=True)

        assert result.succeeded == ["feature/a"]
        assert gateway.calls == [("branch", "-D", "feature/a")]

    def test_empty_batch(self, fake_gateway):
        result = BatchService(fake_gateway()).batch_delete_branches([])
        assert result.succeeded == []
        assert result.has_failures is False

    def test_real_repository(self, git_repo_with_branches):
        """Test merged branches delete with -d and unmerged ones fail."""
        # -d checks against HEAD for branches without an upstream
        git_repo_with_branches.git.checkout("develop")
        service = BatchService(GitGateway(git_repo_with_branches.working_dir))

        result = service.batch_delete_branches(["feature/merged", "feature/stale"])

        branches = [head.name for head in git_repo_with_branches.heads]
        assert result.succeeded == ["feature/merged"]
        assert [f.name for f in result.failed] == ["feature/stale"]
        assert "feature/merged" not in branches
        assert "feature/stale" in branches
