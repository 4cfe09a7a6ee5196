"""Tests for BranchStatusService"""
from unittest.mock import Mock

import pytest

from git_branch_health.exceptions import CommandFailure
from git_branch_health.models.branch import PRState, PullRequestInfo
from git_branch_health.services.branch_status_service import AnalysisContext, BranchStatusService
from git_branch_health.services.review_requests import ReviewRequestLookup


BRANCH_LIST = ("for-each-ref", "--format=%(refname:short)", "refs/heads")


def _counts(reference, branch):
    return ("rev-list", "--left-right", "--count", f"{reference}...{branch}")


class TestGetBranchStatus:
    """Test per-branch status with canned output."""

    def test_base_only(self, fake_gateway, mock_config):
        """Test develop/main fields stay None without integration refs."""
        gateway = fake_gateway({_counts("origin/main", "feature/x"): "2\t3"})
        service = BranchStatusService("/fake/repo", mock_config, gateway=gateway)

        status = service.get_branch_status("feature/x", AnalysisContext(base="origin/main"))

        assert status.ahead == 3
        assert status.behind == 2
        assert status.ahead_develop is None
        assert status.behind_develop is None
        assert status.merged_into_develop is None
        assert status.merged_into_main is None
        assert status.needs_rebase is True
        assert status.is_active is False

    def test_with_develop_and_main(self, fake_gateway, mock_config):
        gateway = fake_gateway({
            _counts("origin/main", "feature/x"): "0\t0",
            _counts("origin/develop", "feature/x"): "1\t0",
            ("merge-base", "--is-ancestor", "feature/x", "origin/develop"): "",
            ("log", "--format=%cI", "--reverse", "--ancestry-path", "feature/x..origin/develop"):
                "2024-03-01T10:00:00+00:00",
        })
        service = BranchStatusService("/fake/repo", mock_config, gateway=gateway)
        context = AnalysisContext(
            base="origin/main", develop_ref="origin/develop", main_ref="origin/main", current_branch="feature/x"
        )

        status = service.get_branch_status("feature/x", context)

        assert status.is_active is True
        assert status.ahead_develop == 0
        assert status.behind_develop == 1
        assert status.merged_into_develop is True
        assert status.merged_at_develop is not None
        assert status.merged_into_main is False
        assert status.merged_at_main is None

    def test_count_failure_raises(self, fake_gateway, mock_config):
        service = BranchStatusService("/fake/repo", mock_config, gateway=fake_gateway())
        with pytest.raises(CommandFailure):
            service.get_branch_status("gone", AnalysisContext(base="origin/main"))


class TestGetBranchStatuses:
    """Test whole-repository analysis."""

    def _gateway(self, fake_gateway):
        return fake_gateway({
            ("symbolic-ref", "refs/remotes/origin/HEAD"): "refs/remotes/origin/main",
            ("branch", "--show-current"): "main",
            BRANCH_LIST: "main\nfeature/a\nfeature/gone\nfeature/b",
            _counts("origin/main", "main"): "0\t0",
            _counts("origin/main", "feature/a"): "0\t1",
            _counts("origin/main", "feature/b"): "4\t2",
        })

    @pytest.mark.parametrize("sequential", [True, False])
    def test_order_and_skipping(self, fake_gateway, mock_config, sequential):
        """Test results keep enumeration order and failing branches are skipped."""
        mock_config['sequential'] = sequential
        service = BranchStatusService("/fake/repo", mock_config, gateway=self._gateway(fake_gateway))

        statuses = service.get_branch_statuses()

        assert [s.name for s in statuses] == ["main", "feature/a", "feature/b"]
        assert statuses[0].is_active is True
        assert (statuses[2].ahead, statuses[2].behind) == (2, 4)

    def test_no_branches(self, fake_gateway, mock_config):
        gateway = fake_gateway({BRANCH_LIST: ""})
        service = BranchStatusService("/fake/repo", mock_config, gateway=gateway)
        assert service.get_branch_statuses() == []

    def test_fetch_failure_is_not_fatal(self, fake_gateway, mock_config):
        mock_config['fetch'] = True
        gateway = self._gateway(fake_gateway)
        service = BranchStatusService("/fake/repo", mock_config, gateway=gateway)

        statuses = service.get_branch_statuses()

        assert ("fetch", "--quiet") in gateway.calls
        assert len(statuses) == 3

    def test_fetch_disabled(self, fake_gateway, mock_config):
        gateway = self._gateway(fake_gateway)
        BranchStatusService("/fake/repo", mock_config, gateway=gateway).get_branch_statuses()
        assert ("fetch", "--quiet") not in gateway.calls

    def test_pr_attached_from_lookup(self, fake_gateway, mock_config):
        pr = PullRequestInfo(7, "Add a", PRState.OPEN, "https://example.test/7", "github")
        resolver = Mock()
        resolver.platform = "github"
        resolver.resolve_review_request.side_effect = lambda name: pr if name == "feature/a" else None

        service = BranchStatusService(
            "/fake/repo",
            mock_config,
            gateway=self._gateway(fake_gateway),
            review_lookup=ReviewRequestLookup([resolver]),
        )
        statuses = {s.name: s for s in service.get_branch_statuses()}

        assert statuses["feature/a"].pr == pr
        assert statuses["feature/b"].pr is None


class TestBranchStatusRealRepository:
    """Test analysis against a real repository."""

    def test_statuses(self, git_repo_with_branches, mock_config):
        mock_config['fetch'] = True
        service = BranchStatusService(git_repo_with_branches.working_dir, mock_config)

        statuses = {s.name: s for s in service.get_branch_statuses()}

        assert statuses["main"].is_active is True
        assert (statuses["main"].ahead, statuses["main"].behind) == (0, 0)

        ahead = statuses["feature/ahead"]
        assert (ahead.ahead_develop, ahead.behind_develop) == (2, 0)
        assert ahead.merged_into_develop is False
        assert ahead.merged_into_main is False

        merged = statuses["feature/merged"]
        assert merged.merged_into_develop is True
        assert merged.merged_at_develop is not None
        assert merged.is_merged is True

        stale = statuses["feature/stale"]
        assert (stale.ahead_develop, stale.behind_develop) == (1, 3)
        assert stale.needs_rebase is False

    def test_without_develop(self, git_repo, mock_config):
        service = BranchStatusService(git_repo.working_dir, mock_config)
        statuses = service.get_branch_statuses()

        assert [s.name for s in statuses] == ["main"]
        assert statuses[0].ahead_develop is None
        assert statuses[0].merged_into_develop is None
        assert statuses[0].merged_into_main is True
