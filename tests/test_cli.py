"""Tests for the command-line interface"""
from git_branch_health.cli import main, parse_args


class TestParseArgs:
    """Test argument parsing."""

    def test_default_command_is_report(self):
        args = parse_args([])
        assert args.command == "report"
        assert args.no_fetch is False
        assert args.repo == "."

    def test_global_options(self):
        args = parse_args(["--no-fetch", "--workers", "4", "--sequential", "-C", "/tmp/x", "report"])
        assert args.no_fetch is True
        assert args.workers == 4
        assert args.sequential is True
        assert args.repo == "/tmp/x"

    def test_rebase_preview(self):
        args = parse_args(["rebase-preview", "feature/x", "--onto", "origin/develop"])
        assert args.command == "rebase-preview"
        assert args.branch == "feature/x"
        assert args.onto == "origin/develop"

    def test_prune_merged(self):
        args = parse_args(["prune-merged", "--dry-run", "--force"])
        assert args.dry_run is True
        assert args.force is True


class TestMain:
    """Test end-to-end CLI runs against real repositories."""

    def test_report(self, git_repo_with_branches, capsys):
        exit_code = main(["-C", git_repo_with_branches.working_dir, "--no-fetch"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "Total: 5" in output
        assert "healthy: 3" in output
        assert "attention: 2" in output

    def test_prune_merged_dry_run(self, git_repo_with_branches, capsys):
        exit_code = main(["-C", git_repo_with_branches.working_dir, "--no-fetch", "prune-merged", "--dry-run"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "Merged 1 branch to delete:" in output
        assert "feature/merged" in [h.name for h in git_repo_with_branches.heads]

    def test_prune_merged_force(self, git_repo_with_branches, capsys):
        exit_code = main(["-C", git_repo_with_branches.working_dir, "--no-fetch", "prune-merged", "--force"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "Deleted 1 branch:" in output
        assert "feature/merged" not in [h.name for h in git_repo_with_branches.heads]

    def test_prune_merged_failure_exit_code(self, git_repo_with_branches, capsys):
        exit_code = main(["-C", git_repo_with_branches.working_dir, "--no-fetch", "prune-merged"])
        output = capsys.readouterr().out

        assert exit_code == 1
        assert "Could not delete 1 branch:" in output
        assert "git branch -D feature/merged" in output

    def test_rebase_preview(self, conflicting_repo, capsys):
        exit_code = main([
            "-C", conflicting_repo.working_dir, "--no-fetch", "rebase-preview", "feature/conflict", "--onto", "main",
        ])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "1 file will have conflicts" in output
        assert "file.txt" in output
        assert conflicting_repo.active_branch.name == "main"

    def test_rebase(self, conflicting_repo, capsys):
        exit_code = main(["-C", conflicting_repo.working_dir, "--no-fetch", "rebase", "feature/clean", "--onto", "main"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "Rebased feature/clean onto main" in output
        assert conflicting_repo.is_ancestor("main", "feature/clean")

    def test_outside_repository(self, temp_dir, capsys):
        exit_code = main(["-C", str(temp_dir), "--no-fetch"])
        output = capsys.readouterr().out

        assert exit_code == 1
        assert "No Git repository found" in output
