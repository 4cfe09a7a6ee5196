"""Analysis and display services for git-branch-health."""
