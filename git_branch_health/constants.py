"""Shared constants for git-branch-health."""

from typing import Dict, Tuple

# Branches that are never deleted and always score as healthy
PROTECTED_BRANCHES: Tuple[str, ...] = ("main", "master", "develop", "development")

REMOTE_NAME = "origin"

# Base branch resolution order
REMOTE_BASE_CANDIDATES: Tuple[str, ...] = ("origin/main", "origin/develop", "origin/master")
LOCAL_BASE_CANDIDATES: Tuple[str, ...] = ("main", "develop", "master")
FALLBACK_BASE_BRANCH = "main"

# Integration branches tracked for develop/main relative counts
DEVELOP_REF = "origin/develop"
MAIN_REF = "origin/main"

# Health score thresholds
HEALTHY_THRESHOLD = 80
ATTENTION_THRESHOLD = 50
MERGED_SCORE_CAP = 70

# Icon and Rich color per health level
HEALTH_PRESENTATION: Dict[str, Tuple[str, str]] = {
    "healthy": ("pass", "green"),
    "attention": ("warning", "yellow"),
    "critical": ("error", "red"),
}

HEALTH_LEVEL_LABELS: Dict[str, str] = {
    "healthy": "Healthy",
    "attention": "Needs Attention",
    "critical": "Critical",
}

# Symbols used in CLI output
SYMBOL_CURRENT_BRANCH = " *"
SYMBOL_HEALTH = {
    "pass": "✓",
    "warning": "⚠",
    "error": "✗",
}

CONFLICT_MARKERS: Tuple[str, ...] = ("<<<<<<<", "=======", ">>>>>>>")
