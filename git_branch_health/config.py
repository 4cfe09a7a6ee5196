"""Configuration handling for git-branch-health"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Configuration for git-branch-health with validation."""

    # Analysis
    fetch: bool = True  # Best-effort fetch before computing ahead/behind
    sequential: bool = False  # Force sequential processing (disable parallelism)
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)

    # Execution modes
    dry_run: bool = False
    force_delete: bool = False  # Use "branch -D" instead of "branch -d"
    verbose: bool = False
    debug: bool = False

    # GitHub integration
    github_token: Optional[str] = None

    # Number of entries listed in previews before "... and N more"
    preview_limit: int = 10

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_workers()
        self._validate_preview_limit()

    def _validate_workers(self):
        """Validate workers is positive when set."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def _validate_preview_limit(self):
        """Validate preview_limit is positive."""
        if self.preview_limit <= 0:
            raise ValueError(f"preview_limit must be positive, got {self.preview_limit}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "fetch": self.fetch,
            "sequential": self.sequential,
            "workers": self.workers,
            "dry_run": self.dry_run,
            "force_delete": self.force_delete,
            "verbose": self.verbose,
            "debug": self.debug,
            "github_token": self.github_token,
            "preview_limit": self.preview_limit,
        }

    def get(self, key: str, default=None):
        """Get config value by key, so services accept a Config or a plain dict."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "fetch",
            "sequential",
            "workers",
            "dry_run",
            "force_delete",
            "verbose",
            "debug",
            "github_token",
            "preview_limit",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
