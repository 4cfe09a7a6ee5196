"""Branch health model"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple

from git_branch_health.constants import HEALTH_PRESENTATION
from git_branch_health.models.branch import BranchStatus


class HealthLevel(Enum):
    """Three-level health classification."""
    HEALTHY = "healthy"
    ATTENTION = "attention"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        """Sort rank: critical sorts first."""
        return {"critical": 0, "attention": 1, "healthy": 2}[self.value]


@dataclass(frozen=True)
class BranchHealth:
    """Score, level and issues derived from a BranchStatus."""
    score: int
    level: HealthLevel
    issues: Tuple[str, ...] = ()

    @property
    def icon(self) -> str:
        return HEALTH_PRESENTATION[self.level.value][0]

    @property
    def color(self) -> str:
        return HEALTH_PRESENTATION[self.level.value][1]


@dataclass
class ScoredBranch:
    """A branch status paired with its health, once computed."""
    status: BranchStatus
    health: Optional[BranchHealth] = None
