"""
git-branch-health - Branch health scoring, rebase-conflict forecasts and merged-branch cleanup
"""

from .__version__ import __version__
from .core import BranchHealthKeeper
from .cli.main import main

__all__ = ["BranchHealthKeeper", "main", "__version__"]
