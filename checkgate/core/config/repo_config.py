"""
Repository configuration.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class RepoConfig:
    """Where a repository keeps its rules file."""

    base_path: str = ".checkgate"
    rules_file: str = "rules.yaml"

    @property
    def rules_path(self) -> Path:
        return Path(self.base_path) / self.rules_file
