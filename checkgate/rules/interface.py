from abc import ABC, abstractmethod
from typing import Any

from checkgate.rules.models import RuleSet


class RuleLoader(ABC):
    """
    Abstract interface for fetching a rule set.

    This interface allows us to swap out different rule sources
    (YAML files, built-in checklists, etc.) without changing the application logic.
    """

    @abstractmethod
    def get_rules(self, source: Any) -> RuleSet:
        """
        Load a rule set.

        Args:
            source: Loader-specific location of the rules (path, checklist name, ...)

        Returns:
            A checked RuleSet (non-empty, unique identifiers)
        """
        pass
