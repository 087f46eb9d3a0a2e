"""
Entry point binding configured session property rules to the running coordinator.
"""

from typing import List, Mapping, Optional

from shared.config import BaseConfig, get_config
from shared.logging import configure_logging, get_logger

from .rules.context import SessionConfigurationContext
from .rules.loader import load_session_match_specs
from .rules.matcher import SessionMatchSpec
from .rules.version import CoordinatorVersion


class SessionPropertyRules:
    """Rules from the configured file, evaluated against the configured coordinator version."""

    def __init__(self, config: Optional[BaseConfig] = None):
        self.config = config or get_config()
        self.logger = get_logger("session_properties.rules")
        self.coordinator_version = CoordinatorVersion(self.config.coordinator_version)
        self.specs: List[SessionMatchSpec] = []

        if self.config.rules_file:
            self.specs = load_session_match_specs(self.config.rules_file)
        else:
            self.logger.warning("No rules file configured")

    def evaluate(self, context: SessionConfigurationContext) -> List[Mapping[str, str]]:
        """Evaluate every rule in file order.

        Returns one mapping per rule; deciding how they combine is up to
        the caller.
        """
        return [spec.match(context, self.coordinator_version) for spec in self.specs]


def create_rules(config: Optional[BaseConfig] = None) -> SessionPropertyRules:
    """Configure logging and load the session property rules."""
    config = config or get_config()
    configure_logging("session_properties", config.log_level)
    return SessionPropertyRules(config)
