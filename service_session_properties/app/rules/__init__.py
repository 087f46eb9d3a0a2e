"""
Session property rules package.

Defines the immutable match rule that decides which session properties
apply to an incoming query session, together with the session context,
coordinator version and JSON configuration models it is built from.

Modules of interest:
- matcher: SessionMatchSpec and its match algorithm.
- context: SessionConfigurationContext and ResourceGroupId.
- version: CoordinatorVersion ordering.
- models: pydantic model for the JSON rule representation.
- loader: Reading a rule list from a JSON file.

Combining the results of several matching rules is left to the caller.
"""

from .context import ResourceGroupId, SessionConfigurationContext
from .loader import load_session_match_specs, parse_session_match_specs
from .matcher import SessionMatchSpec
from .models import SessionMatchSpecConfig
from .version import CoordinatorVersion

__all__ = [
    "CoordinatorVersion",
    "ResourceGroupId",
    "SessionConfigurationContext",
    "SessionMatchSpec",
    "SessionMatchSpecConfig",
    "load_session_match_specs",
    "parse_session_match_specs",
]
