"""
Session match rule evaluation.

A SessionMatchSpec holds optional predicates over a session context plus
the session properties to apply when every predicate holds. Rules are
immutable after construction and may be evaluated concurrently.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Pattern, Union

from shared.errors import ValidationError
from shared.logging import get_logger
from shared.metrics import record_match_evaluation
from .context import SessionConfigurationContext
from .version import CoordinatorVersion

logger = get_logger("session_properties.matcher")

_NO_PROPERTIES: Mapping[str, str] = MappingProxyType({})

RegexLike = Union[str, Pattern[str]]
VersionLike = Union[str, CoordinatorVersion]


def _compile(name: str, value: Optional[RegexLike]) -> Optional[Pattern[str]]:
    if value is None or isinstance(value, re.Pattern):
        return value
    try:
        return re.compile(value)
    except re.error as e:
        raise ValidationError(f"Invalid {name} pattern", {"pattern": value, "error": str(e)}) from e


def _version(value: Optional[VersionLike]) -> Optional[CoordinatorVersion]:
    if value is None or isinstance(value, CoordinatorVersion):
        return value
    return CoordinatorVersion(value)


def _full_match(pattern: Pattern[str], value: str) -> bool:
    return pattern.fullmatch(value) is not None


@dataclass(frozen=True)
class SessionMatchSpec:
    """Session property rule.

    Every optional predicate that is absent places no constraint on the
    session, so a rule with nothing but ``session_properties`` matches
    every context and coordinator version.
    """
    user_regex: Optional[Pattern[str]] = None
    source_regex: Optional[Pattern[str]] = None
    client_tags: FrozenSet[str] = field(default_factory=frozenset)
    query_type: Optional[str] = None
    resource_group_regex: Optional[Pattern[str]] = None
    client_info_regex: Optional[Pattern[str]] = None
    override_session_properties: Optional[bool] = None
    session_properties: Mapping[str, str] = field(default_factory=dict, hash=False)
    min_version: Optional[CoordinatorVersion] = None
    max_version: Optional[CoordinatorVersion] = None

    def __post_init__(self):
        if self.client_tags is None:
            raise ValidationError("client_tags is null")
        if self.session_properties is None:
            raise ValidationError("session_properties is null")

        normalized = {
            "user_regex": _compile("user", self.user_regex),
            "source_regex": _compile("source", self.source_regex),
            "resource_group_regex": _compile("group", self.resource_group_regex),
            "client_info_regex": _compile("clientInfo", self.client_info_regex),
            "client_tags": frozenset(self.client_tags),
            "session_properties": MappingProxyType(dict(self.session_properties)),
            "min_version": _version(self.min_version),
            "max_version": _version(self.max_version),
        }
        for name, value in normalized.items():
            object.__setattr__(self, name, value)

    def match(
        self,
        context: SessionConfigurationContext,
        coordinator_version: CoordinatorVersion
    ) -> Mapping[str, str]:
        """Return the session properties if this rule applies, else an empty mapping.

        An empty result means either the rule did not match or it matched
        with no properties; callers cannot tell these apart.
        """
        if context is None:
            raise ValidationError("context is null")
        if coordinator_version is None:
            raise ValidationError("coordinator_version is null")

        rejected_by = self._first_failing_predicate(context, coordinator_version)
        record_match_evaluation(rejected_by is None)
        if rejected_by is not None:
            logger.debug("Session match rejected", predicate=rejected_by, user=context.user)
            return _NO_PROPERTIES
        return self.session_properties

    def _first_failing_predicate(
        self,
        context: SessionConfigurationContext,
        coordinator_version: CoordinatorVersion
    ) -> Optional[str]:
        if self.user_regex is not None and not _full_match(self.user_regex, context.user):
            return "user"

        if self.source_regex is not None:
            if not _full_match(self.source_regex, context.source or ""):
                return "source"

        if self.client_tags and not context.client_tags.issuperset(self.client_tags):
            return "clientTags"

        if self.query_type is not None:
            if self.query_type.lower() != (context.query_type or "").lower():
                return "queryType"

        if self.client_info_regex is not None:
            if not _full_match(self.client_info_regex, context.client_info or ""):
                return "clientInfo"

        if self.resource_group_regex is not None:
            group = context.resource_group_id
            resource_group_id = str(group) if group is not None else ""
            if not _full_match(self.resource_group_regex, resource_group_id):
                return "group"

        if self.max_version is not None or self.min_version is not None:
            valid_version = True
            if self.max_version is not None:
                valid_version = coordinator_version.less_than_or_equal_to(self.max_version)
            if self.min_version is not None:
                valid_version = valid_version and coordinator_version.greater_than_or_equal_to(self.min_version)
            if not valid_version:
                return "version"

        return None

    def to_config(self):
        """Return the JSON configuration model describing this rule."""
        from .models import SessionMatchSpecConfig
        return SessionMatchSpecConfig.from_match_spec(self)
