"""
Configuration models for session match rules.
"""

import re
from typing import Dict, List, Optional, Pattern

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from shared.errors import ValidationError as SessionValidationError
from .matcher import SessionMatchSpec
from .version import CoordinatorVersion


def _property_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class SessionMatchSpecConfig(BaseModel):
    """JSON representation of a session match rule."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        frozen=True
    )

    user: Optional[Pattern[str]] = Field(None, description="User name pattern")
    source: Optional[Pattern[str]] = Field(None, description="Query source pattern")
    client_tags: Optional[List[str]] = Field(None, alias="clientTags", description="Required client tags")
    query_type: Optional[str] = Field(None, alias="queryType", description="Query type, case-insensitive")
    group: Optional[Pattern[str]] = Field(None, description="Resource group id pattern")
    client_info: Optional[Pattern[str]] = Field(None, alias="clientInfo", description="Client info pattern")
    override_session_properties: Optional[bool] = Field(
        None, alias="overrideSessionProperties", description="Passed through to the caller"
    )
    session_properties: Dict[str, str] = Field(..., alias="sessionProperties", description="Properties to apply")
    min_version: Optional[str] = Field(None, alias="minVersion", description="Lowest matching coordinator version")
    max_version: Optional[str] = Field(None, alias="maxVersion", description="Highest matching coordinator version")

    @field_validator("user", "source", "group", "client_info", mode="before")
    @classmethod
    def compile_pattern(cls, value):
        if value is None or isinstance(value, re.Pattern):
            return value
        if not isinstance(value, str):
            raise ValueError("pattern must be a string")
        try:
            return re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e

    @field_validator("session_properties", mode="before")
    @classmethod
    def stringify_property_values(cls, value):
        # Unquoted JSON scalars ("hash_partition_count": 8) are accepted as text
        if not isinstance(value, dict):
            return value
        return {key: _property_value(item) for key, item in value.items()}

    @field_validator("min_version", "max_version")
    @classmethod
    def check_version(cls, value):
        if value is None:
            return value
        try:
            CoordinatorVersion(value)
        except SessionValidationError as e:
            raise ValueError(f"{e.message}: {value!r}") from e
        return value

    @field_serializer("user", "source", "group", "client_info")
    def serialize_pattern(self, value: Optional[Pattern[str]]) -> Optional[str]:
        return value.pattern if value is not None else None

    def to_match_spec(self) -> SessionMatchSpec:
        """Build the immutable rule described by this configuration."""
        return SessionMatchSpec(
            user_regex=self.user,
            source_regex=self.source,
            client_tags=frozenset(self.client_tags or ()),
            query_type=self.query_type,
            resource_group_regex=self.group,
            client_info_regex=self.client_info,
            override_session_properties=self.override_session_properties,
            session_properties=self.session_properties,
            min_version=self.min_version,
            max_version=self.max_version,
        )

    @classmethod
    def from_match_spec(cls, spec: SessionMatchSpec) -> "SessionMatchSpecConfig":
        return cls(
            user=spec.user_regex,
            source=spec.source_regex,
            client_tags=sorted(spec.client_tags) if spec.client_tags else None,
            query_type=spec.query_type,
            group=spec.resource_group_regex,
            client_info=spec.client_info_regex,
            override_session_properties=spec.override_session_properties,
            session_properties=dict(spec.session_properties),
            min_version=str(spec.min_version) if spec.min_version is not None else None,
            max_version=str(spec.max_version) if spec.max_version is not None else None,
        )
