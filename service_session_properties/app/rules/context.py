"""
Session context presented to match rules.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional, Tuple

from shared.errors import ValidationError


@dataclass(frozen=True)
class ResourceGroupId:
    """Hierarchical resource group identifier, rendered as ``global.adhoc.alice``."""
    segments: Tuple[str, ...]

    def __post_init__(self):
        segments = tuple(self.segments)
        if not segments:
            raise ValidationError("Resource group id must have at least one segment")
        for segment in segments:
            if not segment or "." in segment:
                raise ValidationError("Invalid resource group segment", {"segment": segment})
        object.__setattr__(self, "segments", segments)

    @classmethod
    def from_string(cls, value: str) -> "ResourceGroupId":
        return cls(tuple(value.split(".")))

    @property
    def parent(self) -> Optional["ResourceGroupId"]:
        if len(self.segments) == 1:
            return None
        return ResourceGroupId(self.segments[:-1])

    def __str__(self) -> str:
        return ".".join(self.segments)


@dataclass(frozen=True)
class SessionConfigurationContext:
    """Read-only facts about an incoming query session."""
    user: str
    source: Optional[str] = None
    client_tags: FrozenSet[str] = field(default_factory=frozenset)
    query_type: Optional[str] = None
    client_info: Optional[str] = None
    # Any value with a meaningful str(), usually a ResourceGroupId
    resource_group_id: Optional[Any] = None

    def __post_init__(self):
        if self.user is None:
            raise ValidationError("user is null")
        if self.client_tags is None:
            raise ValidationError("client_tags is null")
        object.__setattr__(self, "client_tags", frozenset(self.client_tags))
