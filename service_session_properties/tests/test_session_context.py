"""
Unit tests for the session context models.
"""

import pytest

from shared.errors import ValidationError
from service_session_properties.app.rules.context import ResourceGroupId, SessionConfigurationContext


class TestResourceGroupId:
    """Test cases for ResourceGroupId."""

    def test_string_form(self):
        """Test that segments are joined with dots."""
        group = ResourceGroupId(("global", "adhoc", "alice"))

        assert str(group) == "global.adhoc.alice"

    def test_from_string(self):
        """Test parsing from the dotted form."""
        group = ResourceGroupId.from_string("global.pipeline")

        assert group.segments == ("global", "pipeline")
        assert group == ResourceGroupId(["global", "pipeline"])

    def test_parent(self):
        """Test walking up the hierarchy."""
        group = ResourceGroupId.from_string("global.adhoc.alice")

        assert str(group.parent) == "global.adhoc"
        assert group.parent.parent.parent is None

    @pytest.mark.parametrize("segments", [(), ("global", ""), ("a.b",)])
    def test_invalid_segments(self, segments):
        """Test that empty or dotted segments are rejected."""
        with pytest.raises(ValidationError):
            ResourceGroupId(segments)


class TestSessionConfigurationContext:
    """Test cases for SessionConfigurationContext."""

    def test_defaults(self):
        """Test that optional fields default to absent."""
        context = SessionConfigurationContext(user="alice")

        assert context.source is None
        assert context.client_tags == frozenset()
        assert context.query_type is None
        assert context.client_info is None
        assert context.resource_group_id is None

    def test_client_tags_frozen(self):
        """Test that client tags are copied into a frozenset."""
        tags = ["etl", "etl", "nightly"]
        context = SessionConfigurationContext(user="alice", client_tags=tags)

        assert context.client_tags == frozenset({"etl", "nightly"})
        assert isinstance(context.client_tags, frozenset)

    def test_user_required(self):
        """Test that a null user is rejected."""
        with pytest.raises(ValidationError):
            SessionConfigurationContext(user=None)

    def test_null_client_tags_rejected(self):
        """Test that null client tags are rejected."""
        with pytest.raises(ValidationError):
            SessionConfigurationContext(user="alice", client_tags=None)
