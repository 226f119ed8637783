"""
Tests for the pydantic command and service-call schemas.
"""
import pytest
from pydantic import ValidationError

from home_command.schemas import ParsedCommand, ParsedTarget, ServiceCall, ServiceTarget


class TestParsedCommand:
    """Tests for ParsedCommand."""

    def test_json_round_trip(self):
        """Test that a parsed command survives JSON serialization."""
        parsed = ParsedCommand(
            original="dim kitchen 50%",
            action="turn_on",
            targets=[ParsedTarget(
                entity_id="light.kitchen",
                friendly_name="Kitchen Light",
                match_type="Typo(distance=1)",
                matched_input="kitchn",
            )],
            parameters={"brightness_pct": 50},
            confidence=1.0,
            interpretation="turn_on Kitchen Light brightness_pct=50",
            matched_area="kitchen",
        )

        assert ParsedCommand.from_json(parsed.to_json()) == parsed

    def test_defaults(self):
        """Test the defaults of a bare command."""
        parsed = ParsedCommand(original="hello")

        assert parsed.action is None
        assert parsed.targets == []
        assert parsed.parameters == {}
        assert parsed.notes == []
        assert parsed.matched_area is None

    def test_confidence_bounds(self):
        """Test that confidence must stay within 0-1."""
        with pytest.raises(ValidationError):
            ParsedCommand(original="x", confidence=1.5)

    def test_target_display_name(self):
        """Test that the entity id stands in for a missing friendly name."""
        named = ParsedTarget(entity_id="light.a", friendly_name="Lamp", match_type="Exact", matched_input="a")
        anonymous = ParsedTarget(entity_id="light.a", match_type="Exact", matched_input="a")

        assert named.display_name == "Lamp"
        assert anonymous.display_name == "light.a"


class TestServiceCallSchema:
    """Tests for ServiceCall and ServiceTarget."""

    def test_json_round_trip(self):
        """Test that a service call survives JSON serialization."""
        call = ServiceCall(
            domain="light",
            service="turn_on",
            target=ServiceTarget(entity_id=["light.kitchen"]),
            data={"brightness": 128},
        )

        assert ServiceCall.from_json(call.to_json()) == call

    def test_area_id_serialized_when_set(self):
        """Test that an explicit area scope is kept."""
        target = ServiceTarget(entity_id=[], area_id=["kitchen"])

        assert target.model_dump() == {"entity_id": [], "area_id": ["kitchen"]}

    def test_area_id_dropped_when_missing(self):
        """Test that a missing area scope is left out."""
        assert ServiceTarget(entity_id=["light.a"]).model_dump() == {"entity_id": ["light.a"]}
