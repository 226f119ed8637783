"""
Tests for building service calls from parsed commands.
"""
import json

import pytest

from home_command.exceptions import NoTargetsError
from home_command.schemas import ParsedCommand, ParsedTarget
from home_command.service_call import FALLBACK_DOMAIN, convert_parameters, to_service_call


def command(entity_ids, action="turn_on", parameters=None):
    return ParsedCommand(
        original="test",
        action=action,
        targets=[
            ParsedTarget(entity_id=entity_id, match_type="Exact", matched_input=entity_id)
            for entity_id in entity_ids
        ],
        parameters=parameters or {},
        confidence=1.0,
    )


class TestToServiceCall:
    """Tests for to_service_call."""

    def test_simple_turn_on(self):
        """Test a standard domain call."""
        call = to_service_call(command(["light.kitchen"]))

        assert call.domain == "light"
        assert call.service == "turn_on"
        assert call.full_name == "light.turn_on"
        assert call.target.entity_id == ["light.kitchen"]

    def test_all_targets_kept(self):
        """Test that every target entity is addressed."""
        call = to_service_call(command(["light.kitchen", "light.living_room"]))

        assert call.target.entity_id == ["light.kitchen", "light.living_room"]

    def test_missing_action_defaults_to_turn_on(self):
        """Test the default action."""
        call = to_service_call(command(["switch.bedroom_fan"], action=None))

        assert call.service == "turn_on"

    def test_nonstandard_domain_uses_fallback(self):
        """Test that helper domains go through the cross-domain services."""
        call = to_service_call(command(["spots.wohnzimmer"]))

        assert call.domain == FALLBACK_DOMAIN == "homeassistant"
        assert call.service == "turn_on"
        assert call.target.entity_id == ["spots.wohnzimmer"]

    def test_domain_override(self):
        """Test that open on a lock calls unlock."""
        call = to_service_call(command(["lock.front_door"], action="open_cover"))

        assert call.full_name == "lock.unlock"

    def test_unknown_action_passes_through(self):
        """Test that services outside the action table are kept as-is."""
        call = to_service_call(command(["climate.bedroom"], action="set_temperature"))

        assert call.full_name == "climate.set_temperature"

    def test_no_targets(self):
        """Test that a call cannot be built without targets."""
        with pytest.raises(NoTargetsError, match="No targets specified"):
            to_service_call(command([]))

    def test_parsed_command_shortcut(self):
        """Test ParsedCommand.to_service_call."""
        call = command(["light.kitchen"], parameters={"brightness_pct": 50}).to_service_call()

        assert call.data == {"brightness": 128}

    def test_area_id_omitted_from_json(self):
        """Test that the unused area scope is not serialized."""
        payload = json.loads(to_service_call(command(["light.kitchen"])).to_json())

        assert payload["target"] == {"entity_id": ["light.kitchen"]}


class TestConvertParameters:
    """Tests for convert_parameters."""

    @pytest.mark.parametrize("pct,brightness", [
        (0, 0),
        (30, 77),
        (50, 128),
        (100, 255),
    ])
    def test_brightness_pct(self, pct, brightness):
        """Test percent to 0-255 brightness, rounding half away from zero."""
        assert convert_parameters({"brightness_pct": pct}, "light") == {"brightness": brightness}

    def test_volume_pct(self):
        """Test percent to 0-1 volume level."""
        assert convert_parameters({"volume_pct": 30}, "media_player") == {"volume_level": 0.3}

    def test_volume_pct_clamped(self):
        """Test that volume level stays within 0-1."""
        assert convert_parameters({"volume_pct": 150}, "media_player") == {"volume_level": 1.0}
        assert convert_parameters({"volume_pct": -5}, "media_player") == {"volume_level": 0.0}

    def test_value_for_light(self):
        """Test that small values are percentages and large ones raw brightness."""
        assert convert_parameters({"value": 50}, "light") == {"brightness": 128}
        assert convert_parameters({"value": 150}, "light") == {"brightness": 150}

    def test_value_for_climate(self):
        """Test that climate values are temperatures."""
        assert convert_parameters({"value": 21}, "climate") == {"temperature": 21}

    def test_value_for_media_player(self):
        """Test that media player values are volume levels."""
        assert convert_parameters({"value": 40}, "media_player") == {"volume_level": 0.4}

    def test_value_for_other_domain(self):
        """Test that other domains keep the raw value."""
        assert convert_parameters({"value": 3}, "fan") == {"value": 3}

    def test_unknown_keys_pass_through(self):
        """Test that unrecognised parameters are copied."""
        assert convert_parameters({"color_name": "red"}, "light") == {"color_name": "red"}

    def test_non_integer_percent_dropped(self):
        """Test that a non-integer percentage is ignored."""
        assert convert_parameters({"brightness_pct": "high"}, "light") == {}
