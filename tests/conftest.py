"""
Shared fixtures: a small home with lights, a fan, a TV and a thermostat.
"""
import pytest

from home_command.interaction import CommandParser
from home_command.models import Area, Entity, Service
from home_command.registry import Registry
from home_command.resolution import RegistryMatcher


def make_entity(entity_id, friendly_name=None, area_id=None, state="off"):
    attributes = {}
    if friendly_name:
        attributes["friendly_name"] = friendly_name
    if area_id:
        attributes["area_id"] = area_id
    return Entity.from_state({"entity_id": entity_id, "state": state, "attributes": attributes})


@pytest.fixture
def registry():
    entities = [
        make_entity("light.kitchen", "Kitchen Light", "kitchen", state="on"),
        make_entity("light.living_room", "Living Room Light", "living_room"),
        make_entity("switch.bedroom_fan", "Bedroom Fan", "bedroom"),
        make_entity("media_player.living_room_tv", "Living Room TV", "living_room", state="playing"),
        make_entity("climate.bedroom", "Bedroom Thermostat", "bedroom", state="heat"),
    ]
    areas = [
        Area.from_dict({"area_id": "kitchen", "name": "Kitchen"}),
        Area.from_dict({"area_id": "living_room", "name": "Living Room", "aliases": ["Lounge"]}),
        Area.from_dict({"area_id": "bedroom", "name": "Bedroom"}),
    ]
    services = [
        Service.create("light", "turn_on", "Turn on lights"),
        Service.create("light", "turn_off", "Turn off lights"),
        Service.create("light", "toggle"),
        Service.create("switch", "toggle"),
        Service.create("switch", "turn_on"),
        Service.create("media_player", "volume_set"),
        Service.create("climate", "set_temperature"),
    ]
    return Registry(entities=entities, areas=areas, services=services)


@pytest.fixture
def many_lights_registry():
    """Sixteen anonymous lamps, one more than the domain fallback allows."""
    entities = [make_entity(f"light.lamp_{i}", f"Lamp {i}") for i in range(1, 17)]
    return Registry(entities=entities, services=[Service.create("light", "turn_on")])


@pytest.fixture
def matcher():
    return RegistryMatcher()


@pytest.fixture
def parser():
    return CommandParser()
