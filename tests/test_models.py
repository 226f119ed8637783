"""
Tests for registry models and the Registry view.
"""
from home_command.models import Area, Entity, Service
from home_command.registry import Registry


class TestEntity:
    """Tests for Entity.from_state."""

    def test_from_state(self):
        """Test that ids, names and search names are derived."""
        entity = Entity.from_state({
            "entity_id": "light.kitchen",
            "state": "on",
            "attributes": {"friendly_name": "Kitchen Light", "area_id": "kitchen"},
        })

        assert entity.domain == "light"
        assert entity.object_id == "kitchen"
        assert entity.state == "on"
        assert entity.area_id == "kitchen"
        assert entity.search_names == [
            "light.kitchen",
            "kitchen",
            "Kitchen Light",
            "kitchen light",
            "kitchen_light",
        ]
        assert entity.display_name == "Kitchen Light"

    def test_without_attributes(self):
        """Test that a bare state falls back to its id."""
        entity = Entity.from_state({"entity_id": "sensor.door"})

        assert entity.friendly_name is None
        assert entity.area_id is None
        assert entity.state == ""
        assert entity.search_names == ["sensor.door", "door"]
        assert entity.display_name == "sensor.door"

    def test_malformed_entity_id(self):
        """Test that an id without exactly one dot has no domain."""
        entity = Entity.from_state({"entity_id": "weird"})

        assert entity.domain == ""
        assert entity.object_id == "weird"


class TestArea:
    """Tests for Area.from_dict."""

    def test_search_names_include_aliases(self):
        """Test that aliases are searchable in both cases."""
        area = Area.from_dict({"area_id": "living_room", "name": "Living Room", "aliases": ["Lounge"]})

        assert area.search_names == [
            "living_room",
            "Living Room",
            "living room",
            "living_room",
            "Lounge",
            "lounge",
        ]

    def test_name_defaults_to_id(self):
        """Test that a nameless area uses its id."""
        area = Area.from_dict({"area_id": "garage"})

        assert area.name == "garage"
        assert area.aliases == []


class TestService:
    """Tests for Service."""

    def test_from_domain_payload(self):
        """Test that one domain payload expands to its services."""
        services = Service.from_domain_payload({
            "domain": "light",
            "services": {"turn_on": {"description": "Turn on"}, "toggle": {}},
        })

        assert [s.full_name for s in services] == ["light.turn_on", "light.toggle"]
        assert services[0].description == "Turn on"
        assert services[1].description == ""


class TestRegistry:
    """Tests for Registry lookups."""

    def test_lookups(self, registry):
        """Test id lookups and per-domain/area listings."""
        assert registry.get_entity("light.kitchen").friendly_name == "Kitchen Light"
        assert registry.get_entity("light.garage") is None
        assert registry.get_area("living_room").name == "Living Room"
        assert [e.entity_id for e in registry.entities_in_area("bedroom")] == [
            "switch.bedroom_fan",
            "climate.bedroom",
        ]
        assert len(registry.entities_in_domain("light")) == 2

    def test_services_for_domain(self, registry):
        """Test service names listed per domain."""
        assert registry.services_for_domain("light") == ["turn_on", "turn_off", "toggle"]
        assert registry.services_for_domain("fan") == []

    def test_domains_sorted(self, registry):
        """Test distinct domains in sorted order."""
        assert registry.domains() == ["climate", "light", "media_player", "switch"]

    def test_empty_registry(self):
        """Test an empty registry."""
        registry = Registry()

        assert not registry.has_entities()
        assert registry.domains() == []
        assert repr(registry) == "Registry(entities=0, areas=0, services=0)"
