"""Tests for component_i18n.i18n.string_keys module."""

from enum import Enum

import pytest

from component_i18n.i18n import (
    ComponentConfig,
    InvalidStringKeyEnumError,
    StringKeyNotRegisteredError,
    create_string_keys,
)
from component_i18n.i18n.string_keys import (
    StringKeyResolver,
    extract_component_id,
)


class TaggedKeys(str, Enum):
    __component_id__ = "tagged"
    FIRST = "tagged.first"
    SECOND = "tagged.second"


class PrefixedKeys(str, Enum):
    ALPHA = "shop.alpha"
    BETA = "shop.beta"


class MixedKeys(str, Enum):
    ONE = "a.one"
    TWO = "b.two"


@pytest.fixture
def components():
    return []


@pytest.fixture
def resolver(components):
    return StringKeyResolver(lambda: components)


@pytest.mark.unit
class TestStringKeyEnum:
    """Tests for StringKeyEnum and create_string_keys()."""

    def test_member_access(self):
        """Members are exposed as attributes."""
        keys = create_string_keys("user", {"Welcome": "user.welcome"})
        assert keys.Welcome == "user.welcome"
        assert "user.welcome" in keys
        assert list(keys) == ["user.welcome"]
        assert len(keys) == 1

    def test_unknown_member(self):
        """Unknown members raise AttributeError."""
        keys = create_string_keys("user", {"Welcome": "user.welcome"})
        with pytest.raises(AttributeError):
            _ = keys.Missing

    def test_equality_by_component_id(self):
        """Two enums with the same component id are equal."""
        first = create_string_keys("user", {"A": "user.a"})
        second = create_string_keys("user", {"B": "user.b"})
        assert first == second
        assert hash(first) == hash(second)
        assert first != create_string_keys("other", {"A": "user.a"})

    def test_empty_component_id_rejected(self):
        """An empty component id is rejected."""
        with pytest.raises(InvalidStringKeyEnumError):
            create_string_keys("", {"A": "a"})

    def test_non_string_member_rejected(self):
        """Member values must be strings."""
        with pytest.raises(InvalidStringKeyEnumError):
            create_string_keys("user", {"A": 1})


@pytest.mark.unit
class TestExtractComponentId:
    """Tests for extract_component_id()."""

    def test_string_key_enum(self):
        """StringKeyEnum carries its id."""
        assert extract_component_id(create_string_keys("user", {"A": "x"})) == "user"

    def test_tagged_enum(self):
        """__component_id__ is identity metadata."""
        assert extract_component_id(TaggedKeys) == "tagged"

    def test_structural_prefix(self):
        """A shared value prefix names the component."""
        assert extract_component_id(PrefixedKeys) == "shop"
        assert extract_component_id({"x": "cart.x", "y": "cart.y"}) == "cart"

    def test_mixed_prefixes(self):
        """Values with different prefixes yield no id."""
        assert extract_component_id(MixedKeys) is None

    def test_unprefixed_values(self):
        """Values without a dot yield no id."""
        assert extract_component_id({"x": "plain"}) is None


@pytest.mark.unit
class TestStringKeyResolver:
    """Tests for StringKeyResolver registration and resolution."""

    def test_register_returns_component_id(self, resolver):
        """register() returns the extracted id."""
        assert resolver.register(TaggedKeys) == "tagged"
        assert resolver.has(TaggedKeys)
        assert resolver.resolve_component_id("tagged.first") == "tagged"

    def test_register_is_idempotent(self, resolver):
        """Registering the same object twice adds one entry."""
        resolver.register(TaggedKeys)
        resolver.register(TaggedKeys)
        assert len(resolver.get_all()) == 1

    def test_equal_string_key_enums_are_one_entry(self, resolver):
        """A structurally equal copy is already registered."""
        resolver.register(create_string_keys("user", {"A": "user.a"}))
        copy = create_string_keys("user", {"A": "user.a"})
        assert resolver.has(copy)
        assert resolver.register(copy) == "user"
        assert len(resolver.get_all()) == 1

    def test_override_wins(self, resolver):
        """An explicit component id overrides metadata."""
        assert resolver.register(TaggedKeys, "custom") == "custom"
        assert resolver.resolve_component_id("tagged.first") == "custom"

    def test_missing_metadata_rejected(self, resolver):
        """Without metadata or override, registration fails."""
        with pytest.raises(InvalidStringKeyEnumError):
            resolver.register(MixedKeys)

    def test_non_enum_rejected(self, resolver):
        """Objects that hold no string values are rejected."""
        with pytest.raises(InvalidStringKeyEnumError):
            resolver.register(42, "x")

    def test_value_owned_by_other_component(self, resolver):
        """A value cannot belong to two components."""
        resolver.register({"a": "shared.key"}, "first")
        with pytest.raises(InvalidStringKeyEnumError):
            resolver.register({"b": "shared.key"}, "second")

    def test_unknown_value(self, resolver):
        """Unknown values fail with StringKeyNotRegisteredError."""
        result = resolver.resolve("nope")
        assert not result.is_success
        assert isinstance(result.error, StringKeyNotRegisteredError)
        with pytest.raises(StringKeyNotRegisteredError):
            resolver.resolve_component_id("nope")

    def test_scan_fallback(self, resolver, components):
        """Component keys resolve without an enum."""
        components.append(ComponentConfig(id="legacy", strings={"en-US": {"old": "Old"}}))
        result = resolver.resolve("old")
        assert result.data == "legacy"
        assert result.message == "scan_fallback"

    def test_scan_cache_needs_invalidation(self, resolver, components):
        """The scan cache is stale until invalidated."""
        assert not resolver.resolve("late").is_success
        components.append(ComponentConfig(id="late", strings={"en-US": {"late": "L"}}))

        assert not resolver.resolve("late").is_success
        resolver.invalidate_scan_cache()
        assert resolver.resolve("late").data == "late"

    def test_scan_uses_first_language_only(self, resolver, components):
        """Keys that only exist in later languages are not scanned."""
        components.append(
            ComponentConfig(id="c", strings={"en-US": {"a": "A"}, "fr": {"b": "B"}})
        )
        assert resolver.resolve("a").data == "c"
        assert not resolver.resolve("b").is_success

    def test_clear(self, resolver):
        """clear() forgets every enum."""
        resolver.register(TaggedKeys)
        resolver.clear()
        assert not resolver.has(TaggedKeys)
        assert resolver.get_all() == []
