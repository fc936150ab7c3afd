"""Tests for core domain models and list validation."""

import dataclasses
import math

import pytest

from perfevents.core.exceptions import AttributeValidationError
from perfevents.core.models import (
    Attribute,
    PerformanceEvent,
    validate_attributes,
    validate_counters,
)

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]


class TestAttribute:
    """Tests for the Attribute model."""

    def test_attribute_holds_name_and_value(self) -> None:
        attr = Attribute("style_id", "mapbox://styles/mapbox/streets-v10")
        assert attr.name == "style_id"
        assert attr.value == "mapbox://styles/mapbox/streets-v10"

    def test_attribute_is_immutable(self) -> None:
        """Attribute value cannot be reassigned after construction."""
        attr = Attribute("frames", 362)
        with pytest.raises(dataclasses.FrozenInstanceError):
            attr.value = 363  # type: ignore[misc]

    def test_attributes_compare_by_value(self) -> None:
        assert Attribute("frames", 362) == Attribute("frames", 362)


class TestValidateAttributes:
    """Tests for validate_attributes()."""

    def test_returns_tuple_in_input_order(self) -> None:
        attrs = [Attribute("b", "2"), Attribute("a", "1")]
        result = validate_attributes(attrs)
        assert result == (Attribute("b", "2"), Attribute("a", "1"))

    def test_empty_list_is_valid(self) -> None:
        assert validate_attributes([]) == ()

    def test_empty_name_raises(self) -> None:
        with pytest.raises(AttributeValidationError, match="non-empty string"):
            validate_attributes([Attribute("", "x")])

    def test_none_name_raises(self) -> None:
        """A null name is rejected, not passed through."""
        with pytest.raises(AttributeValidationError, match="non-empty string"):
            validate_attributes([Attribute(None, "x")])  # type: ignore[arg-type]

    def test_duplicate_name_raises(self) -> None:
        with pytest.raises(AttributeValidationError, match="duplicate attribute"):
            validate_attributes([Attribute("a", "1"), Attribute("a", "2")])

    def test_numeric_value_raises(self) -> None:
        """Attributes carry text only."""
        with pytest.raises(AttributeValidationError, match="str value"):
            validate_attributes([Attribute("frames", 362)])  # type: ignore[list-item]

    def test_non_attribute_entry_raises(self) -> None:
        with pytest.raises(AttributeValidationError, match="must be Attribute"):
            validate_attributes([("style_id", "x")])  # type: ignore[list-item]

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_attributes([Attribute("", "x")])


class TestValidateCounters:
    """Tests for validate_counters()."""

    def test_accepts_int_and_float(self) -> None:
        counters = [
            Attribute("fps_average", 90.7655486547093),
            Attribute("frames", 362),
        ]
        assert validate_counters(counters) == tuple(counters)

    def test_string_value_raises(self) -> None:
        with pytest.raises(AttributeValidationError, match="int or float"):
            validate_counters([Attribute("frames", "362")])  # type: ignore[list-item]

    def test_bool_value_raises(self) -> None:
        """Booleans are not counters even though bool subclasses int."""
        with pytest.raises(AttributeValidationError, match="int or float"):
            validate_counters([Attribute("visible", True)])

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_value_raises(self, value: float) -> None:
        with pytest.raises(AttributeValidationError, match="finite"):
            validate_counters([Attribute("fps_average", value)])

    def test_duplicate_name_raises(self) -> None:
        with pytest.raises(AttributeValidationError, match="duplicate counter"):
            validate_counters([Attribute("frames", 1), Attribute("frames", 2)])

    def test_negative_and_zero_values_allowed(self) -> None:
        counters = [Attribute("delta", -3.5), Attribute("dropped", 0)]
        assert validate_counters(counters) == tuple(counters)


class TestPerformanceEvent:
    """Tests for PerformanceEvent construction."""

    def test_lists_are_stored_as_tuples(
        self,
        style_attributes: list[Attribute[str]],
        frame_counters: list[Attribute[int | float]],
    ) -> None:
        event = PerformanceEvent(
            attributes=style_attributes,  # type: ignore[arg-type]
            counters=frame_counters,  # type: ignore[arg-type]
        )
        assert event.attributes == tuple(style_attributes)
        assert event.counters == tuple(frame_counters)

    def test_defaults_to_empty_lists(self) -> None:
        event = PerformanceEvent()
        assert event.attributes == ()
        assert event.counters == ()

    def test_invalid_counter_rejected_on_construction(self) -> None:
        with pytest.raises(AttributeValidationError):
            bad = (Attribute("frames", "many"),)
            PerformanceEvent(counters=bad)  # type: ignore[arg-type]

    def test_kinds_are_not_interchangeable(self) -> None:
        """A numeric value in the attributes list is rejected."""
        with pytest.raises(AttributeValidationError):
            bad = (Attribute("frames", 362),)
            PerformanceEvent(attributes=bad)  # type: ignore[arg-type]

    def test_from_pairs_accepts_tuples(self) -> None:
        event = PerformanceEvent.from_pairs(
            attributes=[("style_id", "mapbox://styles/mapbox/streets-v10")],
            counters=[("fps_average", 90.7655486547093), ("frames", 362)],
        )
        assert event.attributes == (
            Attribute("style_id", "mapbox://styles/mapbox/streets-v10"),
        )
        assert [c.name for c in event.counters] == ["fps_average", "frames"]

    def test_from_pairs_accepts_mappings(self) -> None:
        event = PerformanceEvent.from_pairs(
            attributes={"style_id": "streets"},
            counters={"frames": 362},
        )
        assert event.attributes == (Attribute("style_id", "streets"),)
        assert event.counters == (Attribute("frames", 362),)
