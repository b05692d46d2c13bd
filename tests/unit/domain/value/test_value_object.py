"""Unit tests for the value object base classes."""

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Optional

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hrcore.domain.error import ValidationError
from hrcore.domain.value import StringId
from hrcore.domain.value.common import (
    MAX_STRUCTURAL_DEPTH,
    FrozenDict,
    RootValueObject,
    ValueObject,
    fold_hash,
    hash_string,
    structural_hash,
    structurally_equal,
    to_int32,
)


class Money(ValueObject):
    value_type: ClassVar[str] = "money"

    amount: Decimal
    currency: str


class Tagged(ValueObject):
    labels: dict[str, str]
    parts: tuple[str, ...] = ()
    note: Optional[str] = None


class Code(RootValueObject[str]):
    pass


class OtherCode(RootValueObject[str]):
    pass


class Bag(ValueObject):
    items: Any


class Shade(Enum):
    LIGHT = "light"
    DARK = "dark"


class TestHashing:
    def test_to_int32_wraps(self):
        assert to_int32(2**31) == -(2**31)
        assert to_int32(2**32 + 5) == 5
        assert to_int32(-1) == -1

    def test_hash_string_matches_rolling_formula(self):
        expected = 0
        for char in "abc":
            expected = to_int32((expected << 5) - expected + ord(char))

        assert hash_string("abc") == expected
        assert hash_string("") == 0

    def test_mapping_hash_ignores_order(self):
        assert structural_hash({"a": 1, "b": 2}) == structural_hash({"b": 2, "a": 1})

    def test_aware_datetimes_hash_by_instant(self):
        utc = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
        local = utc.astimezone(timezone(timedelta(hours=-3)))

        assert structural_hash(utc) == structural_hash(local)

    def test_aware_times_hash_by_instant(self):
        noon_utc = time(12, tzinfo=timezone.utc)
        three_pm_plus_3 = time(15, tzinfo=timezone(timedelta(hours=3)))

        assert structurally_equal(noon_utc, three_pm_plus_3)
        assert structural_hash(noon_utc) == structural_hash(three_pm_plus_3)
        assert structural_hash(time(12)) == hash_string("12:00:00")

    def test_infinities_hash_alike_across_number_types(self):
        assert structural_hash(Decimal("Infinity")) == structural_hash(float("inf"))
        assert structural_hash(Decimal("-Infinity")) == structural_hash(float("-inf"))
        assert structural_hash(float("inf")) != structural_hash(float("-inf"))

    def test_bytes_hash_byte_by_byte(self):
        expected = fold_hash(fold_hash(0, ord("a")), ord("b"))

        assert structural_hash(b"ab") == expected
        assert structural_hash(bytearray(b"ab")) == expected

    def test_other_objects_hash_by_repr(self):
        class Point:
            def __repr__(self) -> str:
                return "Point(1, 2)"

        assert structural_hash(Point()) == hash_string("Point(1, 2)")

    def test_cyclic_structure_raises_recursion_error(self):
        cycle: list = []
        cycle.append(cycle)

        with pytest.raises(RecursionError):
            structural_hash(cycle)
        with pytest.raises(RecursionError):
            structurally_equal(cycle, cycle)

    def test_depth_limit_is_generous(self):
        nested: list = []
        for _ in range(MAX_STRUCTURAL_DEPTH - 2):
            nested = [nested]

        assert structurally_equal(nested, nested)


class TestValueObjectEquality:
    def test_equal_components_are_equal(self):
        a = Money(amount=Decimal("10.00"), currency="BRL")
        b = Money(amount=Decimal("10.00"), currency="BRL")

        assert a == b
        assert a.equals(b)
        assert hash(a) == hash(b) == a.hash_code()

    def test_different_components_are_not_equal(self):
        assert Money(amount=Decimal("10"), currency="BRL") != Money(
            amount=Decimal("10"), currency="USD"
        )

    def test_comparison_with_none_or_other_types(self):
        money = Money(amount=Decimal("1"), currency="BRL")

        assert not money.equals(None)
        assert money != "BRL"

    def test_type_tag_separates_equal_payloads(self):
        assert Code("x") != OtherCode("x")
        assert Code.value_type.endswith("Code")

    def test_mappings_compare_regardless_of_order(self):
        a = Tagged(labels={"a": "1", "b": "2"})
        b = Tagged(labels={"b": "2", "a": "1"})

        assert a == b
        assert a.hash_code() == b.hash_code()

    def test_optional_component_takes_part_in_equality(self):
        assert Tagged(labels={}, note="x") != Tagged(labels={})

    def test_nested_value_objects(self):
        assert structurally_equal([Code("a"), Code("b")], (Code("a"), Code("b")))
        assert not structurally_equal([Code("a")], [OtherCode("a")])

    def test_is_empty_is_false(self):
        assert not Code("a").is_empty()


class TestValueObjectLifecycle:
    def test_value_objects_are_immutable(self):
        money = Money(amount=Decimal("1"), currency="BRL")

        with pytest.raises(Exception):
            money.currency = "USD"

    def test_clone_is_equal_but_distinct(self):
        tagged = Tagged(labels={"a": "1"})
        clone = tagged.clone()

        assert clone == tagged
        assert clone is not tagged
        assert clone.labels is not tagged.labels

    def test_mapping_components_cannot_be_changed(self):
        tagged = Tagged(labels={"k": "v"})
        before = tagged.hash_code()

        with pytest.raises(TypeError):
            tagged.labels["k"] = "changed"
        with pytest.raises(TypeError):
            tagged.labels.update(k="changed")

        assert isinstance(tagged.labels, FrozenDict)
        assert tagged == Tagged(labels={"k": "v"})
        assert tagged.hash_code() == before

    def test_input_containers_are_not_shared(self):
        labels = {"k": "v"}
        tagged = Tagged(labels=labels)

        labels["k"] = "changed"

        assert tagged.labels == {"k": "v"}

    def test_untyped_containers_are_frozen_recursively(self):
        bag = Bag(items=[1, [2, {"a": [3]}], {4}])

        assert bag.items == (1, (2, {"a": (3,)}), frozenset({4}))
        assert isinstance(bag.items[1][1], FrozenDict)
        with pytest.raises(AttributeError):
            bag.items.append(5)

    def test_frozen_components_still_serialize(self):
        assert Tagged(labels={"a": "1"}, parts=("x",)).to_json() == {
            "labels": {"a": "1"},
            "parts": ["x"],
            "note": None,
        }

    @pytest.mark.parametrize("annotation", [list[int], set[str], dict[str, list[int]]])
    def test_mutable_container_fields_are_rejected(self, annotation):
        with pytest.raises(TypeError, match="immutable"):
            type(
                "Loose",
                (ValueObject,),
                {"__annotations__": {"items": annotation}, "__module__": __name__},
            )

    def test_mutable_root_is_rejected(self):
        with pytest.raises(TypeError, match="immutable"):

            class Codes(RootValueObject[list[str]]):
                pass

    def test_to_json(self):
        assert Money(amount=Decimal("1.5"), currency="BRL").to_json() == {
            "amount": "1.5",
            "currency": "BRL",
        }
        assert Code("a").to_json() == "a"

    def test_invalid_input_raises_domain_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Money(amount="not a number", currency="BRL")

        assert exc_info.value.field == "amount"
        assert exc_info.value.details["errors"]

    def test_root_value_and_str(self):
        code = StringId("abc")

        assert code.value == "abc"
        assert str(code) == "abc"
        assert code.primitive_values() == ("abc",)


_offsets = st.integers(min_value=-23 * 60, max_value=23 * 60).map(
    lambda minutes: timezone(timedelta(minutes=minutes))
)

_leaves = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(10**6), max_value=10**6),
    st.floats(allow_nan=False),
    st.decimals(
        min_value=Decimal("-1e9"),
        max_value=Decimal("1e9"),
        allow_nan=False,
        allow_infinity=False,
        places=4,
    ),
    st.datetimes(
        min_value=datetime(1971, 1, 1),
        max_value=datetime(2100, 1, 1),
        timezones=st.just(timezone.utc),
    ),
    st.times(timezones=_offsets),
    st.text(max_size=6),
    st.sampled_from(Shade),
)

component_trees = st.recursive(
    _leaves,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.lists(children, max_size=4).map(tuple),
        st.dictionaries(st.text(max_size=4), children, max_size=4),
        st.frozensets(st.integers(min_value=-1000, max_value=1000), max_size=4),
    ),
    max_leaves=20,
)


def _shift_time(value: time, tz: timezone) -> time:
    return datetime.combine(date(2000, 1, 15), value).astimezone(tz).timetz()


def _equivalent(value: Any, draw) -> Any:
    """Rebuild ``value`` with different but equal representations."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return float(value) if draw(st.booleans()) else Decimal(value)
    if isinstance(value, float):
        return Decimal(value)
    if isinstance(value, datetime):
        return value.astimezone(draw(_offsets))
    if isinstance(value, time):
        return _shift_time(value, draw(_offsets))
    if isinstance(value, dict):
        return {key: _equivalent(item, draw) for key, item in reversed(value.items())}
    if isinstance(value, list):
        return tuple(_equivalent(item, draw) for item in value)
    if isinstance(value, tuple):
        return [_equivalent(item, draw) for item in value]
    if isinstance(value, frozenset):
        return {float(item) for item in value}
    return value


class TestStructuralHashProperties:
    @given(tree=component_trees, data=st.data())
    @settings(max_examples=300)
    def test_equal_components_hash_equally(self, tree, data):
        twin = _equivalent(tree, data.draw)

        if structurally_equal(tree, twin):
            assert structural_hash(tree) == structural_hash(twin)

    @given(tree=component_trees)
    @settings(max_examples=100)
    def test_frozen_tree_keeps_equality_and_hash(self, tree):
        frozen = Bag(items=tree).items

        assert structurally_equal(tree, frozen)
        assert structural_hash(tree) == structural_hash(frozen)
