"""Unit tests for identifiers."""

import uuid

import pytest

from hrcore.domain.error import ValidationError
from hrcore.domain.value import IdFactory, IdKind, NumberId, StringId, UuidId


class TestStringId:
    def test_accepts_non_blank_text(self):
        assert StringId("emp-1").value == "emp-1"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_blank_text(self, value):
        with pytest.raises(ValidationError) as exc_info:
            StringId(value)

        assert exc_info.value.field == "string_id"

    def test_generate_gives_distinct_ids(self):
        assert StringId.generate() != StringId.generate()


class TestNumberId:
    def test_accepts_positive_integers(self):
        assert NumberId(7).value == 7

    @pytest.mark.parametrize("value", [0, -1, True])
    def test_rejects_non_positive_and_bool(self, value):
        with pytest.raises(ValidationError):
            NumberId(value)

    def test_not_equal_to_string_id_with_same_text(self):
        assert NumberId(1) != StringId("1")


class TestUuidId:
    def test_normalizes_case_and_whitespace(self):
        raw = str(uuid.uuid4())

        assert UuidId(f"  {raw.upper()} ").value == raw

    def test_accepts_uuid_instances(self):
        raw = uuid.uuid4()

        assert UuidId(raw).as_uuid() == raw

    @pytest.mark.parametrize(
        "value",
        ["not-a-uuid", str(uuid.uuid1()), "00000000-0000-0000-0000-000000000000"],
    )
    def test_rejects_non_v4(self, value):
        with pytest.raises(ValidationError):
            UuidId(value)

    def test_equal_ids_hash_equally(self):
        raw = str(uuid.uuid4())

        assert UuidId(raw) == UuidId(raw.upper())
        assert hash(UuidId(raw)) == hash(UuidId(raw.upper()))
        assert len({UuidId(raw), UuidId(raw)}) == 1

    def test_create_returns_result(self):
        assert UuidId.create(str(uuid.uuid4())).is_success
        failure = UuidId.create("nope")

        assert failure.is_failure
        assert isinstance(failure.error, ValidationError)


class TestIdFactory:
    def test_create_by_kind(self):
        assert isinstance(IdFactory.create("number", 3).value, NumberId)
        assert isinstance(IdFactory.create(IdKind.STRING, "x").value, StringId)

    def test_create_unknown_kind_fails(self):
        result = IdFactory.create("serial", 1)

        assert result.error.field == "id_type"

    def test_generate(self):
        assert isinstance(IdFactory.generate("uuid"), UuidId)
        assert isinstance(IdFactory.generate(IdKind.STRING), StringId)

    @pytest.mark.parametrize("kind", ["number", "serial"])
    def test_generate_rejects_unsupported_kinds(self, kind):
        with pytest.raises(ValidationError):
            IdFactory.generate(kind)
