import pytest

from fixwire.sofh.encoding_type import EncodingKind, EncodingType


def test_convert_encoding_type_to_bytes_then_back_has_no_side_effects():
    for value in range(0x10000):
        etype = EncodingType.from_int(value)
        assert EncodingType.from_bytes(etype.to_bytes()) == etype


def test_convert_int_into_encoding_type_then_back_has_no_side_effects():
    for value in range(0x10000):
        assert EncodingType.from_int(value).to_int() == value


def test_equality_is_reflexive():
    for value in range(0x10000):
        etype = EncodingType.from_int(value)
        again = EncodingType.from_int(value)
        assert etype == again
        assert hash(etype) == hash(again)
        assert (etype == EncodingType.from_int((value + 1) % 0x10000)) is False


def test_encoding_types_with_ranges_use_prefix_tagging():
    assert EncodingType(EncodingKind.PRIVATE, 42).to_bytes()[1] == 42
    assert EncodingType(EncodingKind.FAST, 100).to_bytes()[1] == 100


@pytest.mark.parametrize("value", [0x1, 0x82, 0xFF])
def test_low_values_correspond_to_private_encoding_types(value):
    etype = EncodingType.from_int(value)
    assert etype.kind is EncodingKind.PRIVATE
    assert etype.value == value


def test_boundary_values_for_private_encoding_type():
    assert EncodingType.from_int(0x0).kind is EncodingKind.UNKNOWN
    assert EncodingType.from_int(0x0).to_bytes() == bytes([0x00, 0x00])
    assert EncodingType.from_int(0x100).kind is EncodingKind.UNKNOWN
    assert EncodingType.from_int(0x100).to_bytes() == bytes([0x01, 0x00])


def test_boundary_values_for_fast_encoding_type():
    assert EncodingType.from_int(0xFA00).kind is EncodingKind.UNKNOWN
    assert EncodingType.from_int(0xFA00).to_bytes() == bytes([0xFA, 0x00])
    bson = EncodingType.from_int(0xFB00)
    assert (bson.kind is EncodingKind.FAST) is False
    assert bson.to_bytes() == bytes([0xFB, 0x00])
    assert bson == EncodingType(EncodingKind.UNKNOWN, 0xFB00)


def test_unknown_equals_json_by_value():
    assert EncodingType(EncodingKind.UNKNOWN, 0xF500) == EncodingType(EncodingKind.JSON)
    assert hash(EncodingType(EncodingKind.UNKNOWN, 0xF500)) == hash(
        EncodingType(EncodingKind.JSON)
    )


def test_from_bytes_examples():
    assert EncodingType.from_bytes(bytes([0xF0, 0x00])) == EncodingType(EncodingKind.TAG_VALUE)
    assert EncodingType.from_bytes(bytes([0xFA, 0x42])) == EncodingType(EncodingKind.FAST, 0x42)


def test_to_bytes_examples():
    assert EncodingType(EncodingKind.TAG_VALUE).to_bytes() == bytes([0xF0, 0x00])
    assert EncodingType(EncodingKind.FAST, 0x42).to_bytes() == bytes([0xFA, 0x42])


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        EncodingType.from_bytes(b"\x00")


def test_from_int_rejects_out_of_range():
    with pytest.raises(ValueError):
        EncodingType.from_int(0x10000)


def test_parameterless_kind_rejects_value():
    with pytest.raises(ValueError):
        EncodingType(EncodingKind.JSON, 1)