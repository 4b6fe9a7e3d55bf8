import json

import numpy as np
import pytest

from lnglatalt import (
    ErrorKind,
    InvalidFormatError,
    LngLatAlt,
    LngLatAltEncoder,
    MalformedRecordError,
    decode,
    dumps_position,
    encode,
    loads_position,
)


def test_encode_without_altitude():
    assert encode(LngLatAlt(10.0, 20.0)) == [10.0, 20.0]


def test_encode_with_altitude():
    assert encode(LngLatAlt(10.0, 20.0, 5.0)) == [10.0, 20.0, 5.0]
    assert encode(LngLatAlt(10.0, 20.0, 0.0)) == [10.0, 20.0, 0.0]


def test_decode_two_values_has_no_altitude(origin):
    position = decode([0.0, 0.0])
    assert position == origin
    assert position.altitude is None


def test_decode_normalizes_longitude_and_latitude():
    assert decode([36000.0, 72000.0]) == LngLatAlt(1.0, 2.0)
    assert decode([36000, -72000, 5.0]) == LngLatAlt(1.0, -2.0, 5.0)
    assert decode([-6480000.0, 0.0]).longitude == -180.0


def test_decode_reads_altitude_verbatim():
    assert decode([0.0, 0.0, 123.456]).altitude == 123.456


def test_decode_nan_altitude_is_absent():
    assert decode([0.0, 0.0, float("nan")]).altitude is None


def test_decode_more_than_three_values_has_no_altitude():
    assert decode([0.0, 0.0, 1.0, 2.0]).altitude is None


def test_decode_infinite_altitude_is_rejected():
    with pytest.raises(MalformedRecordError):
        decode([0.0, 0.0, float("inf")])


def test_decode_accepts_tuples_and_arrays():
    assert decode((0, 0)) == LngLatAlt(0.0, 0.0)
    assert decode(np.array([36000.0, 0.0, 7.0])) == LngLatAlt(1.0, 0.0, 7.0)


@pytest.mark.parametrize(
    "values",
    [
        [1.0],
        [],
        "12",
        b"12",
        {"lng": 1.0, "lat": 2.0},
        12.0,
        None,
        [0.0, "1"],
        [True, 0.0],
        [0.0, None],
        np.zeros((2, 2)),
    ],
)
def test_decode_rejects_malformed_records(values):
    with pytest.raises(MalformedRecordError) as excinfo:
        decode(values)
    assert excinfo.value.kind is ErrorKind.MALFORMED_RECORD


def test_decode_propagates_normalization_failures():
    # normalize(10.0) leaves fractional minutes alongside seconds
    with pytest.raises(InvalidFormatError):
        decode([10.0, 20.0])
    with pytest.raises(InvalidFormatError):
        decode([6480000.0, 0.0])


def test_json_encoder_writes_array_form():
    document = {"type": "Point", "coordinates": LngLatAlt(0.0, 0.0, 5.0)}
    assert json.dumps(document, cls=LngLatAltEncoder) == '{"type": "Point", "coordinates": [0.0, 0.0, 5.0]}'


def test_json_encoder_rejects_unknown_objects():
    with pytest.raises(TypeError):
        json.dumps(object(), cls=LngLatAltEncoder)


def test_dumps_position():
    assert dumps_position(LngLatAlt(1.0, 2.0)) == "[1.0, 2.0]"
    assert dumps_position(LngLatAlt(1.0, 2.0, 3.0), separators=(",", ":")) == "[1.0,2.0,3.0]"


def test_loads_position():
    assert loads_position("[36000, 72000, 10]") == LngLatAlt(1.0, 2.0, 10.0)
    assert loads_position("[0, 0]").altitude is None


def test_dumps_then_loads_keeps_origin_with_altitude():
    position = LngLatAlt(0.0, 0.0, 7.5)
    assert loads_position(dumps_position(position)) == position


@pytest.mark.parametrize("text", ["{", '{"lng": 1}', "[1]", "12", None])
def test_loads_position_rejects_malformed_documents(text):
    with pytest.raises(MalformedRecordError):
        loads_position(text)


@pytest.mark.parametrize("values", [[10**400, 0], [0, -(10**400)], [0, 0, 10**400]])
def test_decode_rejects_values_beyond_float_range(values):
    with pytest.raises(MalformedRecordError) as excinfo:
        decode(values)
    assert excinfo.value.kind is ErrorKind.MALFORMED_RECORD


@pytest.mark.parametrize("text", ["[" + "9" * 400 + ", 0]", "[0, 0, " + "9" * 400 + "]", "[" + "9" * 5000 + ", 0]"])
def test_loads_position_rejects_numbers_beyond_float_range(text):
    with pytest.raises(MalformedRecordError):
        loads_position(text)
