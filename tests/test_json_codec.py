import json

from garage.codecs.json_codec import JsonCodec
from garage.models import CarRecord
from garage.result import ErrorKind


def test_encode_empty_collection():
    assert JsonCodec().encode([]).value == b'[]'


def test_encode_is_compact_with_lowercase_keys():
    data = JsonCodec().encode([CarRecord('Toyota', 2020, 19999.99)]).value
    assert data == b'[{"brand":"Toyota","year":2020,"price":19999.99}]'


def test_encode_keeps_non_ascii_literal():
    data = JsonCodec().encode([CarRecord('Лада', 1990, 1.0)]).value
    assert 'Лада'.encode('utf-8') in data


def test_round_trip(sample_records):
    codec = JsonCodec()
    records = sample_records + [CarRecord(None, 0, 0.0)]
    assert codec.decode(codec.encode(records).value).value == records


def test_decode_pascal_case_keys():
    data = json.dumps([{'Brand': 'BMW', 'Year': 2005, 'Price': 7000}]).encode('utf-8')
    result = JsonCodec().decode(data)
    assert result.value == [CarRecord('BMW', 2005, 7000.0)]


def test_decode_missing_and_null_fields_default():
    result = JsonCodec().decode(b'[{"brand":"Kia"},{"year":null,"price":null}]')
    assert result.value == [CarRecord('Kia', 0, 0.0), CarRecord(None, 0, 0.0)]


def test_decode_coerces_numeric_strings():
    result = JsonCodec().decode(b'[{"brand":"Kia","year":"2011","price":"12.5"}]')
    assert result.value == [CarRecord('Kia', 2011, 12.5)]


def test_decode_ignores_unknown_keys():
    result = JsonCodec().decode(b'[{"brand":"Kia","color":"red","year":2011.0}]')
    assert result.value == [CarRecord('Kia', 2011, 0.0)]


def test_decode_malformed_json():
    result = JsonCodec().decode(b'[{')
    assert not result.ok
    assert result.kind == ErrorKind.DECODE_ERROR


def test_decode_rejects_non_array():
    result = JsonCodec().decode(b'{"brand":"Kia"}')
    assert not result.ok
    assert 'expected array' in result.message


def test_decode_rejects_non_object_items():
    result = JsonCodec().decode(b'[1, 2]')
    assert result.kind == ErrorKind.DECODE_ERROR


def test_decode_rejects_uncoercible_year():
    for payload in (b'[{"year":"abc"}]', b'[{"year":true}]', b'[{"year":1.5}]'):
        result = JsonCodec().decode(payload)
        assert result.kind == ErrorKind.DECODE_ERROR, payload


def test_decode_rejects_non_string_brand():
    result = JsonCodec().decode(b'[{"brand":42}]')
    assert result.kind == ErrorKind.DECODE_ERROR


def test_decode_integer_past_digit_limit():
    result = JsonCodec().decode(b'[{"brand":"Kia","year":' + b'9' * 5000 + b'}]')
    assert not result.ok
    assert result.kind == ErrorKind.DECODE_ERROR


def test_decode_deeply_nested_array():
    result = JsonCodec().decode(b'[' * 100000 + b']' * 100000)
    assert not result.ok
    assert result.kind == ErrorKind.DECODE_ERROR
    assert 'too deep' in result.message
