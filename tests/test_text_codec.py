from garage.codecs.text import TextCodec, split_lines
from garage.models import CarRecord
from garage.result import ErrorKind


def test_decode_legacy_group_with_bad_year():
    result = TextCodec().decode('Toyota\nabc\n19999.99\n'.encode('utf-8'))
    assert result.ok
    assert result.value == [CarRecord('Toyota', 0, 19999.99)]


def test_decode_bad_price_defaults():
    result = TextCodec().decode(b'Honda\n2001\nexpensive\n')
    assert result.value == [CarRecord('Honda', 2001, 0.0)]


def test_decode_empty_input():
    result = TextCodec().decode(b'')
    assert result.ok
    assert result.value == []


def test_decode_trailing_partial_group():
    result = TextCodec().decode(b'Toyota\n2020\n1.5\nHonda\n')
    assert result.value == [CarRecord('Toyota', 2020, 1.5), CarRecord('Honda', 0, 0.0)]


def test_decode_missing_final_newline():
    result = TextCodec().decode(b'Toyota\n2020')
    assert result.value == [CarRecord('Toyota', 2020, 0.0)]


def test_decode_empty_brand_kept_verbatim():
    result = TextCodec().decode(b'\n2020\n1.0\n  spaced  \n1\n2\n')
    assert result.value[0].brand == ''
    assert result.value[1].brand == '  spaced  '


def test_decode_crlf_and_bom():
    result = TextCodec().decode(b'\xef\xbb\xbfAudi\r\n1999\r\n2,5\r\n')
    assert result.value == [CarRecord('Audi', 1999, 2.5)]


def test_encode_writes_header_before_each_record():
    data = TextCodec().encode([CarRecord('Toyota', 2020, 19999.99), CarRecord(None, 0, 0.0)]).value
    assert data == b'Car\nToyota\n2020\n19999.99\nCar\n\n0\n0.0\n'


def test_encode_without_header_uses_three_lines():
    data = TextCodec(header='').encode([CarRecord('Toyota', 2020, 1.0)]).value
    assert data == b'Toyota\n2020\n1.0\n'


def test_headed_round_trip(sample_records):
    codec = TextCodec()
    decoded = codec.decode(codec.encode(sample_records).value).value
    assert decoded == sample_records


def test_headed_round_trip_with_integer_like_brand_after_first():
    records = [CarRecord('Mazda', 2010, 1.0), CarRecord('911', 1990, 2.0)]
    codec = TextCodec()
    assert codec.decode(codec.encode(records).value).value == records


def test_legacy_brand_named_like_header():
    result = TextCodec().decode(b'Car\n2020\n1.5\n')
    assert result.value == [CarRecord('Car', 2020, 1.5)]


def test_russian_header_marker_is_recognized():
    data = 'Машина\nЛада\n1990\n500.0\nМашина\nВолга\n1975\n300.0\n'.encode('utf-8')
    result = TextCodec().decode(data)
    assert result.value == [CarRecord('Лада', 1990, 500.0), CarRecord('Волга', 1975, 300.0)]


def test_custom_header_written_and_read():
    codec = TextCodec(header='Машина')
    data = codec.encode([CarRecord('Лада', 1990, 500.0)]).value
    assert data.decode('utf-8').startswith('Машина\n')
    assert codec.decode(data).value == [CarRecord('Лада', 1990, 500.0)]


def test_invalid_bytes_is_decode_error():
    result = TextCodec().decode(b'\xff\xfe\x00bad\n')
    assert not result.ok
    assert result.kind == ErrorKind.DECODE_ERROR


def test_unencodable_brand_is_encode_error():
    result = TextCodec(encoding='ascii').encode([CarRecord('Škoda', 2000, 1.0)])
    assert not result.ok
    assert result.kind == ErrorKind.ENCODE_ERROR


def test_split_lines_only_breaks_on_newlines():
    assert split_lines('a\x0bb\nc\r\nd\re\n') == ['a\x0bb', 'c', 'd', 'e']
    assert split_lines('\n') == ['']


def test_headed_round_trip_with_integer_like_first_brand():
    records = [CarRecord('911', 1990, 2.0), CarRecord('Mazda', 2010, 1.0)]
    codec = TextCodec()
    assert codec.decode(codec.encode(records).value).value == records


def test_single_headed_record_with_integer_brand():
    codec = TextCodec()
    data = codec.encode([CarRecord('2020', 1990, 2.0)]).value
    assert data == b'Car\n2020\n1990\n2.0\n'
    assert codec.decode(data).value == [CarRecord('2020', 1990, 2.0)]


def test_legacy_file_with_marker_brands_stays_legacy():
    result = TextCodec().decode(b'Car\n2020\n1.5\nKia\n2001\n2.0\n')
    assert result.value == [CarRecord('Car', 2020, 1.5), CarRecord('Kia', 2001, 2.0)]


def test_is_headed_needs_marker_on_every_fourth_line():
    codec = TextCodec()
    assert codec.is_headed(['Car', '911', '1990', '2.0', 'Car', 'Kia', '1', '1.0'])
    assert not codec.is_headed(['Car', '911', '1990', '2.0', 'Kia', '2001', '1.0', 'x'])
    assert not codec.is_headed([])


def test_non_numeric_year_is_encode_error():
    for rec in (CarRecord('Kia', None, 1.0), CarRecord('Kia', 1, None), CarRecord('Kia', 'abc', 1.0)):
        result = TextCodec().encode([rec])
        assert not result.ok
        assert result.kind == ErrorKind.ENCODE_ERROR, rec
