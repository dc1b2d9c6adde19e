from __future__ import annotations
"""JSON format (.json): a single array of {"brand", "year", "price"} objects.

Keys are written lowercase and matched case-insensitively on read, so files
with ``Brand``/``Year``/``Price`` keys load as well.
"""
import json
from typing import Any, Dict, List, Sequence

from ..logger import Logger
from ..models import CarRecord, coerce_float, coerce_int
from ..result import CodecError, ErrorKind
from .base import Codec


log = Logger.bind(__name__)


def _lower_keys(obj: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in obj.items():
        out.setdefault(str(k).lower(), v)
    return out


def record_from_obj(obj: Any, index: int) -> CarRecord:
    if not isinstance(obj, dict):
        raise CodecError(ErrorKind.DECODE_ERROR, f"item {index} is {type(obj).__name__}, expected object")
    d = _lower_keys(obj)
    rec = CarRecord()
    brand = d.get('brand')
    if brand is not None:
        if not isinstance(brand, str):
            raise CodecError(ErrorKind.DECODE_ERROR, f"item {index} brand is not a string")
        rec.brand = brand
    year = d.get('year')
    if year is not None:
        n = coerce_int(year)
        if n is None:
            raise CodecError(ErrorKind.DECODE_ERROR, f"item {index} year={year!r} is not an integer")
        rec.year = n
    price = d.get('price')
    if price is not None:
        f = coerce_float(price)
        if f is None:
            raise CodecError(ErrorKind.DECODE_ERROR, f"item {index} price={price!r} is not a number")
        rec.price = f
    return rec


class JsonCodec(Codec):
    
    name = 'json'
    
    def _decode(self, data: bytes) -> List[CarRecord]:
        text = self._text(data)
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as e:
            raise CodecError(ErrorKind.DECODE_ERROR, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
        except ValueError as e:
            # integer literal past the int-string conversion limit
            raise CodecError(ErrorKind.DECODE_ERROR, f"invalid JSON: {e}") from e
        except RecursionError as e:
            raise CodecError(ErrorKind.DECODE_ERROR, "invalid JSON: nesting too deep") from e
        if not isinstance(doc, list):
            raise CodecError(ErrorKind.DECODE_ERROR, f"top-level value is {type(doc).__name__}, expected array")
        records = [record_from_obj(obj, i) for i, obj in enumerate(doc)]
        log.debug(f"json decode records={len(records)}")
        return records
    
    def _encode(self, records: Sequence[CarRecord]) -> bytes:
        items = [rec.to_dict() for rec in records]
        try:
            text = json.dumps(items, ensure_ascii=False, separators=(',', ':'))
        except (TypeError, ValueError) as e:
            raise CodecError(ErrorKind.ENCODE_ERROR, str(e)) from e
        return self._bytes(text)
