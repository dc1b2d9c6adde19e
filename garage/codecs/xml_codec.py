from __future__ import annotations
"""XML format (.xml).

Document shape::

    <?xml version='1.0' encoding='utf-8'?>
    <ArrayOfCar>
      <Car>
        <Brand>Toyota</Brand>
        <Year>2020</Year>
        <Price>19999.99</Price>
      </Car>
    </ArrayOfCar>

A record without a brand has no <Brand> element. Unknown child elements
are ignored; any other element directly under the root is a shape error.
"""
import math
from typing import List, Optional, Sequence

from lxml import etree

from ..logger import Logger
from ..models import CarRecord, coerce_float, coerce_int
from ..result import CodecError, ErrorKind
from .base import Codec


log = Logger.bind(__name__)

ROOT_TAG = 'ArrayOfCar'
ROOT_TAGS = (ROOT_TAG, 'Cars')
ITEM_TAG = 'Car'


def _local(tag) -> Optional[str]:
    # comments / processing instructions have a non-string tag
    if not isinstance(tag, str):
        return None
    return etree.QName(tag).localname


def _format_float(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'INF' if value > 0 else '-INF'
    return repr(float(value))


def _child_text(item, tag: str) -> Optional[str]:
    for child in item:
        if _local(child.tag) == tag:
            return child.text or ''
    return None


def _record_from_element(item, index: int) -> CarRecord:
    rec = CarRecord()
    brand = _child_text(item, 'Brand')
    if brand is not None:
        rec.brand = brand
    year = _child_text(item, 'Year')
    if year is not None:
        n = coerce_int(year)
        if n is None:
            raise CodecError(ErrorKind.DECODE_ERROR, f"Car {index} Year={year!r} is not an integer")
        rec.year = n
    price = _child_text(item, 'Price')
    if price is not None:
        f = coerce_float(price)
        if f is None:
            raise CodecError(ErrorKind.DECODE_ERROR, f"Car {index} Price={price!r} is not a number")
        rec.price = f
    return rec


class XmlCodec(Codec):
    
    name = 'xml'
    
    def _parser(self) -> etree.XMLParser:
        return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    
    def _decode(self, data: bytes) -> List[CarRecord]:
        if not data.strip():
            raise CodecError(ErrorKind.DECODE_ERROR, "document is empty")
        try:
            root = etree.fromstring(data, parser=self._parser())
        except etree.XMLSyntaxError as e:
            raise CodecError(ErrorKind.DECODE_ERROR, f"malformed XML: {e}") from e
        root_name = _local(root.tag)
        if root_name not in ROOT_TAGS:
            raise CodecError(ErrorKind.DECODE_ERROR, f"root element <{root_name}>, expected <{ROOT_TAG}>")
        records: List[CarRecord] = []
        for item in root:
            name = _local(item.tag)
            if name is None:
                continue
            if name != ITEM_TAG:
                raise CodecError(ErrorKind.DECODE_ERROR, f"unexpected element <{name}> under <{root_name}>")
            records.append(_record_from_element(item, len(records)))
        log.debug(f"xml decode records={len(records)}")
        return records
    
    def _encode(self, records: Sequence[CarRecord]) -> bytes:
        root = etree.Element(ROOT_TAG)
        try:
            for rec in records:
                item = etree.SubElement(root, ITEM_TAG)
                if rec.brand is not None:
                    etree.SubElement(item, 'Brand').text = rec.brand
                etree.SubElement(item, 'Year').text = str(int(rec.year))
                etree.SubElement(item, 'Price').text = _format_float(rec.price)
        except (TypeError, ValueError, OverflowError) as e:
            # lxml rejects control characters and other non-XML text; year/price may be non-numeric
            raise CodecError(ErrorKind.ENCODE_ERROR, str(e)) from e
        try:
            return etree.tostring(root, xml_declaration=True, encoding=self.encoding, pretty_print=True)
        except LookupError as e:
            raise CodecError(ErrorKind.ENCODE_ERROR, f"unknown encoding {self.encoding}") from e
