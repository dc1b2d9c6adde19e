from __future__ import annotations
"""Line-oriented text format (.txt).

Written layout, one group per record::

    Car          <- header marker
    Toyota       <- brand, verbatim
    2020         <- year
    19999.99     <- price

Header-less files (brand/year/price, three lines per record) are read too.
The layout is detected once per file from where the markers sit. Embedded
newlines in a brand are not escaped and break the layout on reload.
"""
from typing import List, Sequence

from ..logger import Logger
from ..models import CarRecord, parse_float, parse_int
from ..result import CodecError, ErrorKind
from .base import Codec


log = Logger.bind(__name__)

DEFAULT_HEADER = 'Car'
# Markers written by this tool and by the legacy Russian-language tool.
HEADER_MARKERS = ('Car', 'Машина')


def split_lines(text: str) -> List[str]:
    """Split on \\n, \\r\\n or \\r only; a final line break does not start a new line."""
    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return lines


class TextCodec(Codec):
    
    name = 'text'
    
    def __init__(self, encoding: str = 'utf-8', header: str = DEFAULT_HEADER):
        super().__init__(encoding)
        self.header = header
        self.markers = set(HEADER_MARKERS)
        if header:
            self.markers.add(header)
    
    def is_headed(self, lines: Sequence[str]) -> bool:
        """True when the file uses the 4-line layout with a marker before each record.

        Every 4th line must be a marker. A line count that is a multiple of
        3 but not of 4 is a complete legacy file and wins over the markers.
        """
        if not lines:
            return False
        if any(lines[i] not in self.markers for i in range(0, len(lines), 4)):
            return False
        return len(lines) % 4 == 0 or len(lines) % 3 != 0
    
    def _decode(self, data: bytes) -> List[CarRecord]:
        lines = split_lines(self._text(data))
        headed = self.is_headed(lines)
        step, skip = (4, 1) if headed else (3, 0)
        records: List[CarRecord] = []
        for start in range(0, len(lines), step):
            group = lines[start + skip:start + step]
            rec = CarRecord()
            if len(group) > 0:
                rec.brand = group[0]
            if len(group) > 1:
                year = parse_int(group[1])
                if year is None:
                    log.debug(f"year unparseable line={start + skip + 2} value={group[1]!r}")
                else:
                    rec.year = year
            if len(group) > 2:
                price = parse_float(group[2])
                if price is None:
                    log.debug(f"price unparseable line={start + skip + 3} value={group[2]!r}")
                else:
                    rec.price = price
            records.append(rec)
        log.debug(f"text decode layout={'headed' if headed else 'legacy'} records={len(records)}")
        return records
    
    def _encode(self, records: Sequence[CarRecord]) -> bytes:
        out: List[str] = []
        for i, rec in enumerate(records, start=1):
            brand = rec.brand or ''
            if '\n' in brand or '\r' in brand:
                log.warn(f"brand contains a line break record={i}; file will not reload cleanly")
            if self.header:
                out.append(self.header)
            out.append(brand)
            try:
                out.append(str(int(rec.year)))
                out.append(repr(float(rec.price)))
            except (TypeError, ValueError, OverflowError) as e:
                raise CodecError(ErrorKind.ENCODE_ERROR, f"record {i} year={rec.year!r} price={rec.price!r}: {e}") from e
        return self._bytes(''.join(line + '\n' for line in out))
