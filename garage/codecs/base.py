from __future__ import annotations
"""Codec interface shared by every file format.

A codec turns raw file bytes into ``CarRecord`` lists and back. Concrete
codecs implement ``_decode``/``_encode`` and raise ``CodecError`` on bad
input; the public ``decode``/``encode`` wrap the outcome in ``Ok``/``Err``.
"""
from typing import List, Sequence

from ..logger import Logger
from ..models import CarRecord
from ..result import CodecError, Err, ErrorKind, Ok, Result


log = Logger.bind(__name__)


class Codec:
    """Encode/decode pair for one file format."""
    
    name: str = ''
    
    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding
    
    def decode(self, data: bytes) -> Result:
        try:
            records = self._decode(data)
        except CodecError as e:
            return e.to_err()
        except Exception as e:  # noqa: BLE001
            log.debug(f"{self.name} decode unexpected error={e!r}")
            return Err(ErrorKind.DECODE_ERROR, f"{type(e).__name__}: {e}")
        return Ok(records)
    
    def encode(self, records: Sequence[CarRecord]) -> Result:
        try:
            payload = self._encode(records)
        except CodecError as e:
            return e.to_err()
        except Exception as e:  # noqa: BLE001
            log.debug(f"{self.name} encode unexpected error={e!r}")
            return Err(ErrorKind.ENCODE_ERROR, f"{type(e).__name__}: {e}")
        return Ok(payload)
    
    # ---- helpers for subclasses ----
    def _text(self, data: bytes) -> str:
        """Decode bytes with the configured encoding, dropping a leading BOM."""
        enc = 'utf-8-sig' if self.encoding.lower().replace('_', '-') in ('utf-8', 'utf8') else self.encoding
        try:
            return data.decode(enc)
        except UnicodeDecodeError as e:
            raise CodecError(ErrorKind.DECODE_ERROR, f"not valid {self.encoding} text ({e.reason} at byte {e.start})") from e
        except LookupError as e:
            raise CodecError(ErrorKind.DECODE_ERROR, f"unknown encoding {self.encoding}") from e
    
    def _bytes(self, text: str) -> bytes:
        try:
            return text.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise CodecError(ErrorKind.ENCODE_ERROR, f"text not representable in {self.encoding} ({e.reason})") from e
        except LookupError as e:
            raise CodecError(ErrorKind.ENCODE_ERROR, f"unknown encoding {self.encoding}") from e
    
    def _decode(self, data: bytes) -> List[CarRecord]:  # pragma: no cover - abstract
        raise NotImplementedError
    
    def _encode(self, records: Sequence[CarRecord]) -> bytes:  # pragma: no cover - abstract
        raise NotImplementedError
