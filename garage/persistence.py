from __future__ import annotations
"""Format-agnostic load/save of car record collections.

The codec is chosen by file extension. Neither ``load`` nor ``save``
raises: every failure is logged and returned as an ``Err`` (``load`` also
hands back an empty list so callers can keep going).
"""
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Union

from .codecs import Codec, build_codecs, get_codec
from .config import AppConfig
from .logger import Logger
from .models import CarRecord
from .result import Err, ErrorKind, Ok, Result


log = Logger.bind(__name__)

PathLike = Union[str, os.PathLike]


def file_extension(path: PathLike) -> str:
    """Extension including the dot, taken from the last component.

    A name that is only an extension (".json") counts as that extension;
    a trailing dot ("cars.") gives no extension.
    """
    name = os.path.basename(os.fspath(path))
    i = name.rfind('.')
    if i < 0 or i == len(name) - 1:
        return ''
    return name[i:]


@dataclass
class LoadResult:
    """Records from a load plus the error that cut it short, if any."""
    records: List[CarRecord] = field(default_factory=list)
    error: Optional[Err] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None


class PersistenceManager:
    
    def __init__(self, config: Optional[AppConfig] = None, codecs: Optional[Mapping[str, Codec]] = None):
        self.config = config or AppConfig()
        self.codecs = dict(codecs) if codecs is not None else build_codecs(self.config)
    
    def codec_for(self, path: PathLike) -> Optional[Codec]:
        return get_codec(self.codecs, file_extension(path))
    
    def supported_extensions(self) -> list[str]:
        return sorted(self.codecs)
    
    def _unsupported(self, path: PathLike) -> Err:
        ext = file_extension(path) or '(none)'
        return Err(ErrorKind.UNSUPPORTED_FORMAT, f"extension {ext}; expected one of {', '.join(self.supported_extensions())}")
    
    # ---- load ----
    def load(self, path: Optional[PathLike]) -> LoadResult:
        if path is None or not os.fspath(path).strip():
            return self._load_failed(path, Err(ErrorKind.FILE_NOT_FOUND, "no path given"))
        p = Path(path).expanduser()
        try:
            if not p.exists():
                return self._load_failed(p, Err(ErrorKind.FILE_NOT_FOUND, str(p)))
            codec = self.codec_for(p)
            if codec is None:
                return self._load_failed(p, self._unsupported(p))
            if not p.is_file():
                return self._load_failed(p, Err(ErrorKind.IO_ERROR, f"{p} is not a regular file"))
            with p.open('rb') as f:
                data = f.read()
        except FileNotFoundError:
            return self._load_failed(p, Err(ErrorKind.FILE_NOT_FOUND, str(p)))
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL in the path
            return self._load_failed(p, Err(ErrorKind.IO_ERROR, f"{p}: {getattr(e, 'strerror', None) or e}"))
        result = codec.decode(data)
        if not result.ok:
            return self._load_failed(p, result)
        records = list(result.value)
        log.info(f"load done path={p} format={codec.name} records={len(records)}")
        return LoadResult(records=records)
    
    def _load_failed(self, path, err: Err) -> LoadResult:
        log.warn(f"load failed path={path} kind={err.kind.value} {err.message}")
        return LoadResult(records=[], error=err)
    
    # ---- save ----
    def save(self, records: Sequence[CarRecord], path: Optional[PathLike]) -> Result:
        """Write the whole collection to ``path``.

        Encoding happens in memory first; bytes go to a uniquely named temp
        file beside the target which then replaces it, so a failed save never
        leaves a truncated file behind and no other file is touched.
        """
        if path is None or not os.fspath(path).strip():
            return self._save_failed(path, Err(ErrorKind.INVALID_INPUT, "no save path given; nothing written"))
        target = Path(path).expanduser()
        codec = self.codec_for(target)
        if codec is None:
            return self._save_failed(target, self._unsupported(target))
        records = list(records)
        encoded = codec.encode(records)
        if not encoded.ok:
            return self._save_failed(target, encoded)
        tmp: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile('wb', dir=target.parent, prefix=f".{target.name}.", suffix='.tmp', delete=False) as f:
                tmp = Path(f.name)
                f.write(encoded.value)
            os.replace(tmp, target)
        except (OSError, ValueError) as e:
            self._discard(tmp)
            return self._save_failed(target, Err(ErrorKind.IO_ERROR, f"{target}: {getattr(e, 'strerror', None) or e}"))
        log.info(f"save done path={target} format={codec.name} records={len(records)} bytes={len(encoded.value)}")
        return Ok(target)
    
    def _save_failed(self, path, err: Err) -> Err:
        log.warn(f"save failed path={path} kind={err.kind.value} {err.message}")
        return err
    
    @staticmethod
    def _discard(tmp: Optional[Path]) -> None:
        if tmp is None:
            return
        try:
            if tmp.exists():
                tmp.unlink()
        except (OSError, ValueError) as e:
            log.debug(f"{tmp} cleanup failed error={e}")
