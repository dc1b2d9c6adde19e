from __future__ import annotations
"""Codec registry keyed by file extension.

Extensions are matched exactly and case-sensitively (".txt", ".json",
".xml"). A new format registers a factory taking the active ``AppConfig``::

    register('.csv', lambda cfg: CsvCodec(encoding=cfg.encoding))
"""
from typing import TYPE_CHECKING, Callable, Dict, Mapping, Optional

from .base import Codec
from .json_codec import JsonCodec
from .text import TextCodec
from .xml_codec import XmlCodec

if TYPE_CHECKING:  # pragma: no cover
    from ..config import AppConfig


CodecFactory = Callable[['AppConfig'], Codec]

_REGISTRY: Dict[str, CodecFactory] = {}


def register(extension: str, factory: CodecFactory) -> None:
    if not extension.startswith('.'):
        raise ValueError(f"extension must start with '.': {extension}")
    if extension in _REGISTRY:
        raise ValueError(f"codec already registered: {extension}")
    _REGISTRY[extension] = factory


def unregister(extension: str) -> None:
    _REGISTRY.pop(extension, None)


def available_extensions() -> list[str]:
    return sorted(_REGISTRY.keys())


def build_codecs(config: Optional['AppConfig'] = None) -> Dict[str, Codec]:
    """Instantiate every registered codec for the given configuration."""
    if config is None:
        from ..config import AppConfig
        config = AppConfig()
    return {ext: factory(config) for ext, factory in _REGISTRY.items()}


def get_codec(codecs: Mapping[str, Codec], extension: str) -> Optional[Codec]:
    return codecs.get(extension)


register('.txt', lambda cfg: TextCodec(encoding=cfg.encoding, header=cfg.text_header))
register('.json', lambda cfg: JsonCodec(encoding=cfg.encoding))
register('.xml', lambda cfg: XmlCodec(encoding=cfg.encoding))


__all__ = [
    "Codec",
    "TextCodec",
    "JsonCodec",
    "XmlCodec",
    "register",
    "unregister",
    "available_extensions",
    "build_codecs",
    "get_codec",
]
