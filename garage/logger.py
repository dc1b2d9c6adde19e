from __future__ import annotations
"""Logger wrapper and logging setup for the garage tool.

Policy:
  - Concise English messages, key=value style
  - f-string style (callers pre-format strings)
  - Console: no timestamp
  - Static methods: info, debug, warn, error, exception
"""
import json
import logging
import sys
from logging.config import dictConfig
from pathlib import Path
from typing import Dict, Optional, Union

from colorama import Fore, Style
from colorama import init as colorama_init


LEVEL_STYLE: Dict[int, Dict[str, str]] = {
    logging.DEBUG: {
        "color": Fore.CYAN,
        "style": Style.DIM
    },
    logging.INFO: {
        "color": Fore.GREEN,
        "style": Style.NORMAL
    },
    logging.WARNING: {
        "color": Fore.YELLOW,
        "style": Style.NORMAL
    },
    logging.ERROR: {
        "color": Fore.RED,
        "style": Style.BRIGHT
    },
    logging.CRITICAL: {
        "color": Fore.RED,
        "style": Style.BRIGHT
    },
}

LOG_CONFIG_NAME = 'log.config.json'


class ColorFormatter(logging.Formatter):
    
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base = super().format(record)
        style = LEVEL_STYLE.get(record.levelno)
        if not style:
            return base
        return f"{style['style']}{style['color']}{base}{Style.RESET_ALL}"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def _apply_inline(level: int) -> None:
    """Color setup without timestamp."""
    colorama_init()
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[ %(levelname)5s ] %(name)s : %(message)s"  # no asctime
    handler.setFormatter(ColorFormatter(fmt=fmt))
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)


def setup_logging(level: Union[int, str] = logging.INFO, search_dirs: Optional[list[Path]] = None) -> Optional[Path]:
    """Initialize logging.

    Priority:
      1. log.config.json at CWD or project root (dictConfig)
      2. Inline color handler

    Returns the config file path that was applied, or None for the inline setup.
    """
    lvl = _resolve_level(level)
    dirs = search_dirs if search_dirs is not None else [
        Path.cwd(),
        Path(__file__).resolve().parent.parent,
    ]
    for d in dirs:
        p = d / LOG_CONFIG_NAME
        if not p.is_file():
            continue
        try:
            with p.open('r', encoding='utf-8') as f:
                data = json.load(f)
            dictConfig(data)
        except (OSError, ValueError, TypeError) as e:
            print(f"[logging] config load fail {p}: {e}", file=sys.stderr)
            continue
        logging.getLogger().setLevel(lvl)  # CLI level wins over the file
        logging.getLogger(__name__).debug(f"{p} loaded.")
        return p
    _apply_inline(lvl)
    logging.getLogger(__name__).debug("inline logging config active")
    return None


_LOGGER = logging.getLogger


class _BoundLogger:
    
    def __init__(self, name: str):
        self._name = name
    
    def debug(self, msg: str) -> None:
        _LOGGER(self._name).debug(msg)
    
    def info(self, msg: str) -> None:
        _LOGGER(self._name).info(msg)
    
    def warn(self, msg: str) -> None:
        _LOGGER(self._name).warning(msg)
    
    def error(self, msg: str) -> None:
        _LOGGER(self._name).error(msg)
    
    def exception(self, msg: str) -> None:
        _LOGGER(self._name).exception(msg)


class Logger:
    """Thin wrapper supporting both static global usage and bound instances.

    Static style:
        Logger.info("message")

    Module-aware style:
        log = Logger.bind(__name__)
        log.info("message")
    """
    
    @staticmethod
    def bind(name: str) -> _BoundLogger:
        return _BoundLogger(name)
    
    @staticmethod
    def debug(msg: str) -> None:
        _LOGGER(__name__).debug(msg)
    
    @staticmethod
    def info(msg: str) -> None:
        _LOGGER(__name__).info(msg)
    
    @staticmethod
    def warn(msg: str) -> None:
        _LOGGER(__name__).warning(msg)
    
    @staticmethod
    def error(msg: str) -> None:
        _LOGGER(__name__).error(msg)
    
    @staticmethod
    def exception(msg: str) -> None:
        _LOGGER(__name__).exception(msg)


__all__ = ["Logger", "setup_logging", "ColorFormatter", "LOG_CONFIG_NAME"]
