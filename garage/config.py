from __future__ import annotations
"""Runtime configuration.

Resolution order for the config file:
  1. explicit path argument
  2. $GARAGE_CONFIG
  3. config.json at CWD or project root
Missing file -> defaults. Unknown keys are ignored.
"""
import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .logger import Logger


log = Logger.bind(__name__)

CONFIG_ENV = 'GARAGE_CONFIG'
CONFIG_NAME = 'config.json'


@dataclass
class AppConfig:
    encoding: str = 'utf-8'
    text_header: str = 'Car'  # marker line written before each text record
    log_level: str = 'INFO'
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known and isinstance(v, str)}
        return cls(**values)


def _candidates(path: Optional[Path]) -> list[Path]:
    if path is not None:
        return [Path(path)]
    env = os.environ.get(CONFIG_ENV, '').strip()
    if env:
        return [Path(env)]
    return [
        Path.cwd() / CONFIG_NAME,
        Path(__file__).resolve().parent.parent / CONFIG_NAME,
    ]


def load_config(path: Optional[Path] = None) -> AppConfig:
    for p in _candidates(path):
        if not p.is_file():
            continue
        try:
            with p.open('r', encoding='utf-8') as f:
                data = json.load(f) or {}
        except (OSError, ValueError) as e:
            log.debug(f"{p} load fail error={e}")
            return AppConfig()
        if not isinstance(data, dict):
            log.debug(f"{p} ignored: top-level value is not an object")
            return AppConfig()
        log.debug(f"{p} loaded.")
        return AppConfig.from_dict(data)
    return AppConfig()
