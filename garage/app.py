from __future__ import annotations
"""Entry point: load a car file, edit it interactively, save on demand.

Behavior:
    1. Read config (config.json / $GARAGE_CONFIG / --config)
    2. Initialize logging (config level, --log-level wins)
    3. Take the file path from the command line or prompt for it
    4. Load, then hand over to the editor loop until quit
"""
import argparse
from pathlib import Path
from typing import Optional, Sequence

from .config import load_config
from .console import Console
from .editor import Editor
from .logger import Logger, setup_logging
from .persistence import PersistenceManager


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='garage', description='View and edit car records stored as .txt, .json or .xml')
    p.add_argument('path', nargs='?', help='file to load (prompted when omitted)')
    p.add_argument('--config', type=Path, default=None, help='config.json path')
    p.add_argument('--log-level', default=None, help='DEBUG, INFO, WARNING, ...')
    return p


class App:
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console
    
    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        args = build_parser().parse_args(argv)
        config = load_config(args.config)
        setup_logging(args.log_level or config.log_level)
        console = self.console or Console()
        manager = PersistenceManager(config)
        editor = Editor(manager, console)
        try:
            path = args.path
            if path is None:
                path = console.input_str('File path')
            editor.load(path)
            return editor.run()
        except Exception as e:  # noqa: BLE001
            Logger.exception(f"unexpected error={e}")
            return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    return App().run(argv)
