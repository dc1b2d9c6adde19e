from __future__ import annotations
"""Interactive record editor.

Consumes ``PersistenceManager`` for load/save and talks to the user only
through a ``Console``, so the whole session can be driven headless.
"""
from typing import List, Optional

from .console import Console
from .logger import Logger
from .models import FIELDS, CarRecord, parse_float, parse_int
from .persistence import LoadResult, PathLike, PersistenceManager
from .result import Err, ErrorKind, Ok, Result


log = Logger.bind(__name__)

FIELD_LABELS = ('Brand', 'Year', 'Price')

ACTIONS = ['s', 'e', 'a', 'd']
ACTIONS_HELP = 's: save, e: edit, a: add, d: delete, q: quit'


def edit_field(record: CarRecord, index: int, raw: str) -> Result:
    """Set field ``index`` (0 brand, 1 year, 2 price) of ``record`` from user text.

    Brand is taken verbatim. Year/price must parse; otherwise the record
    is left unchanged and an INVALID_INPUT error is returned.
    """
    if index == 0:
        record.brand = raw
        return Ok(record)
    if index == 1:
        year = parse_int(raw)
        if year is None:
            return Err(ErrorKind.INVALID_INPUT, f"year {raw!r} is not an integer; value unchanged")
        record.year = year
        return Ok(record)
    if index == 2:
        price = parse_float(raw)
        if price is None:
            return Err(ErrorKind.INVALID_INPUT, f"price {raw!r} is not a number; value unchanged")
        record.price = price
        return Ok(record)
    return Err(ErrorKind.INVALID_INPUT, f"field index {index} out of range 0..{len(FIELDS) - 1}")


class Editor:
    
    def __init__(self, manager: PersistenceManager, console: Optional[Console] = None, records: Optional[List[CarRecord]] = None):
        self.manager = manager
        self.console = console or Console()
        self.records: List[CarRecord] = records if records is not None else []
        self.dirty = False
    
    def _report(self, err: Err) -> None:
        self.console.write(err.describe())
    
    # ---- load / save ----
    def load(self, path: Optional[PathLike]) -> LoadResult:
        result = self.manager.load(path)
        self.records = result.records
        self.dirty = False
        if result.error is not None:
            self._report(result.error)
        else:
            self.console.write(f"Loaded {len(self.records)} car(s).")
        return result
    
    def save(self, path: Optional[PathLike] = None) -> Result:
        if path is None:
            path = self.console.read('Save to [path]')
        result = self.manager.save(self.records, path)
        if result.ok:
            self.dirty = False
            self.console.write(f"Saved {len(self.records)} car(s) to {result.value}.")
        else:
            self._report(result)
        return result
    
    # ---- display ----
    def show_record(self, record: CarRecord) -> None:
        self.console.write(f"  Brand: {record.brand if record.brand is not None else ''}")
        self.console.write(f"  Year: {record.year}")
        self.console.write(f"  Price: {record.price}")
    
    def show_all(self) -> None:
        if not self.records:
            self.console.write("No cars loaded.")
        for i, rec in enumerate(self.records, start=1):
            self.console.write(f"Car {i}:")
            self.show_record(rec)
            self.console.write()
    
    # ---- editing ----
    def select_record(self) -> Optional[int]:
        """Ask for a 1-based record number; returns the zero-based index or None."""
        if not self.records:
            self.console.write("No cars to choose from.")
            return None
        for i, rec in enumerate(self.records, start=1):
            self.console.write(f"{i}: {rec.brand if rec.brand is not None else ''}")
        raw = self.console.read(f"Car number (1-{len(self.records)})")
        n = parse_int(raw)
        if n is None or not 1 <= n <= len(self.records):
            self.console.write("Invalid choice.")
            return None
        return n - 1
    
    def edit_record(self, record: CarRecord) -> Optional[Result]:
        """Prompt for a field and a new value. None when the user backs out."""
        menu = ', '.join(f"{i}: {label}" for i, label in enumerate(FIELD_LABELS, start=1))
        raw = self.console.read(f"Field to edit ({menu}, 0: back)")
        choice = parse_int(raw)
        if raw is None or choice == 0:
            return None
        if choice is None or not 1 <= choice <= len(FIELDS):
            self.console.write("Invalid choice.")
            return None
        value = self.console.read(f"New {FIELD_LABELS[choice - 1].lower()}")
        if value is None:
            return None
        result = edit_field(record, choice - 1, value)
        if result.ok:
            self.dirty = True
            log.debug(f"edit field={FIELDS[choice - 1]} value={value!r}")
        else:
            self._report(result)
        return result
    
    def add_record(self) -> CarRecord:
        rec = CarRecord()
        self.records.append(rec)
        self.dirty = True
        self.console.write(f"Added car {len(self.records)}.")
        return rec
    
    def delete_record(self) -> Optional[CarRecord]:
        idx = self.select_record()
        if idx is None:
            return None
        rec = self.records.pop(idx)
        self.dirty = True
        self.console.write(f"Deleted car {idx + 1}.")
        return rec
    
    # ---- main loop ----
    def run(self) -> int:
        while True:
            self.show_all()
            self.console.write(ACTIONS_HELP)
            action = self.console.select('Action', ACTIONS)
            if action == 'quit':
                if self.dirty and not self.console.closed and not self.console.confirm('Unsaved changes. Quit anyway?'):
                    continue
                return 0
            if action == 's':
                self.save()
            elif action == 'e':
                idx = self.select_record()
                if idx is not None:
                    self.edit_record(self.records[idx])
            elif action == 'a':
                rec = self.add_record()
                # offer one field edit on the new record; 0 skips it
                self.edit_record(rec)
            elif action == 'd':
                self.delete_record()
