from __future__ import annotations
"""Line-oriented console prompts over injectable read/write ports.

``read_line(prompt)`` returns the entered line without its newline, or
None at end of input. ``write_line(text)`` prints one line. The defaults
use input()/print(); tests pass scripted callables instead.
"""
from typing import Callable, Optional


ReadLine = Callable[[str], Optional[str]]
WriteLine = Callable[[str], None]


def stdin_read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):  # noqa: PERF203
        print()
        return None


def stdout_write_line(text: str) -> None:
    print(text)


class Console:
    
    def __init__(self, read_line: Optional[ReadLine] = None, write_line: Optional[WriteLine] = None):
        self._reader = read_line or stdin_read_line
        self._write = write_line or stdout_write_line
        self.closed = False  # set once end of input is seen
    
    def _read(self, prompt: str) -> Optional[str]:
        if self.closed:
            return None
        raw = self._reader(prompt)
        if raw is None:
            self.closed = True
        return raw
    
    def write(self, text: str = '') -> None:
        self._write(text)
    
    def read(self, prompt: str) -> Optional[str]:
        """Raw line, unstripped. None at end of input."""
        return self._read(f"{prompt} : ")
    
    def select(self, prompt: str, options: list[str]) -> str:
        """Loop until one of ``options`` (case-insensitive) is entered; 'quit' on q or end of input."""
        while True:
            raw = self._read(f"{prompt} [ {'/'.join(options + ['q(uit)'])} ] : ")
            if raw is None:
                return 'quit'
            ans = raw.strip().lower()
            if not ans: continue
            if ans in ('q', 'quit'): return 'quit'
            if ans in options: return ans
    
    def confirm(self, prompt: str) -> bool:
        while True:
            raw = self._read(f"{prompt} [ y/n ] : ")
            if raw is None:
                return False
            ans = raw.strip().lower()
            if not ans: continue
            if ans in ('y', 'yes'): return True
            if ans in ('n', 'no', 'q', 'quit'): return False
    
    def input_str(self, prompt: str) -> Optional[str]:
        """Loop until a non-blank line is entered; None at end of input."""
        while True:
            raw = self._read(f"{prompt} : ")
            if raw is None:
                return None
            raw = raw.strip()
            if not raw: continue
            return raw
