from __future__ import annotations
"""Tagged results for codec and persistence outcomes.

Codecs raise ``CodecError`` internally; the codec boundary turns it into
``Err`` so callers branch on ``result.ok`` instead of catching.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ErrorKind(str, Enum):
    FILE_NOT_FOUND = 'file_not_found'
    UNSUPPORTED_FORMAT = 'unsupported_format'
    DECODE_ERROR = 'decode_error'
    ENCODE_ERROR = 'encode_error'
    IO_ERROR = 'io_error'
    INVALID_INPUT = 'invalid_input'


# Human-readable prefix per kind, shown to the user before the detail message.
KIND_LABELS = {
    ErrorKind.FILE_NOT_FOUND: 'File does not exist',
    ErrorKind.UNSUPPORTED_FORMAT: 'Unsupported file format',
    ErrorKind.DECODE_ERROR: 'Could not read file contents',
    ErrorKind.ENCODE_ERROR: 'Could not serialize records',
    ErrorKind.IO_ERROR: 'File access failed',
    ErrorKind.INVALID_INPUT: 'Invalid input',
}


@dataclass(frozen=True)
class Ok:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str = ''

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        label = KIND_LABELS.get(self.kind, self.kind.value)
        return f"{label}: {self.message}" if self.message else label


Result = Union[Ok, Err]


class CodecError(Exception):
    """Raised inside a codec when input cannot be decoded or output cannot be encoded."""
    
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
    
    def to_err(self) -> Err:
        return Err(self.kind, self.message)


__all__ = ["ErrorKind", "Ok", "Err", "Result", "CodecError", "KIND_LABELS"]
