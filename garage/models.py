from __future__ import annotations
"""Vehicle record model and numeric coercion helpers shared by codecs and the editor."""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# Zero-based field order used by the text layout and the editor.
FIELDS = ('brand', 'year', 'price')


@dataclass
class CarRecord:
    """One vehicle entry.

    brand: free text, None when the source had no value.
    year: 0 when absent or unparseable.
    price: 0.0 when absent or unparseable.
    No range checks: negative and zero values are kept as-is.
    """
    brand: Optional[str] = None
    year: int = 0
    price: float = 0.0
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse integer text; None when it is missing or not an integer."""
    if text is None:
        return None
    t = text.strip()
    if not t:
        return None
    try:
        return int(t)
    except ValueError:
        return None


def parse_float(text: Optional[str]) -> Optional[float]:
    """Parse float text, accepting a single ',' as decimal separator."""
    if text is None:
        return None
    t = text.strip()
    if not t:
        return None
    if ',' in t and '.' not in t and t.count(',') == 1:
        t = t.replace(',', '.')
    try:
        return float(t)
    except ValueError:
        return None


def coerce_int(value: Any) -> Optional[int]:
    """Coerce a decoded JSON/XML value to int.

    Accepts ints, integral floats and integer strings. Returns None for
    anything else (booleans included).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        n = parse_int(value)
        if n is not None:
            return n
        f = parse_float(value)
        if f is not None and f.is_integer():
            return int(f)
    return None


def coerce_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return parse_float(value)
    return None
