"""Console entry point: ``python run.py [path]``."""
from __future__ import annotations

from garage.app import main


if __name__ == "__main__":
    raise SystemExit(main())
