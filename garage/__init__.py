"""Car record file editor.

Loads vehicle records from .txt, .json or .xml files into ``CarRecord``
lists and writes them back. Import submodules explicitly, e.g.
``from garage.persistence import PersistenceManager``.
"""

__all__ = ["CarRecord", "PersistenceManager", "LoadResult"]
__version__ = "0.1.0"


def __getattr__(name: str):  # pragma: no cover - thin shim
    if name in __all__:
        from garage.models import CarRecord
        from garage.persistence import LoadResult, PersistenceManager
        mapping = {
            'CarRecord': CarRecord,
            'PersistenceManager': PersistenceManager,
            'LoadResult': LoadResult,
        }
        return mapping[name]
    raise AttributeError(name)
