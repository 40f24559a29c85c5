from .site_store import SQLAlchemySiteStore

__all__ = [
    "SQLAlchemySiteStore",
]
