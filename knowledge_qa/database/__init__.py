from .base import Base, UTCDateTime
from .connection import Database

__all__ = ["Base", "Database", "UTCDateTime"]
