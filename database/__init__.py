from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import HoleRepositoryDB, RoundRepositoryDB
from database.exceptions import DatabaseError, NotFoundError, DuplicateError, IntegrityError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "HoleRepositoryDB",
    "RoundRepositoryDB",
    "DatabaseError",
    "NotFoundError",
    "DuplicateError",
    "IntegrityError",
]
