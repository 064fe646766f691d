class DatabaseError(Exception):
    """Base for all storage errors."""


class NotFoundError(DatabaseError):
    """Round (or hole) does not exist, including malformed round IDs."""


class DuplicateError(DatabaseError):
    """Unique constraint violation, e.g. a round ID that already exists."""


class IntegrityError(DatabaseError):
    """Check constraint violation on a stored value."""
