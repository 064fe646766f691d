from .hole_repo import HoleRepositoryDB
from .round_repo import RoundRepositoryDB

__all__ = ["HoleRepositoryDB", "RoundRepositoryDB"]
