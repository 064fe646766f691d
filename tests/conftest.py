import pytest
from datetime import datetime, timezone
from uuid import uuid4
from unittest.mock import AsyncMock, MagicMock

from database.exceptions import NotFoundError


class MemoryHoleStore:
    """In-memory HoleStore keyed by (round_id, hole)."""

    def __init__(self, known_rounds=None):
        self.rows = {}
        self.known_rounds = known_rounds
        self.reads = 0

    def _check(self, round_id):
        if self.known_rounds is not None and round_id not in self.known_rounds:
            raise NotFoundError(f"Round {round_id} not found")

    async def get_hole(self, round_id, hole):
        self._check(round_id)
        self.reads += 1
        return self.rows.get((round_id, hole))

    async def put_hole(self, stats):
        self._check(stats.round_id)
        self.rows[(stats.round_id, stats.hole)] = stats
        return stats

    async def list_holes(self, round_id):
        self._check(round_id)
        return sorted(
            (s for (rid, _), s in self.rows.items() if rid == round_id),
            key=lambda s: s.hole,
        )


@pytest.fixture
def memory_store():
    return MemoryHoleStore()


@pytest.fixture
def mock_pool():
    pool = MagicMock()
    conn = AsyncMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    return pool, conn


class FakeRounds:
    """In-memory stand-in for RoundRepositoryDB sharing a MemoryHoleStore."""

    def __init__(self, holes: MemoryHoleStore):
        self.rounds = {}
        self._holes = holes

    async def create_round(self, round_):
        rid = str(uuid4())
        created = round_.model_copy(update={"id": rid, "created_at": datetime.now(timezone.utc)})
        self.rounds[rid] = created
        self._holes.known_rounds.add(rid)
        return created

    async def get_round(self, round_id):
        r = self.rounds.get(round_id)
        if not r:
            return None
        return r.model_copy(update={"holes": await self._holes.list_holes(round_id)})

    async def list_rounds(self, *, limit=20, offset=0):
        ids = list(self.rounds)[offset:offset + limit]
        return [await self.get_round(rid) for rid in ids]

    async def delete_round(self, round_id):
        return self.rounds.pop(round_id, None) is not None


class FakeDB:
    """Same surface as DatabaseManager (.rounds / .holes) without a database."""

    def __init__(self):
        self.holes = MemoryHoleStore(known_rounds=set())
        self.rounds = FakeRounds(self.holes)


@pytest.fixture
def fake_db():
    return FakeDB()
