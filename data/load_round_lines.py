"""Replay a file of score lines (typed notes or voice transcripts) into a new round.

    python3 data/load_round_lines.py notes.txt --name "Saturday nine" --player Sam

One line per entry, in the order they were spoken. Blank lines and lines
starting with '#' are skipped. A line like "select 7" picks hole 7 for the
next line, the same way tapping a hole on the scorecard does; saving clears it.
"""

import argparse
import asyncio
import os
import re
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from analytics.stats import round_summary
from api.config import Settings
from database.connection import DatabasePool
from database.db_manager import DatabaseManager
from entry import HoleSelection, ParseFailure, record_line
from models import Round

SELECT_RE = re.compile(r"^\s*select\s+(\d{1,2})\s*$", re.IGNORECASE)


def read_lines(path: str):
    with open(path, encoding="utf-8") as f:
        for number, text in enumerate(f, start=1):
            text = text.strip()
            if text and not text.startswith("#"):
                yield number, text


async def load_lines(
    lines_path: str,
    name: str = None,
    players=None,
    tee_box: str = None,
    dsn: str = None,
):
    entries = list(read_lines(lines_path))
    print(f"Read {len(entries)} lines from {lines_path}")

    pool = DatabasePool()
    await pool.initialize(dsn=dsn)
    db = DatabaseManager(pool.pool)

    try:
        round_ = await db.rounds.create_round(
            Round(name=name, players=players or [], tee_box=tee_box)
        )
        print(f"Created round: {round_.name or '(unnamed)'} ({round_.id})")

        selection = HoleSelection()
        saved = 0
        rejected = 0
        for number, text in entries:
            picked = SELECT_RE.match(text)
            if picked:
                try:
                    selection.toggle(int(picked.group(1)))
                except ValueError as e:
                    rejected += 1
                    print(f"  L{number}: SKIP '{text}': {e}")
                    continue
                print(f"  L{number}: selected hole {selection.selected or '-'}")
                continue

            result = await record_line(db.holes, round_.id, text, selection)
            if isinstance(result, ParseFailure):
                rejected += 1
                print(f"  L{number}: SKIP '{text}': {result.message}")
                continue

            saved += 1
            print(
                f"  L{number}: hole {result.hole}: {result.strokes} strokes, "
                f"{result.putts} putts, {result.balls_lost} lost"
            )

        totals = round_summary(await db.rounds.get_round(round_.id))
        print(f"\nDone: {saved} lines saved, {rejected} rejected")
        print(
            f"Holes played: {totals['holes_played']}, "
            f"strokes: {totals['total_strokes'] or '-'}, "
            f"to par: {totals['to_par'] if totals['to_par'] is not None else '-'}"
        )

    finally:
        await pool.close()


def main():
    parser = argparse.ArgumentParser(description="Replay score lines into a new round.")
    parser.add_argument("lines", help="Text file with one score line per row")
    parser.add_argument("--name", help="Round name")
    parser.add_argument("--player", action="append", dest="players", help="Player name (repeatable)")
    parser.add_argument("--tee-box", help="Championship, Back, Middle, Forward or Junior")
    args = parser.parse_args()

    settings = Settings()
    asyncio.run(
        load_lines(args.lines, args.name, args.players, args.tee_box, settings.database_url)
    )


if __name__ == "__main__":
    main()
