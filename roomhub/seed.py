"""Development seed command.

Wipes every table and inserts a fixed fixture set: 2 rooms with 1 question
each, using generated names and descriptions. Destroys all existing data, so
only point it at a development database.

Usage:
    python -m roomhub.seed [--seed N] [--verbose]
"""
from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from roomhub import database, fake_data, models

logger = logging.getLogger(__name__)

ROOM_COUNT = 2
QUESTIONS_PER_ROOM = 1

CONFIRMATION_MESSAGE = "[INFO] Database seeded successfully (development only)"


def reset_database(db: Session) -> None:
    """Delete all rows from every table, children before parents."""
    for table in reversed(database.Base.metadata.sorted_tables):
        result = db.execute(table.delete())
        logger.debug("Cleared %s rows from %s", result.rowcount, table.name)


def populate_database(db: Session, rng: Optional[random.Random] = None) -> dict:
    """Insert the fixture rooms and their questions. Returns a dict of counts created."""
    rng = rng if rng is not None else random.Random()
    created = {"rooms": 0, "questions": 0}

    for _ in range(ROOM_COUNT):
        room = models.RoomModel(
            name=fake_data.company_name(rng),
            description=fake_data.lorem_paragraph(rng),
        )
        db.add(room)
        # Questions need the room id, which is assigned on insert
        db.flush()
        created["rooms"] += 1

        questions: List[models.QuestionModel] = [
            models.QuestionModel(room_id=room.id, question=fake_data.question_text(rng))
            for _ in range(QUESTIONS_PER_ROOM)
        ]
        db.add_all(questions)
        created["questions"] += len(questions)

    db.flush()
    return created


def run_seed(engine: Engine, rng: Optional[random.Random] = None) -> dict:
    """Reset and repopulate the database behind `engine`, then release its connections."""
    database.init_db(bind=engine)
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    db = session_factory()
    try:
        logger.info("Resetting database")
        reset_database(db)
        logger.info("Populating fixtures")
        created = populate_database(db, rng)
        db.commit()
        logger.info("Created %(rooms)d rooms and %(questions)d questions", created)
    finally:
        db.close()
        engine.dispose()
    return created


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Reset the development database and load fixture rooms")
    parser.add_argument("--seed", type=int, default=None, help="seed for the fixture generator")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    run_seed(database.engine, random.Random(args.seed))
    print(CONFIRMATION_MESSAGE)


if __name__ == "__main__":
    main()
