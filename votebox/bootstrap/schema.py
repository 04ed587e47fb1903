"""Idempotent creation and seeding of the polls tables."""
from typing import Optional, Sequence

from sqlalchemy import inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from votebox.bootstrap.definitions import Definitions
from votebox.bootstrap.registry import PollRegistry
from votebox.core.constants import CATEGORIES
from votebox.core.logging_config import get_logger
from votebox.db.base import Base
from votebox.db.models import Poll, PollOption
from votebox.db.session import make_session_factory, session_scope

logger = get_logger(__name__)

# Parents before children so the foreign key target exists
SEEDED_TABLES = (Poll.__table__, PollOption.__table__)


def category_for_title(title: str) -> Optional[str]:
    """Return the option category a poll title is seeded with."""
    for category in CATEGORIES:
        if category.poll_title == title:
            return category.name
    return None


def create_missing_tables(engine: Engine) -> list[str]:
    """
    Create whichever seeded tables do not exist yet.

    Returns:
        Names of the tables that were created
    """
    inspector = inspect(engine)
    created = []
    for table in SEEDED_TABLES:
        if inspector.has_table(table.name):
            continue
        Base.metadata.create_all(bind=engine, tables=[table])
        logger.info("schema_table_created", table=table.name)
        created.append(table.name)
    return created


def _insert(db: Session, row, new_table: bool = False) -> bool:
    """
    Insert and commit one row.

    A constraint violation means the row was seeded by an earlier start;
    it is rolled back and skipped. In a table created by this run it can
    only be a repeated definition, which is logged as a warning.
    """
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if new_table:
            logger.warning("seed_duplicate_skipped", table=row.__tablename__, title=_title_of(row))
        else:
            logger.debug("seed_row_skipped", table=row.__tablename__)
        return False
    return True


def _title_of(row) -> str:
    return row.title if isinstance(row, Poll) else row.option_title


def load_registry(db: Session) -> PollRegistry:
    rows = db.execute(select(Poll.id, Poll.title, Poll.category).order_by(Poll.id)).all()
    return PollRegistry.from_rows(rows)


def seed(db: Session, definitions: Definitions, new_tables: Sequence[str] = ()) -> PollRegistry:
    """
    Insert every defined poll and option that is not stored yet.

    ``new_tables`` names the tables created in this run; conflicts in them
    are duplicate definitions rather than rows from an earlier start.
    """
    new_polls = Poll.__tablename__ in new_tables
    new_options = PollOption.__tablename__ in new_tables

    inserted_polls = 0
    for poll in definitions.polls:
        row = Poll(title=poll.title, message=poll.message, category=category_for_title(poll.title))
        inserted_polls += _insert(db, row, new_table=new_polls)

    registry = load_registry(db)

    inserted_options = 0
    for category, options in definitions.options.items():
        poll_id = registry.poll_id_for_category(category)
        if poll_id is None:
            logger.warning("seed_category_without_poll", category=category, options=len(options))
            continue
        for option in options:
            row = PollOption(
                option_title=option.name,
                option_link=option.link,
                poll_id=poll_id,
                votes_count=option.votes,
            )
            inserted_options += _insert(db, row, new_table=new_options)

    logger.info(
        "schema_seeded",
        polls_inserted=inserted_polls,
        options_inserted=inserted_options,
        polls_total=len(registry),
    )
    return registry


def initialize_schema(engine: Engine, definitions: Definitions) -> PollRegistry:
    """
    Make sure both tables exist and hold the defined polls and options.

    Safe to run on every start: rows that already exist are skipped.
    Connectivity errors propagate and abort startup.

    Returns:
        The poll registry read back from the database
    """
    created = create_missing_tables(engine)
    with session_scope(make_session_factory(engine)) as db:
        return seed(db, definitions, new_tables=created)
