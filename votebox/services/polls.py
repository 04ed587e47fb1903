"""Poll data access.

Every function runs a single statement and commits, so there is no
transaction spanning several calls. SQLAlchemy failures are wrapped in
DAOError.
"""
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from votebox.bootstrap.registry import PollRegistry
from votebox.core.exceptions import DAOError
from votebox.core.logging_config import get_logger
from votebox.db.models import Poll, PollOption
from votebox.schemas import OPTION_TYPES, Option, PollRead

logger = get_logger(__name__)


def get_poll(db: Session, poll_id: int) -> PollRead:
    """
    Get a single poll by id.

    Raises:
        DAOError: if the poll does not exist or the query fails
    """
    try:
        poll = db.query(Poll).filter(Poll.id == poll_id).first()
    except SQLAlchemyError as e:
        raise DAOError(f"Failed to retrieve poll {poll_id}.") from e

    if poll is None:
        raise DAOError(f"Poll {poll_id} not found.")

    return PollRead(id=poll.id, title=poll.title, message=poll.message)


def get_poll_list(db: Session) -> List[PollRead]:
    """Get all polls ordered by id."""
    try:
        polls = db.query(Poll).order_by(Poll.id).all()
    except SQLAlchemyError as e:
        raise DAOError("Failed to retrieve poll list.") from e

    return [PollRead(id=p.id, title=p.title, message=p.message) for p in polls]


def get_options(db: Session, registry: PollRegistry, poll_id: int) -> List[Option]:
    """
    Get the options of a poll ordered by id.

    The option flavor (band or website) is the category the poll was seeded
    with.

    Raises:
        DAOError: if the poll has no known category or the query fails
    """
    option_type = OPTION_TYPES.get(registry.category_of(poll_id))
    if option_type is None:
        raise DAOError(f"Poll ID {poll_id} not available.")

    try:
        rows = (
            db.query(PollOption)
            .filter(PollOption.poll_id == poll_id)
            .order_by(PollOption.id)
            .all()
        )
    except SQLAlchemyError as e:
        raise DAOError(f"Failed to retrieve options of poll {poll_id}.") from e

    return [
        option_type(
            id=row.id,
            name=row.option_title,
            link=row.option_link,
            votes=row.votes_count,
        )
        for row in rows
    ]


def vote(db: Session, option_id: int) -> None:
    """
    Add one vote to an option.

    The increment happens in the UPDATE statement itself, so concurrent votes
    only contend on the database row lock.

    Raises:
        DAOError: unless exactly one row was updated
    """
    try:
        affected = (
            db.query(PollOption)
            .filter(PollOption.id == option_id)
            .update(
                {PollOption.votes_count: PollOption.votes_count + 1},
                synchronize_session=False,
            )
        )
        if affected != 1:
            db.rollback()
            raise DAOError(f"Failed to update poll option {option_id}, {affected} rows affected.")
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise DAOError(f"Failed to vote for poll option {option_id}.") from e

    logger.info("vote_recorded", option_id=option_id)
