from pathlib import Path
from typing import Iterable, Optional, Sequence

from sqlalchemy.orm import Session

from votebox.db.models import Poll, PollOption

BAND_POLL = "Glasanje za omiljeni bend"
WEBSITE_POLL = "Glasanje za omiljenu web stranicu"

POLLS = [
    (1, BAND_POLL, "Which band do you like best?"),
    (2, WEBSITE_POLL, "Which website do you like best?"),
]

BANDS = [
    (1, "The Beatles", "https://www.youtube.com/watch?v=z9ypq6_5bsg"),
    (2, "The Platters", "https://www.youtube.com/watch?v=H2di83WAOhU"),
    (3, "The Beach Boys", "https://www.youtube.com/watch?v=2s4slliAtQU"),
]

WEBSITES = [
    (1, "GitHub", "https://github.com"),
    (2, "Python", "https://www.python.org"),
]


def write_rows(path: Path, rows: Iterable[Sequence]) -> None:
    """Write tab-separated rows, one per line."""
    path.write_text(
        "".join("\t".join(str(value) for value in row) + "\n" for row in rows),
        encoding="utf-8",
    )


def set_votes(session: Session, poll_id: int, votes: Sequence[int]) -> list[int]:
    """Set the vote counts of a poll's options, in id order.

    Args:
        session: SQLAlchemy session
        poll_id: Poll whose options are updated
        votes: One count per option, ascending option id

    Returns:
        list[int]: The ids of the updated options
    """
    options = (
        session.query(PollOption)
        .filter(PollOption.poll_id == poll_id)
        .order_by(PollOption.id)
        .all()
    )
    for option, count in zip(options, votes):
        option.votes_count = count
    session.commit()
    return [option.id for option in options[: len(votes)]]


def get_votes(session: Session, poll_id: Optional[int] = None) -> dict[int, int]:
    """Return option id -> vote count, optionally for one poll only."""
    query = session.query(PollOption.id, PollOption.votes_count)
    if poll_id is not None:
        query = query.filter(PollOption.poll_id == poll_id)
    return dict(query.all())


def table_snapshot(session: Session) -> tuple[list, list]:
    """Return every row of both tables, for comparing database states."""
    polls = [
        (p.id, p.title, p.message, p.category)
        for p in session.query(Poll).order_by(Poll.id)
    ]
    options = [
        (o.id, o.option_title, o.option_link, o.poll_id, o.votes_count)
        for o in session.query(PollOption).order_by(PollOption.id)
    ]
    return polls, options
