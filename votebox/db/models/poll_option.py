"""PollOption model."""
from sqlalchemy import BigInteger, Column, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from votebox.db.base import Base
from votebox.core.constants import OPTION_LINK_LENGTH, OPTION_TITLE_LENGTH


class PollOption(Base):
    __tablename__ = "poll_options"

    id = Column(Integer, primary_key=True, autoincrement=True)
    option_title = Column(String(OPTION_TITLE_LENGTH), nullable=False)
    option_link = Column(String(OPTION_LINK_LENGTH), nullable=False)
    poll_id = Column(Integer, ForeignKey("polls.id"), nullable=False)
    votes_count = Column(BigInteger, nullable=False, default=0)

    # Relationships
    poll = relationship("Poll", back_populates="options")

    __table_args__ = (
        Index("idx_poll_options_poll", "poll_id"),
        UniqueConstraint("poll_id", "option_title", name="uq_poll_option_title"),
    )
