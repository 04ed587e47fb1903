"""Poll model."""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from votebox.db.base import Base
from votebox.core.constants import POLL_MESSAGE_LENGTH, POLL_TITLE_LENGTH


class Poll(Base):
    __tablename__ = "polls"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(POLL_TITLE_LENGTH), unique=True, nullable=False)
    message = Column(Text(POLL_MESSAGE_LENGTH), nullable=False)
    # band or website; NULL for a poll that offers no options
    category = Column(String(20), nullable=True)

    # Relationships
    options = relationship("PollOption", back_populates="poll", order_by="PollOption.id")
