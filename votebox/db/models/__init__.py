"""Database models."""
from votebox.db.models.poll import Poll
from votebox.db.models.poll_option import PollOption

__all__ = ["Poll", "PollOption"]
