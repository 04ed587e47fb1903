"""Results view schemas."""
from typing import List

from pydantic import BaseModel

from votebox.schemas.poll import Option


class PollResults(BaseModel):
    poll_id: int
    options: List[Option]
    winners: List[Option]

    @property
    def total_votes(self) -> int:
        return sum(option.votes for option in self.options)
