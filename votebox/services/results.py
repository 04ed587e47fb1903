"""Ordering of options by votes and winner selection."""
from typing import List, Sequence

from votebox.schemas import Option


def sort_by_votes(options: Sequence[Option]) -> List[Option]:
    """Order options by votes, most first. Ties keep their original order."""
    return sorted(options, key=lambda option: option.votes, reverse=True)


def get_winners(options: Sequence[Option]) -> List[Option]:
    """
    Get every option holding the maximum vote count.

    Several options are returned on a tie; an empty input has no winners.
    """
    if not options:
        return []
    max_votes = max(option.votes for option in options)
    return [option for option in sort_by_votes(options) if option.votes == max_votes]
