from .export import build_results_workbook, render_pie_chart
from .polls import get_options, get_poll, get_poll_list, vote
from .results import get_winners, sort_by_votes

__all__ = [
    # polls
    "get_options",
    "get_poll",
    "get_poll_list",
    "vote",
    # results
    "get_winners",
    "sort_by_votes",
    # export
    "build_results_workbook",
    "render_pie_chart",
]
