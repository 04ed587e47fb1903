"""Voting pages, vote casting and result exports."""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from votebox.api.deps import get_db, get_registry, get_settings, option_id_param, poll_id_param
from votebox.api.templating import templates
from votebox.bootstrap.registry import PollRegistry
from votebox.core.config import Settings
from votebox.core.constants import XLS_FILENAME, XLS_MEDIA_TYPE
from votebox.core.rate_limit import RATE_LIMITS, limiter
from votebox.schemas import PollResults
from votebox.services import (
    build_results_workbook,
    get_options,
    get_poll,
    get_poll_list,
    get_winners,
    render_pie_chart,
    sort_by_votes,
    vote,
)

router = APIRouter()


@router.get("/", response_class=HTMLResponse, name="index")
@router.get("/index.html", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request, db: Session = Depends(get_db)):
    """List every poll."""
    polls = get_poll_list(db)
    return templates.TemplateResponse(request, "index.html", {"polls": polls})


@router.get("/glasanje", response_class=HTMLResponse, name="vote_page")
def vote_page(
    request: Request,
    poll_id: int = Depends(poll_id_param),
    db: Session = Depends(get_db),
    registry: PollRegistry = Depends(get_registry),
):
    """Show a poll and the options that can be voted for."""
    poll = get_poll(db, poll_id)
    options = get_options(db, registry, poll_id)
    return templates.TemplateResponse(
        request,
        "vote.html",
        {"poll": poll, "options": options},
    )


@router.get("/glasanje-glasaj", name="cast_vote")
@limiter.limit(RATE_LIMITS["vote"])
def cast_vote(
    request: Request,
    poll_id: int = Depends(poll_id_param),
    option_id: int = Depends(option_id_param),
    db: Session = Depends(get_db),
):
    """
    Add one vote to an option and redirect to the poll's results.

    Rate Limit:
        VOTE_RATE_LIMIT per client IP
    """
    vote(db, option_id)
    url = request.app.url_path_for("results")
    return RedirectResponse(url=f"{url}?pollID={poll_id}", status_code=302)


@router.get("/glasanje-rezultati", response_class=HTMLResponse, name="results")
def results(
    request: Request,
    poll_id: int = Depends(poll_id_param),
    db: Session = Depends(get_db),
    registry: PollRegistry = Depends(get_registry),
):
    """Show the options ordered by votes together with the winner(s)."""
    poll = get_poll(db, poll_id)
    options = sort_by_votes(get_options(db, registry, poll_id))
    poll_results = PollResults(poll_id=poll_id, options=options, winners=get_winners(options))
    return templates.TemplateResponse(
        request,
        "results.html",
        {"poll": poll, "results": poll_results},
    )


@router.get("/glasanje-grafika", name="results_chart")
def results_chart(
    poll_id: int = Depends(poll_id_param),
    db: Session = Depends(get_db),
    registry: PollRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    """Render the vote shares as a PNG pie chart."""
    options = get_options(db, registry, poll_id)
    image = render_pie_chart(options, size=(settings.CHART_WIDTH, settings.CHART_HEIGHT))
    return Response(content=image, media_type="image/png")


@router.get("/glasanje-xls", name="results_xls")
def results_xls(
    poll_id: int = Depends(poll_id_param),
    db: Session = Depends(get_db),
    registry: PollRegistry = Depends(get_registry),
):
    """Download the results as a spreadsheet."""
    options = get_options(db, registry, poll_id)
    return Response(
        content=build_results_workbook(options),
        media_type=XLS_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{XLS_FILENAME}"'},
    )
