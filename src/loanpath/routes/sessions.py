# This project was developed with assistance from AI tools.
"""Analysis session routes: create, submit a profile, read state, export offers."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from ..schemas.session import (
    AnalysisResults,
    AnalysisSubmission,
    ComparisonSelection,
    OfferComparison,
    SessionSnapshot,
)
from ..services.export import CSV_FILENAME, offers_to_csv
from ..services.session import AnalysisSession, SessionError, SessionStore, get_session_store

router = APIRouter()


def _get_session(
    session_id: str, store: SessionStore = Depends(get_session_store)
) -> AnalysisSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session


@router.post("", response_model=SessionSnapshot, status_code=status.HTTP_201_CREATED)
async def create_session(store: SessionStore = Depends(get_session_store)) -> SessionSnapshot:
    """Start a new, idle analysis session."""
    return store.create().snapshot()


@router.get("/{session_id}", response_model=SessionSnapshot)
async def get_session(session: AnalysisSession = Depends(_get_session)) -> SessionSnapshot:
    return session.snapshot()


@router.post("/{session_id}/analysis", response_model=AnalysisResults)
async def submit_analysis(
    body: AnalysisSubmission,
    session: AnalysisSession = Depends(_get_session),
) -> AnalysisResults:
    """Analyse a loan profile: offers, advice, nearby vendors, and gold rates.

    Waits for every lookup to settle. Individual lookups degrade on their own;
    a failure that escapes them returns 502 with a generic message.
    """
    try:
        return await session.submit(body.profile, body.location)
    except SessionError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _require_results(session: AnalysisSession) -> None:
    if session.results is None:
        raise HTTPException(status_code=409, detail="No analysis results yet")


@router.post("/{session_id}/compare/{index}", response_model=ComparisonSelection)
async def toggle_compare(
    index: int, session: AnalysisSession = Depends(_get_session)
) -> ComparisonSelection:
    """Pick or unpick an offer for comparison; a third pick replaces the oldest."""
    _require_results(session)
    try:
        return session.toggle_compare(index)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/{session_id}/compare", response_model=OfferComparison)
async def compare_offers(
    a: int | None = Query(default=None, ge=0),
    b: int | None = Query(default=None, ge=0),
    session: AnalysisSession = Depends(_get_session),
) -> OfferComparison:
    """Two offers side by side with an EMI projection at each rate.

    Without ``a`` and ``b`` the session's current pick is compared.
    """
    _require_results(session)
    try:
        return session.compare(a, b)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/{session_id}/offers.csv")
async def export_offers(session: AnalysisSession = Depends(_get_session)) -> Response:
    """Download the displayed offers as CSV."""
    _require_results(session)
    return Response(
        content=offers_to_csv(session.results.offers),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
