# This project was developed with assistance from AI tools.
"""Analysis session orchestration.

A session moves Idle -> Loading -> Results on each submission. The advisory
call, the vendor lookup, and (for gold loans) the bullion-rate lookup run
concurrently and are joined: results appear only once all three settle.
Each call already degrades on its own; anything that still escapes the
batch returns the session to Idle with a generic connectivity error and is
not retried.

Every submission is numbered. When a newer submission starts while an older
one is still in flight, the older one's late results are discarded instead
of overwriting the newer state.
"""

import asyncio
import logging
import uuid
from collections import OrderedDict
from datetime import UTC, datetime

from ..core.config import settings
from ..inference.backend import AdvisoryBackend, get_advisory_backend
from ..schemas.market import GoldRateSnapshot
from ..schemas.profile import Location, LoanProfile, LoanType
from ..schemas.session import (
    AnalysisResults,
    ComparisonSelection,
    OfferComparison,
    SessionSnapshot,
    SessionState,
)
from .advisory import fetch_advisory
from .affordability import evaluate
from .market_rates import fetch_gold_rates
from .results import build_results, compare_offers, toggle_comparison
from .vendors import locate

logger = logging.getLogger(__name__)

CONNECTIVITY_ERROR = "Something went wrong. Please check your connection."
MAX_SESSIONS = 1000


class SessionError(Exception):
    """An analysis could not complete; the session is back to Idle."""


def default_location() -> Location:
    return Location(latitude=settings.DEFAULT_LATITUDE, longitude=settings.DEFAULT_LONGITUDE)


async def _no_gold_rates() -> GoldRateSnapshot | None:
    return None


class AnalysisSession:
    """One user's analysis state. Results live in memory only."""

    def __init__(self, session_id: str, backend: AdvisoryBackend | None = None):
        self.session_id = session_id
        self.state = SessionState.IDLE
        self.results: AnalysisResults | None = None
        self.last_error: str | None = None
        self.compare_selection: list[int] = []
        self.updated_at = datetime.now(UTC)
        self._backend = backend
        self._sequence = 0

    @property
    def submissions(self) -> int:
        return self._sequence

    def _is_current(self, sequence: int) -> bool:
        return sequence == self._sequence

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    async def submit(
        self, profile: LoanProfile, location: Location | None = None
    ) -> AnalysisResults:
        """Run a full analysis for ``profile``.

        Raises:
            SessionError: an unexpected failure escaped the concurrent batch.
        """
        affordability = evaluate(profile)
        location = location or default_location()
        backend = self._backend or get_advisory_backend()

        self._sequence += 1
        sequence = self._sequence
        self.state = SessionState.LOADING
        self.last_error = None
        self._touch()
        logger.info(
            "Session %s submission %d: %s for %.0f over %d months",
            self.session_id,
            sequence,
            profile.loan_label,
            profile.loan_amount,
            profile.duration_months,
        )

        gold_lookup = (
            fetch_gold_rates(backend, session_id=self.session_id)
            if profile.loan_type is LoanType.GOLD
            else _no_gold_rates()
        )
        try:
            # Every lookup settles before the first failure is raised.
            outcomes = await asyncio.gather(
                fetch_advisory(profile, affordability, backend, session_id=self.session_id),
                locate(
                    location.latitude,
                    location.longitude,
                    profile.loan_amount,
                    profile.loan_type,
                    backend,
                ),
                gold_lookup,
                return_exceptions=True,
            )
            failure = next((o for o in outcomes if isinstance(o, BaseException)), None)
            if failure is not None:
                raise failure
            advisory, vendors, gold_rates = outcomes
            results = build_results(
                profile, affordability, advisory, vendors, gold_rates, location
            )
        except Exception as exc:
            logger.exception(
                "Analysis failed (session=%s, submission=%d)", self.session_id, sequence
            )
            if self._is_current(sequence):
                self.state = SessionState.IDLE
                self.results = None
                self.last_error = CONNECTIVITY_ERROR
                self.compare_selection = []
                self._touch()
            raise SessionError(CONNECTIVITY_ERROR) from exc

        if not self._is_current(sequence):
            logger.info(
                "Discarding results of superseded submission %d (session=%s, latest=%d)",
                sequence,
                self.session_id,
                self._sequence,
            )
            return results

        self.results = results
        self.state = SessionState.RESULTS
        self.compare_selection = []
        self._touch()
        return results

    def toggle_compare(self, index: int) -> ComparisonSelection:
        """Pick or unpick a displayed offer; the comparison appears once two are picked.

        Raises:
            ValueError: no results yet, or ``index`` is outside the offer list.
        """
        results = self._require_results()
        if not 0 <= index < len(results.offers):
            raise ValueError(f"Offer index {index} out of range (0-{len(results.offers) - 1})")
        self.compare_selection = toggle_comparison(self.compare_selection, index)
        self._touch()
        comparison = None
        if len(self.compare_selection) == 2:
            comparison = compare_offers(results, *self.compare_selection)
        return ComparisonSelection(selected=list(self.compare_selection), comparison=comparison)

    def compare(self, first: int | None = None, second: int | None = None) -> OfferComparison:
        """Compare two offers, defaulting to the current selection.

        Raises:
            ValueError: no results yet, fewer than two offers picked, or a bad index.
        """
        results = self._require_results()
        if first is None or second is None:
            if len(self.compare_selection) != 2:
                raise ValueError("Pick two offers to compare")
            first, second = self.compare_selection
        return compare_offers(results, first, second)

    def _require_results(self) -> AnalysisResults:
        if self.results is None:
            raise ValueError("No analysis results yet")
        return self.results

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.session_id,
            state=self.state,
            submissions=self._sequence,
            results=self.results,
            last_error=self.last_error,
            compare_selection=list(self.compare_selection),
            updated_at=self.updated_at,
        )


class SessionStore:
    """In-memory session registry; the oldest session is evicted past ``max_sessions``."""

    def __init__(self, max_sessions: int = MAX_SESSIONS):
        self._sessions: OrderedDict[str, AnalysisSession] = OrderedDict()
        self._max_sessions = max_sessions

    def create(self, backend: AdvisoryBackend | None = None) -> AnalysisSession:
        session = AnalysisSession(str(uuid.uuid4()), backend=backend)
        self._sessions[session.session_id] = session
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted session %s", evicted)
        return session

    def get(self, session_id: str) -> AnalysisSession | None:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Return the process-wide session store."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = SessionStore()
    return _store
