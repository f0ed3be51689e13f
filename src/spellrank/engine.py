# spellrank/engine.py
from __future__ import annotations

import logging
import os
import threading
from typing import Any, List, Optional

from . import config as CFG
from .models import Candidate, LocaleResources, RankingRequest, RankingResponse, Weights
from .parameters import ParameterChannel, UpdateResult
from .registry import LocaleRegistry
from .search import scored_candidates, suggest

log = logging.getLogger(__name__)


class Session:
    """
    One host text-service session.

    Holds a reference to the snapshot of its locale. start() swaps that
    reference only after the new snapshot is fully loaded; a failed start
    keeps the previous snapshot resident and re-raises to the caller.
    """

    def __init__(self, engine: "Engine") -> None:
        self._engine = engine
        self._resources: Optional[LocaleResources] = None
        self._lock = threading.Lock()

    @property
    def resources(self) -> Optional[LocaleResources]:
        return self._resources

    @property
    def locale(self) -> Optional[str]:
        snap = self._resources
        return snap.locale if snap is not None else None

    # /* ~~~ resolve the locale and (re)load before serving any request ~~~ */
    def start(self, locale: str) -> LocaleResources:
        with self._lock:
            cur = self._resources
            if cur is not None and locale and cur.locale.lower() == locale.lower():
                return cur
            try:
                snap = self._engine.registry.get(locale)
            except Exception:
                log.error("Couldn't load locale %r; keeping %r", locale, cur.locale if cur else None)
                raise
            self._resources = snap
            return snap

    def get_suggestions(self, token: str, limit: int = CFG.TOP_K) -> List[str]:
        snap = self._resources
        if snap is None:
            raise RuntimeError("Session not started. Call start(locale) first.")
        weights = self._engine.parameters.weights
        return suggest(token or "", snap, weights, limit)

    def handle(self, request: RankingRequest) -> RankingResponse:
        return RankingResponse(self.get_suggestions(request.token, request.suggestion_limit))

    def explain(self, token: str) -> List[Candidate]:
        """Every scored candidate for `token`, best first (diagnostics)."""
        snap = self._resources
        if snap is None:
            raise RuntimeError("Session not started. Call start(locale) first.")
        return scored_candidates(token or "", snap, self._engine.parameters.weights)


class Engine:
    """
    Thin orchestration layer that glues together:
      - per-locale resources (LocaleRegistry, shared by all sessions),
      - runtime weights (ParameterChannel, shared by all sessions),
      - the ranking pipeline (search.suggest) via Session objects.

    Public API (used by CLI/Flask):
      * create_session(locale): start a session bound to a locale
      * apply_parameters(values): five-value weight update -> "valid"/"invalid"
      * shutdown(): stop the channel worker and drop loaded snapshots
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        resource_root: Optional[str] = None,
        weights: Optional[Weights] = None,
        registry: Optional[LocaleRegistry] = None,
        verbose: bool = False,
    ) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ["SPELLRANK_VERBOSE"] = "1"
        self.registry = registry or LocaleRegistry(resource_root)
        self.parameters = ParameterChannel(weights)

    def create_session(self, locale: str) -> Session:
        session = Session(self)
        session.start(locale)
        return session

    # ------------- parameters -------------

    def apply_parameters(self, values: Any) -> UpdateResult:
        return self.parameters.apply_update(values)

    @property
    def weights(self) -> Weights:
        return self.parameters.weights

    # ------------- teardown -------------

    def shutdown(self) -> None:
        try:
            self.parameters.stop()
        finally:
            self.registry.clear()
            log.info("Engine shutdown complete")
