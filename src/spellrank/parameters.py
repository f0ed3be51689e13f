"""
Runtime re-weighting of the ranking engine.

The channel owns the current Weights. An update either carries exactly five
numbers and replaces all of them in one reference swap, or it is rejected and
the weights stay as they were. Every update is answered with an
acknowledgment token, "valid" or "invalid".

Two ways in:
  * apply_update(values): synchronous, returns the UpdateResult.
  * submit(values): asynchronous message; a worker thread (start/stop) or an
    explicit drain() applies it and publishes the acknowledgment on the
    `acknowledgments` queue and to every subscribed listener.
"""
from __future__ import annotations
import enum
import logging
import queue
import threading
from typing import Any, Callable, List, Optional

from . import config as CFG
from .errors import InvalidParameterUpdate
from .models import Weights

log = logging.getLogger(__name__)

Listener = Callable[["UpdateResult"], None]
_STOP = object()


class UpdateResult(str, enum.Enum):
    VALID = CFG.ACK_VALID
    INVALID = CFG.ACK_INVALID

    def __str__(self) -> str:
        return self.value


class ParameterChannel:
    def __init__(self, weights: Optional[Weights] = None) -> None:
        self._weights: Weights = weights or Weights()
        self._lock = threading.Lock()
        self._inbound: "queue.Queue[Any]" = queue.Queue()
        self.acknowledgments: "queue.Queue[UpdateResult]" = queue.Queue()
        self._listeners: List[Listener] = []
        self._worker: Optional[threading.Thread] = None

    # ------------- weights -------------

    @property
    def weights(self) -> Weights:
        # one reference read: always a complete five-value set
        return self._weights

    def apply_update(self, values: Any) -> UpdateResult:
        try:
            new = Weights.from_sequence(values)
        except InvalidParameterUpdate as e:
            log.warning("Rejected parameter update: %s", e)
            return UpdateResult.INVALID
        with self._lock:
            self._weights = new
        log.info("Applied parameter update: %s", new.as_list())
        return UpdateResult.VALID

    # ------------- message interface -------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def submit(self, values: Any) -> None:
        """Enqueue an update; its acknowledgment is published once processed."""
        self._inbound.put(values)

    def drain(self) -> int:
        """Process every pending update on the calling thread; returns how many."""
        n = 0
        while True:
            try:
                msg = self._inbound.get_nowait()
            except queue.Empty:
                return n
            if msg is _STOP:
                continue
            self._handle(msg)
            n += 1

    def _handle(self, values: Any) -> UpdateResult:
        result = self.apply_update(values)
        self.acknowledgments.put(result)
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception:
                log.exception("Parameter acknowledgment listener failed")
        return result

    # ------------- worker lifecycle -------------

    def start(self) -> None:
        if self._worker is not None and self._worker.is_alive():
            return
        self._worker = threading.Thread(target=self._run, name="parameter-channel", daemon=True)
        self._worker.start()

    def stop(self, timeout: float = 2.0) -> None:
        worker, self._worker = self._worker, None
        if worker is None:
            return
        self._inbound.put(_STOP)
        worker.join(timeout)

    @property
    def running(self) -> bool:
        return self._worker is not None and self._worker.is_alive()

    def _run(self) -> None:
        while True:
            msg = self._inbound.get()
            if msg is _STOP:
                return
            self._handle(msg)
