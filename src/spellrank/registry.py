from __future__ import annotations
import logging
import os
import threading
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from . import config as CFG
from .distance import get_metric
from .errors import ResourceCorrupt, UnsupportedLocale
from .models import LocaleResources
from .DB.frequency import FrequencyTable
from .DB.storage import load_dictionary, read_frequencies

log = logging.getLogger(__name__)


class LocaleRegistry:
    """
    Process-wide cache of per-locale snapshots.

    Locale tags resolve case-insensitively against `locales`
    (tag -> (word list file, frequency file, metric name)) under `root`.
    Each locale is loaded at most once; a failed load leaves the cache as it
    was, so other locales keep serving.
    """

    def __init__(
        self,
        root: Optional[str | os.PathLike] = None,
        locales: Optional[Mapping[str, Tuple[str, str, str]]] = None,
    ) -> None:
        self.root = Path(root) if root is not None else CFG.RESOURCE_ROOT
        self.locales: Dict[str, Tuple[str, str, str]] = dict(locales or CFG.LOCALES)
        self._snapshots: Dict[str, LocaleResources] = {}
        self._lock = threading.Lock()

    # ---- resolution ----
    def resolve(self, locale: str) -> str:
        """Canonical tag for `locale`, or UnsupportedLocale."""
        for tag in self.locales:
            if locale and tag.lower() == locale.lower():
                return tag
        raise UnsupportedLocale(locale)

    def paths(self, locale: str) -> Tuple[Path, Path]:
        words, freq, _ = self.locales[self.resolve(locale)]
        return self.root / words, self.root / freq

    # ---- loading ----
    def load(self, locale: str) -> LocaleResources:
        """Read a locale's resources from disk (no caching)."""
        tag = self.resolve(locale)
        words_file, freq_file, metric_name = self.locales[tag]
        words_path, freq_path = self.root / words_file, self.root / freq_file

        log.info("Loading locale %s from %s", tag, self.root)
        dictionary = load_dictionary(str(words_path))  # ResourceCorrupt propagates: no dictionary, no load
        try:
            frequencies = read_frequencies(str(freq_path))
        except ResourceCorrupt as e:
            log.error("Couldn't load frequencies for %s: %s; scoring without them", tag, e)
            frequencies = FrequencyTable.empty()
        else:
            if len(frequencies) != len(dictionary):
                log.warning(
                    "Frequency table size %d does not match dictionary size %d for %s",
                    len(frequencies), len(dictionary), tag,
                )

        snap = LocaleResources(
            locale=tag,
            dictionary=dictionary,
            frequencies=frequencies,
            metric=get_metric(metric_name),
        )
        log.info("Locale %s loaded: words=%d freqs=%d metric=%s",
                 tag, len(dictionary), len(frequencies), snap.metric.name)
        return snap

    def get(self, locale: str, *, reload: bool = False) -> LocaleResources:
        """Cached snapshot for `locale`, loading it on first use."""
        tag = self.resolve(locale)
        with self._lock:
            snap = self._snapshots.get(tag)
            if snap is None or reload:
                snap = self.load(tag)
                self._snapshots[tag] = snap
            return snap

    def loaded(self) -> list[str]:
        return sorted(self._snapshots)

    def clear(self) -> None:
        with self._lock:
            self._snapshots.clear()
