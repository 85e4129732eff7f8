"""Catalog snapshot holder with change notification."""

import threading
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from netflixanalyzer.config import CatalogConfig
from netflixanalyzer.core.loader import CatalogLoader, CatalogSource, describe_source
from netflixanalyzer.models.diagnostic import LoadDiagnostic
from netflixanalyzer.models.title import Title
from netflixanalyzer.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogEvent:
    """Notification sent to subscribers after the snapshot changes."""

    kind: Literal["loaded", "reloaded"]
    source: str
    title_count: int
    diagnostic_count: int


CatalogListener = Callable[[CatalogEvent], None]


class CatalogStore:
    """Own the current catalog snapshot.

    A load builds a complete new snapshot before swapping the reference, so
    readers always observe either the previous or the new catalog in full.
    """

    def __init__(self, settings: Optional[CatalogConfig] = None):
        """Initialize an empty store.

        Args:
            settings: Catalog configuration (defaults apply when None)
        """
        self.settings = settings or CatalogConfig()
        self._loader = CatalogLoader(self.settings)
        self._snapshot: Optional[tuple[Title, ...]] = None
        self._diagnostics: tuple[LoadDiagnostic, ...] = ()
        self._listeners: list[CatalogListener] = []
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> tuple[Title, ...]:
        """The current catalog.

        Raises:
            RuntimeError: If nothing has been loaded yet
        """
        snapshot = self._snapshot
        if snapshot is None:
            raise RuntimeError("Catalog has not been loaded")
        return snapshot

    @property
    def diagnostics(self) -> tuple[LoadDiagnostic, ...]:
        """Diagnostics from the most recent load."""
        return self._diagnostics

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    def load(self, source: Optional[CatalogSource] = None) -> tuple[Title, ...]:
        """Load (or reload) the catalog and notify subscribers.

        On failure the previous snapshot is kept and the error propagates.

        Args:
            source: Source to read; defaults to ``settings.source``

        Returns:
            The new snapshot
        """
        if source is None:
            source = self.settings.source

        result = self._loader.load(source)
        snapshot = tuple(result.titles)

        with self._lock:
            kind = "reloaded" if self._snapshot is not None else "loaded"
            self._snapshot = snapshot
            self._diagnostics = tuple(result.diagnostics)
            listeners = list(self._listeners)

        event = CatalogEvent(
            kind=kind,
            source=describe_source(source),
            title_count=len(snapshot),
            diagnostic_count=len(result.diagnostics),
        )
        logger.debug("Catalog snapshot swapped", kind=kind, titles=len(snapshot))

        for listener in listeners:
            listener(event)

        return snapshot

    reload = load

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        """Register a listener for snapshot changes.

        Args:
            listener: Callable receiving a CatalogEvent

        Returns:
            Callable that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
