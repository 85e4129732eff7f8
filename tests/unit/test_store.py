"""Unit tests for the catalog store."""

import io
import threading

import pytest

from netflixanalyzer.config import CatalogConfig
from netflixanalyzer.core.exceptions import SourceUnavailable
from netflixanalyzer.core.store import CatalogStore

ROW = "s{n},Movie,Title {n},D,C,Spain,\"June {n}, 2020\",2019,R,90 min,G,Desc\n"


def make_source(count: int) -> io.StringIO:
    """Build an in-memory CSV with ``count`` titles."""
    return io.StringIO("header\n" + "".join(ROW.format(n=n) for n in range(1, count + 1)))


class TestCatalogStore:
    """Test snapshot loading and swapping."""

    def test_snapshot_before_load(self):
        """Reading before the first load is an error."""
        store = CatalogStore()

        assert not store.loaded
        with pytest.raises(RuntimeError):
            store.snapshot

    def test_load_from_settings_source(self, lenient_settings):
        """Without an explicit source the configured path is used."""
        store = CatalogStore(lenient_settings)

        snapshot = store.load()

        assert store.loaded
        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 6
        assert len(store.diagnostics) == 2

    def test_reload_replaces_snapshot(self):
        """A reload swaps in the complete new catalog."""
        store = CatalogStore()
        store.load(make_source(2))

        store.reload(make_source(3))

        assert [t.identifier for t in store.snapshot] == ["s1", "s2", "s3"]

    def test_failed_reload_keeps_previous_snapshot(self, tmp_path):
        """If the new source is unavailable the old snapshot survives."""
        store = CatalogStore(CatalogConfig())
        old = store.load(make_source(2))

        with pytest.raises(SourceUnavailable):
            store.reload(tmp_path / "missing.csv")

        assert store.snapshot is old

    def test_readers_see_whole_snapshots(self):
        """Concurrent readers see either the old or the new catalog."""
        store = CatalogStore()
        store.load(make_source(2))
        sizes = set()

        def read():
            for _ in range(200):
                sizes.add(len(store.snapshot))

        readers = [threading.Thread(target=read) for _ in range(4)]
        for thread in readers:
            thread.start()
        store.reload(make_source(5))
        for thread in readers:
            thread.join()

        assert sizes <= {2, 5}


class TestSubscriptions:
    """Test change notification."""

    def test_listener_receives_events(self):
        """Listeners are told about loads and reloads."""
        store = CatalogStore()
        events = []
        store.subscribe(events.append)

        store.load(make_source(2))
        store.reload(make_source(1))

        assert [(e.kind, e.title_count) for e in events] == [("loaded", 2), ("reloaded", 1)]
        assert events[0].diagnostic_count == 0

    def test_unsubscribe(self):
        """An unsubscribed listener receives nothing further."""
        store = CatalogStore()
        events = []
        unsubscribe = store.subscribe(events.append)

        store.load(make_source(1))
        unsubscribe()
        store.reload(make_source(2))

        assert len(events) == 1

    def test_listener_sees_new_snapshot(self):
        """Listeners run after the swap."""
        store = CatalogStore()
        seen = []
        store.subscribe(lambda event: seen.append(len(store.snapshot)))

        store.load(make_source(3))

        assert seen == [3]
