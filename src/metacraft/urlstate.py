"""URL state: query-string (de)serialization and the debounced location writer.

The query string is the only place form state lives between page loads.
``serialize``/``parse`` are inverses for every non-empty field, and
``UrlSynchronizer`` is the single side-effecting boundary that rewrites it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional
from urllib.parse import parse_qs, urlencode

from metacraft.model import MetaConfig

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.15

LocationWriter = Callable[[str], None]


def serialize(config: MetaConfig) -> str:
    """Encode all non-empty fields, in field order."""
    return urlencode(config.to_query())


def parse(query: str) -> MetaConfig:
    """Decode a query string (with or without a leading ``?``)."""
    return MetaConfig.from_query(parse_qs(query.lstrip("?"), keep_blank_values=True))


def location_for(config: MetaConfig, path: str = "/") -> str:
    query = serialize(config)
    return f"{path}?{query}" if query else path


class UrlSynchronizer:
    """Debounced ``history.replaceState`` equivalent.

    Every ``notify`` cancels the pending write and schedules a new one after
    ``delay`` seconds on the event loop, so at most one write is pending and
    only the latest value set is ever written.
    """

    def __init__(
        self,
        write_location: LocationWriter,
        *,
        delay: float = DEFAULT_DELAY,
        path: str = "/",
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._write_location = write_location
        self.delay = delay
        self.path = path
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._latest: Optional[MetaConfig] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def notify(self, config: MetaConfig) -> None:
        """Schedule a write of *config*, replacing any pending one.

        Must be called from within a running event loop unless one was
        passed to the constructor.
        """
        loop = self._loop or asyncio.get_running_loop()
        self.cancel()
        self._latest = config
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Write the pending value now instead of waiting for the timer."""
        if self._handle is None:
            return
        self.cancel()
        self._write()

    def _fire(self) -> None:
        self._handle = None
        self._write()

    def _write(self) -> None:
        if self._latest is None:
            return
        url = location_for(self._latest, self.path)
        try:
            self._write_location(url)
        except Exception as e:  # a failed URL write only loses shareability
            logger.warning(f"Location write failed for {url}: {e}")
