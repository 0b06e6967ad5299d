"""Background poller that refreshes the published max_connections set.

One asyncio task runs one cycle at a time: fetch the catalog, resolve every
instance, replace the published set, then sleep for the interval.  A failed
cycle is logged and the last successfully published set stays in place; the
loop keeps ticking.
"""

import asyncio
import time
from datetime import datetime, timezone
from typing import Optional

from maxcon_exporter.core.logging import logger
from maxcon_exporter.core.protocols.instance_catalog import InstanceCatalog
from maxcon_exporter.core.protocols.metric_publisher import MetricPublisher
from maxcon_exporter.domains.max_connections.catalog_builder import build_records
from maxcon_exporter.domains.max_connections.types import InstanceRecord


class MaxConnectionsPoller:
    """Periodically resolves max_connections and hands the result to a publisher."""

    def __init__(
        self,
        catalog: InstanceCatalog,
        publisher: MetricPublisher,
        interval: float = 300,
        poll_on_startup: bool = True,
    ) -> None:
        self._catalog = catalog
        self._publisher = publisher
        self._interval = interval
        self._poll_on_startup = poll_on_startup
        self._task: Optional[asyncio.Task] = None
        self._logger = logger.with_context(operation="max_connections_poller")

        self.last_success: Optional[datetime] = None
        self.consecutive_failures: int = 0
        self.cycles: int = 0

    @property
    def healthy(self) -> bool:
        """False only when the most recent cycle failed."""
        return self.consecutive_failures == 0

    async def start(self) -> None:
        """Start the polling loop in the background."""
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._run(), name="max-connections-poller")
        self._logger.info(f"Started polling every {self._interval}s")

    async def stop(self) -> None:
        """Cancel the polling loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def run_once(self) -> list[InstanceRecord]:
        """Run a single fetch-resolve-publish cycle.

        Raises whatever the catalog raises; the published set is only
        replaced after the whole cycle succeeded.
        """
        started = time.monotonic()
        entries = await asyncio.to_thread(self._catalog.fetch_entries)
        records = build_records(entries, logger=self._logger)
        self._publisher.replace_all(records)
        self._logger.info(
            f"Published {len(records)} of {len(entries)} instances "
            f"in {time.monotonic() - started:.2f}s"
        )
        return records

    async def _run(self) -> None:
        if not self._poll_on_startup:
            await asyncio.sleep(self._interval)
        while True:
            await self._tick()
            await asyncio.sleep(self._interval)

    async def _tick(self) -> None:
        self.cycles += 1
        try:
            await self.run_once()
        except Exception:
            self.consecutive_failures += 1
            self._logger.exception(
                f"Polling cycle failed ({self.consecutive_failures} in a row); "
                f"keeping the previously published set"
            )
            return
        self.consecutive_failures = 0
        self.last_success = datetime.now(timezone.utc)
