"""Network reachability probes consulted before every request."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Protocol, runtime_checkable

from netlayer.config import settings

logger = logging.getLogger("netlayer.reachability")


@runtime_checkable
class ReachabilityProbe(Protocol):
    """Anything that can answer whether the network is currently usable."""

    def is_reachable(self) -> bool:
        ...


class StaticReachability:
    """Probe with a fixed answer that callers may flip by hand."""

    def __init__(self, reachable: bool = True) -> None:
        self.reachable = reachable

    def is_reachable(self) -> bool:
        return self.reachable


class ReachabilityMonitor:
    """Track connectivity by periodically opening a TCP connection.

    The monitor is a plain object rather than a process-wide singleton; build
    one, ``start()`` it on a running event loop and hand it to every executor
    that should share the same view of the network. ``is_reachable`` only
    reads the last snapshot, so it is safe to call from request paths.
    """

    def __init__(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        interval: float | None = None,
        timeout: float | None = None,
    ) -> None:
        self.host = settings.reachability_host if host is None else host
        self.port = settings.reachability_port if port is None else port
        self.interval = settings.reachability_interval if interval is None else interval
        self.timeout = settings.reachability_timeout if timeout is None else timeout
        # Optimistic until the first check completes.
        self._reachable = True
        self._task: asyncio.Task[None] | None = None

    def is_reachable(self) -> bool:
        return self._reachable

    async def check_once(self) -> bool:
        """Probe the configured endpoint and record the outcome."""

        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port), timeout=self.timeout
            )
        except (OSError, ValueError, asyncio.TimeoutError) as exc:
            # ValueError covers host names the resolver cannot encode.
            logger.debug("Reachability probe to %s:%s failed: %s", self.host, self.port, exc)
            reachable = False
        except Exception as exc:
            logger.warning(
                "Unexpected reachability probe error for %s:%s: %s", self.host, self.port, exc
            )
            reachable = False
        else:
            writer.close()
            with contextlib.suppress(Exception):  # pragma: no cover - best effort close
                await writer.wait_closed()
            reachable = True

        if reachable != self._reachable:
            logger.info(
                "Network reachability changed: %s -> %s", self._reachable, reachable
            )
        self._reachable = reachable
        return reachable

    async def run(self) -> None:
        """Check connectivity every ``interval`` seconds until cancelled."""

        while True:
            try:
                await self.check_once()
            except asyncio.CancelledError:
                logger.info("Reachability monitor cancelled")
                raise
            except Exception as exc:
                logger.warning("Reachability monitor error: %s", exc)
                self._reachable = False
            await asyncio.sleep(self.interval)

    def start(self) -> asyncio.Task[None]:
        """Schedule :meth:`run` on the running loop; idempotent."""

        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run())
            logger.info(
                "Reachability monitor started for %s:%s every %ss",
                self.host,
                self.port,
                self.interval,
            )
        return self._task

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        if task.done():
            if not task.cancelled() and task.exception() is not None:
                logger.warning("Reachability monitor had stopped: %r", task.exception())
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


__all__ = ["ReachabilityMonitor", "ReachabilityProbe", "StaticReachability"]
