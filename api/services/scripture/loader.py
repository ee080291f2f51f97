# api/services/scripture/loader.py
"""
Keyed single-flight loader.

Memoizes an async load function per key. Concurrent first requests for
the same key share one in-flight load; different keys load
independently. Only successful loads are cached.

Flask runs each async view in its own event loop on its own thread, so
the in-flight handle is a concurrent.futures.Future guarded by a
threading.Lock: the first caller runs the load in its loop and every
other caller, on any loop, awaits the same future.
"""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Awaitable, Callable, Dict, Generic, List, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoadInterrupted(Exception):
    """The loop running a shared load shut down before it finished."""


class KeyedLoader(Generic[T]):
    """
    Cache of loaded values keyed by string, with one pending load per key.

    Usage:
        books = KeyedLoader(source.load_book, name="KJV books")
        data = await books.get("Genesis")   # loads once
        data = await books.get("Genesis")   # cached
    """

    def __init__(self, load: Callable[[str], Awaitable[T]], name: str = "loader"):
        self._load = load
        self.name = name
        self._lock = threading.Lock()
        self._loaded: Dict[str, T] = {}
        self._pending: Dict[str, concurrent.futures.Future] = {}
        self._tasks: Set[asyncio.Task] = set()

    def is_loaded(self, key: str) -> bool:
        with self._lock:
            return key in self._loaded

    def loaded_keys(self) -> List[str]:
        with self._lock:
            return list(self._loaded)

    def clear(self) -> None:
        """Forget loaded values. Pending loads still complete."""
        with self._lock:
            self._loaded.clear()

    async def get(self, key: str) -> T:
        """
        Return the value for key, loading it if needed.

        A caller that is cancelled while waiting does not cancel the
        shared load; it completes and populates the cache. If the loop
        running the load shuts down first, waiters start a new load.
        """
        while True:
            with self._lock:
                if key in self._loaded:
                    return self._loaded[key]
                pending = self._pending.get(key)
                owner = pending is None
                if owner:
                    pending = concurrent.futures.Future()
                    self._pending[key] = pending

            if owner:
                task = asyncio.get_running_loop().create_task(self._run(key, pending))
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)
            else:
                logger.debug(f"{self.name}: joining in-flight load for {key}")

            try:
                return await asyncio.shield(asyncio.wrap_future(pending))
            except LoadInterrupted:
                logger.info(f"{self.name}: load of {key} interrupted, retrying")

    def _release(self, key: str, pending: concurrent.futures.Future) -> None:
        if self._pending.get(key) is pending:
            del self._pending[key]

    async def _run(self, key: str, pending: concurrent.futures.Future) -> None:
        logger.debug(f"{self.name}: loading {key}")
        try:
            value = await self._load(key)
        except asyncio.CancelledError:
            with self._lock:
                self._release(key, pending)
            pending.set_exception(LoadInterrupted(key))
            raise
        except Exception as e:
            with self._lock:
                self._release(key, pending)
            pending.set_exception(e)
            return

        with self._lock:
            self._loaded[key] = value
            self._release(key, pending)
        pending.set_result(value)
