from __future__ import annotations

import asyncio
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import TypeAdapter

from viewstate.models import LoadState
from viewstate.observable import Observable

from .resources import ResourceFetcher


T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceLoader(Generic[T]):
    """
    Fetch one JSON collection and project it into a tri-state `LoadState`.

    - State starts as Loading; a load ends in exactly one of Loaded or Failed.
    - On success the item list is replaced wholesale, in payload order.
    - Any failure (transport, HTTP status, bad JSON, wrong record shape) ends
      in Failed. The detail is logged, never stored in the state.
    - One load per instance: `start()` is idempotent and there is no retry.
    """

    def __init__(
        self,
        fetcher: ResourceFetcher,
        path: str,
        record_type: Type[T],
        *,
        name: Optional[str] = None,
    ) -> None:
        self._fetcher = fetcher
        self._path = path
        self._name = name or path
        self._adapter: TypeAdapter[List[T]] = TypeAdapter(List[record_type])  # type: ignore[valid-type]
        self._task: Optional[asyncio.Task[LoadState[T]]] = None
        self.state: Observable[LoadState[T]] = Observable(LoadState.loading())

    @property
    def path(self) -> str:
        return self._path

    @property
    def items(self) -> List[T]:
        return list(self.state.value.items)

    @property
    def is_loading(self) -> bool:
        return self.state.value.is_loading

    @property
    def has_failed(self) -> bool:
        return self.state.value.has_failed

    # --------------- Public API ---------------
    def start(self) -> "asyncio.Task[LoadState[T]]":
        """Schedule the load on the running loop; later calls return the same task."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def load(self) -> LoadState[T]:
        return await self.start()

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling in-flight load of %s", self._name)
            self._task.cancel()

    # --------------- Internal ---------------
    async def _run(self) -> LoadState[T]:
        self.state.set(LoadState.loading())
        logger.debug("Loading %s from %s", self._name, self._path)
        try:
            payload: Any = await self._fetcher.fetch_json(self._path)
            records = self._adapter.validate_python(payload)
        except Exception as exc:
            logger.warning("Failed to load %s from %s: %s", self._name, self._path, exc)
            self.state.set(LoadState.failed())
        else:
            logger.info("Loaded %d %s", len(records), self._name)
            self.state.set(LoadState.loaded(records))
        return self.state.value


__all__ = ["ResourceLoader"]
