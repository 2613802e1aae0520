from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from portfolio.config import PortfolioConfig, load_config
from portfolio.loader import ResourceLoader
from portfolio.resources import HttpResourceClient
from portfolio.reveal import IntersectionCallback
from portfolio.scheduler import AsyncioScheduler

from .controller import PortfolioPage


logger = logging.getLogger(__name__)


class _NoViewportObserver:
    """Visibility observer for runs without a viewport: nothing ever intersects."""

    def __init__(self, callback: IntersectionCallback, threshold: float) -> None:  # noqa: ARG002
        pass

    def observe(self, element: Any) -> None:
        pass

    def unobserve(self, element: Any) -> None:
        pass

    def disconnect(self) -> None:
        pass


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _summarize(loader: ResourceLoader[Any]) -> int | str:
    state = loader.state.value
    if state.has_failed:
        return "failed"
    if state.is_loading:
        return "loading"
    return len(state.items)


async def run_once(
    config: Optional[PortfolioConfig] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """Boot the page headlessly, wait for both data loads, then tear it down.

    Returns a summary such as {"ok": True, "projects": 4, "experiences": 2}.
    A failed resource is reported as "failed" and makes `ok` False.
    """
    cfg = config or load_config()

    async with HttpResourceClient(
        cfg.data_base_url, timeout=cfg.http_timeout, client=client
    ) as fetcher:
        page = PortfolioPage(
            fetcher,
            AsyncioScheduler(),
            _NoViewportObserver,
            typing_interval=cfg.typing_interval,
        )
        async with page:
            await asyncio.gather(page.project_loader.load(), page.experience_loader.load())
            projects = _summarize(page.project_loader)
            experiences = _summarize(page.experience_loader)

    ok = "failed" not in (projects, experiences)
    return {"ok": ok, "projects": projects, "experiences": experiences}


def main() -> Dict[str, Any]:
    cfg = load_config()
    configure_logging(cfg.log_level)
    result = asyncio.run(run_once(cfg))
    logger.info("Portfolio page data: %s", result)
    return result


if __name__ == "__main__":
    main()
