from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from portfolio.contact import ContactForm
from portfolio.dates import format_display_date
from portfolio.loader import ResourceLoader
from portfolio.resources import ResourceFetcher
from portfolio.reveal import ObserverFactory, RevealAnimator, RevealElement
from portfolio.scheduler import Scheduler
from portfolio.typing_effect import DEFAULT_TYPING_INTERVAL, HeroTypingEffect
from viewstate.models import ContactFormState, Experience, Project

from .content import ABOUT_PARAGRAPHS, HERO_FULL_TEXT, NAV_LINKS, SOCIAL_LINKS, NavLink, SocialLink


PROJECTS_PATH = "data/projects.json"
EXPERIENCES_PATH = "data/experiences.json"

logger = logging.getLogger(__name__)


class PortfolioPage:
    """
    View controller for the single portfolio page.

    Owns every state container and hands the rendering layer read-only views
    plus a few mutating entry points (form input, reveal attach/detach).

    Usage
    - Build with the fetch, timer and visibility collaborators.
    - `start()` (inside a running event loop) kicks off both data loads and
      the hero typing effect. `async with page:` does the same.
    - `dispose()` releases the timer, in-flight loads and every observation.
    """

    def __init__(
        self,
        fetcher: ResourceFetcher,
        scheduler: Scheduler,
        observer_factory: ObserverFactory,
        *,
        hero_text: str = HERO_FULL_TEXT,
        typing_interval: float = DEFAULT_TYPING_INTERVAL,
        today: Optional[date] = None,
    ) -> None:
        self.project_loader: ResourceLoader[Project] = ResourceLoader(
            fetcher, PROJECTS_PATH, Project, name="projects"
        )
        self.experience_loader: ResourceLoader[Experience] = ResourceLoader(
            fetcher, EXPERIENCES_PATH, Experience, name="experiences"
        )
        self.hero = HeroTypingEffect(hero_text, scheduler, interval=typing_interval)
        self.contact = ContactForm()
        self._observer_factory = observer_factory
        self._reveals: List[RevealAnimator] = []
        self._started = False
        self._disposed = False

        self.about_paragraphs: Tuple[str, ...] = ABOUT_PARAGRAPHS
        self.nav_links: Tuple[NavLink, ...] = NAV_LINKS
        self.social_links: Tuple[SocialLink, ...] = SOCIAL_LINKS
        self.current_year: int = (today or date.today()).year

    # --------------- Lifecycle ---------------
    def start(self) -> None:
        if self._started or self._disposed:
            return
        self._started = True
        logger.debug("Starting portfolio page")
        self.project_loader.start()
        self.experience_loader.start()
        self.hero.start()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.hero.dispose()
        self.project_loader.cancel()
        self.experience_loader.cancel()
        for animator in self._reveals:
            animator.dispose()
        self._reveals.clear()
        logger.debug("Portfolio page disposed")

    async def __aenter__(self) -> "PortfolioPage":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # --------------- Data ---------------
    @property
    def projects(self) -> List[Project]:
        return self.project_loader.items

    @property
    def is_loading_projects(self) -> bool:
        return self.project_loader.is_loading

    @property
    def error_loading_projects(self) -> bool:
        return self.project_loader.has_failed

    @property
    def experiences(self) -> List[Experience]:
        return self.experience_loader.items

    @property
    def is_loading_experiences(self) -> bool:
        return self.experience_loader.is_loading

    @property
    def error_loading_experiences(self) -> bool:
        return self.experience_loader.has_failed

    def format_project_date(self, raw_date: str) -> str:
        return format_display_date(raw_date)

    # --------------- Hero ---------------
    @property
    def hero_full_text(self) -> str:
        return self.hero.full_text

    @property
    def typed_hero_text(self) -> str:
        return self.hero.displayed_text

    # --------------- Scroll reveal ---------------
    def attach_reveal(self, element: RevealElement) -> RevealAnimator:
        animator = RevealAnimator(element, self._observer_factory)
        if self._disposed:
            # Late attach after teardown: leave the element alone, observe nothing.
            return animator
        animator.attach()
        self._reveals.append(animator)
        return animator

    def detach_reveal(self, animator: RevealAnimator) -> None:
        animator.dispose()
        if animator in self._reveals:
            self._reveals.remove(animator)

    @property
    def reveal_count(self) -> int:
        return len(self._reveals)

    # --------------- Contact ---------------
    @property
    def contact_form(self) -> ContactFormState:
        return self.contact.state.value

    @property
    def contact_status(self) -> str:
        return self.contact.status_message

    def update_field(self, name: str, value: str) -> None:
        self.contact.update_field(name, value)

    def touch_field(self, name: str) -> None:
        self.contact.touch(name)

    def submit_contact(self) -> bool:
        return self.contact.submit()


__all__ = ["EXPERIENCES_PATH", "PROJECTS_PATH", "PortfolioPage"]
