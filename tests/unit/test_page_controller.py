from __future__ import annotations

import asyncio
from datetime import date
from typing import Any, Dict

from fakes import FakeElement, FakeFetcher, FakeScheduler, ObserverRegistry

from page.content import HERO_FULL_TEXT
from page.controller import EXPERIENCES_PATH, PROJECTS_PATH, PortfolioPage
from portfolio.resources import ResourceError


PROJECTS = [
    {
        "title": "Portfolio",
        "date": "2024-03-15",
        "image": "img/portfolio.png",
        "shortDescription": "Ce site",
        "longDescription": "Une page unique.",
        "tags": ["Angular"],
    },
    {
        "title": "Jeu",
        "date": "bientôt",
        "image": "img/jeu.png",
        "shortDescription": "Un jeu",
        "longDescription": "Un jeu en ligne.",
    },
]

EXPERIENCES = [
    {"title": "Stage", "shortDescription": "Dev", "longDescription": "Stage de développement."},
]


def _page(payloads: Dict[str, Any], **kwargs) -> tuple[PortfolioPage, FakeScheduler, ObserverRegistry]:
    sched = FakeScheduler()
    observers = ObserverRegistry()
    page = PortfolioPage(FakeFetcher(payloads), sched, observers, today=date(2025, 1, 1), **kwargs)
    return page, sched, observers


def test_start_loads_both_resources_and_starts_typing():
    page, sched, _ = _page({PROJECTS_PATH: PROJECTS, EXPERIENCES_PATH: EXPERIENCES})

    async def go():
        async with page:
            assert page.is_loading_projects and page.is_loading_experiences
            await asyncio.gather(page.project_loader.load(), page.experience_loader.load())
            assert len(sched.active) == 1

    asyncio.run(go())

    assert [p.title for p in page.projects] == ["Portfolio", "Jeu"]
    assert [e.title for e in page.experiences] == ["Stage"]
    assert not page.error_loading_projects and not page.error_loading_experiences
    # Leaving the context tears the typing timer down
    assert sched.active == []


def test_one_failed_resource_does_not_affect_the_other():
    page, _, _ = _page({PROJECTS_PATH: ResourceError("offline"), EXPERIENCES_PATH: EXPERIENCES})

    async def go():
        page.start()
        await asyncio.gather(page.project_loader.load(), page.experience_loader.load())
        page.dispose()

    asyncio.run(go())

    assert page.error_loading_projects
    assert not page.is_loading_projects
    assert page.projects == []
    assert page.experiences and not page.error_loading_experiences


def test_start_twice_fetches_once():
    fetcher = FakeFetcher({PROJECTS_PATH: [], EXPERIENCES_PATH: []})
    page = PortfolioPage(fetcher, FakeScheduler(), ObserverRegistry())

    async def go():
        page.start()
        page.start()
        await page.project_loader.load()
        await page.experience_loader.load()

    asyncio.run(go())

    assert sorted(fetcher.calls) == sorted([PROJECTS_PATH, EXPERIENCES_PATH])


def test_hero_typing_through_controller():
    page, sched, _ = _page({PROJECTS_PATH: [], EXPERIENCES_PATH: []}, hero_text="Hey")

    async def go():
        page.start()
        sched.tick(3)
        text = page.typed_hero_text
        page.dispose()
        return text

    assert asyncio.run(go()) == "Hey"
    assert page.hero_full_text == "Hey"


def test_default_content():
    page, _, _ = _page({})

    assert page.hero_full_text == HERO_FULL_TEXT
    assert "Mathéo Rose" in page.hero_full_text
    assert [link.href for link in page.nav_links] == ["#about", "#projects", "#experiences", "#contact"]
    assert [link.label for link in page.social_links] == ["GitHub", "LinkedIn", "X"]
    assert len(page.about_paragraphs) == 5
    assert page.current_year == 2025


def test_format_project_date():
    page, _, _ = _page({})

    assert page.format_project_date("2024-03-15") == "15 mars 2024"
    assert page.format_project_date("bientôt") == "bientôt"


def test_reveal_attach_detach_and_dispose():
    page, _, observers = _page({})
    a, b = FakeElement("a"), FakeElement("b")

    ra = page.attach_reveal(a)
    rb = page.attach_reveal(b)
    assert page.reveal_count == 2

    page.detach_reveal(ra)
    assert observers.created[0].disconnected
    assert page.reveal_count == 1

    page.dispose()
    assert observers.created[1].disconnected
    assert page.reveal_count == 0
    assert not rb.observing

    late = page.attach_reveal(FakeElement("late"))
    assert not late.observing
    assert len(observers.created) == 2


def test_contact_entry_points():
    page, _, _ = _page({})

    page.update_field("name", "A")
    page.touch_field("name")
    assert page.contact_form.name.show_errors

    assert page.submit_contact() is False
    assert page.contact_status == ""

    page.update_field("name", "Alice")
    page.update_field("email", "a@b.com")
    page.update_field("message", "Un message assez long")
    assert page.submit_contact() is True
    assert page.contact_status == "Merci Alice, je reviens vers vous rapidement !"
    assert page.contact_form.name.value == ""


def test_dispose_is_idempotent_and_blocks_start():
    page, sched, _ = _page({PROJECTS_PATH: [], EXPERIENCES_PATH: []})
    page.dispose()
    page.dispose()
    page.start()  # no running loop needed: nothing is started after dispose

    assert sched.handles == []
    assert page.is_loading_projects
