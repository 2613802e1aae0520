"""Static page content. Text only; nothing here changes at runtime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True)
class SocialLink:
    label: str
    url: str
    icon: str


HERO_FULL_TEXT = "Bonjour, je m'appelle Mathéo Rose. Bienvenue dans mon portfolio"

ABOUT_PARAGRAPHS: Tuple[str, ...] = (
    "Je m’appelle Mathéo, développeur passionné par la création d’expériences digitales modernes et utiles.",
    "J’accorde une attention particulière au détail, à la fluidité et à la qualité technique : "
    "j’aime que chaque projet soit propre, cohérent et agréable à utiliser.",
    "Je suis curieux, motivé et toujours prêt à explorer de nouvelles idées ou technologies.",
    "Au fil des projets, j’ai développé une approche simple : comprendre, concevoir, améliorer… "
    "et continuer d’apprendre.",
    "Ma curiosité et mon intérêt pour les nouvelles technologies me poussent constamment à veiller "
    "et à expérimenter afin de rester à la pointe des tendances de la programmation.",
)

NAV_LINKS: Tuple[NavLink, ...] = (
    NavLink(label="À propos", href="#about"),
    NavLink(label="Projets", href="#projects"),
    NavLink(label="Expériences", href="#experiences"),
    NavLink(label="Contact", href="#contact"),
)

SOCIAL_LINKS: Tuple[SocialLink, ...] = (
    SocialLink(label="GitHub", url="https://github.com/", icon="github"),
    SocialLink(label="LinkedIn", url="https://www.linkedin.com/", icon="linkedin"),
    SocialLink(label="X", url="https://twitter.com/", icon="twitter"),
)
