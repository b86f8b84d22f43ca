"""Content written on first run, one constructor per document type."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from landing_core.content.models import Hero, HighlightInfo, Intro, Section

DEFAULT_WARNING_ALERT = "⚠️ ALERTA: Rotura = $2,500 diarios perdidos"
DEFAULT_HERO_TITLE = "Resistencia en Cocina Profesional: Test Real de 5 Batidoras Industriales"
DEFAULT_HERO_SUBTITLE = "(y los 2 Modelos que Mis Clientes Usan Sin Parar)"
DEFAULT_INTRO_TITLE = "¿Por Qué las Batidoras Industriales Son Críticas en Cocina Profesional?"


def default_hero() -> dict[str, Any]:
    return Hero(
        warning_alert=DEFAULT_WARNING_ALERT,
        title=DEFAULT_HERO_TITLE,
        subtitle=DEFAULT_HERO_SUBTITLE,
    ).to_document()


def default_intro() -> dict[str, Any]:
    return Intro(title=DEFAULT_INTRO_TITLE, highlight="", testimonials=[]).to_document()


def default_highlight_info() -> dict[str, Any]:
    return HighlightInfo(text="").to_document()


def default_articles() -> list[dict[str, Any]]:
    return []


DEFAULT_FACTORIES: dict[Section, Callable[[], Any]] = {
    Section.HERO: default_hero,
    Section.INTRO: default_intro,
    Section.HIGHLIGHT_INFO: default_highlight_info,
    Section.ARTICLES: default_articles,
}


def default_document(section: Section) -> Any:
    return DEFAULT_FACTORIES[section]()
