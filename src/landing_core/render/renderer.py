"""Landing page renderer.

Parses the base HTML template into a tree, replaces the content blocks by CSS
selector, and serialises one of several output shapes (full page, paste-ready
fragment, WordPress-safe fragment).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Doctype, Stylesheet, Tag
from jinja2 import Environment, FileSystemLoader, select_autoescape

from landing_core.render.css import force_important

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_TEMPLATE_PATH = TEMPLATES_DIR / "landing.html"
DEFAULT_STYLESHEET_PATH = TEMPLATES_DIR / "embed.css"

HERO_SELECTOR = ".hero"
HERO_FIELDS: tuple[tuple[str, str], ...] = (
    (".warning-alert", "warningAlert"),
    ("h1", "title"),
    (".subtitle", "subtitle"),
)
TESTIMONIALS_SELECTOR = ".testimonials"
HIGHLIGHT_SELECTOR = ".highlight-info"
INTRO_TITLE_SELECTOR = ".intro-title"
INTRO_HIGHLIGHT_SELECTOR = ".intro-highlight"

EMBED_WRAPPER_CLASS = "landing-embed"


class RenderError(RuntimeError):
    """The page could not be rendered; no partial output is produced."""


class TemplateSourceMissingError(RenderError):
    pass


class TemplatePatternNotFoundError(RenderError):
    def __init__(self, block: str, selector: str) -> None:
        self.block = block
        self.selector = selector
        super().__init__(f"Template has no {block} block (selector {selector!r})")


class RenderMode(StrEnum):
    FULL = "full"
    FRAGMENT = "fragment"
    WORDPRESS = "wordpress"


@dataclass(frozen=True)
class RenderOptions:
    mode: RenderMode = RenderMode.FULL
    force_important: bool = False
    inline_stylesheet: bool = False


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _testimonials(intro: Mapping[str, Any]) -> list[dict[str, str]]:
    raw = intro.get("testimonials")
    if not isinstance(raw, list):
        return []
    items: list[dict[str, str]] = []
    for entry in raw:
        entry = _as_mapping(entry)
        items.append({key: _text(entry.get(key)) for key in ("text", "author", "role", "metric")})
    return items


def _require(root: Tag, selector: str, *, block: str) -> Tag:
    found = root.select_one(selector)
    if found is None:
        raise TemplatePatternNotFoundError(block, selector)
    return found


class TemplateRenderer:
    """Render the landing page documents into HTML.

    Usage:
        renderer = TemplateRenderer()
        html = renderer.render(hero=..., intro=..., highlight_info=...)
    """

    def __init__(
        self,
        template_path: Path | None = None,
        stylesheet_path: Path | None = None,
    ) -> None:
        self.template_path = template_path or DEFAULT_TEMPLATE_PATH
        self.stylesheet_path = stylesheet_path or DEFAULT_STYLESHEET_PATH
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def load_template(self) -> str:
        try:
            return self.template_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateSourceMissingError(
                f"Cannot read base template {self.template_path}: {exc}"
            ) from exc

    def load_stylesheet(self) -> str:
        try:
            return self.stylesheet_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateSourceMissingError(
                f"Cannot read stylesheet {self.stylesheet_path}: {exc}"
            ) from exc

    def build_document(
        self,
        *,
        hero: Mapping[str, Any],
        intro: Mapping[str, Any],
        highlight_info: Mapping[str, Any],
    ) -> BeautifulSoup:
        """Parse the base template and fill every content block.

        All required blocks are located before anything is modified, so a
        template missing one of them fails without touching the others.
        """

        soup = BeautifulSoup(self.load_template(), "html.parser")
        hero, intro, highlight_info = (
            _as_mapping(hero),
            _as_mapping(intro),
            _as_mapping(highlight_info),
        )

        hero_el = _require(soup, HERO_SELECTOR, block="hero")
        hero_targets = [
            (_require(hero_el, selector, block="hero"), key) for selector, key in HERO_FIELDS
        ]
        testimonials_el = _require(soup, TESTIMONIALS_SELECTOR, block="testimonials")
        highlight_el = _require(soup, HIGHLIGHT_SELECTOR, block="highlight-info")

        for element, key in hero_targets:
            element.string = _text(hero.get(key))

        intro_title = soup.select_one(INTRO_TITLE_SELECTOR)
        if intro_title is not None:
            intro_title.string = _text(intro.get("title"))
        intro_highlight = soup.select_one(INTRO_HIGHLIGHT_SELECTOR)
        if intro_highlight is not None:
            intro_highlight.string = _text(intro.get("highlight"))

        testimonials_el.clear()
        items = _testimonials(intro)
        if items:
            markup = self.env.get_template("partials/testimonials.html").render(
                testimonials=items
            )
            rendered = BeautifulSoup(markup, "html.parser")
            for node in list(rendered.contents):
                testimonials_el.append(node.extract())

        highlight_el.string = _text(highlight_info.get("text"))
        return soup

    def _new_style(self, soup: BeautifulSoup, css: str) -> Tag:
        style = soup.new_tag("style")
        style.string = Stylesheet(css)
        return style

    def _serialise_fragment(self, soup: BeautifulSoup, options: RenderOptions) -> str:
        styles: list[Tag] = [s.extract() for s in soup.find_all("style")]
        if options.inline_stylesheet:
            styles.insert(0, self._new_style(soup, self.load_stylesheet()))

        if options.mode == RenderMode.WORDPRESS:
            for script in soup.find_all("script"):
                script.decompose()

        if options.force_important or options.mode == RenderMode.WORDPRESS:
            for style in styles:
                style.string = Stylesheet(force_important(style.string or ""))

        container: Tag = soup.body if soup.body is not None else soup
        content = "".join(
            str(node)
            for node in container.contents
            if not isinstance(node, Doctype) and getattr(node, "name", None) != "head"
        ).strip()
        fragment = "\n".join([*(str(s) for s in styles), content])

        if options.mode == RenderMode.WORDPRESS:
            return f'<div class="{EMBED_WRAPPER_CLASS}">\n{fragment}\n</div>'
        return fragment

    def _serialise_full(self, soup: BeautifulSoup, options: RenderOptions) -> str:
        if options.inline_stylesheet:
            head = soup.head if soup.head is not None else soup
            head.append(self._new_style(soup, self.load_stylesheet()))
        if options.force_important:
            for style in soup.find_all("style"):
                style.string = Stylesheet(force_important(style.string or ""))
        return str(soup)

    def render(
        self,
        *,
        hero: Mapping[str, Any],
        intro: Mapping[str, Any],
        highlight_info: Mapping[str, Any],
        options: RenderOptions | None = None,
    ) -> str:
        options = options or RenderOptions()
        soup = self.build_document(hero=hero, intro=intro, highlight_info=highlight_info)
        if options.mode == RenderMode.FULL:
            html = self._serialise_full(soup, options)
        else:
            html = self._serialise_fragment(soup, options)
        logger.debug("Rendered %s (%d chars)", options, len(html))
        return html

    def render_config(
        self, config: Mapping[str, Any], options: RenderOptions | None = None
    ) -> str:
        """Render from the ``{hero, intro, highlightInfo}`` aggregate."""

        return self.render(
            hero=_as_mapping(config.get("hero")),
            intro=_as_mapping(config.get("intro")),
            highlight_info=_as_mapping(config.get("highlightInfo")),
            options=options,
        )
