from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from landing_core.content.defaults import default_document
from landing_core.content.models import Section

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """A document file could not be read, decoded or written."""


def _now_iso() -> str:
    # Same shape as a JavaScript Date serialised to JSON: 2024-01-31T12:00:00.000Z
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ContentStore:
    """JSON-file persistence for the landing page documents.

    One file per document under ``data_dir``. Every operation is a synchronous
    whole-file read-modify-write. There is no locking: concurrent writers race
    and the last write wins, and the aggregate view is not isolated from a
    write landing between its three reads.
    """

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, section: Section) -> Path:
        return self._data_dir / section.filename

    def ensure_defaults(self) -> list[Section]:
        """Write the default document for every section whose file is missing."""

        self._data_dir.mkdir(parents=True, exist_ok=True)
        created: list[Section] = []
        for section in Section:
            if not self.path_for(section).exists():
                self._write(section, default_document(section))
                created.append(section)
        if created:
            logger.info("Created default documents: %s", ", ".join(s.value for s in created))
        return created

    def _read(self, section: Section) -> Any:
        path = self.path_for(section)
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Malformed JSON in {path}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def _write(self, section: Section, document: Any) -> None:
        path = self.path_for(section)
        payload = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{section.value}.", dir=path.parent)
            tmp_path = Path(tmp_name)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                tmp_path.replace(path)
            except BaseException:
                tmp_path.unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    def get(self, section: Section) -> Any:
        """Return the stored document, creating it from defaults if never written."""

        if not self.path_for(section).exists():
            document = default_document(section)
            self._write(section, document)
            return document
        return self._read(section)

    def set(self, section: Section, document: Any) -> Any:
        """Replace the whole document. Shape checks are the caller's job."""

        self._write(section, document)
        return document

    def get_config(self) -> dict[str, Any]:
        return {
            "hero": self.get(Section.HERO),
            "intro": self.get(Section.INTRO),
            "highlightInfo": self.get(Section.HIGHLIGHT_INFO),
        }

    def set_config(
        self,
        *,
        hero: dict[str, Any] | None = None,
        intro: dict[str, Any] | None = None,
        highlight_info: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Partial aggregate write; ``None`` keeps whatever is on disk."""

        current = self.get_config()
        result = {
            "hero": hero if hero is not None else current["hero"],
            "intro": intro if intro is not None else current["intro"],
            "highlightInfo": (
                highlight_info if highlight_info is not None else current["highlightInfo"]
            ),
        }
        self._write(Section.HERO, result["hero"])
        self._write(Section.INTRO, result["intro"])
        self._write(Section.HIGHLIGHT_INFO, result["highlightInfo"])
        return result

    def list_articles(self) -> list[dict[str, Any]]:
        articles = self.get(Section.ARTICLES)
        if not isinstance(articles, list):
            raise StorageError(f"Expected a JSON array in {self.path_for(Section.ARTICLES)}")
        return articles

    def create_article(self, *, title: str, content: str) -> dict[str, Any]:
        """Append a new article; ``id`` is creation time in epoch milliseconds.

        If the clock has not moved past the newest id, the id is bumped so ids
        stay strictly increasing within one store.
        """

        articles = self.list_articles()
        article_id = time.time_ns() // 1_000_000
        if articles:
            last_id = max(int(a.get("id", 0)) for a in articles)
            if article_id <= last_id:
                article_id = last_id + 1

        article = {
            "id": article_id,
            "title": title,
            "content": content,
            "createdAt": _now_iso(),
        }
        articles.append(article)
        self._write(Section.ARTICLES, articles)
        return article

    def delete_article(self, article_id: int) -> bool:
        articles = self.list_articles()
        remaining = [a for a in articles if a.get("id") != article_id]
        if len(remaining) == len(articles):
            return False
        self._write(Section.ARTICLES, remaining)
        return True
