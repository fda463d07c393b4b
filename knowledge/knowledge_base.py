"""
Knowledge base loading and access

The knowledge base is supplied as a versioned JSON payload:

    {
        "name": "...",
        "version": "...",
        "default_response": "...",      # optional no-match text
        "entries": [{"id", "question", "answer", "keywords", "category"}, ...]
    }

It is loaded once at startup and never mutated; a reload builds a new
KnowledgeBase and the holder swaps it in as a whole.
"""

import json
import logging
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import ValidationError

from config import KNOWLEDGE_BASE_CONFIG, STATIC_RESPONSES
from .category_index import CategoryIndex
from .entry import Entry
from .matcher import search

logger = logging.getLogger(__name__)


class KnowledgeBaseError(ValueError):
    """Raised when a knowledge base payload cannot be read or is invalid."""


class KnowledgeBase:
    def __init__(
        self,
        entries: Iterable[Entry],
        name: str = "faq",
        version: str = "0",
        default_response: Optional[str] = None
    ):
        self.entries = tuple(entries)
        self.name = name
        self.version = version
        self.default_response = default_response or STATIC_RESPONSES["default"]

        seen = set()
        for entry in self.entries:
            if entry.id in seen:
                raise KnowledgeBaseError(f"Duplicate entry id: '{entry.id}'")
            seen.add(entry.id)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "KnowledgeBase":
        if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
            raise KnowledgeBaseError("Knowledge base payload must be an object with an 'entries' list")

        try:
            entries = [Entry.model_validate(raw) for raw in payload["entries"]]
        except ValidationError as e:
            raise KnowledgeBaseError(f"Invalid knowledge base entry: {e}") from e

        return cls(
            entries,
            name=str(payload.get("name", "faq")),
            version=str(payload.get("version", "0")),
            default_response=payload.get("default_response")
        )

    @cached_property
    def category_index(self) -> CategoryIndex:
        return CategoryIndex(self.entries)

    def search(self, query: str, max_results: int = KNOWLEDGE_BASE_CONFIG["search_max_results"]) -> List[Entry]:
        return search(self.entries, query, max_results)

    def list_categories(self) -> List[str]:
        return self.category_index.list_categories()

    def by_category(self, name: str) -> List[Entry]:
        return self.category_index.by_category(name)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"KnowledgeBase(name={self.name!r}, version={self.version!r}, entries={len(self.entries)})"


def load_knowledge_base(path: Union[str, Path, None] = None) -> KnowledgeBase:
    """Read and validate a knowledge base payload from a JSON file."""
    path = Path(path or KNOWLEDGE_BASE_CONFIG["path"])
    logger.info(f"📚 [Knowledge Base] Loading payload from {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise KnowledgeBaseError(f"Could not read knowledge base '{path}': {e}") from e

    knowledge_base = KnowledgeBase.from_payload(payload)
    logger.info(
        f"✅ [Knowledge Base] Loaded '{knowledge_base.name}' v{knowledge_base.version} "
        f"with {len(knowledge_base)} entries in {len(knowledge_base.list_categories())} categories"
    )
    return knowledge_base


def entries_from_dicts(records: Sequence[Dict[str, Any]]) -> List[Entry]:
    """Build entries from plain dictionaries (fixtures, embedded payloads)."""
    return [Entry.model_validate(record) for record in records]
