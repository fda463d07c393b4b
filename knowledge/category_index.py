"""
Category index: entries grouped by category, in first-seen order
"""

from typing import Dict, List, Sequence

from .entry import Entry


class CategoryIndex:
    """Derived view over an immutable entry sequence."""

    def __init__(self, entries: Sequence[Entry]):
        self._categories: List[str] = []
        self._by_key: Dict[str, List[Entry]] = {}

        seen = set()
        for entry in entries:
            key = entry.category.lower()
            if key not in seen:
                seen.add(key)
                self._categories.append(entry.category)
            self._by_key.setdefault(key, []).append(entry)

    def list_categories(self) -> List[str]:
        """Distinct category names in order of first occurrence."""
        return list(self._categories)

    def by_category(self, name: str) -> List[Entry]:
        """Entries whose category equals `name` case-insensitively; empty when unknown."""
        if not name:
            return []
        return list(self._by_key.get(name.lower(), []))
