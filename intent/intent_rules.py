"""
Keyword intent classification
Ordered pattern -> intent rules evaluated top to bottom; the first match wins
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Union

from config import CATEGORY_EXPLICIT_PATTERN, CATEGORY_REQUEST_PATTERNS, INTENT_KEYWORDS

logger = logging.getLogger(__name__)

_EXPLICIT_CATEGORY_RE = re.compile(CATEGORY_EXPLICIT_PATTERN)


class Intent(str, Enum):
    HELP = "help"
    NEWS = "news"
    CATEGORY = "category"
    SEARCH = "search"


@dataclass(frozen=True)
class IntentMatch:
    intent: Intent
    category: Optional[str] = None


@dataclass(frozen=True)
class IntentRule:
    intent: Intent
    # (normalized message, known categories) -> falsy when the rule does not apply
    matches: Callable[[str, Sequence[str]], Union[bool, str, None]]


def normalize_message(message: str) -> str:
    return message.lower().strip()


def detect_help(message: str) -> bool:
    return any(keyword in message for keyword in INTENT_KEYWORDS["help"])


def detect_news(message: str) -> bool:
    return any(keyword in message for keyword in INTENT_KEYWORDS["news"])


def extract_category_request(message: str, categories: Sequence[str]) -> Optional[str]:
    """
    Resolve a category name from the message.

    An explicit "category:<word>" wins and is returned verbatim, known or not.
    Otherwise the first known category (in index order) whose request pattern
    ("show x", "get x", "x info", "x questions" or the bare name) appears in
    the message is returned.
    """
    explicit = _EXPLICIT_CATEGORY_RE.search(message)
    if explicit:
        return explicit.group(1)

    for category in categories:
        name = category.lower()
        patterns = [pattern.format(category=name) for pattern in CATEGORY_REQUEST_PATTERNS]
        if any(pattern in message for pattern in patterns):
            return category

    return None


INTENT_RULES = (
    IntentRule(Intent.HELP, lambda message, categories: detect_help(message)),
    IntentRule(Intent.NEWS, lambda message, categories: detect_news(message)),
    IntentRule(Intent.CATEGORY, extract_category_request),
)


def classify_message(message: str, categories: Sequence[str]) -> IntentMatch:
    """
    Classify a raw chat message against INTENT_RULES

    Args:
        message: The raw user message (normalized here)
        categories: Known category names in category index order

    Returns:
        IntentMatch: the first matching rule's intent, SEARCH when none match
    """
    normalized = normalize_message(message)

    for rule in INTENT_RULES:
        result = rule.matches(normalized, categories)
        if result:
            category = result if isinstance(result, str) else None
            logger.debug(f"🔤 [Intent] '{normalized[:100]}' -> {rule.intent.value} (category={category})")
            return IntentMatch(rule.intent, category)

    logger.debug("🔤 [Intent] No rule matched, defaulting to search")
    return IntentMatch(Intent.SEARCH)
