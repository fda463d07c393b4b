"""
Keyword-scoring matcher over the knowledge base
"""

from dataclasses import dataclass
from typing import List, Sequence

from .entry import Entry


# scoring weights
EXACT_KEYWORD_WEIGHT = 10    # token equals a keyword
PARTIAL_KEYWORD_WEIGHT = 5   # token contains a keyword or a keyword contains the token
CONTENT_WEIGHT = 2           # token appears in the question or answer text


@dataclass(frozen=True)
class ScoredMatch:
    entry: Entry
    score: int


def tokenize(query: str) -> List[str]:
    """Lowercase, trim and split on runs of whitespace. Blank queries yield no tokens."""
    return query.strip().lower().split()


def score_entry(tokens: Sequence[str], entry: Entry) -> int:
    """Sum the per-token contributions for one entry.

    The contributions are independent: a token equal to a keyword earns both
    the exact and the partial weight (10 + 5).
    """
    keywords = [kw.lower() for kw in entry.keywords]
    question = entry.question.lower()
    answer = entry.answer.lower()

    score = 0
    for token in tokens:
        if any(kw == token for kw in keywords):
            score += EXACT_KEYWORD_WEIGHT

        if any(token in kw or kw in token for kw in keywords):
            score += PARTIAL_KEYWORD_WEIGHT

        if token in question or token in answer:
            score += CONTENT_WEIGHT

    return score


def rank_entries(query: str, entries: Sequence[Entry]) -> List[ScoredMatch]:
    """Score every entry, drop non-positive scores and sort by descending score.

    Equal scores keep knowledge base order (sorted() is stable).
    """
    tokens = tokenize(query)
    if not tokens:
        return []

    scored = [ScoredMatch(entry, score_entry(tokens, entry)) for entry in entries]
    matches = [match for match in scored if match.score > 0]
    return sorted(matches, key=lambda match: -match.score)


def search(entries: Sequence[Entry], query: str, max_results: int = 3) -> List[Entry]:
    if max_results <= 0:
        return []
    return [match.entry for match in rank_entries(query, entries)[:max_results]]
