"""Tests for keyword intent rules and category extraction."""

import pytest

from intent.intent_rules import (
    INTENT_RULES,
    Intent,
    classify_message,
    detect_help,
    detect_news,
    extract_category_request,
)

CATEGORIES = ["pricing", "support"]


def test_rules_are_evaluated_in_priority_order():
    assert [rule.intent for rule in INTENT_RULES] == [Intent.HELP, Intent.NEWS, Intent.CATEGORY]


@pytest.mark.parametrize("message", [
    "help", "show me the menu", "what options are there", "list categories",
    "which topics", "commands?", "start", "What can you do?",
])
def test_help_keywords(message):
    assert classify_message(message, CATEGORIES).intent == Intent.HELP


@pytest.mark.parametrize("message", ["news", "latest news please", "any headlines?", "updates", "rss feed", "articles"])
def test_news_keywords(message):
    assert classify_message(message, CATEGORIES).intent == Intent.NEWS


def test_help_wins_over_news():
    assert classify_message("help me with news", CATEGORIES).intent == Intent.HELP


def test_news_wins_over_category():
    assert classify_message("show pricing news", CATEGORIES).intent == Intent.NEWS


@pytest.mark.parametrize("message", ["category: pricing", "category:pricing", "CATEGORY:   Pricing", "show pricing"])
def test_category_requests_resolve_pricing(message):
    match = classify_message(message, CATEGORIES)
    assert match.intent == Intent.CATEGORY
    assert match.category == "pricing"


@pytest.mark.parametrize("message", ["get support", "support info", "support questions", "i need support"])
def test_category_patterns(message):
    assert classify_message(message, CATEGORIES).category == "support"


def test_explicit_category_is_returned_verbatim_even_if_unknown():
    match = classify_message("category:unknown", CATEGORIES)
    assert match.intent == Intent.CATEGORY
    assert match.category == "unknown"


def test_explicit_category_captures_single_word():
    assert extract_category_request("category: pricing plans", CATEGORIES) == "pricing"


def test_first_category_in_index_order_wins():
    assert extract_category_request("pricing and support", ["pricing", "support"]) == "pricing"
    assert extract_category_request("pricing and support", ["support", "pricing"]) == "support"


def test_category_match_returns_index_spelling():
    match = classify_message("show pricing", ["Pricing", "contact"])
    assert match.category == "Pricing"


@pytest.mark.parametrize("message", ["how much does it cost?", "", "   "])
def test_everything_else_is_search(message):
    match = classify_message(message, CATEGORIES)
    assert match.intent == Intent.SEARCH
    assert match.category is None


def test_detectors_expect_normalized_text():
    assert detect_help("help")
    assert not detect_help("nothing here")
    assert detect_news("headlines")
    assert not detect_news("hours")
