"""Shared fixtures: several knowledge bases plus fake collaborators."""

import asyncio

import pytest

from intent.router import FaqRouter
from knowledge.knowledge_base import KnowledgeBase, entries_from_dicts, load_knowledge_base
from news_client.news_client import NewsArticle, NewsResult
from transport.message_handler import SendResult


BILLING_SUPPORT_ENTRIES = [
    {
        "id": "invoice-dates",
        "question": "When are invoices sent?",
        "answer": "Invoices are emailed on the first business day of each month.",
        "keywords": ["invoice", "billing", "monthly"],
        "category": "billing",
    },
    {
        "id": "refunds",
        "question": "How do refunds work?",
        "answer": "Refunds are processed within 5 business days.",
        "keywords": ["refund", "money back"],
        "category": "billing",
    },
    {
        "id": "support-desk",
        "question": "When is the support desk available?",
        "answer": "Our desk answers tickets 24/7.",
        "keywords": ["support", "ticket", "helpdesk"],
        "category": "support",
    },
]

PRICING_ENTRIES = [
    {
        "id": "plans",
        "question": "What plans do you offer?",
        "answer": "We offer Basic and Pro plans.",
        "keywords": ["plans", "pricing", "cost"],
        "category": "Pricing",
    },
    {
        "id": "discounts",
        "question": "Are there discounts?",
        "answer": "Annual billing saves 20%.",
        "keywords": ["discount", "annual"],
        "category": "pricing",
    },
    {
        "id": "contact",
        "question": "How do I reach you?",
        "answer": "Email us any time.",
        "keywords": ["contact", "email"],
        "category": "contact",
    },
]

HOURS_ENTRIES = [
    {
        "id": "hours",
        "question": "What are your hours?",
        "answer": "Monday to Friday, 9 AM to 5 PM.",
        "keywords": ["hours", "open"],
        "category": "general",
    },
]


def make_kb(records, name="test", version="1"):
    return KnowledgeBase(entries_from_dicts(records), name=name, version=version)


@pytest.fixture
def billing_support_kb():
    return make_kb(BILLING_SUPPORT_ENTRIES, name="billing-support")


@pytest.fixture
def pricing_kb():
    return make_kb(PRICING_ENTRIES, name="pricing")


@pytest.fixture
def hours_kb():
    return make_kb(HOURS_ENTRIES, name="hours")


@pytest.fixture
def moki_kb():
    return load_knowledge_base()


@pytest.fixture(params=["moki", "billing_support", "pricing", "hours"])
def any_kb(request):
    """Every knowledge base fixture, for properties that must hold regardless of content."""
    return request.getfixturevalue(f"{request.param}_kb")


class FakeNewsProvider:
    def __init__(self, result=None, exc=None, delay=0.0):
        self.result = result
        self.exc = exc
        self.delay = delay
        self.calls = []

    async def fetch_articles(self, source, limit):
        self.calls.append((source, limit))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.exc is not None:
            raise self.exc
        return self.result


class RecordingTransport:
    def __init__(self, success=True, exc=None):
        self.success = success
        self.exc = exc
        self.sent = []

    async def send_message(self, chat_id, text):
        self.sent.append((chat_id, text))
        if self.exc is not None:
            raise self.exc
        if not self.success:
            return SendResult(success=False, chat_id=chat_id, error="gateway down")
        return SendResult(success=True, chat_id=chat_id, message_id=f"msg-{len(self.sent)}")


SAMPLE_ARTICLES = [
    NewsArticle(
        title="School reopens",
        link="https://news.example.com/1",
        description="Classes resume on Monday.",
        published_at="2025-03-10T08:00:00+00:00",
    ),
    NewsArticle(
        title="Spring festival announced",
        link="https://news.example.com/2",
        description="",
        published_at="2025-03-11T09:30:00+00:00",
    ),
]


@pytest.fixture
def news_ok():
    return FakeNewsProvider(NewsResult(articles=SAMPLE_ARTICLES, source="default", count=len(SAMPLE_ARTICLES)))


@pytest.fixture
def router(billing_support_kb, news_ok):
    return FaqRouter(billing_support_kb, news_ok)


@pytest.fixture
def transport():
    return RecordingTransport()
