"""Tests for the HTTP surface."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

import config
from agents.faq_agent import FaqAgent
from conftest import BILLING_SUPPORT_ENTRIES, PRICING_ENTRIES
from main import create_app
from news_client.news_client import NewsClient
from ollama_client.ollama_client import OllamaClient


@pytest.fixture
def client(billing_support_kb, news_ok, transport):
    app = create_app(knowledge_base=billing_support_kb, news_provider=news_ok, transport=transport)
    return TestClient(app)


def write_payload(path, entries, name="reloaded", version="2"):
    path.write_text(json.dumps({"name": name, "version": version, "entries": entries}), encoding="utf-8")
    return path


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "healthy"

    health = client.get("/health").json()
    assert health["knowledge_base"] == {"name": "billing-support", "version": "1", "entries": 3, "categories": 2}
    assert health["dependencies"] == {"news_feed": None, "ollama": None}


@pytest.mark.parametrize("status, reachable", [(200, True), (503, False)])
def test_health_reports_dependency_reachability(billing_support_kb, transport, status, reachable):
    requested = []

    def handler(request):
        requested.append(request.url.path)
        return httpx.Response(status)

    mock = httpx.MockTransport(handler)
    news = NewsClient(sources={"default": "https://feeds.example.com/rss.xml"}, transport=mock)
    app = create_app(knowledge_base=billing_support_kb, news_provider=news, transport=transport)
    ollama = OllamaClient(base_url="http://ollama.test", model="llama3", timeout=5.0, transport=mock)
    app.state.agent = FaqAgent(app.state.router, ollama_client=ollama)

    dependencies = TestClient(app).get("/health").json()["dependencies"]

    assert dependencies["news_feed"] is reachable
    assert dependencies["ollama"] == {
        "reachable": reachable,
        "base_url": "http://ollama.test",
        "model": "llama3",
        "timeout": 5.0
    }
    assert sorted(requested) == ["/api/tags", "/rss.xml"]


def test_route(client):
    response = client.post("/route", json={"message": "category:billing", "conversation_id": "c1"})

    assert response.status_code == 200
    body = response.json()
    assert body["response_type"] == "category_faqs"
    assert body["matched_faq_ids"] == ["invoice-dates", "refunds"]


def test_route_news(client):
    assert client.post("/route", json={"message": "news"}).json()["response_type"] == "news"


def test_search(client):
    body = client.get("/search", params={"q": "refund"}).json()

    assert body["total_count"] == 1
    assert body["results"][0]["id"] == "refunds"
    assert body["results"][0]["keywords"] == ["refund", "money back"]


def test_search_rejects_huge_limit(client):
    assert client.get("/search", params={"q": "refund", "max_results": 500}).status_code == 422


def test_categories(client):
    assert client.get("/categories").json() == {"categories": ["billing", "support"]}

    body = client.get("/categories/BILLING").json()
    assert body["total_count"] == 2
    assert [e["id"] for e in body["entries"]] == ["invoice-dates", "refunds"]

    assert client.get("/categories/unknown").json()["total_count"] == 0


def test_inbound_message_is_answered(client, transport):
    body = client.post("/messages", json={"chat_id": "1555@c.us", "body": "help"}).json()

    assert body["handled"] is True
    assert body["response_type"] == "help"
    assert transport.sent == [("1555@c.us", body["response_text"])]


def test_inbound_status_broadcast_is_skipped(client, transport):
    body = client.post("/messages", json={"chat_id": "status@broadcast", "body": "help"}).json()

    assert body == {"handled": False}
    assert transport.sent == []


def test_agent_endpoint(billing_support_kb, news_ok, transport):
    app = create_app(knowledge_base=billing_support_kb, news_provider=news_ok, transport=transport)
    app.state.agent = FaqAgent(app.state.router, use_llm=False)

    body = TestClient(app).post("/agent", json={"message": "refund"}).json()
    assert body["request_type"] == "QUESTION"
    assert body["tool_calls"] == ["search_faq", "format_faq_response"]


def test_reload_swaps_knowledge_base(client, tmp_path, monkeypatch):
    path = write_payload(tmp_path / "faq.json", PRICING_ENTRIES)
    monkeypatch.setitem(config.KNOWLEDGE_BASE_CONFIG, "path", str(path))

    body = client.post("/reload").json()
    assert body == {"status": "reloaded", "name": "reloaded", "version": "2", "entries": 3}
    assert client.get("/categories").json() == {"categories": ["Pricing", "contact"]}


@pytest.mark.parametrize("entries", [
    [{"id": "broken"}],
    BILLING_SUPPORT_ENTRIES + BILLING_SUPPORT_ENTRIES[:1],
])
def test_reload_rejects_invalid_payload(client, tmp_path, monkeypatch, entries):
    path = write_payload(tmp_path / "faq.json", entries)
    monkeypatch.setitem(config.KNOWLEDGE_BASE_CONFIG, "path", str(path))

    response = client.post("/reload")
    assert response.status_code == 400
    assert client.get("/categories").json() == {"categories": ["billing", "support"]}


def test_reload_missing_file(client, tmp_path, monkeypatch):
    monkeypatch.setitem(config.KNOWLEDGE_BASE_CONFIG, "path", str(tmp_path / "missing.json"))
    assert client.post("/reload").status_code == 400
