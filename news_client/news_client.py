"""
News feed client
Fetches recent articles from an RSS feed or a JSON news API
"""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import List, Optional

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel

from config import NEWS_CONFIG

logger = logging.getLogger(__name__)


class NewsArticle(BaseModel):
    title: str
    link: str
    description: str
    published_at: str


class NewsResult(BaseModel):
    articles: List[NewsArticle] = []
    source: str
    count: int = 0
    error: Optional[str] = None


def _clean_html_to_text(html: str) -> str:
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text(separator=" ", strip=True)


def _to_iso(value: Optional[str]) -> str:
    """Normalise RFC 822 (RSS) or ISO-8601 dates; fall back to now."""
    if value:
        try:
            return parsedate_to_datetime(value).isoformat()
        except (TypeError, ValueError):
            pass
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).isoformat()
        except ValueError:
            pass
    return datetime.now(timezone.utc).isoformat()


def is_rss_url(url: str) -> bool:
    return 'feeds.' in url or url.endswith('.xml') or 'rss' in url


def parse_rss_feed(content: bytes) -> List[dict]:
    """Extract raw items from RSS XML; items without a title or link are skipped."""
    root = ET.fromstring(content)
    items = []
    for item in root.iter("item"):
        title = (item.findtext("title") or "").strip()
        link = (item.findtext("link") or "").strip()
        if not title or not link:
            continue
        items.append({
            "title": title,
            "link": link,
            "description": item.findtext("description") or "",
            "pubDate": item.findtext("pubDate")
        })
    return items


def parse_api_feed(data) -> List[dict]:
    """Handle the common JSON shapes: a bare list or an object with articles/items/results."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("articles", "items", "results"):
            if isinstance(data.get(key), list):
                return data[key]
    return []


def normalize_article(raw: dict) -> NewsArticle:
    return NewsArticle(
        title=raw.get("title") or "No title",
        link=raw.get("link") or raw.get("url") or "",
        description=_clean_html_to_text(raw.get("description") or raw.get("summary") or ""),
        published_at=_to_iso(raw.get("pubDate") or raw.get("publishedAt"))
    )


class NewsClient:
    """
    Client for the configured news feeds
    """

    def __init__(self, sources: Optional[dict] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.sources = sources if sources is not None else NEWS_CONFIG["sources"]
        self.timeout = timeout if timeout is not None else NEWS_CONFIG["timeout"]
        self.transport = transport

    def resolve_url(self, source: str) -> str:
        return self.sources.get(source) or self.sources.get(NEWS_CONFIG["default_source"], "")

    async def fetch_articles(self, source: str = NEWS_CONFIG["default_source"],
                             limit: int = NEWS_CONFIG["default_limit"]) -> NewsResult:
        """
        Fetch up to `limit` articles from a source identifier (default, rss, api)

        Returns:
            NewsResult: articles, or an `error` string when the feed could not be read
        """
        logger.info(f"🔧 [News Feed] Fetching news source={source} limit={limit}")

        feed_url = self.resolve_url(source)
        if not feed_url:
            return NewsResult(source=source, error="No news feed URL configured")

        try:
            headers = {"User-Agent": NEWS_CONFIG["user_agent"]}
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport,
                                         follow_redirects=True) as client:
                response = await client.get(feed_url, headers=headers)
                response.raise_for_status()

            if is_rss_url(feed_url):
                logger.info(f"📡 [News Feed] Parsing RSS feed {feed_url}")
                raw_articles = parse_rss_feed(response.content)
            else:
                logger.info(f"📡 [News Feed] Parsing API feed {feed_url}")
                raw_articles = parse_api_feed(response.json())

            articles = [normalize_article(raw) for raw in raw_articles[:max(limit, 0)]]

        except Exception as e:
            logger.error(f"❌ [News Feed] Error fetching news from {source}: {type(e).__name__}: {e}")
            return NewsResult(source=source, error=f"Failed to fetch news: {e}")

        logger.info(f"✅ [News Feed] Fetched {len(articles)} articles from {source}")
        return NewsResult(articles=articles, source=source, count=len(articles))

    async def health_check(self) -> bool:
        feed_url = self.resolve_url(NEWS_CONFIG["default_source"])
        if not feed_url:
            return False
        try:
            async with httpx.AsyncClient(timeout=5.0, transport=self.transport) as client:
                response = await client.get(feed_url)
                return response.status_code == 200
        except Exception:
            return False
