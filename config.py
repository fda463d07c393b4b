"""
Configuration file for the FAQ Router Bot
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).parent

# API Configuration
API_CONFIG = {
    "title": "FAQ Router Bot API",
    "description": "Deterministic FAQ bot: routes chat messages to help, news, category or keyword-search answers from a static knowledge base.",
    "version": "1.0.0",
    "host": os.getenv("API_HOST", "0.0.0.0"),
    "port": int(os.getenv("API_PORT", "8000"))
}

# Logging Configuration
LOGGING_CONFIG = {
    "level": os.getenv("LOG_LEVEL", "INFO"),
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "preview_length": 100
}

# Knowledge Base Configuration
KNOWLEDGE_BASE_CONFIG = {
    "path": os.getenv(
        "KNOWLEDGE_BASE_PATH",
        str(BASE_DIR / "knowledge" / "data" / "moki_faq.json")
    ),
    "search_max_results": 3
}

# Intent Classification Keywords (matched as substrings of the lowercased message)
INTENT_KEYWORDS = {
    "help": ['help', 'menu', 'options', 'categories', 'topics', 'what can you do', 'commands', 'start'],
    "news": ['news', 'latest news', 'current news', 'headlines', 'updates', 'feed', 'articles']
}

# Category request extraction
CATEGORY_EXPLICIT_PATTERN = r"category:\s*(\w+)"
CATEGORY_REQUEST_PATTERNS = [
    "show {category}",
    "get {category}",
    "{category} info",
    "{category} questions",
    "{category}"
]

# News Provider Configuration
NEWS_CONFIG = {
    "sources": {
        "default": os.getenv("DEFAULT_NEWS_FEED_URL", "https://feeds.bbci.co.uk/news/rss.xml"),
        "rss": os.getenv("RSS_FEED_URL", "https://feeds.bbci.co.uk/news/rss.xml"),
        "api": os.getenv("API_FEED_URL", "")
    },
    "default_source": "default",
    "default_limit": 5,
    "timeout": float(os.getenv("NEWS_TIMEOUT", "10.0")),
    "user_agent": os.getenv("NEWS_USER_AGENT", "FAQRouterBot/1.0")
}

# Response Formatting
FORMAT_CONFIG = {
    "description_limit": 150,
    "ellipsis": "...",
    "date_format": "%d %b %Y"
}

# Support contact shown in apologies
SUPPORT_CONFIG = {
    "email": os.getenv("SUPPORT_EMAIL", "support@company.com"),
    "phone": os.getenv("SUPPORT_PHONE", "(555) 123-4567")
}

# Static responses
STATIC_RESPONSES = {
    "default": (
        "I couldn't find a specific answer to your question. "
        "Type 'help' to see the topics I can answer, or contact our support team at "
        f"{SUPPORT_CONFIG['email']} or call {SUPPORT_CONFIG['phone']}."
    ),
    "error": (
        "I'm sorry, I encountered an error while processing your request. "
        f"Please try again or contact our support team at {SUPPORT_CONFIG['email']} "
        f"or call {SUPPORT_CONFIG['phone']}."
    ),
    "news_unavailable": (
        "📰 Sorry, I couldn't fetch the latest news right now. Please try again later "
        f"or contact our support team at {SUPPORT_CONFIG['email']} or call {SUPPORT_CONFIG['phone']}."
    ),
    "category_closing": "Need help with something else? Just ask! 😊",
    "results_closing": "If you need more specific help, feel free to ask another question! 😊",
    "news_tip": "💡 *Tip:* Ask me 'news' anytime for the latest updates!"
}

# Outbound Transport Configuration
TRANSPORT_CONFIG = {
    "outbound_url": os.getenv("TRANSPORT_OUTBOUND_URL", ""),
    "timeout": float(os.getenv("TRANSPORT_TIMEOUT", "10.0")),
    "ignored_senders": ["status@broadcast"],
    "chat_id_suffix": "@c.us"
}

# Ollama Configuration
OLLAMA_CONFIG = {
    "base_url": os.getenv("OLLAMA_URL", "http://127.0.0.1:11434"),
    "model": os.getenv("OLLAMA_MODEL", "llama3:8b"),
    "timeout": float(os.getenv("OLLAMA_TIMEOUT", "30.0"))
}

# Agent Orchestrator Configuration
AGENT_CONFIG = {
    "enabled": os.getenv("AGENT_USE_LLM", "false").lower() == "true",
    "max_retries": 3,
    "retry_delay": 1.0,
    "required_sequences": {
        "HELP": ["get_faq_categories", "format_help_response"],
        "QUESTION": ["search_faq", "format_faq_response"]
    }
}

# Ollama Prompt Template
REQUEST_CLASSIFICATION_PROMPT = """
Classify the following chat message into one of these request types:

1. "HELP" - the user wants to know what the bot can do, see the menu, options, topics or categories
   Examples: "help", "menu", "what can you do?", "which topics do you cover?"

2. "QUESTION" - the user asks a concrete question that should be answered from the FAQ database
   Examples: "what are your hours?", "how much is tuition?", "what is the sick policy?"

Message: "{message}"

Respond with only one word: HELP or QUESTION
"""
