"""
Response Formatting Functions
Turns matched entries, category lists and news articles into chat-formatted text
(*bold* titles, 1-based numbered lists, truncated free text)
"""

from datetime import datetime

from config import FORMAT_CONFIG, STATIC_RESPONSES


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def truncate_text(text: str, limit: int = FORMAT_CONFIG["description_limit"]) -> str:
    """Cut text to `limit` characters, appending the ellipsis marker only when cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + FORMAT_CONFIG["ellipsis"]


def format_help_response(categories: list) -> str:
    response = "*Welcome to our FAQ Bot! 🤖*\n\n"
    response += "I can help you with questions about:\n\n"

    for index, category in enumerate(categories, 1):
        response += f"{index}. *{capitalize_first(category)}*\n"

    response += "\n*How to use:*\n"
    response += "• Just ask a question naturally\n"
    response += "• Type 'category:[name]' for specific topics\n"
    response += "• Ask about hours, contact, pricing, support, etc.\n"
    response += "• Type 'news' for latest news updates\n\n"
    response += "Example: \"What are your hours?\" or \"category:pricing\" or \"news\""
    return response


def format_category_list(categories: list) -> str:
    return "".join(
        f"{index}. {capitalize_first(category)}\n"
        for index, category in enumerate(categories, 1)
    )


def format_category_not_found(category: str, categories: list) -> str:
    response = f"I couldn't find the category \"{category}\". \n\n*Available categories:*\n\n"
    response += format_category_list(categories)

    if categories:
        response += f"\nTry: \"category:{categories[0]}\" or just ask a question!"
    else:
        response += "\nJust ask a question!"
    return response


def _question_block(index: int, entry) -> str:
    return f"*{index}. {entry.question}*\n{entry.answer}\n\n"


def format_category_faqs(category: str, entries: list) -> str:
    response = f"*{capitalize_first(category)} - Frequently Asked Questions*\n\n"
    for index, entry in enumerate(entries, 1):
        response += _question_block(index, entry)
    response += STATIC_RESPONSES["category_closing"]
    return response


def format_single_result(entry) -> str:
    return f"*{entry.question}*\n\n{entry.answer}"


def format_multiple_results(entries: list) -> str:
    response = f"I found {len(entries)} answers that might help:\n\n"
    for index, entry in enumerate(entries, 1):
        response += _question_block(index, entry)
    response += STATIC_RESPONSES["results_closing"]
    return response


def format_search_results(entries: list, default_response: str = STATIC_RESPONSES["default"]) -> str:
    """Pick the zero / single / multiple result shape."""
    if not entries:
        return default_response
    if len(entries) == 1:
        return format_single_result(entries[0])
    return format_multiple_results(entries)


def format_article_date(published_at: str) -> str:
    try:
        return datetime.fromisoformat(published_at).strftime(FORMAT_CONFIG["date_format"])
    except (TypeError, ValueError):
        return published_at or ""


def format_news_articles(articles: list, source: str) -> str:
    """Format news articles; descriptions are cut to the configured character budget."""
    if not articles:
        return "📰 No news articles available at the moment. Please try again later."

    response = f"📰 *Latest News from {source}*\n\n"
    for index, article in enumerate(articles, 1):
        response += f"*{index}. {article.title}*\n"
        if article.description:
            response += f"{truncate_text(article.description)}\n"
        if article.link:
            response += f"🔗 {article.link}\n"
        response += f"📅 {format_article_date(article.published_at)}\n\n"

    response += STATIC_RESPONSES["news_tip"]
    return response


def format_news_unavailable() -> str:
    return STATIC_RESPONSES["news_unavailable"]


def format_error_response() -> str:
    return STATIC_RESPONSES["error"]
