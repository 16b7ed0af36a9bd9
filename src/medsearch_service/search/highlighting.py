"""Excerpt generation and query highlighting for result display."""

import re

from medsearch_service.schemas.content import ContentHighlights, ContentItem

EXCERPT_MAX_LENGTH = 200
# Cut at a sentence end only if it keeps at least this share of the excerpt
EXCERPT_SENTENCE_MIN_RATIO = 0.7
SNIPPET_CONTEXT_CHARS = 100

_HTML_TAG = re.compile(r"<[^>]*>")


def generate_excerpt(content: str, max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """Build a plain-text excerpt of at most ``max_length`` characters.

    HTML tags are stripped. Long text is cut at the last sentence end when
    that keeps more than 70% of the budget, otherwise at the last word
    boundary with an ellipsis.

    Examples:
        >>> generate_excerpt("<p>Short.</p>")
        'Short.'
    """
    plain_text = _HTML_TAG.sub("", content)
    if len(plain_text) <= max_length:
        return plain_text

    truncated = plain_text[:max_length]
    last_sentence = truncated.rfind(".")
    if last_sentence > max_length * EXCERPT_SENTENCE_MIN_RATIO:
        return truncated[: last_sentence + 1]

    last_space = truncated.rfind(" ")
    if last_space == -1:
        return truncated + "..."
    return truncated[:last_space] + "..."


def _mark(text: str, pattern: re.Pattern[str]) -> str:
    return pattern.sub(lambda match: f"<mark>{match.group(0)}</mark>", text)


def generate_highlights(item: ContentItem, query: str) -> ContentHighlights:
    """Wrap occurrences of the raw query in ``<mark>`` tags.

    Args:
        item: Content to highlight (not modified)
        query: Raw query; matched case-insensitively as literal text

    Returns:
        Highlights for the title, a snippet of up to 100 characters either
        side of the first body match, and every matching tag. Fields with
        no match stay None.
    """
    if not query:
        return ContentHighlights()

    query_lower = query.lower()
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    title = content = None
    tags = None

    if query_lower in item.title.lower():
        title = _mark(item.title, pattern)

    content_match = pattern.search(item.content)
    if content_match:
        start = max(0, content_match.start() - SNIPPET_CONTEXT_CHARS)
        end = min(len(item.content), content_match.end() + SNIPPET_CONTEXT_CHARS)
        content = _mark(item.content[start:end], pattern)

    matching_tags = [tag for tag in item.tags if query_lower in tag.lower()]
    if matching_tags:
        tags = [_mark(tag, pattern) for tag in matching_tags]

    return ContentHighlights(title=title, content=content, tags=tags)
