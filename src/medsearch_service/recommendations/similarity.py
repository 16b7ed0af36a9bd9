"""Pairwise content similarity and similar-content recommendations.

Similarity is a weighted sum of independent, symmetric components:

    tag Jaccard index            x 40
    specialty overlap ratio      x 30   (|A & B| / max(|A|, |B|))
    same content type            + 15
    author specialties overlap   + 10   (binary)
    same difficulty              +  5

The maximum is exactly 100; the result is still clamped to [0, 100].
"""

from collections.abc import Sequence

from medsearch_service.logging_config import get_logger
from medsearch_service.schemas.content import ContentItem
from medsearch_service.schemas.recommendation import RecommendationResponse

logger = get_logger(__name__)

WEIGHT_TAGS = 40
WEIGHT_SPECIALTIES = 30
BOOST_SAME_TYPE = 15
BOOST_AUTHOR_SPECIALTY = 10
BOOST_SAME_DIFFICULTY = 5
MAX_SIMILARITY = 100.0

SIMILAR_CONFIDENCE = 0.8


def content_similarity(a: ContentItem, b: ContentItem) -> float:
    """Similarity between two content items, in [0, 100].

    Tags compare case-insensitively; specialties compare exactly.
    """
    similarity = 0.0

    tags_a = {tag.lower() for tag in a.tags}
    tags_b = {tag.lower() for tag in b.tags}
    tag_union = tags_a | tags_b
    if tag_union:
        similarity += len(tags_a & tags_b) / len(tag_union) * WEIGHT_TAGS

    specialties_a = set(a.specialties)
    specialties_b = set(b.specialties)
    largest = max(len(specialties_a), len(specialties_b))
    if largest:
        similarity += len(specialties_a & specialties_b) / largest * WEIGHT_SPECIALTIES

    if a.type == b.type:
        similarity += BOOST_SAME_TYPE

    if set(a.author.specialties) & set(b.author.specialties):
        similarity += BOOST_AUTHOR_SPECIALTY

    if a.difficulty == b.difficulty:
        similarity += BOOST_SAME_DIFFICULTY

    return min(similarity, MAX_SIMILARITY)


def similar_content_recommendations(
    reference: ContentItem,
    candidates: Sequence[ContentItem],
    limit: int = 10,
) -> RecommendationResponse:
    """Candidates most similar to ``reference`` (the reference itself excluded).

    Complexity: O(n) similarity computations against one reference.
    """
    scored = [
        (candidate, content_similarity(reference, candidate))
        for candidate in candidates
        if candidate.id != reference.id
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    recommendations = [candidate for candidate, _ in scored[:limit]]

    logger.debug(
        "recommendations.similar.completed",
        reference_id=reference.id,
        candidates=len(candidates),
        returned=len(recommendations),
    )
    return RecommendationResponse(
        recommendations=recommendations,
        reason=f'Based on similarity to "{reference.title}"',
        confidence=SIMILAR_CONFIDENCE if recommendations else 0.0,
    )
