"""Autocomplete and did-you-mean suggestions.

Candidates are gathered in a fixed order, de-duplicated (first occurrence
wins) and truncated:
1. Abbreviations whose code starts with the query or whose full form
   contains it (full form, then the code itself)
2. Vocabulary conditions containing the query, with their synonyms
3. Up to 3 of the caller's recent searches containing the query
4. "<query> symptoms" and "<query> treatment" for queries longer than 2
"""

from collections.abc import Iterable

from medsearch_service.vocabulary import DEFAULT_VOCABULARY, MedicalVocabulary

MAX_SUGGESTIONS = 8
MAX_RECENT_SUGGESTIONS = 3
MIN_PATTERN_QUERY_LENGTH = 2
PATTERN_SUGGESTIONS_ADDED = 2

QUERY_PATTERNS = (
    "{query} symptoms",
    "{query} treatment",
    "{query} diagnosis",
    "{query} guidelines",
    "{query} case study",
    "{query} research",
)


class SuggestionGenerator:
    """Generates query suggestions from vocabulary and search history."""

    def __init__(self, vocabulary: MedicalVocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary

    def suggest(self, query: str, recent_searches: Iterable[str] = ()) -> list[str]:
        """Suggest up to 8 queries for a partial query.

        Args:
            query: Partial query as typed
            recent_searches: The caller's recent queries, newest first

        Returns:
            Ordered unique non-empty suggestions

        Examples:
            >>> SuggestionGenerator().suggest("htn")
            ['hypertension', 'htn symptoms', 'htn treatment']
        """
        query_lower = query.lower()
        suggestions: list[str] = []

        for abbreviation, full_form in self.vocabulary.abbreviations.items():
            if abbreviation.lower().startswith(query_lower) or query_lower in full_form.lower():
                suggestions.append(full_form)
                if abbreviation.lower() != query_lower:
                    suggestions.append(abbreviation)

        for term, synonyms in self.vocabulary.synonyms.items():
            if query_lower in term:
                suggestions.append(term)
                suggestions.extend(s for s in synonyms if s.lower() != query_lower)

        relevant_recent = [
            search
            for search in recent_searches
            if query_lower in search.lower() and search.lower() != query_lower
        ]
        suggestions.extend(relevant_recent[:MAX_RECENT_SUGGESTIONS])

        if len(query) > MIN_PATTERN_QUERY_LENGTH:
            suggestions.extend(
                pattern.format(query=query)
                for pattern in QUERY_PATTERNS[:PATTERN_SUGGESTIONS_ADDED]
            )

        unique = dict.fromkeys(s for s in suggestions if s)
        return list(unique)[:MAX_SUGGESTIONS]
