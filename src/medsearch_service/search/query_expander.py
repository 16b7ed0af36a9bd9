"""Query expansion via the medical vocabulary.

Turns a raw query into the set of terms the storage-layer query builder
and the relevance scorer match against.

Design Decision: Dictionary-based expansion
- Zero-latency lookup (simple dict access)
- Preserves the original (lowercased) query as the first term
- Deterministic and testable: the vocabulary is injected, not global

Usage:
    from medsearch_service.search.query_expander import QueryExpander

    QueryExpander().expand("heart attack")
    # ['heart attack', 'myocardial infarction', 'mi', 'acute coronary syndrome']
"""

from medsearch_service.vocabulary import DEFAULT_VOCABULARY, MedicalVocabulary

# Single-token queries longer than this get a prefix-match wildcard variant
WILDCARD_MIN_TOKEN_LENGTH = 3
WILDCARD_SUFFIX = "*"


class QueryExpander:
    """Expands queries with synonyms, abbreviations and a prefix wildcard."""

    def __init__(self, vocabulary: MedicalVocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary

    def expand(self, query: str) -> list[str]:
        """Expand a query into unique lowercase search terms.

        Args:
            query: Raw query string as typed by the user

        Returns:
            Unique terms in first-insertion order; the lowercased query is
            always the first element. Callers treat the result as a set.

        Algorithm:
        1. Seed with the lowercased query
        2. Add the synonyms of every vocabulary term contained in the query
           (substring containment, so "heart attacks" also matches)
        3. Uppercase each whitespace token and add its abbreviation expansion
        4. If the query is one token longer than 3 characters, add
           ``token*`` to signal prefix matching to the storage layer

        Examples:
            >>> QueryExpander().expand("HTN")
            ['htn', 'hypertension']

            >>> QueryExpander().expand("")
            ['']
        """
        query_lower = query.lower()
        words = query_lower.split()
        expanded = [query_lower]

        for term, synonyms in self.vocabulary.synonyms.items():
            if term in query_lower:
                expanded.extend(synonym.lower() for synonym in synonyms)

        for word in words:
            full_form = self.vocabulary.abbreviations.get(word.upper())
            if full_form:
                expanded.append(full_form.lower())

        if len(words) == 1 and len(words[0]) > WILDCARD_MIN_TOKEN_LENGTH:
            expanded.append(f"{words[0]}{WILDCARD_SUFFIX}")

        # Deduplicate while preserving order
        return list(dict.fromkeys(expanded))


_default_expander = QueryExpander()


def expand_query(query: str) -> list[str]:
    """Expand a query with the default vocabulary."""
    return _default_expander.expand(query)
