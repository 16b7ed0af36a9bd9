"""Medical vocabulary: abbreviations, condition synonyms and category keywords.

The vocabulary is an immutable value handed to each component at
construction. ``DEFAULT_VOCABULARY`` is the compiled-in table; tests and
callers may build their own ``MedicalVocabulary`` without touching it.

Usage:
    from medsearch_service.vocabulary import DEFAULT_VOCABULARY

    DEFAULT_VOCABULARY.abbreviations["HTN"]
    # 'hypertension'
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Condition -> synonyms. Keys are lowercase; synonyms keep their display case
# (e.g. "MI") and are lowercased by the expander.
MEDICAL_SYNONYMS: dict[str, tuple[str, ...]] = {
    "heart attack": ("myocardial infarction", "MI", "acute coronary syndrome"),
    "stroke": ("cerebrovascular accident", "CVA", "brain attack"),
    "diabetes": ("diabetes mellitus", "DM", "hyperglycemia"),
    "hypertension": ("high blood pressure", "HTN", "elevated BP"),
    "pneumonia": ("lung infection", "pulmonary infection"),
    "asthma": ("reactive airway disease", "bronchial asthma"),
    "copd": ("chronic obstructive pulmonary disease", "emphysema", "chronic bronchitis"),
    "covid": ("coronavirus", "sars-cov-2", "covid-19", "corona virus"),
    "cancer": ("neoplasm", "malignancy", "tumor", "carcinoma"),
    "fracture": ("broken bone", "bone break", "fx"),
}

# Uppercase abbreviation -> full form
MEDICAL_ABBREVIATIONS: dict[str, str] = {
    "MI": "myocardial infarction",
    "CVA": "cerebrovascular accident",
    "HTN": "hypertension",
    "DM": "diabetes mellitus",
    "COPD": "chronic obstructive pulmonary disease",
    "CHF": "congestive heart failure",
    "CAD": "coronary artery disease",
    "GERD": "gastroesophageal reflux disease",
    "UTI": "urinary tract infection",
    "DVT": "deep vein thrombosis",
    "PE": "pulmonary embolism",
    "PTSD": "post-traumatic stress disorder",
    "ADHD": "attention deficit hyperactivity disorder",
    "IBS": "irritable bowel syndrome",
    "IBD": "inflammatory bowel disease",
}

# Checked top to bottom; the first category with a matching keyword wins.
SPECIALTY_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("cardiology", ("heart", "cardiac", "cardio", "arrhythmia", "hypertension", "mi", "chest pain")),
    ("neurology", ("brain", "neuro", "stroke", "seizure", "headache", "migraine", "cva")),
    ("pulmonology", ("lung", "respiratory", "asthma", "copd", "pneumonia", "breathing")),
    ("endocrinology", ("diabetes", "thyroid", "hormone", "insulin", "glucose")),
    ("oncology", ("cancer", "tumor", "malignancy", "chemotherapy", "radiation")),
    ("infectious", ("infection", "bacteria", "virus", "antibiotic", "covid", "flu")),
    ("emergency", ("trauma", "emergency", "critical", "shock", "resuscitation")),
    ("pediatrics", ("child", "pediatric", "infant", "newborn", "adolescent")),
    ("surgery", ("surgical", "operation", "procedure", "incision", "laparoscopic")),
    ("psychiatry", ("mental", "depression", "anxiety", "psychiatric", "therapy")),
)

GENERAL_CATEGORY = "general"


@dataclass(frozen=True)
class MedicalVocabulary:
    """Read-only vocabulary tables.

    Attributes:
        abbreviations: Uppercase abbreviation -> full form
        synonyms: Lowercase condition term -> synonyms
        categories: Ordered (category, keywords) pairs for first-match
                    categorization
        fallback_category: Category used when no keyword matches
    """

    abbreviations: Mapping[str, str] = field(default_factory=dict)
    synonyms: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    categories: tuple[tuple[str, tuple[str, ...]], ...] = ()
    fallback_category: str = GENERAL_CATEGORY

    @classmethod
    def build(
        cls,
        abbreviations: Mapping[str, str] | None = None,
        synonyms: Mapping[str, Iterable[str]] | None = None,
        categories: Iterable[tuple[str, Iterable[str]]] | None = None,
        fallback_category: str = GENERAL_CATEGORY,
    ) -> "MedicalVocabulary":
        """Build a vocabulary from plain dicts/lists, freezing every table.

        Abbreviation keys are uppercased and synonym/category keys are
        lowercased so lookups match the expander's normalization.
        """
        return cls(
            abbreviations=MappingProxyType(
                {abbr.upper(): full for abbr, full in (abbreviations or {}).items()}
            ),
            synonyms=MappingProxyType(
                {term.lower(): tuple(values) for term, values in (synonyms or {}).items()}
            ),
            categories=tuple(
                (name, tuple(keyword.lower() for keyword in keywords))
                for name, keywords in (categories or ())
            ),
            fallback_category=fallback_category,
        )

    def categorize(self, query: str) -> str:
        """Return the first category whose keywords occur in the query.

        Matching is substring containment on the lowercased query, so a
        query that matches several categories lands in whichever is listed
        first.

        Examples:
            >>> DEFAULT_VOCABULARY.categorize("chest pain stroke")
            'cardiology'
            >>> DEFAULT_VOCABULARY.categorize("vaccine schedule")
            'general'
        """
        query_lower = query.lower()
        for category, keywords in self.categories:
            if any(keyword in query_lower for keyword in keywords):
                return category
        return self.fallback_category

    @property
    def category_names(self) -> list[str]:
        """Category names in match order, fallback last."""
        return [name for name, _ in self.categories] + [self.fallback_category]


DEFAULT_VOCABULARY = MedicalVocabulary.build(
    abbreviations=MEDICAL_ABBREVIATIONS,
    synonyms=MEDICAL_SYNONYMS,
    categories=SPECIALTY_CATEGORIES,
)
