"""
Lexical text analysis used by the evaluator, synthesizer and engine.

All heuristics here are keyword and regex based. Scoring code only talks to the
TextAnalyzer interface, so a different backend can replace LexicalTextAnalyzer
without touching any formula.
"""

import re
from abc import ABC, abstractmethod
from typing import Iterable, List

STOP_WORDS = frozenset(
    ["the", "be", "to", "of", "and", "a", "in", "that", "is", "was", "for", "it"]
)

# Concept extraction predates "it" joining the keyword stop list
CONCEPT_STOP_WORDS = STOP_WORDS - {"it"}

VALUE_TERMS = (
    "justice",
    "equality",
    "freedom",
    "security",
    "prosperity",
    "sustainability",
    "welfare",
)

_WORD_SPLIT = re.compile(r"\W+", re.ASCII)

_FALLACY_PATTERNS = (
    ("Possible ad hominem", re.compile(r"\bpeople\s+who\s+(believe|think|say)\b", re.I)),
    (
        "Possible straw man",
        re.compile(r"\b(nobody|no one|everyone)\s+(thinks|believes|says)\b", re.I),
    ),
    ("Possible false dichotomy", re.compile(r"\b(either|only)\s+.*\bor\b", re.I)),
)

_DATA = re.compile(
    r"\b\d+(\.\d+)?(%|\s*(percent|percentage|data|study|research|evidence))", re.I
)
_CITATION = re.compile(r"\(.*\d{4}.*\)|et\s+al\.|according\s+to", re.I)
_QUALIFIER = re.compile(
    r"\b(might|may|could|possibly|perhaps|likely|probably|generally|tends?\s+to)\b", re.I
)
_HEDGE = re.compile(
    r"\b(might|could|possibly|perhaps|likely|probably|tends?\s+to|sometimes|often)\b", re.I
)
_NEGATION = re.compile(r"\b(not|no|never|none|isn't|aren't|doesn't|don't)\b", re.I)
_THEME = re.compile(r"[A-Za-z\s]+(?=[.,;:]|\s+(?:and|but|however|therefore))")
_INTEGRATION = re.compile(r"\b(integrat|combin|balanc|reconcil|harmoniz)\w*", re.I)


class TextAnalyzer(ABC):
    """Interface for the lexical heuristics behind argument scoring."""

    @abstractmethod
    def keywords(self, text: str) -> List[str]:
        """Keywords of ``text`` in order, repetitions kept."""

    @abstractmethod
    def concepts(self, texts: Iterable[str]) -> List[str]:
        """Distinct concept words across ``texts`` in first-seen order."""

    @abstractmethod
    def detect_fallacies(self, text: str) -> List[str]:
        """Names of the fallacy patterns found in ``text``, each at most once."""

    @abstractmethod
    def contains_data(self, text: str) -> bool:
        """Whether ``text`` cites a number or statistic."""

    @abstractmethod
    def contains_citation(self, text: str) -> bool:
        """Whether ``text`` looks like it cites a source."""

    @abstractmethod
    def contains_qualifier(self, text: str) -> bool:
        """Whether ``text`` hedges its statement (evaluator vocabulary)."""

    @abstractmethod
    def contains_hedge(self, text: str) -> bool:
        """Whether ``text`` hedges its statement (synthesis vocabulary)."""

    @abstractmethod
    def contains_negation(self, text: str) -> bool:
        """Whether ``text`` contains a negation word."""

    @abstractmethod
    def extract_themes(self, text: str) -> List[str]:
        """Distinct theme phrases of ``text`` in first-seen order."""

    @abstractmethod
    def shared_values(self, first: str, second: str) -> List[str]:
        """Value terms present in both texts."""

    @abstractmethod
    def count_integration_terms(self, text: str) -> int:
        """Number of integration words in ``text``."""


class LexicalTextAnalyzer(TextAnalyzer):
    """Regex and stop-word implementation of TextAnalyzer."""

    def keywords(self, text: str) -> List[str]:
        return [
            word
            for word in _WORD_SPLIT.split(text.lower())
            if len(word) > 2 and word not in STOP_WORDS
        ]

    def concepts(self, texts: Iterable[str]) -> List[str]:
        words = _WORD_SPLIT.split(" ".join(texts).lower())
        concepts: List[str] = []
        for word in words:
            if len(word) > 3 and word not in CONCEPT_STOP_WORDS and word not in concepts:
                concepts.append(word)
        return concepts

    def detect_fallacies(self, text: str) -> List[str]:
        return [name for name, pattern in _FALLACY_PATTERNS if pattern.search(text)]

    def contains_data(self, text: str) -> bool:
        return _DATA.search(text) is not None

    def contains_citation(self, text: str) -> bool:
        return _CITATION.search(text) is not None

    def contains_qualifier(self, text: str) -> bool:
        return _QUALIFIER.search(text) is not None

    def contains_hedge(self, text: str) -> bool:
        return _HEDGE.search(text) is not None

    def contains_negation(self, text: str) -> bool:
        return _NEGATION.search(text) is not None

    def extract_themes(self, text: str) -> List[str]:
        themes: List[str] = []
        for phrase in _THEME.findall(text):
            # Length is measured before trimming
            if 10 < len(phrase) < 50:
                theme = phrase.strip()
                if theme not in themes:
                    themes.append(theme)
        return themes

    def shared_values(self, first: str, second: str) -> List[str]:
        first, second = first.lower(), second.lower()
        return [value for value in VALUE_TERMS if value in first and value in second]

    def count_integration_terms(self, text: str) -> int:
        return len(_INTEGRATION.findall(text))


def keyword_overlap(first: List[str], second: List[str]) -> int:
    """Count entries of ``first`` (repetitions included) that occur in ``second``."""
    lookup = set(second)
    return sum(1 for word in first if word in lookup)
