"""
Synthesis of two or more arguments into one reconciling draft.

The synthesizer looks for shared themes, complementary premises and conflicting
claims across its inputs, builds a synthesis draft from what it finds, and
scores the draft's coverage, coherence and advancement.
"""

from itertools import combinations
from typing import Dict, List, Optional, Sequence, Union

from dialectica.analysis.analysis_schemas import (
    ClaimConflict,
    ComplementaryPremise,
    SynthesisAnalysis,
    SynthesisQuality,
    SynthesisResult,
)
from dialectica.analysis.text_analysis import (
    LexicalTextAnalyzer,
    TextAnalyzer,
    keyword_overlap,
)
from dialectica.core.argument import Argument, ArgumentDraft
from dialectica.core.argument_graph import ArgumentGraph
from dialectica.errors import InvalidInputError, UnknownReferenceError
from dialectica.logging import get_dialectica_logger

logger = get_dialectica_logger("synthesis")


class Synthesizer:
    """
    Builds synthesis drafts from N >= 2 arguments.

    Pipeline:
    1. Extract themes and keep those shared by several arguments
    2. Compare every pair for complementary premises and conflicting claims
    3. Construct the draft claim, premises, conclusion and confidence
    4. Assess the draft's quality against the originals
    """

    def __init__(self, analyzer: Optional[TextAnalyzer] = None):
        self.analyzer = analyzer or LexicalTextAnalyzer()

    def generate_synthesis(
        self,
        arguments: Sequence[Union[Argument, str]],
        graph: Optional[ArgumentGraph] = None,
    ) -> SynthesisResult:
        """
        Generate a synthesis draft from multiple arguments.

        Args:
            arguments: Arguments, or their IDs when ``graph`` is given
            graph: Graph used to resolve argument IDs

        Returns:
            SynthesisResult with the draft, its quality and the analysis

        Raises:
            InvalidInputError: Fewer than 2 arguments, or IDs without a graph
            UnknownReferenceError: An ID is not in the graph
        """
        resolved = self._resolve(arguments, graph)
        if len(resolved) < 2:
            raise InvalidInputError("Synthesis requires at least 2 arguments")

        logger.info(f"Synthesizing {len(resolved)} arguments")

        analysis = self.analyze_arguments(resolved)
        draft = self.construct_synthesis(resolved, analysis)
        quality = self.evaluate_synthesis_quality(draft, resolved)

        logger.info(
            f"Synthesis draft ready: confidence={draft.confidence:.2f}, "
            f"quality={quality.overall_score:.2f}"
        )
        return SynthesisResult(draft=draft, quality=quality, analysis=analysis)

    def _resolve(
        self, arguments: Sequence[Union[Argument, str]], graph: Optional[ArgumentGraph]
    ) -> List[Argument]:
        resolved: List[Argument] = []
        for item in arguments:
            if isinstance(item, Argument):
                resolved.append(item)
                continue
            if graph is None:
                raise InvalidInputError("Argument IDs can only be resolved through a graph")
            argument = graph.get_argument(item)
            if argument is None:
                raise UnknownReferenceError(item)
            resolved.append(argument)
        return resolved

    def analyze_arguments(self, arguments: Sequence[Argument]) -> SynthesisAnalysis:
        """Find shared themes, complementary premises and conflicting claims."""
        analysis = SynthesisAnalysis(shared_themes=self.find_shared_themes(arguments))

        for first, second in combinations(arguments, 2):
            analysis.complementary_premises.extend(
                self.find_complementary_premises(first, second)
            )
            if self.are_claims_conflicting(first.claim, second.claim):
                analysis.conflicting_claims.append(
                    ClaimConflict(
                        first_id=first.argument_id,
                        second_id=second.argument_id,
                        reconcilable=self.is_reconcilable(first, second),
                    )
                )

        logger.debug(
            f"Analysis: {len(analysis.shared_themes)} shared themes, "
            f"{len(analysis.complementary_premises)} complementary premises, "
            f"{len(analysis.conflicting_claims)} conflicts"
        )
        return analysis

    def find_shared_themes(self, arguments: Sequence[Argument]) -> List[str]:
        frequency: Dict[str, int] = {}
        for argument in arguments:
            for theme in self.analyzer.extract_themes(argument.text):
                frequency[theme] = frequency.get(theme, 0) + 1
        return [theme for theme, count in frequency.items() if count > 1]

    def find_complementary_premises(
        self, first: Argument, second: Argument
    ) -> List[ComplementaryPremise]:
        return [
            ComplementaryPremise(source=p1, target=p2)
            for p1 in first.premises
            for p2 in second.premises
            if self.are_complementary(p1, p2)
        ]

    def are_complementary(self, first: str, second: str) -> bool:
        """Related premises: some keywords shared, but not all of the smaller set."""
        keywords1 = set(self.analyzer.keywords(first))
        keywords2 = set(self.analyzer.keywords(second))
        overlap = len(keywords1 & keywords2)
        return 0 < overlap < min(len(keywords1), len(keywords2))

    def are_claims_conflicting(self, first: str, second: str) -> bool:
        """Opposite stances on the same topic: one negated claim with heavy keyword overlap."""
        if self.analyzer.contains_negation(first) == self.analyzer.contains_negation(second):
            return False
        keywords1 = self.analyzer.keywords(first)
        keywords2 = self.analyzer.keywords(second)
        overlap = keyword_overlap(keywords1, keywords2)
        return overlap > min(len(keywords1), len(keywords2)) / 2

    def is_reconcilable(self, first: Argument, second: Argument) -> bool:
        hedged = self.analyzer.contains_hedge(first.text) or self.analyzer.contains_hedge(
            second.text
        )
        return hedged and bool(self.analyzer.shared_values(first.text, second.text))

    def find_shared_premises(self, arguments: Sequence[Argument]) -> List[str]:
        """Normalized premises stated by more than one argument."""
        counts: Dict[str, int] = {}
        for argument in arguments:
            for premise in dict.fromkeys(p.lower().strip() for p in argument.premises):
                counts[premise] = counts.get(premise, 0) + 1
        return [premise for premise, count in counts.items() if count > 1]

    def construct_synthesis(
        self, arguments: Sequence[Argument], analysis: SynthesisAnalysis
    ) -> ArgumentDraft:
        return ArgumentDraft(
            claim=self.synthesize_claim(arguments, analysis),
            premises=self.synthesize_premises(arguments, analysis),
            conclusion=self.synthesize_conclusion(analysis),
            supports=[arg.argument_id for arg in arguments],
            confidence=self.calculate_synthesis_confidence(arguments, analysis),
        )

    def synthesize_claim(self, arguments: Sequence[Argument], analysis: SynthesisAnalysis) -> str:
        primary_theme = (
            analysis.shared_themes[0] if analysis.shared_themes else "multiple perspectives"
        )
        reconcilable = analysis.reconcilable_differences
        if reconcilable:
            return (
                f"Integrating {primary_theme} while balancing "
                f"{len(reconcilable)} distinct perspectives"
            )
        return f"Comprehensive integration of {primary_theme} from {len(arguments)} perspectives"

    def synthesize_premises(
        self, arguments: Sequence[Argument], analysis: SynthesisAnalysis
    ) -> List[str]:
        premises = [
            f"Commonly accepted: {premise}" for premise in self.find_shared_premises(arguments)
        ]
        premises.extend(
            f"{pair.source} complements {pair.target}" for pair in analysis.complementary_premises
        )

        by_id = {arg.argument_id: arg for arg in arguments}
        for conflict in analysis.reconcilable_differences:
            premises.append(
                f"Balancing {by_id[conflict.first_id].claim} "
                f"with {by_id[conflict.second_id].claim}"
            )
        return premises

    def synthesize_conclusion(self, analysis: SynthesisAnalysis) -> str:
        irreconcilable = analysis.irreconcilable_differences
        if not irreconcilable:
            conclusion = "A unified approach that successfully integrates all perspectives"
        else:
            conclusion = (
                "A balanced solution that maximizes common ground while acknowledging "
                f"{len(irreconcilable)} irreconcilable differences"
            )

        if analysis.shared_themes:
            conclusion += f", emphasizing {', '.join(analysis.shared_themes)}"
        return conclusion

    def calculate_synthesis_confidence(
        self, arguments: Sequence[Argument], analysis: SynthesisAnalysis
    ) -> float:
        avg_confidence = sum(arg.confidence for arg in arguments) / len(arguments)

        confidence = avg_confidence * 0.4
        confidence += min(len(analysis.shared_themes) * 0.1, 0.3)
        confidence += min(len(analysis.complementary_premises) * 0.05, 0.2)
        confidence -= min(len(analysis.irreconcilable_differences) * 0.1, 0.3)

        return max(0.0, min(1.0, confidence))

    def evaluate_synthesis_quality(
        self, draft: ArgumentDraft, originals: Sequence[Argument]
    ) -> SynthesisQuality:
        quality = SynthesisQuality(
            coverage=self.calculate_concept_coverage(draft, originals),
            coherence=self.evaluate_coherence(draft),
            advancement=self.evaluate_advancement(draft, originals),
        )
        quality.overall_score = (
            quality.coverage * 0.4 + quality.coherence * 0.3 + quality.advancement * 0.3
        )
        return quality

    def _draft_text(self, draft: ArgumentDraft) -> str:
        return f"{draft.claim} {' '.join(draft.premises)} {draft.conclusion}"

    def _original_keywords(self, originals: Sequence[Argument]) -> set:
        return {kw for arg in originals for kw in self.analyzer.keywords(arg.text)}

    def calculate_concept_coverage(
        self, draft: ArgumentDraft, originals: Sequence[Argument]
    ) -> float:
        """Share of the originals' distinct keywords that the draft mentions."""
        original_keywords = self._original_keywords(originals)
        if not original_keywords:
            return 0.0
        draft_keywords = set(self.analyzer.keywords(self._draft_text(draft)))
        return len(original_keywords & draft_keywords) / len(original_keywords)

    def evaluate_coherence(self, draft: ArgumentDraft) -> float:
        claim_keywords = self.analyzer.keywords(draft.claim)
        premise_keywords = [kw for p in draft.premises for kw in self.analyzer.keywords(p)]
        conclusion_keywords = self.analyzer.keywords(draft.conclusion)

        score = 0.0
        if claim_keywords:
            score += keyword_overlap(claim_keywords, premise_keywords) / len(claim_keywords) * 0.4
        if conclusion_keywords:
            score += (
                keyword_overlap(conclusion_keywords, premise_keywords)
                / len(conclusion_keywords)
                * 0.4
            )
        score += 0.2
        return min(1.0, score)

    def evaluate_advancement(
        self, draft: ArgumentDraft, originals: Sequence[Argument]
    ) -> float:
        """Novel vocabulary plus explicit integration language."""
        text = self._draft_text(draft)
        draft_keywords = set(self.analyzer.keywords(text))
        original_keywords = self._original_keywords(originals)

        novelty = 0.0
        if draft_keywords:
            novelty = len(draft_keywords - original_keywords) / len(draft_keywords)
        integration = min(self.analyzer.count_integration_terms(text) / 5, 1.0)

        return novelty * 0.6 + integration * 0.4


def generate_synthesis(
    arguments: Sequence[Union[Argument, str]], graph: Optional[ArgumentGraph] = None
) -> SynthesisResult:
    """Synthesize ``arguments`` with the default synthesizer."""
    return Synthesizer().generate_synthesis(arguments, graph)
