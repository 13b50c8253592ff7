"""
Heuristic quality scoring for arguments.

The evaluator reads an argument and its graph context and never mutates
either; attaching the findings to the argument is a separate, explicit step.
"""

from typing import List, Optional

from dialectica.analysis.analysis_schemas import Evaluation
from dialectica.analysis.text_analysis import (
    LexicalTextAnalyzer,
    TextAnalyzer,
    keyword_overlap,
)
from dialectica.config import EvaluationConfig, config
from dialectica.core.argument import Argument
from dialectica.core.argument_graph import ArgumentGraph
from dialectica.logging import get_dialectica_logger

logger = get_dialectica_logger("evaluation")


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class Evaluator:
    """
    Scores arguments on logical structure, evidence and graph support.

    Scores:
    - logical: premise/conclusion keyword overlap, fallacy penalties,
      claim coherence and premise count
    - evidence: statistics, citations and qualifiers in the premises
    - support: number and confidence of supporters minus contradictions
    """

    def __init__(
        self,
        analyzer: Optional[TextAnalyzer] = None,
        weights: Optional[EvaluationConfig] = None,
    ):
        """
        Initialize evaluator.

        Args:
            analyzer: Text heuristics backend (defaults to LexicalTextAnalyzer)
            weights: Overall score weights (defaults to the global configuration)
        """
        if weights is None:
            weights = config.evaluation

        self.analyzer = analyzer or LexicalTextAnalyzer()
        self.weights = weights

    def evaluate_argument(self, argument: Argument, graph: ArgumentGraph) -> Evaluation:
        """
        Evaluate an argument for strengths and weaknesses.

        Args:
            argument: Argument to score
            graph: Graph supplying supporters and contradictors

        Returns:
            Evaluation with sub-scores, overall score, strengths and weaknesses
        """
        fallacies = self.analyzer.detect_fallacies(argument.text)

        evaluation = Evaluation(
            logical_score=self.evaluate_logical_structure(argument, fallacies),
            evidence_score=self.evaluate_evidence(argument),
            support_score=self.evaluate_support(argument, graph),
            fallacies=fallacies,
        )
        evaluation.strengths = self.identify_strengths(argument, evaluation)
        evaluation.weaknesses = self.identify_weaknesses(argument, evaluation)
        evaluation.score = self.calculate_overall_score(evaluation)

        logger.debug(
            f"Evaluated {argument.argument_id}: score={evaluation.score:.2f} "
            f"(logical={evaluation.logical_score:.2f}, evidence={evaluation.evidence_score:.2f}, "
            f"support={evaluation.support_score:.2f})"
        )
        return evaluation

    def evaluate_logical_structure(
        self, argument: Argument, fallacies: Optional[List[str]] = None
    ) -> float:
        score = 0.0

        conclusion_keywords = self.analyzer.keywords(argument.conclusion)
        premise_keywords = [
            kw for premise in argument.premises for kw in self.analyzer.keywords(premise)
        ]
        if conclusion_keywords:
            overlap = keyword_overlap(conclusion_keywords, premise_keywords)
            score += overlap / len(conclusion_keywords) * 0.4

        if fallacies is None:
            fallacies = self.analyzer.detect_fallacies(argument.text)
        score -= len(fallacies) * 0.1

        if self.check_coherence(argument):
            score += 0.3

        if len(argument.premises) >= 2:
            score += 0.2

        return _clamp(score)

    def check_coherence(self, argument: Argument) -> bool:
        """At least two claim keywords reappear in the premises or conclusion."""
        claim_keywords = self.analyzer.keywords(argument.claim)
        body_keywords = [
            kw for premise in argument.premises for kw in self.analyzer.keywords(premise)
        ] + self.analyzer.keywords(argument.conclusion)
        return keyword_overlap(claim_keywords, body_keywords) >= 2

    def evaluate_evidence(self, argument: Argument) -> float:
        score = 0.0
        for premise in argument.premises:
            if self.analyzer.contains_data(premise):
                score += 0.2
            if self.analyzer.contains_citation(premise):
                score += 0.15
            if self.analyzer.contains_qualifier(premise):
                score += 0.1
        return min(1.0, score)

    def evaluate_support(self, argument: Argument, graph: ArgumentGraph) -> float:
        supporters = graph.get_supporters(argument.argument_id)
        contradictors = graph.get_contradictors(argument.argument_id)

        score = min(len(supporters) * 0.2, 0.6)
        score -= min(len(contradictors) * 0.15, 0.45)

        if supporters:
            avg_confidence = sum(s.confidence for s in supporters) / len(supporters)
            score += avg_confidence * 0.2

        return _clamp(score)

    def identify_strengths(self, argument: Argument, evaluation: Evaluation) -> List[str]:
        strengths = []
        if evaluation.logical_score > 0.7:
            strengths.append("Strong logical structure")
        if evaluation.evidence_score > 0.6:
            strengths.append("Well-supported with evidence")
        if evaluation.support_score > 0.5:
            strengths.append("Strong support from related arguments")
        if argument.confidence > 0.8:
            strengths.append("High confidence level")
        if len(argument.premises) >= 3:
            strengths.append("Comprehensive premise set")
        return strengths

    def identify_weaknesses(self, argument: Argument, evaluation: Evaluation) -> List[str]:
        weaknesses = []
        if evaluation.logical_score < 0.4:
            weaknesses.append("Weak logical connection between premises and conclusion")
        if evaluation.evidence_score < 0.3:
            weaknesses.append("Insufficient evidence or data")
        if evaluation.support_score < 0.2:
            weaknesses.append("Lack of supporting arguments")
        if argument.confidence < 0.4:
            weaknesses.append("Low confidence level")
        if len(argument.premises) < 2:
            weaknesses.append("Insufficient premises")
        if len(argument.premises) == 1:
            weaknesses.append("Overly dependent on single premise")
        return weaknesses

    def calculate_overall_score(self, evaluation: Evaluation) -> float:
        return (
            evaluation.logical_score * self.weights.logical_weight
            + evaluation.evidence_score * self.weights.evidence_weight
            + evaluation.support_score * self.weights.support_weight
        )

    @staticmethod
    def apply_evaluation(argument: Argument, evaluation: Evaluation) -> None:
        """Attach the evaluation's strengths and weaknesses the argument does not list yet."""
        for strength in evaluation.strengths:
            if strength not in argument.strengths:
                argument.add_strength(strength)
        for weakness in evaluation.weaknesses:
            if weakness not in argument.weaknesses:
                argument.add_weakness(weakness)


def evaluate_argument(argument: Argument, graph: ArgumentGraph) -> Evaluation:
    """Evaluate ``argument`` with the default evaluator."""
    return Evaluator().evaluate_argument(argument, graph)
