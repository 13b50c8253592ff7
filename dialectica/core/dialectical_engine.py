"""
Dialectical engine orchestrating thesis-antithesis-synthesis progression.

Owns an argument graph and a history of insertions, recommends which argument
type the dialectic needs next, ranks thesis/antithesis pairs by how promising a
synthesis would be, and drafts simple two-argument syntheses.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from loguru import logger

from dialectica.analysis.analysis_schemas import Evaluation, SynthesisResult
from dialectica.analysis.evaluator import Evaluator
from dialectica.analysis.synthesizer import Synthesizer
from dialectica.core.argument import Argument, ArgumentDraft, ArgumentType
from dialectica.core.argument_graph import ArgumentGraph
from dialectica.core.engine_schemas import (
    DialecticalSummary,
    HistoryEntry,
    SynthesisCandidate,
)
from dialectica.errors import UnknownReferenceError


class DialecticalEngine:
    """
    Orchestrates the dialectical reasoning process over one argument graph.

    Architecture:
    - Graph: single source of truth for arguments and edges
    - Evaluator: scores arguments on request
    - Synthesizer: general N-argument merge
    - History: append-only log of insertions
    """

    def __init__(
        self,
        graph: Optional[ArgumentGraph] = None,
        evaluator: Optional[Evaluator] = None,
        synthesizer: Optional[Synthesizer] = None,
    ):
        """
        Initialize dialectical engine.

        Args:
            graph: Graph to work on (a fresh one if None)
            evaluator: Argument evaluator (default Evaluator if None)
            synthesizer: N-argument synthesizer (default Synthesizer if None)
        """
        self.graph = graph if graph is not None else ArgumentGraph()
        self.evaluator = evaluator or Evaluator()
        self.synthesizer = synthesizer or Synthesizer(analyzer=self.evaluator.analyzer)
        self.history: List[HistoryEntry] = []

        logger.info(f"Initialized DialecticalEngine ({len(self.graph)} arguments)")

    @property
    def analyzer(self):
        return self.evaluator.analyzer

    def add_argument(self, data: Union[Mapping[str, Any], Argument]) -> Argument:
        """
        Add an argument and log the step in the history.

        Raises:
            ValidationError, DuplicateIdError, UnknownReferenceError: As
                ArgumentGraph.add_argument
        """
        argument = self.graph.add_argument(data)

        self.history.append(
            HistoryEntry(
                argument_id=argument.argument_id,
                argument_type=argument.argument_type,
                context=self.get_current_context(),
            )
        )
        return argument

    def get_current_context(self) -> Dict[str, List[str]]:
        """IDs of the arguments of each type."""
        context: Dict[str, List[str]] = {t.value: [] for t in ArgumentType}
        for argument in self.graph.arguments:
            context[argument.argument_type.value].append(argument.argument_id)
        return context

    def _type_counts(self) -> Dict[ArgumentType, int]:
        counts = {t: 0 for t in ArgumentType}
        for argument in self.graph.arguments:
            counts[argument.argument_type] += 1
        return counts

    def suggest_next_argument_type(self) -> ArgumentType:
        """Recommend the argument type the dialectic needs next."""
        counts = self._type_counts()
        theses = counts[ArgumentType.THESIS]
        antitheses = counts[ArgumentType.ANTITHESIS]
        objections = counts[ArgumentType.OBJECTION]

        if theses == 0:
            return ArgumentType.THESIS
        if antitheses == 0:
            return ArgumentType.ANTITHESIS
        if counts[ArgumentType.SYNTHESIS] == 0:
            return ArgumentType.SYNTHESIS
        if objections < theses + antitheses:
            return ArgumentType.OBJECTION
        if counts[ArgumentType.REBUTTAL] < objections:
            return ArgumentType.REBUTTAL

        # Everything is covered: integrate at a higher level
        return ArgumentType.SYNTHESIS

    def _already_synthesized(self, thesis_id: str, antithesis_id: str) -> bool:
        return any(
            self.graph.supports(synthesis.argument_id, thesis_id)
            and self.graph.supports(synthesis.argument_id, antithesis_id)
            for synthesis in self.graph.get_arguments_by_type(ArgumentType.SYNTHESIS)
        )

    def find_synthesis_candidates(self) -> List[SynthesisCandidate]:
        """
        Find thesis/antithesis pairs ready for synthesis.

        A pair qualifies when the antithesis responds to the thesis or either
        contradicts the other, and no synthesis supports both yet.

        Returns:
            Candidates sorted by potential, highest first
        """
        theses = self.graph.get_arguments_by_type(ArgumentType.THESIS)
        antitheses = self.graph.get_arguments_by_type(ArgumentType.ANTITHESIS)

        candidates = []
        for thesis in theses:
            for antithesis in antitheses:
                t_id, a_id = thesis.argument_id, antithesis.argument_id
                related = (
                    self.graph.responds_to(a_id, t_id)
                    or self.graph.contradicts(a_id, t_id)
                    or self.graph.contradicts(t_id, a_id)
                )
                if not related or self._already_synthesized(t_id, a_id):
                    continue
                candidates.append(
                    SynthesisCandidate(
                        thesis_id=t_id,
                        antithesis_id=a_id,
                        potential=self.calculate_synthesis_potential(thesis, antithesis),
                    )
                )

        candidates.sort(key=lambda c: c.potential, reverse=True)
        logger.debug(f"Found {len(candidates)} synthesis candidates")
        return candidates

    def calculate_synthesis_potential(self, first: Argument, second: Argument) -> float:
        shared = self.find_shared_concepts(first.premises, second.premises)

        potential = len(shared) * 0.3
        potential += self.find_resolvable_differences(first, second) * 0.4
        potential += (first.confidence + second.confidence) / 2 * 0.15
        potential += (self._quality(first) + self._quality(second)) / 2 * 0.15

        return min(potential, 1.0)

    @staticmethod
    def _quality(argument: Argument) -> float:
        strengths, weaknesses = len(argument.strengths), len(argument.weaknesses)
        return (strengths - weaknesses) / (strengths + weaknesses + 1)

    def find_shared_concepts(
        self, first_premises: Sequence[str], second_premises: Sequence[str]
    ) -> List[str]:
        second = set(self.analyzer.concepts(second_premises))
        return [c for c in self.analyzer.concepts(first_premises) if c in second]

    def find_resolvable_differences(self, first: Argument, second: Argument) -> float:
        resolvable = 0.0
        if not self.graph.contradicts(first.argument_id, second.argument_id) and not (
            self.graph.contradicts(second.argument_id, first.argument_id)
        ):
            resolvable += 0.5
        if abs(first.confidence - second.confidence) < 0.3:
            resolvable += 0.3
        if self.find_shared_concepts(first.premises, second.premises):
            resolvable += 0.2
        return resolvable

    def generate_synthesis(self, thesis_id: str, antithesis_id: str) -> ArgumentDraft:
        """
        Draft a synthesis of one thesis and one antithesis.

        The draft's confidence is ``min(thesis, antithesis) + 0.1`` and is not
        clamped, so it can exceed 1.0; such a draft is rejected if inserted.

        Raises:
            UnknownReferenceError: If either ID is not in the graph
        """
        thesis = self.graph.get_argument(thesis_id)
        if thesis is None:
            raise UnknownReferenceError(thesis_id)
        antithesis = self.graph.get_argument(antithesis_id)
        if antithesis is None:
            raise UnknownReferenceError(antithesis_id)

        shared = self.find_shared_concepts(thesis.premises, antithesis.premises)

        def relevant(premises: Sequence[str]) -> List[str]:
            return [p for p in premises if any(c in p.lower() for c in shared)]

        draft = ArgumentDraft(
            claim=f'Integration of "{thesis.claim}" and "{antithesis.claim}"',
            premises=relevant(thesis.premises) + relevant(antithesis.premises),
            conclusion=(
                "A balanced approach that incorporates strengths from both perspectives: "
                f"{thesis.conclusion} and {antithesis.conclusion}"
            ),
            supports=[thesis_id, antithesis_id],
            confidence=min(thesis.confidence, antithesis.confidence) + 0.1,
        )
        logger.info(
            f"Drafted synthesis of {thesis_id} and {antithesis_id} "
            f"(confidence {draft.confidence:.2f})"
        )
        return draft

    def synthesize_arguments(
        self, argument_ids: Sequence[str], argument_id: Optional[str] = None
    ) -> Tuple[Argument, SynthesisResult]:
        """
        Run the N-argument synthesizer and add its draft to the graph.

        Returns:
            Tuple of (inserted synthesis argument, synthesis result)
        """
        result = self.synthesizer.generate_synthesis(list(argument_ids), self.graph)
        argument = self.add_argument(result.draft.to_argument_data(argument_id))
        return argument, result

    def evaluate_argument(self, argument_id: str, attach: bool = False) -> Evaluation:
        """
        Evaluate an argument in the engine's graph.

        Args:
            argument_id: Argument to evaluate
            attach: Also record the findings on the argument
        """
        argument = self.graph.get_argument(argument_id)
        if argument is None:
            raise UnknownReferenceError(argument_id)

        evaluation = self.evaluator.evaluate_argument(argument, self.graph)
        if attach:
            self.evaluator.apply_evaluation(argument, evaluation)
        return evaluation

    def get_dialectical_summary(self) -> DialecticalSummary:
        """Summarize the dialectic's progression."""
        by_type: Dict[str, int] = {}
        for argument in self.graph.arguments:
            key = argument.argument_type.value
            by_type[key] = by_type.get(key, 0) + 1

        return DialecticalSummary(
            total_arguments=len(self.graph),
            by_type=by_type,
            relationships=self.graph.relationship_count(),
            synthesis_opportunities=len(self.find_synthesis_candidates()),
            next_recommended_type=self.suggest_next_argument_type(),
            history=list(self.history),
        )
