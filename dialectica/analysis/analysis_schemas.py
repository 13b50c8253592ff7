"""
Result shapes produced by the evaluator and the synthesizer.

These are consumed verbatim by formatting collaborators, so each one offers
``to_dict``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from dialectica.core.argument import ArgumentDraft


@dataclass
class Evaluation:
    """
    Quality assessment of a single argument.

    Every score lies in [0, 1].
    """

    logical_score: float = 0.0
    evidence_score: float = 0.0
    support_score: float = 0.0
    score: float = 0.0
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    fallacies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "logical_score": self.logical_score,
            "evidence_score": self.evidence_score,
            "support_score": self.support_score,
            "score": self.score,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "fallacies": list(self.fallacies),
        }


@dataclass
class ComplementaryPremise:
    """Two related but distinct premises from different arguments."""

    source: str
    target: str


@dataclass
class ClaimConflict:
    """Two claims taking opposite stances on the same topic."""

    first_id: str
    second_id: str
    reconcilable: bool


@dataclass
class SynthesisAnalysis:
    """What the synthesizer found when comparing its input arguments."""

    shared_themes: List[str] = field(default_factory=list)
    complementary_premises: List[ComplementaryPremise] = field(default_factory=list)
    conflicting_claims: List[ClaimConflict] = field(default_factory=list)

    @property
    def reconcilable_differences(self) -> List[ClaimConflict]:
        return [c for c in self.conflicting_claims if c.reconcilable]

    @property
    def irreconcilable_differences(self) -> List[ClaimConflict]:
        return [c for c in self.conflicting_claims if not c.reconcilable]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""

        def conflict(c: ClaimConflict) -> Dict[str, Any]:
            return {"first_id": c.first_id, "second_id": c.second_id, "reconcilable": c.reconcilable}

        return {
            "shared_themes": list(self.shared_themes),
            "complementary_premises": [
                {"source": p.source, "target": p.target} for p in self.complementary_premises
            ],
            "conflicting_claims": [conflict(c) for c in self.conflicting_claims],
            "reconcilable_differences": [conflict(c) for c in self.reconcilable_differences],
            "irreconcilable_differences": [
                conflict(c) for c in self.irreconcilable_differences
            ],
        }


@dataclass
class SynthesisQuality:
    """Quality of a synthesis draft relative to the arguments it merges."""

    coverage: float = 0.0
    coherence: float = 0.0
    advancement: float = 0.0
    overall_score: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "coverage": self.coverage,
            "coherence": self.coherence,
            "advancement": self.advancement,
            "overall_score": self.overall_score,
        }


@dataclass
class SynthesisResult:
    """Draft synthesis with its quality and the analysis behind it."""

    draft: ArgumentDraft
    quality: SynthesisQuality
    analysis: SynthesisAnalysis

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "draft": self.draft.to_dict(),
            "quality": self.quality.to_dict(),
            "analysis": self.analysis.to_dict(),
        }
