"""
Argument analysis: heuristic evaluation and multi-argument synthesis.
"""

from dialectica.analysis.analysis_schemas import (
    ClaimConflict,
    ComplementaryPremise,
    Evaluation,
    SynthesisAnalysis,
    SynthesisQuality,
    SynthesisResult,
)
from dialectica.analysis.text_analysis import LexicalTextAnalyzer, TextAnalyzer
from dialectica.analysis.evaluator import Evaluator, evaluate_argument
from dialectica.analysis.synthesizer import Synthesizer, generate_synthesis

__all__ = [
    # Results
    "Evaluation",
    "ClaimConflict",
    "ComplementaryPremise",
    "SynthesisAnalysis",
    "SynthesisQuality",
    "SynthesisResult",
    # Text heuristics
    "TextAnalyzer",
    "LexicalTextAnalyzer",
    # Scoring
    "Evaluator",
    "evaluate_argument",
    "Synthesizer",
    "generate_synthesis",
]
