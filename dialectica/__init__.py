"""
dialectica - formal dialectical reasoning

Arguments connected by support, contradiction and response relations, with
heuristic quality scoring and automatic synthesis of opposing positions.
"""

__version__ = "0.1.0"

# Configuration is available at top level for convenience
from dialectica.config import config
from dialectica.errors import (
    DialecticaError,
    DuplicateIdError,
    InvalidInputError,
    UnknownReferenceError,
    ValidationError,
)
from dialectica.core import Argument, ArgumentDraft, ArgumentGraph, ArgumentType
from dialectica.analysis import Evaluation, Evaluator, Synthesizer, SynthesisResult
from dialectica.core.dialectical_engine import DialecticalEngine

__all__ = [
    "config",
    "__version__",
    "DialecticaError",
    "DuplicateIdError",
    "InvalidInputError",
    "UnknownReferenceError",
    "ValidationError",
    "Argument",
    "ArgumentDraft",
    "ArgumentGraph",
    "ArgumentType",
    "Evaluation",
    "Evaluator",
    "Synthesizer",
    "SynthesisResult",
    "DialecticalEngine",
]
