"""
Core argument model and graph.

Arguments are typed propositions; the graph stores them with the support,
contradiction and response edges between them. The dialectical engine lives in
``dialectica.core.dialectical_engine`` and is re-exported from ``dialectica``.
"""

from dialectica.core.argument import (
    Argument,
    ArgumentDraft,
    ArgumentType,
    generate_argument_id,
    parse_argument_type,
)
from dialectica.core.argument_graph import ArgumentGraph, RelationshipRecord

__all__ = [
    "Argument",
    "ArgumentDraft",
    "ArgumentType",
    "generate_argument_id",
    "parse_argument_type",
    "ArgumentGraph",
    "RelationshipRecord",
]
