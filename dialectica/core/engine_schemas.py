"""
Schemas for the dialectical engine.

Defines the history log entries, synthesis candidates and progression summary.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from dialectica.core.argument import ArgumentType


@dataclass
class HistoryEntry:
    """
    One step in the dialectic's progression.

    ``context`` maps every argument type value to the IDs of that type right
    after the step.
    """

    argument_id: str
    argument_type: ArgumentType
    context: Dict[str, List[str]]
    action: str = "added"
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "action": self.action,
            "argument_id": self.argument_id,
            "argument_type": self.argument_type.value,
            "context": {k: list(v) for k, v in self.context.items()},
        }


@dataclass
class SynthesisCandidate:
    """A thesis/antithesis pair worth synthesizing."""

    thesis_id: str
    antithesis_id: str
    potential: float  # 0-1, higher is more promising


@dataclass
class DialecticalSummary:
    """Snapshot of where the dialectic stands."""

    total_arguments: int
    by_type: Dict[str, int]
    relationships: Dict[str, int]
    synthesis_opportunities: int
    next_recommended_type: ArgumentType
    history: List[HistoryEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_arguments": self.total_arguments,
            "by_type": dict(self.by_type),
            "relationships": dict(self.relationships),
            "synthesis_opportunities": self.synthesis_opportunities,
            "next_recommended_type": self.next_recommended_type.value,
            "history": [entry.to_dict() for entry in self.history],
        }
