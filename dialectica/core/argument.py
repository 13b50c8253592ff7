"""
Argument representation for dialectical reasoning.

An Argument is one proposition (claim) with its premises, conclusion, type tag,
confidence and the references it declares to previously recorded arguments.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional

from dialectica.errors import ValidationError


class ArgumentType(str, Enum):
    """Role an argument plays in the dialectic."""

    THESIS = "thesis"  # Initial position
    ANTITHESIS = "antithesis"  # Opposing position
    SYNTHESIS = "synthesis"  # Reconciles two or more positions
    OBJECTION = "objection"  # Raises a problem with a position
    REBUTTAL = "rebuttal"  # Answers an objection


def generate_argument_id() -> str:
    """Generate a fresh argument identifier."""
    return f"arg_{uuid.uuid4().hex[:12]}"


def parse_argument_type(value: Any) -> ArgumentType:
    """Resolve an ArgumentType or its value, raising ValidationError otherwise."""
    if isinstance(value, ArgumentType):
        return value
    try:
        return ArgumentType(value)
    except ValueError:
        valid = ", ".join(t.value for t in ArgumentType)
        raise ValidationError(
            f"Invalid argument type {value!r}. Must be one of: {valid}",
            field="argument_type",
        ) from None


def _check_confidence(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(
            f"Confidence must be a number, got {value!r}", field="confidence"
        )
    if not 0.0 <= value <= 1.0:
        raise ValidationError(
            f"Confidence must be between 0.0 and 1.0, got {value}", field="confidence"
        )
    return float(value)


def _unique_ids(values: Any, field_name: str) -> List[str]:
    if values is None:
        return []
    if isinstance(values, str) or not isinstance(values, (list, tuple, set, frozenset)):
        raise ValidationError(f"{field_name} must be a list of argument IDs", field=field_name)
    unique: List[str] = []
    for value in values:
        if not isinstance(value, str):
            raise ValidationError(
                f"{field_name} entries must be argument IDs, got {value!r}", field=field_name
            )
        if value not in unique:
            unique.append(value)
    return unique


@dataclass
class Argument:
    """
    A structured argument with claim, premises and conclusion.

    Only ``update_confidence``, ``add_strength`` and ``add_weakness`` are meant
    to change an argument after construction; each refreshes ``last_modified``.
    """

    claim: str
    conclusion: str
    argument_type: ArgumentType
    premises: List[str] = field(default_factory=list)
    confidence: float = 0.5
    argument_id: str = field(default_factory=generate_argument_id)

    # Declared relationships
    responds_to: Optional[str] = None
    supports: List[str] = field(default_factory=list)
    contradicts: List[str] = field(default_factory=list)

    # Evaluation notes attached by the caller
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)

    created_at: datetime = field(default_factory=datetime.now)
    last_modified: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Validate argument after initialization."""
        if not isinstance(self.argument_id, str) or not self.argument_id.strip():
            raise ValidationError("Argument ID is required", field="argument_id")
        if not isinstance(self.claim, str) or not self.claim.strip():
            raise ValidationError("Claim is required", field="claim")
        if not isinstance(self.conclusion, str) or not self.conclusion.strip():
            raise ValidationError("Conclusion is required", field="conclusion")
        if self.argument_type is None:
            raise ValidationError("Argument type is required", field="argument_type")
        self.argument_type = parse_argument_type(self.argument_type)

        if self.premises is None:
            self.premises = []
        if isinstance(self.premises, str) or not isinstance(self.premises, (list, tuple)):
            raise ValidationError("Premises must be a list", field="premises")
        if not all(isinstance(p, str) for p in self.premises):
            raise ValidationError("Every premise must be a string", field="premises")
        self.premises = list(self.premises)

        self.confidence = _check_confidence(self.confidence)

        if self.responds_to is not None and not isinstance(self.responds_to, str):
            raise ValidationError("responds_to must be an argument ID", field="responds_to")
        self.supports = _unique_ids(self.supports, "supports")
        self.contradicts = _unique_ids(self.contradicts, "contradicts")
        self.strengths = list(self.strengths or [])
        self.weaknesses = list(self.weaknesses or [])

    @property
    def text(self) -> str:
        """Claim, premises and conclusion as one string."""
        return f"{self.claim} {' '.join(self.premises)} {self.conclusion}"

    def referenced_ids(self) -> List[str]:
        """All argument IDs this argument declares a relationship to."""
        refs = list(self.supports) + list(self.contradicts)
        if self.responds_to:
            refs.append(self.responds_to)
        return refs

    def update_confidence(self, new_confidence: float) -> None:
        """Set a new confidence level in [0, 1]."""
        self.confidence = _check_confidence(new_confidence)
        self.last_modified = datetime.now()

    def add_strength(self, strength: str) -> None:
        """Record a strength of the argument."""
        self.strengths.append(strength)
        self.last_modified = datetime.now()

    def add_weakness(self, weakness: str) -> None:
        """Record a weakness of the argument."""
        self.weaknesses.append(weakness)
        self.last_modified = datetime.now()

    def __str__(self) -> str:
        return (
            f"{self.argument_type.value.upper()}: {self.claim}\n"
            f"Premises: {', '.join(self.premises)}\n"
            f"Conclusion: {self.conclusion}\n"
            f"Confidence: {self.confidence}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "argument_id": self.argument_id,
            "claim": self.claim,
            "premises": list(self.premises),
            "conclusion": self.conclusion,
            "argument_type": self.argument_type.value,
            "confidence": self.confidence,
            "responds_to": self.responds_to,
            "supports": list(self.supports),
            "contradicts": list(self.contradicts),
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "created_at": self.created_at.isoformat(),
            "last_modified": self.last_modified.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Argument":
        """
        Create from dictionary.

        Missing optional fields take their defaults; missing required fields
        raise ValidationError.
        """
        for required in ("claim", "conclusion", "argument_type"):
            if data.get(required) is None:
                raise ValidationError(f"{required} is required", field=required)

        kwargs: Dict[str, Any] = {
            "claim": data["claim"],
            "conclusion": data["conclusion"],
            "argument_type": data["argument_type"],
            "premises": data.get("premises", []),
            "confidence": data.get("confidence", 0.5),
            "responds_to": data.get("responds_to"),
            "supports": data.get("supports", []),
            "contradicts": data.get("contradicts", []),
            "strengths": data.get("strengths", []),
            "weaknesses": data.get("weaknesses", []),
        }
        if data.get("argument_id") is not None:
            kwargs["argument_id"] = data["argument_id"]
        if data.get("created_at"):
            kwargs["created_at"] = _parse_timestamp(data["created_at"])
        if data.get("last_modified"):
            kwargs["last_modified"] = _parse_timestamp(data["last_modified"])
        return cls(**kwargs)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid timestamp {value!r}", field="timestamp") from None


@dataclass
class ArgumentDraft:
    """
    A proposed synthesis that has not been validated or inserted yet.

    Confidence is reported as computed; range checks happen only when the draft
    is turned into an Argument.
    """

    claim: str
    premises: List[str]
    conclusion: str
    supports: List[str]
    confidence: float
    argument_type: ArgumentType = ArgumentType.SYNTHESIS

    def to_argument_data(self, argument_id: Optional[str] = None) -> Dict[str, Any]:
        """Build the data mapping accepted by ArgumentGraph.add_argument."""
        data: Dict[str, Any] = {
            "claim": self.claim,
            "premises": list(self.premises),
            "conclusion": self.conclusion,
            "argument_type": self.argument_type.value,
            "supports": list(self.supports),
            "confidence": self.confidence,
        }
        if argument_id is not None:
            data["argument_id"] = argument_id
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.to_argument_data()
