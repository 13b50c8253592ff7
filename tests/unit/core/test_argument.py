"""
Unit tests for the Argument entity.

Tests construction rules, confidence invariants, mutation helpers and
dictionary conversion.
"""

from datetime import datetime

import pytest

from dialectica.core.argument import Argument, ArgumentDraft, ArgumentType
from dialectica.errors import ValidationError


def make_argument(**overrides) -> Argument:
    """Helper to create an Argument with all required fields for testing."""
    data = {
        "claim": "Renewable energy should be prioritized",
        "premises": ["Climate change is accelerating", "Fossil fuels are finite"],
        "conclusion": "We must transition to renewable energy sources",
        "argument_type": ArgumentType.THESIS,
        "confidence": 0.8,
    }
    data.update(overrides)
    return Argument(**data)


class TestArgumentCreation:
    """Test argument construction."""

    def test_create_with_all_fields(self):
        """Test creating an argument with explicit fields."""
        argument = make_argument(argument_id="t1")

        assert argument.argument_id == "t1"
        assert argument.argument_type == ArgumentType.THESIS
        assert argument.premises == [
            "Climate change is accelerating",
            "Fossil fuels are finite",
        ]
        assert argument.confidence == 0.8
        assert argument.responds_to is None
        assert argument.supports == []
        assert argument.strengths == []
        assert isinstance(argument.created_at, datetime)

    def test_generated_id(self):
        """Test that an id is generated when none is given."""
        first = make_argument()
        second = make_argument()

        assert first.argument_id.startswith("arg_")
        assert first.argument_id != second.argument_id

    def test_premises_default_to_empty(self):
        """Test premises default to an empty list."""
        argument = Argument(
            claim="Claim", conclusion="Conclusion", argument_type="objection"
        )

        assert argument.premises == []
        assert argument.confidence == 0.5

    def test_string_type_is_coerced(self):
        """Test type strings become ArgumentType members."""
        argument = make_argument(argument_type="rebuttal")
        assert argument.argument_type is ArgumentType.REBUTTAL

    def test_duplicate_references_collapse(self):
        """Test supports and contradicts behave as ordered sets."""
        argument = make_argument(supports=["a", "b", "a"], contradicts=("c", "c"))

        assert argument.supports == ["a", "b"]
        assert argument.contradicts == ["c"]

    def test_referenced_ids(self):
        """Test referenced_ids lists every declared target."""
        argument = make_argument(supports=["a"], contradicts=["b"], responds_to="c")
        assert argument.referenced_ids() == ["a", "b", "c"]


class TestArgumentValidation:
    """Test the construction invariants."""

    @pytest.mark.parametrize("field_name", ["claim", "conclusion"])
    def test_missing_text_fields(self, field_name):
        """Test empty claim or conclusion is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            make_argument(**{field_name: "  "})
        assert exc_info.value.field == field_name

    def test_invalid_type(self):
        """Test unknown argument types are rejected."""
        with pytest.raises(ValidationError, match="Invalid argument type"):
            make_argument(argument_type="hypothesis")

    def test_missing_type(self):
        """Test a None type is rejected."""
        with pytest.raises(ValidationError):
            make_argument(argument_type=None)

    def test_premises_must_be_a_list(self):
        """Test a bare string is not accepted as premises."""
        with pytest.raises(ValidationError) as exc_info:
            make_argument(premises="Only one premise")
        assert exc_info.value.field == "premises"

    def test_premises_must_be_strings(self):
        """Test non-string premises are rejected."""
        with pytest.raises(ValidationError):
            make_argument(premises=["fine", 42])

    @pytest.mark.parametrize("confidence", [-0.1, 1.1, 2, -5])
    def test_confidence_out_of_range(self, confidence):
        """Test confidence outside [0, 1] is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            make_argument(confidence=confidence)
        assert exc_info.value.field == "confidence"

    @pytest.mark.parametrize("confidence", ["0.5", True, None])
    def test_confidence_must_be_numeric(self, confidence):
        """Test non-numeric confidence is rejected."""
        with pytest.raises(ValidationError):
            make_argument(confidence=confidence)

    @pytest.mark.parametrize("confidence", [0.0, 1.0, 0, 1])
    def test_confidence_bounds_are_inclusive(self, confidence):
        """Test the bounds themselves are valid."""
        argument = make_argument(confidence=confidence)
        assert argument.confidence == float(confidence)

    def test_empty_id_rejected(self):
        """Test an explicit empty id is rejected."""
        with pytest.raises(ValidationError):
            make_argument(argument_id="")

    @pytest.mark.parametrize("field_name", ["supports", "contradicts"])
    @pytest.mark.parametrize("entry", [["a"], 7, None, {"id": "a"}])
    def test_reference_entries_must_be_ids(self, field_name, entry):
        """Test non-string entries in reference lists are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            make_argument(**{field_name: ["a", entry]})
        assert exc_info.value.field == field_name

    @pytest.mark.parametrize("responds_to", [["a"], 7])
    def test_responds_to_must_be_an_id(self, responds_to):
        """Test a non-string responds_to is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            make_argument(responds_to=responds_to)
        assert exc_info.value.field == "responds_to"


class TestArgumentMutation:
    """Test the explicit update operations."""

    def test_update_confidence(self):
        """Test confidence update refreshes last_modified."""
        argument = make_argument()
        before = argument.last_modified

        argument.update_confidence(0.3)

        assert argument.confidence == 0.3
        assert argument.last_modified >= before

    def test_update_confidence_rejects_out_of_range(self):
        """Test a rejected update leaves the argument unchanged."""
        argument = make_argument(confidence=0.6)

        with pytest.raises(ValidationError):
            argument.update_confidence(1.5)

        assert argument.confidence == 0.6

    def test_add_strength_and_weakness(self):
        """Test strengths and weaknesses append in order."""
        argument = make_argument()
        before = argument.last_modified

        argument.add_strength("Clear")
        argument.add_strength("Concise")
        argument.add_weakness("Unsourced")

        assert argument.strengths == ["Clear", "Concise"]
        assert argument.weaknesses == ["Unsourced"]
        assert argument.last_modified >= before


class TestArgumentConversion:
    """Test string and dictionary conversion."""

    def test_str(self):
        """Test the readable representation."""
        text = str(make_argument())

        assert text.startswith("THESIS: Renewable energy should be prioritized")
        assert "Premises: Climate change is accelerating, Fossil fuels are finite" in text
        assert "Confidence: 0.8" in text

    def test_dict_round_trip(self):
        """Test to_dict/from_dict preserve every field."""
        argument = make_argument(argument_id="t1", responds_to=None, supports=[])
        argument.add_weakness("Needs data")

        restored = Argument.from_dict(argument.to_dict())

        assert restored == argument

    def test_to_dict_uses_plain_values(self):
        """Test the record holds only serializable values."""
        data = make_argument(argument_id="t1").to_dict()

        assert data["argument_type"] == "thesis"
        assert isinstance(data["created_at"], str)

    def test_from_dict_requires_claim(self):
        """Test missing required keys raise ValidationError."""
        with pytest.raises(ValidationError):
            Argument.from_dict({"conclusion": "c", "argument_type": "thesis"})

    def test_from_dict_rejects_bad_timestamp(self):
        """Test malformed timestamps raise ValidationError."""
        with pytest.raises(ValidationError):
            Argument.from_dict(
                {
                    "claim": "c",
                    "conclusion": "c",
                    "argument_type": "thesis",
                    "created_at": "yesterday",
                }
            )


class TestArgumentDraft:
    """Test synthesis drafts."""

    def test_to_argument_data(self):
        """Test a draft converts into add_argument data."""
        draft = ArgumentDraft(
            claim="Integration",
            premises=["p"],
            conclusion="Both",
            supports=["t1", "a1"],
            confidence=0.7,
        )

        data = draft.to_argument_data("s1")

        assert data["argument_id"] == "s1"
        assert data["argument_type"] == "synthesis"
        assert data["supports"] == ["t1", "a1"]
        assert "argument_id" not in draft.to_argument_data()

    def test_draft_keeps_unclamped_confidence(self):
        """Test drafts do not validate confidence."""
        draft = ArgumentDraft(
            claim="c", premises=[], conclusion="c", supports=[], confidence=1.05
        )
        assert draft.confidence == 1.05

        with pytest.raises(ValidationError):
            Argument.from_dict(draft.to_argument_data())
