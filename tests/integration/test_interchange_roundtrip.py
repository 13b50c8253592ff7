"""
Integration tests for a full dialectic and its interchange export.

Builds a debate through the engine, evaluates and synthesizes it, then checks
the exported graph survives JSON and rebuilds with the same edges.
"""

import json

import pytest

from dialectica import ArgumentGraph, ArgumentType, DialecticalEngine


@pytest.fixture
def debate():
    """Engine holding a small housing debate."""
    engine = DialecticalEngine()
    engine.add_argument(
        {
            "argument_id": "thesis",
            "claim": "Cities should build more housing",
            "premises": [
                "Housing prices rose 30% in a decade",
                "Supply growth lowers rents (Glaeser 2018)",
            ],
            "conclusion": "Zoning should allow more housing construction",
            "argument_type": "thesis",
            "confidence": 0.75,
        }
    )
    engine.add_argument(
        {
            "argument_id": "antithesis",
            "claim": "Cities should not build more housing quickly",
            "premises": [
                "Rapid construction might strain infrastructure",
                "Neighborhood welfare depends on planning",
            ],
            "conclusion": "Housing growth should follow infrastructure",
            "argument_type": "antithesis",
            "confidence": 0.6,
            "responds_to": "thesis",
            "contradicts": ["thesis"],
        }
    )
    engine.add_argument(
        {
            "argument_id": "objection",
            "claim": "Infrastructure concerns are overstated",
            "premises": ["Transit capacity often exceeds demand"],
            "conclusion": "Construction can proceed",
            "argument_type": "objection",
            "confidence": 0.5,
            "supports": ["thesis"],
            "responds_to": "antithesis",
        }
    )
    return engine


class TestDebateWorkflow:
    """Test the engine end to end."""

    def test_candidate_then_synthesis(self, debate):
        """Test the pair is offered and closed by an inserted synthesis."""
        [candidate] = debate.find_synthesis_candidates()
        assert (candidate.thesis_id, candidate.antithesis_id) == ("thesis", "antithesis")

        synthesis, result = debate.synthesize_arguments(["thesis", "antithesis"], "synthesis")

        assert synthesis.argument_type == ArgumentType.SYNTHESIS
        assert 0.0 <= result.draft.confidence <= 1.0
        assert debate.find_synthesis_candidates() == []
        assert debate.graph.find_paths("synthesis", "thesis") == [
            ["synthesis", "thesis"],
            ["synthesis", "antithesis", "thesis"],
        ]

    def test_evaluation_sees_support(self, debate):
        """Test the thesis is credited with its supporter."""
        evaluation = debate.evaluate_argument("thesis")

        assert evaluation.support_score > 0.0
        assert evaluation.evidence_score == pytest.approx(0.35)

    def test_summary_counts(self, debate):
        """Test the summary reflects every edge kind."""
        summary = debate.get_dialectical_summary()

        assert summary.total_arguments == 3
        assert summary.relationships == {"supports": 1, "contradicts": 1, "responds": 2}
        json.dumps(summary.to_dict())


class TestInterchangeRoundtrip:
    """Test export and rebuild of the graph."""

    def test_roundtrip_through_json(self, debate):
        """Test arguments and edges survive a JSON roundtrip."""
        graph = debate.graph
        graph.add_supports_relationship("objection", "antithesis")

        exported = json.loads(json.dumps(graph.to_dict()))
        rebuilt = ArgumentGraph.from_dict(exported)

        assert [a.to_dict() for a in rebuilt] == [a.to_dict() for a in graph]
        assert rebuilt.to_dict()["relationships"] == exported["relationships"]
        assert rebuilt.supports("objection", "antithesis")
        assert rebuilt.relationship_count() == graph.relationship_count()

    def test_explicit_edge_not_on_argument(self, debate):
        """Test edges added after insertion are carried by the relationship list."""
        graph = debate.graph
        graph.add_supports_relationship("objection", "antithesis")

        exported = graph.to_dict()
        objection = next(a for a in exported["arguments"] if a["argument_id"] == "objection")

        assert objection["supports"] == ["thesis"]
        assert {"from": "objection", "to": "antithesis", "type": "support"} in exported[
            "relationships"
        ]
