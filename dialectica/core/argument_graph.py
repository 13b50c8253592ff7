"""
Argument graph: the store of arguments and the directed edges between them.

The graph only grows. Arguments and edges are never removed, and an edge may
only point at an argument that is already present.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Union

from dialectica.config import config
from dialectica.core.argument import Argument, ArgumentType, parse_argument_type
from dialectica.errors import DuplicateIdError, UnknownReferenceError, ValidationError
from dialectica.logging import get_dialectica_logger, performance_monitor, track_graph_operation

logger = get_dialectica_logger("graph")

RELATION_SUPPORT = "support"
RELATION_CONTRADICT = "contradict"
RELATION_RESPOND = "respond"


@dataclass
class RelationshipRecord:
    """Outgoing edges of one argument."""

    supports: List[str] = field(default_factory=list)
    contradicts: List[str] = field(default_factory=list)
    responds_to: Optional[str] = None

    def neighbours(self) -> List[str]:
        """Distinct outgoing targets: supports, then contradicts, then responds_to."""
        targets = list(self.supports) + list(self.contradicts)
        if self.responds_to is not None:
            targets.append(self.responds_to)
        return list(dict.fromkeys(targets))


class ArgumentGraph:
    """
    Owns all arguments and the relationship table between them.

    Relationship queries read the table, so edges added later through the
    ``add_*_relationship`` methods are visible to them as well as the ones
    declared on the arguments themselves.
    """

    def __init__(self) -> None:
        self._arguments: Dict[str, Argument] = {}
        self._relationships: Dict[str, RelationshipRecord] = {}

    @property
    def arguments(self) -> List[Argument]:
        """All arguments in insertion order."""
        return list(self._arguments.values())

    def __len__(self) -> int:
        return len(self._arguments)

    def __contains__(self, argument_id: object) -> bool:
        return argument_id in self._arguments

    def __iter__(self) -> Iterator[Argument]:
        return iter(list(self._arguments.values()))

    @track_graph_operation("add_argument")
    def add_argument(self, data: Union[Mapping[str, Any], Argument]) -> Argument:
        """
        Validate and store a new argument together with its declared edges.

        Args:
            data: An Argument or a mapping accepted by Argument.from_dict

        Returns:
            The stored Argument

        Raises:
            ValidationError: If the argument data is invalid
            DuplicateIdError: If the id is already present
            UnknownReferenceError: If a declared relationship targets an id
                that is not in the graph yet
        """
        argument = data if isinstance(data, Argument) else Argument.from_dict(data)

        if argument.argument_id in self._arguments:
            raise DuplicateIdError(argument.argument_id)

        # Every reference is checked before anything is stored
        for referenced_id in argument.referenced_ids():
            if referenced_id not in self._arguments:
                raise UnknownReferenceError(referenced_id, referenced_by=argument.argument_id)

        self._arguments[argument.argument_id] = argument
        self._relationships[argument.argument_id] = RelationshipRecord()

        for supported_id in argument.supports:
            self.add_supports_relationship(argument.argument_id, supported_id)
        for contradicted_id in argument.contradicts:
            self.add_contradicts_relationship(argument.argument_id, contradicted_id)
        if argument.responds_to:
            self.add_responds_to_relationship(argument.argument_id, argument.responds_to)

        logger.debug(
            f"Added {argument.argument_type.value} {argument.argument_id} "
            f"({len(self._arguments)} arguments)"
        )
        return argument

    def _require(self, *argument_ids: str) -> None:
        for argument_id in argument_ids:
            if argument_id not in self._arguments:
                raise UnknownReferenceError(argument_id)

    def add_supports_relationship(self, supporter_id: str, supported_id: str) -> None:
        """Record that ``supporter_id`` supports ``supported_id``."""
        self._require(supporter_id, supported_id)
        record = self._relationships[supporter_id]
        if supported_id not in record.supports:
            record.supports.append(supported_id)

    def add_contradicts_relationship(self, contradictor_id: str, contradicted_id: str) -> None:
        """Record that ``contradictor_id`` contradicts ``contradicted_id``."""
        self._require(contradictor_id, contradicted_id)
        record = self._relationships[contradictor_id]
        if contradicted_id not in record.contradicts:
            record.contradicts.append(contradicted_id)

    def add_responds_to_relationship(self, responder_id: str, respondee_id: str) -> None:
        """Record that ``responder_id`` responds to ``respondee_id`` (replaces any earlier target)."""
        self._require(responder_id, respondee_id)
        self._relationships[responder_id].responds_to = respondee_id

    def get_argument(self, argument_id: str) -> Optional[Argument]:
        return self._arguments.get(argument_id)

    def get_relationships(self, argument_id: str) -> Optional[RelationshipRecord]:
        return self._relationships.get(argument_id)

    def get_arguments_by_type(self, argument_type: Union[ArgumentType, str]) -> List[Argument]:
        """
        Arguments of one type in insertion order.

        Raises:
            ValidationError: If ``argument_type`` is not a known type
        """
        wanted = parse_argument_type(argument_type)
        return [arg for arg in self._arguments.values() if arg.argument_type == wanted]

    def get_supporters(self, argument_id: str) -> List[Argument]:
        """Arguments with a supports edge to ``argument_id``."""
        return [
            self._arguments[source_id]
            for source_id, record in self._relationships.items()
            if argument_id in record.supports
        ]

    def get_contradictors(self, argument_id: str) -> List[Argument]:
        """Arguments with a contradicts edge to ``argument_id``."""
        return [
            self._arguments[source_id]
            for source_id, record in self._relationships.items()
            if argument_id in record.contradicts
        ]

    def get_responders(self, argument_id: str) -> List[Argument]:
        """Arguments whose responds_to edge points at ``argument_id``."""
        return [
            self._arguments[source_id]
            for source_id, record in self._relationships.items()
            if record.responds_to == argument_id
        ]

    def supports(self, source_id: str, target_id: str) -> bool:
        record = self._relationships.get(source_id)
        return record is not None and target_id in record.supports

    def contradicts(self, source_id: str, target_id: str) -> bool:
        record = self._relationships.get(source_id)
        return record is not None and target_id in record.contradicts

    def responds_to(self, source_id: str, target_id: str) -> bool:
        record = self._relationships.get(source_id)
        return record is not None and record.responds_to == target_id

    @performance_monitor(threshold_ms=config.graph.path_warning_ms)
    def find_paths(
        self, start_id: str, end_id: str, max_length: Optional[int] = None
    ) -> List[List[str]]:
        """
        Enumerate all simple paths from ``start_id`` to ``end_id``.

        Edges of every kind are followed in their outgoing direction. A node
        never repeats within one path but may appear in several paths. The
        search is exponential on dense graphs, so large graphs should pass
        ``max_length``.

        Args:
            start_id: First node of every path
            end_id: Last node of every path
            max_length: Maximum number of nodes per path (defaults to
                ``config.graph.max_path_length``)

        Returns:
            List of paths, each a list of argument IDs
        """
        if max_length is None:
            max_length = config.graph.max_path_length
        if start_id not in self._arguments:
            return []

        paths: List[List[str]] = []
        self._walk(start_id, end_id, [start_id], {start_id}, max_length, paths)
        logger.debug(f"Found {len(paths)} paths from {start_id} to {end_id}")
        return paths

    def _walk(
        self,
        current_id: str,
        end_id: str,
        path: List[str],
        visited: Set[str],
        max_length: Optional[int],
        paths: List[List[str]],
    ) -> None:
        if current_id == end_id:
            paths.append(list(path))
            return
        if max_length is not None and len(path) >= max_length:
            return

        record = self._relationships.get(current_id)
        if record is None:
            return

        for next_id in record.neighbours():
            if next_id in visited:
                continue
            path.append(next_id)
            visited.add(next_id)
            self._walk(next_id, end_id, path, visited, max_length, paths)
            visited.discard(next_id)
            path.pop()

    def relationship_count(self) -> Dict[str, int]:
        """Number of edges of each kind."""
        counts = {"supports": 0, "contradicts": 0, "responds": 0}
        for record in self._relationships.values():
            counts["supports"] += len(record.supports)
            counts["contradicts"] += len(record.contradicts)
            if record.responds_to is not None:
                counts["responds"] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the graph in the interchange shape.

        Returns:
            ``{"arguments": [...], "relationships": [{"from", "to", "type"}...]}``
        """
        relationships: List[Dict[str, str]] = []
        for source_id, record in self._relationships.items():
            for target_id in record.supports:
                relationships.append(
                    {"from": source_id, "to": target_id, "type": RELATION_SUPPORT}
                )
            for target_id in record.contradicts:
                relationships.append(
                    {"from": source_id, "to": target_id, "type": RELATION_CONTRADICT}
                )
            if record.responds_to is not None:
                relationships.append(
                    {"from": source_id, "to": record.responds_to, "type": RELATION_RESPOND}
                )

        return {
            "arguments": [arg.to_dict() for arg in self._arguments.values()],
            "relationships": relationships,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ArgumentGraph":
        """
        Rebuild a graph from the interchange shape.

        Arguments are added in the given order, then every relationship is
        replayed. Edges already created from an argument's own declarations
        are not duplicated.

        Raises:
            ValidationError: On an invalid argument record or relationship type
            DuplicateIdError: If two records share an id
            UnknownReferenceError: If a record or relationship names a missing id
        """
        graph = cls()
        for record in data.get("arguments", []):
            graph.add_argument(record)

        adders = {
            RELATION_SUPPORT: graph.add_supports_relationship,
            RELATION_CONTRADICT: graph.add_contradicts_relationship,
            RELATION_RESPOND: graph.add_responds_to_relationship,
        }
        for relationship in data.get("relationships", []):
            adder = adders.get(relationship.get("type"))
            if adder is None:
                raise ValidationError(
                    f"Unknown relationship type: {relationship.get('type')!r}",
                    field="relationships",
                )
            adder(relationship["from"], relationship["to"])

        logger.info(f"Rebuilt graph with {len(graph)} arguments")
        return graph
