"""
Dependency analyzer that orders type definitions.

Phase 3 of the pipeline: walk the dependencies between definitions
(including cyclic ones) to determine in what order they must be written.
Types that take part in a dependency cycle are set apart so the caller
can handle them (e.g. forward declare them).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..config import AnalyzerConfig
from ..lexer.token import Token
from ..parser.nodes import AstNode
from .definitions import DefinitionTable, build_definition_table

logger = logging.getLogger(__name__)


class UnexpectedTokensError(Exception):
    """Raised when analysis is refused because the parse had errors.

    Attributes:
        tokens: Every unexpected token recorded across the whole input
    """

    def __init__(self, tokens: list[Token]):
        super().__init__(f"{len(tokens)} unexpected token(s): {', '.join(map(repr, tokens))}")
        self.tokens = tokens


@dataclass
class AnalysisResult:
    """Outcome of a successful dependency analysis."""

    # All the type definitions
    definitions: DefinitionTable = field(default_factory=dict)

    # The order in which to write the definitions; dependencies come first
    order: list[str] = field(default_factory=list)

    # Every type involved in a dependency cycle, excluded from `order`
    cycles: set[str] = field(default_factory=set)

    def dependencies_of(self, name: str) -> list[str]:
        """Field type names of a definition (empty if it is not defined)."""
        return [type_name for _, type_name in self.definitions.get(name, [])]

    @property
    def undefined_types(self) -> list[str]:
        """Referenced type names without a definition.

        Names kept in `order` come first, in that order; any left out of it
        follow in first reference order.
        """
        undefined: dict[str, None] = dict.fromkeys(name for name in self.order if name not in self.definitions)
        for fields in self.definitions.values():
            for _, type_name in fields:
                if type_name not in self.definitions:
                    undefined.setdefault(type_name)
        return list(undefined)


# (node, remaining dependencies to visit)
_Frame = tuple[str, Iterator[str]]


class DependencyGraph:
    """Traversal context for a single analysis run.

    Depth-first walk over every definition, with an explicit frame stack
    instead of recursion. Nodes stay in `visited` until the strongly
    connected group they belong to is complete; then the group is either
    appended to `order` (a single node with no self reference) or added
    to `cycles`.

    Cycle membership is strongly connected component membership (Tarjan
    lowlinks), not "everything on the current path": a type that only
    depends on a cycle stays in `order`, whatever the root order.
    """

    def __init__(self, definitions: DefinitionTable, config: AnalyzerConfig | None = None):
        """
        Initialize the traversal.

        Args:
            definitions: The definition table, not modified
            config: Analysis configuration
        """
        self.definitions = definitions
        self.config = config or AnalyzerConfig()

        self.order: list[str] = []
        self.visited: list[str] = []
        self.cycles: set[str] = set()

        self._on_path: set[str] = set()
        self._index: dict[str, int] = {}
        self._lowlink: dict[str, int] = {}
        self._self_referencing: set[str] = set()
        self._done = False

    def roots(self) -> list[str]:
        """Definition names in the order they are used as walk roots."""
        names = list(self.definitions)
        if self.config.sort_roots:
            names.sort()
        return names

    def walk(self) -> AnalysisResult:
        """Visit every definition and return the resulting partition."""
        if not self._done:
            for root in self.roots():
                self.visit(root)
            self._done = True

        return AnalysisResult(definitions=self.definitions, order=self.order, cycles=self.cycles)

    def visit(self, root: str) -> None:
        """Visit `root` and everything reachable from it."""
        if root in self._index:
            return

        frames: list[_Frame] = [self._enter(root)]
        while frames:
            node, dependencies = frames[-1]

            for dep in dependencies:
                if dep in self._on_path:
                    # Back edge: dep is still unresolved, so node is on a cycle with it
                    if dep == node:
                        self._self_referencing.add(node)
                    self._lowlink[node] = min(self._lowlink[node], self._index[dep])
                elif dep not in self._index:
                    frames.append(self._enter(dep))
                    break
            else:
                frames.pop()
                if frames:
                    parent = frames[-1][0]
                    self._lowlink[parent] = min(self._lowlink[parent], self._lowlink[node])
                if self._lowlink[node] == self._index[node]:
                    self._resolve(node)

    def _enter(self, node: str) -> _Frame:
        self._index[node] = self._lowlink[node] = len(self._index)
        self.visited.append(node)
        self._on_path.add(node)
        # Undefined names have no edges
        dependencies = (type_name for _, type_name in self.definitions.get(node, []))
        return node, dependencies

    def _resolve(self, node: str) -> None:
        """Pop the group rooted at `node` off `visited` and place it."""
        group = []
        while True:
            member = self.visited.pop()
            self._on_path.discard(member)
            group.append(member)
            if member == node:
                break

        if len(group) > 1 or node in self._self_referencing:
            logger.debug("Dependency cycle between: %s", ", ".join(reversed(group)))
            self.cycles.update(group)
        elif node in self.definitions or self.config.include_undefined_types:
            self.order.append(node)


def analyze_definitions(definitions: DefinitionTable, config: AnalyzerConfig | None = None) -> AnalysisResult:
    """
    Order an already built definition table.

    The table is copied first, so the same table can be analyzed any
    number of times with the same result.
    """
    table = {name: list(fields) for name, fields in definitions.items()}
    return DependencyGraph(table, config).walk()


def analyze(nodes: Iterable[AstNode], config: AnalyzerConfig | None = None) -> AnalysisResult:
    """
    Analyze parsed statements.

    Args:
        nodes: Top-level statements, as yielded by the Parser
        config: Analysis configuration

    Returns:
        AnalysisResult with the definition table, emission order and cycles

    Raises:
        UnexpectedTokensError: if any statement failed to parse; no
            ordering is attempted in that case

    Example:
        >>> from simcom.pipeline.parser import parse
        >>> analyze(parse("tipo A(x: X);")).order
        ['X', 'A']
    """
    definitions, errors = build_definition_table(nodes)
    if errors:
        raise UnexpectedTokensError(errors)

    return DependencyGraph(definitions, config).walk()
