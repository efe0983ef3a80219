#!/usr/bin/env python3

import pytest

from simcom.pipeline.analyzer import (
    AnalysisResult,
    DependencyGraph,
    UnexpectedTokensError,
    analyze,
    analyze_definitions,
    build_definition_table,
)
from simcom.pipeline.config import AnalyzerConfig
from simcom.pipeline.lexer.token import EOF, RPAREN, SEMICOLON
from simcom.pipeline.parser import Parameter, parse


def get_analysis(source: str, **config) -> AnalysisResult:
    return analyze(parse(source), AnalyzerConfig.from_dict(config))


def assert_dependencies_first(result: AnalysisResult):
    """Every ordered type comes after the ordered types it depends on."""
    position = {name: i for i, name in enumerate(result.order)}
    for name in result.order:
        for dep in result.dependencies_of(name):
            if dep in position:
                assert position[dep] < position[name], f"{dep} should come before {name}"


def assert_partition(result: AnalysisResult):
    """Every definition is either ordered or in a cycle, never both."""
    assert len(result.order) == len(set(result.order))
    for name in result.definitions:
        assert (name in result.order) != (name in result.cycles), name


class TestDefinitionTable:
    """Test cases for building the definition table"""

    def test_build_table(self):
        table, errors = build_definition_table(parse("tipo A(x: B, y: C); tipo B();"))
        assert errors == []
        assert table == {"A": [("x", "B"), ("y", "C")], "B": []}

    def test_duplicates_overwrite(self):
        table, _ = build_definition_table(parse("tipo A(x: B); tipo C(); tipo A(y: D);"))
        assert list(table) == ["A", "C"]
        assert table["A"] == [("y", "D")]

    def test_collects_every_error(self):
        _, errors = build_definition_table(parse("tipo A(); tipo B(x); tipo C("))
        assert errors == [RPAREN, EOF]

    def test_rejects_non_statements(self):
        with pytest.raises(TypeError):
            build_definition_table([Parameter("x", "A")])


class TestAnalyzer:
    """Test cases for dependency ordering and cycle detection"""

    def test_order(self):
        result = get_analysis("tipo A(x: long);\ntipo B(a: A);")
        assert result.order == ["long", "A", "B"]
        assert result.cycles == set()

    def test_dependency_defined_later(self):
        result = get_analysis("tipo B(a: A); tipo A(x: X);")
        assert result.order == ["X", "A", "B"]

    def test_cycle(self):
        result = get_analysis("tipo A(x: B);\ntipo B (x: A);")
        assert result.cycles == {"A", "B"}
        assert result.order == []

    def test_self_cycle(self):
        result = get_analysis("tipo A(x: A);")
        assert result.cycles == {"A"}
        assert result.order == []

    def test_self_cycle_with_other_fields(self):
        result = get_analysis("tipo Nodo(valor: int, siguiente: Nodo);")
        assert result.cycles == {"Nodo"}
        assert result.order == ["int"]

    def test_dependent_of_cycle_is_ordered(self):
        result = get_analysis("tipo A(x: B);\ntipo B(x: A);\ntipo C(a: A, b: B);")
        assert result.order == ["C"]
        assert result.cycles == {"A", "B"}

    def test_cycle_with_undefined_dependency(self):
        result = get_analysis("tipo A(x: B, c: C);\ntipo B(x: A);")
        assert result.order == ["C"]
        assert result.cycles == {"A", "B"}

    @pytest.mark.parametrize(
        "source",
        [
            "tipo C(a: A);\ntipo A(b: B);\ntipo B(a: A);",
            "tipo A(b: B);\ntipo B(a: A);\ntipo C(a: A);",
            "tipo B(a: A);\ntipo C(a: A);\ntipo A(b: B);",
        ],
    )
    def test_partition_does_not_depend_on_roots(self, source):
        result = get_analysis(source)
        assert result.order == ["C"]
        assert result.cycles == {"A", "B"}

    def test_cycle_reached_through_finished_member(self):
        # C closes the loop through B after B's own cycle with A was found
        result = get_analysis("tipo A(b: B, c: C);\ntipo B(a: A);\ntipo C(b: B);")
        assert result.cycles == {"A", "B", "C"}
        assert result.order == []

    def test_two_separate_cycles(self):
        result = get_analysis("tipo A(x: B); tipo B(x: A); tipo C(x: D); tipo D(x: C); tipo E(a: A, c: C);")
        assert result.cycles == {"A", "B", "C", "D"}
        assert result.order == ["E"]

    def test_diamond(self):
        result = get_analysis("tipo D(b: B, c: C); tipo B(a: A); tipo C(a: A); tipo A();")
        assert result.order == ["A", "B", "C", "D"]
        assert_dependencies_first(result)

    def test_undefined_types(self):
        result = get_analysis("tipo A(x: long, y: B); tipo B(z: char, w: long);")
        assert result.undefined_types == ["long", "char"]
        assert result.order == ["long", "char", "B", "A"]

    def test_undefined_types_follow_order(self):
        result = get_analysis("tipo A(b: B, y: Y); tipo B(x: X);")
        assert result.order == ["X", "B", "Y", "A"]
        assert result.undefined_types == ["X", "Y"]

    def test_exclude_undefined_types(self):
        result = get_analysis("tipo A(x: long);\ntipo B(a: A);", include_undefined_types=False)
        assert result.order == ["A", "B"]
        assert result.undefined_types == ["long"]

    def test_sort_roots(self):
        source = "tipo Z(); tipo M(); tipo A();"
        assert get_analysis(source).order == ["Z", "M", "A"]
        assert get_analysis(source, sort_roots=True).order == ["A", "M", "Z"]

    def test_parse_errors_refuse_analysis(self):
        with pytest.raises(UnexpectedTokensError) as exc_info:
            get_analysis("tipo Punto(x: Punto);;")
        assert exc_info.value.tokens == [SEMICOLON]

    def test_empty_input(self):
        result = get_analysis("")
        assert result.order == []
        assert result.cycles == set()
        assert result.definitions == {}

    def test_long_chain_does_not_recurse(self):
        count = 20000
        source = "\n".join(f"tipo T{i}(next: T{i + 1});" for i in range(count))
        result = get_analysis(source)
        assert result.order[0] == f"T{count}"
        assert result.order[-1] == "T0"
        assert len(result.order) == count + 1

    def test_long_cycle(self):
        count = 5000
        source = "\n".join(f"tipo T{i}(next: T{(i + 1) % count});" for i in range(count))
        result = get_analysis(source)
        assert result.order == []
        assert len(result.cycles) == count

    def test_properties_on_mixed_graph(self):
        source = """
            tipo Persona(nombre: Texto, direccion: Direccion, jefe: Persona);
            tipo Direccion(calle: Texto, ciudad: Ciudad);
            tipo Ciudad(pais: Pais, capital: Ciudad2);
            tipo Ciudad2(ciudad: Ciudad);
            tipo Pais(nombre: Texto);
            tipo Texto();
            tipo Empresa(duenio: Persona, sede: Direccion);
        """
        result = get_analysis(source)
        assert result.cycles == {"Persona", "Ciudad", "Ciudad2"}
        assert_partition(result)
        assert_dependencies_first(result)


class TestAnalyzeDefinitions:
    """Test cases for analysis of an existing definition table"""

    def test_idempotent(self):
        table, _ = build_definition_table(parse("tipo A(x: B); tipo B(x: A); tipo C(a: A, l: long);"))
        snapshot = {k: list(v) for k, v in table.items()}

        first = analyze_definitions(table)
        second = analyze_definitions(table)

        assert first.order == second.order
        assert first.cycles == second.cycles
        assert table == snapshot

    def test_walk_twice(self):
        graph = DependencyGraph({"A": [("x", "B")], "B": []})
        first = graph.walk()
        second = graph.walk()
        assert first.order == second.order == ["B", "A"]

    def test_dependencies_of(self):
        result = analyze_definitions({"A": [("x", "B"), ("y", "C")]})
        assert result.dependencies_of("A") == ["B", "C"]
        assert result.dependencies_of("B") == []


if __name__ == "__main__":
    pytest.main([__file__])
