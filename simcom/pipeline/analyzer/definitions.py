"""
Definition table built from parsed statements.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..lexer.token import Token
from ..parser.nodes import AstNode, TypeDefinition, Unexpected

logger = logging.getLogger(__name__)

# type name -> [(field name, field type name), ...]
DefinitionTable = dict[str, list[tuple[str, str]]]


def build_definition_table(nodes: Iterable[AstNode]) -> tuple[DefinitionTable, list[Token]]:
    """
    Consume parsed statements into a definition table.

    A later definition with an already seen name replaces the fields of the
    earlier one, which keeps its position in the table.

    Args:
        nodes: Top-level statements, as yielded by the Parser

    Returns:
        The definition table (in definition order) and every unexpected
        token found, in input order
    """
    definitions: DefinitionTable = {}
    errors: list[Token] = []

    for node in nodes:
        if isinstance(node, TypeDefinition):
            if node.name in definitions:
                logger.debug("Definition of %s replaces an earlier one", node.name)
            definitions[node.name] = [(p.field_name, p.type_name) for p in node.parameters]
        elif isinstance(node, Unexpected):
            errors.append(node.token)
        else:
            raise TypeError(f"Not a top-level statement: {node!r}")

    return definitions, errors
