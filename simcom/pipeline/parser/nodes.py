"""
AST (Abstract Syntax Tree) node definitions for the declaration language.

A program is a flat list of statements. Each statement is either a
successful type definition or an Unexpected marker recording the token
where parsing of that statement failed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..lexer.token import Token


@dataclass
class AstNode:
    """Base class for all AST nodes."""


@dataclass
class Parameter(AstNode):
    """One `name: Type` entry inside a definition's parameter list."""

    field_name: str
    type_name: str


@dataclass
class TypeDefinition(AstNode):
    """A parsed `tipo Name(...);` statement."""

    name: str
    parameters: list[Parameter] = field(default_factory=list)

    @property
    def dependencies(self) -> list[str]:
        """Field type names, in declaration order (duplicates kept)."""
        return [p.type_name for p in self.parameters]


@dataclass
class Unexpected(AstNode):
    """A statement that failed to parse at `token`."""

    token: Token


# What the parser yields at top level
Statement = TypeDefinition | Unexpected


@dataclass
class Program(AstNode):
    """Root of a parsed source file."""

    statements: list[Statement] = field(default_factory=list)

    @property
    def definitions(self) -> list[TypeDefinition]:
        return [s for s in self.statements if isinstance(s, TypeDefinition)]

    @property
    def errors(self) -> list[Unexpected]:
        return [s for s in self.statements if isinstance(s, Unexpected)]
