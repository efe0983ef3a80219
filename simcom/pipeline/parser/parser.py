"""
Recursive-descent parser that builds the statement list.

Phase 2 of the pipeline. Grammar:

    program    := statement*
    statement  := "tipo" Identifier "(" parameters? ")" ";"
    parameters := parameter ("," parameter)* ","?
    parameter  := Identifier ":" Identifier

A statement that does not match yields an Unexpected node and the parser
skips ahead through the next ";" before trying the next statement.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..lexer.lexer import Lexer
from ..lexer.token import EOF, Token, TokenKind
from .nodes import AstNode, Parameter, Program, Statement, TypeDefinition, Unexpected

logger = logging.getLogger(__name__)


class UnexpectedTokenError(Exception):
    """Raised inside the parser when a statement hits a misplaced token."""

    def __init__(self, token: Token):
        super().__init__(f"Unexpected {token!r} token.")
        self.token = token


class TokenStream:
    """Token iterator with one token of lookahead."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = iter(tokens)
        self._lookahead: Token | None = None

    def peek(self) -> Token:
        """The next token, without consuming it. EOF once exhausted."""
        if self._lookahead is None:
            self._lookahead = next(self._tokens, EOF)
        return self._lookahead

    def next(self) -> Token:
        """Consume and return the next token. EOF once exhausted."""
        token = self.peek()
        if not token.is_eof:
            self._lookahead = None
        return token

    def at_end(self) -> bool:
        return self.peek().is_eof

    def expect(self, kind: TokenKind) -> Token:
        """Consume the next token, which must be of the given kind."""
        token = self.next()
        if token.kind is not kind:
            raise UnexpectedTokenError(token)
        return token


class Parser:
    """Iterator over the top-level statements of a token stream.

    Yields TypeDefinition for every well-formed statement and Unexpected
    for every failed one. Like the lexer, a parser is consumed once.
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize the parser.

        Args:
            tokens: Any token iterable, usually a Lexer
        """
        self.stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)

    def __iter__(self) -> Iterator[Statement]:
        return self

    def __next__(self) -> Statement:
        # Stop only when there is nothing left at a statement boundary
        if self.stream.at_end():
            raise StopIteration

        try:
            return self.parse_definition()
        except UnexpectedTokenError as e:
            logger.info("Unexpected %r token.", e.token)
            self.skip_to_semicolon()
            return Unexpected(e.token)

    def skip_to_semicolon(self) -> None:
        """Discard tokens through the next ";" or until input runs out."""
        while True:
            token = self.stream.next()
            if token.is_eof or token.kind is TokenKind.SEMICOLON:
                return

    def parse_definition(self) -> TypeDefinition:
        """
        Parse an entire type definition, from `tipo` to `;`.

        Raises:
            UnexpectedTokenError: with the first misplaced token (EOF if the
                input ended early)
        """
        self.stream.expect(TokenKind.TYPE)
        name = self.stream.expect(TokenKind.IDENT).text
        self.stream.expect(TokenKind.LPAREN)
        parameters = self.parse_parameters()
        self.stream.expect(TokenKind.RPAREN)
        self.stream.expect(TokenKind.SEMICOLON)
        return TypeDefinition(name=name, parameters=parameters)

    def parse_parameters(self) -> list[Parameter]:
        """
        Parse a comma separated parameter list, up to (not including) ")".

        A trailing comma right before ")" is accepted. A missing comma just
        ends the list; the stray token is then reported by the caller.
        """
        parameters: list[Parameter] = []
        if self.stream.peek().kind is TokenKind.RPAREN:
            return parameters

        while True:
            parameters.append(self.parse_parameter())
            if self.stream.peek().kind is not TokenKind.COMMA:
                break
            self.stream.next()
            if self.stream.peek().kind is TokenKind.RPAREN:
                break

        return parameters

    def parse_parameter(self) -> Parameter:
        """Parse `name: Type`."""
        field_name = self.stream.expect(TokenKind.IDENT).text
        self.stream.expect(TokenKind.COLON)
        type_name = self.stream.expect(TokenKind.IDENT).text
        return Parameter(field_name=field_name, type_name=type_name)


def parse(source: str) -> list[AstNode]:
    """Parse a whole source string into its list of statements."""
    return list(Parser(Lexer(source)))


def parse_program(source: str) -> tuple[Program, bool]:
    """
    Parse a whole source string into a Program.

    Returns:
        The program and whether any statement failed to parse
    """
    program = Program(statements=list(Parser(Lexer(source))))
    return program, bool(program.errors)
