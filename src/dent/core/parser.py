"""
Recursive descent parser for Dent.

Grammar:
    value   → EOF                       (none)
            | "@" STRING value          (function call)
            | STRING | NUMBER | BOOL
            | "[" value* "]"
            | "{" (STRING ":" value)* "}"
            | COMMENT value             (comment is skipped)

Function calls parse their argument fully before the function runs. Only one
top-level value is parsed; whatever follows it is left unread.
"""

from __future__ import annotations

from dent.core.errors import (
    LexerContractError,
    NestingTooDeepError,
    UnexpectedEofError,
    UnexpectedTokenError,
    UnknownFunctionError,
)
from dent.core.registry import FunctionRegistry
from dent.core.tokenizer import Token, TokenKind, Tokenizer
from dent.core.values import Value

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class _Parser:
    """Recursive descent parser over a pull-based tokenizer."""

    def __init__(self, tokenizer: Tokenizer, functions: FunctionRegistry) -> None:
        self.tokenizer = tokenizer
        self.functions = functions
        self.current: Token = tokenizer.next()

    def advance(self) -> Token:
        tok = self.current
        self.current = self.tokenizer.next()
        return tok

    def skip_comments(self) -> None:
        while self.current.kind == TokenKind.COMMENT:
            self.advance()

    # -- Grammar rules --

    def parse_value(self) -> Value:
        tok = self.current
        kind = tok.kind

        if kind == TokenKind.EOF:
            return None

        if kind == TokenKind.COMMENT:
            self.advance()
            return self.parse_value()

        if kind == TokenKind.AT:
            return self._parse_call()

        if kind == TokenKind.STRING:
            self.advance()
            return tok.value

        if kind == TokenKind.NUMBER:
            self.advance()
            return _parse_number(tok.value)

        if kind == TokenKind.BOOL:
            self.advance()
            return tok.value == "true"

        if kind == TokenKind.BRACKET_OPEN:
            return self._parse_list()

        if kind == TokenKind.BRACE_OPEN:
            return self._parse_dict()

        raise UnexpectedTokenError(kind, tok.pos)

    def _parse_call(self) -> Value:
        """'@' STRING value"""
        self.advance()
        name_tok = self.current
        if name_tok.kind != TokenKind.STRING:
            raise UnexpectedTokenError(name_tok.kind, name_tok.pos)
        self.advance()

        function = self.functions.lookup(name_tok.value)
        if function is None:
            raise UnknownFunctionError(name_tok.value, name_tok.pos)

        argument = self.parse_value()
        return function(argument)

    def _parse_list(self) -> list[Value]:
        """'[' value* ']'"""
        self.advance()
        items: list[Value] = []
        while True:
            self.skip_comments()
            if self.current.kind == TokenKind.BRACKET_CLOSE:
                break
            if self.current.kind == TokenKind.EOF:
                raise UnexpectedEofError(self.current.pos)
            items.append(self.parse_value())
        self.advance()
        return items

    def _parse_dict(self) -> dict[str, Value]:
        """'{' (STRING ':' value)* '}'"""
        self.advance()
        entries: dict[str, Value] = {}
        while True:
            self.skip_comments()
            tok = self.current
            if tok.kind == TokenKind.BRACE_CLOSE:
                break
            if tok.kind == TokenKind.EOF:
                raise UnexpectedEofError(tok.pos)
            if tok.kind != TokenKind.STRING:
                raise UnexpectedTokenError(tok.kind, tok.pos)
            self.advance()
            if self.current.kind != TokenKind.COLON:
                raise UnexpectedTokenError(self.current.kind, self.current.pos)
            self.advance()
            entries[tok.value] = self.parse_value()
        self.advance()
        return entries


def _parse_number(span: str) -> int | float:
    """Classify a NUMBER span as a signed 64-bit int, else a float."""
    try:
        number = int(span)
    except ValueError:
        pass
    else:
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    try:
        return float(span)
    except ValueError:
        raise LexerContractError(span) from None


def parse_value(tokenizer: Tokenizer, functions: FunctionRegistry) -> Value:
    """Parse one value from a tokenizer, dispatching ``@name`` calls.

    Args:
        tokenizer: Tokenizer positioned at the start of the value.
        functions: Registry used to resolve extension functions.

    Returns:
        The parsed value (``None`` for empty input).

    Raises:
        ParseError: If the text is malformed, names an unknown function, or
            nests deeper than the recursion limit allows.
    """
    parser = _Parser(tokenizer, functions)
    try:
        return parser.parse_value()
    except RecursionError:
        raise NestingTooDeepError(parser.current.pos) from None


def parse_text(source: str, functions: FunctionRegistry) -> Value:
    """Parse Dent source text into a value."""
    return parse_value(Tokenizer(source), functions)
