"""
Tokenizer for the Dent language.

Pull-based: each call to ``Tokenizer.next()`` consumes exactly one token.
Only the current offset is kept, so a tokenizer is cheap to construct.
"""

from __future__ import annotations

from enum import StrEnum

from dent.core.errors import UnexpectedCharError


class TokenKind(StrEnum):
    """Token types for Dent."""

    # Structure
    BRACKET_OPEN = "BRACKET_OPEN"
    BRACKET_CLOSE = "BRACKET_CLOSE"
    BRACE_OPEN = "BRACE_OPEN"
    BRACE_CLOSE = "BRACE_CLOSE"
    COLON = "COLON"
    AT = "AT"

    # Literals
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOL = "BOOL"

    COMMENT = "COMMENT"

    # End of input
    EOF = "EOF"


class Token:
    """A single token from the Dent tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_STRUCTURAL: dict[str, TokenKind] = {
    "[": TokenKind.BRACKET_OPEN,
    "]": TokenKind.BRACKET_CLOSE,
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
    ":": TokenKind.COLON,
    "@": TokenKind.AT,
}

_DIGITS = "0123456789"

# Characters besides letters that may start a bare string
_BARE_START = "_-+.,/\\"


class Tokenizer:
    """Lexes Dent source text one token at a time."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def next(self) -> Token:
        """Consume and return the next token, skipping leading whitespace.

        Returns an EOF token on every call once input is exhausted.

        Raises:
            UnexpectedCharError: If a character starts no token.
        """
        source = self.source
        n = len(source)
        i = self.pos
        while i < n and source[i].isspace():
            i += 1
        self.pos = i

        if i >= n:
            return Token(TokenKind.EOF, "", n)

        c = source[i]

        kind = _STRUCTURAL.get(c)
        if kind is not None:
            self.pos = i + 1
            return Token(kind, c, i)

        # Line comment, newline itself is left for the whitespace skip
        if c == "#":
            end = source.find("\n", i)
            self.pos = n if end == -1 else end
            return Token(TokenKind.COMMENT, "", i)

        # Verbatim quoted string, an unterminated quote runs to end of input
        if c == '"':
            end = source.find('"', i + 1)
            if end == -1:
                self.pos = n
                return Token(TokenKind.STRING, source[i + 1 :], i)
            self.pos = end + 1
            return Token(TokenKind.STRING, source[i + 1 : end], i)

        if c in _DIGITS:
            j = i
            while j < n and (source[j] in _DIGITS or source[j] == "."):
                j += 1
            self.pos = j
            return Token(TokenKind.NUMBER, source[i:j], i)

        if c.isalpha() or c in _BARE_START:
            # First character is always consumed, even "-" or "."
            j = i + 1
            while j < n and (source[j].isalnum() or source[j] == "_"):
                j += 1
            self.pos = j
            word = source[i:j]
            if word == "true" or word == "false":
                return Token(TokenKind.BOOL, word, i)
            return Token(TokenKind.STRING, word, i)

        raise UnexpectedCharError(c, i)


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole document into a list of tokens ending with EOF."""
    tokenizer = Tokenizer(source)
    tokens: list[Token] = []
    while True:
        tok = tokenizer.next()
        tokens.append(tok)
        if tok.kind == TokenKind.EOF:
            return tokens
