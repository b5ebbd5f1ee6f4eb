"""
Error types for Dent tokenizing, parsing, and file loading.
"""

from __future__ import annotations

import errno


class DentError(Exception):
    """Base exception for all Dent errors."""

    def __init__(self, message: str, pos: int | None = None):
        self.message = message
        self.pos = pos
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the source offset if available."""
        if self.pos is not None:
            return f"{self.message} (at offset {self.pos})"
        return self.message


class ParseError(DentError):
    """
    Raised when Dent text cannot be tokenized or parsed.

    Always terminal to the enclosing parse call.
    """

    pass


class UnexpectedTokenError(ParseError):
    """A token appeared where the grammar does not allow it."""

    def __init__(self, kind: str, pos: int | None = None):
        self.kind = kind
        super().__init__(f"Unexpected token: {kind}", pos)


class UnknownFunctionError(ParseError):
    """An ``@name`` call referenced a function that is not registered."""

    def __init__(self, name: str, pos: int | None = None):
        self.name = name
        super().__init__(f"Unknown function: {name}", pos)


class UnexpectedEofError(ParseError):
    """Input ended inside a list or dictionary."""

    def __init__(self, pos: int | None = None):
        super().__init__("Unexpected end of file", pos)


class UnexpectedCharError(ParseError):
    """The tokenizer met a character that starts no token."""

    def __init__(self, char: str, pos: int | None = None):
        self.char = char
        super().__init__(f"Unexpected character: {char}", pos)


class NestingTooDeepError(ParseError):
    """Containers or calls nest deeper than the recursion limit allows."""

    def __init__(self, pos: int | None = None):
        super().__init__("Nesting too deep", pos)


class DentIOError(DentError):
    """
    Raised when a Dent file cannot be located, read, or decoded.

    Attributes:
        kind: Short classification of the failure (``NotFound``,
            ``PermissionDenied``, ``IsADirectory``, ``FilesystemLoop``,
            ``InvalidInput``, ``InvalidData``, ``Other``)
    """

    def __init__(self, kind: str, detail: str | None = None):
        self.kind = kind
        self.detail = detail
        super().__init__(f"IO error: {kind}")

    @classmethod
    def from_os_error(cls, exc: OSError) -> DentIOError:
        """Classify an ``OSError`` the way callers report it."""
        return cls(_IO_KINDS.get(exc.errno or 0, "Other"), str(exc))


class QueryError(DentError):
    """Raised when a query path such as ``.foo[x]`` is malformed."""

    pass


class LexerContractError(RuntimeError):
    """
    Internal fault: the tokenizer produced a number span that neither
    integer nor float parsing accepts.

    Not a ``DentError``; callers are not expected to handle it.
    """

    def __init__(self, span: str):
        self.span = span
        super().__init__(f"Tokenizer returned invalid number: {span}")


_IO_KINDS: dict[int, str] = {
    errno.ENOENT: "NotFound",
    errno.ENOTDIR: "NotFound",
    errno.EACCES: "PermissionDenied",
    errno.EPERM: "PermissionDenied",
    errno.EISDIR: "IsADirectory",
    errno.ELOOP: "FilesystemLoop",
}
