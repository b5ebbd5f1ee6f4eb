"""
Dent core: tokenizer, parser, value helpers, and the engine.
"""

from dent.core.engine import Dent
from dent.core.errors import (
    DentError,
    DentIOError,
    LexerContractError,
    NestingTooDeepError,
    ParseError,
    QueryError,
    UnexpectedCharError,
    UnexpectedEofError,
    UnexpectedTokenError,
    UnknownFunctionError,
)
from dent.core.registry import DentFunction, FunctionRegistry
from dent.core.values import Value, ValueKind, kind_of, to_text

__all__ = [
    "Dent",
    "DentError",
    "DentFunction",
    "DentIOError",
    "FunctionRegistry",
    "LexerContractError",
    "NestingTooDeepError",
    "ParseError",
    "QueryError",
    "UnexpectedCharError",
    "UnexpectedEofError",
    "UnexpectedTokenError",
    "UnknownFunctionError",
    "Value",
    "ValueKind",
    "kind_of",
    "to_text",
]
