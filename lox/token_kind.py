# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token kinds produced by the scanner.

The set is closed: the parser and every later phase switch over these
members, so adding one means touching each consumer.
"""

from __future__ import annotations

from enum import Enum, auto


class TokenKind(Enum):
	# Single-character tokens.
	LEFT_PAREN = auto()
	RIGHT_PAREN = auto()
	LEFT_BRACE = auto()
	RIGHT_BRACE = auto()
	COMMA = auto()
	DOT = auto()
	MINUS = auto()
	PLUS = auto()
	SEMICOLON = auto()
	SLASH = auto()
	STAR = auto()

	# One or two character tokens.
	BANG = auto()
	BANG_EQUAL = auto()
	EQUAL = auto()
	EQUAL_EQUAL = auto()
	GREATER = auto()
	GREATER_EQUAL = auto()
	LESS = auto()
	LESS_EQUAL = auto()

	# Literals.
	IDENTIFIER = auto()
	STRING = auto()
	NUMBER = auto()

	# Keywords.
	AND = auto()
	CLASS = auto()
	ELSE = auto()
	FALSE = auto()
	FUN = auto()
	FOR = auto()
	IF = auto()
	NIL = auto()
	OR = auto()
	PRINT = auto()
	RETURN = auto()
	SUPER = auto()
	THIS = auto()
	TRUE = auto()
	VAR = auto()
	WHILE = auto()

	EOF = auto()


# Operator kinds a Binary node may carry (logical and/or included).
BINARY_OPERATORS = frozenset(
	{
		TokenKind.MINUS,
		TokenKind.PLUS,
		TokenKind.SLASH,
		TokenKind.STAR,
		TokenKind.BANG_EQUAL,
		TokenKind.EQUAL_EQUAL,
		TokenKind.GREATER,
		TokenKind.GREATER_EQUAL,
		TokenKind.LESS,
		TokenKind.LESS_EQUAL,
		TokenKind.AND,
		TokenKind.OR,
	}
)

UNARY_OPERATORS = frozenset({TokenKind.BANG, TokenKind.MINUS})


__all__ = ["TokenKind", "BINARY_OPERATORS", "UNARY_OPERATORS"]
