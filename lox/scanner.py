# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Hand-written scanner: source text -> list of Tokens.

One linear pass with at most two characters of lookahead. The cursors
(`start`, `current`, `line`) live on the Scanner instance and are only
touched from `scan_tokens`; a Scanner is single-use.

Lexical errors are reported to the ErrorReporter and scanning resumes at the
next character, so one call surfaces every problem in the input. The result
always ends with exactly one EOF token.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional

from .diagnostics import UNEXPECTED_CHAR, UNTERMINATED_STRING, ErrorReporter
from .token_kind import TokenKind as T
from .tokens import LiteralValue, Token

KEYWORDS: Mapping[str, T] = MappingProxyType(
	{
		"and": T.AND,
		"class": T.CLASS,
		"else": T.ELSE,
		"false": T.FALSE,
		"for": T.FOR,
		"fun": T.FUN,
		"if": T.IF,
		"nil": T.NIL,
		"or": T.OR,
		"print": T.PRINT,
		"return": T.RETURN,
		"super": T.SUPER,
		"this": T.THIS,
		"true": T.TRUE,
		"var": T.VAR,
		"while": T.WHILE,
	}
)

_SINGLE_CHAR: Mapping[str, T] = MappingProxyType(
	{
		"(": T.LEFT_PAREN,
		")": T.RIGHT_PAREN,
		"{": T.LEFT_BRACE,
		"}": T.RIGHT_BRACE,
		",": T.COMMA,
		".": T.DOT,
		"-": T.MINUS,
		"+": T.PLUS,
		";": T.SEMICOLON,
		"*": T.STAR,
	}
)

# first char -> (kind when followed by '=', kind otherwise)
_WITH_EQUAL: Mapping[str, tuple[T, T]] = MappingProxyType(
	{
		"!": (T.BANG_EQUAL, T.BANG),
		"=": (T.EQUAL_EQUAL, T.EQUAL),
		"<": (T.LESS_EQUAL, T.LESS),
		">": (T.GREATER_EQUAL, T.GREATER),
	}
)

_WHITESPACE = frozenset(" \r\t")


def _is_digit(ch: str) -> bool:
	return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
	return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alnum(ch: str) -> bool:
	return _is_alpha(ch) or _is_digit(ch)


class Scanner:
	"""Scans one source string. Construct a new Scanner per input."""

	def __init__(self, source: str, reporter: Optional[ErrorReporter] = None) -> None:
		self.source = source
		self.reporter = reporter if reporter is not None else ErrorReporter()
		self.tokens: List[Token] = []
		self.start = 0
		self.current = 0
		self.line = 1

	def scan_tokens(self) -> List[Token]:
		while not self._is_at_end():
			self.start = self.current
			self._scan_token()
		self.tokens.append(Token(T.EOF, "", None, self.line))
		return self.tokens

	def _scan_token(self) -> None:
		ch = self._advance()
		if ch in _SINGLE_CHAR:
			self._add_token(_SINGLE_CHAR[ch])
		elif ch in _WITH_EQUAL:
			two, one = _WITH_EQUAL[ch]
			self._add_token(two if self._match("=") else one)
		elif ch == "/":
			if self._match("/"):
				# Comment runs to end of line; the newline is scanned normally.
				while self._peek() != "\n" and not self._is_at_end():
					self._advance()
			else:
				self._add_token(T.SLASH)
		elif ch in _WHITESPACE:
			pass
		elif ch == "\n":
			self.line += 1
		elif ch == '"':
			self._string()
		elif _is_digit(ch):
			self._number()
		elif _is_alpha(ch):
			self._identifier()
		else:
			self.reporter.error(self.line, "Unexpected character.", code=UNEXPECTED_CHAR)

	def _string(self) -> None:
		while self._peek() != '"' and not self._is_at_end():
			if self._peek() == "\n":
				self.line += 1
			self._advance()
		if self._is_at_end():
			self.reporter.error(self.line, "Unterminated string.", code=UNTERMINATED_STRING)
			return
		self._advance()  # closing quote
		self._add_token(T.STRING, self.source[self.start + 1 : self.current - 1])

	def _number(self) -> None:
		while _is_digit(self._peek()):
			self._advance()
		# A '.' belongs to the number only when a digit follows it.
		if self._peek() == "." and _is_digit(self._peek_next()):
			self._advance()
			while _is_digit(self._peek()):
				self._advance()
		self._add_token(T.NUMBER, float(self.source[self.start : self.current]))

	def _identifier(self) -> None:
		while _is_alnum(self._peek()):
			self._advance()
		text = self.source[self.start : self.current]
		self._add_token(KEYWORDS.get(text, T.IDENTIFIER))

	def _is_at_end(self) -> bool:
		return self.current >= len(self.source)

	def _advance(self) -> str:
		ch = self.source[self.current]
		self.current += 1
		return ch

	def _match(self, expected: str) -> bool:
		if self._is_at_end() or self.source[self.current] != expected:
			return False
		self.current += 1
		return True

	def _peek(self) -> str:
		if self._is_at_end():
			return "\0"
		return self.source[self.current]

	def _peek_next(self) -> str:
		if self.current + 1 >= len(self.source):
			return "\0"
		return self.source[self.current + 1]

	def _add_token(self, kind: T, literal: LiteralValue = None) -> None:
		text = self.source[self.start : self.current]
		self.tokens.append(Token(kind, text, literal, self.line))


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
	"""Scan `source` in one pass; diagnostics go to `reporter` if given."""
	return Scanner(source, reporter).scan_tokens()


__all__ = ["KEYWORDS", "Scanner", "scan"]
