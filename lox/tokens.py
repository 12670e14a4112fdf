# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token record shared by the scanner and everything downstream of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .token_kind import TokenKind

LiteralValue = Optional[Union[float, str]]


@dataclass(frozen=True)
class Token:
	"""A classified lexeme plus its literal value and 1-based source line."""

	kind: TokenKind
	lexeme: str
	literal: LiteralValue
	line: int

	def __str__(self) -> str:
		return f"{self.kind.name} {self.lexeme} {self.literal}"


__all__ = ["Token", "LiteralValue"]
