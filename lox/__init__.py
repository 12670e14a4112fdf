# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lox front end: scanner, token model, expression tree and debug printer.

Pipeline placement:
  source text -> Scanner -> Tokens -> (parser) -> Expr tree -> visitors
"""

from __future__ import annotations

from .ast_printer import AstPrinter
from .diagnostics import Diagnostic, ErrorReporter
from .scanner import KEYWORDS, Scanner, scan
from .token_kind import TokenKind
from .tokens import Token

__all__ = [
	"AstPrinter",
	"Diagnostic",
	"ErrorReporter",
	"KEYWORDS",
	"Scanner",
	"scan",
	"Token",
	"TokenKind",
]
