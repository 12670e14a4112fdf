# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic records and the error sink the scanner reports into.

Lexical errors never abort a scan. The scanner hands each one to an
ErrorReporter and keeps going; callers inspect `had_error` afterwards to
decide whether the token stream is worth parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TextIO

UNEXPECTED_CHAR = "E-LEX-UNEXPECTED-CHAR"
UNTERMINATED_STRING = "E-LEX-UNTERMINATED-STRING"


@dataclass
class Diagnostic:
	"""Represents a front-end diagnostic (error/warning) tied to a source line."""

	message: str
	line: int
	code: str | None = None
	phase: str = "lexer"
	severity: str = "error"
	notes: list[str] = field(default_factory=list)


def format_diagnostic(diag: Diagnostic) -> str:
	"""Render a diagnostic as `[line N] Error: message`."""
	label = diag.severity.capitalize()
	return f"[line {diag.line}] {label}: {diag.message}"


class ErrorReporter:
	"""
	Collects diagnostics in report order.

	When `echo` is set, every diagnostic is also written to that stream as it
	arrives (the command-line tools pass sys.stderr).
	"""

	def __init__(self, echo: Optional[TextIO] = None) -> None:
		self.echo = echo
		self.diagnostics: List[Diagnostic] = []

	@property
	def had_error(self) -> bool:
		return any(d.severity == "error" for d in self.diagnostics)

	def error(self, line: int, message: str, code: str | None = None) -> Diagnostic:
		diag = Diagnostic(message=message, line=line, code=code)
		self.report(diag)
		return diag

	def report(self, diag: Diagnostic) -> None:
		self.diagnostics.append(diag)
		if self.echo is not None:
			print(format_diagnostic(diag), file=self.echo)

	def reset(self) -> None:
		self.diagnostics.clear()


__all__ = [
	"Diagnostic",
	"ErrorReporter",
	"format_diagnostic",
	"UNEXPECTED_CHAR",
	"UNTERMINATED_STRING",
]
