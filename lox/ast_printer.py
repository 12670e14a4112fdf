# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fully parenthesized rendering of expression trees, for debugging and tests.

	-123 * (45.67)   ->   (* (- 123) (group 45.67))

Purely structural: operators are named by their lexeme, never evaluated.
"""

from __future__ import annotations

from . import expr as E


def format_literal(value: object) -> str:
	"""Textual form of a literal value, using Lox spelling for nil/true/false."""
	if value is None:
		return "nil"
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return str(value)


class AstPrinter(E.ExprVisitor[str]):
	def print(self, expr: E.Expr) -> str:
		return expr.accept(self)

	def visit_binary_expr(self, expr: E.Binary) -> str:
		return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

	def visit_grouping_expr(self, expr: E.Grouping) -> str:
		return self._parenthesize("group", expr.expression)

	def visit_literal_expr(self, expr: E.Literal) -> str:
		return format_literal(expr.value)

	def visit_unary_expr(self, expr: E.Unary) -> str:
		return self._parenthesize(expr.operator.lexeme, expr.right)

	def _parenthesize(self, name: str, *exprs: E.Expr) -> str:
		parts = [name] + [e.accept(self) for e in exprs]
		return f"({' '.join(parts)})"


__all__ = ["AstPrinter", "format_literal"]
