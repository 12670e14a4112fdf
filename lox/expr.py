# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# Generated by lox.tools.generate_ast; do not edit by hand.
"""
Expr syntax-tree nodes and the ExprVisitor contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from .tokens import Token

R = TypeVar("R")


class ExprVisitor(ABC, Generic[R]):
	@abstractmethod
	def visit_binary_expr(self, expr: Binary) -> R: ...

	@abstractmethod
	def visit_grouping_expr(self, expr: Grouping) -> R: ...

	@abstractmethod
	def visit_literal_expr(self, expr: Literal) -> R: ...

	@abstractmethod
	def visit_unary_expr(self, expr: Unary) -> R: ...


class Expr(ABC):
	@abstractmethod
	def accept(self, visitor: ExprVisitor[R]) -> R: ...


@dataclass(frozen=True)
class Binary(Expr):
	left: Expr
	operator: Token
	right: Expr

	def accept(self, visitor: ExprVisitor[R]) -> R:
		return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
	expression: Expr

	def accept(self, visitor: ExprVisitor[R]) -> R:
		return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
	value: object

	def accept(self, visitor: ExprVisitor[R]) -> R:
		return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
	operator: Token
	right: Expr

	def accept(self, visitor: ExprVisitor[R]) -> R:
		return visitor.visit_unary_expr(self)


__all__ = [
	"ExprVisitor",
	"Expr",
	"Binary",
	"Grouping",
	"Literal",
	"Unary",
]
