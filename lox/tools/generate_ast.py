# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generate the syntax-tree node module(s) from compact rule strings.

Each rule reads `"Variant : Type field, Type field"`. For every base name the
generator emits one Python module holding the visitor ABC (one
`visit_<variant>_<base>` method per rule), the abstract base with `accept`,
and a frozen dataclass per variant. Keeping the node classes and the visitor
in one generated file means they cannot drift apart.

Usage:
  python -m lox.tools.generate_ast <output directory>

Output is deterministic: the same rules always produce byte-identical text.
"""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from lark import Lark, Tree, UnexpectedInput

EXIT_USAGE = 64  # sysexits EX_USAGE
EXIT_DATAERR = 65  # sysexits EX_DATAERR
EXIT_CANTCREAT = 73  # sysexits EX_CANTCREAT

_GRAMMAR_PATH = Path(__file__).with_name("grammar_rule.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text(encoding="utf-8")

_PARSER = Lark(_GRAMMAR_SRC, parser="lalr", start="start")

EXPR_RULES: Tuple[str, ...] = (
	"Binary   : Expr left, Token operator, Expr right",
	"Grouping : Expr expression",
	"Literal  : object value",
	"Unary    : Token operator, Expr right",
)

# base name -> rules; one output module per entry.
AST_DEFINITIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (("Expr", EXPR_RULES),)

_HEADER = "# vim: set noexpandtab: -*- indent-tabs-mode: t -*-"


class GrammarRuleError(ValueError):
	"""A rule string could not be parsed or is inconsistent."""


@dataclass(frozen=True)
class FieldDef:
	type_name: str
	name: str


@dataclass(frozen=True)
class RuleDef:
	name: str
	fields: Tuple[FieldDef, ...]


def snake_case(name: str) -> str:
	return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def parse_rule(rule: str) -> RuleDef:
	try:
		tree = _PARSER.parse(rule)
	except UnexpectedInput as exc:
		raise GrammarRuleError(f"malformed AST rule {rule.strip()!r}: {exc}") from exc
	name_tok = tree.children[0]
	fields: List[FieldDef] = []
	for child in tree.children[1:]:
		if not isinstance(child, Tree) or child.data != "field":
			continue
		type_tok, field_tok = child.children
		fields.append(FieldDef(type_name=str(type_tok), name=str(field_tok)))
	seen = set()
	for f in fields:
		if f.name in seen:
			raise GrammarRuleError(f"duplicate field {f.name!r} in AST rule {str(name_tok)!r}")
		seen.add(f.name)
	return RuleDef(name=str(name_tok), fields=tuple(fields))


def _parse_rules(rules: Iterable[str]) -> List[RuleDef]:
	parsed = [parse_rule(r) for r in rules]
	names = [r.name for r in parsed]
	dupes = sorted({n for n in names if names.count(n) > 1})
	if dupes:
		raise GrammarRuleError(f"duplicate AST variant(s): {', '.join(dupes)}")
	return parsed


def visit_method_name(variant: str, base_name: str) -> str:
	return f"visit_{snake_case(variant)}_{snake_case(base_name)}"


def define_ast(base_name: str, rules: Sequence[str]) -> str:
	"""Render the module text for `base_name` and its rules."""
	parsed = _parse_rules(rules)
	visitor = f"{base_name}Visitor"
	param = snake_case(base_name)
	lines: List[str] = [
		_HEADER,
		"# Generated by lox.tools.generate_ast; do not edit by hand.",
		'"""',
		f"{base_name} syntax-tree nodes and the {visitor} contract.",
		'"""',
		"",
		"from __future__ import annotations",
		"",
		"from abc import ABC, abstractmethod",
		"from dataclasses import dataclass",
		"from typing import Generic, TypeVar",
		"",
		"from .tokens import Token",
		"",
		'R = TypeVar("R")',
		"",
		"",
		f"class {visitor}(ABC, Generic[R]):",
	]
	lines.extend(_define_visitor(parsed, base_name, param))
	lines.extend(
		[
			"",
			"",
			f"class {base_name}(ABC):",
			"\t@abstractmethod",
			f"\tdef accept(self, visitor: {visitor}[R]) -> R: ...",
		]
	)
	for rule in parsed:
		lines.extend(_define_type(rule, base_name, visitor))
	lines.extend(["", "", "__all__ = ["])
	for exported in [visitor, base_name] + [r.name for r in parsed]:
		lines.append(f'\t"{exported}",')
	lines.append("]")
	return "\n".join(lines) + "\n"


def _define_visitor(rules: Sequence[RuleDef], base_name: str, param: str) -> List[str]:
	out: List[str] = []
	for idx, rule in enumerate(rules):
		if idx:
			out.append("")
		out.append("\t@abstractmethod")
		out.append(f"\tdef {visit_method_name(rule.name, base_name)}(self, {param}: {rule.name}) -> R: ...")
	return out


def _define_type(rule: RuleDef, base_name: str, visitor: str) -> List[str]:
	out = ["", "", "@dataclass(frozen=True)", f"class {rule.name}({base_name}):"]
	for f in rule.fields:
		out.append(f"\t{f.name}: {f.type_name}")
	out.append("")
	out.append(f"\tdef accept(self, visitor: {visitor}[R]) -> R:")
	out.append(f"\t\treturn visitor.{visit_method_name(rule.name, base_name)}(self)")
	return out


def _write_text(path: Path, text: str) -> None:
	with path.open("w", encoding="utf-8", newline="\n") as fh:
		fh.write(text)


def write_ast(output_dir: Path, base_name: str, rules: Sequence[str]) -> Path:
	"""Render and write `<output_dir>/<snake_case(base_name)>.py`."""
	text = define_ast(base_name, rules)
	path = Path(output_dir) / f"{snake_case(base_name)}.py"
	_write_text(path, text)
	return path


class _UsageError(Exception):
	pass


class _ArgumentParser(argparse.ArgumentParser):
	"""Reports every argument problem as a usage error (EX_USAGE)."""

	def error(self, message: str):  # type: ignore[override]
		raise _UsageError(message)


def _usage() -> int:
	print("Usage: generate_ast <output directory>", file=sys.stderr)
	return EXIT_USAGE


def main(argv: list[str] | None = None) -> int:
	ap = _ArgumentParser(prog="generate_ast", description="Generate Lox syntax-tree node modules")
	ap.add_argument("output_dir", nargs="*", type=Path, help="Directory to write generated modules into")
	try:
		args = ap.parse_args(argv)
	except _UsageError:
		return _usage()

	if len(args.output_dir) != 1:
		return _usage()
	output_dir: Path = args.output_dir[0]
	if not output_dir.is_dir():
		print(f"generate_ast: not a directory: {output_dir}", file=sys.stderr)
		return 1

	# Render everything up front so a bad rule never leaves a partial file.
	rendered: List[Tuple[Path, str]] = []
	try:
		for base_name, rules in AST_DEFINITIONS:
			rendered.append((output_dir / f"{snake_case(base_name)}.py", define_ast(base_name, rules)))
	except GrammarRuleError as exc:
		print(f"generate_ast: {exc}", file=sys.stderr)
		return EXIT_DATAERR

	for path, text in rendered:
		try:
			_write_text(path, text)
		except OSError as exc:
			print(f"generate_ast: cannot write {path}: {exc}", file=sys.stderr)
			return EXIT_CANTCREAT
		print(f"[ok] {path}")
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
