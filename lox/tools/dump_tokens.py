# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Scan Lox sources and print one token per line (debugging aid).

Usage:
  python -m lox.tools.dump_tokens [file ...]    # stdin when no files given
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from lox.diagnostics import ErrorReporter, format_diagnostic
from lox.scanner import scan


def dump_source(source: str, out: TextIO, reporter: ErrorReporter) -> None:
	for token in scan(source, reporter):
		print(token, file=out)


def _report(reporter: ErrorReporter, origin: str) -> None:
	for diag in reporter.diagnostics:
		print(f"{origin}: {format_diagnostic(diag)}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
	ap = argparse.ArgumentParser(prog="dump_tokens", description="Print the token stream of Lox sources")
	ap.add_argument("paths", nargs="*", type=Path, help="Lox source files (default: stdin)")
	args = ap.parse_args(argv)

	failed = False
	if not args.paths:
		reporter = ErrorReporter()
		dump_source(sys.stdin.read(), sys.stdout, reporter)
		_report(reporter, "<stdin>")
		failed = reporter.had_error
	for path in args.paths:
		if not path.is_file():
			print(f"dump_tokens: no such file: {path}", file=sys.stderr)
			failed = True
			continue
		try:
			source = path.read_text(encoding="utf-8")
		except (OSError, UnicodeDecodeError) as exc:
			print(f"dump_tokens: cannot read {path}: {exc}", file=sys.stderr)
			failed = True
			continue
		if len(args.paths) > 1:
			print(f"== {path} ==")
		reporter = ErrorReporter()
		dump_source(source, sys.stdout, reporter)
		_report(reporter, str(path))
		failed = failed or reporter.had_error

	return 1 if failed else 0


if __name__ == "__main__":
	raise SystemExit(main())
