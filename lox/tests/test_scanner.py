# vim: set noexpandtab: -*- indent-tabs-mode: t -*-

import pytest

from lox.diagnostics import UNEXPECTED_CHAR, UNTERMINATED_STRING, ErrorReporter
from lox.scanner import KEYWORDS, Scanner, scan
from lox.token_kind import TokenKind as T


def _kinds(tokens):
	return [t.kind for t in tokens]


def test_simple_addition() -> None:
	reporter = ErrorReporter()
	tokens = scan("1+2", reporter)
	assert _kinds(tokens) == [T.NUMBER, T.PLUS, T.NUMBER, T.EOF]
	assert [t.lexeme for t in tokens] == ["1", "+", "2", ""]
	assert tokens[0].literal == 1.0
	assert tokens[2].literal == 2.0
	assert isinstance(tokens[0].literal, float)
	assert not reporter.had_error


def test_line_comment_is_discarded_and_line_tracked() -> None:
	tokens = scan("// comment\n1")
	assert _kinds(tokens) == [T.NUMBER, T.EOF]
	assert tokens[0].line == 2
	assert tokens[-1].line == 2


def test_comment_at_end_of_input() -> None:
	assert _kinds(scan("a // trailing")) == [T.IDENTIFIER, T.EOF]


def test_unterminated_string_reports_once_and_emits_no_token() -> None:
	reporter = ErrorReporter()
	tokens = scan('"abc', reporter)
	assert _kinds(tokens) == [T.EOF]
	assert len(reporter.diagnostics) == 1
	diag = reporter.diagnostics[0]
	assert diag.message == "Unterminated string."
	assert diag.code == UNTERMINATED_STRING
	assert diag.line == 1


def test_unterminated_string_line_counts_embedded_newlines() -> None:
	reporter = ErrorReporter()
	tokens = scan('"a\nb\n', reporter)
	assert reporter.diagnostics[0].line == 3
	assert tokens[-1].line == 3


def test_string_literal_strips_quotes_and_tracks_lines() -> None:
	tokens = scan('"hi\nthere" x')
	assert tokens[0].kind is T.STRING
	assert tokens[0].literal == "hi\nthere"
	assert tokens[0].lexeme == '"hi\nthere"'
	assert tokens[0].line == 2
	assert tokens[1].kind is T.IDENTIFIER
	assert tokens[1].line == 2


def test_empty_string_literal() -> None:
	tokens = scan('""')
	assert tokens[0].kind is T.STRING
	assert tokens[0].literal == ""


def test_keyword_vs_identifier() -> None:
	assert _kinds(scan("and")) == [T.AND, T.EOF]
	assert _kinds(scan("ander")) == [T.IDENTIFIER, T.EOF]
	assert _kinds(scan("_and")) == [T.IDENTIFIER, T.EOF]


@pytest.mark.parametrize("word,kind", sorted(KEYWORDS.items()))
def test_every_reserved_word(word: str, kind: T) -> None:
	tokens = scan(word)
	assert tokens[0].kind is kind
	assert tokens[0].literal is None


def test_keyword_table_is_read_only() -> None:
	with pytest.raises(TypeError):
		KEYWORDS["let"] = T.VAR  # type: ignore[index]


def test_identifier_with_digits_and_underscores() -> None:
	tokens = scan("foo_1 Bar2")
	assert [(t.kind, t.lexeme) for t in tokens[:-1]] == [(T.IDENTIFIER, "foo_1"), (T.IDENTIFIER, "Bar2")]


def test_two_character_operators() -> None:
	tokens = scan("! != = == < <= > >=")
	assert _kinds(tokens) == [
		T.BANG,
		T.BANG_EQUAL,
		T.EQUAL,
		T.EQUAL_EQUAL,
		T.LESS,
		T.LESS_EQUAL,
		T.GREATER,
		T.GREATER_EQUAL,
		T.EOF,
	]


def test_adjacent_operators_use_single_lookahead() -> None:
	assert _kinds(scan("!==")) == [T.BANG_EQUAL, T.EQUAL, T.EOF]
	assert _kinds(scan("===")) == [T.EQUAL_EQUAL, T.EQUAL, T.EOF]


def test_single_character_punctuation() -> None:
	tokens = scan("(){},.-+;*/")
	assert _kinds(tokens) == [
		T.LEFT_PAREN,
		T.RIGHT_PAREN,
		T.LEFT_BRACE,
		T.RIGHT_BRACE,
		T.COMMA,
		T.DOT,
		T.MINUS,
		T.PLUS,
		T.SEMICOLON,
		T.STAR,
		T.SLASH,
		T.EOF,
	]


def test_decimal_number() -> None:
	tokens = scan("45.67")
	assert tokens[0].kind is T.NUMBER
	assert tokens[0].lexeme == "45.67"
	assert tokens[0].literal == 45.67


def test_trailing_dot_is_not_part_of_number() -> None:
	tokens = scan("123.")
	assert [(t.kind, t.lexeme) for t in tokens] == [(T.NUMBER, "123"), (T.DOT, "."), (T.EOF, "")]


def test_method_call_on_number_keeps_dot_separate() -> None:
	assert _kinds(scan("1.abs")) == [T.NUMBER, T.DOT, T.IDENTIFIER, T.EOF]


def test_leading_dot_is_not_a_number() -> None:
	assert _kinds(scan(".5")) == [T.DOT, T.NUMBER, T.EOF]


def test_unexpected_characters_are_reported_and_skipped() -> None:
	reporter = ErrorReporter()
	tokens = scan("1 @ 2\n#", reporter)
	assert _kinds(tokens) == [T.NUMBER, T.NUMBER, T.EOF]
	assert [(d.line, d.message, d.code) for d in reporter.diagnostics] == [
		(1, "Unexpected character.", UNEXPECTED_CHAR),
		(2, "Unexpected character.", UNEXPECTED_CHAR),
	]


def test_all_errors_surface_in_one_pass() -> None:
	reporter = ErrorReporter()
	scan('@\n$\n"open', reporter)
	assert [d.line for d in reporter.diagnostics] == [1, 2, 3]
	assert reporter.had_error


def test_whitespace_is_skipped_and_lines_counted() -> None:
	tokens = scan(" \t\r\n\n  var")
	assert _kinds(tokens) == [T.VAR, T.EOF]
	assert tokens[0].line == 3


@pytest.mark.parametrize(
	"source",
	["", "1+2", '"abc', "@@@", "// only a comment", "var x = 1;\nprint x;", "\n\n\n"],
)
def test_exactly_one_trailing_eof(source: str) -> None:
	tokens = scan(source)
	assert tokens[-1].kind is T.EOF
	assert _kinds(tokens).count(T.EOF) == 1
	assert tokens[-1].lexeme == ""
	assert tokens[-1].literal is None


def test_eof_line_is_final_line_count() -> None:
	assert scan("a\nb\nc")[-1].line == 3
	assert scan("")[-1].line == 1


def test_statement_stream() -> None:
	tokens = scan('var greeting = "hi";\nprint greeting;')
	assert _kinds(tokens) == [
		T.VAR,
		T.IDENTIFIER,
		T.EQUAL,
		T.STRING,
		T.SEMICOLON,
		T.PRINT,
		T.IDENTIFIER,
		T.SEMICOLON,
		T.EOF,
	]
	assert [t.line for t in tokens] == [1, 1, 1, 1, 1, 2, 2, 2, 2]


def test_scanner_without_reporter_still_collects_errors() -> None:
	scanner = Scanner("@")
	tokens = scanner.scan_tokens()
	assert _kinds(tokens) == [T.EOF]
	assert scanner.reporter.had_error


def test_token_str_form() -> None:
	tokens = scan('12 "s" x')
	assert [str(t) for t in tokens] == ["NUMBER 12 12.0", 'STRING "s" s', "IDENTIFIER x None", "EOF  None"]
