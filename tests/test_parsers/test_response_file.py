import pytest

from slashargs.parser.response_file import lex_response_file, read_response_file


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("   \n\t ", []),
        ("a b  c", ["a", "b", "c"]),
        ("a\nb\r\nc\n", ["a", "b", "c"]),
        ("/verbose /count:3", ["/verbose", "/count:3"]),
        ("# comment\n/a\n", ["/a"]),
        ("/a # trailing comment\n/b", ["/a", "/b"]),
        ("/a # comment without newline", ["/a"]),
        ("a#b", ["a#b"]),
        ('"a b" c', ["a b", "c"]),
        ('"a\nb"', ["a\nb"]),
        ('x"y z"w', ["xy zw"]),
        ("//a", ["//a"]),
        ("--a", ["--a"]),
        ("/-a", ["/-a"]),
    ],
)
def test_lex_tokens(text, expected):
    result = lex_response_file(text)
    assert result.tokens == expected
    assert not result.unbalanced


def test_quoted_value_keeps_inner_space():
    result = lex_response_file('/name:"John Doe"\n')
    assert result.tokens == ["/name:John Doe"]


def test_odd_slash_run_before_quote_is_literal():
    # k // 2 copies of the run character, then the quote itself as a literal
    assert lex_response_file('-"x').tokens == ['"x']
    assert lex_response_file('---"x').tokens == ['-"x']
    assert lex_response_file('/"x').tokens == ['"x']
    assert lex_response_file('///"x').tokens == ['/"x']


def test_even_slash_run_before_quote_toggles_quoting():
    result = lex_response_file('--"x')
    assert result.unbalanced
    assert result.tokens == []

    result = lex_response_file('--"x y" z')
    assert result.tokens == ["-x y", "z"]

    result = lex_response_file('a----"b c"')
    assert result.tokens == ["a--b c"]


def test_run_character_is_the_one_that_started_it():
    # "/-" is a run of one '/' then a run of one '-' followed by the quote
    assert lex_response_file('/-"x').tokens == ['/"x']


def test_empty_quoted_token_between_whitespace():
    assert lex_response_file('"" b').tokens == ["", "b"]


def test_unbalanced_quote_keeps_earlier_tokens():
    result = lex_response_file('/a /b:"unterminated value')
    assert result.unbalanced
    assert result.tokens == ["/a"]


def test_read_response_file(tmp_path):
    path = tmp_path / "args.rsp"
    path.write_text("\ufeff/a /b", encoding="utf-8")
    assert read_response_file(path) == "/a /b"


def test_read_response_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_response_file(tmp_path / "missing.rsp")
