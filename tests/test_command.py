import pytest

from pypipex.command import parse_command


def test_plain_words():
    assert parse_command("ls -l") == ["ls", "-l"]


def test_repeated_and_surrounding_spaces():
    assert parse_command("  wc   -l") == ["wc", "-l"]


def test_trailing_spaces_are_ignored():
    assert parse_command("ls -l   ") == ["ls", "-l"]


def test_single_quoted_argument_keeps_spaces():
    assert parse_command("grep 'a b'") == ["grep", "a b"]


def test_double_quoted_argument_keeps_spaces():
    assert parse_command('awk "{print $1}"') == ["awk", "{print $1}"]


def test_other_quote_inside_quoted_token_is_literal():
    assert parse_command("echo \"it's\"") == ["echo", "it's"]


def test_empty_quotes_give_empty_word():
    assert parse_command("echo ''") == ["echo", ""]


def test_quote_inside_word_is_literal():
    assert parse_command("a'b c'") == ["a'b", "c'"]


def test_word_directly_after_closing_quote():
    assert parse_command("'a'b") == ["a", "b"]


def test_unterminated_quote_runs_to_end():
    assert parse_command("echo 'abc def") == ["echo", "abc def"]


def test_empty_text_has_no_words():
    assert parse_command("") == []


def test_only_spaces_is_one_word():
    assert parse_command("   ") == ["   "]


@pytest.mark.parametrize("text", ["echo '", 'cat "', "'"])
def test_lone_quote_at_end_is_error(text):
    with pytest.raises(ValueError):
        parse_command(text)


@pytest.mark.parametrize("text", ["cat", "grep -n foo", "tr a b"])
def test_unquoted_matches_split(text):
    assert parse_command(text) == text.split()