import pytest

from minishellpy.environment import Environment
from minishellpy.tokenizer import count_words, read_token, split_token
from minishellpy.tokens import TokenType


@pytest.fixture
def env():
    return Environment({"USER": "alice", "HOME": "/home/user"})


def words(tokens):
    return [t.word for t in tokens]


def test_simple_words(env):
    line = "echo hello world"
    assert words(split_token(line, env)) == line.split()


def test_ranks_start_at_one_and_increase(env):
    tokens = split_token("ls -l | wc -c", env)
    assert [t.rank for t in tokens] == list(range(1, len(tokens) + 1))


def test_extra_spaces_ignored(env):
    line = "   ls    -l   "
    assert words(split_token(line, env)) == line.split()


def test_operator_without_spaces(env):
    tokens = split_token("a>b", env)
    assert words(tokens) == ["a", ">", "b"]
    assert [t.type for t in tokens] == [TokenType.WORD, TokenType.OUTPUT, TokenType.WORD]


@pytest.mark.parametrize(
    "op, ttype",
    [
        ("<<", TokenType.HEREDOC),
        (">>", TokenType.OUT_HEREDOC),
        ("<", TokenType.INPUT),
        (">", TokenType.OUTPUT),
        ("|", TokenType.PIPE),
    ],
)
def test_each_operator(env, op, ttype):
    tokens = split_token(f"x {op} y", env)
    assert words(tokens) == ["x", op, "y"]
    assert tokens[1].type is ttype
    assert tokens[0].is_word() and tokens[2].is_word()
    assert not tokens[1].is_word()


def test_double_quoted_word_kept_together(env):
    assert words(split_token('echo "hello world"', env)) == ["echo", "hello world"]


def test_metachar_inside_quotes_is_literal(env):
    tokens = split_token("echo 'a|b>c'", env)
    assert words(tokens) == ["echo", "a|b>c"]
    assert all(t.type is TokenType.WORD for t in tokens)


def test_adjacent_quoted_parts_joined(env):
    assert words(split_token("\"ab\"'cd'ef", env)) == ["abcdef"]


def test_variable_expanded(env):
    assert words(split_token("echo $USER", env)) == ["echo", "alice"]


def test_variable_in_double_quotes_expanded(env):
    assert words(split_token('echo "$HOME x"', env)) == ["echo", "/home/user x"]


def test_single_quoted_variable_not_expanded(env):
    assert words(split_token("echo '$USER'", env)) == ["echo", "$USER"]


def test_blank_line_gives_no_tokens(env):
    assert split_token("", env) == []
    assert split_token("    ", env) == []


@pytest.mark.parametrize(
    "line",
    ["ls", "ls -l", "cat<in>out", "a|b|c", "echo 'x y' \"z w\"", "<< EOF cat", "  a  >>b "],
)
def test_count_words_matches_tokens(env, line):
    assert count_words(line, " ") == len(split_token(line, env))


def test_count_words_custom_separator():
    line = "a:b::c"
    assert count_words(line, ":") == len([p for p in line.split(":") if p])


def test_read_token_word():
    s = "  ls -l"
    ttype, word, end = read_token(s, 0)
    assert ttype is TokenType.WORD
    assert word == "ls"
    assert s[end:] == " -l"


def test_read_token_operator():
    s = "<<EOF"
    ttype, word, end = read_token(s, 0)
    assert ttype is TokenType.HEREDOC
    assert word == "<<"
    assert s[end:] == "EOF"


def test_read_token_keeps_quotes_raw():
    s = "'a b' c"
    _, word, end = read_token(s, 0)
    assert word == "'a b'"
    assert s[end:] == " c"


def test_read_token_at_end_raises():
    with pytest.raises(ValueError):
        read_token("ls   ", 2)