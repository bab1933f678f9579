"""Tests for the Pygments grammars — raw token types, real lexing."""

from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Name,
    Operator,
    String,
    Whitespace,
)

from codeblock.lexers import ShellConsoleLexer, ShellTranscriptLexer


def _tokens(lexer, text):
    return [(ttype, value) for _, ttype, value in lexer.get_tokens_unprocessed(text)]


def _significant(lexer, text):
    """Token stream without whitespace tokens."""
    return [(t, v) for t, v in _tokens(lexer, text) if v.strip()]


class TestShellTranscriptLexer:
    def test_command_position(self):
        toks = _significant(ShellTranscriptLexer(), "brew install migraine\n")
        assert toks == [
            (Name.Function, "brew"),
            (Name, "install"),
            (Name, "migraine"),
        ]

    def test_comment_line(self):
        toks = _tokens(ShellTranscriptLexer(), "# Install Migraine\n")
        assert toks[0] == (Comment.Single, "# Install Migraine")

    def test_trailing_comment(self):
        toks = _significant(ShellTranscriptLexer(), "ls -la # list\n")
        assert toks[-1] == (Comment.Single, "# list")

    def test_hash_inside_word_is_not_comment(self):
        toks = _significant(ShellTranscriptLexer(), "echo a#b\n")
        assert toks[1] == (Name, "a#b")

    def test_option_and_assignment_argument(self):
        toks = _significant(
            ShellTranscriptLexer(), "migraine run wf -v PROJECT_PATH=/path\n"
        )
        assert (Name.Attribute, "-v") in toks
        assert (Name.Variable, "PROJECT_PATH") in toks
        assert (Operator, "=") in toks
        assert toks[-1] == (Name, "/path")

    def test_leading_assignment_keeps_command_position(self):
        toks = _significant(ShellTranscriptLexer(), "FOO=bar make\n")
        assert toks == [
            (Name.Variable, "FOO"),
            (Operator, "="),
            (Name, "bar"),
            (Name.Function, "make"),
        ]

    def test_control_operator_returns_to_command_position(self):
        toks = _significant(ShellTranscriptLexer(), "make && make install\n")
        assert toks == [
            (Name.Function, "make"),
            (Operator, "&&"),
            (Name.Function, "make"),
            (Name, "install"),
        ]

    def test_reserved_words(self):
        toks = _significant(ShellTranscriptLexer(), "if true; then echo ok; fi\n")
        assert toks[0] == (Keyword, "if")
        assert (Keyword, "then") in toks
        assert toks[-1] == (Keyword, "fi")

    def test_reserved_word_prefix_is_a_command(self):
        toks = _significant(ShellTranscriptLexer(), "docker ps\n")
        assert toks[0] == (Name.Function, "docker")

    def test_double_quoted_string_with_variable(self):
        toks = _significant(ShellTranscriptLexer(), 'echo "hi $USER"\n')
        assert toks[1:] == [
            (String.Double, '"'),
            (String.Double, "hi "),
            (Name.Variable, "$USER"),
            (String.Double, '"'),
        ]

    def test_single_quoted_string(self):
        toks = _significant(ShellTranscriptLexer(), "echo 'a $b'\n")
        assert toks[1] == (String.Single, "'a $b'")

    def test_redirections(self):
        toks = _significant(ShellTranscriptLexer(), "run > out.txt 2>&1\n")
        assert (Operator, ">") in toks
        assert (Operator, "2>&1") in toks
        assert (Name, "out.txt") in toks

    def test_command_substitution(self):
        toks = _significant(ShellTranscriptLexer(), "cd $(pwd)\n")
        assert toks == [
            (Name.Function, "cd"),
            (Name.Variable, "$("),
            (Name.Function, "pwd"),
            (Name.Variable, ")"),
        ]

    def test_heredoc(self):
        text = "cat <<EOF\nbody\nEOF\n"
        toks = _significant(ShellTranscriptLexer(), text)
        assert toks[1] == (String.Heredoc, "<<EOF\nbody\nEOF")

    def test_heredoc_terminator_must_fill_its_line(self):
        text = "cat <<EOF\nEOF x\n  EOF\nls\n"
        toks = _significant(ShellTranscriptLexer(), text)
        assert toks[1] == (String.Heredoc, "<<EOF\nEOF x\n  EOF")
        assert toks[2] == (Name.Function, "ls")

    def test_lossless(self, pipeline_script):
        values = "".join(v for _, v in _tokens(ShellTranscriptLexer(), pipeline_script))
        assert values == pipeline_script


class TestShellConsoleLexer:
    def test_prompt_and_output(self):
        text = "$ brew install migraine\n==> Pouring migraine\n"
        toks = _significant(ShellConsoleLexer(), text)
        assert toks[0] == (Generic.Prompt, "$ ")
        assert toks[1] == (Name.Function, "brew")
        assert toks[-1] == (Generic.Output, "==> Pouring migraine")

    def test_whitespace_only_line_is_not_output(self):
        toks = _tokens(ShellConsoleLexer(), "$ ls\n   \n")
        assert (Whitespace, "   ") in toks
        assert all(t is not Generic.Output for t, _ in toks)

    def test_lossless(self):
        text = "$ ls -la\ntotal 0\n% echo $SHELL\n/bin/zsh\n"
        values = "".join(v for _, v in _tokens(ShellConsoleLexer(), text))
        assert values == text
