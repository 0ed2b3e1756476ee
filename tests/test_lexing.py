import pytest

from zset.errors import LexError
from zset.lexing import (
    Comment, Delim, Ident, Keyword, Number, Op, TokenizerConfig, WS,
    build_tokenizers, lex, show_tokens, significant,
)


class TestLexer:

    def test_assignment_tokens(self):
        tokens = significant(lex("x = 3"))
        assert tokens == [Ident("x"), Op("="), Number("3")]

    def test_whitespace_is_kept_until_filtered(self):
        tokens = lex("1  +\n2")
        assert any(isinstance(t, WS) for t in tokens)
        assert len(significant(tokens)) == 3

    def test_keywords_and_identifiers(self):
        tokens = significant(lex("x cong modulus"))
        assert tokens == [Ident("x"), Keyword("cong"), Ident("modulus")]

    def test_system_brackets_win_over_single_braces(self):
        tokens = significant(lex("{[x: x cong 1 (2)]}"))
        assert tokens[0] == Delim("{[")
        assert tokens[-1] == Delim("]}")

    def test_set_of_index_closes_as_system_bracket(self):
        tokens = significant(lex("{s[1]}"))
        assert tokens[-1] == Delim("]}")

    def test_numbers_have_no_leading_zero(self):
        tokens = significant(lex("007"))
        assert tokens == [Number("0"), Number("0"), Number("7")]

    def test_comment_token(self):
        tokens = significant(lex("--- a note --- 3"))
        assert isinstance(tokens[0], Comment)
        assert tokens[0].text.strip() == "a note"
        assert tokens[1] == Number("3")

    def test_unclosed_comment(self):
        with pytest.raises(LexError, match="never closed"):
            lex("1 --- dangling")

    def test_unexpected_character(self):
        with pytest.raises(LexError) as info:
            lex("1 + $")
        assert info.value.pos == 4
        assert "$" in str(info.value)

    def test_custom_tokenizer_config(self):
        config = TokenizerConfig.default()
        config.keywords.add("let")
        tokens = significant(lex("let x", build_tokenizers(config)))
        assert tokens[0] == Keyword("let")

    def test_show_tokens(self):
        assert show_tokens(lex("x  =\t3")) == "x = 3"
