import pytest

from htmluna.errors import MalformedMarkupError, TokenizeError
from htmluna.formatter.tokenizer import TagLexeme, next_tag, tokenize
from htmluna.types import LexemeKind, TagName


class TestNextTag:
    def test_opening(self) -> None:
        lexeme, remaining = next_tag("<div><p></p></div>")
        assert lexeme == TagLexeme(LexemeKind.OPENING, TagName.DIV, 0)
        assert remaining == "<p></p></div>"

    def test_closing(self) -> None:
        lexeme, remaining = next_tag("</b>")
        assert lexeme.kind == LexemeKind.CLOSING
        assert lexeme.tag == TagName.B
        assert remaining == ""

    @pytest.mark.parametrize("html", ["<img />", "<img/>", "<img   />", "< img / >"])
    def test_self_closing_whitespace(self, html: str) -> None:
        lexeme, remaining = next_tag(html)
        assert lexeme == TagLexeme(LexemeKind.SELF_CLOSING, TagName.IMG, 0)
        assert remaining == ""

    def test_skips_leading_whitespace(self) -> None:
        lexeme, remaining = next_tag("  \n\t<p> </p>", position=10)
        assert lexeme == TagLexeme(LexemeKind.OPENING, TagName.P, 14)
        assert remaining == " </p>"

    @pytest.mark.parametrize("html", ["", "   ", "\n\n"])
    def test_end_of_input(self, html: str) -> None:
        assert next_tag(html) == (None, "")

    def test_missing_closing_bracket(self) -> None:
        with pytest.raises(TokenizeError) as excinfo:
            next_tag("<div")
        assert excinfo.value.position == 0

    def test_text_outside_tag(self) -> None:
        with pytest.raises(TokenizeError):
            next_tag("hello<div>")

    @pytest.mark.parametrize("html", ["<span>", "</section>", "<br />", "<>", "</>", "<DIV>"])
    def test_unknown_tag(self, html: str) -> None:
        with pytest.raises(TokenizeError):
            next_tag(html)

    def test_bracket_inside_tag(self) -> None:
        with pytest.raises(TokenizeError):
            next_tag("<div<p>")

    @pytest.mark.parametrize("html", ["<div />", "<p/>", "<img>", "</img>"])
    def test_wrong_tag_form(self, html: str) -> None:
        with pytest.raises(MalformedMarkupError):
            next_tag(html)


class TestTokenize:
    def test_sequence(self) -> None:
        lexemes = list(tokenize("<div><img /></div>"))
        assert lexemes == [
            TagLexeme(LexemeKind.OPENING, TagName.DIV, 0),
            TagLexeme(LexemeKind.SELF_CLOSING, TagName.IMG, 5),
            TagLexeme(LexemeKind.CLOSING, TagName.DIV, 12),
        ]

    def test_positions_with_whitespace(self) -> None:
        lexemes = list(tokenize(" <p>\n  </p> "))
        assert [lexeme.position for lexeme in lexemes] == [1, 7]

    def test_empty(self) -> None:
        assert list(tokenize("")) == []

    def test_truncated_tail(self) -> None:
        lexemes = tokenize("<p></p><b")
        assert next(lexemes).kind == LexemeKind.OPENING
        assert next(lexemes).kind == LexemeKind.CLOSING
        with pytest.raises(TokenizeError) as excinfo:
            next(lexemes)
        assert excinfo.value.position == 7

    def test_str(self) -> None:
        assert [str(lexeme) for lexeme in tokenize("<b><img/></b>")] == [
            "<b>", "<img />", "</b>",
        ]
