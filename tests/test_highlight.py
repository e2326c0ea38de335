import pytest

from core.highlight import highlight_code, highlight_line
from core.models import Token, TokenKind


def _pairs(tokens):
    return [(t.text, t.kind.value) for t in tokens]


def test_comment_line_is_a_single_token_with_indentation():
    line = "    // Blink an LED"
    assert highlight_line(line) == [Token(line, TokenKind.COMMENT)]


def test_preprocessor_line_is_a_single_token():
    line = "#include <Servo.h>"
    assert highlight_line(line) == [Token(line, TokenKind.PREPROCESSOR)]


def test_indented_preprocessor_keeps_leading_whitespace():
    line = "  #define LED_PIN 13"
    assert highlight_line(line) == [Token(line, TokenKind.PREPROCESSOR)]


def test_keywords_numbers_and_plain_fragments():
    tokens = highlight_line("  digitalWrite(LED_PIN, HIGH);")
    assert _pairs(tokens) == [
        ("  ", "plain"),
        ("digitalWrite", "keyword"),
        ("(", "plain"),
        ("LED_PIN", "plain"),
        (",", "plain"),
        (" ", "plain"),
        ("HIGH", "keyword"),
        (");", "plain"),
    ]


def test_number_must_be_all_digits():
    tokens = highlight_line("delay(1000); int x1 = 10;")
    kinds = {t.text: t.kind for t in tokens}
    assert kinds["delay"] is TokenKind.KEYWORD
    assert kinds["1000"] is TokenKind.NUMBER
    assert kinds["x1"] is TokenKind.PLAIN
    assert kinds["10"] is TokenKind.NUMBER
    assert kinds["int"] is TokenKind.KEYWORD


def test_keywords_are_case_sensitive():
    tokens = highlight_line("Void VOID void")
    assert [t.kind for t in tokens if t.text.strip()] == [
        TokenKind.PLAIN, TokenKind.PLAIN, TokenKind.KEYWORD,
    ]


def test_trailing_comment_is_not_a_whole_line_comment():
    tokens = highlight_line("int x = 5; // five")
    assert tokens[0] == Token("int", TokenKind.KEYWORD)
    assert TokenKind.COMMENT not in {t.kind for t in tokens}


def test_empty_line_has_no_tokens():
    assert highlight_line("") == []


@pytest.mark.parametrize("line", [
    "void loop() {",
    "\tint  raw =analogRead(A0);\t",
    "   ",
    "x-1+2*3/4",
    "if (a>=b && c!=d) { return; }",
    "Serial.println(\"héllo wörld\");",
    "arm.write(angle);\r",
    "int 3d = 0x1F;",
])
def test_token_texts_rebuild_the_line(line):
    tokens = highlight_line(line)
    assert "".join(t.text for t in tokens) == line
    assert all(t.text for t in tokens)


def test_highlight_code_one_list_per_line():
    code = "// header\n#define PIN 2\n\nvoid setup() {}"
    lines = highlight_code(code)

    assert len(lines) == 4
    assert lines[0][0].kind is TokenKind.COMMENT
    assert lines[1][0].kind is TokenKind.PREPROCESSOR
    assert lines[2] == []
    assert lines[3][0] == Token("void", TokenKind.KEYWORD)


def test_custom_keyword_set():
    tokens = highlight_line("def run", keywords=frozenset({"def"}))
    assert tokens[0] == Token("def", TokenKind.KEYWORD)
