"""End-to-end failure messages: require_that(...).is_equal_to(...) rendered for each terminal encoding"""

import pytest

from valdiff.core.diff.colors import TextOnly, color_scheme_for
from valdiff.core.diff.generator import EOS_MARKER as EOS, NEWLINE_MARKER as NL
from valdiff.core.models import TerminalEncoding
from valdiff.validation import ValidationError, require_that


PAD = TextOnly.DIFF_PADDING
EQ = TextOnly.DIFF_EQUAL
DEL = TextOnly.DIFF_DELETE
INS = TextOnly.DIFF_INSERT


def _message(actual, expected, settings) -> str:
    with pytest.raises(ValidationError) as exc_info:
        require_that(actual, "actual", settings).is_equal_to(expected)
    return str(exc_info.value)


# --- single-line text ---

def test_delete_then_insert(text_settings):
    expected_message = (
        "Actual  : actual" + PAD * 8 + EOS + "\n"
        "Diff    : " + DEL * 6 + INS * 8 + EQ * 2 + "\n"
        "Expected: " + PAD * 6 + "expected" + EOS
    )
    assert expected_message in _message("actual", "expected", text_settings)


def test_missing_whitespace(text_settings):
    """Whitespace differences are visible in text-only diffs."""
    expected_message = (
        'Actual  : "key": "value "' + EOS + "\n"
        "Diff    : " + EQ * 13 + DEL + EQ * 3 + "\n"
        'Expected: "key": "value' + PAD + '"' + EOS
    )
    assert expected_message in _message('"key": "value "', '"key": "value"', text_settings)


def test_change_in_middle_of_sentence(text_settings):
    expected_message = (
        "Actual  : The dog" + PAD * 3 + " is br" + PAD + "own" + EOS + "\n"
        "Diff    : " + EQ * 4 + DEL * 3 + INS * 3 + EQ * 4 + DEL * 2 + INS + EQ * 5 + "\n"
        "Expected: The " + PAD * 3 + "fox is " + PAD * 2 + "down" + EOS
    )
    assert expected_message in _message("The dog is brown", "The fox is down", text_settings)


@pytest.mark.parametrize("actual, expected, expected_message", [
    ("you like me?", "Don't you like me?",
     "Actual  : " + PAD * 6 + "you like me?" + EOS + "\n"
     "Diff    : " + INS * 6 + EQ * 14 + "\n"
     "Expected: Don't you like me?" + EOS),
    ("I lice dogs", "I like dogs",
     "Actual  : I lic" + PAD + "e dogs" + EOS + "\n"
     "Diff    : " + EQ * 4 + DEL + INS + EQ * 8 + "\n"
     "Expected: I li" + PAD + "ke dogs" + EOS),
    ("I like dog", "I like dogs",
     "Actual  : I like dog" + PAD + EOS + "\n"
     "Diff    : " + EQ * 10 + INS + EQ * 2 + "\n"
     "Expected: I like dogs" + EOS),
    ("I lices dogs", "I like dogs",
     "Actual  : I lices" + PAD * 4 + " dogs" + EOS + "\n"
     "Diff    : " + EQ * 2 + DEL * 5 + INS * 4 + EQ * 7 + "\n"
     "Expected: I " + PAD * 5 + "like dogs" + EOS),
], ids=["before_word", "inside_word", "after_word", "several_changes_in_word"])
def test_changes_within_words(text_settings, actual, expected, expected_message):
    """One change inside a word is shown per character; several replace the word."""
    assert expected_message in _message(actual, expected, text_settings)


def test_equal_text_between_replaced_words(text_settings):
    """Equal text between two replaced words stays equal."""
    expected_message = (
        "Actual  : different" + PAD * 5 + "-same-different" + PAD * 5 + EOS + "\n"
        "Diff    : " + DEL * 9 + INS * 5 + EQ * 6 + DEL * 9 + INS * 5 + EQ * 2 + "\n"
        "Expected: " + PAD * 9 + "maybe-same-" + PAD * 9 + "maybe" + EOS
    )
    assert expected_message in _message("different-same-different", "maybe-same-maybe", text_settings)


def test_array_size(text_settings):
    expected_message = (
        "Actual  : int[6" + PAD + "]" + EOS + "\n"
        "Diff    : " + EQ * 4 + DEL + INS + EQ * 3 + "\n"
        "Expected: int[" + PAD + "5]" + EOS
    )
    assert expected_message in _message("int[6]", "int[5]", text_settings)


# --- multi-line text ---

def test_newline_prefix(text_settings):
    expected_message = (
        "Actual@0  : " + NL + PAD * 10 + "\n"
        "Diff      : " + DEL * 2 + INS * 8 + EQ * 2 + "\n"
        "Expected@0: " + PAD * 2 + "expected" + EOS + "\n"
        "\n"
        "Actual@1  : actual" + EOS + "\n"
        "Diff      : " + DEL * 6 + EQ * 2 + "\n"
        "Expected  : " + PAD * 8
    )
    assert expected_message in _message("\nactual", "expected", text_settings)


def test_newline_postfix(text_settings):
    expected_message = (
        "Actual@0  : actual" + NL + PAD * 10 + "\n"
        "Diff      : " + DEL * 8 + INS * 8 + EQ * 2 + "\n"
        "Expected@0: " + PAD * 8 + "expected" + EOS + "\n"
        "\n"
        "Actual@1  : " + EOS + "\n"
        "Expected  : " + PAD * 2
    )
    assert expected_message in _message("actual\n", "expected", text_settings)


def test_match_across_lines(text_settings):
    expected_message = (
        "Actual@0  : " + NL + PAD * 7 + "\n"
        "Diff      : " + DEL * 2 + EQ * 7 + "\n"
        "Expected@0: " + PAD * 2 + "value" + EOS + "\n"
        "\n"
        "Actual@1  : " + NL + "\n"
        "Diff      : " + DEL * 2 + "\n"
        "Expected  : " + PAD * 2 + "\n"
        "\n"
        "Actual@2  : value" + EOS + "\n"
        "Expected  : " + PAD * 7
    )
    assert expected_message in _message("\n\nvalue", "value", text_settings)


def test_skip_duplicate_lines(text_settings):
    """Equal lines in the middle of a diff are replaced by [...]."""
    expected_message = (
        "Actual@0  : 1" + NL + "\n"
        "Expected@0: 1" + NL + "\n"
        "\n"
        "[...]\n"
        "\n"
        "Actual@2  : 3" + PAD + NL + "\n"
        "Diff      : " + DEL + INS + EQ * 2 + "\n"
        "Expected@2: " + PAD + "9" + NL + "\n"
        "\n"
        "[...]\n"
        "\n"
        "Actual@4  : 5" + EOS + "\n"
        "Expected@4: 5" + EOS
    )
    assert expected_message in _message("1\n2\n3\n4\n5", "1\n2\n9\n4\n5", text_settings)


def test_middle_whitespace(text_settings):
    """Lines that differ only in whitespace are reported as different."""
    expected = "one\n   \nthree"
    expected_message = (
        "actual must be equal to " + expected + ".\n"
        "\n"
        "Actual@0  : one" + NL + "\n"
        "Expected@0: one" + NL + "\n"
        "\n"
        "Actual@1  : " + PAD * 3 + NL + "\n"
        "Diff      : " + INS * 3 + EQ * 2 + "\n"
        "Expected@1: " + PAD * 3 + NL + "\n"
        "\n"
        "Actual@2  : three" + EOS + "\n"
        "Expected@2: three" + EOS
    )
    assert _message("one\n\nthree", expected, text_settings) == expected_message


def test_independent_line_numbers(text_settings):
    """Deleted and inserted lines advance actual and expected line numbers separately."""
    expected_message = (
        "Actual@0  : actual" + PAD * 8 + NL + "\n"
        "Diff      : " + DEL * 6 + INS * 8 + EQ * 2 + "\n"
        "Expected@0: " + PAD * 6 + "expected" + NL + "\n"
        "\n"
        "[...]\n"
        "\n"
        "Actual@2  : actual " + PAD * 8 + "actual" + PAD * 8 + EOS + "\n"
        "Diff      : " + DEL * 6 + INS * 8 + EQ + DEL * 6 + INS * 8 + EQ * 2 + "\n"
        "Expected@2: " + PAD * 6 + "expected " + PAD * 6 + "expected" + EOS
    )
    message = _message("actual\nsame\nactual actual", "expected\nsame\nexpected expected", text_settings)
    assert expected_message in message


# --- arrays ---

def test_array_of_integers(text_settings):
    expected_message = (
        "Actual[0]  : 1" + EOS + "\n"
        "Expected[0]: 1" + EOS + "\n"
        "\n"
        "[...]\n"
        "\n"
        "Actual[2]  : 3" + PAD + EOS + "\n"
        "Diff       : " + DEL + INS + EQ * 2 + "\n"
        "Expected[2]: " + PAD + "9" + EOS + "\n"
        "\n"
        "[...]\n"
        "\n"
        "Actual[4]  : 5" + EOS + "\n"
        "Expected[4]: 5" + EOS
    )
    assert expected_message in _message([1, 2, 3, 4, 5], [1, 2, 9, 4, 5], text_settings)


def test_array_of_strings(text_settings):
    """Multi-line elements are labeled with both their index and line number."""
    expected_message = (
        "Actual[0]    : 1" + EOS + "\n"
        "Expected[0]  : 1" + EOS + "\n"
        "\n"
        "Actual[1]@0  : " + PAD * 5 + "foo" + NL + "\n"
        "Diff         : " + INS * 5 + EQ * 3 + DEL * 2 + "\n"
        "Expected[1]@0: bar" + NL + PAD * 5 + "\n"
        "\n"
        "Actual[1]@1  : " + PAD * 3 + "bar" + EOS + "\n"
        "Diff         : " + EQ * 3 + DEL * 3 + EQ * 2 + "\n"
        "Expected[1]@1: foo" + PAD * 3 + EOS + "\n"
        "\n"
        "Actual[2]    : 3" + EOS + "\n"
        "Expected[2]  : 3" + EOS
    )
    assert expected_message in _message(["1", "foo\nbar", "3"], ["1", "bar\nfoo", "3"], text_settings)


# --- terminal width ---

HEADLINE = "actual must be equal to expected."


@pytest.mark.parametrize("width, quoted", [
    (len(HEADLINE) + 1, True),
    (len(HEADLINE), False),
    (len(HEADLINE) - 1, False),
], ids=["shorter", "equal", "longer"])
def test_expected_quoted_only_when_narrower_than_terminal(make_settings, width, quoted):
    """The expected value appears in the headline only if the headline is narrower than the terminal."""
    message = _message("actual", "expected", make_settings(width=width))
    assert ("must be equal to expected" in message) is quoted
    assert message.startswith(HEADLINE if quoted else "actual had an unexpected value.")


# --- colors ---

@pytest.mark.parametrize("encoding", [
    TerminalEncoding.ansi_16, TerminalEncoding.ansi_256, TerminalEncoding.ansi_16m,
])
def test_array_size_in_color(make_settings, encoding):
    """Color diffs decorate text instead of printing a Diff row."""
    scheme = color_scheme_for(encoding)
    expected_message = (
        "Actual  : " + scheme.decorate_equal_text("int[") + scheme.decorate_deleted_text("6")
        + scheme.decorate_padding(1) + scheme.decorate_equal_text("]" + EOS) + "\n"
        "Expected: " + scheme.decorate_equal_text("int[") + scheme.decorate_padding(1)
        + scheme.decorate_inserted_text("5") + scheme.decorate_equal_text("]" + EOS)
    )
    message = _message("int[6]", "int[5]", make_settings(encoding=encoding))
    assert expected_message in message
    assert "Diff" not in message


def test_empty_line_number_in_color(make_settings):
    """Rows holding only padding keep the bare name."""
    scheme = color_scheme_for(TerminalEncoding.ansi_16)
    expected_message = (
        "Actual@0  : " + scheme.decorate_deleted_text("foo" + NL) + scheme.decorate_padding(5) + "\n"
        "Expected@0: " + scheme.decorate_padding(5) + scheme.decorate_equal_text("bar" + EOS) + "\n"
        "\n"
        "Actual@1  : " + scheme.decorate_equal_text("bar" + EOS) + "\n"
        "Expected  : " + scheme.decorate_padding(5)
    )
    assert expected_message in _message("foo\nbar", "bar", make_settings(encoding=TerminalEncoding.ansi_16))


# --- diff disabled ---

def test_diff_disabled(make_settings):
    """Without diffs the raw values are listed."""
    settings = make_settings(width=10, diff_enabled=False)
    assert _message("actual", "expected", settings) == (
        "actual had an unexpected value.\nActual  : actual\nExpected: expected"
    )
