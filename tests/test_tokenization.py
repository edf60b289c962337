import pytest

from stylo_stats.tokenization import (
    is_letter,
    is_phrase_delimiter,
    is_sentence_delimiter,
    is_space,
    is_word_char,
    split_paragraphs,
    split_phrases,
    split_sentences,
    split_words,
)


def test_character_classes_are_ascii_only():
    assert is_letter("a") and is_letter("Z")
    assert not is_letter("é")
    assert not is_letter("1")
    assert is_space(" ") and is_space("\t")
    assert all(is_sentence_delimiter(ch) for ch in ".!?")
    assert all(is_phrase_delimiter(ch) for ch in ",:;")
    assert not is_phrase_delimiter(".")
    assert is_word_char("-") and is_word_char("q")
    assert not is_word_char("'")


def test_split_paragraphs_joins_lines_with_spaces():
    lines = ["First line", "second line", "", "Next paragraph"]
    assert split_paragraphs(lines) == ["First line second line ", "Next paragraph "]


def test_split_paragraphs_collapses_blank_runs_and_strips_newlines():
    lines = ["one\n", "\n", "\n", "two\r\n", "three\n", "\n"]
    assert split_paragraphs(lines) == ["one ", "two three "]


def test_split_paragraphs_keeps_final_paragraph_without_trailing_blank():
    assert split_paragraphs(["only", "paragraph"]) == ["only paragraph "]


def test_split_paragraphs_blank_only_input_yields_nothing():
    assert split_paragraphs(["", "", ""]) == []


def test_split_sentences_strips_delimiters_and_leading_space():
    paragraph = "Hello there, friend. How are you? Fine!  "
    assert split_sentences(paragraph) == ["Hello there, friend", "How are you", "Fine"]


def test_split_sentences_without_delimiter_keeps_trailing_space():
    assert split_sentences("no ending here ") == ["no ending here "]
    assert split_sentences("...!?  ") == []


def test_split_phrases_starts_on_letters():
    assert split_phrases("hello, world; foo") == ["hello", "world", "foo"]
    assert split_phrases("one two ,three") == ["one two ", "three"]
    assert split_phrases("  -- 42, abc") == ["abc"]


def test_split_words_keeps_hyphens():
    assert split_words("well-known co- op 42 x") == ["well-known", "co-", "op", "x"]
    assert split_words("-abc don't") == ["abc", "don", "t"]


@pytest.mark.parametrize(
    "splitter", [split_sentences, split_phrases, split_words]
)
def test_string_segmenters_return_empty_for_empty_input(splitter):
    assert splitter("") == []


def test_split_paragraphs_empty_input():
    assert split_paragraphs([]) == []
    assert split_paragraphs([""]) == []


def _assert_in_order(units, parent):
    """Each unit occurs in parent after the end of the previous one."""
    cursor = 0
    previous_start = -1
    for unit in units:
        start = parent.find(unit, cursor)
        assert start != -1, f"{unit!r} not found after offset {cursor} in {parent!r}"
        assert start > previous_start
        previous_start = start
        cursor = start + len(unit)


def _without(text, chars):
    return "".join(ch for ch in text if ch not in chars)


def test_segmentation_preserves_order_and_loses_only_delimiters():
    lines = ["Alpha beta, gamma: delta. Epsilon;", "zeta-eta! Theta", "", "Iota kappa?"]
    paragraphs = split_paragraphs(lines)
    _assert_in_order(paragraphs, " ".join(lines) + " ")
    spaces = set(" \t")
    for paragraph in paragraphs:
        sentences = split_sentences(paragraph)
        _assert_in_order(sentences, paragraph)
        assert _without("".join(sentences), spaces) == _without(
            paragraph, spaces | set(".!?")
        )
        for sentence in sentences:
            phrases = split_phrases(sentence)
            _assert_in_order(phrases, sentence)
            assert _without("".join(phrases), spaces) == _without(
                sentence, spaces | set(",:;")
            )
            for phrase in phrases:
                words = split_words(phrase)
                _assert_in_order(words, phrase)
                assert "".join(words) == _without(phrase, spaces)


def test_sentences_only_skip_ascii_whitespace():
    assert split_sentences("\xa0Hi.") == ["\xa0Hi"]
    assert split_sentences("\t\x0bHi.") == ["Hi"]


@pytest.mark.parametrize("code", range(256))
def test_segmenters_agree_with_character_predicates(code):
    ch = chr(code)
    assert (split_words(ch) == [ch]) == is_letter(ch)
    assert (split_phrases(ch) == [ch]) == is_letter(ch)
    starts_sentence = not (is_space(ch) or is_sentence_delimiter(ch))
    assert (split_sentences(ch) == [ch]) == starts_sentence
    assert (split_words(f"a{ch}") == [f"a{ch}"]) == is_word_char(ch)
    assert (split_phrases(f"a{ch}b") == ["a", "b"]) == is_phrase_delimiter(ch)
