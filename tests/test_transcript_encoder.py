import pytest

from conftest import EXPECTED_TRANSCRIPT, make_paragraph, make_soup

from lesson_scraper.core.nodes import LineBreak, Text
from lesson_scraper.services import transcript_encoder
from lesson_scraper.services.markup_service import parse_markup, serialize_blocks


def encode(inner_html):
    return transcript_encoder.encode_paragraph(make_paragraph(inner_html))


class TestIsSpeakerLabel:
    def test_short_name_before_break(self):
        assert transcript_encoder.is_speaker_label("Amy", [LineBreak(), Text("Hi")])

    def test_blank_text_between_name_and_break(self):
        assert transcript_encoder.is_speaker_label("Amy", [Text("  "), LineBreak()])

    def test_not_followed_by_break(self):
        assert not transcript_encoder.is_speaker_label("Amy", [Text(" said hello")])

    def test_nothing_follows(self):
        assert not transcript_encoder.is_speaker_label("Amy", [])

    def test_too_long(self):
        assert not transcript_encoder.is_speaker_label("A" * 30, [LineBreak()])
        assert transcript_encoder.is_speaker_label("A" * 29, [LineBreak()])

    @pytest.mark.parametrize("text", ["Tom – host", "Tom — host"])
    def test_dash_means_gloss(self, text):
        assert not transcript_encoder.is_speaker_label(text, [LineBreak()])

    def test_lowercase_start_means_emphasis(self):
        assert not transcript_encoder.is_speaker_label("absolutely fascinating", [LineBreak()])


def test_speaker_label_is_encoded_as_marker():
    markup = encode("<strong>Amy</strong><br>Hi there.")
    assert markup == "[SPEAKER]Amy[/SPEAKER]\n\nHi there."


def test_speaker_with_nbsp_before_break():
    assert "[SPEAKER]Amy[/SPEAKER]" in encode("<strong>Amy</strong>&nbsp;<br>Hi there.")


def test_speaker_mid_paragraph_starts_new_line():
    markup = encode("Hello.<strong>Neil</strong><br>Hi.")
    assert markup == "Hello.\n[SPEAKER]Neil[/SPEAKER]\n\nHi."


def test_lowercase_bold_before_break_stays_inline():
    markup = encode("I find it <strong>absolutely fascinating</strong><br>Really.")
    assert markup == "I find it **absolutely fascinating**\nReally."
    assert "[SPEAKER]" not in markup


def test_long_bold_before_break_stays_inline():
    markup = encode("<strong>This bold phrase is far too long to be a name</strong><br>")
    assert markup == "**This bold phrase is far too long to be a name**\n"


def test_inline_emphasis_gets_surrounding_spaces():
    assert encode("a<strong>purr</strong>b") == "a **purr** b"


def test_no_space_before_punctuation():
    assert encode("Cats <strong>purr</strong>, mostly.") == "Cats **purr**, mostly."


def test_empty_bold_is_skipped():
    assert encode("Hi<strong> </strong> there") == "Hi there"


def test_nbsp_in_text_is_normalized():
    assert encode("Hello&nbsp;there") == "Hello there"


def test_other_elements_are_dropped():
    assert encode('Hi<a href="#">link</a> there') == "Hi there"


def test_normalize_collapses_blank_runs():
    assert transcript_encoder.normalize_markup("a\n\n\n\n\nb") == "a\n\nb"


def test_normalize_strips_indentation_and_ends():
    assert transcript_encoder.normalize_markup("\n  a  \n\t b\n\n") == "a\nb"


def test_three_breaks_collapse_in_final_markup():
    paragraphs = [make_paragraph("one<br><br><br><br>two")]
    markup = transcript_encoder.encode_transcript(paragraphs)
    assert markup == "one\n\ntwo"
    assert "\n\n\n" not in markup


def test_transcript_from_page(lesson_soup):
    assert transcript_encoder.extract_transcript(lesson_soup) == EXPECTED_TRANSCRIPT


def test_disclaimer_and_trailing_sections_are_skipped(lesson_soup):
    markup = transcript_encoder.extract_transcript(lesson_soup)
    assert "word-for-word" not in markup
    assert "after the end marker" not in markup


def test_transcript_heading_start_stops_at_next_heading():
    soup = make_soup(
        "<h3>Transcript</h3>"
        "<p><strong>Amy</strong><br>Hi.</p>"
        "<div>ad</div>"
        "<p><strong>Sam</strong><br>Hello.</p>"
        "<h3>Vocabulary</h3>"
        "<p>not transcript</p>"
    )
    markup = transcript_encoder.extract_transcript(soup)
    assert markup == "[SPEAKER]Amy[/SPEAKER]\n\nHi.\n\n[SPEAKER]Sam[/SPEAKER]\n\nHello."


def test_missing_transcript_is_empty():
    assert transcript_encoder.extract_transcript(make_soup("<p>No transcript here</p>")) == ""


def test_encoded_markup_survives_parse_and_serialize(lesson_soup):
    markup = transcript_encoder.extract_transcript(lesson_soup)
    reserialized = serialize_blocks(parse_markup(markup).blocks)
    expected_lines = [line for line in markup.split("\n") if line.strip()]
    assert reserialized.split("\n") == expected_lines


def test_crlf_source_collapses_and_round_trips():
    soup = make_soup(
        "<h3>Transcript</h3>\r\n"
        "<p><strong>Amy</strong><br>\r\nHello there.<br>\r\n<br>\r\n<br>\r\n<br>\r\nThird.</p>"
    )
    markup = transcript_encoder.extract_transcript(soup)

    assert markup == "[SPEAKER]Amy[/SPEAKER]\n\nHello there.\n\nThird."
    assert "\r" not in markup
    reserialized = serialize_blocks(parse_markup(markup).blocks)
    assert reserialized.split("\n") == [line for line in markup.split("\n") if line.strip()]


def test_unicode_space_indent_is_stripped():
    markup = transcript_encoder.encode_transcript([make_paragraph("one<br>&emsp;indented&emsp;")])

    assert markup == "one\nindented"
    assert serialize_blocks(parse_markup(markup).blocks).split("\n") == markup.split("\n")


def test_whitespace_only_lines_count_as_blank():
    assert transcript_encoder.normalize_markup("a\n \n \n\t\nb") == "a\n\nb"
