from __future__ import annotations

import dataclasses

import pytest

from wisdom_vault.summary_builder import parser
from wisdom_vault.summary_builder.parser import ParserState, SectionBuilder, parse_summary


@pytest.mark.parametrize("text", ["", "\n\n", "   \n\t\n  "])
def test_blank_text_is_rejected(text: str) -> None:
    assert parse_summary(text) is None


def test_short_title_is_rejected() -> None:
    assert parse_summary("\n  ab  \nHeading\n- a perfectly fine bullet") is None


def test_three_character_title_is_accepted() -> None:
    parsed = parse_summary("  Abc  \n- a perfectly fine bullet\n")
    assert parsed is not None
    assert parsed.title == "Abc"


def test_title_heading_and_short_bullet() -> None:
    text = "My Title\nSection One\n• This is a valid bullet point\n- ok\n"
    parsed = parse_summary(text)
    assert parsed is not None
    assert parsed.title == "My Title"
    assert [section.heading for section in parsed.sections] == ["Section One"]
    assert parsed.sections[0].bullets == ("This is a valid bullet point",)


def test_heading_equal_to_title_does_not_open_section() -> None:
    parsed = parse_summary("My Title\nMy Title\n- first bullet here\n")
    assert parsed is not None
    assert [section.heading for section in parsed.sections] == ["Overview"]


def test_bullets_without_heading_get_implicit_overview() -> None:
    parsed = parse_summary("\n\nA Book\n• bullet one text\n\n▸ bullet two text\n")
    assert parsed is not None
    assert len(parsed.sections) == 1
    assert parsed.sections[0].heading == "Overview"
    assert parsed.sections[0].bullets == ("bullet one text", "bullet two text")


def test_empty_sections_are_dropped() -> None:
    text = "Title\nEmpty Heading\nReal Heading\n- bullet text here\nTrailing Heading\n"
    parsed = parse_summary(text)
    assert parsed is not None
    assert [section.heading for section in parsed.sections] == ["Real Heading"]
    assert all(section.bullets for section in parsed.sections)


def test_no_bullets_rejects_document() -> None:
    assert parse_summary("Title\nA heading\nAnother heading\n- tiny\n") is None


def test_enumerators_and_trailing_colon_are_stripped() -> None:
    text = "Title\n1. Key Lessons:\n- lesson number one\n2) Second part\n* lesson number two\n"
    parsed = parse_summary(text)
    assert parsed is not None
    assert [section.heading for section in parsed.sections] == ["Key Lessons", "Second part"]


def test_discarded_lines_keep_current_section_open() -> None:
    long_line = "x" * 221
    text = "\n".join(
        [
            "Title",
            "Heading A",
            "- bullet aaaaaa",
            "abc",
            "https://example.com/article",
            long_line,
            "- bullet bbbbbb",
        ]
    )
    parsed = parse_summary(text)
    assert parsed is not None
    assert len(parsed.sections) == 1
    assert parsed.sections[0].bullets == ("bullet aaaaaa", "bullet bbbbbb")


def test_longest_heading_line_opens_section() -> None:
    heading = "H" * 220
    parsed = parse_summary(f"Title\n{heading}\n- bullet under it\n")
    assert parsed is not None
    assert [section.heading for section in parsed.sections] == [heading]


def test_six_character_bullet_is_kept() -> None:
    parsed = parse_summary("Title\n- sixchr\n- five5\n")
    assert parsed is not None
    assert parsed.sections[0].bullets == ("sixchr",)


def test_sections_are_immutable() -> None:
    parsed = parse_summary("Title\nHeading\n- bullet one text\n")
    assert parsed is not None
    section = parsed.sections[0]
    assert isinstance(section.bullets, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        section.bullets = ("replaced bullet",)  # type: ignore[misc]


def test_windows_line_endings_and_internal_spacing() -> None:
    parsed = parse_summary("Title Line\r\nHeading\r\n-   spaced   bullet text\r\n")
    assert parsed is not None
    assert parsed.sections[0].bullets == ("spaced   bullet text",)


@pytest.mark.parametrize("marker", list(parser.BULLET_MARKERS))
def test_every_bullet_marker_is_recognised(marker: str) -> None:
    parsed = parse_summary(f"Title\n{marker} an insight worth keeping\n")
    assert parsed is not None
    assert parsed.sections[0].bullets == ("an insight worth keeping",)


def test_corpus_joins_title_headings_and_bullets() -> None:
    parsed = parse_summary("Title\nHeading A\n- bullet one text\n- bullet two\n")
    assert parsed is not None
    assert parsed.corpus == "Title Heading A bullet one text bullet two"


def test_section_builder_states() -> None:
    builder = SectionBuilder("Title")
    assert builder.state is ParserState.NO_SECTION
    assert builder.current is None
    assert not builder.add_bullet("short")
    assert builder.state is ParserState.NO_SECTION
    assert builder.add_bullet("long enough")
    assert builder.state is ParserState.SECTION_OPEN
    assert builder.current is not None and builder.current.heading == "Overview"
    assert not builder.open_section("Title")
    assert not builder.open_section("ab")
    assert builder.open_section("Next")
    assert builder.current is not None and builder.current.heading == "Next"
    assert [section.heading for section in builder.sections()] == ["Overview"]


def test_clean_heading_helpers() -> None:
    assert parser.clean_heading("12) Chapter Twelve:") == "Chapter Twelve"
    assert parser.clean_heading("3.Not an enumerator") == "3.Not an enumerator"
    assert parser.clean_heading("Ends with two::") == "Ends with two:"
    assert not parser.is_heading_candidate("http://example.com")
    assert not parser.is_heading_candidate("abc")
    assert parser.is_heading_candidate("abcd")
