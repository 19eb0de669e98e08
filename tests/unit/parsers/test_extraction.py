import pytest

from story_kit.parsers.extraction import (
    PassageHeader,
    extract_links,
    parse_header,
    parse_link,
    parse_position,
    parse_tags,
    scan_links,
    slugify,
    split_passages,
)
from story_kit.parsers.models import Position


class TestSlugify:
    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("My Passage!", "my-passage"),
            ("A  B", "a-b"),
            ("Room 101", "room-101"),
            ("Café Noir", "caf-noir"),
            ("--Start--", "start"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, title: str, expected: str) -> None:
        assert slugify(title) == expected

    def test_slugify_is_deterministic(self) -> None:
        assert slugify("The Dark Forest") == slugify("The Dark Forest")


class TestParseLink:
    def test_plain_link(self) -> None:
        assert parse_link("Go North") == ("Go North", "Go North")

    def test_pipe_link_keeps_target(self) -> None:
        assert parse_link("Look|Examine Room") == ("Look", "Examine Room")

    def test_right_arrow_link(self) -> None:
        assert parse_link("Go->North") == ("Go", "North")

    def test_left_arrow_link(self) -> None:
        assert parse_link("North<-Go") == ("Go", "North")

    def test_whitespace_is_trimmed(self) -> None:
        assert parse_link("  Look |  Examine Room ") == ("Look", "Examine Room")


class TestScanLinks:
    def test_plain_and_aliased_links(self) -> None:
        content, links = scan_links("Go [[North]] or [[Look|Examine Room]].")

        assert content == "Go North or Look."
        assert links == ["North", "Examine Room"]

    def test_duplicates_are_preserved_in_order(self) -> None:
        assert extract_links("[[A]] then [[B]] then [[A]]") == ["A", "B", "A"]

    def test_links_across_lines(self) -> None:
        assert extract_links("first [[One]]\nsecond [[Two]] [[Three]]") == [
            "One",
            "Two",
            "Three",
        ]

    def test_unterminated_opener_is_removed(self) -> None:
        assert scan_links("dangling [[A") == ("dangling A", [])

    def test_innermost_opener_wins(self) -> None:
        assert scan_links("[[a [[b]]") == ("a b", ["b"])

    def test_empty_link_is_dropped(self) -> None:
        assert scan_links("x[[]]y") == ("xy", [])

    def test_no_links(self) -> None:
        assert scan_links("just prose") == ("just prose", [])

    def test_long_run_of_openers_completes(self) -> None:
        assert scan_links("[[" * 50_000) == ("", [])

    def test_odd_run_of_openers_leaves_single_bracket(self) -> None:
        assert scan_links("x [[[ y") == ("x [ y", [])


class TestParseTagsAndPosition:
    def test_tags_split_on_whitespace(self) -> None:
        assert parse_tags(" intro   dark ") == ["intro", "dark"]

    def test_empty_tags(self) -> None:
        assert parse_tags("") == []

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("10,20", Position(x=10, y=20)),
            (" -5 , 7 ", Position(x=-5, y=7)),
            ('"position":"100,200"', Position(x=100, y=200)),
            ('"position":"100,200","size":"100,100"', Position(x=100, y=200)),
        ],
    )
    def test_valid_positions(self, text: str, expected: Position) -> None:
        assert parse_position(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "10", "a,b", "1.5,2", "1,2,3", '"position":100', '"size":"1,2"', '"oops'],
    )
    def test_malformed_positions_yield_none(self, text: str) -> None:
        assert parse_position(text) is None


class TestParseHeader:
    def test_full_header(self) -> None:
        header = parse_header(":: Start [intro dark] {100,200}")

        assert header == PassageHeader(
            title="Start", tags=["intro", "dark"], position=Position(x=100, y=200)
        )

    def test_title_only(self) -> None:
        assert parse_header("::Start") == PassageHeader(title="Start")

    def test_position_without_tags(self) -> None:
        header = parse_header(":: Start {3,4}")

        assert header is not None
        assert header.tags == []
        assert header.position == Position(x=3, y=4)

    def test_unterminated_tags_are_ignored(self) -> None:
        assert parse_header(":: Start [a b") == PassageHeader(title="Start")

    def test_malformed_position_is_ignored(self) -> None:
        assert parse_header(":: Start {oops}") == PassageHeader(title="Start")

    def test_empty_title_is_not_a_header(self) -> None:
        assert parse_header(":: [tag]") is None

    def test_non_header_line(self) -> None:
        assert parse_header("Start") is None


class TestSplitPassages:
    def test_splits_in_source_order(self) -> None:
        text = "preamble\n::A\nbody a\n\n::B [t]\nbody b"

        result = list(split_passages(text))

        assert [(h.title, body) for h, body in result] == [
            ("A", "body a"),
            ("B", "body b"),
        ]
        assert result[1][0].tags == ["t"]

    def test_handles_crlf(self) -> None:
        result = list(split_passages("::A\r\nline one\r\nline two\r\n"))

        assert [(h.title, body) for h, body in result] == [("A", "line one\nline two")]

    @pytest.mark.parametrize("line", ["::", ":: ", ":: [tag]", "::{1,2}"])
    def test_header_line_without_title_is_dropped(self, line: str) -> None:
        result = list(split_passages(f"::A\n{line}\nmore"))

        assert [(h.title, body) for h, body in result] == [("A", "more")]

    def test_no_headers(self) -> None:
        assert list(split_passages("nothing here")) == []
