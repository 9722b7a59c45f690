"""Tests for TextParser: record accumulation, pragmas, policies and warnings.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from loctext import TextParseError, TextParser, TextRecord, parse_text
from loctext.diagnostics import DiagnosticCode
from loctext.enums import DuplicatePragmaPolicy, MissingHeaderPolicy
from loctext.syntax import escape_value, parse, serialize
from tests.strategies import record_lists, text_records

_PADDING = st.text(alphabet=" \t", max_size=3)


class TestScenario:
    """The canonical comment + pragma + entry example."""

    def test_scenario(self, scenario_source: str) -> None:
        records, pragmas = parse_text(scenario_source)

        assert records == [
            TextRecord("GREETING", {"en": 'Hello, "friend"', "tr": "Merhaba"})
        ]
        assert pragmas == {"ReplaceTMPInvalidChars": "true"}

    def test_scenario_is_clean(self, scenario_source: str) -> None:
        assert TextParser().parse(scenario_source).is_clean


class TestRecords:
    """Tests for record accumulation."""

    def test_escape_fidelity(self) -> None:
        """Quote, backslash, newline and tab escapes in a full line."""
        records, _ = parse_text(r'KEY => en="a\"b\\c\nd\te"')
        assert records[0]["en"] == 'a"b\\c\nd\te'

    def test_file_order_preserved(self) -> None:
        records, _ = parse_text('B => en="b"\nA => en="a"\nC => en="c"')
        assert [r.id for r in records] == ["B", "A", "C"]

    def test_locale_order_preserved(self) -> None:
        records, _ = parse_text('K => tr="t", en="e", de="d"')
        assert list(records[0].locales) == ["tr", "en", "de"]

    def test_duplicate_ids_preserved(self) -> None:
        """The parser keeps every record; uniqueness belongs to TextTable."""
        records, _ = parse_text('K => en="first"\nK => en="second"')
        assert [r["en"] for r in records] == ["first", "second"]

    def test_hash_line_without_pragma_word_is_data(self) -> None:
        records, _ = parse_text('#tag => en="x"')
        assert records == [TextRecord("#tag", {"en": "x"})]

    def test_id_starting_with_pragma_word_is_fatal(self) -> None:
        """'#pragma' followed by a letter is a glued directive, not an id."""
        with pytest.raises(TextParseError) as exc_info:
            parse_text('OK => en="ok"\n#pragmatic => en="x"')

        assert exc_info.value.line == 2
        assert "followed by whitespace" in exc_info.value.reason

    def test_crlf_source(self) -> None:
        result = TextParser().parse('#pragma Mode fast\r\nK => en="a"\r\n')
        assert result.pragmas == {"Mode": "fast"}
        assert result.records == (TextRecord("K", {"en": "a"}),)

    def test_empty_source(self) -> None:
        result = TextParser().parse("")
        assert result.records == ()
        assert result.pragmas == {}
        assert result.is_clean

    def test_only_comments_and_blank_lines(self) -> None:
        assert parse_text("; a\n\n   ; b\n\t\n") == ([], {})

    def test_trailing_comma_tolerated(self) -> None:
        records, _ = parse_text('K => en="a", tr="b",')
        assert records[0].locales == {"en": "a", "tr": "b"}

    def test_comma_inside_value(self) -> None:
        records, _ = parse_text('K => en="one, two", tr="x"')
        assert records[0].locales == {"en": "one, two", "tr": "x"}


class TestPragmas:
    """Tests for pragma handling in the parser."""

    def test_pragma_not_a_record(self) -> None:
        result = TextParser().parse("#pragma A 1\n#pragma B 2")
        assert result.records == ()
        assert result.pragmas == {"A": "1", "B": "2"}

    def test_pragma_after_entries(self) -> None:
        """Pragmas are file-scoped wherever they appear."""
        result = TextParser().parse('K => en="x"\n#pragma Late yes')
        assert result.pragmas == {"Late": "yes"}

    def test_malformed_pragma_aborts_with_line_number(self) -> None:
        source = 'A => en="a"\n\n; note\n#pragma OnlyKey\nB => en="b"'
        with pytest.raises(TextParseError) as exc_info:
            TextParser().parse(source)

        assert exc_info.value.line == 4
        assert exc_info.value.column == 1
        assert exc_info.value.line_text == "#pragma OnlyKey"

    def test_glued_pragma_aborts(self) -> None:
        with pytest.raises(TextParseError) as exc_info:
            TextParser().parse("\n#pragmaKey value")

        assert exc_info.value.line == 2

    def test_duplicate_pragma_overwrites_with_warning(self) -> None:
        result = TextParser().parse("#pragma A 1\n#pragma A 2")

        assert result.pragmas == {"A": "2"}
        assert [w.code for w in result.warnings] == [DiagnosticCode.DUPLICATE_PRAGMA]
        assert result.warnings[0].line == 2
        assert result.warnings[0].severity == "warning"

    def test_duplicate_pragma_raise_policy(self) -> None:
        parser = TextParser(duplicate_pragma=DuplicatePragmaPolicy.RAISE)
        with pytest.raises(TextParseError) as exc_info:
            parser.parse("#pragma A 1\n#pragma A 2")

        assert exc_info.value.line == 2
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.severity == "error"


class TestLineLocalErrors:
    """Lines with recoverable problems are skipped with a warning."""

    def test_missing_quote_skips_only_that_line(self) -> None:
        result = TextParser().parse('KEY => en=hello\nOTHER => en="ok"')

        assert result.records == (TextRecord("OTHER", {"en": "ok"}),)
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.code is DiagnosticCode.VALUE_NOT_QUOTED
        assert warning.line == 1
        assert warning.text_id == "KEY"
        assert "(text id 'KEY')" in warning.message

    def test_one_bad_segment_skips_whole_line(self) -> None:
        result = TextParser().parse('K => en="a", tr=b')
        assert result.records == ()
        assert result.warnings[0].code is DiagnosticCode.VALUE_NOT_QUOTED

    def test_missing_header_skipped_by_default(self) -> None:
        result = TextParser().parse('no separator\nK => en="x"')

        assert [r.id for r in result.records] == ["K"]
        assert result.warnings[0].code is DiagnosticCode.MISSING_HEADER
        assert result.warnings[0].line == 1

    def test_missing_header_raise_policy(self) -> None:
        parser = TextParser(missing_header=MissingHeaderPolicy.RAISE)
        with pytest.raises(TextParseError) as exc_info:
            parser.parse('K => en="x"\nno separator')

        assert exc_info.value.line == 2
        assert exc_info.value.line_text == "no separator"

    def test_policy_accepts_plain_strings(self) -> None:
        parser = TextParser(missing_header="raise", duplicate_pragma="raise")  # type: ignore[arg-type]
        assert parser.missing_header is MissingHeaderPolicy.RAISE
        assert parser.duplicate_pragma is DuplicatePragmaPolicy.RAISE

    def test_empty_id(self) -> None:
        result = TextParser().parse(' => en="x"')
        assert result.records == ()
        assert result.warnings[0].code is DiagnosticCode.EMPTY_TEXT_ID

    @pytest.mark.parametrize("tail", ["", " , ,", ","])
    def test_no_locale_data(self, tail: str) -> None:
        result = TextParser().parse(f"K =>{tail}\nOK => en=\"y\"")

        assert [r.id for r in result.records] == ["OK"]
        assert result.warnings[0].code is DiagnosticCode.NO_LOCALE_DATA
        assert "'K'" in result.warnings[0].message

    def test_missing_locale_assign(self) -> None:
        result = TextParser().parse('K => en "x"')
        assert result.warnings[0].code is DiagnosticCode.MISSING_LOCALE_ASSIGN

    def test_duplicate_locale_last_wins(self) -> None:
        result = TextParser().parse('K => en="a", tr="b", en="c"')

        assert result.records[0].locales == {"en": "c", "tr": "b"}
        assert list(result.records[0].locales) == ["en", "tr"]
        assert result.warnings[0].code is DiagnosticCode.DUPLICATE_LOCALE

    def test_unterminated_quote_before_next_locale_warns(self) -> None:
        """An unclosed value that swallows the next definition is reported."""
        result = TextParser().parse('K => en="a, tr="b"')

        assert result.records == (TextRecord("K", {"en": "a, tr="}),)
        assert [w.code for w in result.warnings] == [DiagnosticCode.TRAILING_VALUE_TEXT]
        warning = result.warnings[0]
        assert warning.line == 1
        assert warning.text_id == "K"
        assert "'b\"'" in warning.message

    def test_text_after_closing_quote_warns(self) -> None:
        result = TextParser().parse('K => en="a"b", tr="c"\nOK => en="ok"')

        assert result.records == (
            TextRecord("K", {"en": "a"}),
            TextRecord("OK", {"en": "ok"}),
        )
        assert [w.code for w in result.warnings] == [DiagnosticCode.TRAILING_VALUE_TEXT]
        assert "tr=" in result.warnings[0].message

    def test_whitespace_after_closing_quote_is_clean(self) -> None:
        result = TextParser().parse('K => en="a"   , tr="b"  ')
        assert result.records[0].locales == {"en": "a", "tr": "b"}
        assert result.is_clean

    def test_unknown_escape_is_silent(self) -> None:
        result = TextParser().parse(r'K => en="a\qb"')
        assert result.records[0]["en"] == "aqb"
        assert result.is_clean

    def test_unterminated_value_is_silent(self) -> None:
        result = TextParser().parse('K => en="open')
        assert result.records[0]["en"] == "open"
        assert result.is_clean

    def test_warnings_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="loctext.syntax.parser"):
            TextParser().parse("\n\nbroken line")

        assert any("Line 3" in record.getMessage() for record in caplog.records)


class TestSourceSizeLimit:
    """Tests for max_source_size."""

    def test_default_limit(self) -> None:
        assert TextParser().max_source_size == 10 * 1024 * 1024

    def test_oversize_source_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds maximum"):
            TextParser(max_source_size=10).parse('K => en="0123456789"')

    def test_zero_disables_limit(self) -> None:
        result = TextParser(max_source_size=0).parse('K => en="0123456789"')
        assert len(result.records) == 1


class TestParserProperties:
    """Hypothesis properties of the parser."""

    @given(record_lists, st.data())
    def test_comment_and_blank_immunity(self, records: list[TextRecord], data: st.DataObject) -> None:
        """Comment and blank lines inserted anywhere never change the result."""
        lines = serialize(records).splitlines()
        noise = st.sampled_from(["", "   ", "\t", "; comment", '  ; K => en="x"'])
        for _ in range(data.draw(st.integers(min_value=0, max_value=6))):
            position = data.draw(st.integers(min_value=0, max_value=len(lines)))
            lines.insert(position, data.draw(noise))
        event(f"lines={len(lines)}")

        assert list(parse("\n".join(lines)).records) == records

    @given(text_records(), st.data())
    def test_whitespace_around_tokens_ignored(self, record: TextRecord, data: st.DataObject) -> None:
        """Padding around id, '=>', locale codes and '=' is not significant."""

        def pad() -> str:
            return data.draw(_PADDING)

        defs = ",".join(
            f'{pad()}{locale}{pad()}={pad()}"{escape_value(value)}"{pad()}'
            for locale, value in record
        )
        line = f"{pad()}{record.id}{pad()}=>{defs}"

        result = parse(line)
        assert result.records == (record,)
        assert result.is_clean
