"""Tests for FormattableStringBuilder.

Covers placeholder indexing, brace escaping, alignment and format
annotations, line breaks, snapshot independence, and nested builders.
"""

import os
from datetime import date, timedelta

import pytest

from formattable import (
    FormattableString,
    FormattableStringBuilder,
    Literal,
    MalformedFragmentError,
    Value,
)


@pytest.fixture
def fsb() -> FormattableStringBuilder:
    return FormattableStringBuilder(line_terminator="\n")


class TestEmpty:
    def test_empty_builder(self) -> None:
        fs = FormattableStringBuilder().build()

        assert fs.format == ""
        assert fs.argument_count == 0
        assert fs.get_arguments() == ()

    def test_empty_builder_is_falsy(self, fsb: FormattableStringBuilder) -> None:
        assert not fsb
        assert len(fsb) == 0
        assert fsb.argument_count == 0

    def test_empty_fragment_changes_nothing(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append_fragment([]).append().build()
        assert fs == FormattableString("", ())


class TestIndexing:
    @pytest.mark.parametrize("arg", ["one", FormattableStringBuilder(), None, 3.5])
    def test_single(self, fsb: FormattableStringBuilder, arg: object) -> None:
        fs = fsb.append(Value(arg)).build()

        assert fs.format == "{0}"
        assert fs.get_arguments() == (arg,)

    def test_multiple_appends_share_counter(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value("one")).append(Value("two")).build()

        assert fs.format == "{0}{1}"
        assert fs.arguments == ("one", "two")

    def test_many_values_in_one_fragment(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append("a=", Value(1), ", b=", Value(2), ", c=", Value(3)).build()

        assert fs.format == "a={0}, b={1}, c={2}"
        assert fs.arguments == (1, 2, 3)

    def test_argument_count_tracks_next_index(self, fsb: FormattableStringBuilder) -> None:
        fsb.append(Value("x"), "text")
        assert fsb.argument_count == 1
        fsb.append(Value("y"))
        assert fsb.argument_count == 2

    def test_same_object_twice_gets_two_indices(self, fsb: FormattableStringBuilder) -> None:
        shared = object()
        fs = fsb.append(Value(shared), Value(shared)).build()

        assert fs.format == "{0}{1}"
        assert fs.arguments[0] is shared
        assert fs.arguments[1] is shared

    def test_index_beyond_nine(self, fsb: FormattableStringBuilder) -> None:
        for i in range(12):
            fsb.append(Value(i))
        fs = fsb.build()

        assert fs.format == "".join(f"{{{i}}}" for i in range(12))
        assert fs.arguments == tuple(range(12))


class TestAnnotations:
    def test_negative_alignment(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value("one", alignment=-1)).build()
        assert fs.format == "{0,-1}"

    def test_positive_alignment(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value("one", alignment=10)).build()
        assert fs.format == "{0,10}"

    def test_zero_alignment_omitted(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value("one", alignment=0)).build()
        assert fs.format == "{0}"

    def test_format_string(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value("one", format="o")).build()
        assert fs.format == "{0:o}"

    def test_alignment_and_format_string(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value("one", alignment=-1, format="o")).build()
        assert fs.format == "{0,-1:o}"
        assert fs.arguments == ("one",)

    def test_empty_format_is_present(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value(1, format="")).build()
        assert fs.format == "{0:}"

    def test_absent_format(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value(1, format=None)).build()
        assert fs.format == "{0}"

    def test_format_text_is_not_escaped(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value(1, format="{x")).build()
        assert fs.format == "{0:{x}"

    def test_annotations_use_running_index(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value("a")).append(Value(255, alignment=-5, format="X2")).build()
        assert fs.format == "{0}{1,-5:X2}"


class TestEscaping:
    def test_literal_braces_doubled(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append("{a} {{b}} c}").build()

        assert fs.format == "{{a}} {{{{b}}}} c}}"
        assert fs.argument_count == 0

    def test_braces_around_values(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(
            "{one} {", Value("two"), "} {{three}} {{", Value("four"), "}}"
        ).build()

        assert fs.format == "{{one}} {{{0}}} {{{{three}}}} {{{{{1}}}}}"
        assert fs.arguments == ("two", "four")

    def test_literal_piece_and_plain_str_are_equivalent(self) -> None:
        a = FormattableStringBuilder().append(Literal("{x}")).build()
        b = FormattableStringBuilder().append("{x}").build()
        assert a == b

    def test_text_without_braces_unchanged(self, fsb: FormattableStringBuilder) -> None:
        assert fsb.append("plain text").build().format == "plain text"


class TestAppendLine:
    def test_default_terminator_is_platform_newline(self) -> None:
        fs = FormattableStringBuilder().append_line().build()
        assert fs.format == os.linesep

    def test_line_between_literals(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append("A").append_line().append("B").build()

        assert fs.format == "A\nB"
        assert fs.argument_count == 0

    def test_custom_terminator_written_raw(self) -> None:
        fsb = FormattableStringBuilder(line_terminator="\r\n")
        assert fsb.line_terminator == "\r\n"
        assert fsb.append("A").append_line().build().format == "A\r\n"

    def test_empty_terminator(self) -> None:
        fsb = FormattableStringBuilder(line_terminator="")
        assert fsb.append_line().build().format == ""
        assert not fsb

    @pytest.mark.parametrize("terminator", [5, b"\n", ["\n"]])
    def test_non_str_terminator_rejected(self, terminator: object) -> None:
        with pytest.raises(TypeError, match="line_terminator"):
            FormattableStringBuilder(line_terminator=terminator)  # type: ignore[arg-type]

    def test_terminator_from_config_keeps_build_working(self) -> None:
        fs = FormattableStringBuilder().append("a", Value(1)).append_line().build()
        assert fs.format == "a{0}" + os.linesep
        assert fs.arguments == (1,)

    def test_vacation_dates_scenario(self) -> None:
        fsb = FormattableStringBuilder()
        today = date.today()
        args = [today, today + timedelta(days=1), today + timedelta(days=2)]

        fsb.append("INSERT INTO dbo.VacationDates (Date)").append_line().append("VALUES")
        for d in args:
            fsb.append_line().append("(", Value(d), ")")
            if d != args[-1]:
                fsb.append(",")

        fs = fsb.build()

        assert fs.format == (
            "INSERT INTO dbo.VacationDates (Date)" + os.linesep
            + "VALUES" + os.linesep
            + "({0})," + os.linesep
            + "({1})," + os.linesep
            + "({2})"
        )
        assert fs.arguments == tuple(args)


class TestBuild:
    def test_snapshot_independent_of_later_appends(
        self, fsb: FormattableStringBuilder
    ) -> None:
        first = fsb.append("a", Value(1)).build()
        second = fsb.append_line().append(Value(2)).build()

        assert first.format == "a{0}"
        assert first.arguments == (1,)
        assert second.format == "a{0}\n{1}"
        assert second.arguments == (1, 2)

    def test_build_is_repeatable(self, fsb: FormattableStringBuilder) -> None:
        fsb.append(Value("x"))
        assert fsb.build() == fsb.build()
        assert fsb.build() is not fsb.build()

    def test_snapshot_is_immutable(self, fsb: FormattableStringBuilder) -> None:
        fs = fsb.append(Value(1)).build()
        with pytest.raises(AttributeError):
            fs.format = "other"  # type: ignore[misc]
        assert isinstance(fs.arguments, tuple)

    def test_len_counts_template_characters(self, fsb: FormattableStringBuilder) -> None:
        fsb.append("{", Value(1, alignment=-2))
        assert len(fsb) == len("{{{0,-2}")


class TestNestedBuilders:
    def test_builder_value_stored_as_is(self, fsb: FormattableStringBuilder) -> None:
        inner = FormattableStringBuilder().append("{inner}", Value(99))
        fs = fsb.append("outer ", Value(inner)).build()

        assert fs.format == "outer {0}"
        assert fs.arguments[0] is inner
        assert fs.argument_count == 1

    def test_inner_builder_keeps_mutating_independently(
        self, fsb: FormattableStringBuilder
    ) -> None:
        inner = FormattableStringBuilder()
        fs = fsb.append(Value(inner)).build()
        inner.append(Value(1), Value(2))

        assert fs.format == "{0}"
        assert fs.arguments[0].argument_count == 2

    def test_snapshot_as_value(self, fsb: FormattableStringBuilder) -> None:
        inner = FormattableStringBuilder().append(Value("x")).build()
        fs = fsb.append("[", Value(inner), "]").build()

        assert fs.format == "[{0}]"
        assert fs.arguments == (inner,)
        assert fs.render() == "[x]"

    def test_two_builders_do_not_share_counters(self) -> None:
        a = FormattableStringBuilder().append(Value(1), Value(2))
        b = FormattableStringBuilder().append(Value(3))

        assert a.build().format == "{0}{1}"
        assert b.build().format == "{0}"


class TestMalformedFragments:
    def test_error_leaves_builder_unchanged(self, fsb: FormattableStringBuilder) -> None:
        fsb.append("ok ", Value(1))
        before = fsb.build()

        with pytest.raises(MalformedFragmentError) as exc_info:
            fsb.append("more ", Value(2), None, Value(3))

        assert exc_info.value.piece_index == 2
        assert fsb.build() == before
        assert fsb.argument_count == 1

    def test_plain_string_fragment_rejected(self, fsb: FormattableStringBuilder) -> None:
        with pytest.raises(MalformedFragmentError):
            fsb.append_fragment("abc")  # type: ignore[arg-type]

    def test_non_iterable_fragment_rejected(self, fsb: FormattableStringBuilder) -> None:
        with pytest.raises(MalformedFragmentError):
            fsb.append_fragment(42)  # type: ignore[arg-type]

    def test_error_is_type_error(self, fsb: FormattableStringBuilder) -> None:
        with pytest.raises(TypeError):
            fsb.append(Literal(None))  # type: ignore[arg-type]

    def test_rejection_is_logged(
        self, fsb: FormattableStringBuilder, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("DEBUG", logger="formattable"):
            with pytest.raises(MalformedFragmentError):
                fsb.append(b"bytes")  # type: ignore[arg-type]

        assert any(r.name == "formattable.builder" for r in caplog.records)
