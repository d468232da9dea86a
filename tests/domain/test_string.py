"""Tests for NonEmptyString construction, operations, and invariants."""

import math

import pytest
from pydantic import BaseModel, ValidationError

from nestr.domain.sequence import NonEmptySequence
from nestr.domain.string import NonEmptyString, concat, join


def nes(text: str) -> NonEmptyString:
    value = NonEmptyString.from_string(text)
    assert value is not None
    return value


SAMPLES = ["a", "ab", "hello world", "  x  ", "ünïcödé", "12345", "a\tb\nc"]


class TestConstruction:
    def test_direct(self) -> None:
        value = NonEmptyString("h", "ello")
        assert value.head == "h"
        assert value.tail == "ello"
        assert str(value) == "hello"

    def test_tail_defaults_empty(self) -> None:
        assert NonEmptyString("x").tail == ""

    def test_head_must_be_one_char(self) -> None:
        with pytest.raises(ValueError):
            NonEmptyString("", "abc")
        with pytest.raises(ValueError):
            NonEmptyString("ab", "c")

    def test_tail_must_be_str(self) -> None:
        with pytest.raises(TypeError):
            NonEmptyString("a", None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_from_string_round_trip(self, text: str) -> None:
        value = NonEmptyString.from_string(text)
        assert value is not None
        assert value.to_string() == text

    def test_from_string_empty_is_none(self) -> None:
        assert NonEmptyString.from_string("") is None

    def test_from_string_splits_first_char(self) -> None:
        assert nes("abc").uncons() == ("a", "bc")

    def test_from_char(self) -> None:
        value = NonEmptyString.from_char("z")
        assert value.head == "z"
        assert value.tail == ""
        assert len(value) == 1

    def test_from_char_rejects_multiple(self) -> None:
        with pytest.raises(ValueError):
            NonEmptyString.from_char("zz")

    def test_frozen(self) -> None:
        value = nes("abc")
        with pytest.raises(Exception):
            value.head = "z"  # type: ignore[misc]


class TestDecomposition:
    def test_head_tail_of_single_char(self) -> None:
        value = nes(" ")
        assert value.head == " "
        assert value.tail == ""

    def test_cons(self) -> None:
        value = nes("ello").cons("h")
        assert value.head == "h"
        assert value.tail == "ello"

    def test_cons_rejects_multi_char(self) -> None:
        with pytest.raises(ValueError):
            nes("x").cons("ab")

    @pytest.mark.parametrize("text", SAMPLES)
    def test_rebuild_from_head_and_tail(self, text: str) -> None:
        value = nes(text)
        head, tail = value.uncons()
        assert NonEmptyString(head, tail) == value
        rebuilt = NonEmptyString.from_string(tail)
        if rebuilt is not None:
            assert rebuilt.cons(head) == value

    def test_len_and_iter(self) -> None:
        value = nes("abc")
        assert len(value) == 3
        assert list(value) == ["a", "b", "c"]


class TestEquality:
    def test_equal_denoted_strings(self) -> None:
        assert NonEmptyString("a", "bc") == nes("abc")

    def test_hash_matches_equality(self) -> None:
        assert hash(NonEmptyString("a", "bc")) == hash(nes("abc"))
        assert len({nes("abc"), NonEmptyString("a", "bc"), nes("abd")}) == 2

    def test_not_equal_to_plain_str(self) -> None:
        assert nes("abc") != "abc"

    def test_ordering_follows_text(self) -> None:
        assert nes("apple") < nes("banana")
        assert nes("b") >= nes("abc")
        assert sorted([nes("c"), nes("a"), nes("b")]) == [nes("a"), nes("b"), nes("c")]

    def test_ordering_against_str_unsupported(self) -> None:
        with pytest.raises(TypeError):
            nes("a") < "b"  # noqa: B015

    def test_repr(self) -> None:
        assert repr(nes("hi")) == "NonEmptyString('hi')"


class TestReverseAndAppend:
    @pytest.mark.parametrize("text", SAMPLES)
    def test_reverse(self, text: str) -> None:
        assert str(nes(text).reverse()) == text[::-1]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_reverse_involution(self, text: str) -> None:
        value = nes(text)
        assert value.reverse().reverse() == value

    def test_reverse_single_char_is_same(self) -> None:
        value = nes("q")
        assert value.reverse() is value

    def test_prepend(self) -> None:
        value = nes("world").prepend("hello ")
        assert value.head == "h"
        assert str(value) == "hello world"

    def test_prepend_empty_is_identity(self) -> None:
        value = nes("abc")
        assert value.prepend("") == value

    def test_append(self) -> None:
        value = nes("hello").append(" world")
        assert value.head == "h"
        assert value.tail == "ello world"

    def test_append_empty_is_identity(self) -> None:
        value = nes("abc")
        assert value.append("") == value

    def test_append_to_single_char(self) -> None:
        assert str(nes("a").append("bc")) == "abc"

    def test_operators(self) -> None:
        value = nes("mid")
        assert str("<" + value + ">") == "<mid>"
        assert isinstance("" + value, NonEmptyString)
        assert str(value + nes("dle")) == "middle"

    def test_original_unchanged(self) -> None:
        value = nes("abc")
        value.append("def")
        value.prepend("xyz")
        value.reverse()
        assert str(value) == "abc"


class TestConcat:
    def test_concat_in_order(self) -> None:
        values = NonEmptySequence.of(
            NonEmptyString("E", "xpected"),
            NonEmptyString(" ", "test"),
            NonEmptyString(" ", "result"),
        )
        assert str(concat(values)) == "Expected test result"

    def test_concat_single(self) -> None:
        value = nes("solo")
        assert concat(NonEmptySequence.of(value)) == value

    def test_concat_matches_str_join(self) -> None:
        parts = ["a", "bc", "def"]
        values = NonEmptySequence.of(*[nes(p) for p in parts])
        assert str(concat(values)) == "".join(parts)

    def test_join(self) -> None:
        values = NonEmptySequence.of(nes("a"), nes("b"), nes("c"))
        assert str(join(", ", values)) == "a, b, c"

    def test_join_single_has_no_separator(self) -> None:
        assert str(join("-", NonEmptySequence.of(nes("a")))) == "a"


class TestSlicing:
    def test_slice(self) -> None:
        assert nes("snakes on a plane!").slice(7, 9) == "on"

    def test_slice_negative(self) -> None:
        assert nes("snakes on a plane!").slice(0, -7) == "snakes on a"
        assert nes("snakes on a plane!").slice(-6, -1) == "plane"

    def test_slice_out_of_range_clamps(self) -> None:
        assert nes("abc").slice(-10, 10) == "abc"
        assert nes("abc").slice(5, 10) == ""

    def test_slice_can_be_empty(self) -> None:
        assert nes("abc").slice(2, 1) == ""

    def test_slice_open_end(self) -> None:
        assert nes("abcdef").slice(3) == "def"

    def test_left_right(self) -> None:
        value = nes("Mulder")
        assert value.left(2) == "Mu"
        assert value.right(2) == "er"

    @pytest.mark.parametrize("count", [0, -1, -100])
    def test_left_right_non_positive(self, count: int) -> None:
        value = nes("Mulder")
        assert value.left(count) == ""
        assert value.right(count) == ""

    def test_left_right_beyond_length(self) -> None:
        value = nes("Mulder")
        assert value.left(10) == "Mulder"
        assert value.right(10) == "Mulder"

    def test_drop(self) -> None:
        value = nes("The Lone Gunmen")
        assert value.drop_left(2) == "e Lone Gunmen"
        assert value.drop_right(2) == "The Lone Gunm"

    @pytest.mark.parametrize("count", [0, -3])
    def test_drop_non_positive_keeps_all(self, count: int) -> None:
        value = nes("abc")
        assert value.drop_left(count) == "abc"
        assert value.drop_right(count) == "abc"

    def test_drop_everything(self) -> None:
        assert nes("abc").drop_left(3) == ""
        assert nes("abc").drop_right(5) == ""


class TestSearch:
    def test_contains(self) -> None:
        value = nes("abcdefghijklmnopqrstuvwxyz")
        assert value.contains("cde")
        assert not value.contains("xyz!")
        assert value.contains("")

    def test_in_operator(self) -> None:
        assert "ell" in nes("hello")
        assert 3 not in nes("hello")

    def test_starts_ends_with(self) -> None:
        value = nes("theory")
        assert value.starts_with("the")
        assert not value.starts_with("ory")
        assert value.ends_with("ory")
        assert not value.ends_with("the")

    def test_indexes(self) -> None:
        value = nes("Is, is, is")
        assert value.indexes("i") == [4, 8]
        assert value.indexes("is") == [4, 8]
        assert value.indexes("x") == []

    def test_indexes_overlapping(self) -> None:
        assert nes("aaaa").indexes("aa") == [0, 1, 2]

    def test_indexes_empty_needle(self) -> None:
        assert nes("abc").indexes("") == []

    def test_indices_alias(self) -> None:
        assert nes("banana").indices("ana") == nes("banana").indexes("ana") == [1, 3]

    def test_split(self) -> None:
        assert nes("a,b,,c").split(",") == ["a", "b", "", "c"]
        assert nes(" a  b ").split() == ["a", "b"]

    def test_split_empty_separator(self) -> None:
        assert nes("abc").split("") == ["a", "b", "c"]

    def test_words(self) -> None:
        words = nes("  the quick\tbrown\nfox ").words()
        assert [str(w) for w in words] == ["the", "quick", "brown", "fox"]
        assert all(isinstance(w, NonEmptyString) for w in words)

    def test_words_all_whitespace(self) -> None:
        assert nes("   ").words() == []


class TestNumbers:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", 0), ("42", 42), ("-17", -17), ("+5", 5), ("007", 7)],
    )
    def test_to_int(self, text: str, expected: int) -> None:
        assert nes(text).to_int() == expected

    @pytest.mark.parametrize(
        "text", ["abc", "1.5", " 42", "42 ", "-", "+", "1_000", "٣", "0x10", "1e3"]
    )
    def test_to_int_rejects(self, text: str) -> None:
        assert nes(text).to_int() is None

    @pytest.mark.parametrize("number", [0, 1, -1, 123456789, -987654321, 2**70])
    def test_int_round_trip(self, number: int) -> None:
        assert NonEmptyString.from_int(number).to_int() == number

    def test_from_int_text(self) -> None:
        assert str(NonEmptyString.from_int(-42)) == "-42"

    def test_to_int_past_digit_limit(self) -> None:
        # 5000 ones; built arithmetically so the expectation never goes through str.
        assert nes("1" * 5000).to_int() == (10**5000 - 1) // 9
        assert nes("-" + "9" * 5000).to_int() == -(10**5000 - 1)

    def test_from_int_past_digit_limit(self) -> None:
        assert str(NonEmptyString.from_int(10**5000)) == "1" + "0" * 5000
        assert str(NonEmptyString.from_int(-(10**5000))) == "-1" + "0" * 5000

    def test_huge_int_round_trip(self) -> None:
        number = -(10**6000) + 7
        assert NonEmptyString.from_int(number).to_int() == number

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("3.14", 3.14),
            ("-0.5", -0.5),
            ("10", 10.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e-05", 1e-05),
            ("+2.5E3", 2500.0),
        ],
    )
    def test_to_float(self, text: str, expected: float) -> None:
        assert nes(text).to_float() == expected

    @pytest.mark.parametrize(
        "text", ["abc", "1.2.3", " 1.0", "nan", "inf", "-infinity", "1e", ".", "1_0.5"]
    )
    def test_to_float_rejects(self, text: str) -> None:
        assert nes(text).to_float() is None

    @pytest.mark.parametrize("number", [0.0, 1.5, -2.25, 3.141592653589793, 1e-7, 6.02e23, -1e300])
    def test_float_round_trip(self, number: float) -> None:
        parsed = NonEmptyString.from_float(number).to_float()
        assert parsed is not None
        assert math.isclose(parsed, number, rel_tol=1e-5, abs_tol=1e-5)

    def test_from_float_text(self) -> None:
        assert str(NonEmptyString.from_float(1.5)) == "1.5"


class TestCase:
    def test_upper_lower(self) -> None:
        value = nes("Hello World")
        assert str(value.to_upper()) == "HELLO WORLD"
        assert str(value.to_lower()) == "hello world"

    def test_upper_changes_head(self) -> None:
        assert nes("abc").to_upper().head == "A"

    def test_case_is_length_preserving(self) -> None:
        value = nes("straße")
        assert len(value.to_upper()) == len(value)
        assert str(value.to_upper()) == "STRAßE"


class TestPadding:
    def test_pad_even(self) -> None:
        assert str(nes("1").pad(5, " ")) == "  1  "

    def test_pad_odd_extra_goes_right(self) -> None:
        assert str(nes("11").pad(5, " ")) == " 11  "
        assert str(nes("ab").pad(3, "*")) == "ab*"

    def test_pad_head_updates(self) -> None:
        value = nes("x").pad(3, "-")
        assert value.head == "-"
        assert value.tail == "x-"

    @pytest.mark.parametrize("width", [-1, 0, 3, 4])
    def test_pad_no_op_below_threshold(self, width: int) -> None:
        value = nes("abcd")
        assert value.pad(width, "*") == value
        assert value.pad_left(width, "*") == value
        assert value.pad_right(width, "*") == value

    def test_pad_left(self) -> None:
        value = nes("121").pad_left(5, ".")
        assert str(value) == "..121"
        assert value.head == "."

    def test_pad_right(self) -> None:
        value = nes("121").pad_right(5, ".")
        assert str(value) == "121.."
        assert value.head == "1"

    def test_pad_requires_single_char(self) -> None:
        with pytest.raises(ValueError):
            nes("a").pad(5, "ab")
        with pytest.raises(ValueError):
            nes("a").pad_left(5, "")


class TestTrim:
    def test_trim(self) -> None:
        value = nes("  hats  \n")
        assert value.trim() == "hats"
        assert value.trim_left() == "hats  \n"
        assert value.trim_right() == "  hats"

    def test_trim_whitespace_only_is_empty(self) -> None:
        value = nes(" ")
        assert value.trim() == ""
        assert value.trim_left() == ""
        assert value.trim_right() == ""

    def test_trim_returns_plain_str(self) -> None:
        assert type(nes("abc").trim()) is str


class TestHigherOrder:
    def test_map(self) -> None:
        value = nes("a-b").map(lambda c: "_" if c == "-" else c)
        assert str(value) == "a_b"

    def test_map_applies_to_head(self) -> None:
        assert nes("abc").map(str.upper).head == "A"

    def test_map_rejects_non_char_results(self) -> None:
        with pytest.raises(ValueError):
            nes("ab").map(lambda c: c * 2)
        with pytest.raises(ValueError):
            nes("ab").map(lambda c: "")

    def test_filter(self) -> None:
        assert nes("R2-D2").filter(str.isdigit) == "22"

    def test_filter_can_empty(self) -> None:
        assert nes("abc").filter(str.isdigit) == ""

    def test_foldl(self) -> None:
        assert nes("time").foldl(lambda acc, c: c + acc, "") == "emit"

    def test_foldr(self) -> None:
        assert nes("time").foldr(lambda c, acc: acc + c, "") == "emit"
        assert nes("abc").foldr(lambda c, acc: c + acc, "") == "abc"

    def test_fold_counts_head(self) -> None:
        assert nes("x").foldl(lambda acc, _: acc + 1, 0) == 1

    def test_any_all(self) -> None:
        value = nes("90210")
        assert value.all(str.isdigit)
        assert value.any(lambda c: c == "0")
        assert not value.any(str.isalpha)
        assert not nes("R2-D2").all(str.isdigit)


class TestSequenceConversion:
    def test_to_sequence(self) -> None:
        seq = nes("abc").to_nonempty_sequence()
        assert seq.head == "a"
        assert seq.tail == ("b", "c")

    def test_from_sequence(self) -> None:
        value = NonEmptyString.from_nonempty_sequence(NonEmptySequence.of("x", "y"))
        assert value == nes("xy")

    @pytest.mark.parametrize("text", SAMPLES)
    def test_inverse(self, text: str) -> None:
        value = nes(text)
        assert NonEmptyString.from_nonempty_sequence(value.to_nonempty_sequence()) == value

    def test_from_sequence_rejects_multi_char_elements(self) -> None:
        with pytest.raises(ValueError):
            NonEmptyString.from_nonempty_sequence(NonEmptySequence.of("a", "bc"))


class _Label(BaseModel):
    name: NonEmptyString


class TestPydanticField:
    def test_validates_from_str(self) -> None:
        label = _Label(name="tag")
        assert label.name == nes("tag")

    def test_accepts_instance(self) -> None:
        value = nes("tag")
        assert _Label(name=value).name is value

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValidationError, match="at least one character"):
            _Label(name="")

    def test_rejects_non_str(self) -> None:
        with pytest.raises(ValidationError):
            _Label(name=5)

    def test_serializes_as_str(self) -> None:
        label = _Label(name="tag")
        assert label.model_dump() == {"name": "tag"}
        assert label.model_dump_json() == '{"name":"tag"}'
