"""Tests for CompiledPattern.parse and type coercion."""

import dataclasses
import math

import pytest

from grokex import ConversionError, TypeTag, coerce_value, compile_pattern

# ──────────────────────────────────────────────────────────────────────────────
# coerce_value
# ──────────────────────────────────────────────────────────────────────────────


class TestCoerceValue:
    """Tests for coerce_value."""

    def test_no_tag_is_string(self) -> None:
        assert coerce_value("42") == "42"

    def test_unrecognized_tag_string_is_string(self) -> None:
        """Unknown tag tokens pass the raw text through."""
        assert coerce_value("42", "decimal") == "42"

    @pytest.mark.parametrize(
        "raw,expected",
        [("42", 42), ("-7", -7), ("+3", 3), ("007", 7), ("9223372036854775807", 2**63 - 1)],
    )
    def test_int(self, raw, expected) -> None:
        value = coerce_value(raw, TypeTag.INT)
        assert value == expected
        assert type(value) is int

    @pytest.mark.parametrize(
        "raw", ["4.2", "", " 42", "42 ", "4_2", "0x1f", "9223372036854775808", "١٢"]
    )
    def test_int_rejects(self, raw) -> None:
        with pytest.raises(ConversionError) as exc:
            coerce_value(raw, TypeTag.INT)
        assert exc.value.raw == raw
        assert exc.value.target == "int"

    @pytest.mark.parametrize(
        "raw,expected",
        [("4.2", 4.2), ("42", 42.0), ("-1e3", -1000.0), (".5", 0.5), ("5.", 5.0)],
    )
    def test_float(self, raw, expected) -> None:
        value = coerce_value(raw, "float")
        assert value == expected
        assert type(value) is float

    def test_float_special_values(self) -> None:
        assert math.isinf(coerce_value("inf", TypeTag.FLOAT))
        assert math.isnan(coerce_value("NaN", TypeTag.FLOAT))

    @pytest.mark.parametrize("raw", ["abc", "", " 1.0", "1_000.0", "1.0.0"])
    def test_float_rejects(self, raw) -> None:
        with pytest.raises(ConversionError) as exc:
            coerce_value(raw, TypeTag.FLOAT)
        assert exc.value.target == "float"

    def test_bool(self) -> None:
        assert coerce_value("true", TypeTag.BOOL) is True
        assert coerce_value("false", "boolean") is False

    @pytest.mark.parametrize("raw", ["True", "FALSE", "1", "yes", ""])
    def test_bool_rejects(self, raw) -> None:
        with pytest.raises(ConversionError) as exc:
            coerce_value(raw, "bool")
        assert exc.value.target == "bool"


# ──────────────────────────────────────────────────────────────────────────────
# parse
# ──────────────────────────────────────────────────────────────────────────────


class TestParse:
    """Tests for CompiledPattern.parse."""

    def test_fragment_name_reported_without_alias(self) -> None:
        """A registered fragment is reported under its own name."""
        pattern = compile_pattern("%{NAME}", {"NAME": "[A-z0-9._-]+"})
        assert pattern.parse("admin") == {"NAME": "admin"}

    def test_alias_only_omits_unaliased(self) -> None:
        """With alias_only, an unaliased fragment is not reported."""
        pattern = compile_pattern("%{NAME}", {"NAME": "[A-z0-9._-]+"}, alias_only=True)
        assert pattern.parse("admin") == {}
        assert pattern.match("admin")

    def test_no_match_is_empty(self) -> None:
        """Text that does not match yields an empty mapping."""
        pattern = compile_pattern("%{N:n:int}", {"N": r"\d+"})
        assert pattern.parse("no digits here") == {}
        assert not pattern.match("no digits here")

    def test_first_match_only(self) -> None:
        """Only the leftmost match in the text is used."""
        pattern = compile_pattern("%{N:n:int}", {"N": r"\d+"})
        assert pattern.parse("a 1 b 2 c 3") == {"n": 1}

    def test_int_float_typed(self) -> None:
        """int and float tags convert captured text."""
        patterns = {"NUM": r"[0-9.]+"}
        assert compile_pattern("%{NUM:n:int}", patterns).parse("42") == {"n": 42}
        assert compile_pattern("%{NUM:n:float}", patterns).parse("4.2") == {"n": 4.2}

    def test_conversion_failure_aborts_parse(self) -> None:
        """A failed conversion raises and no partial mapping is produced."""
        pattern = compile_pattern("%{W:word} %{NUM:n:int}", {"W": r"\w+", "NUM": r"[0-9.]+"})
        with pytest.raises(ConversionError) as exc:
            pattern.parse("value 4.2")
        assert exc.value.raw == "4.2"
        assert exc.value.target == "int"

    def test_alternation_reports_shared_alias(self) -> None:
        """Whichever side of an alternation matches is reported under the alias."""
        pattern = compile_pattern("^(?:%{A:x}|%{B:x})$", {"A": "[a-z]+", "B": "[0-9]+"})
        assert pattern.parse("abc") == {"x": "abc"}
        assert pattern.parse("123") == {"x": "123"}

    def test_shared_alias_leftmost_wins(self) -> None:
        """When several groups with one alias match, the leftmost is reported."""
        pattern = compile_pattern("%{W:x} %{W:x}", {"W": r"\w+"})
        assert pattern.parse("first second") == {"x": "first"}

    def test_shadowed_value_not_converted(self) -> None:
        """A value hidden by the leftmost group is never converted."""
        pattern = compile_pattern("%{W:x} %{W:x:int}", {"W": r"\w+"})
        assert pattern.parse("first second") == {"x": "first"}

    def test_outer_group_wins_over_nested_same_name(self) -> None:
        """An enclosing group is leftmost relative to the groups it contains."""
        pattern = compile_pattern("%{OUTER:v}", {"OUTER": "<%{INNER:v}>", "INNER": r"\w+"})
        assert pattern.parse("<abc>") == {"v": "<abc>"}

    def test_nested_unaliased_fields_reported(self) -> None:
        """Without alias_only, every nested fragment is a field."""
        pattern = compile_pattern("%{HOSTPORT:target}")
        result = pattern.parse("connect db01.example.com:5432")
        assert result["target"] == "db01.example.com:5432"
        assert result["IPORHOST"] == "db01.example.com"
        assert result["HOSTNAME"] == "db01.example.com"
        assert result["POSINT"] == "5432"
        assert "IP" not in result

    def test_optional_group_absent(self) -> None:
        """Optional groups that do not participate are omitted."""
        pattern = compile_pattern(r"%{W:a}(?: %{N:b:int})?", {"W": "[a-z]+", "N": r"\d+"})
        assert pattern.parse("abc") == {"a": "abc"}
        assert pattern.parse("abc 5") == {"a": "abc", "b": 5}

    def test_literal_named_group_reported_as_string(self) -> None:
        """Named groups written in the pattern text are reported by native name."""
        pattern = compile_pattern(r"(?P<level>[A-Z]+): %{N:code:int}", {"N": r"\d+"})
        assert pattern.parse("ERROR: 500") == {"level": "ERROR", "code": 500}

    def test_empty_capture_reported(self) -> None:
        """A group that matched the empty string is reported."""
        pattern = compile_pattern("a%{E:e}b", {"E": "x*"})
        assert pattern.parse("ab") == {"e": ""}

    def test_reusable_across_parses(self) -> None:
        """One compiled pattern serves many independent parse calls."""
        pattern = compile_pattern("%{N:n:int}", {"N": r"\d+"})
        first = pattern.parse("1")
        second = pattern.parse("2")
        assert first == {"n": 1}
        assert second == {"n": 2}
        first["n"] = 99
        assert pattern.parse("1") == {"n": 1}


# ──────────────────────────────────────────────────────────────────────────────
# Immutability
# ──────────────────────────────────────────────────────────────────────────────


class TestImmutability:
    """CompiledPattern never changes after construction."""

    def test_fields_frozen(self) -> None:
        pattern = compile_pattern("%{N}", {"N": r"\d"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.alias_map = {}  # type: ignore[misc]

    def test_alias_map_read_only(self) -> None:
        pattern = compile_pattern("%{N}", {"N": r"\d"})
        with pytest.raises(TypeError):
            pattern.alias_map["name1"] = pattern.alias_map["name0"]  # type: ignore[index]
