"""Tests for OptionSpec / OptionSchema validation."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from medea.services.errors import ErrorCode, InvocationError
from medea.services.options import Arity, OptionSchema, OptionSpec


def _schema() -> OptionSchema:
    return OptionSchema(
        OptionSpec(name="value", positional=True, required=True),
        OptionSpec(
            name="count",
            decls=("-c", "--count"),
            value_type="int",
            min_value=1,
            max_value=10,
            default=1,
        ),
        OptionSpec(
            name="mode",
            decls=("-m", "--mode"),
            choices=("fast", "slow"),
            default="fast",
            conflicts=frozenset({"quiet"}),
        ),
        OptionSpec(name="quiet", decls=("-q", "--quiet"), arity=Arity.FLAG),
        OptionSpec(name="tag", decls=("--tag",), arity=Arity.MULTI),
    )


def _raw(**overrides: object) -> dict[str, object]:
    raw: dict[str, object] = {"value": "x", "count": None, "mode": None, "quiet": False, "tag": ()}
    raw.update(overrides)
    return raw


def _code(exc: pytest.ExceptionInfo[InvocationError]) -> ErrorCode:
    return exc.value.code


class TestValidate:
    def test_defaults_filled(self) -> None:
        opts = _schema().validate(_raw())
        assert opts["count"] == 1
        assert opts["mode"] == "fast"
        assert opts["quiet"] is False
        assert opts["tag"] == ()

    def test_result_is_read_only(self) -> None:
        opts = _schema().validate(_raw())
        with pytest.raises(TypeError):
            opts["count"] = 5  # type: ignore[index]

    def test_int_conversion(self) -> None:
        assert _schema().validate(_raw(count="7"))["count"] == 7

    def test_choice_normalized(self) -> None:
        assert _schema().validate(_raw(mode="SLOW"))["mode"] == "slow"

    def test_multi_values(self) -> None:
        assert _schema().validate(_raw(tag=("a", "b")))["tag"] == ("a", "b")

    def test_missing_required(self) -> None:
        with pytest.raises(InvocationError) as exc:
            _schema().validate(_raw(value=None))
        assert _code(exc) is ErrorCode.MISSING_OPTION
        assert exc.value.detail == {"option": "VALUE"}

    def test_conflict(self) -> None:
        with pytest.raises(InvocationError) as exc:
            _schema().validate(_raw(mode="slow", quiet=True))
        assert _code(exc) is ErrorCode.CONFLICTING_OPTIONS
        assert exc.value.detail == {"options": ["--mode", "--quiet"]}

    def test_default_never_conflicts(self) -> None:
        opts = _schema().validate(_raw(quiet=True))
        assert opts["quiet"] is True
        assert opts["mode"] == "fast"

    @pytest.mark.parametrize("count", ["0", "11", "ten", "1.5"])
    def test_out_of_range(self, count: str) -> None:
        with pytest.raises(InvocationError) as exc:
            _schema().validate(_raw(count=count))
        assert _code(exc) is ErrorCode.INVALID_VALUE

    def test_bad_choice(self) -> None:
        with pytest.raises(InvocationError) as exc:
            _schema().validate(_raw(mode="medium"))
        assert _code(exc) is ErrorCode.INVALID_VALUE
        assert "fast, slow" in exc.value.message

    def test_fail_fast_order(self) -> None:
        """Missing beats conflicting beats invalid."""
        with pytest.raises(InvocationError) as exc:
            _schema().validate(_raw(value=None, mode="bogus", quiet=True))
        assert _code(exc) is ErrorCode.MISSING_OPTION

        with pytest.raises(InvocationError) as exc:
            _schema().validate(_raw(mode="bogus", quiet=True))
        assert _code(exc) is ErrorCode.CONFLICTING_OPTIONS

    def test_supplied(self) -> None:
        assert _schema().supplied(_raw(quiet=True)) == ["value", "quiet"]


class TestSchemaConstruction:
    def test_duplicate_names(self) -> None:
        with pytest.raises(ValueError, match="duplicate"):
            OptionSchema(
                OptionSpec(name="a", decls=("-a",)),
                OptionSpec(name="a", decls=("--aa",)),
            )

    def test_unknown_conflict(self) -> None:
        with pytest.raises(ValueError, match="unknown options"):
            OptionSchema(OptionSpec(name="a", decls=("-a",), conflicts=frozenset({"b"})))

    def test_positional_flag_rejected(self) -> None:
        with pytest.raises(ValueError):
            OptionSpec(name="a", positional=True, arity=Arity.FLAG)

    def test_option_needs_decls(self) -> None:
        with pytest.raises(ValueError):
            OptionSpec(name="a")

    def test_lookup_and_iteration(self) -> None:
        schema = _schema()
        assert schema["count"].label == "--count"
        assert [spec.name for spec in schema] == ["value", "count", "mode", "quiet", "tag"]


class TestDecorator:
    def test_click_collects_raw_values(self) -> None:
        seen: dict[str, object] = {}

        @click.command()
        @_schema()
        def cmd(**raw: object) -> None:
            seen.update(raw)

        result = CliRunner().invoke(cmd, ["hello", "-c", "abc", "--tag", "a", "--tag", "b"])
        assert result.exit_code == 0
        assert seen == {
            "value": "hello",
            "count": "abc",
            "mode": None,
            "quiet": False,
            "tag": ("a", "b"),
        }

    def test_help_shows_defaults_and_choices(self) -> None:
        @click.command()
        @_schema()
        def cmd(**raw: object) -> None:
            pass

        result = CliRunner().invoke(cmd, ["--help"])
        assert "[fast|slow]" in result.output
        assert "[default: 1]" in result.output
