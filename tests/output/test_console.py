"""Tests for Rich Console factory and theme."""

from io import StringIO

from rich.text import Text

from medea.output.console import MEDEA_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_by_default(self) -> None:
        console = create_console()
        console.print(Text("hello", style="medea.error"))
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_color_emits_ansi(self) -> None:
        console = create_console(color=True)
        console.print(Text("hello", style="medea.error"))
        assert "\x1b[" in get_output(console)

    def test_markup_is_literal(self) -> None:
        console = create_console()
        console.print("[bold]not markup[/bold]")
        assert "[bold]not markup[/bold]" in get_output(console)

    def test_long_lines_not_wrapped(self) -> None:
        console = create_console(width=20)
        console.print("x" * 50)
        assert get_output(console) == "x" * 50 + "\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_theme_has_medea_styles(self) -> None:
        for name in ("medea.error", "medea.heading", "medea.valid", "medea.invalid"):
            assert name in MEDEA_THEME.styles


class TestGetOutput:
    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""
