"""Tests for the Rich console factory."""

from measurectl.output.console import create_console, get_output, style_for_status


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        console.print("[measure.ok]OK[/measure.ok]")
        assert get_output(console) == "OK\n"

    def test_width(self) -> None:
        assert create_console(width=40).width == 40


class TestStyleForStatus:
    def test_known(self) -> None:
        assert style_for_status("failed") == "measure.status.failed"

    def test_unknown(self) -> None:
        assert style_for_status("other") == ""
