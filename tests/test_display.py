"""Display / Message 테스트"""

import io

import pytest

from usersapp.cli.display import Colors, Display, Message, Severity
from usersapp.types import User


class TestShowColorized:
    """심각도별 메시지 출력"""

    @pytest.mark.parametrize(
        "severity,prefix",
        [(Severity.SUCCESS, "✔"), (Severity.ERROR, "✖"), (Severity.INFO, "ℹ")],
    )
    def test_each_severity_has_own_prefix(self, display, stream, severity, prefix):
        display.show_colorized(severity, "hello")

        assert stream.getvalue() == f"{prefix} hello\n"

    def test_accepts_plain_string_level(self, display, stream):
        display.show_colorized("success", "done")

        assert stream.getvalue() == "✔ done\n"

    @pytest.mark.parametrize("severity", ["debug", "", None, 3])
    def test_unknown_severity_prints_invalid_option(self, display, stream, severity):
        display.show_colorized(severity, "hello")

        assert stream.getvalue() == "Invalid option\n"

    def test_no_color_when_not_tty(self, display, stream):
        display.error("boom")

        assert Colors.RED not in stream.getvalue()

    def test_color_on_tty(self):
        class TTYStream(io.StringIO):
            def isatty(self):
                return True

        stream = TTYStream()
        display = Display(stream=stream)

        display.error("boom")

        assert stream.getvalue() == f"{Colors.RED}✖ boom{Colors.RESET}\n"

    def test_color_disabled_explicitly(self):
        class TTYStream(io.StringIO):
            def isatty(self):
                return True

        display = Display(stream=TTYStream(), use_color=False)

        assert display.use_color is False


class TestListingOutput:
    """표 / No data 출력"""

    def test_no_data_line(self, display, stream):
        display.no_data()

        assert stream.getvalue() == "No data...\n"

    def test_table_rows_in_order(self, display, stream):
        display.table([User("Anna", 30), User("Max", 20)])

        output = stream.getvalue()
        assert "name" in output and "age" in output
        assert output.index("Anna") < output.index("Max")


class TestWelcome:
    """시작 배너"""

    def test_lists_every_action(self, display, stream):
        display.welcome()

        output = stream.getvalue()
        assert "Welcome to the UsersApp!" in output
        assert "Available actions" in output
        for action in ("list", "add", "edit", "remove", "quit"):
            assert f"{action} – " in output

    def test_legend_descriptions_capitalized(self, display, stream):
        display.welcome()

        output = stream.getvalue()
        assert "list – Show all users" in output
        assert "quit – Quit the app" in output


class TestMessage:
    """Message 대소문자 변환"""

    def test_capitalize(self):
        message = Message("hELLO wORLD")

        message.capitalize()

        assert message.content == "Hello world"

    def test_upper_lower(self):
        message = Message("MiXeD")

        message.to_upper()
        assert message.content == "MIXED"

        message.to_lower()
        assert message.content == "mixed"

    def test_capitalize_empty(self):
        message = Message("")

        message.capitalize()

        assert message.content == ""

    def test_show_writes_to_display_stream(self, display, stream):
        Message("plain text", display).show()

        assert stream.getvalue() == "plain text\n"
