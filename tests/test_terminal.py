import io

from rich.console import Console

from prpulse.infra import ConsoleLogger, LogfireLogger, RichDisplay
from prpulse.infra.logging import logfire as logfire_module


class TestRichDisplay:
    def test_emit_writes_plain_text(self) -> None:
        out = io.StringIO()
        display = RichDisplay(
            out=Console(file=out, width=200),
            err=Console(file=io.StringIO()),
        )

        display.emit("[bold]PR #1[/bold] :smile:")

        assert out.getvalue() == "[bold]PR #1[/bold] :smile:\n"

    def test_status_wraps_block(self) -> None:
        display = RichDisplay(
            out=Console(file=io.StringIO()),
            err=Console(file=io.StringIO()),
        )
        ran = []

        with display.status("Fetching events"):
            ran.append(True)

        assert ran == [True]


class TestConsoleLogger:
    def test_formats_context_as_key_values(self) -> None:
        stream = io.StringIO()
        logger = ConsoleLogger("prpulse-test-console", "DEBUG", stream=stream)

        logger.warning("Could not fetch commits", pr_key="octo/app#1", error=None)

        assert stream.getvalue() == (
            "WARNING prpulse-test-console: Could not fetch commits | pr_key='octo/app#1'\n"
        )

    def test_respects_level(self) -> None:
        stream = io.StringIO()
        logger = ConsoleLogger("prpulse-test-level", "WARNING", stream=stream)

        logger.info("Fetched events", count=3)

        assert stream.getvalue() == ""


class TestLogfireLogger:
    def test_uses_module_level_calls_with_logger_attribute(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(
            logfire_module.logfire,
            "warn",
            lambda message, **attributes: calls.append((message, attributes)),
        )

        LogfireLogger("prpulse").warning("Could not fetch commits", pr_key="octo/app#1", error=None)

        assert calls == [
            ("Could not fetch commits", {"pr_key": "octo/app#1", "logger": "prpulse"})
        ]
