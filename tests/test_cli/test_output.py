"""Tests for CLI output helpers."""

import pytest

from feedpush.cli.helpers.output import print_publish_result
from feedpush.publishing.service import PublishResult


class TestPrintPublishResult:
    def test_errors_printed_literally(self, capsys: pytest.CaptureFixture[str]):
        result = PublishResult(
            success=False,
            errors=["Malformed manifest [red]build.xml[/red]: mismatched tag [/bold]"],
        )

        print_publish_result(result, use_emoji=False)

        out = capsys.readouterr().out
        assert "[ERROR] Publishing failed" in out
        assert "[red]build.xml[/red]" in out
        assert "[/bold]" in out

    def test_success_lists_categories(self, capsys: pytest.CaptureFixture[str]):
        result = PublishResult(success=True, categories={"OSX": 2})
        result.add_message("Published 1 manifest(s) to 1 categories")

        print_publish_result(result, use_emoji=False)

        out = capsys.readouterr().out
        assert "[OK] Published 1 manifest(s)" in out
        assert "OSX: 2 artifact(s)" in out
