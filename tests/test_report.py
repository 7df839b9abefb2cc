"""Tests pour le module report."""

import pytest

from cmdmailer.capture import CaptureBuffer, StreamTag
from cmdmailer.commands import (
    CleanExit,
    ExitCodeFailure,
    RunStatistics,
    SignalFailure,
    UnknownFailure,
)
from cmdmailer.report import (
    TRUNCATION_NOTICE,
    ReportDocument,
    ReportRenderer,
    format_duration,
)


class TestFormatDuration:
    """Tests pour format_duration."""

    @pytest.mark.parametrize("seconds, expected", [
        (0, "0s"),
        (850e-9, "850ns"),
        (1.5e-6, "1.5µs"),
        (0.0125, "12.5ms"),
        (0.004, "4ms"),
        (1, "1s"),
        (2.25, "2.25s"),
        (63, "1m3s"),
        (3602, "1h0m2s"),
        (125.5, "2m5.5s"),
    ])
    def test_formats(self, seconds, expected):
        assert format_duration(seconds) == expected


class TestReportRenderer:
    """Tests pour ReportRenderer."""

    @pytest.fixture
    def renderer(self):
        return ReportRenderer()

    @pytest.fixture
    def stats(self):
        return RunStatistics(
            command=("echo", "hi"), system_time=0.0015, user_time=0.002
        )

    def test_sujet_par_defaut(self, renderer, stats):
        document = renderer.render(CleanExit(), stats)
        assert document.subject == "Process succeeded"

    def test_sujet_configure(self, renderer, stats):
        document = renderer.render(
            ExitCodeFailure(code=3), stats, subject="nightly"
        )
        assert document.subject == "nightly"
        assert "<title>nightly</title>" in document.html

    def test_sujet_selon_l_issue(self, renderer, stats):
        assert renderer.render(
            ExitCodeFailure(code=3), stats
        ).subject == "Process failed with exit code: 3"
        assert renderer.render(
            SignalFailure(signal_name="killed"), stats
        ).subject == "Process failed with signal: killed"
        assert renderer.render(
            UnknownFailure(), stats
        ).subject == "Process failed with an unknown error."

    def test_entete_et_statistiques(self, renderer, stats):
        html = renderer.render(CleanExit(), stats).html
        assert html.startswith("<!doctype html>\n")
        assert ".stderr{color:#f00;}" in html
        assert "<h1>Process 'echo' succeeded</h1>\n" in html
        assert "Command: echo hi<br>\n" in html
        assert "Execution took: 1.5ms (system) 2ms (user)<br>\n" in html
        assert html.endswith("\n</body>\n</html>")

    def test_sortie_capturee(self, renderer, stats):
        capture = CaptureBuffer()
        capture.append(StreamTag.STDOUT, "hi\n")
        capture.append(StreamTag.STDERR, "oops\n")
        html = renderer.render(CleanExit(), stats, capture).html
        assert "STDOUT (black) and STDERR (red) follows:<br>\n<hr><br>\n" in html
        assert (
            '<span class="stdout">hi<br>\n</span>'
            '<span class="stderr">oops<br>\n</span>'
        ) in html
        assert TRUNCATION_NOTICE not in html

    def test_sans_capture(self, renderer, stats):
        html = renderer.render(CleanExit(), stats, None).html
        assert "STDOUT (black)" not in html
        assert "<span" not in html

    def test_capture_tronquee(self, renderer, stats):
        capture = CaptureBuffer(capacity=5)
        capture.append(StreamTag.STDOUT, "0123456789")
        html = renderer.render(CleanExit(), stats, capture).html
        assert html.endswith(TRUNCATION_NOTICE + "\n</body>\n</html>")
        assert "and more ..." in html

    def test_echappement(self, renderer):
        """Les valeurs issues de la commande sont échappées."""
        stats = RunStatistics(command=("<evil>", "a&b"))
        document = renderer.render(
            SignalFailure(signal_name="<sig>"), stats, subject="<s>"
        )
        assert "<evil>" not in document.html
        assert "&lt;evil&gt;" in document.html
        assert "a&amp;b" in document.html
        assert "&lt;sig&gt;" in document.html
        assert "<title>&lt;s&gt;</title>" in document.html
        assert document.subject == "<s>"

    def test_deterministe(self, renderer, stats):
        """Mêmes entrées, même document."""
        capture = CaptureBuffer()
        capture.append(StreamTag.STDOUT, "x\n")
        first = renderer.render(ExitCodeFailure(code=1), stats, capture)
        second = renderer.render(ExitCodeFailure(code=1), stats, capture)
        assert first == second
        assert isinstance(first, ReportDocument)
