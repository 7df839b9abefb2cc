"""Tests pour le module commands."""

import io
import re
import sys
from unittest.mock import MagicMock, patch

import pytest

from cmdmailer.capture import StreamTag
from cmdmailer.commands import (
    CleanExit,
    CommandExecutor,
    CommandFormatter,
    CommandRun,
    ExitCodeFailure,
    LinuxCommandExecutor,
    PlainCommandFormatter,
    RunStatistics,
    SignalFailure,
    UnknownFailure,
)
from cmdmailer.errors import CommandNotFoundError
from cmdmailer.logging.base import Logger


def _python(code: str) -> list:
    return [sys.executable, "-c", code]


# --- Tests structures de données ---


class TestRunStatistics:
    """Tests pour la dataclass RunStatistics."""

    def test_valeurs_par_defaut(self):
        stats = RunStatistics(command=("ls",))
        assert stats.system_time == 0.0
        assert stats.user_time == 0.0

    def test_frozen(self):
        """Test que la dataclass est immuable."""
        stats = RunStatistics(command=("ls",))
        with pytest.raises(AttributeError):
            stats.user_time = 1.0

    def test_commande_figee(self):
        """La ligne de commande ne peut pas être modifiée après coup."""
        stats = RunStatistics(command=tuple(["ls", "-l"]))
        with pytest.raises(AttributeError):
            stats.command.append("-a")
        assert stats.command == ("ls", "-l")


class TestCommandRun:
    """Tests pour la dataclass CommandRun."""

    def test_capture_absente_par_defaut(self):
        run = CommandRun(
            outcome=CleanExit(), statistics=RunStatistics(command=("true",))
        )
        assert run.capture is None


# --- Tests PlainCommandFormatter ---


class TestPlainCommandFormatter:
    """Tests pour PlainCommandFormatter."""

    def test_est_un_formatter(self):
        assert isinstance(PlainCommandFormatter(), CommandFormatter)

    def test_format_start_user(self):
        formatter = PlainCommandFormatter()
        assert formatter.format_start(["ls", "-la"], False) == (
            "[user] Exécution : ls -la"
        )

    def test_format_start_root(self):
        formatter = PlainCommandFormatter()
        assert formatter.format_start(["ls"], True) == "[ROOT] Exécution : ls"

    def test_format_end(self):
        formatter = PlainCommandFormatter()
        assert formatter.format_end(["make"], "succeeded", False) == (
            "[user] Terminé (succeeded) : make"
        )


# --- Tests LinuxCommandExecutor ---


class TestLinuxCommandExecutor:
    """Tests pour LinuxCommandExecutor avec de vrais processus."""

    @pytest.fixture
    def streams(self):
        return io.BytesIO(), io.BytesIO()

    @pytest.fixture
    def executor(self, streams):
        stdout, stderr = streams
        return LinuxCommandExecutor(stdout=stdout, stderr=stderr)

    def test_implemente_l_interface(self, executor):
        assert isinstance(executor, CommandExecutor)

    def test_succes_avec_capture(self, executor, streams):
        """stdout et stderr sont recopiés et capturés."""
        run = executor.run(_python(
            "import sys\n"
            "sys.stdout.write('out\\n'); sys.stdout.flush()\n"
            "sys.stderr.write('err\\n'); sys.stderr.flush()\n"
        ))

        assert run.outcome == CleanExit()
        assert run.capture is not None
        content = run.capture.content()
        assert '<span class="stdout">out\n</span>' in content
        assert '<span class="stderr">err\n</span>' in content
        assert streams[0].getvalue() == b"out\n"
        assert streams[1].getvalue() == b"err\n"

    def test_ordre_d_un_meme_flux(self, executor):
        """L'ordre des écritures d'un même flux est conservé."""
        run = executor.run(_python(
            "import sys\n"
            "for i in range(100):\n"
            "    print(i, flush=True)\n"
        ))
        text = re.sub(r"</?span[^>]*>", "", run.capture.content())
        assert text == "".join(f"{i}\n" for i in range(100))

    def test_code_de_sortie(self, executor):
        run = executor.run(_python("raise SystemExit(3)"))
        assert run.outcome == ExitCodeFailure(code=3)
        assert run.outcome.exit_code == 3

    def test_signal(self, executor):
        run = executor.run(_python(
            "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"
        ))
        assert isinstance(run.outcome, SignalFailure)
        assert run.outcome.exit_code == 125

    def test_statistiques(self, executor):
        command = _python("pass")
        run = executor.run(command)
        assert run.statistics.command == tuple(command)
        assert isinstance(run.statistics.command, tuple)
        assert run.statistics.system_time >= 0.0
        assert run.statistics.user_time >= 0.0

    def test_sans_capture(self, executor, streams):
        """Sans capture la commande hérite des flux, rien n'est capturé."""
        run = executor.run(_python("pass"), capture=False)
        assert run.capture is None
        assert run.outcome == CleanExit()
        assert streams[0].getvalue() == b""

    def test_capture_bornee(self, streams):
        """Au-delà de la capacité la capture est tronquée,
        mais la console reçoit toute la sortie."""
        executor = LinuxCommandExecutor(
            stdout=streams[0], stderr=streams[1], capacity=1024
        )
        run = executor.run(_python(
            "import sys\n"
            "for _ in range(200):\n"
            "    sys.stdout.write('x' * 100 + '\\n'); sys.stdout.flush()\n"
        ))
        assert run.capture.truncated is True
        assert len(streams[0].getvalue()) == 200 * 101

    def test_stdin_transmis(self, executor, tmp_path):
        source = tmp_path / "input.txt"
        source.write_text("bonjour\n")
        with open(source, "rb") as stdin:
            run = executor.run(
                _python("import sys; print(sys.stdin.read().upper())"),
                stdin=stdin,
            )
        assert "BONJOUR" in run.capture.content()

    def test_commande_introuvable(self, executor):
        with pytest.raises(CommandNotFoundError) as exc_info:
            executor.run(["/nonexistent/cmdmailer-test"])
        assert exc_info.value.exit_code == 127

    def test_erreur_de_recopie_console(self):
        """Une console en erreur n'interrompt pas la capture."""
        broken = MagicMock()
        broken.write.side_effect = OSError("broken pipe")
        logger = MagicMock(spec=Logger)
        executor = LinuxCommandExecutor(
            logger=logger, stdout=broken, stderr=io.BytesIO()
        )
        run = executor.run(_python("print('a'); print('b')"))
        assert run.outcome == CleanExit()
        assert "a\nb\n" in run.capture.content()
        logger.log_error.assert_called()

    def test_statut_illisible(self, executor):
        """Un statut indisponible donne une issue inconnue."""
        with patch(
            "cmdmailer.commands.runner.os.wait4",
            side_effect=ChildProcessError("no child"),
        ):
            run = executor.run(_python("pass"))
        assert run.outcome == UnknownFailure()
        assert run.outcome.exit_code == 125

    def test_journal(self, streams):
        logger = MagicMock(spec=Logger)
        executor = LinuxCommandExecutor(
            logger=logger, stdout=streams[0], stderr=streams[1]
        )
        executor.run(_python("pass"))
        messages = [c.args[0] for c in logger.log_info.call_args_list]
        assert any("Exécution" in m for m in messages)
        assert any("Terminé (succeeded)" in m for m in messages)

    def test_journal_echec(self, streams):
        logger = MagicMock(spec=Logger)
        executor = LinuxCommandExecutor(
            logger=logger, stdout=streams[0], stderr=streams[1]
        )
        executor.run(_python("raise SystemExit(2)"))
        logger.log_error.assert_called_once()
        assert "failed with exit code: 2" in (
            logger.log_error.call_args.args[0]
        )

    def test_passthrough_par_defaut(self):
        executor = LinuxCommandExecutor()
        fake = MagicMock()
        with patch("cmdmailer.commands.runner.sys.stdout", fake):
            assert executor._passthrough(StreamTag.STDOUT) is fake.buffer
