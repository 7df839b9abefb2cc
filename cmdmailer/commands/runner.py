"""Exécuteur de la commande surveillée via subprocess.

Ce module fournit LinuxCommandExecutor, une implémentation concrète
de CommandExecutor qui lance la commande, recopie ses sorties sur la
console en temps réel et, si la capture est active, en conserve une
copie HTML bornée pour le rapport.

Chaque flux (stdout, stderr) est recopié par son propre thread ; les
deux threads écrivent dans le même CaptureBuffer. La terminaison est
attendue avec os.wait4, qui fournit à la fois le statut brut (pour la
classification) et la consommation CPU de l'enfant.

Example :
    Exécution avec capture et journal fichier :

        from cmdmailer import FileLogger
        from cmdmailer.commands import LinuxCommandExecutor

        executor = LinuxCommandExecutor(logger=FileLogger("/tmp/run.log"))
        run = executor.run(["ls", "-la"])
        print(run.outcome.status)
        print(run.capture.content())
"""

import os
import subprocess  # nosec B404
import sys
import threading
from typing import IO, BinaryIO, List, Optional, Tuple

from cmdmailer.capture.buffer import (
    MAX_CAPTURE_BYTES,
    CaptureBuffer,
    CaptureSink,
    StreamTag,
)
from cmdmailer.commands.base import (
    CommandExecutor,
    CommandRun,
    RunStatistics,
)
from cmdmailer.commands.classifier import classify
from cmdmailer.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from cmdmailer.errors.exceptions import CommandNotFoundError
from cmdmailer.logging.base import Logger

READ_CHUNK_SIZE = 64 * 1024


class LinuxCommandExecutor(CommandExecutor):
    """Exécuteur de la commande surveillée via subprocess.

    Les messages de log utilisent PlainCommandFormatter avec les
    préfixes [ROOT] ou [user] selon les privilèges détectés à
    l'initialisation via os.getuid().

    Attributes:
        _logger: Logger optionnel pour le journal fichier.
        _stdout: Destination de la recopie de stdout (défaut:
            sys.stdout.buffer au moment de l'exécution).
        _stderr: Destination de la recopie de stderr.
        _capacity: Taille maximale de la capture en octets.
        _is_root: True si le processus courant est root (uid 0).
        _formatter: Formateur des messages de journal.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[BinaryIO] = None,
        capacity: int = MAX_CAPTURE_BYTES,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise l'exécuteur.

        Args:
            logger: Logger optionnel pour le journal fichier.
            stdout: Flux binaire recevant la recopie de stdout.
            stderr: Flux binaire recevant la recopie de stderr.
            capacity: Taille maximale de la capture en octets.
            formatter: Formateur des messages de journal
                (défaut: PlainCommandFormatter).
        """
        self._logger = logger
        self._stdout = stdout
        self._stderr = stderr
        self._capacity = capacity
        self._is_root: bool = os.getuid() == 0
        self._formatter = formatter or PlainCommandFormatter()

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _passthrough(self, tag: StreamTag) -> Optional[BinaryIO]:
        """Retourne le flux console recevant la recopie d'un flux.

        Args:
            tag: Flux de la commande.

        Returns:
            Flux binaire injecté, sinon le buffer binaire de
            sys.stdout/sys.stderr, ou None s'il n'en a pas.
        """
        if tag is StreamTag.STDOUT:
            return self._stdout or getattr(sys.stdout, "buffer", None)
        return self._stderr or getattr(sys.stderr, "buffer", None)

    def _tee(
        self,
        source: IO[bytes],
        passthrough: Optional[BinaryIO],
        sink: CaptureSink,
    ) -> None:
        """Recopie un flux de la commande vers la console et la capture.

        Une erreur d'écriture sur la console interrompt la recopie
        de ce flux mais pas sa lecture : la commande n'est jamais
        bloquée sur un pipe plein.

        Args:
            source: Extrémité lecture du pipe de la commande.
            passthrough: Flux console, ou None.
            sink: Sink de capture du flux.
        """
        try:
            for chunk in iter(lambda: source.read1(READ_CHUNK_SIZE), b""):
                if passthrough is not None:
                    try:
                        passthrough.write(chunk)
                        passthrough.flush()
                    except OSError as e:
                        self._log_error(
                            f"Recopie {sink.tag} interrompue : {e}"
                        )
                        passthrough = None
                sink.write(chunk)
        finally:
            sink.close()
            source.close()

    def _wait(
        self, proc: subprocess.Popen
    ) -> Tuple[Optional[int], float, float]:
        """Attend la terminaison de la commande.

        Args:
            proc: Processus lancé.

        Returns:
            Statut brut (None si illisible), temps CPU système et
            temps CPU utilisateur de l'enfant.
        """
        try:
            _, status, usage = os.wait4(proc.pid, 0)
        except ChildProcessError as e:
            self._log_error(f"Statut de {proc.pid} illisible : {e}")
            proc.wait()
            return None, 0.0, 0.0
        proc.returncode = os.waitstatus_to_exitcode(status)
        return status, usage.ru_stime, usage.ru_utime

    def run(
        self,
        command: List[str],
        capture: bool = True,
        stdin: Optional[IO] = None,
    ) -> CommandRun:
        """Exécute la commande et attend sa terminaison.

        Sans capture, la commande hérite directement de stdout et
        stderr. Avec capture, les deux flux passent par des pipes
        lus en parallèle. Aucune limite de durée n'est appliquée.

        Args:
            command: Commande sous forme de liste.
            capture: Active la capture HTML des sorties.
            stdin: Entrée standard (défaut: héritée).

        Returns:
            CommandRun avec l'issue, les statistiques et la capture.

        Raises:
            CommandNotFoundError: Si le système refuse de lancer
                la commande.
        """
        self._log(self._formatter.format_start(command, self._is_root))

        buffer = CaptureBuffer(self._capacity) if capture else None
        pipe = subprocess.PIPE if capture else None
        try:
            proc = subprocess.Popen(  # nosec B603
                command,
                stdin=stdin,
                stdout=pipe,
                stderr=pipe,
            )
        except OSError as e:
            self._log_error(f"Erreur système : {e}")
            raise CommandNotFoundError(
                f"Command '{command[0]}' could not be started: {e}"
            ) from e

        feeds: List[threading.Thread] = []
        if buffer is not None:
            for tag, source in (
                (StreamTag.STDOUT, proc.stdout),
                (StreamTag.STDERR, proc.stderr),
            ):
                feed = threading.Thread(
                    target=self._tee,
                    args=(
                        source,
                        self._passthrough(tag),
                        CaptureSink(buffer, tag),
                    ),
                    name=f"cmdmailer-{tag}",
                    daemon=True,
                )
                feed.start()
                feeds.append(feed)

        status, system_time, user_time = self._wait(proc)
        for feed in feeds:
            feed.join()

        outcome = classify(status)
        if outcome.success:
            self._log(self._formatter.format_end(
                command, outcome.status, self._is_root
            ))
        else:
            self._log_error(self._formatter.format_end(
                command, outcome.status, self._is_root
            ))

        return CommandRun(
            outcome=outcome,
            statistics=RunStatistics(
                command=tuple(command),
                system_time=system_time,
                user_time=user_time,
            ),
            capture=buffer,
        )
