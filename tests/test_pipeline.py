"""Tests pour CommandMailer (exécution, rapport et envoi)."""

import io
import sys
from unittest.mock import MagicMock

import pytest

from cmdmailer.commands import LinuxCommandExecutor
from cmdmailer.config import DeliveryConfig
from cmdmailer.delivery import DeliveryAdapter, MailTransport
from cmdmailer.errors import ErrorHandlerChain, TransportError
from cmdmailer.logging.base import Logger
from cmdmailer.pipeline import CommandMailer


class RecordingTransport(MailTransport):
    """Transport de test : enregistre les messages envoyés."""

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    def send(self, message, config):
        self.sent.append(message)
        if self.error:
            raise self.error


@pytest.fixture
def config():
    return DeliveryConfig(
        sender="from@example.com",
        recipient="to@example.com",
        host="smtp.example.com",
        user="alice",
        password="secret",
    )


def _mailer(transport, errors=None, logger=None):
    return CommandMailer(
        executor=LinuxCommandExecutor(
            stdout=io.BytesIO(), stderr=io.BytesIO()
        ),
        adapter=DeliveryAdapter(transport),
        errors=errors,
        logger=logger,
    )


class TestCommandMailer:
    """Tests de bout en bout avec un transport simulé."""

    def test_succes(self, config):
        transport = RecordingTransport()
        code = _mailer(transport).run(
            [sys.executable, "-c", "print('hi')"], config
        )
        assert code == 0
        assert len(transport.sent) == 1
        message = transport.sent[0]
        assert message.subject == "Process succeeded"
        assert '<span class="stdout">hi<br>\n' in message.html_body

    def test_code_de_la_commande(self, config):
        transport = RecordingTransport()
        code = _mailer(transport).run(
            [sys.executable, "-c", "raise SystemExit(4)"], config
        )
        assert code == 4
        assert transport.sent[0].subject == "Process failed with exit code: 4"

    def test_sujet_configure(self, config):
        transport = RecordingTransport()
        configured = config.model_copy(update={"subject": "backup"})
        _mailer(transport).run([sys.executable, "-c", "pass"], configured)
        assert transport.sent[0].subject == "backup"

    def test_sans_sortie(self, config):
        transport = RecordingTransport()
        _mailer(transport).run(
            [sys.executable, "-c", "print('hidden')"],
            config,
            mail_output=False,
        )
        body = transport.sent[0].html_body
        assert "hidden" not in body
        assert "STDOUT (black)" not in body

    def test_echec_d_envoi_prioritaire(self, config):
        """Un envoi en échec donne 1 même si la commande a réussi."""
        transport = RecordingTransport(error=TransportError("down"))
        handler = MagicMock()
        errors = ErrorHandlerChain().add_handler(handler)

        code = _mailer(transport, errors=errors).run(
            [sys.executable, "-c", "pass"], config
        )

        assert code == 1
        handler.handle.assert_called_once()
        assert len(transport.sent) == 1

    def test_echec_d_envoi_apres_echec_commande(self, config):
        transport = RecordingTransport(error=TransportError("down"))
        code = _mailer(transport).run(
            [sys.executable, "-c", "raise SystemExit(9)"], config
        )
        assert code == 1

    def test_journal(self, config):
        logger = MagicMock(spec=Logger)
        _mailer(RecordingTransport(), logger=logger).run(
            [sys.executable, "-c", "pass"], config
        )
        logger.log_info.assert_called_once()
        assert "code de sortie 0" in logger.log_info.call_args.args[0]
