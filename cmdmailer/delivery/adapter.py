"""Remise du rapport au transport de messagerie."""

from typing import Optional

from cmdmailer.config.settings import DeliveryConfig
from cmdmailer.delivery.base import MailMessage, MailTransport, TransportConfig
from cmdmailer.delivery.smtp import SmtpMailTransport
from cmdmailer.errors.exceptions import DeliveryError
from cmdmailer.logging.base import Logger
from cmdmailer.report.renderer import ReportDocument


class DeliveryAdapter:
    """Emballe un ReportDocument et le confie au transport.

    Le transport est appelé exactement une fois : ni nouvelle
    tentative, ni mise en file d'attente.

    Attributes:
        _transport: Transport de messagerie (défaut: SMTP).
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        transport: Optional[MailTransport] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._transport = transport or SmtpMailTransport(logger=logger)
        self._logger = logger

    @staticmethod
    def build_message(
        document: ReportDocument, config: DeliveryConfig
    ) -> MailMessage:
        """Construit le message à un seul destinataire."""
        return MailMessage(
            sender=config.sender,
            recipients=[config.recipient],
            subject=document.subject,
            html_body=document.html,
        )

    @staticmethod
    def transport_config(config: DeliveryConfig) -> TransportConfig:
        return TransportConfig(
            user=config.user,
            password=config.password,
            address=config.host,
            port=config.port,
        )

    def deliver(self, document: ReportDocument, config: DeliveryConfig) -> None:
        """Envoie le rapport.

        Args:
            document: Rapport rendu.
            config: Adressage et accès au serveur.

        Raises:
            DeliveryError: Si le transport échoue (TransportError ou
                toute DeliveryError levée par le transport).
        """
        message = self.build_message(document, config)
        try:
            self._transport.send(message, self.transport_config(config))
        except DeliveryError as e:
            if self._logger:
                self._logger.log_error(f"Échec de l'envoi : {e}")
            raise
