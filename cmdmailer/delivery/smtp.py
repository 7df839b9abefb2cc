"""Transport SMTP basé sur smtplib.

Le port 465 utilise TLS implicite (SMTP_SSL). Sur les autres ports,
STARTTLS est négocié si le serveur l'annonce, puis l'authentification
est faite avec l'utilisateur et le mot de passe configurés.
"""

import smtplib
import ssl
from email.message import EmailMessage
from typing import Optional

from cmdmailer.delivery.base import MailMessage, MailTransport, TransportConfig
from cmdmailer.errors.exceptions import TransportError
from cmdmailer.logging.base import Logger

SMTPS_PORT = 465


def build_email(message: MailMessage) -> EmailMessage:
    """Construit le message MIME text/html.

    Args:
        message: Message à convertir.

    Returns:
        EmailMessage prêt pour smtplib.send_message.
    """
    email = EmailMessage()
    email["Subject"] = message.subject
    email["From"] = message.sender
    email["To"] = ", ".join(message.recipients)
    email.set_content(message.html_body, subtype="html", charset="utf-8")
    return email


class SmtpMailTransport(MailTransport):
    """Transport SMTP avec STARTTLS opportuniste.

    Attributes:
        _logger: Logger optionnel.
        _ssl_context: Contexte TLS (défaut: ssl.create_default_context()).
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        ssl_context: Optional[ssl.SSLContext] = None,
    ) -> None:
        self._logger = logger
        self._ssl_context = ssl_context

    def _context(self) -> ssl.SSLContext:
        if self._ssl_context is None:
            self._ssl_context = ssl.create_default_context()
        return self._ssl_context

    def _connect(self, config: TransportConfig) -> smtplib.SMTP:
        if config.port == SMTPS_PORT:
            return smtplib.SMTP_SSL(
                config.address, config.port, context=self._context()
            )
        smtp = smtplib.SMTP(config.address, config.port)
        try:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls(context=self._context())
                smtp.ehlo()
        except BaseException:
            smtp.close()
            raise
        return smtp

    def send(self, message: MailMessage, config: TransportConfig) -> None:
        """Envoie le message en une seule tentative.

        Args:
            message: Message à envoyer.
            config: Accès au serveur SMTP.

        Raises:
            TransportError: Sur toute erreur SMTP ou réseau, un en-tête
                invalide (retour à la ligne dans le sujet) ou des
                identifiants non encodables.
        """
        try:
            email = build_email(message)
            with self._connect(config) as smtp:
                smtp.login(config.user, config.password)
                smtp.send_message(
                    email,
                    from_addr=message.sender,
                    to_addrs=message.recipients,
                )
        except (smtplib.SMTPException, OSError, ValueError) as e:
            raise TransportError(
                f"Could not send email via "
                f"{config.address}:{config.port}: {e}"
            ) from e

        if self._logger:
            self._logger.log_info(
                f"Message envoyé à {', '.join(message.recipients)} "
                f"via {config.address}:{config.port}"
            )
