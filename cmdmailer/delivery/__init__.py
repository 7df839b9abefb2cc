"""Module d'envoi du rapport.

Classes disponibles :
    MailMessage, TransportConfig : Structures de données.
    MailTransport : Interface abstraite des transports.
    SmtpMailTransport : Transport SMTP (smtplib).
    DeliveryAdapter : Remise d'un ReportDocument au transport.
"""

from cmdmailer.delivery.adapter import DeliveryAdapter
from cmdmailer.delivery.base import MailMessage, MailTransport, TransportConfig
from cmdmailer.delivery.smtp import SmtpMailTransport, build_email

__all__ = [
    "MailMessage",
    "TransportConfig",
    "MailTransport",
    "SmtpMailTransport",
    "build_email",
    "DeliveryAdapter",
]
