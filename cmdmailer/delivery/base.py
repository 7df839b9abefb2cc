"""Interfaces abstraites et structures de données pour l'envoi.

Ce module définit :
    - MailMessage : message à envoyer (corps HTML).
    - TransportConfig : accès au serveur d'envoi.
    - MailTransport : interface abstraite des transports.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class MailMessage:
    """Message prêt à être remis au transport.

    Attributes:
        sender: Adresse de l'expéditeur.
        recipients: Adresses des destinataires.
        subject: Sujet du message.
        html_body: Corps HTML complet.
    """

    sender: str
    recipients: List[str]
    subject: str
    html_body: str


@dataclass(frozen=True)
class TransportConfig:
    """Accès au serveur d'envoi.

    Attributes:
        user: Nom d'utilisateur.
        password: Mot de passe (masqué dans repr).
        address: Adresse du serveur.
        port: Port du serveur.
    """

    user: str
    password: str = field(repr=False)
    address: str = ""
    port: int = 25


class MailTransport(ABC):
    """Interface abstraite d'un transport de messagerie."""

    @abstractmethod
    def send(self, message: MailMessage, config: TransportConfig) -> None:
        """Envoie un message, une seule tentative.

        Args:
            message: Message à envoyer.
            config: Accès au serveur.

        Raises:
            TransportError: Si l'envoi échoue.
        """
        pass
