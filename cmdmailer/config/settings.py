"""Modèles de configuration validés par pydantic.

Ce module définit DeliveryConfig, la configuration d'envoi résolue
une seule fois au démarrage puis transmise telle quelle au pipeline.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

DEFAULT_SMTP_PORT = 25

StrippedStr = Annotated[str, StringConstraints(strip_whitespace=True)]
RequiredStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1)
]


class DeliveryConfig(BaseModel):
    """Adressage du rapport et accès au serveur SMTP.

    Attributes:
        sender: Adresse de l'expéditeur.
        recipient: Adresse du destinataire.
        subject: Sujet imposé ; None pour le sujet dérivé de l'issue.
        host: Adresse du serveur SMTP.
        port: Port du serveur SMTP.
        user: Nom d'utilisateur SMTP.
        password: Mot de passe SMTP (masqué dans repr), conservé
            tel quel, espaces compris.
    """

    model_config = ConfigDict(frozen=True)

    sender: RequiredStr
    recipient: RequiredStr
    subject: Optional[StrippedStr] = None
    host: RequiredStr
    port: int = Field(default=DEFAULT_SMTP_PORT, ge=1, le=65535)
    user: RequiredStr
    password: str = Field(min_length=1, repr=False)


class LoggingSettings(BaseModel):
    """Journal d'exécution optionnel.

    Attributes:
        file: Chemin du fichier de log ; None désactive le journal.
        level: Niveau de log.
    """

    model_config = ConfigDict(frozen=True)

    file: Optional[str] = None
    level: str = Field(
        default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )
