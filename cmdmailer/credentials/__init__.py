"""Sources du mot de passe SMTP absent de la configuration.

Chaine de priorite :
    variable CMDMAILER_PASSWORD -> fichier ~/.cmdmailer.env
    (python-dotenv) -> keyring systeme (service "cmdmailer")

Compatibilite keyring : KWallet (KDE Plasma 6), KeePassXC (avec
"Enable Secret Service" active), GNOME Keyring.
"""

from cmdmailer.credentials.base import CredentialProvider
from cmdmailer.credentials.chain import (
    PASSWORD_KEY,
    SERVICE_NAME,
    CredentialChain,
)
from cmdmailer.credentials.providers.dotenv import (
    DotEnvCredentialProvider,
)
from cmdmailer.credentials.providers.env import (
    EnvCredentialProvider,
)
from cmdmailer.credentials.providers.keyring import (
    KeyringCredentialProvider,
)

__all__ = [
    "CredentialProvider",
    "EnvCredentialProvider",
    "DotEnvCredentialProvider",
    "KeyringCredentialProvider",
    "CredentialChain",
    "SERVICE_NAME",
    "PASSWORD_KEY",
]
