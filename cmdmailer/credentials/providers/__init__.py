"""Providers de credentials pour le module credentials."""

from cmdmailer.credentials.providers.env import (
    EnvCredentialProvider,
)
from cmdmailer.credentials.providers.dotenv import (
    DotEnvCredentialProvider,
)
from cmdmailer.credentials.providers.keyring import (
    KeyringCredentialProvider,
)

__all__ = [
    "EnvCredentialProvider",
    "DotEnvCredentialProvider",
    "KeyringCredentialProvider",
]
