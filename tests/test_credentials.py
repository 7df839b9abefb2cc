"""Tests unitaires pour le module credentials.

Couvre EnvCredentialProvider, DotEnvCredentialProvider,
KeyringCredentialProvider et CredentialChain.
"""

import os
from unittest.mock import MagicMock

import pytest
from keyring.errors import KeyringError

from cmdmailer.credentials import (
    PASSWORD_KEY,
    SERVICE_NAME,
    CredentialChain,
    CredentialProvider,
    DotEnvCredentialProvider,
    EnvCredentialProvider,
    KeyringCredentialProvider,
)
from cmdmailer.logging.base import Logger


# ---------------------------------------------------------------------------
# Tests EnvCredentialProvider
# ---------------------------------------------------------------------------

class TestEnvCredentialProvider:
    """Tests du provider de variables d'environnement."""

    def test_lit_la_cle_en_majuscules(self) -> None:
        """La variable cherchee est key.upper()."""
        provider = EnvCredentialProvider({"CMDMAILER_PASSWORD": "s3cret"})
        assert provider.get(SERVICE_NAME, "cmdmailer_password") == "s3cret"

    def test_variable_absente(self) -> None:
        """Une variable absente retourne None."""
        assert EnvCredentialProvider({}).get(SERVICE_NAME, PASSWORD_KEY) is None

    def test_variable_vide(self) -> None:
        """Une variable vide est traitee comme absente."""
        provider = EnvCredentialProvider({PASSWORD_KEY: ""})
        assert provider.get(SERVICE_NAME, PASSWORD_KEY) is None

    def test_environnement_du_processus(self, monkeypatch) -> None:
        """Par defaut, os.environ est lu."""
        monkeypatch.setenv(PASSWORD_KEY, "from-env")
        assert EnvCredentialProvider().get(
            SERVICE_NAME, PASSWORD_KEY
        ) == "from-env"

    def test_source_name(self) -> None:
        provider = EnvCredentialProvider({})
        assert provider.source_name == "env"
        assert provider.is_available() is True


# ---------------------------------------------------------------------------
# Tests DotEnvCredentialProvider
# ---------------------------------------------------------------------------

class TestDotEnvCredentialProvider:
    """Tests du provider de fichier .env."""

    def test_lit_le_fichier(self, tmp_path) -> None:
        """La valeur est lue dans le fichier."""
        env_file = tmp_path / ".cmdmailer.env"
        env_file.write_text("CMDMAILER_PASSWORD=from-dotenv\n")
        provider = DotEnvCredentialProvider(env_file)
        assert provider.get(SERVICE_NAME, PASSWORD_KEY) == "from-dotenv"

    def test_ne_modifie_pas_l_environnement(
        self, tmp_path, monkeypatch
    ) -> None:
        """Le secret n'est pas expose a la commande surveillee."""
        monkeypatch.delenv(PASSWORD_KEY, raising=False)
        env_file = tmp_path / ".cmdmailer.env"
        env_file.write_text("CMDMAILER_PASSWORD=from-dotenv\n")
        DotEnvCredentialProvider(env_file).get(SERVICE_NAME, PASSWORD_KEY)
        assert PASSWORD_KEY not in os.environ

    def test_fichier_absent(self, tmp_path) -> None:
        """Un fichier absent rend le provider indisponible."""
        provider = DotEnvCredentialProvider(tmp_path / "absent.env")
        assert provider.is_available() is False
        assert provider.get(SERVICE_NAME, PASSWORD_KEY) is None

    def test_lecture_unique(self, tmp_path) -> None:
        """Le fichier n'est lu qu'une fois."""
        env_file = tmp_path / ".cmdmailer.env"
        env_file.write_text("CMDMAILER_PASSWORD=first\n")
        logger = MagicMock(spec=Logger)
        provider = DotEnvCredentialProvider(env_file, logger=logger)
        provider.get(SERVICE_NAME, PASSWORD_KEY)
        env_file.write_text("CMDMAILER_PASSWORD=second\n")
        assert provider.get(SERVICE_NAME, PASSWORD_KEY) == "first"
        logger.log_info.assert_called_once()

    def test_source_name(self, tmp_path) -> None:
        assert DotEnvCredentialProvider(tmp_path).source_name == "dotenv"


# ---------------------------------------------------------------------------
# Tests KeyringCredentialProvider
# ---------------------------------------------------------------------------

class TestKeyringCredentialProvider:
    """Tests du provider keyring avec backend simule."""

    def test_lit_le_keyring(self) -> None:
        backend = MagicMock()
        backend.get_password.return_value = "from-keyring"
        provider = KeyringCredentialProvider(keyring_backend=backend)
        assert provider.get(SERVICE_NAME, PASSWORD_KEY) == "from-keyring"
        backend.get_password.assert_called_once_with(
            SERVICE_NAME, PASSWORD_KEY
        )

    def test_valeur_absente(self) -> None:
        backend = MagicMock()
        backend.get_password.return_value = None
        provider = KeyringCredentialProvider(keyring_backend=backend)
        assert provider.get(SERVICE_NAME, PASSWORD_KEY) is None

    def test_keyring_indisponible(self) -> None:
        """Une erreur du backend est journalisee et traitee comme absence."""
        backend = MagicMock()
        backend.get_password.side_effect = KeyringError("locked")
        logger = MagicMock(spec=Logger)
        provider = KeyringCredentialProvider(
            logger=logger, keyring_backend=backend
        )
        assert provider.get(SERVICE_NAME, PASSWORD_KEY) is None
        logger.log_warning.assert_called_once()

    def test_source_name(self) -> None:
        provider = KeyringCredentialProvider(keyring_backend=MagicMock())
        assert provider.source_name == "keyring"


# ---------------------------------------------------------------------------
# Tests CredentialChain
# ---------------------------------------------------------------------------

def _provider(value, available=True, name="fake"):
    provider = MagicMock(spec=CredentialProvider)
    provider.get.return_value = value
    provider.is_available.return_value = available
    provider.source_name = name
    return provider


class TestCredentialChain:
    """Tests de la chaine de priorite."""

    def test_premier_succes(self) -> None:
        first = _provider(None)
        second = _provider("found")
        third = _provider("ignored")
        chain = CredentialChain([first, second, third])
        assert chain.get(SERVICE_NAME, PASSWORD_KEY) == "found"
        third.get.assert_not_called()

    def test_provider_indisponible_ignore(self) -> None:
        unavailable = _provider("hidden", available=False)
        chain = CredentialChain([unavailable, _provider("visible")])
        assert chain.get(SERVICE_NAME, PASSWORD_KEY) == "visible"
        unavailable.get.assert_not_called()

    def test_aucune_valeur(self) -> None:
        chain = CredentialChain([_provider(None), _provider(None)])
        assert chain.get(SERVICE_NAME, PASSWORD_KEY) is None

    def test_chaine_vide(self) -> None:
        chain = CredentialChain([])
        assert chain.get(SERVICE_NAME, PASSWORD_KEY) is None
        assert chain.is_available() is False
        assert chain.source_name == "chain"

    def test_journal_sans_valeur(self) -> None:
        """Seule la source est journalisee, jamais le secret."""
        logger = MagicMock(spec=Logger)
        chain = CredentialChain(
            [_provider("s3cret", name="env")], logger=logger
        )
        chain.get(SERVICE_NAME, PASSWORD_KEY)
        message = logger.log_info.call_args.args[0]
        assert "env" in message
        assert "s3cret" not in message

    def test_default_ordre(self, tmp_path) -> None:
        chain = CredentialChain.default(tmp_path / ".cmdmailer.env")
        assert [p.source_name for p in chain.providers] == [
            "env", "dotenv", "keyring",
        ]

    def test_default_sans_dotenv(self) -> None:
        chain = CredentialChain.default()
        assert [p.source_name for p in chain.providers] == [
            "env", "keyring",
        ]

    def test_env_prioritaire_sur_dotenv(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv(PASSWORD_KEY, "from-env")
        env_file = tmp_path / ".cmdmailer.env"
        env_file.write_text("CMDMAILER_PASSWORD=from-dotenv\n")
        chain = CredentialChain.default(env_file)
        assert chain.get(SERVICE_NAME, PASSWORD_KEY) == "from-env"
