"""Résolution de la configuration au démarrage.

La configuration est construite une seule fois en fusionnant, par
priorité croissante : valeurs par défaut <- fichier ~/.cmdmailer.conf
<- options de la ligne de commande. Le mot de passe absent des deux
est ensuite cherché dans la chaîne de credentials. Le résultat est
une DeliveryConfig immuable ; le pipeline ne lit jamais
l'environnement lui-même.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from cmdmailer.config.settings import (
    DEFAULT_SMTP_PORT,
    DeliveryConfig,
    LoggingSettings,
)
from cmdmailer.credentials.base import CredentialProvider
from cmdmailer.credentials.chain import PASSWORD_KEY, SERVICE_NAME
from cmdmailer.dotconf.manager import LinuxIniConfigManager, MailerIniConfig
from cmdmailer.errors.exceptions import (
    ConfigurationError,
    ConfigurationMissingError,
)
from cmdmailer.logging.base import Logger

DEFAULT_CONFIG_PATH = Path("~/.cmdmailer.conf")
DEFAULT_DOTENV_PATH = Path("~/.cmdmailer.env")

# Ordre d'affichage des champs manquants.
REQUIRED_FIELDS = (
    ("sender", "Error: No author email address"),
    ("recipient", "Error: No recipient email address"),
    ("host", "Error: No email server address"),
    ("user", "Error: No email server user name"),
    ("password", "Error: No email server password"),
)


@dataclass(frozen=True)
class ConfigOverrides:
    """Valeurs fournies en ligne de commande.

    Une chaîne vide signifie "option absente".
    """

    sender: str = ""
    recipient: str = ""
    subject: str = ""
    host: str = ""
    user: str = ""
    password: str = ""
    log_file: str = ""


# Valeurs prises telles quelles : un mot de passe fait d'espaces est valide.
VERBATIM_FIELDS = frozenset({"password"})


def _present(value: Optional[str], verbatim: bool = False) -> bool:
    if verbatim:
        return bool(value)
    return bool(value and value.strip())


def _first(*values: Optional[str], verbatim: bool = False) -> str:
    for value in values:
        if _present(value, verbatim):
            return value
    return ""


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


class ConfigResolver:
    """Construit la configuration immuable d'une exécution.

    Attributes:
        _credentials: Source de secours du mot de passe (optionnelle).
        _manager: Lecteur du fichier INI.
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        credentials: Optional[CredentialProvider] = None,
        manager: Optional[LinuxIniConfigManager] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._credentials = credentials
        self._manager = manager or LinuxIniConfigManager(logger)
        self._logger = logger

    def load_file(self, path: Path) -> Optional[MailerIniConfig]:
        """Lit le fichier de configuration s'il existe.

        Args:
            path: Chemin du fichier (``~`` est développé).

        Returns:
            La configuration lue, ou None si le fichier n'existe pas.

        Raises:
            FileConfigurationError: Si le fichier existe mais est
                illisible ou mal formé.
        """
        try:
            return self._manager.load(path.expanduser())
        except FileNotFoundError:
            if self._logger:
                self._logger.log_warning(
                    f"Fichier de configuration absent : {path}"
                )
            return None

    def resolve_logging(
        self,
        file_config: Optional[MailerIniConfig],
        overrides: ConfigOverrides,
    ) -> LoggingSettings:
        """Résout la configuration du journal d'exécution.

        Raises:
            ConfigurationError: Si le niveau de log est invalide.
        """
        section = (file_config or MailerIniConfig()).logging
        log_file = _first(overrides.log_file, section.file)
        try:
            return LoggingSettings(
                file=str(Path(log_file).expanduser()) if log_file else None,
                level=(section.level or "INFO").upper(),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {_describe(e)}"
            ) from e

    def _merge(
        self,
        file_config: Optional[MailerIniConfig],
        overrides: ConfigOverrides,
    ) -> Dict[str, Optional[str]]:
        base = file_config or MailerIniConfig()
        return {
            "sender": _first(overrides.sender, base.message.sender),
            "recipient": _first(overrides.recipient, base.message.recipient),
            "subject": _first(overrides.subject, base.message.subject) or None,
            "host": _first(overrides.host, base.host.address),
            "port": _first(base.host.port) or str(DEFAULT_SMTP_PORT),
            "user": _first(overrides.user, base.host.user),
            "password": _first(
                overrides.password, base.host.password, verbatim=True
            ),
        }

    def resolve(
        self,
        file_config: Optional[MailerIniConfig],
        overrides: ConfigOverrides,
        config_path: Path = DEFAULT_CONFIG_PATH,
    ) -> DeliveryConfig:
        """Fusionne défauts, fichier et options en une DeliveryConfig.

        Args:
            file_config: Contenu du fichier, None s'il n'a pas pu
                être lu.
            overrides: Options de la ligne de commande.
            config_path: Chemin du fichier, pour les diagnostics.

        Returns:
            Configuration d'envoi validée.

        Raises:
            ConfigurationMissingError: Si un champ obligatoire reste
                vide ; tous les champs manquants sont signalés.
            ConfigurationError: Si une valeur est invalide (port).
        """
        merged = self._merge(file_config, overrides)

        password_given = _present(merged["password"], verbatim=True)
        if not password_given and self._credentials:
            merged["password"] = self._credentials.get(
                SERVICE_NAME, PASSWORD_KEY
            ) or ""

        missing = [
            message
            for name, message in REQUIRED_FIELDS
            if not _present(merged[name], name in VERBATIM_FIELDS)
        ]
        if missing:
            raise ConfigurationMissingError(
                missing,
                config_file_read=file_config is not None,
                config_path=str(config_path),
            )

        try:
            config = DeliveryConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {_describe(e)}"
            ) from e

        if self._logger:
            self._logger.log_info(
                f"Configuration résolue : {config.sender} -> "
                f"{config.recipient} via {config.host}:{config.port}"
            )
        return config
