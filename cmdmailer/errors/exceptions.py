"""
Exceptions métier de cmdmailer.

Chaque exception porte le code de sortie du processus auquel elle
correspond, ce qui permet à la ligne de commande de convertir une
erreur en code de retour sans table de correspondance séparée.
"""
from typing import List

GENERIC_FAILURE_EXIT_CODE = 125
CONFIGURATION_EXIT_CODE = 126
COMMAND_NOT_FOUND_EXIT_CODE = 127
DELIVERY_EXIT_CODE = 1


class ApplicationError(Exception):
    """Exception de base pour toutes les erreurs de cmdmailer."""
    exit_code: int = GENERIC_FAILURE_EXIT_CODE


class ConfigurationError(ApplicationError):
    """Configuration invalide après fusion fichier + options."""
    exit_code = CONFIGURATION_EXIT_CODE


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration présent mais illisible ou mal formé."""
    pass


class ConfigurationMissingError(ConfigurationError):
    """Un ou plusieurs champs obligatoires sont absents.

    Attributes:
        missing: Messages de diagnostic, un par champ manquant.
        config_file_read: False si le fichier de configuration
            n'a pas pu être lu.
    """

    def __init__(
        self,
        missing: List[str],
        config_file_read: bool = True,
        config_path: str = "~/.cmdmailer.conf",
    ) -> None:
        self.missing = list(missing)
        self.config_file_read = config_file_read
        self.config_path = config_path
        super().__init__(
            f"Missing configuration: {len(self.missing)} field(s)"
        )

    def diagnostics(self) -> List[str]:
        """Retourne les lignes de diagnostic à afficher.

        Returns:
            Une ligne par champ manquant, suivie d'une ligne sur le
            fichier de configuration s'il n'a pas pu être lu.
        """
        lines = list(self.missing)
        if not self.config_file_read:
            lines.append(
                f"Error: The configuration file {self.config_path} "
                "could not be read."
            )
        return lines


class CommandNotFoundError(ApplicationError):
    """Aucune commande fournie ou commande introuvable dans le PATH."""
    exit_code = COMMAND_NOT_FOUND_EXIT_CODE


class DeliveryError(ApplicationError):
    """L'envoi du rapport a échoué."""
    exit_code = DELIVERY_EXIT_CODE


class TransportError(DeliveryError):
    """Erreur remontée par un transport de messagerie (SMTP, ...)."""
    pass
