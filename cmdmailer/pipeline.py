"""Pipeline exécution -> classification -> rapport -> envoi.

CommandMailer enchaîne les composants pour une exécution unique et
calcule le code de sortie final : celui de la commande, remplacé par
DELIVERY_EXIT_CODE si l'envoi du rapport échoue. Il ne lit ni
l'environnement ni de fichier : tout lui est fourni par l'appelant.
"""

from typing import IO, List, Optional

from cmdmailer.commands.base import CommandExecutor, CommandRun
from cmdmailer.commands.runner import LinuxCommandExecutor
from cmdmailer.config.settings import DeliveryConfig
from cmdmailer.delivery.adapter import DeliveryAdapter
from cmdmailer.errors.base import ErrorHandlerChain
from cmdmailer.errors.exceptions import DeliveryError
from cmdmailer.logging.base import Logger
from cmdmailer.report.renderer import ReportDocument, ReportRenderer


class CommandMailer:
    """Exécute une commande et envoie son rapport par courriel.

    Attributes:
        _executor: Exécuteur de la commande.
        _renderer: Générateur du rapport.
        _adapter: Remise du rapport au transport.
        _errors: Chaîne de handlers pour les erreurs d'envoi.
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        executor: Optional[CommandExecutor] = None,
        renderer: Optional[ReportRenderer] = None,
        adapter: Optional[DeliveryAdapter] = None,
        errors: Optional[ErrorHandlerChain] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._executor = executor or LinuxCommandExecutor(logger=logger)
        self._renderer = renderer or ReportRenderer()
        self._adapter = adapter or DeliveryAdapter(logger=logger)
        self._errors = errors or ErrorHandlerChain()
        self._logger = logger

    def report(self, run: CommandRun, config: DeliveryConfig) -> ReportDocument:
        """Construit le rapport d'une exécution terminée."""
        return self._renderer.render(
            run.outcome,
            run.statistics,
            run.capture,
            subject=config.subject,
        )

    def run(
        self,
        command: List[str],
        config: DeliveryConfig,
        mail_output: bool = True,
        stdin: Optional[IO] = None,
    ) -> int:
        """Exécute la commande, envoie le rapport, retourne le code final.

        Args:
            command: Commande et arguments ; la commande doit avoir
                été validée (présente dans le PATH).
            config: Configuration d'envoi résolue.
            mail_output: Inclut stdout/stderr dans le rapport.
            stdin: Entrée standard de la commande (défaut: héritée).

        Returns:
            Code de sortie de la commande, ou DELIVERY_EXIT_CODE si
            l'envoi a échoué.
        """
        run = self._executor.run(command, capture=mail_output, stdin=stdin)
        exit_code = run.outcome.exit_code

        document = self.report(run, config)
        try:
            self._adapter.deliver(document, config)
        except DeliveryError as e:
            return self._errors.handle(e)

        if self._logger:
            self._logger.log_info(
                f"Rapport envoyé ({document.subject}), code de sortie "
                f"{exit_code}"
            )
        return exit_code
