"""Ligne de commande de cmdmailer.

Usage :
    cmdmailer [-options] command [args ...]

Les options suivent la convention des outils Go : un seul tiret
(``-from``, ``-mail-output=false``), deux tirets acceptés. La
configuration par défaut est lue dans ~/.cmdmailer.conf ; les options
de la ligne de commande sont prioritaires.

Codes de sortie :
    0    la commande a réussi et le rapport a été envoyé
    1    l'envoi du rapport a échoué
    125  la commande a été tuée par un signal ou a échoué sans code
    126  configuration manquante ou invalide
    127  aucune commande, ou commande introuvable dans le PATH
    N    code de sortie de la commande
"""

import argparse
import re
import shutil
import sys
from pathlib import Path
from typing import IO, List, Optional, Sequence

from cmdmailer import __version__
from cmdmailer.commands.runner import LinuxCommandExecutor
from cmdmailer.config.resolver import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_DOTENV_PATH,
    ConfigOverrides,
    ConfigResolver,
)
from cmdmailer.credentials.base import CredentialProvider
from cmdmailer.credentials.chain import CredentialChain
from cmdmailer.delivery.adapter import DeliveryAdapter
from cmdmailer.delivery.base import MailTransport
from cmdmailer.dotconf.manager import LinuxIniConfigManager, MailerIniConfig
from cmdmailer.dotconf.section import HostSection, MessageSection
from cmdmailer.errors.base import ErrorHandlerChain
from cmdmailer.errors.console_handler import ConsoleErrorHandler
from cmdmailer.errors.exceptions import (
    ApplicationError,
    CommandNotFoundError,
    ConfigurationError,
    FileConfigurationError,
)
from cmdmailer.errors.logger_handler import LoggerErrorHandler
from cmdmailer.logging.file_logger import FileLogger
from cmdmailer.pipeline import CommandMailer

SAMPLE_CONFIG = MailerIniConfig(
    message=MessageSection(
        sender="from@example.com",
        recipient="to@example.com",
        subject="Command result",
    ),
    host=HostSection(
        address="mail.example.com",
        user="username",
        password="***",
    ),
)

VALUE_FLAGS = (
    "from", "to", "subject", "host", "user", "password", "config",
    "log-file",
)
_MAIL_OUTPUT = re.compile(r"^--?mail-output=(.*)$")
_TRUE_VALUES = ("1", "t", "T", "true", "TRUE", "True")
_FALSE_VALUES = ("0", "f", "F", "false", "FALSE", "False")


def parse_bool(value: str) -> bool:
    """Interprète un booléen comme le paquet flag de Go.

    Raises:
        ValueError: Si la valeur n'est pas reconnue.
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value {value!r}")


def normalize_argv(argv: Sequence[str]) -> List[str]:
    """Réécrit ``-mail-output=<bool>`` en options sans valeur.

    Seules les options placées avant la commande sont examinées :
    les arguments de la commande ne sont jamais modifiés.

    Args:
        argv: Arguments de la ligne de commande.

    Returns:
        Arguments prêts pour argparse.

    Raises:
        ValueError: Si la valeur booléenne est invalide.
    """
    value_flags = {
        f"{dashes}{name}" for name in VALUE_FLAGS for dashes in ("-", "--")
    }
    result: List[str] = []
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg == "--" or not arg.startswith("-"):
            break
        match = _MAIL_OUTPUT.match(arg)
        if match:
            enabled = parse_bool(match.group(1))
            result.append("-mail-output" if enabled else "-no-mail-output")
        else:
            result.append(arg)
            if arg in value_flags and index + 1 < len(argv):
                index += 1
                result.append(argv[index])
        index += 1
    result.extend(argv[index:])
    return result


def build_parser() -> argparse.ArgumentParser:
    """Construit le parser des options de cmdmailer."""
    parser = argparse.ArgumentParser(
        prog="cmdmailer",
        usage="%(prog)s [-options] command [args ...]",
        description="Execute a command and email its result.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-from", "--from", dest="sender", default="", metavar="ADDRESS",
        help="Author email address",
    )
    parser.add_argument(
        "-to", "--to", dest="recipient", default="", metavar="ADDRESS",
        help="Recipient email address",
    )
    parser.add_argument(
        "-subject", "--subject", dest="subject", default="",
        help="Email subject (optional)",
    )
    parser.add_argument(
        "-host", "--host", dest="host", default="",
        help="Email server address",
    )
    parser.add_argument(
        "-user", "--user", dest="user", default="",
        help="Email server user name",
    )
    parser.add_argument(
        "-password", "--password", dest="password", default="",
        help="Email server password",
    )
    parser.add_argument(
        "-mail-output", "--mail-output", dest="mail_output",
        action="store_true", default=True,
        help="Include STDOUT/STDERR in email (default: true, "
             "disable with -mail-output=false)",
    )
    parser.add_argument(
        "-no-mail-output", dest="mail_output", action="store_false",
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "-config", "--config", dest="config",
        default=str(DEFAULT_CONFIG_PATH), metavar="PATH",
        help="Configuration file (default: %(default)s)",
    )
    parser.add_argument(
        "-log-file", "--log-file", dest="log_file", default="",
        metavar="PATH", help="Write a run log to this file",
    )
    parser.add_argument(
        "-help", "-h", "--help", dest="help", action="store_true",
        help="Print this help message and exit",
    )
    parser.add_argument(
        "-version", "--version", action="version",
        version=f"%(prog)s {__version__}",
        help="Print the version and exit",
    )
    parser.add_argument(
        "command", nargs=argparse.REMAINDER,
        help="Command to execute and its arguments",
    )
    return parser


def help_text(parser: argparse.ArgumentParser) -> str:
    """Aide complète : options et exemple de fichier de configuration."""
    sample = LinuxIniConfigManager().config_to_ini(SAMPLE_CONFIG)
    return (
        f"{parser.format_help()}\n"
        f"Default options are read from the file {DEFAULT_CONFIG_PATH}.\n"
        "A sample configuration file is:\n\n"
        f"{sample}"
    )


def _open_logger(file: Optional[str], level: str) -> Optional[FileLogger]:
    if not file:
        return None
    try:
        return FileLogger(file, level=level)
    except OSError as e:
        raise ConfigurationError(f"Cannot open log file {file}: {e}") from e


def _check_command(command: List[str]) -> None:
    if not command:
        raise CommandNotFoundError("No command given")
    if shutil.which(command[0]) is None:
        raise CommandNotFoundError(f"Command '{command[0]}' not found")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    transport: Optional[MailTransport] = None,
    credentials: Optional[CredentialProvider] = None,
    stdin: Optional[IO] = None,
) -> int:
    """Point d'entrée de cmdmailer.

    Args:
        argv: Arguments (défaut: sys.argv[1:]).
        transport: Transport de messagerie (défaut: SMTP).
        credentials: Source de secours du mot de passe (défaut:
            env -> ~/.cmdmailer.env -> keyring).
        stdin: Entrée standard de la commande (défaut: héritée).

    Returns:
        Code de sortie du processus.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(
            normalize_argv(sys.argv[1:] if argv is None else list(argv))
        )
    except ValueError as e:
        parser.error(str(e))

    if args.help:
        print(help_text(parser), end="")
        return 0

    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]

    errors = ErrorHandlerChain().add_handler(ConsoleErrorHandler())
    overrides = ConfigOverrides(
        sender=args.sender,
        recipient=args.recipient,
        subject=args.subject,
        host=args.host,
        user=args.user,
        password=args.password,
        log_file=args.log_file,
    )
    config_path = Path(args.config)

    try:
        file_config = None
        try:
            file_config = ConfigResolver().load_file(config_path)
        except FileConfigurationError as e:
            errors.handle(e)

        settings = ConfigResolver().resolve_logging(file_config, overrides)
        logger = _open_logger(settings.file, settings.level)
        if logger:
            errors.add_handler(LoggerErrorHandler(logger))

        if credentials is None:
            credentials = CredentialChain.default(
                dotenv_path=DEFAULT_DOTENV_PATH.expanduser(),
                logger=logger,
            )
        config = ConfigResolver(credentials, logger=logger).resolve(
            file_config, overrides, config_path
        )

        _check_command(command)

        mailer = CommandMailer(
            executor=LinuxCommandExecutor(logger=logger),
            adapter=DeliveryAdapter(transport, logger=logger),
            errors=errors,
            logger=logger,
        )
        sys.stdout.flush()
        return mailer.run(
            command, config, mail_output=args.mail_output, stdin=stdin
        )
    except ApplicationError as e:
        return errors.handle(e)


if __name__ == "__main__":
    sys.exit(main())
