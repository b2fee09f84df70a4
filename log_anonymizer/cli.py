"""
CLI - Interfaccia a linea di comando del log anonymizer

Opzioni globali prima del sottocomando, poi uno tra:
run, cleanUp, listNamingPatterns, listRegexPatterns, listKinds.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .application.services.listing_service import ListingService
from .application.services.scheduler import Scheduler, SchedulerSettings
from .core.constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_AXC_VERSION,
    DEFAULT_CONFIG_PATH,
    DEFAULT_KIND,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OBFUSCATION,
    DEFAULT_WORKER_COUNT,
)
from .core.exceptions import CoreException
from .core.services.logger_service import LoggerService
from .domain.services.config_store import ConfigStore


def build_parser() -> argparse.ArgumentParser:
    """Parser con opzioni globali e sottocomandi."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description='Log Anonymizer - redazione dei log guidata da configurazione YAML',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Esempi di utilizzo:
  # Anonimizza tutti i log riconosciuti sotto una cartella
  log-anonymizer --config config.yaml run --path ./logs

  # Forza il kind e usa 4 worker
  log-anonymizer --kind engine --workerCount 4 run --path ./service.log

  # Cancella gli output prodotti
  log-anonymizer cleanUp --path ./logs

  # Elenca i naming pattern della versione 2.0
  log-anonymizer --axcVersion 2.0 listNamingPatterns
        """
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {APP_VERSION}')
    parser.add_argument('--config', '-c', default=str(DEFAULT_CONFIG_PATH),
                        help='File di configurazione (default: %(default)s)')
    parser.add_argument('--axcVersion', '-x', dest='axc_version', default=DEFAULT_AXC_VERSION,
                        help='Versione della configurazione da attivare (default: %(default)s)')
    parser.add_argument('--kind', '-k', default=DEFAULT_KIND,
                        help="Tipo di log, es. engine; '*' per tutti (default: %(default)s)")
    parser.add_argument('--obfuscation', '-s', default=DEFAULT_OBFUSCATION,
                        help='Testo di offuscamento (default: %(default)s)')
    parser.add_argument('--workerCount', '-t', dest='worker_count', type=int, default=DEFAULT_WORKER_COUNT,
                        help='Numero di worker (default: %(default)s)')
    parser.add_argument('--debug', '-d', action='store_true', help='Modalità debug')
    parser.add_argument('--logFile', dest='log_file', default=None,
                        help='Scrive la diagnostica anche su questo file (con rotazione)')
    parser.add_argument('--structuredLogs', dest='structured_logs', action='store_true',
                        help='Diagnostica in formato JSON, una riga per evento')

    subparsers = parser.add_subparsers(dest='command', required=True, metavar='COMMAND',
                                       help='Comandi disponibili')

    run_parser = subparsers.add_parser('run', help='Identifica e anonimizza i log sotto --path')
    run_parser.add_argument('--path', required=True, help='File o cartella da processare')
    # SUPPRESS: senza valore esplicito resta quello globale
    run_parser.add_argument('--workerCount', dest='worker_count', type=int, default=argparse.SUPPRESS,
                            help='Numero di worker')

    cleanup_parser = subparsers.add_parser('cleanUp', aliases=['cu'],
                                           help='Cancella i file .anonymized.* sotto --path')
    cleanup_parser.add_argument('--path', required=True, help='File o cartella da ripulire')

    subparsers.add_parser('listNamingPatterns', aliases=['ln'], help='Elenca i naming pattern')
    subparsers.add_parser('listRegexPatterns', aliases=['lr'], help='Elenca i pattern di redazione')
    subparsers.add_parser('listKinds', aliases=['lk'], help='Elenca i kind')

    return parser


def _print_rows(rows: List[str]) -> int:
    for row in rows:
        print(row)
    return 0


def run_command(args: argparse.Namespace, config_store: ConfigStore) -> int:
    settings = SchedulerSettings(
        kind=args.kind,
        obfuscation=args.obfuscation,
        worker_count=args.worker_count,
        show_progress=sys.stderr.isatty(),
    )
    report = Scheduler(config_store, settings).run(args.path)
    stats = report.get_statistics()
    print(f"✅ {stats['processed']} file anonimizzati, {stats['aborted']} abortiti, {stats['skipped']} saltati")
    return 0


def cleanup_command(args: argparse.Namespace, config_store: ConfigStore) -> int:
    stats = Scheduler(config_store).cleanup(args.path).get_statistics()
    print(f"🧹 {stats['deleted']} file cancellati, {stats['failed']} non cancellabili")
    return 0


def list_naming_patterns_command(args: argparse.Namespace, config_store: ConfigStore) -> int:
    return _print_rows(ListingService(config_store).naming_patterns(args.kind))


def list_regex_patterns_command(args: argparse.Namespace, config_store: ConfigStore) -> int:
    return _print_rows(ListingService(config_store).regex_patterns(args.kind))


def list_kinds_command(args: argparse.Namespace, config_store: ConfigStore) -> int:
    return _print_rows(ListingService(config_store).kinds())


COMMANDS: Dict[str, Callable[[argparse.Namespace, ConfigStore], int]] = {
    'run': run_command,
    'cleanUp': cleanup_command,
    'cu': cleanup_command,
    'listNamingPatterns': list_naming_patterns_command,
    'ln': list_naming_patterns_command,
    'listRegexPatterns': list_regex_patterns_command,
    'lr': list_regex_patterns_command,
    'listKinds': list_kinds_command,
    'lk': list_kinds_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Funzione principale del CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger_service = LoggerService(
        log_level="DEBUG" if args.debug else DEFAULT_LOG_LEVEL,
        log_file=Path(args.log_file) if args.log_file else None,
        structured_logging=args.structured_logs,
    )
    logger_service.debug(f"axcVersion: {args.axc_version}")

    try:
        config_store = ConfigStore.from_file(args.config, args.axc_version)
        logger_service.debug(f"active config: {config_store.versioned_config}")
        return COMMANDS[args.command](args, config_store)

    except CoreException as e:
        if args.debug:
            logger_service.log_exception(e)
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except OSError as e:
        if args.debug:
            logger_service.log_exception(e)
        print(f"❌ Errore: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
