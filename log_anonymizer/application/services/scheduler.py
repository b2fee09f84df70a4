"""
Scheduler - Pool di worker che anonimizza i file scoperti

Questo modulo coordina la scoperta dei file, la distribuzione su un numero
fisso di worker e il cleanup degli output prodotti.

DESIGN:
- Coda limitata a `worker_count` elementi: il producer si blocca se i worker sono occupati
- Worker a vita lunga, chiusi con un sentinel ciascuno
- Recovery per singolo file: un errore non interrompe mai l'esecuzione
- Configurazione passata esplicitamente (nessuno stato globale)

Version: 1.0.0
"""

import os
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from queue import Queue
from typing import Callable, Iterable, List, Optional

from tqdm import tqdm

from ...core.constants import DEFAULT_ENCODING, DEFAULT_KIND, DEFAULT_OBFUSCATION, DEFAULT_WORKER_COUNT
from ...core.enums import FileState
from ...core.exceptions import DeletionError, NoPatternsFoundError, ProcessingError, ValidationError
from ...core.services.base_service import BaseService
from ...domain.entities.log_file import LogFile
from ...domain.entities.processing_report import CleanupReport, FileOutcome, ProcessingReport
from ...domain.services.config_store import ConfigStore
from ...domain.services.identifier import LogIdentifier
from ...domain.services.redactor import Redactor
from ...infrastructure.file_walker import FileWalker
from ...infrastructure.log_reader import LogReader, detect_encoding
from ...infrastructure.log_writer import AnonymizedLogWriter

# Segnale di chiusura della coda, uno per worker
_CLOSE = object()


@dataclass(frozen=True)
class SchedulerSettings:
    """
    Parametri di esecuzione dello scheduler.

    Attributes:
        kind: Kind forzato o `*` per l'identificazione dal nome file
        obfuscation: Token sostituito ai valori catturati
        worker_count: Numero di worker paralleli (>= 1)
        show_progress: Mostra la barra di avanzamento su stderr
    """

    kind: str = DEFAULT_KIND
    obfuscation: str = DEFAULT_OBFUSCATION
    worker_count: int = DEFAULT_WORKER_COUNT
    show_progress: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.worker_count, bool) or not isinstance(self.worker_count, int) or self.worker_count < 1:
            raise ValidationError("worker count must be a positive integer",
                                  field="workerCount", value=self.worker_count, rule=">= 1")


class Scheduler(BaseService):
    """
    Anonimizzazione parallela dei file di log.

    Contract:
        - Input: ConfigStore attivo e SchedulerSettings
        - Output: ProcessingReport / CleanupReport
        - Side effects: Crea file `.anonymized.<timestamp>`, o li cancella nel cleanup
    """

    def __init__(self,
                 config_store: ConfigStore,
                 settings: Optional[SchedulerSettings] = None,
                 clock: Callable[[], datetime] = datetime.now,
                 walker: Optional[FileWalker] = None):
        """
        Inizializza lo scheduler.

        Args:
            config_store: Configurazione attiva (sola lettura)
            settings: Parametri di esecuzione
            clock: Orologio dei worker per il timestamp degli output
            walker: Scansione del filesystem (default basata sul config_store)
        """
        super().__init__()
        self.config_store = config_store
        self.settings = settings or SchedulerSettings()
        self.clock = clock
        self.walker = walker or FileWalker(LogIdentifier(config_store))
        self._progress_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def discover(self, root: str) -> List[LogFile]:
        """File da anonimizzare sotto `root` per il kind configurato."""
        return self.walker.discover(root, self.settings.kind)

    def run(self, root: str) -> ProcessingReport:
        """
        Scoperta + processing.

        Raises:
            DiscoveryError: errore di lettura di una directory
        """
        start_time = time.time()
        log_files = self.discover(root)
        self.logger.debug(f"{len(log_files)} log file(s) to anonymize under {root}")

        report = self.process(log_files)

        self.log_performance("run", time.time() - start_time, report.get_statistics())
        return report

    def process(self, log_files: Iterable[LogFile]) -> ProcessingReport:
        """
        Distribuisce i file su `worker_count` worker e attende la fine.

        Args:
            log_files: File identificati, accodati nell'ordine ricevuto

        Returns:
            ProcessingReport con l'esito di ogni file
        """
        report = ProcessingReport()
        worker_count = self.settings.worker_count
        work_queue: Queue = Queue(maxsize=worker_count)
        total = len(log_files) if hasattr(log_files, '__len__') else None

        with tqdm(total=total, desc="📄 Anonymizing", unit="file",
                  disable=not self.settings.show_progress) as pbar:
            workers = [
                threading.Thread(target=self._worker, args=(work_queue, report, pbar),
                                 name=f"anonymizer-worker-{i + 1}", daemon=True)
                for i in range(worker_count)
            ]
            for worker in workers:
                worker.start()

            try:
                for log_file in log_files:
                    work_queue.put(log_file)
            finally:
                for _ in workers:
                    work_queue.put(_CLOSE)
                for worker in workers:
                    worker.join()

        return report

    def _worker(self, work_queue: Queue, report: ProcessingReport, pbar: tqdm) -> None:
        while True:
            log_file = work_queue.get()
            if log_file is _CLOSE:
                return
            try:
                outcome = self.process_file(log_file)
            except Exception as e:
                # un errore inatteso non deve fermare il worker: la coda resterebbe piena
                self.logger.exception(f"unexpected error processing {log_file.absolute_path}: {e}")
                outcome = FileOutcome(log_file=log_file, state=FileState.ABORTED, error=str(e))
            report.add(outcome)
            with self._progress_lock:
                pbar.update(1)

    def process_file(self, log_file: LogFile) -> FileOutcome:
        """
        Anonimizza un singolo file nel suo `.anonymized.<timestamp>`.

        Gli output parziali dei file abortiti non vengono cancellati.
        `outcome.aborted_in` indica lo stato in cui il file è stato abortito.
        """
        outcome = FileOutcome(log_file=log_file)
        self.logger.debug(f"processing [{log_file.kind}] log file: {log_file.absolute_path}")

        try:
            patterns = self.config_store.redaction_patterns(log_file.kind)
        except NoPatternsFoundError as e:
            self.logger.error(f"{e.message}, skipping {log_file.absolute_path}")
            outcome.state = FileState.SKIPPED
            outcome.error = e.message
            return outcome

        redactor = Redactor(patterns, self.settings.obfuscation)

        try:
            encoding = self._select_encoding(log_file)
            with LogReader(log_file.absolute_path, encoding=encoding) as reader:
                with AnonymizedLogWriter(log_file, encoding=encoding, clock=self.clock) as writer:
                    outcome.output_path = writer.output_path
                    outcome.state = FileState.OPENED
                    for line in reader:
                        outcome.state = FileState.STREAMING
                        writer.write_line(redactor.redact(line))
                        outcome.lines += 1
        except ProcessingError as e:
            return self._abort(outcome, e.message)
        except (OSError, UnicodeError, LookupError) as e:
            return self._abort(outcome, str(e))

        outcome.state = FileState.CLOSED
        self.logger.debug(f"finished processing [{log_file.kind}] log file: {log_file.absolute_path}")
        return outcome

    def _select_encoding(self, log_file: LogFile) -> str:
        """
        Encoding di lettura e scrittura del file.

        Quello rilevato sul sorgente, oppure UTF-8 quando il token di
        offuscamento non è rappresentabile: con `surrogateescape` i byte
        del sorgente restano comunque identici.
        """
        encoding = detect_encoding(log_file.absolute_path)
        try:
            self.settings.obfuscation.encode(encoding)
        except UnicodeEncodeError:
            self.logger.warning(f"⚠️ obfuscation token not encodable in {encoding}, "
                                f"using {DEFAULT_ENCODING} for {log_file.absolute_path}")
            return DEFAULT_ENCODING
        return encoding

    def _abort(self, outcome: FileOutcome, reason: str) -> FileOutcome:
        outcome.aborted_in = outcome.state
        outcome.state = FileState.ABORTED
        outcome.error = reason
        self.logger.error(f"{outcome.log_file.absolute_path}: {reason}")
        return outcome

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def cleanup(self, root: str) -> CleanupReport:
        """
        Cancella tutti gli output `.anonymized.` sotto `root`.

        Le cancellazioni fallite vengono loggate, mai propagate.

        Raises:
            DiscoveryError: errore di lettura di una directory
        """
        report = CleanupReport()
        anonymized_logs = self.walker.discover_anonymized(root)

        if not anonymized_logs:
            self.logger.info("No anonymized logs found")
            return report

        for path in anonymized_logs:
            self.logger.debug(path)
            try:
                os.remove(path)
            except OSError as e:
                error = DeletionError(f"cannot delete {path}: {e.strerror or e}", path=path)
                self.logger.error(error.message)
                report.failed.append(path)
                continue
            report.deleted.append(path)

        return report
