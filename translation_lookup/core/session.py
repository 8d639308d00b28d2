"""Session controller owning the accumulated records and search state."""

import asyncio
import time
from typing import Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

import structlog

from ..exceptions import ImportFailedError, ImportInProgressError, TabularReadError
from ..models.record import ImportSummary, TranslationRecord
from .debounce import Debouncer
from .engine import SearchEngine, SearchOutcome
from .normalizer import RecordNormalizer
from .tabular import read_tabular

logger = structlog.get_logger(__name__)

UploadedFile = Tuple[str, bytes]
Listener = Callable[[SearchOutcome], Awaitable[None]]


class LookupSession:
    """
    Single in-memory lookup session.

    Transitions are ``import_files``, ``search``/``set_query`` and ``reset``.
    Imports append to the record set; only ``reset`` removes records.
    """

    def __init__(
        self,
        fuzzy_threshold: float = 0.3,
        weights: Optional[Dict[str, float]] = None,
        header_scan_rows: int = 5,
        debounce_ms: int = 150,
        allowed_extensions: Optional[Sequence[str]] = None
    ) -> None:
        """
        Initialize the session.

        Args:
            fuzzy_threshold: Normalized edit distance budget for fuzzy matching
            weights: Fuzzy ranking weight per record field
            header_scan_rows: Leading rows per sheet eligible for header suppression
            debounce_ms: Quiet period before a live query is evaluated
            allowed_extensions: Accepted upload extensions
        """
        self.engine = SearchEngine(fuzzy_threshold=fuzzy_threshold, weights=weights)
        self.normalizer = RecordNormalizer(header_scan_rows=header_scan_rows)
        self.allowed_extensions = allowed_extensions
        self.debouncer = Debouncer(debounce_ms / 1000.0, self._evaluate)

        self.current_query = ""
        self.latest_outcome: Optional[SearchOutcome] = None
        self.last_import: Optional[ImportSummary] = None
        self._importing = False
        self._listeners: List[Listener] = []

    @property
    def importing(self) -> bool:
        """True while an import is in flight."""
        return self._importing

    @property
    def total_records(self) -> int:
        return len(self.engine.store)

    async def import_files(self, files: Sequence[UploadedFile]) -> ImportSummary:
        """
        Read, normalize and append a batch of files.

        The batch is all-or-nothing: if any file cannot be read, nothing from
        this call is committed and previously imported records are untouched.

        Args:
            files: (filename, content) pairs

        Returns:
            ImportSummary for the new batch

        Raises:
            ImportInProgressError: If another import has not finished
            ImportFailedError: If any file cannot be read
        """
        if self._importing:
            raise ImportInProgressError()

        self._importing = True
        start_time = time.perf_counter()
        try:
            try:
                records = await asyncio.to_thread(self._parse_files, files)
            except TabularReadError as e:
                logger.error(
                    "import_failed",
                    filename=e.filename,
                    error=e.message,
                    total_files=len(files)
                )
                raise ImportFailedError(e, total_files=len(files)) from e

            self.engine.load_records(records)

            summary = ImportSummary(
                total_files=len(files),
                total_sheets=len({record.group_name for record in records}),
                total_records=len(records),
                parse_time_ms=round((time.perf_counter() - start_time) * 1000),
            )
            self.last_import = summary
        finally:
            self._importing = False

        logger.info(
            "import_completed",
            total_files=summary.total_files,
            total_sheets=summary.total_sheets,
            new_records=summary.total_records,
            total_records=self.total_records,
            parse_time_ms=summary.parse_time_ms
        )

        await self._publish(self.search(self.current_query))
        return summary

    def _parse_files(self, files: Sequence[UploadedFile]) -> List[TranslationRecord]:
        sources = []
        for filename, content in files:
            sources.extend(read_tabular(filename, content, self.allowed_extensions))
        return self.normalizer.normalize(sources)

    def search(self, query: str) -> SearchOutcome:
        """Evaluate a query immediately."""
        return self.engine.search(query)

    def set_query(self, query: str) -> None:
        """Record a live query change and schedule its debounced evaluation."""
        self.current_query = query
        self.debouncer.trigger(query)

    async def _evaluate(self, query: str) -> None:
        await self._publish(self.search(query))

    async def _publish(self, outcome: SearchOutcome) -> None:
        """Push an outcome to every listener; a listener that fails is dropped."""
        self.latest_outcome = outcome
        for listener in list(self._listeners):
            try:
                await listener(outcome)
            except Exception as e:
                logger.warning("listener_failed", query=outcome.query, error=str(e))
                if listener in self._listeners:
                    self._listeners.remove(listener)

    def add_listener(self, listener: Listener) -> None:
        """Register a coroutine function called with every published outcome."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unregister a listener; once none remain, a pending evaluation is dropped."""
        if listener in self._listeners:
            self._listeners.remove(listener)
        if not self._listeners:
            self.debouncer.cancel()

    def get_page(self, offset: int, limit: int) -> List[TranslationRecord]:
        """Random-access slice of the accumulated records."""
        return self.engine.store.slice(offset, limit)

    def get_record(self, record_id: str) -> Optional[TranslationRecord]:
        return self.engine.store.get(record_id)

    def group_names(self) -> List[str]:
        return self.engine.store.group_names()

    def reset(self) -> None:
        """Return to the empty initial state."""
        self.debouncer.cancel()
        self.engine.clear()
        self.current_query = ""
        self.latest_outcome = None
        self.last_import = None
        logger.info("session_reset")
