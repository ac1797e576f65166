"""Per-user scan session state.

A session allows a single outstanding scan. It keeps the outcome of the
last scan (result or error) until the next submission or an explicit reset.
Resetting does not abort a scan that is already running.
"""

from __future__ import annotations

import logging
import threading

from scamfinder.exceptions import ScamFinderError, ScanInProgressError
from scamfinder.models.request import AnalysisRequest
from scamfinder.models.results import ScanResult
from scamfinder.scanner import Scanner

logger = logging.getLogger(__name__)


class ScanSession:
    """Busy-flag guarded wrapper around a ``Scanner``."""

    def __init__(self, scanner: Scanner | None = None) -> None:
        self.scanner = scanner or Scanner()
        self._busy = threading.Lock()
        self.result: ScanResult | None = None
        self.error: ScamFinderError | None = None

    @property
    def is_scanning(self) -> bool:
        return self._busy.locked()

    def submit(self, request: AnalysisRequest) -> ScanResult:
        """Run one scan, recording its outcome on the session.

        Raises:
            ScanInProgressError: Another scan on this session has not finished.
            ScamFinderError: Any scan failure; also stored on ``self.error``.
        """
        if not self._busy.acquire(blocking=False):
            raise ScanInProgressError()
        try:
            self.result = None
            self.error = None
            try:
                self.result = self.scanner.scan(request)
            except ScamFinderError as e:
                self.error = e
                raise
            return self.result
        finally:
            self._busy.release()

    def reset(self) -> None:
        """Clear the last result and error."""
        if self.is_scanning:
            logger.info("Session reset while a scan is in flight; its result will still be recorded")
        self.result = None
        self.error = None
