"""
Clipboard Export

Copies the rendered README to the system clipboard and tracks the button-style status
shown to the user. A success or failure status is transient: once the reset delay has
passed, ``status`` reads as the neutral ``Copy`` again. The revert is computed from the
clock on read, so no timer thread is involved.
"""

import os
import time
from enum import Enum
from typing import Callable, Optional

import pyperclip
from dotenv import load_dotenv

from readmegen.contexts.export.logger import log_copy_result

load_dotenv()
COPY_RESET_SECONDS = float(os.getenv("READMEGEN_COPY_RESET_SECONDS", "2"))


class CopyStatus(str, Enum):
    """User-facing copy status."""

    IDLE = "Copy"
    COPIED = "Copied!"
    FAILED = "Failed to Copy"


class ClipboardExporter:
    """
    Clipboard copy with a transient status.

    Args:
        reset_after: Seconds before a non-neutral status reverts to ``Copy``
        copy_fn: Function that writes text to the clipboard (pyperclip.copy by default)
        clock: Monotonic time source, injectable for tests
    """

    def __init__(
        self,
        reset_after: float = None,
        copy_fn: Optional[Callable[[str], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.reset_after = COPY_RESET_SECONDS if reset_after is None else reset_after
        self._copy_fn = copy_fn or pyperclip.copy
        self._clock = clock
        self._status = CopyStatus.IDLE
        self._changed_at = 0.0

    @property
    def status(self) -> CopyStatus:
        if self._status is not CopyStatus.IDLE:
            if self._clock() - self._changed_at >= self.reset_after:
                self._status = CopyStatus.IDLE
        return self._status

    def copy(self, markdown: str) -> CopyStatus:
        """
        Place markdown on the clipboard.

        Clipboard failures are logged and reported through the returned status rather
        than raised.
        """
        try:
            self._copy_fn(markdown)
        except (pyperclip.PyperclipException, OSError) as e:
            log_copy_result(len(markdown), error=e)
            self._set_status(CopyStatus.FAILED)
        else:
            log_copy_result(len(markdown))
            self._set_status(CopyStatus.COPIED)

        return self._status

    def _set_status(self, status: CopyStatus) -> None:
        self._status = status
        self._changed_at = self._clock()
