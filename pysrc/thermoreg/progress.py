"""
Progress reporting for long thermoreg runs.

Wraps tqdm so that controllers can report progress without knowing
whether a bar should be shown (terminal use) or not (tests, callbacks).

Usage:
    from thermoreg.progress import ProgressReporter

    progress = ProgressReporter(total=len(values), desc="Wet-bulb sweep")
    for wet_bulb in values:
        run(wet_bulb)
        progress.update(1)
    progress.close()
"""

from __future__ import annotations

from tqdm import tqdm


class ProgressReporter:
    """
    Progress reporter backed by a tqdm bar, or silent when disabled.

    Args:
        total: Total number of steps (required for percentage calculation).
        desc: Description shown in progress bar.
        disable: If True, disable all progress output.
    """

    def __init__(self, total: int, desc: str = "", disable: bool = False):
        self.total = total
        self.desc = desc
        self.current = 0
        self.disable = disable
        self._closed = False
        self._tqdm_bar = None if disable else tqdm(total=total, desc=desc)

    def update(self, n: int = 1) -> None:
        """Update progress by n steps."""
        if self._closed:
            return

        self.current += n
        if self._tqdm_bar is not None:
            self._tqdm_bar.update(n)

    def set_description(self, desc: str) -> None:
        """Update the progress description."""
        self.desc = desc
        if self._tqdm_bar is not None:
            self._tqdm_bar.set_description(desc)

    def close(self) -> None:
        """Close the progress bar."""
        if self._closed:
            return
        self._closed = True

        if self._tqdm_bar is not None:
            self._tqdm_bar.close()
