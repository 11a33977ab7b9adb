"""Reporter and progress interfaces the pipeline reports through."""

from __future__ import annotations

from typing import Protocol

from spellscan.scanning.schemas import ScanResult


class Reporter(Protocol):
    """Receives one snapshot per completed scan."""

    @property
    def name(self) -> str: ...

    def report(self, result: ScanResult) -> None: ...

    def advise(self, message: str) -> None: ...


class ProgressSignal(Protocol):
    """Advisory bracket around the dictionary fetch."""

    def loading_started(self) -> None: ...

    def loading_finished(self) -> None: ...
