"""Pydantic models for scan output."""

from pydantic import BaseModel, ConfigDict, Field


class ScanResult(BaseModel):
    """Snapshot of one complete scan.

    ``mistakes`` maps each unknown lowercase word to its occurrence
    count, in first-seen order. Rebuilt from empty on every scan.
    """

    model_config = ConfigDict(frozen=True)

    total_tokens_scanned: int = Field(default=0, ge=0)
    mistakes: dict[str, int] = Field(default_factory=lambda: dict[str, int]())

    @property
    def distinct_mistakes(self) -> int:
        return len(self.mistakes)

    @property
    def total_mistakes(self) -> int:
        return sum(self.mistakes.values())
