"""Symbol input exceptions."""

from pathlib import Path

from .base import DeobfInsightError


class SymbolLoadError(DeobfInsightError):
    """Raised when a symbol dump cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot load symbols from {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
