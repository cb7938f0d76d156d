"""Per-file outcomes and their aggregation for a single target path."""

from pathlib import Path
from typing import List, Optional


class OperationResult:
    """Outcome of one file operation."""

    def __init__(self, path: Path, ok: bool, detail: str = "",
                 error: Optional[BaseException] = None):
        self.path = Path(path)
        self.ok = ok
        self.detail = detail
        self.error = error

    @classmethod
    def success(cls, path: Path, detail: str = "") -> 'OperationResult':
        return cls(path, True, detail)

    @classmethod
    def failure(cls, path: Path, error: BaseException) -> 'OperationResult':
        return cls(path, False, str(error), error)

    def __repr__(self):
        status = "ok" if self.ok else "failed"
        return f"OperationResult({str(self.path)!r}, {status}, {self.detail!r})"


class OperationReport:
    """Results collected while processing one command-line path."""

    MAX_LISTED_FAILURES = 10

    def __init__(self, action: str, target: Path):
        self.action = action
        self.target = Path(target)
        self.results: List[OperationResult] = []
        self.message: Optional[str] = None

    def add(self, result: OperationResult):
        self.results.append(result)

    @property
    def succeeded(self) -> List[OperationResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[OperationResult]:
        return [r for r in self.results if not r.ok]

    @property
    def processed_count(self) -> int:
        return len(self.succeeded)

    @property
    def has_failures(self) -> bool:
        return any(not r.ok for r in self.results)

    def failure_summary(self) -> str:
        """Human-readable list of failed files, truncated for dialogs."""
        failed = self.failed
        lines = [f"{len(failed)} file(s) could not be processed:"]
        for result in failed[:self.MAX_LISTED_FAILURES]:
            lines.append(f"{result.path.name}: {result.detail}")
        remaining = len(failed) - self.MAX_LISTED_FAILURES
        if remaining > 0:
            lines.append(f"... and {remaining} more")
        return "\n".join(lines)
