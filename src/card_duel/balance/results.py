"""Save and load batch results as JSON."""

from __future__ import annotations

from pathlib import Path

from card_duel.balance.models import BatchResult


def save_batch_result(batch: BatchResult, path: Path | str) -> None:
    """Write *batch* to *path*, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(batch.model_dump_json(indent=2))


def load_batch_result(path: Path | str) -> BatchResult:
    """Read a batch result previously written by :func:`save_batch_result`."""
    return BatchResult.model_validate_json(Path(path).read_text())
