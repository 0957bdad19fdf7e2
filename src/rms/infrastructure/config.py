"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from rms.domain.model.order import StatusPolicy

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str
    status_policy: StatusPolicy

    @property
    def dishes_file(self) -> Path:
        return self.data_dir / "dishes.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"


def load_settings() -> Settings:
    """Build settings from ``RMS_*`` environment variables.

    Raises ValueError for an unknown ``RMS_STATUS_POLICY``.
    """
    raw_policy = os.getenv("RMS_STATUS_POLICY", StatusPolicy.STRICT.value).lower()
    try:
        policy = StatusPolicy(raw_policy)
    except ValueError:
        accepted = ", ".join(p.value for p in StatusPolicy)
        raise ValueError(
            f"Invalid RMS_STATUS_POLICY {raw_policy!r}, expected one of: {accepted}"
        ) from None

    return Settings(
        data_dir=Path(os.getenv("RMS_DATA_DIR", str(DEFAULT_DATA_DIR))),
        log_level=os.getenv("RMS_LOG_LEVEL", "WARNING").upper(),
        status_policy=policy,
    )
