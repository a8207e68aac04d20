"""Data layer: repository factory and re-exports."""

from __future__ import annotations

from ..config import DashboardConfig, load_config
from .base import RaceDataRepository
from .errors import RaceDataError
from .types import FieldTableRow, LapTableRow, ResultRow


def get_repository(config: DashboardConfig | None = None) -> RaceDataRepository:
    """Return the hosted repository, loading config from the environment if needed."""
    from ..api_logging import set_log_dir
    from .hosted_repo import HostedRaceRepository

    if config is None:
        config = load_config()
    if config.log_dir:
        set_log_dir(config.log_dir)
    return HostedRaceRepository(config)


__all__ = [
    "FieldTableRow",
    "LapTableRow",
    "RaceDataError",
    "RaceDataRepository",
    "ResultRow",
    "get_repository",
]
