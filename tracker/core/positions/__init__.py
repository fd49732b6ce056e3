"""Position domain types and read services."""

from tracker.core.positions.models import (
    Execution,
    Position,
    PositionDetail,
    PositionFilter,
    PositionSummary,
    TrackedToken,
    TrackedTokenRef,
    Wallet,
    WalletRef,
)
from tracker.core.positions.ports import PositionRepository
from tracker.core.positions.service import PositionNotFoundError, PositionQueryService

__all__ = [
    "Execution",
    "Position",
    "PositionDetail",
    "PositionFilter",
    "PositionNotFoundError",
    "PositionQueryService",
    "PositionRepository",
    "PositionSummary",
    "TrackedToken",
    "TrackedTokenRef",
    "Wallet",
    "WalletRef",
]
