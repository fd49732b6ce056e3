from __future__ import annotations

from typing import Optional, Protocol

from tracker.core.positions.models import PositionDetail, PositionFilter, PositionSummary


class PositionRepository(Protocol):
    async def list_positions(self, filters: PositionFilter) -> list[PositionSummary]:
        """Return matching positions, most recently opened first."""
        raise NotImplementedError

    async def get_position(self, position_id: str) -> Optional[PositionDetail]:
        """Return the full position with executions newest first, or None when absent."""
        raise NotImplementedError
