from __future__ import annotations

import logging
from typing import Optional

from tracker.core.positions.models import PositionDetail, PositionFilter, PositionSummary
from tracker.core.positions.ports import PositionRepository

logger = logging.getLogger(__name__)


class PositionNotFoundError(LookupError):
    """Raised when no position exists for the requested id."""

    def __init__(self, position_id: str) -> None:
        super().__init__(f"Position not found: {position_id}")
        self.position_id = position_id


class PositionQueryService:
    def __init__(self, repository: PositionRepository) -> None:
        self._repository = repository

    async def list_positions(
        self,
        status: Optional[str] = None,
        wallet_id: Optional[str] = None,
    ) -> list[PositionSummary]:
        filters = PositionFilter(status=status, wallet_id=wallet_id)
        logger.debug("Listing positions filters=%s", filters.clauses())
        return await self._repository.list_positions(filters)

    async def get_position(self, position_id: str) -> PositionDetail:
        detail = await self._repository.get_position(position_id)
        if detail is None:
            logger.info("Position lookup miss id=%s", position_id)
            raise PositionNotFoundError(position_id)
        return detail
