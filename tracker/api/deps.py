from tracker.adapters.positions.store import PostgresPositionRepository
from tracker.core.positions.service import PositionQueryService


def get_position_service() -> PositionQueryService:
    return PositionQueryService(repository=PostgresPositionRepository())
