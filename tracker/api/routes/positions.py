import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from tracker.api.deps import get_position_service
from tracker.core.positions.models import (
    Execution,
    Position,
    PositionDetail,
    PositionSummary,
    TrackedToken,
    Wallet,
)
from tracker.core.positions.service import PositionNotFoundError, PositionQueryService

router = APIRouter(prefix="/positions", tags=["positions"])
logger = logging.getLogger(__name__)


@router.get("")
async def list_positions(
    status: Optional[str] = Query(None, description="Only positions with this status"),
    wallet_id: Optional[str] = Query(
        None, alias="walletId", description="Only positions held by this wallet id"
    ),
    service: PositionQueryService = Depends(get_position_service),
) -> list[dict]:
    """
    Return every position matching the optional filters, most recently opened
    first. Unknown filter values are not rejected; they simply match nothing.
    """
    logger.info("Fetching positions status=%s wallet_id=%s", status, wallet_id)

    summaries = await service.list_positions(status=status, wallet_id=wallet_id)
    return [_summary_payload(summary) for summary in summaries]


@router.get("/{position_id}", response_model=None)
async def get_position(
    position_id: str,
    service: PositionQueryService = Depends(get_position_service),
) -> dict | JSONResponse:
    try:
        detail = await service.get_position(position_id)
    except PositionNotFoundError:
        return JSONResponse(status_code=404, content={"error": "Position not found"})
    return _detail_payload(detail)


def _summary_payload(summary: PositionSummary) -> dict[str, Any]:
    payload = _position_payload(summary.position)
    payload["trackedToken"] = {
        "mintAddress": summary.tracked_token.mint_address,
        "symbol": summary.tracked_token.symbol,
    }
    payload["wallet"] = {
        "address": summary.wallet.address,
        "label": summary.wallet.label,
    }
    return payload


def _detail_payload(detail: PositionDetail) -> dict[str, Any]:
    payload = _position_payload(detail.position)
    payload["trackedToken"] = _token_payload(detail.tracked_token)
    payload["wallet"] = _wallet_payload(detail.wallet)
    payload["executions"] = [_execution_payload(execution) for execution in detail.executions]
    return payload


def _position_payload(position: Position) -> dict[str, Any]:
    return {
        "id": position.id,
        "walletId": position.wallet_id,
        "trackedTokenId": position.tracked_token_id,
        "status": position.status,
        "quantity": _decimal_str(position.quantity),
        "avgEntryPrice": _decimal_str(position.avg_entry_price),
        "realizedPnl": _decimal_str(position.realized_pnl),
        "openedAt": _isoformat(position.opened_at),
        "closedAt": _isoformat(position.closed_at),
    }


def _token_payload(token: TrackedToken) -> dict[str, Any]:
    return {
        "id": token.id,
        "mintAddress": token.mint_address,
        "symbol": token.symbol,
        "name": token.name,
        "decimals": token.decimals,
        "createdAt": _isoformat(token.created_at),
    }


def _wallet_payload(wallet: Wallet) -> dict[str, Any]:
    return {
        "id": wallet.id,
        "address": wallet.address,
        "label": wallet.label,
        "createdAt": _isoformat(wallet.created_at),
    }


def _execution_payload(execution: Execution) -> dict[str, Any]:
    return {
        "id": execution.id,
        "positionId": execution.position_id,
        "side": execution.side,
        "tokenAmount": _decimal_str(execution.token_amount),
        "price": _decimal_str(execution.price),
        "txSignature": execution.tx_signature,
        "createdAt": _isoformat(execution.created_at),
    }


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


# NUMERIC values go out as fixed-point strings so on-chain precision survives JSON.
def _decimal_str(value: Optional[Decimal]) -> Optional[str]:
    if value is None:
        return None
    return format(value, "f")
