from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import pytest

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


def _ts(day: int, hour: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


class InMemoryPositionRepository:
    def __init__(
        self,
        positions: list[Position],
        tokens: list[TrackedToken],
        wallets: list[Wallet],
        executions: list[Execution],
    ) -> None:
        self._positions = positions
        self._tokens = {token.id: token for token in tokens}
        self._wallets = {wallet.id: wallet for wallet in wallets}
        self._executions = executions
        self.list_calls: list[PositionFilter] = []

    async def list_positions(self, filters: PositionFilter) -> list[PositionSummary]:
        self.list_calls.append(filters)
        clauses = filters.clauses()
        matches = [
            position
            for position in self._positions
            if all(getattr(position, column) == value for column, value in clauses)
        ]
        matches.sort(key=lambda position: position.opened_at, reverse=True)
        summaries: list[PositionSummary] = []
        for position in matches:
            token = self._tokens[position.tracked_token_id]
            wallet = self._wallets[position.wallet_id]
            summaries.append(
                PositionSummary(
                    position=position,
                    tracked_token=TrackedTokenRef(mint_address=token.mint_address, symbol=token.symbol),
                    wallet=WalletRef(address=wallet.address, label=wallet.label),
                )
            )
        return summaries

    async def get_position(self, position_id: str) -> Optional[PositionDetail]:
        position = next((item for item in self._positions if item.id == position_id), None)
        if position is None:
            return None
        executions = sorted(
            (item for item in self._executions if item.position_id == position_id),
            key=lambda item: item.created_at,
            reverse=True,
        )
        return PositionDetail(
            position=position,
            tracked_token=self._tokens[position.tracked_token_id],
            wallet=self._wallets[position.wallet_id],
            executions=executions,
        )


@pytest.fixture
def repository() -> InMemoryPositionRepository:
    tokens = [
        TrackedToken(
            id="T1",
            mint_address="So11111111111111111111111111111111111111112",
            symbol="SOL",
            name="Wrapped SOL",
            decimals=9,
            created_at=_ts(1),
        ),
        TrackedToken(
            id="T2",
            mint_address="DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
            symbol="BONK",
            name="Bonk",
            decimals=5,
            created_at=_ts(1),
        ),
    ]
    wallets = [
        Wallet(id="W1", address="7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU", label="main", created_at=_ts(1)),
        Wallet(id="W2", address="9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM", label=None, created_at=_ts(1)),
    ]
    positions = [
        Position(
            id="P2",
            wallet_id="W1",
            tracked_token_id="T2",
            status="closed",
            opened_at=_ts(1),
            quantity=Decimal("0.0"),
            closed_at=_ts(1, 18),
            avg_entry_price=Decimal("0.000021"),
            realized_pnl=Decimal("12.5"),
        ),
        Position(
            id="P1",
            wallet_id="W1",
            tracked_token_id="T1",
            status="open",
            opened_at=_ts(2),
            quantity=Decimal("3.0"),
            avg_entry_price=Decimal("101.25"),
        ),
        Position(
            id="P3",
            wallet_id="W2",
            tracked_token_id="T1",
            status="open",
            opened_at=_ts(3),
            quantity=Decimal("1.0"),
        ),
    ]
    executions = [
        Execution(
            id="E1",
            position_id="P1",
            side="buy",
            token_amount=Decimal("2.0"),
            created_at=_ts(2, 9),
            price=Decimal("100.0"),
        ),
        Execution(
            id="E3",
            position_id="P1",
            side="sell",
            token_amount=Decimal("1.0"),
            created_at=_ts(2, 15),
            price=Decimal("104.0"),
        ),
        Execution(
            id="E2",
            position_id="P1",
            side="buy",
            token_amount=Decimal("2.0"),
            created_at=_ts(2, 11),
            price=Decimal("102.5"),
        ),
        Execution(
            id="E4",
            position_id="P2",
            side="buy",
            token_amount=Decimal("500000.0"),
            created_at=_ts(1, 2),
        ),
    ]
    return InMemoryPositionRepository(positions, tokens, wallets, executions)
