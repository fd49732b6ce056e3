from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Any, Callable, Optional

import psycopg

from tracker.adapters.positions.db import get_conn
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

ConnectionFactory = Callable[[], AbstractAsyncContextManager[psycopg.AsyncConnection]]

_POSITION_COLUMNS = """
    p.id, p.wallet_id, p.tracked_token_id, p.status, p.opened_at,
    p.quantity, p.closed_at, p.avg_entry_price, p.realized_pnl
"""

# Only columns for which PositionFilter emits clauses may appear here.
# status is compared as text so values outside an enum-typed column match nothing.
_FILTER_COLUMNS = {"status": "p.status::text", "wallet_id": "p.wallet_id"}


class PostgresPositionRepository:
    def __init__(self, connect: ConnectionFactory = get_conn) -> None:
        self._connect = connect

    async def list_positions(self, filters: PositionFilter) -> list[PositionSummary]:
        sql, params = build_list_query(filters)

        async with self._connect() as conn:
            async with conn.cursor() as cur:
                await cur.execute(sql, params)
                rows = await cur.fetchall()

        return [
            PositionSummary(
                position=_to_position(row[:9]),
                tracked_token=TrackedTokenRef(mint_address=row[9], symbol=row[10]),
                wallet=WalletRef(address=row[11], label=row[12]),
            )
            for row in rows
        ]

    async def get_position(self, position_id: str) -> Optional[PositionDetail]:
        position_sql = """
        SELECT {columns},
            t.id, t.mint_address, t.symbol, t.name, t.decimals, t.created_at,
            w.id, w.address, w.label, w.created_at
        FROM positions p
        JOIN tracked_tokens t ON t.id = p.tracked_token_id
        JOIN wallets w ON w.id = p.wallet_id
        WHERE p.id = %s
        """.format(
            columns=_POSITION_COLUMNS.strip()
        )
        executions_sql = """
        SELECT id, position_id, side, token_amount, created_at, price, tx_signature
        FROM executions
        WHERE position_id = %s
        ORDER BY created_at DESC
        """

        async with self._connect() as conn:
            async with conn.cursor() as cur:
                await cur.execute(position_sql, (position_id,))
                row = await cur.fetchone()
                if row is None:
                    return None
                await cur.execute(executions_sql, (position_id,))
                execution_rows = await cur.fetchall()

        token_id, mint_address, symbol, name, decimals, token_created_at = row[9:15]
        wallet_id, address, label, wallet_created_at = row[15:19]
        return PositionDetail(
            position=_to_position(row[:9]),
            tracked_token=TrackedToken(
                id=token_id,
                mint_address=mint_address,
                symbol=symbol,
                name=name,
                decimals=decimals,
                created_at=token_created_at,
            ),
            wallet=Wallet(
                id=wallet_id,
                address=address,
                label=label,
                created_at=wallet_created_at,
            ),
            executions=[
                Execution(
                    id=exec_id,
                    position_id=exec_position_id,
                    side=side,
                    token_amount=token_amount,
                    created_at=created_at,
                    price=price,
                    tx_signature=tx_signature,
                )
                for (
                    exec_id,
                    exec_position_id,
                    side,
                    token_amount,
                    created_at,
                    price,
                    tx_signature,
                ) in execution_rows
            ],
        )


def build_list_query(filters: PositionFilter) -> tuple[str, list[object]]:
    conditions: list[str] = []
    params: list[object] = []
    for column, value in filters.clauses():
        conditions.append(f"{_FILTER_COLUMNS[column]} = %s")
        params.append(value)

    where_clause = "WHERE " + " AND ".join(conditions) if conditions else ""
    sql = """
    SELECT {columns},
        t.mint_address, t.symbol,
        w.address, w.label
    FROM positions p
    JOIN tracked_tokens t ON t.id = p.tracked_token_id
    JOIN wallets w ON w.id = p.wallet_id
    {where_clause}
    ORDER BY p.opened_at DESC
    """.format(
        columns=_POSITION_COLUMNS.strip(),
        where_clause=where_clause,
    )
    return sql, params


def _to_position(row: tuple[Any, ...]) -> Position:
    (
        position_id,
        wallet_id,
        tracked_token_id,
        status,
        opened_at,
        quantity,
        closed_at,
        avg_entry_price,
        realized_pnl,
    ) = row
    return Position(
        id=position_id,
        wallet_id=wallet_id,
        tracked_token_id=tracked_token_id,
        status=status,
        opened_at=opened_at,
        quantity=quantity,
        closed_at=closed_at,
        avg_entry_price=avg_entry_price,
        realized_pnl=realized_pnl,
    )
