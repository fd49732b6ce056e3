from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class TrackedToken:
    id: str
    mint_address: str
    symbol: str
    name: Optional[str] = None
    decimals: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class TrackedTokenRef:
    mint_address: str
    symbol: str


@dataclass(frozen=True)
class Wallet:
    id: str
    address: str
    label: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class WalletRef:
    address: str
    label: Optional[str] = None


@dataclass(frozen=True)
class Execution:
    id: str
    position_id: str
    side: str
    token_amount: Decimal
    created_at: datetime
    price: Optional[Decimal] = None
    tx_signature: Optional[str] = None


@dataclass(frozen=True)
class Position:
    id: str
    wallet_id: str
    tracked_token_id: str
    status: str
    opened_at: datetime
    quantity: Decimal = Decimal("0")
    closed_at: Optional[datetime] = None
    avg_entry_price: Optional[Decimal] = None
    realized_pnl: Optional[Decimal] = None


@dataclass(frozen=True)
class PositionSummary:
    """Listing projection: no executions, reduced token and wallet."""

    position: Position
    tracked_token: TrackedTokenRef
    wallet: WalletRef


@dataclass(frozen=True)
class PositionDetail:
    position: Position
    tracked_token: TrackedToken
    wallet: Wallet
    executions: list[Execution] = field(default_factory=list)


@dataclass(frozen=True)
class PositionFilter:
    status: Optional[str] = None
    wallet_id: Optional[str] = None

    def clauses(self) -> list[tuple[str, str]]:
        """Return (column, value) equality pairs for the filters that are set.

        Empty strings are treated the same as a missing filter.
        """
        clauses: list[tuple[str, str]] = []
        if self.status:
            clauses.append(("status", self.status))
        if self.wallet_id:
            clauses.append(("wallet_id", self.wallet_id))
        return clauses
