"""Postgres adapters for position queries."""

from tracker.adapters.positions.store import PostgresPositionRepository

__all__ = ["PostgresPositionRepository"]
