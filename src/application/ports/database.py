"""Database ports for the reporting application.

This module defines the application-layer protocol for accessing the records
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine that stores sale and expense records."""

    def get_records_engine(self) -> Engine:
        """Get the engine for the records database.

        Returns:
            Engine: SQLAlchemy engine connected to the records store.
        """


__all__ = ["DatabaseEnginePort"]
