"""In-memory persistence for export records and predictions."""

from .repository import InMemoryExportRepository, RepositoryStats

__all__ = ["InMemoryExportRepository", "RepositoryStats"]
