"""Boundary Protocols — contracts between routes and stores.

Invariants:
    - Routes depend on these Protocols, never on the SQL stores directly
    - Documents cross the boundary as plain dicts with "_id" as a string
    - Lookups return None for absence; routes decide how absence maps to HTTP

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Any, Protocol

from jobhorizon.core.domain_types import JobId, WriteResult


class JobRepository(Protocol):
    """Contract for job posting persistence."""
    async def search(self, title_query: str | None = None) -> list[dict]: ...
    async def get(self, job_id: JobId) -> dict | None: ...
    async def list_by_owner(self, email: str) -> list[dict]: ...
    async def insert(self, document: dict[str, Any]) -> WriteResult: ...
    async def upsert(
        self, job_id: JobId, fields: dict[str, Any],
    ) -> WriteResult: ...
    async def delete(self, job_id: JobId) -> WriteResult: ...


class ApplicationRepository(Protocol):
    """Contract for job application persistence."""
    async def exists(self, email: str, job_id: str) -> bool: ...
    async def list_by_applicant(
        self, email: str, category: str | None = None,
    ) -> list[dict]: ...
    async def submit(self, document: dict[str, Any]) -> WriteResult: ...
