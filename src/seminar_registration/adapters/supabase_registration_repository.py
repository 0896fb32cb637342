"""Supabase-backed registration repository."""

from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from seminar_registration.services.submission import InsertResult, RegistrationRepository


@dataclass
class SupabaseRegistrationRepository(RegistrationRepository):
    """Supabase implementation for registration inserts."""

    client: Client

    def insert(self, table: str, record: dict[str, object]) -> InsertResult:
        """Insert a registration row, folding PostgREST errors into the result."""
        try:
            response = self.client.table(table).insert([record]).execute()
        except APIError as error:
            return InsertResult(
                error={
                    "message": error.message or "Insert rejected",
                    "code": error.code,
                }
            )
        return InsertResult(data=response.data)
