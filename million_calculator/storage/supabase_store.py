"""
Supabase (PostgREST) client for lead capture.
"""
import logging

import requests

from million_calculator.storage.base import LeadRecord, LeadStore, StorageError

logger = logging.getLogger(__name__)


class SupabaseLeadStore(LeadStore):
    """Inserts lead rows through the Supabase REST API"""

    def __init__(self, url: str, api_key: str, table: str = "calculations", timeout: float = 10.0):
        self.base_url = url.rstrip("/")
        self.table = table
        self.timeout = timeout
        self.headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def save(self, record: LeadRecord) -> str:
        payload = record.model_dump(mode="json")
        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers=self.headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"Supabase HTTP error: {e.response.status_code} - {e.response.text}")
            raise StorageError(f"lead store rejected record ({e.response.status_code})") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Supabase request error: {str(e)}")
            raise StorageError("lead store unreachable") from e

        return record.id
