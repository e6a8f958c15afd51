import sqlite3
from pathlib import Path
from typing import Any, Dict, Optional, Union

from million_calculator.storage.base import LeadRecord, LeadStore, StorageError


class SqliteLeadStore(LeadStore):
    """Local lead table, one row per calculation."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                create table if not exists calculations (
                    id text primary key,
                    created_at text not null,
                    name text not null,
                    email text,
                    whatsapp text,
                    age integer not null,
                    current_investment real not null,
                    monthly_investment real not null,
                    profile text not null,
                    years_real real,
                    years_optimized real,
                    scenario text not null
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def save(self, record: LeadRecord) -> str:
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise StorageError(f"could not open lead database: {exc}") from exc
        try:
            conn.execute(
                """
                insert into calculations (
                    id, created_at, name, email, whatsapp, age,
                    current_investment, monthly_investment, profile,
                    years_real, years_optimized, scenario
                )
                values (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.id,
                    record.created_at.isoformat(timespec="seconds"),
                    record.name,
                    record.email,
                    record.whatsapp,
                    record.age,
                    record.current_investment,
                    record.monthly_investment,
                    record.profile.value,
                    record.years_real,
                    record.years_optimized,
                    record.scenario.value,
                ),
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"could not save lead: {exc}") from exc
        finally:
            conn.close()
        return record.id

    def fetch_latest(self) -> Optional[Dict[str, Any]]:
        conn = self._connect()
        try:
            row = conn.execute(
                """
                select *
                from calculations
                order by created_at desc, rowid desc
                limit 1
                """
            ).fetchone()
            if row is None:
                return None
            return dict(row)
        finally:
            conn.close()
