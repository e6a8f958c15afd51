"""Lead record and storage contract."""

from __future__ import annotations

import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from million_calculator.presentation.formatting import json_years
from million_calculator.schemas.calculation import (
    CalculationRequest,
    ProjectionResult,
    RiskProfile,
    ScenarioTier,
)


class StorageError(RuntimeError):
    """Raised by a lead store when a record could not be saved."""


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LeadRecord(BaseModel):
    """One captured lead. Years are ``None`` when the target is unreachable."""

    id: str = Field(default_factory=_new_id)
    created_at: datetime = Field(default_factory=_utcnow)
    name: str
    email: Optional[str] = None
    whatsapp: Optional[str] = None
    age: int
    current_investment: float
    monthly_investment: float
    profile: RiskProfile
    years_real: Optional[float]
    years_optimized: Optional[float]
    scenario: ScenarioTier

    @classmethod
    def from_result(cls, request: CalculationRequest, result: ProjectionResult) -> "LeadRecord":
        return cls(
            name=request.name,
            email=request.email,
            whatsapp=request.whatsapp,
            age=request.age,
            current_investment=request.starting_capital,
            monthly_investment=request.monthly_contribution,
            profile=request.profile,
            years_real=json_years(result.baseline_years),
            years_optimized=json_years(result.optimized_years),
            scenario=result.tier,
        )


class LeadStore(ABC):
    @abstractmethod
    def save(self, record: LeadRecord) -> str:
        """Persist ``record`` and return its id. Raises StorageError."""


class InMemoryLeadStore(LeadStore):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.records: List[LeadRecord] = []

    def save(self, record: LeadRecord) -> str:
        with self._lock:
            self.records.append(record)
        return record.id
