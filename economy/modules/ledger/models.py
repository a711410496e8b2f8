"""Domain models for the ledger."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class AccountSnapshot:
    id: str
    balance: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
