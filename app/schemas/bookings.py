from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELED = "canceled"


class ReconciliationReport(BaseModel):
    scanned: int = 0
    completed: int = 0
    failed: int = 0
    completed_ids: list[str] = Field(default_factory=list)
    error: Optional[str] = None
