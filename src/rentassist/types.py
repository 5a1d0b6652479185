from __future__ import annotations

from pydantic import BaseModel


class ApplicationStats(BaseModel):
    total_applications: int = 0
    total_rent_owed: float | None = None
    avg_rent_owed: float | None = None
    receiving_social_security: int = 0
