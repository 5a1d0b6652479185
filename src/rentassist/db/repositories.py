from __future__ import annotations

from typing import Any

from sqlalchemy import case, delete, func, or_, select
from sqlalchemy.orm import Session

from rentassist.core.fields import ALL_FIELDS, SEARCHABLE_COLUMNS, UPLOAD_SLOTS
from rentassist.core.validation import SQLITE_INT_MAX, SQLITE_INT_MIN
from rentassist.db.models import Application
from rentassist.types import ApplicationStats

_INSERTABLE = {spec.name for spec in ALL_FIELDS} | set(UPLOAD_SLOTS)


def _storable_id(application_id: int) -> bool:
    return SQLITE_INT_MIN <= application_id <= SQLITE_INT_MAX


class ApplicationRepository:
    def __init__(self, session: Session, *, affirmative_flag: str = "Yes"):
        self.session = session
        self.affirmative_flag = affirmative_flag

    def _newest_first(self):
        return (Application.submitted_at.desc(), Application.id.desc())

    def insert(self, values: dict[str, Any]) -> int:
        unknown = set(values) - _INSERTABLE
        if unknown:
            raise ValueError(f"unknown application fields: {sorted(unknown)}")

        application = Application(**values)
        self.session.add(application)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return application.id

    def list_applications(self) -> list[Application]:
        statement = select(Application).order_by(*self._newest_first())
        return list(self.session.scalars(statement).all())

    def get_application(self, application_id: int) -> Application | None:
        if not _storable_id(application_id):
            return None
        return self.session.get(Application, application_id)

    def search(self, term: str) -> list[Application]:
        term = (term or "").strip()
        if not term:
            raise ValueError("search term must not be empty")

        columns = [getattr(Application, name) for name in SEARCHABLE_COLUMNS]
        statement = (
            select(Application)
            .where(or_(*(column.icontains(term, autoescape=True) for column in columns)))
            .order_by(*self._newest_first())
        )
        return list(self.session.scalars(statement).all())

    def delete_application(self, application_id: int) -> bool:
        if not _storable_id(application_id):
            return False
        result = self.session.execute(delete(Application).where(Application.id == application_id))
        self.session.commit()
        return result.rowcount > 0

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(Application)) or 0

    def stats(self) -> ApplicationStats:
        statement = select(
            func.count(Application.id),
            func.sum(Application.past_due_rent),
            func.avg(Application.past_due_rent),
            func.count(case((Application.receiving_ss == self.affirmative_flag, 1))),
        )
        total, rent_sum, rent_avg, receiving = self.session.execute(statement).one()
        return ApplicationStats(
            total_applications=total or 0,
            total_rent_owed=float(rent_sum) if rent_sum is not None else None,
            avg_rent_owed=float(rent_avg) if rent_avg is not None else None,
            receiving_social_security=receiving or 0,
        )
