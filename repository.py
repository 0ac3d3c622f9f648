from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Field, Session, create_engine, select

from domain import EntryDraft, Totals, WorkEntry

logger = logging.getLogger(__name__)


class WorkEntryDB(SQLModel, table=True):
    id: int = Field(primary_key=True)
    date: str
    start_time: str
    end_time: str
    break_duration: str


def build_engine(echo: bool = False):
    """In-memory SQLite shared by every session of one store; gone with the process."""
    return create_engine(
        "sqlite://",
        echo=echo,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


class WorkEntryRepository:
    """CRUD for work entries. Lives as long as the session that owns it."""
    def __init__(self, reuse_ids: bool = False, wrap_overnight: bool = False, echo: bool = False):
        self.reuse_ids = reuse_ids
        self.wrap_overnight = wrap_overnight
        self.engine = build_engine(echo=echo)
        self._last_id = 0
        SQLModel.metadata.create_all(self.engine)

    def _to_entry(self, r: WorkEntryDB) -> WorkEntry:
        return WorkEntry(
            id=r.id,
            date=r.date,
            start_time=r.start_time,
            end_time=r.end_time,
            break_duration=r.break_duration,
            wrap_overnight=self.wrap_overnight,
        )

    def _next_id(self, session: Session) -> int:
        if self.reuse_ids:
            # max(existing) + 1: the id of a deleted last entry comes back
            current = session.exec(select(func.max(WorkEntryDB.id))).one()
            return (current or 0) + 1
        self._last_id += 1
        return self._last_id

    def add(self, draft: EntryDraft) -> WorkEntry:
        draft = draft.normalized()
        with Session(self.engine) as session:
            row = WorkEntryDB(
                id=self._next_id(session),
                date=draft.date,
                start_time=draft.start_time,
                end_time=draft.end_time,
                break_duration=draft.break_duration,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            logger.debug("Added work entry %s on %s", row.id, row.date)
            return self._to_entry(row)

    def update(self, entry_id: int, draft: EntryDraft) -> Optional[WorkEntry]:
        """Replaces the raw fields of an entry. Unknown ids are ignored."""
        draft = draft.normalized()
        with Session(self.engine) as session:
            row = session.get(WorkEntryDB, entry_id)
            if row is None:
                logger.debug("Update ignored, no work entry %s", entry_id)
                return None
            row.date = draft.date
            row.start_time = draft.start_time
            row.end_time = draft.end_time
            row.break_duration = draft.break_duration
            session.add(row)
            session.commit()
            session.refresh(row)
            logger.debug("Updated work entry %s", entry_id)
            return self._to_entry(row)

    def remove(self, entry_id: int) -> bool:
        with Session(self.engine) as session:
            row = session.get(WorkEntryDB, entry_id)
            if row is None:
                logger.debug("Delete ignored, no work entry %s", entry_id)
                return False
            session.delete(row)
            session.commit()
            logger.debug("Removed work entry %s", entry_id)
            return True

    def get(self, entry_id: int) -> Optional[WorkEntry]:
        with Session(self.engine) as session:
            row = session.get(WorkEntryDB, entry_id)
            return self._to_entry(row) if row is not None else None

    def list_all(self) -> List[WorkEntry]:
        # ids only grow, so id order is insertion order
        with Session(self.engine) as session:
            rows = session.exec(select(WorkEntryDB).order_by(WorkEntryDB.id)).all()
            return [self._to_entry(r) for r in rows]

    def totals(self) -> Totals:
        hours, quarters, pause = 0.0, 0, 0
        for e in self.list_all():
            hours += e.hours_worked
            quarters += e.quarter_hours_worked
            pause += e.break_minutes
        return Totals(
            total_hours_worked=hours,
            total_quarter_hours_worked=quarters,
            total_pause_time=pause,
        )


class EntryEditor:
    """The single 'currently editing' slot. Save and delete only act on a selection."""
    def __init__(self, repo: WorkEntryRepository):
        self.repo = repo
        self.selected_id: Optional[int] = None

    @property
    def selected(self) -> Optional[WorkEntry]:
        if self.selected_id is None:
            return None
        return self.repo.get(self.selected_id)

    def begin(self, entry_id: int) -> Optional[WorkEntry]:
        entry = self.repo.get(entry_id)
        self.selected_id = entry.id if entry is not None else None
        return entry

    def cancel(self) -> None:
        self.selected_id = None

    def save(self, draft: EntryDraft) -> Optional[WorkEntry]:
        if self.selected_id is None:
            logger.debug("Save ignored, nothing selected")
            return None
        entry = self.repo.update(self.selected_id, draft)
        self.selected_id = None
        return entry

    def delete(self) -> bool:
        if self.selected_id is None:
            logger.debug("Delete ignored, nothing selected")
            return False
        removed = self.repo.remove(self.selected_id)
        self.selected_id = None
        return removed


__all__ = ["EntryEditor", "WorkEntryDB", "WorkEntryRepository", "build_engine"]
