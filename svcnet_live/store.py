"""
Saved service-label filters.

A single SQLite table with a unique label column. The store is an explicit
handle: build one per process and hand it to create_app().
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import Column, DateTime, Integer, String, create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .errors import DuplicateLabelError

logger = logging.getLogger(__name__)

Base = declarative_base()

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ServiceLabel(Base):
    __tablename__ = "service_labels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=utcnow)

    def to_dict(self) -> dict:
        ts = self.created_at
        if ts is not None and ts.tzinfo is not None:
            # SQLite hands rows back naive; keep fresh rows the same shape
            ts = ts.astimezone(timezone.utc).replace(tzinfo=None)
        return {
            "id": self.id,
            "label": self.label,
            "created_at": ts.isoformat(sep=" ", timespec="seconds") if ts else None,
        }


class LabelStore:
    def __init__(self, db_url: str = "sqlite://"):
        kw = {}
        if db_url in MEMORY_URLS:
            # one shared connection, or every checkout sees an empty database
            kw["poolclass"] = StaticPool
        self.engine = create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            echo=False,
            **kw,
        )
        Base.metadata.create_all(bind=self.engine)
        self.Session = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        logger.info("label store ready at %s", db_url)

    def all(self) -> List[ServiceLabel]:
        with self.Session() as s:
            return s.query(ServiceLabel).order_by(ServiceLabel.label).all()

    def add(self, label: str) -> ServiceLabel:
        row = ServiceLabel(label=label)
        with self.Session() as s:
            s.add(row)
            try:
                s.commit()
            except IntegrityError as e:
                s.rollback()
                raise DuplicateLabelError(label) from e
            return row

    def remove(self, label_id: int) -> bool:
        with self.Session() as s:
            n = s.query(ServiceLabel).filter(ServiceLabel.id == label_id).delete()
            s.commit()
            return n > 0

    def remove_by_name(self, label: str) -> bool:
        with self.Session() as s:
            n = s.query(ServiceLabel).filter(ServiceLabel.label == label).delete()
            s.commit()
            return n > 0

    def close(self) -> None:
        self.engine.dispose()
