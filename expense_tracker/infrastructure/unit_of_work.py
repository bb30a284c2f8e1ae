# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction boundaries for repository calls."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from expense_tracker.shared.logging import logger


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """One session per repository call: commit on success, roll back on error.

    Read-only units never commit, so an accidental write inside a query is discarded.
    """

    session_factory: Callable[[], Session]
    read_only: bool = False
    _session: Session | None = field(default=None, init=False)

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        logger.debug(f"uow: session opened (read_only={self.read_only})")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        assert self._session is not None
        try:
            if exc or self.read_only:
                if exc:
                    logger.debug(f"uow: rollback due to {exc_type.__name__}")
                self._session.rollback()
            else:
                self._session.commit()
                logger.debug("uow: committed")
        except Exception:
            logger.exception("uow: exception while finalising")
            self._session.rollback()
            raise
        finally:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork session accessed before entering context")
        return self._session


@contextmanager
def unit_of_work_scope(
    factory: Callable[[], Session], *, read_only: bool = False
) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory, read_only=read_only) as uow:
        yield uow.session
