"""
API Dependencies

Per-request wiring for FastAPI routes: a database session, the scheduling
store built on it, the registry client and the identifier codec.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from shiftboard.core.codec import IdentifierCodec, codec
from shiftboard.core.db import engine
from shiftboard.domain.scheduling.repositories import SchedulingStore
from shiftboard.infrastructure.database.repositories import SqlSchedulingStore
from shiftboard.infrastructure.registry import EmployeeRegistryClient


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]


def get_store(session: SessionDep) -> SchedulingStore:
    return SqlSchedulingStore(session)


def get_registry(request: Request) -> EmployeeRegistryClient:
    # Created once in the application lifespan and shared across requests
    return request.app.state.registry


def get_codec() -> IdentifierCodec:
    return codec


StoreDep = Annotated[SchedulingStore, Depends(get_store)]
RegistryDep = Annotated[EmployeeRegistryClient, Depends(get_registry)]
CodecDep = Annotated[IdentifierCodec, Depends(get_codec)]
