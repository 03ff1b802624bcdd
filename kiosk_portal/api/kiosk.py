"""Kiosk login endpoint."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Response
from sqlmodel import Session

from kiosk_portal.core.audit_log import AuditLog
from kiosk_portal.core.db import engine, get_session
from kiosk_portal.core.device_auth import DeviceAuthorizationEngine, DeviceAuthStore
from kiosk_portal.core.directory import UserDirectory
from kiosk_portal.core.errors import KioskPortalError
from kiosk_portal.core.kiosk import KioskLoginOrchestrator
from kiosk_portal.core.locations import LocationResolver, LocationStore
from kiosk_portal.core.schemas import KioskDeviceLogin, KioskLoginRequest, KioskLoginResponse

router = APIRouter(prefix="/kiosk")


def build_authorization_engine(session: Session) -> DeviceAuthorizationEngine:
    """Return a device authorization engine bound to ``session``."""

    return DeviceAuthorizationEngine(DeviceAuthStore(session), AuditLog(session))


def log_authenticate_task(
    location_id: int,
    device_id: str,
    login: KioskDeviceLogin,
    timestamp: datetime,
    auth_expiration: int,
) -> None:
    """Record a kiosk login after the response has been sent."""

    with Session(engine) as session:
        build_authorization_engine(session).log_authenticate(
            location_id, device_id, login, timestamp, auth_expiration
        )


@router.post("/login", response_model=KioskLoginResponse, response_model_exclude_none=True)
def kiosk_login(
    payload: KioskLoginRequest,
    response: Response,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
) -> KioskLoginResponse:
    """Authorize a kiosk device for the locations its user may see."""

    def record_login(*args) -> None:
        background_tasks.add_task(log_authenticate_task, *args)

    orchestrator = KioskLoginOrchestrator(
        UserDirectory(session),
        LocationResolver(LocationStore(session)),
        build_authorization_engine(session),
        record_login=record_login,
    )

    try:
        result = orchestrator.login(
            payload.user_id, payload.device_id, payload.support, payload.device
        )
    except KioskPortalError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc

    response.status_code = int(result.status)
    return result
