# orphanage_care/routers/accounts.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from orphanage_care.core.errors import AlreadyRegistered, BadCredentials, DirectoryError, NotFound
from orphanage_care.deps import get_donors, get_orphanages
from orphanage_care.repos.accounts import AccountDirectory
from orphanage_care.schemas import MessageOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accounts"])

# ---------- Shared impl ----------
async def _do_register(directory: AccountDirectory, body: Dict[str, Any], kind: str) -> dict:
    try:
        await directory.register(body.get(directory.name_field), body.get("email"), body.get("password"))
    except AlreadyRegistered as exc:
        logger.info("%s", exc)
        raise HTTPException(status_code=400, detail="Already registered")
    except (DirectoryError, PyMongoError) as exc:
        logger.exception("%s registration failed", kind)
        raise HTTPException(status_code=500, detail=f"Error registering {kind}: {exc}")
    return {"message": f"{kind.capitalize()} registration successful!"}

async def _do_login(directory: AccountDirectory, body: Dict[str, Any]) -> dict:
    try:
        await directory.login(body.get("email"), body.get("password"))
    except (NotFound, BadCredentials) as exc:
        logger.info("%s login refused: %s", directory.label, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except (DirectoryError, PyMongoError) as exc:
        logger.exception("%s login failed", directory.label)
        raise HTTPException(status_code=500, detail=f"An error occurred: {exc}")
    return {"message": "Login successful!"}

# ---------- Registration ----------
@router.post("/register-donor", status_code=status.HTTP_201_CREATED, response_model=MessageOut)
async def register_donor(
    body: Dict[str, Any] = Body(...),
    donors: AccountDirectory = Depends(get_donors),
):
    return await _do_register(donors, body, "donor")

@router.post("/register-orphanage", status_code=status.HTTP_201_CREATED, response_model=MessageOut)
async def register_orphanage(
    body: Dict[str, Any] = Body(...),
    orphanages: AccountDirectory = Depends(get_orphanages),
):
    return await _do_register(orphanages, body, "orphanage")

# ---------- Login ----------
@router.post("/login-donor", response_model=MessageOut)
async def login_donor(
    body: Dict[str, Any] = Body(...),
    donors: AccountDirectory = Depends(get_donors),
):
    return await _do_login(donors, body)

@router.post("/login-orphanage", response_model=MessageOut)
async def login_orphanage(
    body: Dict[str, Any] = Body(...),
    orphanages: AccountDirectory = Depends(get_orphanages),
):
    return await _do_login(orphanages, body)
