# orphanage_care/routers/orphanages.py
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from orphanage_care.core.errors import DirectoryError
from orphanage_care.deps import get_profiles
from orphanage_care.repos.profiles import ProfileDirectory
from orphanage_care.repos.store import serialize
from orphanage_care.schemas import MessageOut, PortCheckOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orphanages"])

StoreErrors = (DirectoryError, PyMongoError)

@router.post("/add-orphanage", status_code=status.HTTP_201_CREATED, response_model=MessageOut)
async def add_orphanage(
    body: Dict[str, Any] = Body(...),
    profiles: ProfileDirectory = Depends(get_profiles),
):
    try:
        await profiles.add_profile(body)
    except StoreErrors as exc:
        logger.exception("adding orphanage details failed")
        raise HTTPException(status_code=500, detail=f"Error adding orphanage details: {exc}")
    return {"message": "Orphanage details added successfully!"}

@router.get("/check-port-number/{port_number}", response_model=PortCheckOut)
async def check_port_number(port_number: str, profiles: ProfileDirectory = Depends(get_profiles)):
    try:
        unique = await profiles.is_port_number_unique(port_number)
    except StoreErrors as exc:
        logger.exception("port number check failed")
        raise HTTPException(status_code=500, detail=f"Error checking port number: {exc}")
    return {"isUnique": unique}

@router.get("/get-orphanages")
async def get_orphanages(profiles: ProfileDirectory = Depends(get_profiles)) -> List[Dict[str, Any]]:
    try:
        summaries = await profiles.list_summaries()
    except StoreErrors as exc:
        logger.exception("listing orphanages failed")
        raise HTTPException(status_code=500, detail=f"Failed to fetch orphanages: {exc}")
    return [serialize(s) for s in summaries]

@router.get("/orphanage-details/{orphanage_id}")
async def orphanage_details(orphanage_id: str, profiles: ProfileDirectory = Depends(get_profiles)):
    try:
        doc = await profiles.get_by_id(orphanage_id)
    except StoreErrors as exc:
        logger.exception("fetching orphanage %s failed", orphanage_id)
        raise HTTPException(status_code=500, detail=f"Error fetching orphanage details: {exc}")
    if not doc:
        raise HTTPException(status_code=404, detail="Orphanage not found")
    return serialize(doc)

@router.get("/get-orphanage-by-port/{port_number}")
async def get_orphanage_by_port(port_number: str, profiles: ProfileDirectory = Depends(get_profiles)):
    try:
        doc = await profiles.get_by_port_number(port_number)
    except StoreErrors as exc:
        logger.exception("fetching orphanage on port %s failed", port_number)
        raise HTTPException(status_code=500, detail=f"Server Error: {exc}")
    if not doc:
        raise HTTPException(status_code=404, detail="Orphanage not found")
    return serialize(doc)

@router.post("/update-orphanage/{port_number}", response_model=MessageOut)
async def update_orphanage(
    port_number: str,
    body: Dict[str, Any] = Body(...),
    profiles: ProfileDirectory = Depends(get_profiles),
):
    try:
        doc = await profiles.update_by_port_number(port_number, body)
    except StoreErrors as exc:
        logger.exception("updating orphanage on port %s failed", port_number)
        raise HTTPException(status_code=500, detail=f"Failed to update orphanage: {exc}")
    if not doc:
        raise HTTPException(status_code=404, detail="Orphanage not found")
    return {"message": "Orphanage updated successfully"}
