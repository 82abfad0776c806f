from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from balancesheet.core.security import CurrentUser, get_current_user
from balancesheet.database import get_session
from balancesheet.repositories.records import AssetRepository
from balancesheet.schemas.asset import AssetCreate, AssetRead, AssetSyncItem
from balancesheet.utils.sync_helpers import sync_records

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("", response_model=List[AssetRead])
def list_assets(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return AssetRepository(session).list(current_user.id)


@router.get("/{asset_id}", response_model=AssetRead)
def get_asset(
    asset_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    asset = AssetRepository(session).get(asset_id, current_user.id)
    if not asset:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset


@router.post("", response_model=AssetRead)
def create_asset(
    asset_data: AssetCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return AssetRepository(session).create(current_user.id, asset_data.model_dump())


@router.put("", response_model=List[AssetRead])
def sync_assets(
    assets: List[AssetSyncItem],
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return sync_records(AssetRepository(session), current_user.id, assets, "assets")


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_asset(
    asset_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if not AssetRepository(session).delete(asset_id, current_user.id):
        raise HTTPException(status_code=404, detail="Asset not found")
