from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from balancesheet.core.security import CurrentUser, get_current_user
from balancesheet.database import get_session
from balancesheet.repositories.records import LiabilityRepository
from balancesheet.schemas.liability import LiabilityCreate, LiabilityRead, LiabilitySyncItem
from balancesheet.utils.sync_helpers import sync_records

router = APIRouter(prefix="/liabilities", tags=["liabilities"])


@router.get("", response_model=List[LiabilityRead])
def list_liabilities(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return LiabilityRepository(session).list(current_user.id)


@router.get("/{liability_id}", response_model=LiabilityRead)
def get_liability(
    liability_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    liability = LiabilityRepository(session).get(liability_id, current_user.id)
    if not liability:
        raise HTTPException(status_code=404, detail="Liability not found")
    return liability


@router.post("", response_model=LiabilityRead)
def create_liability(
    liability_data: LiabilityCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return LiabilityRepository(session).create(current_user.id, liability_data.model_dump())


@router.put("", response_model=List[LiabilityRead])
def sync_liabilities(
    liabilities: List[LiabilitySyncItem],
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return sync_records(LiabilityRepository(session), current_user.id, liabilities, "liabilities")


@router.delete("/{liability_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_liability(
    liability_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if not LiabilityRepository(session).delete(liability_id, current_user.id):
        raise HTTPException(status_code=404, detail="Liability not found")
