from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from balancesheet.core.security import CurrentUser, get_current_user
from balancesheet.database import get_session
from balancesheet.repositories.records import IncomeRepository
from balancesheet.schemas.income import IncomeCreate, IncomeRead, IncomeSyncItem
from balancesheet.utils.sync_helpers import sync_records

router = APIRouter(prefix="/incomes", tags=["incomes"])


@router.get("", response_model=List[IncomeRead])
def list_incomes(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return IncomeRepository(session).list(current_user.id)


@router.get("/{income_id}", response_model=IncomeRead)
def get_income(
    income_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    income = IncomeRepository(session).get(income_id, current_user.id)
    if not income:
        raise HTTPException(status_code=404, detail="Income not found")
    return income


@router.post("", response_model=IncomeRead)
def create_income(
    income_data: IncomeCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return IncomeRepository(session).create(current_user.id, income_data.model_dump())


@router.put("", response_model=List[IncomeRead])
def sync_incomes(
    incomes: List[IncomeSyncItem],
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return sync_records(IncomeRepository(session), current_user.id, incomes, "incomes")


@router.delete("/{income_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_income(
    income_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if not IncomeRepository(session).delete(income_id, current_user.id):
        raise HTTPException(status_code=404, detail="Income not found")
