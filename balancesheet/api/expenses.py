from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from balancesheet.core.security import CurrentUser, get_current_user
from balancesheet.database import get_session
from balancesheet.repositories.records import ExpenseRepository
from balancesheet.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseSyncItem
from balancesheet.utils.sync_helpers import sync_records

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseRead])
def list_expenses(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return ExpenseRepository(session).list(current_user.id)


@router.get("/{expense_id}", response_model=ExpenseRead)
def get_expense(
    expense_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    expense = ExpenseRepository(session).get(expense_id, current_user.id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense


@router.post("", response_model=ExpenseRead)
def create_expense(
    expense_data: ExpenseCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return ExpenseRepository(session).create(current_user.id, expense_data.model_dump())


@router.put("", response_model=List[ExpenseRead])
def sync_expenses(
    expenses: List[ExpenseSyncItem],
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return sync_records(ExpenseRepository(session), current_user.id, expenses, "expenses")


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(
    expense_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if not ExpenseRepository(session).delete(expense_id, current_user.id):
        raise HTTPException(status_code=404, detail="Expense not found")
