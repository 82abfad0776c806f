from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from balancesheet.core.security import CurrentUser, get_current_user
from balancesheet.database import get_session
from balancesheet.repositories.records import GoalRepository
from balancesheet.schemas.goal import GoalCreate, GoalRead, GoalSyncItem
from balancesheet.utils.sync_helpers import sync_records

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("", response_model=List[GoalRead])
def list_goals(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return GoalRepository(session).list(current_user.id)


@router.get("/{goal_id}", response_model=GoalRead)
def get_goal(
    goal_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    goal = GoalRepository(session).get(goal_id, current_user.id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


@router.post("", response_model=GoalRead)
def create_goal(
    goal_data: GoalCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return GoalRepository(session).create(current_user.id, goal_data.model_dump())


@router.put("", response_model=List[GoalRead])
def sync_goals(
    goals: List[GoalSyncItem],
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return sync_records(GoalRepository(session), current_user.id, goals, "goals")


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_goal(
    goal_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if not GoalRepository(session).delete(goal_id, current_user.id):
        raise HTTPException(status_code=404, detail="Goal not found")
