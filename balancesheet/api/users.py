from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from balancesheet.core.security import CurrentUser, get_current_user
from balancesheet.database import get_session
from balancesheet.repositories.users import UserRepository
from balancesheet.schemas.user import UserRead

router = APIRouter(prefix="/users", tags=["users"])


# Ruta protegida
@router.get("/me", response_model=UserRead)
def read_users_me(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    user = UserRepository(session).get(current_user.id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
