from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from storefront.db import get_db
from storefront.deps import get_current_user, require_admin
from storefront.models.user import User
from storefront.schemas import AdminFlagIn, MessageOut, UserCreateIn, UserOut, UserUpdateIn
from storefront.services import users as users_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=UserOut)
def read_me(user: User = Depends(get_current_user)):
    return user


@router.get("", response_model=list[UserOut])
def user_list(
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    return users_service.list_users(db, limit=limit, offset=offset)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def user_create(
    payload: UserCreateIn,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    return users_service.create_user(db, payload.username, payload.password, is_admin=payload.is_admin)


@router.get("/{user_id}", response_model=UserOut)
def user_detail(
    user_id: int,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    return users_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserOut)
@router.patch("/{user_id}", response_model=UserOut)
def user_update(
    user_id: int,
    payload: UserUpdateIn,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    return users_service.update_user(db, user_id, payload.model_dump(exclude_unset=True))


@router.put("/{user_id}/admin", response_model=UserOut)
@router.put("/update-user-admin/{user_id}", response_model=UserOut, include_in_schema=False)
def user_set_admin(
    user_id: int,
    payload: AdminFlagIn,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return users_service.set_admin(db, user_id, payload.is_admin, acting_user=admin)


@router.delete("/{user_id}", response_model=MessageOut)
def user_delete(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    users_service.delete_user(db, user_id, acting_user=admin)
    return {"message": "User deleted"}
