import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.db import get_db
from storefront.schemas import LoginIn, LoginOut, MessageOut, RegisterIn, SessionUser
from storefront.services import tokens
from storefront.services import users as users_service

router = APIRouter(prefix="/api/auth", tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/register", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def register_user(payload: RegisterIn, db: Session = Depends(get_db)):
    users_service.create_user(db, payload.username, payload.password, is_admin=False)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginOut)
def login_user(payload: LoginIn, db: Session = Depends(get_db)):
    user = users_service.authenticate(db, payload.username, payload.password)
    token = tokens.issue_token(user.id)
    logger.info("User id=%s logged in", user.id)
    return LoginOut(
        token=token,
        user=SessionUser(username=user.username, is_admin=user.is_admin),
    )
