# routers/auth.py
"""
Authentication API.

POST /api/auth/register: create a landlord account (owner of itself)
POST /api/auth/login:    exchange credentials for a bearer token
GET  /api/auth/me:       profile of the token holder
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_session
from dependencies import CurrentUser, get_current_user
from models import User, UserRole, generate_id
from schemas.auth import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from schemas.common import MessageResponse
from services.audit_service import log_audit
from utils.logging_config import get_logger
from utils.security import create_access_token, hash_password, verify_password

logger = get_logger("auth")

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_user(body: RegisterRequest, db: Session = Depends(get_session)):
     if db.query(User.id).filter(User.email == body.email).first():
          raise HTTPException(status_code=400, detail="Email already exists")

     user_id = generate_id()
     user = User(
          id=user_id,
          email=body.email,
          password=hash_password(body.password),
          full_name=body.full_name,
          role=UserRole.LANDLORD,
          owner_id=user_id,
     )
     try:
          db.add(user)
          db.commit()
     except IntegrityError:
          db.rollback()
          raise HTTPException(status_code=400, detail="Email already exists")

     logger.info("Registered landlord %s", user_id)
     return {"message": "User registered"}


@router.post("/login", response_model=LoginResponse)
def login_user(body: LoginRequest, db: Session = Depends(get_session)):
     user = (
          db.query(User)
          .filter(User.email == body.email, User.deleted_at.is_(None))
          .first()
     )
     if not user or not verify_password(body.password, user.password):
          logger.warning("Failed login attempt")
          raise HTTPException(status_code=401, detail="Invalid credentials")

     token = create_access_token(user.id, user.role.value, user.owner_id or user.id)
     log_audit(db, user.id, "LOGIN", "USER", user.id)
     db.commit()

     return LoginResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
def read_me(current: CurrentUser = Depends(get_current_user), db: Session = Depends(get_session)):
     user = db.query(User).filter(User.id == current.id, User.deleted_at.is_(None)).first()
     if not user:
          raise HTTPException(status_code=404, detail="User not found")
     return user
