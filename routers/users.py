# routers/users.py
"""
Team members of a landlord account (managers and caretakers).

New members inherit the landlord's owner_id, so they see the same
properties while their role limits what they can change.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_session
from dependencies import CurrentUser, LANDLORD_ONLY, LANDLORD_OR_MANAGER, require_roles
from models import User, UserRole
from schemas.auth import TeamMemberCreate, TeamMemberResponse
from schemas.common import CreatedResponse
from services.audit_service import log_audit, snapshot
from utils.security import hash_password

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[TeamMemberResponse])
def list_team(
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_OR_MANAGER)),
):
     return (
          db.query(User)
          .filter(User.owner_id == current.owner_id, User.deleted_at.is_(None))
          .order_by(User.created_at)
          .all()
     )


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_team_member(
     body: TeamMemberCreate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_ONLY)),
):
     if db.query(User.id).filter(User.email == body.email).first():
          raise HTTPException(status_code=400, detail="Email already exists")

     member = User(
          email=body.email,
          password=hash_password(body.password),
          full_name=body.full_name,
          role=UserRole(body.role),
          owner_id=current.owner_id,
     )
     try:
          db.add(member)
          db.flush()
          log_audit(db, current.id, "CREATE", "USER", member.id, None, snapshot(member))
          db.commit()
     except IntegrityError:
          db.rollback()
          raise HTTPException(status_code=400, detail="Email already exists")

     return {"id": member.id}
