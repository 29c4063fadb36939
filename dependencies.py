# dependencies.py
"""
Request guards shared by the routers.

get_current_user: bearer token -> CurrentUser (401 missing, 403 invalid)
require_roles:    role allow-list on top of get_current_user (403)
"""
from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError

from models.user import UserRole
from utils.logging_config import get_logger
from utils.security import decode_access_token

logger = get_logger("auth")


@dataclass(frozen=True)
class CurrentUser:
     """Identity carried by the access token."""
     id: str
     role: str
     owner_id: str


def get_current_user(request: Request) -> CurrentUser:
     auth = request.headers.get("Authorization")
     token = None
     if auth:
          parts = auth.split(" ")
          if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
               token = parts[1]
     if not token:
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No token provided")

     try:
          payload = decode_access_token(token)
     except JWTError as e:
          logger.warning("JWT verify error on %s: %s", request.url.path, e)
          raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")

     user_id, role, owner_id = payload.get("id"), payload.get("role"), payload.get("owner_id")
     if not user_id or not owner_id or role not in {r.value for r in UserRole}:
          logger.warning("Token with incomplete claims on %s", request.url.path)
          raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")

     return CurrentUser(id=user_id, role=role, owner_id=owner_id)


def require_roles(*roles: UserRole) -> Callable[..., CurrentUser]:
     """
     Dependency factory gating an endpoint to the given roles.

     Usage:
          @router.post("", dependencies=...)
          def create(user: CurrentUser = Depends(require_roles(UserRole.LANDLORD))):
               ...
     """
     allowed = {r.value for r in roles}

     def checker(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
          if user.role not in allowed:
               logger.warning("Access denied: user=%s role=%s needs one of %s", user.id, user.role, sorted(allowed))
               raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
          return user

     return checker


# Common allow-lists
LANDLORD_ONLY = (UserRole.LANDLORD,)
LANDLORD_OR_MANAGER = (UserRole.LANDLORD, UserRole.MANAGER)
