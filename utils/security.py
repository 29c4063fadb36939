# utils/security.py
"""Password hashing and JWT helpers."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt
from passlib.context import CryptContext

import config

# Bcrypt
pwd_context = CryptContext(
     schemes=["bcrypt"],
     deprecated="auto",
     bcrypt__rounds=config.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     try:
          return pwd_context.verify(password, hashed)
     except ValueError:
          # Malformed stored hash
          return False


def create_access_token(user_id: str, role: str, owner_id: str, expires_delta: Optional[timedelta] = None) -> str:
     """Signed HS256 token carrying id, role and owner_id."""
     expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=config.ACCESS_TOKEN_HOURS))
     payload = {"id": user_id, "role": role, "owner_id": owner_id, "exp": expire}
     return jwt.encode(payload, config.JWT_SECRET, algorithm=config.ALGORITHM)


def decode_access_token(token: str) -> dict:
     """Verified claims; raises jose.JWTError on bad signature or expiry."""
     return jwt.decode(token, config.JWT_SECRET, algorithms=[config.ALGORITHM])
