# routers/health.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from database import check_connection

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
     if not check_connection():
          return JSONResponse(status_code=503, content={"status": "degraded", "database": "unreachable"})
     return {"status": "ok", "database": "ok"}
