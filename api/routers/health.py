"""Health check: database connectivity and service version."""
from fastapi import APIRouter

from config import API_VERSION
from db.database import check_db

router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "ok", "db": check_db(), "version": API_VERSION}
