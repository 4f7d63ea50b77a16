# server/api/health.py

from fastapi import APIRouter, status


router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check():
    """Liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "sns-server"}
