"""
HTTP API Routes - service-level endpoints.
"""

from fastapi import APIRouter

from gamehub.schemas import MessageResponse

router = APIRouter(prefix="/api")


@router.get("/", response_model=MessageResponse)
async def read_root():
    """API health check endpoint."""
    return MessageResponse(message="GameHub API is running!")
