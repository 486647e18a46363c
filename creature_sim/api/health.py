"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Return application status and the number of registered creatures."""
    service = getattr(request.app.state, "social_service", None)
    if service is None:
        return {"status": "error", "creatures": "unavailable"}
    return {"status": "ok", "creatures": str(len(service.repository))}
