from fastapi import APIRouter

router = APIRouter()

SERVICE_NAME = "cv-ats-api"


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME}
