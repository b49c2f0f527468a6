# mobile_detect/routes.py

from fastapi import APIRouter, Depends, Query, Request

from mobile_detect.config import settings
from mobile_detect.detector import MobileDetect
from mobile_detect.integration import get_detector, request_device
from mobile_detect.schemas import CheckResponse, DeviceResponse

router = APIRouter()


@router.get("/check", response_model=CheckResponse)
async def check(
    name: str = Query("", alias=settings.check_param),
    detector: MobileDetect = Depends(get_detector),
) -> CheckResponse:
    """
    Classify the calling client.
    The optional query parameter names a rule / property to test and extract a version for.
    """
    response = CheckResponse(
        user_agent=detector.user_agent,
        is_mobile=detector.is_mobile(),
        is_tablet=detector.is_tablet(),
        device=detector.device_type(),
        grade=detector.mobile_grade(),
    )
    if name:
        response.name = name
        response.matches = detector.is_named(name)
        response.version = detector.version_named(name)
        response.version_float = detector.version_float_named(name)
    return response


@router.get("/device", response_model=DeviceResponse)
async def device(request: Request) -> DeviceResponse:
    """Device type assigned by the middleware"""
    return DeviceResponse(device=request_device(request))


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}
