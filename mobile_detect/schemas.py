# mobile_detect/schemas.py

from pydantic import BaseModel

from mobile_detect.detector import DeviceType, MobileGrade


class CheckResponse(BaseModel):
    """Detection summary for the requesting client"""

    user_agent: str
    is_mobile: bool
    is_tablet: bool
    device: DeviceType
    grade: MobileGrade

    # Lookup of the requested rule / property name
    name: str = ""
    matches: bool = False
    version: str = ""
    version_float: float = 0.0


class DeviceResponse(BaseModel):
    device: str  # empty when the middleware is not installed
