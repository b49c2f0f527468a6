# mobile_detect/integration.py

import logging
from typing import Dict, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from mobile_detect.config import settings
from mobile_detect.detector import MobileDetect
from mobile_detect.headers import empty_snapshot
from mobile_detect.rules import Rules

logger = logging.getLogger(__name__)

# Snapshot key -> request header it is read from
SNAPSHOT_HEADERS: Dict[str, str] = {
    "SERVER_SOFTWARE": "server-software",
    "HTTP_HOST": "host",
    "HTTP_X_REAL_IP": "x-real-ip",
    "HTTP_X_FORWARDED_FOR": "x-forwarded-for",
    "HTTP_CONNECTION": "connection",
    "HTTP_USER_AGENT": "user-agent",
    "HTTP_ACCEPT": "accept",
    "HTTP_ACCEPT_LANGUAGE": "accept-language",
    "HTTP_ACCEPT_ENCODING": "accept-encoding",
    "HTTP_X_REQUESTED_WITH": "x-requested-with",
    "HTTP_REFERER": "referer",
    "HTTP_PRAGMA": "pragma",
    "HTTP_CACHE_CONTROL": "cache-control",
    "REQUEST_TIME": "request-time",
}


def header_snapshot(request: Request) -> Dict[str, str]:
    """Capture the detection headers of a request; missing ones are empty strings"""
    snapshot = empty_snapshot()
    for key, header in SNAPSHOT_HEADERS.items():
        snapshot[key] = request.headers.get(header, "")
    snapshot["REQUEST_METHOD"] = request.method
    snapshot["REMOTE_ADDR"] = request.client.host if request.client else ""
    return snapshot


def detector_from_request(request: Request, rules: Optional[Rules] = None) -> MobileDetect:
    detector = MobileDetect(http_headers=header_snapshot(request), rules=rules)
    if settings.precompile_rules:
        detector.precompile_rules()
    return detector


def get_detector(request: Request) -> MobileDetect:
    """
    FastAPI dependency returning the detector for the current request.

    Reuses the one built by DeviceDetectMiddleware when it ran, otherwise
    builds a fresh one. Detectors are never shared between requests.
    """
    detector = getattr(request.state, "mobile_detect", None)
    if detector is None:
        detector = detector_from_request(request)
    return detector


def request_device(request: Request) -> str:
    """Device type stored by DeviceDetectMiddleware, or "" when it did not run"""
    return getattr(request.state, "device", "")


class DeviceDetectMiddleware(BaseHTTPMiddleware):
    """
    Classify every request as Tablet, Mobile or Desktop.

    Stores the detector and the device type on request.state and echoes the
    device type in a response header.
    """

    def __init__(self, app: ASGIApp, rules: Optional[Rules] = None, header_name: Optional[str] = None):
        super().__init__(app)
        self.rules = rules
        self.header_name = header_name or settings.device_header

    async def dispatch(self, request: Request, call_next):
        detector = detector_from_request(request, self.rules)
        device = detector.device_type().value

        request.state.mobile_detect = detector
        request.state.device = device
        logger.debug(f"{request.method} {request.url.path} classified as {device}")

        response = await call_next(request)
        response.headers[self.header_name] = device
        return response
