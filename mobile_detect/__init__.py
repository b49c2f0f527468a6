# mobile_detect/__init__.py

from mobile_detect.detector import DeviceType, MobileDetect, MobileGrade, normalize_version
from mobile_detect.headers import MOBILE_HEADERS, SNAPSHOT_KEYS, check_http_headers_for_mobile
from mobile_detect.matcher import InvalidRuleError, Matcher
from mobile_detect.properties import PROPERTIES, Property
from mobile_detect.rules import DEFAULT_RULES, RuleKey, Rules

__all__ = [
    "DEFAULT_RULES",
    "DeviceType",
    "InvalidRuleError",
    "MOBILE_HEADERS",
    "Matcher",
    "MobileDetect",
    "MobileGrade",
    "PROPERTIES",
    "Property",
    "RuleKey",
    "Rules",
    "SNAPSHOT_KEYS",
    "check_http_headers_for_mobile",
    "normalize_version",
]
