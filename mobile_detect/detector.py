# mobile_detect/detector.py

import logging
from enum import Enum
from typing import Dict, Mapping, Optional, Union

from mobile_detect.headers import check_http_headers_for_mobile
from mobile_detect.matcher import Matcher
from mobile_detect.properties import property_key, version_patterns
from mobile_detect.rules import DEFAULT_RULES, Rules

logger = logging.getLogger(__name__)


class MobileGrade(str, Enum):
    """Graded browser support, A being the most capable"""
    A = "A"
    B = "B"
    C = "C"


class DeviceType(str, Enum):
    TABLET = "Tablet"
    MOBILE = "Mobile"
    DESKTOP = "Desktop"


def normalize_version(version: str) -> float:
    """
    Turn a version string into a comparable float.

    "_" and "/" count as dots, and everything after the first dot is glued
    together: "6.0.0.448" -> 6.00448, "6_0_1" -> 6.01. Anything that does
    not parse gives 0.0.
    """
    version = version.replace("_", ".").replace("/", ".")
    first, dot, rest = version.partition(".")
    if dot:
        version = first + "." + rest.replace(".", "")
    try:
        return float(version)
    except ValueError:
        return 0.0


class MobileDetect:
    """
    Detects mobile and tablet clients from a User-Agent and request headers.

    One instance per request: it owns a pattern cache that is not safe to
    share between threads.
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        http_headers: Optional[Mapping[str, str]] = None,
        rules: Optional[Rules] = None,
    ):
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.http_headers: Dict[str, str] = dict(http_headers or {})
        if user_agent is None:
            user_agent = self.http_headers.get("HTTP_USER_AGENT", "")
        self.user_agent = user_agent
        self.matcher = Matcher()

    def __repr__(self) -> str:
        return f"MobileDetect(user_agent={self.user_agent!r})"

    # ==================== Setup ====================

    def set_user_agent(self, user_agent: str) -> "MobileDetect":
        self.user_agent = user_agent
        return self

    def set_http_headers(self, http_headers: Mapping[str, str]) -> "MobileDetect":
        self.http_headers = dict(http_headers)
        return self

    def precompile_rules(self) -> "MobileDetect":
        """Compile the whole combined table now instead of on first use"""
        count = self.matcher.precompile(self.rules.mobile_detection_rules().values())
        logger.debug(f"Precompiled {count} rule patterns")
        return self

    def match(self, pattern: str) -> bool:
        """Match an arbitrary pattern against the User-Agent"""
        return self.matcher.match(pattern, self.user_agent)

    # ==================== Classification ====================

    def check_http_headers_for_mobile(self) -> bool:
        return check_http_headers_for_mobile(self.http_headers)

    def is_mobile(self) -> bool:
        """Mobile headers present, or any phone, OS or browser rule matches"""
        if self.check_http_headers_for_mobile():
            return True

        for pattern in self.rules.mobile_detection_rules().values():
            if pattern and self.match(pattern):
                return True
        return False

    def is_tablet(self) -> bool:
        for pattern in self.rules.tablet_devices.values():
            if pattern and self.match(pattern):
                return True
        return False

    def is_named(self, name: str) -> bool:
        """Check one rule of the combined table by name (case-insensitive)"""
        pattern = self.rules.rule_for_name(name)
        if not pattern:
            return False
        return self.match(pattern)

    def is_keyed(self, key: int) -> bool:
        pattern = self.rules.rule_for_key(key)
        if not pattern:
            return False
        return self.match(pattern)

    def is_(self, name_or_key: Union[str, int]) -> bool:
        # bool is an int subclass but never a rule key
        if isinstance(name_or_key, bool):
            return False
        if isinstance(name_or_key, str):
            return self.is_named(name_or_key)
        if isinstance(name_or_key, int):
            return self.is_keyed(name_or_key)
        return False

    def device_type(self) -> DeviceType:
        if self.is_tablet():
            return DeviceType.TABLET
        if self.is_mobile():
            return DeviceType.MOBILE
        return DeviceType.DESKTOP

    # ==================== Versions ====================

    def version_keyed(self, key: int) -> str:
        """First capture of the first matching template, or an empty string"""
        for pattern in version_patterns(key):
            found = self.matcher.search(pattern, self.user_agent)
            if found is not None:
                return found.group(1)
        return ""

    def version_named(self, name: str) -> str:
        if not name:
            return ""
        key = property_key(name)
        if key is None:
            return ""
        return self.version_keyed(key)

    def version(self, name_or_key: Union[str, int]) -> str:
        if isinstance(name_or_key, bool):
            return ""
        if isinstance(name_or_key, str):
            return self.version_named(name_or_key)
        if isinstance(name_or_key, int):
            return self.version_keyed(name_or_key)
        return ""

    def version_float_named(self, name: str) -> float:
        return normalize_version(self.version_named(name))

    def version_float_keyed(self, key: int) -> float:
        return normalize_version(self.version_keyed(key))

    def version_float(self, name_or_key: Union[str, int]) -> float:
        return normalize_version(self.version(name_or_key))

    # ==================== Mobile grade ====================

    def mobile_grade(self) -> MobileGrade:
        is_mobile = self.is_mobile()

        if self._is_mobile_grade_a(is_mobile):
            return MobileGrade.A
        if self._is_mobile_grade_b():
            return MobileGrade.B
        return MobileGrade.C

    def _is_mobile_grade_a(self, is_mobile: bool) -> bool:
        vf = self.version_float_named
        return (
            vf("iPad") >= 4.3
            or vf("iPhone") >= 3.1
            or vf("iPod") >= 3.1
            or (vf("Android") > 2.1 and self.is_named("Webkit"))
            or vf("Windows Phone OS") >= 7.0
            or (self.is_named("BlackBerry") and vf("BlackBerry") >= 6.0)
            or self.match("Playbook.*Tablet")
            or (vf("webOS") >= 1.4 and self.match("Palm|Pre|Pixi"))
            or self.match("hp.*TouchPad")
            or (self.is_named("Firefox") and vf("Firefox") >= 12)
            or (self.is_named("Chrome") and self.is_named("AndroidOS") and vf("Android") >= 4.0)
            or (
                self.is_named("Skyfire")
                and vf("Skyfire") >= 4.1
                and self.is_named("AndroidOS")
                and vf("Android") >= 2.3
            )
            or (self.is_named("Opera") and vf("Opera Mobi") > 11 and self.is_named("AndroidOS"))
            or self.is_named("MeeGoOS")
            or self.is_named("Tizen")
            or (self.is_named("Dolfin") and vf("Bada") >= 2.0)
            or ((self.is_named("UC Browser") or self.is_named("Dolfin")) and vf("Android") >= 2.3)
            or self.match("Kindle Fire")
            or (self.is_named("Kindle") and vf("Kindle") >= 3.0)
            or (self.is_named("AndroidOS") and self.is_named("NookTablet"))
            or (vf("Chrome") >= 11 and is_mobile)
            or (vf("Safari") >= 5.0 and is_mobile)
            or (vf("Firefox") >= 4.0 and is_mobile)
            or (vf("MSIE") >= 7.0 and is_mobile)
            or (vf("Opera") >= 10 and is_mobile)
        )

    def _is_mobile_grade_b(self) -> bool:
        vf = self.version_float_named
        return (
            (self.is_named("Blackberry") and 5 <= vf("BlackBerry") < 6)
            or (5.0 <= vf("Opera Mini") <= 6.5 and (vf("Android") >= 2.3 or self.is_named("iOS")))
            or self.match("NokiaN8|NokiaC7|N97.*Series60|Symbian/3")
            or (vf("Opera Mobi") >= 11 and self.is_named("SymbianOS"))
        )
