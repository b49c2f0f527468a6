"""Tests for version extraction and float normalisation."""

import pytest

from mobile_detect import MobileDetect, Property, normalize_version

from tests.conftest import ARCHOS_UA, BLACKBERRY_UA, IPAD_CHROME_UA, IPHONE_UA, OPERA_MINI_UA


# =============================================================================
# VERSION EXTRACTION
# =============================================================================

VERSION_DATA = [
    (ARCHOS_UA, "Android", "4.0.4", 4.04),
    (ARCHOS_UA, "Webkit", "535.19", 535.19),
    (ARCHOS_UA, "Chrome", "18.0.1025.166", 18.01025166),
    (BLACKBERRY_UA, "BlackBerry", "6.0.0.448", 6.00448),
    (BLACKBERRY_UA, "Webkit", "534.8", 534.8),
    (BLACKBERRY_UA, "Unknown property", "", 0.0),
    (BLACKBERRY_UA, Property.ANDROID, "", 0.0),
    (BLACKBERRY_UA, object(), "", 0.0),
    (IPHONE_UA, "iOS", "6_0_1", 6.01),
    (IPHONE_UA, "iPhone", "6_0_1", 6.01),
    (IPHONE_UA, "Safari", "6.0", 6.0),
    (IPHONE_UA, "Mobile", "10A523", 0.0),
    (IPAD_CHROME_UA, "Chrome", "21.0.1180.80", 21.0118080),
    (IPAD_CHROME_UA, Property.IPAD, "5_1_1", 5.11),
    (OPERA_MINI_UA, "Opera Mini", "7.0.29990", 7.029990),
    (OPERA_MINI_UA, "Presto", "2.8.119", 2.8119),
]


class TestVersionExtraction:

    @pytest.mark.parametrize("user_agent,prop,version,version_float", VERSION_DATA)
    def test_version(self, user_agent, prop, version, version_float):
        detect = MobileDetect(user_agent=user_agent)

        assert detect.version(prop) == version
        assert detect.version_float(prop) == version_float

    def test_named_and_keyed_agree(self):
        detect = MobileDetect(user_agent=ARCHOS_UA)

        assert detect.version_named("android") == detect.version_keyed(Property.ANDROID) == "4.0.4"
        assert detect.version_float_named("ANDROID") == detect.version_float_keyed(Property.ANDROID) == 4.04

    def test_templates_tried_in_order(self):
        # Chrome/ is tried before CriOS/
        detect = MobileDetect(user_agent="Chrome/30.0 CriOS/21.0")
        assert detect.version("Chrome") == "30.0"

    def test_later_template_used_when_first_misses(self):
        detect = MobileDetect(user_agent="Mozilla/5.0 (BB10; Touch) Version/10.0.9.2372 Mobile Safari/537.10+")
        assert detect.version("BlackBerry") == "10.0.9.2372"

    def test_property_name_not_rule_name(self):
        # MSIE is neither a property nor a rule
        detect = MobileDetect(user_agent="Mozilla/4.0 (compatible; MSIE 7.0; Windows NT 6.0)")

        assert detect.version("MSIE") == ""
        assert detect.version("IE") == "7.0"

    def test_version_stops_at_non_ascii(self):
        detect = MobileDetect(user_agent="Mozilla/5.0 (Linux; Android 4.0é; X)")

        assert detect.version("Android") == "4.0"
        assert detect.version_float("Android") == 4.0

    def test_non_ascii_digits_are_not_versions(self):
        detect = MobileDetect(user_agent="Mozilla/5.0 (Linux; Android ٤.٠; X)")

        assert detect.version("Android") == ""
        assert detect.version_float("Android") == 0.0

    def test_empty_name(self):
        assert MobileDetect(user_agent=IPHONE_UA).version("") == ""

    def test_unknown_keys(self):
        detect = MobileDetect(user_agent=IPHONE_UA)

        assert detect.version(9999) == ""
        assert detect.version(-1) == ""
        assert detect.version(True) == ""
        assert detect.version_float(None) == 0.0

    def test_versions_share_detector_cache(self):
        detect = MobileDetect(user_agent=ARCHOS_UA)
        detect.version("Android")
        size = len(detect.matcher)

        detect.version("Android")
        assert len(detect.matcher) == size == 1


# =============================================================================
# NORMALISATION
# =============================================================================

class TestNormalizeVersion:

    @pytest.mark.parametrize("version,expected", [
        ("6.0.0.448", 6.00448),
        ("6_0_1", 6.01),
        ("4.0.4", 4.04),
        ("7", 7.0),
        ("5.1", 5.1),
        ("1/2/3", 1.23),
        ("", 0.0),
        ("10A523", 0.0),
        ("528.5+", 0.0),
    ])
    def test_normalize(self, version, expected):
        assert normalize_version(version) == expected
