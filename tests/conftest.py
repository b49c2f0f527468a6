"""
Shared test configuration for mobile_detect.

User-Agent constants used across the detector, version and HTTP tests.
"""

import pytest

from mobile_detect import MobileDetect

# =============================================================================
# USER AGENTS
# =============================================================================

IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 6_0_1 like Mac OS X) AppleWebKit/536.26 "
    "(KHTML, like Gecko) Version/6.0 Mobile/10A523 Safari/8536.25"
)
IPOD_UA = (
    "Mozilla/5.0 (iPod touch; CPU iPhone OS 7_0 like Mac OS X) AppleWebKit/537.51.1 "
    "(KHTML, like Gecko) Version/7.0 Mobile/11A4449d Safari/9537.53"
)
IPAD_CHROME_UA = (
    "Mozilla/5.0 (iPad; CPU OS 5_1_1 like Mac OS X; en-us) AppleWebKit/534.46.0 "
    "(KHTML, like Gecko) CriOS/21.0.1180.80 Mobile/9B206 Safari/7534.48.3 "
    "(6FF046A0-1BC4-4E7D-8A9D-6BF17622A123)"
)
ARCHOS_UA = (
    "Mozilla/5.0 (Linux; Android 4.0.4; ARCHOS 80G9 Build/IMM76D) AppleWebKit/535.19 "
    "(KHTML, like Gecko) Chrome/18.0.1025.166  Safari/535.19"
)
BLACKBERRY_UA = (
    "Mozilla/5.0 (BlackBerry; U; BlackBerry 9700; en-US) AppleWebKit/534.8  "
    "(KHTML, like Gecko) Version/6.0.0.448 Mobile Safari/534.8"
)
BLACKBERRY_8520_UA = "BlackBerry8520/5.0.0.1036 Profile/MIDP-2.1 Configuration/CLDC-1.1 VendorID/611"
NOKIA_UA = "Nokia6300/2.0 (05.00) Profile/MIDP-2.0 Configuration/CLDC-1.1"
WINDOWS_PHONE_UA = (
    "Mozilla/5.0 (compatible; MSIE 9.0; Windows Phone OS 7.5; Trident/5.0; IEMobile/9.0; Acer; Allegro)"
)
HP_TOUCHPAD_UA = (
    "Mozilla/5.0 (hp-tablet; Linux; hpwOS/3.0.5; U; en-GB) AppleWebKit/534.6 "
    "(KHTML, like Gecko) wOSBrowser/234.83 Safari/534.6 TouchPad/1.0"
)
KINDLE_UA = (
    "Mozilla/5.0 (Linux; U; en-US) AppleWebKit/528.5+ (KHTML, like Gecko, Safari/528.5+) "
    "Version/4.0 Kindle/3.0 (screen 600x800; rotate)"
)
OPERA_MINI_UA = "Opera/9.80 (BlackBerry; Opera Mini/7.0.29990/28.2504; U; en) Presto/2.8.119 Version/11.10"
DESKTOP_CHROME_UA = (
    "Mozilla/5.0 (Windows NT 6.2; WOW64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/30.0.1599.101 Safari/537.36"
)
DESKTOP_FIREFOX_UA = "Mozilla/5.0 (Windows NT 6.1; WOW64; rv:25.0) Gecko/20100101 Firefox/25.0"
DESKTOP_SAFARI_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_9) AppleWebKit/537.71 (KHTML, like Gecko) "
    "Version/7.0 Safari/537.71"
)


def make_snapshot(user_agent: str, accept: str = "application/json, text/javascript, */*; q=0.01") -> dict:
    """Full 16-key header snapshot as a web server would capture it"""
    return {
        "SERVER_SOFTWARE": "Apache/2.2.15 (Linux) Whatever/4.0 PHP/5.2.13",
        "REQUEST_METHOD": "POST",
        "HTTP_HOST": "home.ghita.org",
        "HTTP_X_REAL_IP": "1.2.3.4",
        "HTTP_X_FORWARDED_FOR": "1.2.3.5",
        "HTTP_CONNECTION": "close",
        "HTTP_USER_AGENT": user_agent,
        "HTTP_ACCEPT": accept,
        "HTTP_ACCEPT_LANGUAGE": "en-us,en;q=0.5",
        "HTTP_ACCEPT_ENCODING": "gzip, deflate",
        "HTTP_X_REQUESTED_WITH": "XMLHttpRequest",
        "HTTP_REFERER": "http://mobiledetect.net",
        "HTTP_PRAGMA": "no-cache",
        "HTTP_CACHE_CONTROL": "no-cache",
        "REMOTE_ADDR": "11.22.33.44",
        "REQUEST_TIME": "01-10-2012 07:57",
    }


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def detector():
    """Detector with no User-Agent and no headers."""
    return MobileDetect()
