# mobile_detect/headers.py

from typing import Dict, Mapping

# Logical request headers captured into a detector's snapshot, CGI style
SNAPSHOT_KEYS: tuple[str, ...] = (
    "SERVER_SOFTWARE",
    "REQUEST_METHOD",
    "HTTP_HOST",
    "HTTP_X_REAL_IP",
    "HTTP_X_FORWARDED_FOR",
    "HTTP_CONNECTION",
    "HTTP_USER_AGENT",
    "HTTP_ACCEPT",
    "HTTP_ACCEPT_LANGUAGE",
    "HTTP_ACCEPT_ENCODING",
    "HTTP_X_REQUESTED_WITH",
    "HTTP_REFERER",
    "HTTP_PRAGMA",
    "HTTP_CACHE_CONTROL",
    "REMOTE_ADDR",
    "REQUEST_TIME",
)

# Headers that indicate a mobile client, in scan order
MOBILE_HEADERS: tuple[str, ...] = (
    "HTTP_ACCEPT",
    "HTTP_X_WAP_PROFILE",
    "HTTP_X_WAP_CLIENTID",
    "HTTP_WAP_CONNECTION",
    "HTTP_PROFILE",
    # Opera on Nokia devices (eg. C3)
    "HTTP_X_OPERAMINI_PHONE_UA",
    "HTTP_X_NOKIA_GATEWAY_ID",
    "HTTP_X_ORANGE_ID",
    "HTTP_X_VODAFONE_3GPDPCONTEXT",
    "HTTP_X_HUAWEI_USERID",
    # Windows smartphones
    "HTTP_UA_OS",
    # Verizon, Vodafone proxies
    "HTTP_X_MOBILE_GATEWAY",
    # HTC Sensation
    "HTTP_X_ATT_DEVICEID",
    "HTTP_UA_CPU",
)

# Headers only count as mobile when their value contains one of these
MOBILE_HEADER_MATCHES: Dict[str, tuple[str, ...]] = {
    "HTTP_ACCEPT": (
        # Opera Mini binary markup
        "application/x-obml2d",
        # BlackBerry
        "application/vnd.rim.html",
        "text/vnd.wap.wml",
        "application/vnd.wap.xhtml+xml",
    ),
    "HTTP_UA_CPU": ("ARM",),
}


def empty_snapshot() -> Dict[str, str]:
    return {key: "" for key in SNAPSHOT_KEYS}


def check_http_headers_for_mobile(headers: Mapping[str, str]) -> bool:
    """
    Decide from request headers alone whether the client is mobile.

    Only the first mobile header present in the mapping is consulted: if it
    has required substrings the answer is whether its value contains one of
    them, otherwise its mere presence means mobile. Later headers are never
    looked at, so an HTTP_ACCEPT without a WAP type hides an HTTP_UA_CPU of
    ARM.
    """
    for header in MOBILE_HEADERS:
        if header not in headers:
            continue

        value = headers[header]
        required = MOBILE_HEADER_MATCHES.get(header)
        if required is None:
            return True
        return any(match in value for match in required)

    return False
