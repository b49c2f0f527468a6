# mobile_detect/properties.py

from enum import IntEnum
from types import MappingProxyType
from typing import Optional, Tuple

# Placeholder in property templates, replaced by VERSION_PATTERN
VERSION_PLACEHOLDER = "[VER]"
VERSION_PATTERN = r"([\w._\+]+)"


class Property(IntEnum):
    MOBILE = 0
    BUILD = 1
    VERSION = 2
    VENDORID = 3
    IPAD = 4
    IPHONE = 5
    IPOD = 6
    KINDLE = 7
    CHROME = 8
    COAST = 9
    DOLFIN = 10
    FIREFOX = 11
    FENNEC = 12
    IE = 13
    NETFRONT = 14
    NOKIABROWSER = 15
    OPERA = 16
    OPERA_MINI = 17
    OPERA_MOBI = 18
    UC_BROWSER = 19
    MQQBROWSER = 20
    MICROMESSENGER = 21
    BAIDUBOXAPP = 22
    BAIDUBROWSER = 23
    SAFARI = 24
    SKYFIRE = 25
    TIZEN = 26
    WEBKIT = 27
    GECKO = 28
    TRIDENT = 29
    PRESTO = 30
    IOS = 31
    ANDROID = 32
    BLACKBERRY = 33
    BREW = 34
    JAVA = 35
    WINDOWS_PHONE_OS = 36
    WINDOWS_PHONE = 37
    WINDOWS_CE = 38
    WINDOWS_NT = 39
    SYMBIAN = 40
    WEBOS = 41


# Property name -> version templates, tried in order. Declared in Property order.
PROPERTIES = MappingProxyType({
    # Build
    "Mobile": ("Mobile/[VER]",),
    "Build": ("Build/[VER]",),
    "Version": ("Version/[VER]",),
    "VendorID": ("VendorID/[VER]",),
    # Devices
    "iPad": ("iPad.*CPU[a-z ]+[VER]",),
    "iPhone": ("iPhone.*CPU[a-z ]+[VER]",),
    "iPod": ("iPod.*CPU[a-z ]+[VER]",),
    "Kindle": ("Kindle/[VER]",),
    # Browsers
    "Chrome": ("Chrome/[VER]", "CriOS/[VER]", "CrMo/[VER]"),
    "Coast": ("Coast/[VER]",),
    "Dolfin": ("Dolfin/[VER]",),
    "Firefox": ("Firefox/[VER]",),
    "Fennec": ("Fennec/[VER]",),
    "IE": ("IEMobile/[VER];", "IEMobile [VER]", "MSIE [VER];"),
    "NetFront": ("NetFront/[VER]",),
    "NokiaBrowser": ("NokiaBrowser/[VER]",),
    "Opera": (" OPR/[VER]", "Opera Mini/[VER]", "Version/[VER]"),
    "Opera Mini": ("Opera Mini/[VER]",),
    "Opera Mobi": ("Version/[VER]",),
    "UC Browser": ("UC Browser[VER]",),
    "MQQBrowser": ("MQQBrowser/[VER]",),
    "MicroMessenger": ("MicroMessenger/[VER]",),
    "baiduboxapp": ("baiduboxapp/[VER]",),
    "baidubrowser": ("baidubrowser/[VER]",),
    # Safari 7534.48.3 is actually Version 5.1; on BlackBerry Version is the OS version
    "Safari": ("Version/[VER]", "Safari/[VER]"),
    "Skyfire": ("Skyfire/[VER]",),
    "Tizen": ("Tizen/[VER]",),
    "Webkit": ("webkit[ /][VER]",),
    # Engines
    "Gecko": ("Gecko/[VER]",),
    "Trident": ("Trident/[VER]",),
    "Presto": ("Presto/[VER]",),
    # Operating systems
    "iOS": (r" \bOS\b [VER] ",),
    "Android": ("Android [VER]",),
    "BlackBerry": (r"BlackBerry[\w]+/[VER]", "BlackBerry.*Version/[VER]", "Version/[VER]"),
    "BREW": ("BREW [VER]",),
    "Java": ("Java/[VER]",),
    "Windows Phone OS": ("Windows Phone OS [VER]", "Windows Phone [VER]"),
    "Windows Phone": ("Windows Phone [VER]",),
    "Windows CE": ("Windows CE/[VER]",),
    "Windows NT": ("Windows NT [VER]",),
    "Symbian": ("SymbianOS/[VER]", "Symbian/[VER]"),
    "webOS": ("webOS/[VER]", "hpwOS/[VER];"),
})

_NAMES_BY_KEY = tuple(PROPERTIES)
_KEYS_BY_LOWER_NAME = {name.lower(): key for key, name in enumerate(_NAMES_BY_KEY)}


def property_key(name: str) -> Optional[Property]:
    """Case-insensitive name lookup; None for unknown names"""
    key = _KEYS_BY_LOWER_NAME.get(name.lower())
    if key is None:
        return None
    return Property(key)


def property_name(key: int) -> Optional[str]:
    if 0 <= key < len(_NAMES_BY_KEY):
        return _NAMES_BY_KEY[key]
    return None


def templates_for_key(key: int) -> Tuple[str, ...]:
    name = property_name(key)
    if name is None:
        return ()
    return PROPERTIES[name]


def version_patterns(key: int) -> list[str]:
    """Templates for a property with the version placeholder expanded"""
    return [template.replace(VERSION_PLACEHOLDER, VERSION_PATTERN) for template in templates_for_key(key)]
