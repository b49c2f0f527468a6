"""Tests for the properties table."""

from mobile_detect.properties import (
    PROPERTIES,
    Property,
    VERSION_PATTERN,
    property_key,
    property_name,
    templates_for_key,
    version_patterns,
)


class TestPropertiesTable:

    def test_one_entry_per_property(self):
        assert len(PROPERTIES) == len(Property)

    def test_declared_in_property_order(self):
        for key, name in enumerate(PROPERTIES):
            assert property_key(name) == key

    def test_every_template_has_placeholder(self):
        for name, templates in PROPERTIES.items():
            assert templates, name
            for template in templates:
                assert "[VER]" in template, name

    def test_baidu_entries_present(self):
        assert PROPERTIES["baiduboxapp"] == ("baiduboxapp/[VER]",)
        assert PROPERTIES["baidubrowser"] == ("baidubrowser/[VER]",)

    def test_template_order_kept(self):
        assert templates_for_key(Property.CHROME) == ("Chrome/[VER]", "CriOS/[VER]", "CrMo/[VER]")


class TestPropertyLookup:

    def test_lookup_is_case_insensitive(self):
        assert property_key("ANDROID") is Property.ANDROID
        assert property_key("opera mini") is Property.OPERA_MINI
        assert property_key("Windows Phone OS") is Property.WINDOWS_PHONE_OS

    def test_unknown_name(self):
        assert property_key("Unknown property") is None
        assert property_key("MSIE") is None
        assert property_key("Bada") is None

    def test_name_by_key(self):
        assert property_name(Property.IOS) == "iOS"
        assert property_name(-1) is None
        assert property_name(len(Property)) is None

    def test_unknown_key_has_no_patterns(self):
        assert version_patterns(9999) == []

    def test_placeholder_expanded(self):
        assert version_patterns(Property.ANDROID) == ["Android " + VERSION_PATTERN]
