"""Tests for the vendor registry and selector configuration."""

import pytest

from deal_hunter.core.exceptions import SelectorConfigError, VendorConfigError
from deal_hunter.scrapers.base import SelectorSet, VendorSpec
from deal_hunter.scrapers.vendors import (
    SHOPIFY_SELECTORS,
    VENDORS,
    build_vendor_url,
    get_vendor_by_name,
    list_vendors,
    validate_registry,
)

from conftest import SIMPLE_SELECTORS, simple_vendor


EXPECTED_ORDER = [
    "GetFPV",
    "RaceDayQuads",
    "Pyrodrone",
    "NewBeeDrone",
    "DefianceRC",
    "TinyWhoop",
    "Wrekd",
    "Webleedfpv",
    "Five33",
    "BetaFPV",
    "ProgressiveRC",
    "Emax USA",
    "Rotor Riot",
    "Stan FPV",
    "Ovonic",
]


# ============================================================================
# TESTS: REGISTRY
# ============================================================================

class TestRegistry:
    """Tests for the built-in vendor table."""

    def test_fifteen_vendors_in_dispatch_order(self):
        assert [v.name for v in list_vendors()] == EXPECTED_ORDER

    def test_order_is_stable(self):
        """Test that repeated calls return the same sequence."""
        assert list_vendors() == list_vendors()
        assert list_vendors() is VENDORS

    def test_names_unique(self):
        names = [v.name for v in VENDORS]
        assert len(names) == len(set(names))

    def test_every_vendor_is_absolute_and_searchable(self):
        for vendor in VENDORS:
            assert vendor.base_url.startswith("https://")
            assert not vendor.base_url.endswith("/")
            assert vendor.request_path.startswith("/")
            assert "{query}" in vendor.search_path

    def test_shopify_vendors_share_selectors(self):
        shopify = [v for v in VENDORS if v.name not in ("GetFPV", "RaceDayQuads")]
        assert len(shopify) == 13
        assert all(v.selectors is SHOPIFY_SELECTORS for v in shopify)

    def test_registry_is_immutable(self):
        vendor = VENDORS[0]
        with pytest.raises(AttributeError):
            vendor.name = "Changed"

    def test_validate_registry_accepts_builtin_table(self):
        validate_registry(VENDORS)


class TestGetVendorByName:
    """Tests for get_vendor_by_name."""

    def test_known_vendor(self):
        vendor = get_vendor_by_name("Rotor Riot")
        assert vendor is not None
        assert vendor.base_url == "https://rotorriot.com"
        assert vendor.request_path == "/collections/clearance-sale"

    def test_unknown_vendor(self):
        assert get_vendor_by_name("Banggood") is None

    def test_name_is_case_sensitive(self):
        assert get_vendor_by_name("getfpv") is None


# ============================================================================
# TESTS: URL BUILDING
# ============================================================================

class TestBuildVendorUrl:
    """Tests for build_vendor_url."""

    def test_clearance_url(self):
        vendor = get_vendor_by_name("GetFPV")
        assert (
            build_vendor_url(vendor)
            == "https://www.getfpv.com/on-sale/clearance.html?product_list_limit=100"
        )

    def test_plain_concatenation(self):
        vendor = get_vendor_by_name("Pyrodrone")
        assert build_vendor_url(vendor) == "https://pyrodrone.com/collections/clearance"

    def test_search_query_is_encoded(self):
        vendor = get_vendor_by_name("Pyrodrone")
        assert (
            build_vendor_url(vendor, query="5 inch frame")
            == "https://pyrodrone.com/search?q=5%20inch%20frame"
        )

    def test_search_reserved_characters_encoded(self):
        vendor = get_vendor_by_name("Pyrodrone")
        url = build_vendor_url(vendor, query="a&b/c")
        assert url == "https://pyrodrone.com/search?q=a%26b%2Fc"

    def test_magento_search(self):
        vendor = get_vendor_by_name("GetFPV")
        assert (
            build_vendor_url(vendor, query="  battery ")
            == "https://www.getfpv.com/catalogsearch/result/?q=battery"
        )

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_query_uses_clearance(self, query):
        vendor = get_vendor_by_name("Wrekd")
        assert build_vendor_url(vendor, query=query) == "https://wrekd.com/collections/clearance"

    def test_no_search_path_uses_clearance(self):
        vendor = VendorSpec(
            name="NoSearch",
            request_path="/sale",
            backend="nosearch",
            base_url="https://nosearch.test",
            selectors=SIMPLE_SELECTORS,
        )
        assert build_vendor_url(vendor, query="frame") == "https://nosearch.test/sale"

    def test_host_override(self):
        vendor = get_vendor_by_name("GetFPV")
        assert (
            build_vendor_url(vendor, host="http://localhost:9001")
            == "http://localhost:9001/on-sale/clearance.html?product_list_limit=100"
        )


# ============================================================================
# TESTS: CONFIGURATION ERRORS
# ============================================================================

class TestSelectorValidation:
    """Tests for selector compilation at construction time."""

    @pytest.mark.parametrize("expression", ["div[", "", "   ", "p:not("])
    def test_invalid_selector_raises(self, expression):
        with pytest.raises(SelectorConfigError):
            SelectorSet(card=expression, title=".t", price=".p", image="img", link="a")

    def test_invalid_alternative_raises(self):
        """Test that every alternative is compiled, not only the first."""
        with pytest.raises(SelectorConfigError) as exc_info:
            SelectorSet(card=(".ok", "li[class="), title=".t", price=".p", image="img", link="a")
        assert exc_info.value.expression == "li[class="

    def test_empty_alternatives_raise(self):
        with pytest.raises(SelectorConfigError):
            SelectorSet(card=(), title=".t", price=".p", image="img", link="a")

    def test_selector_error_is_config_error(self):
        with pytest.raises(VendorConfigError):
            SelectorSet(card="div[", title=".t", price=".p", image="img", link="a")

    def test_string_coerced_to_alternatives(self):
        selectors = SelectorSet(card=".c", title=".t", price=".p", image="img", link="a")
        assert selectors.card == (".c",)
        assert len(selectors.patterns("price")) == 1


class TestVendorSpecValidation:
    """Tests for VendorSpec construction."""

    def test_relative_base_url_rejected(self):
        with pytest.raises(VendorConfigError):
            VendorSpec(
                name="Bad",
                request_path="/sale",
                backend="bad",
                base_url="www.bad.test",
                selectors=SIMPLE_SELECTORS,
            )

    def test_empty_name_rejected(self):
        with pytest.raises(VendorConfigError):
            VendorSpec(
                name="",
                request_path="/sale",
                backend="bad",
                base_url="https://bad.test",
                selectors=SIMPLE_SELECTORS,
            )

    def test_search_path_without_placeholder_rejected(self):
        with pytest.raises(VendorConfigError):
            VendorSpec(
                name="Bad",
                request_path="/sale",
                backend="bad",
                base_url="https://bad.test",
                selectors=SIMPLE_SELECTORS,
                search_path="/search",
            )


class TestValidateRegistry:
    """Tests for validate_registry."""

    def test_empty_registry(self):
        with pytest.raises(VendorConfigError):
            validate_registry([])

    def test_duplicate_names(self):
        vendors = [
            simple_vendor("Alpha", "alpha", "alpha.test"),
            simple_vendor("Alpha", "alpha2", "alpha2.test"),
        ]
        with pytest.raises(VendorConfigError, match="duplicate"):
            validate_registry(vendors)

    def test_non_spec_entry(self):
        with pytest.raises(VendorConfigError):
            validate_registry([{"name": "Alpha"}])
