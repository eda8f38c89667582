"""Tests for the endpoint catalog and the named client methods."""

from __future__ import annotations

import pytest

from listex.endpoints import ENDPOINTS, REVIEW_FIELDS, get_endpoint
from listex.exceptions import InvalidArgument
from listex.models import AttributeType, HttpVerb, Resource, SocialType


def _last(transport):
    call = transport.calls[-1]
    params = dict(call["params"])
    params.pop("apikey")
    params.pop("format")
    return call, params


class TestCatalog:
    def test_every_endpoint_has_a_client_method(self, client):
        for name in ENDPOINTS:
            assert callable(getattr(client, name)), name

    def test_catalog_size(self):
        assert len(ENDPOINTS) == 28

    def test_unknown_endpoint(self):
        with pytest.raises(InvalidArgument):
            get_endpoint("get_everything")

    def test_build_params_omits_falsy_optionals(self):
        ep = get_endpoint("get_attributes")
        assert ep.build_params({"cat_id": 0, "attr_type": None}) == {}
        assert ep.build_params({"cat_id": 5}) == {"cat_id": 5}

    def test_build_params_requires_required(self):
        with pytest.raises(InvalidArgument, match="good_id"):
            get_endpoint("get_product_by_id").build_params({})

    def test_build_params_rejects_unknown(self):
        with pytest.raises(InvalidArgument, match="colour"):
            get_endpoint("get_brands").build_params({"colour": "red"})

    def test_enum_values_flattened(self):
        params = get_endpoint("get_attributes").build_params(
            {"attr_type": AttributeType.MANDATORY}
        )
        assert params == {"attr_type": "m"}

    def test_reviews_are_posts(self):
        for name in (
            "add_review_to_good",
            "add_review_to_party",
            "add_review_to_brand",
            "add_reply_to_review",
        ):
            ep = ENDPOINTS[name]
            assert ep.verb is HttpVerb.POST
            assert ep.resource is Resource.ADD_REVIEW
            assert ep.required[1:] == REVIEW_FIELDS


class TestCall:
    def test_etag_rejected_where_not_accepted(self, client, fake_transport):
        with pytest.raises(InvalidArgument):
            client.call("get_suggestions", q="milk", etag="x")
        assert fake_transport.calls == []

    def test_call_by_name(self, client, fake_transport):
        client.call("get_locations", party_id=7)
        call, params = _last(fake_transport)
        assert call["url"].endswith("/v3/locations")
        assert params == {"party_id": 7}

    def test_call_accepts_name_parameter(self, client, fake_transport):
        client.call("get_image", name="a.png", width=10, height=20, no_background=1)
        call, params = _last(fake_transport)
        assert call["url"].endswith("/v3/image")
        assert params == {"name": "a.png", "width": 10, "height": 20, "no_background": 1}

    def test_endpoint_name_keyword_treated_as_parameter(self, client, fake_transport):
        with pytest.raises(InvalidArgument, match="endpoint_name"):
            client.call("get_brands", endpoint_name="x")
        assert fake_transport.calls == []


class TestNamedMethods:
    @pytest.mark.parametrize(
        ("method", "args", "resource", "expected"),
        [
            ("get_attributes", (12, "m"), "attributes", {"cat_id": 12, "attr_type": "m"}),
            ("get_attributes", (), "attributes", {}),
            ("get_brands", (3,), "brands", {"party_id": 3}),
            ("get_suppliers", ("4820000000000",), "suppliers", {"identifier": "4820000000000"}),
            ("get_categories", (), "categories", {}),
            ("get_product_by_id", (42,), "product", {"good_id": 42}),
            ("get_product_by_gtin", ("4820",), "product", {"gtin": "4820"}),
            ("get_product_by_ltin", ("L1", 9), "product", {"ltin": "L1", "party_id": 9}),
            ("get_product_by_sku", ("S1", 9), "product", {"sku": "S1", "party_id": 9}),
            ("get_supplier_product_by_id", (42,), "supplier-product", {"good_id": 42}),
            ("get_supplier_product_by_gtin", ("4820",), "supplier-product", {"gtin": "4820"}),
            (
                "get_supplier_product_by_ltin", ("L1", 9), "supplier-product",
                {"ltin": "L1", "party_id": 9},
            ),
            (
                "get_supplier_product_by_sku", ("S1", 9), "supplier-product",
                {"sku": "S1", "party_id": 9},
            ),
            ("get_etags_list", (9,), "etagslist", {"party_id": 9}),
            ("get_supplier_etags_list", (9,), "supplier-etagslist", {"party_id": 9}),
            (
                "get_etags_list_paginated", (9, 100), "etagslist-paginated",
                {"party_id": 9, "next_page_id": 100},
            ),
            ("get_etags_list_paginated", (9,), "etagslist-paginated", {"party_id": 9}),
            ("get_suggestions", ("milk",), "suggestions", {"q": "milk"}),
            (
                "get_image", ("a.png", 100, 200, 0), "image",
                {"name": "a.png", "width": 100, "height": 200, "no_background": 0},
            ),
            ("get_locations", (), "locations", {}),
            ("get_palletization_by_id", (42,), "palletization", {"good_id": 42}),
            ("get_palletization_by_gtin", ("4820",), "palletization", {"gtin": "4820"}),
            (
                "get_palletization_by_ltin", ("L1", 9), "palletization",
                {"ltin": "L1", "party_id": 9},
            ),
            (
                "get_palletization_by_sku", ("S1", 9), "palletization",
                {"sku": "S1", "party_id": 9},
            ),
            (
                "get_novelty_products", ("2024-01-01", "2024-02-01"), "novelty-products",
                {"date_from": "2024-01-01", "date_to": "2024-02-01"},
            ),
            ("get_novelty_products", ("2024-01-01",), "novelty-products", {"date_from": "2024-01-01"}),
            (
                "get_planogram_assortment", (9, 5), "planogram-assortment",
                {"party_id": 9, "location_id": 5},
            ),
        ],
    )
    def test_parameter_mapping(self, client, fake_transport, method, args, resource, expected):
        getattr(client, method)(*args)
        call, params = _last(fake_transport)
        assert call["method"] == "GET"
        assert call["url"] == f"https://api.listex.info/v3/{resource}"
        assert params == expected

    @pytest.mark.parametrize(
        ("method", "target"),
        [
            ("add_review_to_good", "good_id"),
            ("add_review_to_party", "party_id"),
            ("add_review_to_brand", "brand_id"),
            ("add_reply_to_review", "review_parent_id"),
        ],
    )
    def test_reviews(self, client, fake_transport, method, target):
        getattr(client, method)(11, "Great", SocialType.FACEBOOK, "fb-1", "Ann", 5)
        call, params = _last(fake_transport)
        assert call["method"] == "POST"
        assert call["url"].endswith("/v3/addreview")
        assert params == {
            target: 11,
            "review_text": "Great",
            "social_type": "fb",
            "social_id": "fb-1",
            "review_author": "Ann",
            "review_rating": 5,
        }

    def test_etag_forwarded(self, client, fake_transport):
        client.get_product_by_sku("S1", 9, etag="tag-1")
        call, _ = _last(fake_transport)
        assert call["headers"]["If-None-Match"] == '"tag-1"'
