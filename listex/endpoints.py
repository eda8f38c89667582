"""Catalog of API endpoints as data.

Each :class:`Endpoint` names a resource, the verb used to reach it and the
parameter keys it accepts. :meth:`listex.client.ListexClient.call` turns an
entry plus keyword arguments into a request.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from listex.exceptions import InvalidArgument
from listex.models import HttpVerb, Resource

REVIEW_FIELDS = (
    "review_text",
    "social_type",
    "social_id",
    "review_author",
    "review_rating",
)


@dataclass(frozen=True)
class Endpoint:
    name: str
    resource: Resource
    verb: HttpVerb = HttpVerb.GET
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    accepts_etag: bool = False

    def build_params(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Map keyword values onto this endpoint's parameter keys.

        Required keys must be present and not None. Optional keys whose
        value is falsy are left out.
        """
        unknown = set(values) - set(self.required) - set(self.optional)
        if unknown:
            raise InvalidArgument(
                f"{self.name} got unexpected parameters: {', '.join(sorted(unknown))}"
            )
        params: dict[str, Any] = {}
        for key in self.required:
            if values.get(key) is None:
                raise InvalidArgument(f"{self.name} requires parameter {key!r}")
            params[key] = _scalar(values[key])
        for key in self.optional:
            if values.get(key):
                params[key] = _scalar(values[key])
        return params


def _scalar(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _lookups(prefix: str, resource: Resource, accepts_etag: bool) -> list[Endpoint]:
    """The by-id / by-GTIN / by-LTIN / by-SKU quartet shared by product resources."""
    return [
        Endpoint(f"{prefix}_by_id", resource, required=("good_id",), accepts_etag=accepts_etag),
        Endpoint(f"{prefix}_by_gtin", resource, required=("gtin",), accepts_etag=accepts_etag),
        Endpoint(
            f"{prefix}_by_ltin", resource,
            required=("ltin", "party_id"), accepts_etag=accepts_etag,
        ),
        Endpoint(
            f"{prefix}_by_sku", resource,
            required=("sku", "party_id"), accepts_etag=accepts_etag,
        ),
    ]


def _review(name: str, target: str) -> Endpoint:
    return Endpoint(
        name, Resource.ADD_REVIEW, HttpVerb.POST, required=(target, *REVIEW_FIELDS),
    )


_CATALOG: list[Endpoint] = [
    Endpoint("get_attributes", Resource.ATTRIBUTES, optional=("cat_id", "attr_type")),
    Endpoint("get_brands", Resource.BRANDS, optional=("party_id",), accepts_etag=True),
    Endpoint("get_suppliers", Resource.SUPPLIERS, required=("identifier",)),
    Endpoint("get_categories", Resource.CATEGORIES, accepts_etag=True),
    *_lookups("get_product", Resource.PRODUCTS, accepts_etag=True),
    *_lookups("get_supplier_product", Resource.SUPPLIER_PRODUCTS, accepts_etag=True),
    Endpoint("get_etags_list", Resource.ETAGS_LIST, required=("party_id",)),
    Endpoint("get_supplier_etags_list", Resource.SUPPLIER_ETAGS_LIST, required=("party_id",)),
    Endpoint(
        "get_etags_list_paginated", Resource.ETAGS_LIST_PAGINATED,
        required=("party_id",), optional=("next_page_id",),
    ),
    Endpoint("get_suggestions", Resource.SUGGESTIONS, required=("q",)),
    _review("add_review_to_good", "good_id"),
    _review("add_review_to_party", "party_id"),
    _review("add_review_to_brand", "brand_id"),
    _review("add_reply_to_review", "review_parent_id"),
    Endpoint(
        "get_image", Resource.IMAGE,
        required=("name", "width", "height", "no_background"),
    ),
    Endpoint("get_locations", Resource.LOCATIONS, optional=("party_id",)),
    *_lookups("get_palletization", Resource.PALLETIZATION, accepts_etag=False),
    Endpoint(
        "get_novelty_products", Resource.NOVELTY_PRODUCTS,
        required=("date_from",), optional=("date_to",),
    ),
    Endpoint(
        "get_planogram_assortment", Resource.PLANOGRAM_ASSORTMENT,
        required=("party_id",), optional=("location_id",), accepts_etag=True,
    ),
]

ENDPOINTS: dict[str, Endpoint] = {ep.name: ep for ep in _CATALOG}


def get_endpoint(name: str) -> Endpoint:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise InvalidArgument(f"Unknown endpoint: {name}") from None
