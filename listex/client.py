"""Synchronous client for the Listex product-data API."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Any, Mapping

import httpx

from listex.call_context import call_scope
from listex.classifier import classify
from listex.config import Settings
from listex.endpoints import get_endpoint
from listex.exceptions import InvalidArgument, ListexError
from listex.headers import parse_headers, split_raw_response
from listex.models import (
    AttributeType,
    ClientConfig,
    Format,
    HttpVerb,
    RawResponse,
    RequestSpec,
    Resource,
    SocialType,
)
from listex.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)


def _as_format(value: Format | str) -> Format:
    try:
        return Format(value.lower() if isinstance(value, str) else value)
    except ValueError:
        raise InvalidArgument(f"Unsupported response format: {value}") from None


class ListexClient:
    """Client for the Listex API (backed by ``httpx.Client`` by default).

    Every call returns its own :class:`RawResponse`. The client also keeps the
    most recent response for the ``last_*`` accessors; that slot is shared
    and is not safe to read while other threads issue calls.
    """

    def __init__(
        self,
        api_key: str | None = None,
        response_format: Format | str = Format.JSON,
        *,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        if config is None:
            if not api_key:
                raise InvalidArgument("An API key is required")
            config = ClientConfig(api_key=api_key)
        self._config = config
        self._format = _as_format(response_format)
        if transport is None:
            transport = HttpxTransport(
                timeout=config.timeout,
                user_agent=config.user_agent,
                _transport=_transport,
            )
        self._transport = transport
        self._last = RawResponse()

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: Transport | None = None,
    ) -> ListexClient:
        config = ClientConfig(
            api_key=settings.api_key,
            base_url=settings.base_url,
            version=settings.api_version,
            auth_param=settings.auth_param,
            timeout=settings.timeout,
            user_agent=f"Listex Python API client {settings.api_version}",
        )
        if not config.api_key:
            raise InvalidArgument("LISTEX_API_KEY is not set")
        return cls(
            response_format=settings.response_format,
            config=config,
            transport=transport,
        )

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> ListexClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    # -- configuration -------------------------------------------------------

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def response_format(self) -> Format:
        return self._format

    @response_format.setter
    def response_format(self, value: Format | str) -> None:
        self._format = _as_format(value)

    def set_format_json(self) -> None:
        self._format = Format.JSON

    def set_format_xml(self) -> None:
        self._format = Format.XML

    # -- last response -------------------------------------------------------

    @property
    def last_response(self) -> RawResponse:
        return self._last

    @property
    def last_http_code(self) -> int:
        return self._last.status

    def last_etag(self) -> str | None:
        return self._last.etag

    def current_usage_count(self) -> int | None:
        return self._last.current_usage_count

    def usage_limit(self) -> int | None:
        return self._last.usage_limit

    def retry_after(self) -> int | None:
        return self._last.retry_after

    # -- request pipeline ----------------------------------------------------

    def send(self, spec: RequestSpec) -> RawResponse:
        """Issue *spec* and return the unclassified response."""
        self._last = RawResponse()

        try:
            verb = HttpVerb(spec.verb)
        except ValueError:
            raise InvalidArgument(f"Unsupported HTTP verb: {spec.verb}") from None

        headers = spec.headers()
        content: bytes | None = None
        if verb is not HttpVerb.GET and spec.payload is not None:
            content = json.dumps(spec.payload).encode("utf-8")
            headers["Content-Type"] = "application/json"

        resource = spec.resource_name
        with call_scope():
            logger.debug(
                "Sending request",
                extra={"resource": resource, "verb": verb.value, "etag": spec.etag},
            )
            result = self._transport.send(
                verb.value,
                self._config.url_for(resource),
                params=spec.query(
                    self._config.api_key,
                    spec.response_format or self._format,
                    self._config.auth_param,
                ),
                headers=headers,
                content=content,
            )
            header_block, body = split_raw_response(result.raw, result.header_size)
            response = RawResponse(
                status=result.status,
                headers=parse_headers(header_block.decode("latin-1")),
                body=body.decode("utf-8", "surrogateescape"),
                content=body,
            )
            self._last = response
            logger.debug(
                "Received response",
                extra={"resource": resource, "verb": verb.value, "status": result.status},
            )
        return response

    def request(
        self,
        resource: Resource | str,
        params: Mapping[str, Any] | None = None,
        *,
        response_format: Format | str | None = None,
        etag: str | None = None,
        verb: HttpVerb | str = HttpVerb.GET,
        payload: Mapping[str, Any] | None = None,
    ) -> RawResponse:
        """Send a request and classify its status.

        Returns the response with the body normalized (empty on 404).
        Raises a :class:`ListexError` subclass for every other non-200 status.
        """
        spec = RequestSpec(
            resource=resource,
            params=dict(params or {}),
            verb=verb,
            payload=payload,
            etag=etag,
            response_format=None if response_format is None else _as_format(response_format),
        )
        with call_scope():
            raw = self.send(spec)
            try:
                body = classify(raw.status, raw.body, raw)
            except ListexError as exc:
                logger.warning(
                    "Request failed: %s",
                    exc.detail,
                    extra={"resource": spec.resource_name, "status": raw.status},
                )
                raise
        if body == raw.body:
            return raw
        return replace(raw, body=body, content=b"")

    def get_response(
        self,
        resource: Resource | str,
        params: Mapping[str, Any] | None = None,
        response_format: Format | str | None = None,
        etag: str | None = None,
    ) -> str:
        """Body-only form of :meth:`request` for GET resources."""
        return self.request(
            resource, params, response_format=response_format, etag=etag,
        ).body

    def call(
        self, endpoint_name: str, /, *, etag: str | None = None, **params: Any,
    ) -> RawResponse:
        """Invoke the catalog endpoint *endpoint_name* with keyword parameters."""
        endpoint = get_endpoint(endpoint_name)
        if etag is not None and not endpoint.accepts_etag:
            raise InvalidArgument(f"{endpoint_name} does not accept an ETag")
        return self.request(
            endpoint.resource,
            endpoint.build_params(params),
            etag=etag,
            verb=endpoint.verb,
        )

    # -- catalog -------------------------------------------------------------

    def get_attributes(
        self, cat_id: int | None = None, attr_type: AttributeType | str | None = None,
    ) -> RawResponse:
        return self.call("get_attributes", cat_id=cat_id, attr_type=attr_type)

    def get_brands(self, party_id: int | None = None, etag: str | None = None) -> RawResponse:
        return self.call("get_brands", party_id=party_id, etag=etag)

    def get_suppliers(self, identifier: str) -> RawResponse:
        return self.call("get_suppliers", identifier=identifier)

    def get_categories(self, etag: str | None = None) -> RawResponse:
        return self.call("get_categories", etag=etag)

    def get_locations(self, party_id: int | None = None) -> RawResponse:
        return self.call("get_locations", party_id=party_id)

    # -- products ------------------------------------------------------------

    def get_product_by_id(self, good_id: int, etag: str | None = None) -> RawResponse:
        return self.call("get_product_by_id", good_id=good_id, etag=etag)

    def get_product_by_gtin(self, gtin: str, etag: str | None = None) -> RawResponse:
        return self.call("get_product_by_gtin", gtin=gtin, etag=etag)

    def get_product_by_ltin(
        self, ltin: str, party_id: int, etag: str | None = None,
    ) -> RawResponse:
        return self.call("get_product_by_ltin", ltin=ltin, party_id=party_id, etag=etag)

    def get_product_by_sku(
        self, sku: str, party_id: int, etag: str | None = None,
    ) -> RawResponse:
        return self.call("get_product_by_sku", sku=sku, party_id=party_id, etag=etag)

    def get_supplier_product_by_id(self, good_id: int, etag: str | None = None) -> RawResponse:
        return self.call("get_supplier_product_by_id", good_id=good_id, etag=etag)

    def get_supplier_product_by_gtin(self, gtin: str, etag: str | None = None) -> RawResponse:
        return self.call("get_supplier_product_by_gtin", gtin=gtin, etag=etag)

    def get_supplier_product_by_ltin(
        self, ltin: str, party_id: int, etag: str | None = None,
    ) -> RawResponse:
        return self.call(
            "get_supplier_product_by_ltin", ltin=ltin, party_id=party_id, etag=etag,
        )

    def get_supplier_product_by_sku(
        self, sku: str, party_id: int, etag: str | None = None,
    ) -> RawResponse:
        return self.call(
            "get_supplier_product_by_sku", sku=sku, party_id=party_id, etag=etag,
        )

    def get_etags_list(self, party_id: int) -> RawResponse:
        return self.call("get_etags_list", party_id=party_id)

    def get_supplier_etags_list(self, party_id: int) -> RawResponse:
        return self.call("get_supplier_etags_list", party_id=party_id)

    def get_etags_list_paginated(
        self, party_id: int, next_page_id: int | None = None,
    ) -> RawResponse:
        return self.call(
            "get_etags_list_paginated", party_id=party_id, next_page_id=next_page_id,
        )

    def get_suggestions(self, query: str) -> RawResponse:
        return self.call("get_suggestions", q=query)

    def get_novelty_products(
        self, date_from: str, date_to: str | None = None,
    ) -> RawResponse:
        return self.call("get_novelty_products", date_from=date_from, date_to=date_to)

    def get_planogram_assortment(
        self, party_id: int, location_id: int | None = None, etag: str | None = None,
    ) -> RawResponse:
        return self.call(
            "get_planogram_assortment",
            party_id=party_id,
            location_id=location_id,
            etag=etag,
        )

    # -- palletization -------------------------------------------------------

    def get_palletization_by_id(self, good_id: int) -> RawResponse:
        return self.call("get_palletization_by_id", good_id=good_id)

    def get_palletization_by_gtin(self, gtin: str) -> RawResponse:
        return self.call("get_palletization_by_gtin", gtin=gtin)

    def get_palletization_by_ltin(self, ltin: str, party_id: int) -> RawResponse:
        return self.call("get_palletization_by_ltin", ltin=ltin, party_id=party_id)

    def get_palletization_by_sku(self, sku: str, party_id: int) -> RawResponse:
        return self.call("get_palletization_by_sku", sku=sku, party_id=party_id)

    # -- images --------------------------------------------------------------

    def get_image(
        self, name: str, width: int, height: int, no_background: int,
    ) -> RawResponse:
        return self.call(
            "get_image",
            name=name,
            width=width,
            height=height,
            no_background=no_background,
        )

    # -- reviews -------------------------------------------------------------

    def _review(
        self, endpoint_name: str, target: str, target_id: int, /, **fields: Any,
    ) -> RawResponse:
        return self.call(endpoint_name, **{target: target_id}, **fields)

    def add_review_to_good(
        self,
        good_id: int,
        review_text: str,
        social_type: SocialType | str,
        social_id: str,
        review_author: str,
        review_rating: int,
    ) -> RawResponse:
        return self._review(
            "add_review_to_good", "good_id", good_id,
            review_text=review_text, social_type=social_type, social_id=social_id,
            review_author=review_author, review_rating=review_rating,
        )

    def add_review_to_party(
        self,
        party_id: int,
        review_text: str,
        social_type: SocialType | str,
        social_id: str,
        review_author: str,
        review_rating: int,
    ) -> RawResponse:
        return self._review(
            "add_review_to_party", "party_id", party_id,
            review_text=review_text, social_type=social_type, social_id=social_id,
            review_author=review_author, review_rating=review_rating,
        )

    def add_review_to_brand(
        self,
        brand_id: int,
        review_text: str,
        social_type: SocialType | str,
        social_id: str,
        review_author: str,
        review_rating: int,
    ) -> RawResponse:
        return self._review(
            "add_review_to_brand", "brand_id", brand_id,
            review_text=review_text, social_type=social_type, social_id=social_id,
            review_author=review_author, review_rating=review_rating,
        )

    def add_reply_to_review(
        self,
        review_parent_id: int,
        review_text: str,
        social_type: SocialType | str,
        social_id: str,
        review_author: str,
        review_rating: int,
    ) -> RawResponse:
        return self._review(
            "add_reply_to_review", "review_parent_id", review_parent_id,
            review_text=review_text, social_type=social_type, social_id=social_id,
            review_author=review_author, review_rating=review_rating,
        )
