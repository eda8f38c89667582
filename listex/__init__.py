"""Listex Python client: typed access to the Listex product-data API."""

from __future__ import annotations

from listex.classifier import classify
from listex.client import ListexClient
from listex.endpoints import ENDPOINTS, Endpoint
from listex.exceptions import (
    InternalServerError,
    InvalidArgument,
    ListexError,
    Locked,
    MethodNotAllowed,
    MethodNotFound,
    NoAccess,
    NotAuthorized,
    NotModified,
    RequestError,
    RequestLimitReached,
    ServiceNotAvailable,
    TransportError,
    UnknownError,
)
from listex.headers import parse_headers
from listex.models import (
    AttributeType,
    ClientConfig,
    Format,
    HttpVerb,
    RawResponse,
    RequestSpec,
    Resource,
    SocialType,
    StatusCode,
    UsageLimit,
)
from listex.transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "ListexClient",
    "ClientConfig",
    "RequestSpec",
    "RawResponse",
    "UsageLimit",
    "Format",
    "HttpVerb",
    "Resource",
    "StatusCode",
    "AttributeType",
    "SocialType",
    "Endpoint",
    "ENDPOINTS",
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    "classify",
    "parse_headers",
    "ListexError",
    "TransportError",
    "InvalidArgument",
    "UnknownError",
    "NotModified",
    "RequestError",
    "NotAuthorized",
    "NoAccess",
    "MethodNotAllowed",
    "Locked",
    "RequestLimitReached",
    "InternalServerError",
    "MethodNotFound",
    "ServiceNotAvailable",
]
