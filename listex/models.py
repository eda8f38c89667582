"""Value objects shared by the Listex client."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Mapping

API_URL = "https://api.listex.info"
API_VERSION = "v3"
LEGACY_API_URL = "https://listex.info/api"
LEGACY_API_VERSION = "v2"


class Format(str, Enum):
    JSON = "json"
    XML = "xml"


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Resource(str, Enum):
    """Path segments of every resource the API exposes."""

    ATTRIBUTES = "attributes"
    BRANDS = "brands"
    SUPPLIERS = "suppliers"
    CATEGORIES = "categories"
    PRODUCTS = "product"
    SUPPLIER_PRODUCTS = "supplier-product"
    ETAGS_LIST = "etagslist"
    SUPPLIER_ETAGS_LIST = "supplier-etagslist"
    ETAGS_LIST_PAGINATED = "etagslist-paginated"
    SUGGESTIONS = "suggestions"
    ADD_REVIEW = "addreview"
    IMAGE = "image"
    LOCATIONS = "locations"
    PALLETIZATION = "palletization"
    NOVELTY_PRODUCTS = "novelty-products"
    PLANOGRAM_ASSORTMENT = "planogram-assortment"


class StatusCode(IntEnum):
    OK = 200
    NOT_MODIFIED = 304
    REQUEST_ERROR = 400
    NOT_AUTHORIZED = 401
    NO_ACCESS = 403
    NO_DATA_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    LOCKED = 423
    REQUEST_LIMIT_REACHED = 429
    INTERNAL_SERVER_ERROR = 500
    METHOD_NOT_FOUND = 501
    SERVICE_NOT_AVAILABLE = 503


class AttributeType(str, Enum):
    ALL = "a"
    MANDATORY = "m"
    RECOMMEND = "r"
    OPTIONAL = "o"


class SocialType(str, Enum):
    GOOGLE_PLUS = "gp"
    FACEBOOK = "fb"
    TWITTER = "tw"
    VK = "vk"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings fixed for the lifetime of a client."""

    api_key: str
    base_url: str = API_URL
    version: str = API_VERSION
    auth_param: str = "apikey"
    timeout: float = 30.0
    user_agent: str = f"Listex Python API client {API_VERSION}"

    @classmethod
    def legacy(cls, api_key: str, **overrides: Any) -> ClientConfig:
        """Configuration for the key-embedded v2 API."""
        values: dict[str, Any] = {
            "base_url": LEGACY_API_URL,
            "version": LEGACY_API_VERSION,
            "auth_param": "key",
            "user_agent": f"Listex Python API client {LEGACY_API_VERSION}",
        }
        values.update(overrides)
        return cls(api_key=api_key, **values)

    def url_for(self, resource: Resource | str) -> str:
        name = resource.value if isinstance(resource, Resource) else resource
        return f"{self.base_url.rstrip('/')}/{self.version}/{name}"


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to issue one request. Built fresh per call."""

    resource: Resource | str
    params: Mapping[str, Any] = field(default_factory=dict)
    verb: HttpVerb | str = HttpVerb.GET
    payload: Mapping[str, Any] | None = None
    etag: str | None = None
    response_format: Format | str | None = None

    @property
    def resource_name(self) -> str:
        if isinstance(self.resource, Resource):
            return self.resource.value
        return self.resource

    def query(
        self, api_key: str, fmt: Format | str, auth_param: str = "apikey",
    ) -> dict[str, Any]:
        """Caller params followed by the auth key and format.

        The auth key and ``format`` are assigned after the caller's params
        are copied, so caller-supplied values for those keys are replaced.
        """
        query = dict(self.params)
        query[auth_param] = api_key
        query["format"] = fmt.value if isinstance(fmt, Format) else fmt
        return query

    def headers(self) -> dict[str, str]:
        if self.etag is None:
            return {}
        return {"If-None-Match": f'"{self.etag}"'}


@dataclass(frozen=True)
class UsageLimit:
    """Request quota parsed from the ``API-Usage-Limit`` header."""

    current: int | None = None
    limit: int | None = None

    @classmethod
    def parse(cls, value: str | None) -> UsageLimit:
        """Split ``"<count>/<limit>"``; both fields are None if malformed."""
        if value is None or "/" not in value:
            return cls()
        current, _, limit = value.partition("/")
        try:
            return cls(current=int(current), limit=int(limit))
        except ValueError:
            return cls()


@dataclass(frozen=True)
class RawResponse:
    """Status, normalized headers and body of a single API call.

    ``content`` holds the body bytes exactly as received. ``body`` is the
    same payload as text; bytes that are not valid UTF-8 survive as
    surrogate escapes, so ``body.encode("utf-8", "surrogateescape")``
    restores ``content``.
    """

    status: int = 0
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    content: bytes = b""

    @property
    def etag(self) -> str | None:
        return self.headers.get("ETag")

    @property
    def usage(self) -> UsageLimit:
        return UsageLimit.parse(self.headers.get("APIUsageLimit"))

    @property
    def current_usage_count(self) -> int | None:
        return self.usage.current

    @property
    def usage_limit(self) -> int | None:
        return self.usage.limit

    @property
    def retry_after(self) -> int | None:
        raw = self.headers.get("RetryAfter")
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            return None
