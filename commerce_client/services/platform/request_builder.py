"""Fluent builder for project-scoped platform request URIs.

Usage::

    builder = create_request_builder("my-project")
    uri = builder.products.where('key="shirt"').page(2).per_page(20).build()
    # /my-project/products?where=key%3D%22shirt%22&limit=20&offset=20
"""

from typing import Any, Optional
from urllib.parse import quote, urlencode

# Resource name -> collection path under /<project-key>/
SERVICES = {
    "carts": "carts",
    "categories": "categories",
    "channels": "channels",
    "custom_objects": "custom-objects",
    "extensions": "extensions",
    "inventory": "inventory",
    "orders": "orders",
    "products": "products",
    "product_projections": "product-projections",
    "product_projections_search": "product-projections/search",
    "product_types": "product-types",
    "subscriptions": "subscriptions",
    "tax_categories": "tax-categories",
    "types": "types",
}

# Page size the platform applies when no limit is sent
DEFAULT_PER_PAGE = 20


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class ServiceBuilder:
    """Collects selection, filter, paging, sort and expansion for one resource.

    Every method returns the builder so calls can be chained; ``build()``
    renders the accumulated state as ``/<project>/<resource>[/<id>]?<query>``.
    """

    def __init__(self, project_key: str, path: str) -> None:
        self.project_key = project_key
        self.path = path
        self._selector = ""
        self._expand: list[str] = []
        self._where: list[str] = []
        self._sort: list[str] = []
        self._version: Optional[int] = None
        self._page: Optional[int] = None
        self._per_page: Optional[int] = None

    # Selection

    def by_id(self, resource_id: str) -> "ServiceBuilder":
        if not resource_id:
            raise ValueError("by_id requires a non-empty id")
        self._selector = f"/{_segment(resource_id)}"
        return self

    def by_key(self, key: str) -> "ServiceBuilder":
        if not key:
            raise ValueError("by_key requires a non-empty key")
        self._selector = f"/key={_segment(key)}"
        return self

    def by_container_and_key(self, container: str, key: str) -> "ServiceBuilder":
        """Address a custom object by its container and key."""
        if not container or not key:
            raise ValueError("by_container_and_key requires container and key")
        self._selector = f"/{_segment(container)}/{_segment(key)}"
        return self

    def with_version(self, version: int) -> "ServiceBuilder":
        if not isinstance(version, int) or isinstance(version, bool):
            raise ValueError(f"version must be an integer, got {version!r}")
        self._version = version
        return self

    # Query

    def where(self, predicate: str) -> "ServiceBuilder":
        if not predicate:
            raise ValueError("where requires a predicate")
        self._where.append(predicate)
        return self

    def expand(self, path: str) -> "ServiceBuilder":
        if not path:
            raise ValueError("expand requires a reference path")
        self._expand.append(path)
        return self

    def sort(self, by: str, ascending: bool = True) -> "ServiceBuilder":
        if not by:
            raise ValueError("sort requires a field")
        self._sort.append(f"{by} {'asc' if ascending else 'desc'}")
        return self

    def page(self, page: int) -> "ServiceBuilder":
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        self._page = page
        return self

    def per_page(self, per_page: int) -> "ServiceBuilder":
        if per_page < 0:
            raise ValueError(f"per_page must be >= 0, got {per_page}")
        self._per_page = per_page
        return self

    def parse(self, options: dict[str, Any]) -> "ServiceBuilder":
        """Apply several query options at once.

        Recognised keys: ``sort`` (list of ``{"by", "direction"}``),
        ``expand``, ``where``, ``page``, ``perPage``/``per_page``.
        """
        for statement in options.get("sort") or []:
            by = statement["by"] if isinstance(statement, dict) else statement.by
            direction = statement["direction"] if isinstance(statement, dict) else statement.direction
            self.sort(by, ascending=str(direction).lower() != "desc")
        for path in options.get("expand") or []:
            self.expand(path)
        where = options.get("where")
        for predicate in [where] if isinstance(where, str) else where or []:
            self.where(predicate)
        if options.get("page") is not None:
            self.page(options["page"])
        per_page = options.get("perPage", options.get("per_page"))
        if per_page is not None:
            self.per_page(per_page)
        return self

    def _query_params(self) -> list[tuple[str, Any]]:
        params: list[tuple[str, Any]] = []
        params.extend(("expand", e) for e in self._expand)
        params.extend(("where", w) for w in self._where)
        params.extend(("sort", s) for s in self._sort)

        if self._per_page is not None:
            params.append(("limit", self._per_page))
        if self._page is not None:
            per_page = self._per_page if self._per_page is not None else DEFAULT_PER_PAGE
            params.append(("offset", (self._page - 1) * per_page))
        return params

    def build(self) -> str:
        params = self._query_params()
        if self._version is not None:
            params.append(("version", self._version))

        uri = f"/{_segment(self.project_key)}/{self.path}{self._selector}"
        if params:
            uri += "?" + urlencode(params, quote_via=quote, safe="")
        return uri


class SearchBuilder(ServiceBuilder):
    """Builder for the product projection search endpoint."""

    def __init__(self, project_key: str, path: str) -> None:
        super().__init__(project_key, path)
        self._text: list[tuple[str, str]] = []
        self._fuzzy: Optional[bool] = None
        self._mark_matching_variants = False
        self._facet: list[str] = []
        self._filter: list[str] = []
        self._filter_by_query: list[str] = []
        self._filter_by_facets: list[str] = []

    def text(self, value: str, language: str) -> "SearchBuilder":
        if not language:
            raise ValueError("text search requires a language")
        self._text.append((f"text.{language}", value))
        return self

    def fuzzy(self, enabled: bool = True) -> "SearchBuilder":
        self._fuzzy = enabled
        return self

    def mark_matching_variants(self) -> "SearchBuilder":
        self._mark_matching_variants = True
        return self

    def facet(self, expression: str) -> "SearchBuilder":
        self._facet.append(expression)
        return self

    def filter(self, expression: str) -> "SearchBuilder":
        self._filter.append(expression)
        return self

    def filter_by_query(self, expression: str) -> "SearchBuilder":
        self._filter_by_query.append(expression)
        return self

    def filter_by_facets(self, expression: str) -> "SearchBuilder":
        self._filter_by_facets.append(expression)
        return self

    def _query_params(self) -> list[tuple[str, Any]]:
        params = super()._query_params()
        params.extend(self._text)
        if self._fuzzy is not None:
            params.append(("fuzzy", str(self._fuzzy).lower()))
        if self._mark_matching_variants:
            params.append(("markMatchingVariants", "true"))
        params.extend(("facet", f) for f in self._facet)
        params.extend(("filter", f) for f in self._filter)
        params.extend(("filter.query", f) for f in self._filter_by_query)
        params.extend(("filter.facets", f) for f in self._filter_by_facets)
        return params


class RequestBuilder:
    """Entry point exposing one fresh sub-builder per resource collection."""

    def __init__(self, project_key: str) -> None:
        if not project_key:
            raise ValueError("project_key is required")
        self.project_key = project_key

    def __getattr__(self, name: str) -> ServiceBuilder:
        path = SERVICES.get(name)
        if path is None:
            raise AttributeError(f"Unknown resource {name!r}")
        if name == "product_projections_search":
            return SearchBuilder(self.project_key, path)
        return ServiceBuilder(self.project_key, path)


def create_request_builder(project_key: str) -> RequestBuilder:
    """Create a request builder bound to one project."""
    return RequestBuilder(project_key)
