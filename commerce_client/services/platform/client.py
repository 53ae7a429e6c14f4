"""Resource client for the commerce platform API."""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from functools import partial
from pprint import pformat
from typing import Any, Optional, Union
import asyncio
import inspect
import logging

import httpx

from commerce_client.config import PlatformConfig, Settings, get_settings
from commerce_client.schemas.base import PlatformModel
from commerce_client.schemas.common import EntityRef, SortStatement
from commerce_client.services.platform import predicates
from commerce_client.services.platform.errors import (
    InvalidArgumentError,
    PlatformAPIError,
    PlatformOAuthError,
)
from commerce_client.services.platform.oauth import ClientCredentialsAuth
from commerce_client.services.platform.pipeline import PlatformPipeline
from commerce_client.services.platform.queue import RequestQueue
from commerce_client.services.platform.request_builder import (
    RequestBuilder,
    ServiceBuilder,
    create_request_builder,
)
from commerce_client.services.platform.transport import HttpTransport, PlatformRequest
from commerce_client.services.platform.versioning import resolve_key_and_version

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}

ConfigValue = Union[PlatformConfig, Mapping[str, Any]]
ConfigProvider = Callable[[], Union[ConfigValue, Awaitable[ConfigValue]]]
SortSpec = Union[str, Sequence[Union[SortStatement, Mapping[str, str]]]]
Payload = Union[PlatformModel, Mapping[str, Any]]

Record = dict[str, Any]


class CommercetoolsClient:
    """Async client exposing one method per platform resource operation.

    The HTTP pipeline (token provider, request queue, transport) is built on
    the first call from the configuration given at construction, either a
    ready value or a zero-argument provider (sync or async). It is then reused
    for the lifetime of the instance.

    Results are the decoded JSON bodies, unchanged:
    - single-resource endpoints return the resource
    - ``fetch_*_by_<predicate>`` lookups return the first match or None
    - paged listings return the full ``{offset, limit, count, results}`` envelope
    """

    def __init__(
        self,
        config: Union[ConfigValue, ConfigProvider],
        *,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client without touching the network.

        Args:
            config: PlatformConfig, a mapping with its fields, or a provider
                returning either (awaited if it returns an awaitable)
            http_transport: Optional httpx transport shared by the auth and
                API clients (tests inject a MockTransport)
        """
        self._config_source = config
        self._http_transport = http_transport

        self.locale: Optional[str] = None
        self._config: Optional[PlatformConfig] = None
        self._pipeline: Optional[PlatformPipeline] = None
        self._request: Optional[Callable[[], RequestBuilder]] = None
        self._headers: dict[str, str] = {}
        self._init_lock = asyncio.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        **kwargs: Any,
    ) -> "CommercetoolsClient":
        """Create a client configured from environment variables on first use."""
        return cls(lambda: (settings or get_settings()).to_platform_config(), **kwargs)

    @property
    def config(self) -> Optional[PlatformConfig]:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._pipeline is not None

    # Pipeline lifecycle

    async def ensure_initialized(self) -> PlatformPipeline:
        """Build the request pipeline once; later calls return it unchanged.

        Concurrent first callers wait for a single construction. If resolving
        the configuration fails the error propagates and the next call tries
        again from scratch.

        Returns:
            The initialized pipeline
        """
        if self._pipeline is not None:
            return self._pipeline

        async with self._init_lock:
            if self._pipeline is None:
                config = await self._resolve_config()
                self._build_pipeline(config)
        return self._pipeline

    async def _resolve_config(self) -> PlatformConfig:
        source = self._config_source
        if callable(source):
            source = source()
            if inspect.isawaitable(source):
                source = await source

        if isinstance(source, PlatformConfig):
            return source
        return PlatformConfig.model_validate(source)

    def _build_pipeline(self, config: PlatformConfig) -> None:
        transport = HttpTransport(
            config.api_host,
            timeout=config.timeout_seconds,
            transport=self._http_transport,
        )
        queue = RequestQueue(config.concurrency)
        auth = ClientCredentialsAuth(
            host=config.auth_host,
            project_key=config.project_key,
            client_id=config.client_id,
            client_secret=config.client_secret,
            scopes=config.scopes,
            timeout=config.timeout_seconds,
            transport=self._http_transport,
        )

        self._headers = dict(JSON_HEADERS)
        self._request = partial(create_request_builder, config.project_key)
        self._config = config
        self.locale = config.locale
        self._pipeline = PlatformPipeline(transport=transport, queue=queue, auth=auth)

        logger.info(
            f"Initialized platform client for project {config.project_key} "
            f"(concurrency: {config.concurrency})"
        )

    async def close(self) -> None:
        """Close pooled HTTP connections."""
        if self._pipeline is not None:
            await self._pipeline.close()

    # Request helpers

    def _builder(self) -> RequestBuilder:
        if self._request is None:
            raise RuntimeError("Client not initialized; await ensure_initialized() first")
        return self._request()

    async def _execute(self, uri: str, method: str = "GET", body: Any = None) -> Any:
        pipeline = await self.ensure_initialized()
        request = PlatformRequest(uri=uri, method=method, headers=self._headers, body=body)
        response = await pipeline.execute(request)
        return response.body

    async def _fetch_first(self, uri: str) -> Optional[Record]:
        body = await self._execute(uri)
        results = body.get("results") or []
        return results[0] if results else None

    async def _delete(self, uri: str) -> Any:
        try:
            return await self._execute(uri, method="DELETE")
        except PlatformAPIError as e:
            logger.error(
                f"DELETE {uri} failed: {e.status_code} - {e.message}\n"
                f"{pformat(e.response_body, width=120)}"
            )
            raise
        except PlatformOAuthError as e:
            logger.error(f"DELETE {uri} failed: no access token ({e.message})")
            raise

    @staticmethod
    def _payload(value: Payload) -> Any:
        if isinstance(value, PlatformModel):
            return value.to_payload()
        if isinstance(value, Mapping):
            return dict(value)
        raise InvalidArgumentError(f"Expected a model or mapping payload, got {value!r}")

    def _actions(self, actions: Sequence[Payload]) -> list[Any]:
        return [self._payload(action) for action in actions]

    @staticmethod
    def _apply_sort(uri: ServiceBuilder, sort: Optional[SortSpec]) -> ServiceBuilder:
        if not sort:
            return uri
        if isinstance(sort, str):
            # "createdAt" or "createdAt desc"
            by, _, direction = sort.partition(" ")
            return uri.sort(by, ascending=direction.strip().lower() != "desc")
        return uri.parse({"sort": list(sort)})

    async def resolve_key_and_version(
        self,
        key_or_entity: Any,
        fetch_by_key: Callable[[str], Awaitable[Any]],
    ) -> EntityRef:
        """Key and current version for a versioned update/delete.

        See ``versioning.resolve_key_and_version``.
        """
        return await resolve_key_and_version(key_or_entity, fetch_by_key)

    # Orders

    async def fetch_expanded_order(
        self,
        order_id: str,
        expansions: Optional[Sequence[str]] = None,
    ) -> Record:
        """Fetch one order, expanding the given reference paths.

        Args:
            order_id: Order id
            expansions: Reference paths, e.g. ["lineItems[*].supplyChannel"]

        Returns:
            Order as returned by the platform
        """
        await self.ensure_initialized()

        uri = self._builder().orders.by_id(order_id)
        for expansion in expansions or []:
            uri = uri.expand(expansion)

        return await self._execute(uri.build())

    async def fetch_expanded_orders(
        self,
        page: int,
        per_page: int,
        expansions: Optional[Sequence[str]] = None,
        sort: Optional[SortSpec] = None,
    ) -> Record:
        """Fetch one page of orders.

        Args:
            page: 1-based page number
            per_page: Page size
            expansions: Reference paths to expand on every order
            sort: Sort statements, e.g. [SortStatement(by="createdAt", direction="desc")]

        Returns:
            Paged envelope of orders
        """
        await self.ensure_initialized()

        uri = self._builder().orders.page(page).per_page(per_page)
        for expansion in expansions or []:
            uri = uri.expand(expansion)
        uri = self._apply_sort(uri, sort)

        return await self._execute(uri.build())

    async def update_order(self, order_id: str, version: int, actions: Sequence[Payload]) -> Record:
        """Apply update actions (e.g. ChangeOrderStateAction) to an order."""
        await self.ensure_initialized()

        uri = self._builder().orders.by_id(order_id).build()
        body = {"version": version, "actions": self._actions(actions)}

        return await self._execute(uri, method="POST", body=body)

    # Channels

    async def fetch_channel_by_key(self, key: str) -> Optional[Record]:
        await self.ensure_initialized()

        uri = self._builder().channels.where(predicates.key_equals(key)).build()
        return await self._fetch_first(uri)

    async def create_channel(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().channels.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def delete_channel_by_key(self, key: str) -> Record:
        """Look up a channel by key, then delete it at its current version.

        Raises:
            LookupError: If no channel has this key
        """
        await self.ensure_initialized()

        channel = await self.fetch_channel_by_key(key)
        if channel is None:
            raise LookupError(f"Channel with key {key!r} not found")

        uri = self._builder().channels.by_id(channel["id"]).with_version(channel["version"]).build()
        return await self._delete(uri)

    # Custom objects

    async def fetch_custom_objects(
        self,
        page: int,
        per_page: int,
        condition: Optional[str] = None,
        sort: Optional[SortSpec] = None,
    ) -> Record:
        """Fetch one page of custom objects.

        Args:
            page: 1-based page number
            per_page: Page size
            condition: Raw where predicate, passed through unchanged
            sort: Sort statements or a "field [asc|desc]" string

        Returns:
            Paged envelope of custom objects
        """
        await self.ensure_initialized()

        uri = self._builder().custom_objects.page(page).per_page(per_page)
        if condition:
            uri = uri.where(condition)
        uri = self._apply_sort(uri, sort)

        return await self._execute(uri.build())

    async def fetch_custom_object_by_id(self, custom_object_id: str) -> Optional[Record]:
        await self.ensure_initialized()

        uri = self._builder().custom_objects.where(predicates.id_equals(custom_object_id)).build()
        return await self._fetch_first(uri)

    async def fetch_custom_object(self, container: str, key: str) -> Record:
        """Fetch a custom object by container and key."""
        await self.ensure_initialized()

        uri = self._builder().custom_objects.by_container_and_key(container, key).build()
        return await self._execute(uri)

    async def save_custom_object(self, draft: Payload) -> Record:
        """Create or replace the custom object at draft container/key."""
        await self.ensure_initialized()

        uri = self._builder().custom_objects.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def delete_custom_object_by_id(self, custom_object_id: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().custom_objects.by_id(custom_object_id).build()
        return await self._delete(uri)

    # Inventory entries

    async def fetch_inventory_entry(self, sku: str, supply_channel_key: str) -> Optional[Record]:
        """Fetch the inventory entry for a SKU in the channel with the given key.

        Resolves the channel first, then queries inventory by SKU and channel
        id. Returns None when either lookup finds nothing.
        """
        await self.ensure_initialized()

        channel = await self.fetch_channel_by_key(supply_channel_key)
        if channel is None:
            return None

        predicate = predicates.inventory_sku_in_channel(sku, channel["id"])
        uri = self._builder().inventory.where(predicate).build()
        return await self._fetch_first(uri)

    async def fetch_inventory_entries_by_channel_id(self, channel_id: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().inventory.where(predicates.supply_channel(channel_id)).build()
        return await self._execute(uri)

    async def create_inventory_entry(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().inventory.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def delete_inventory_entry(self, inventory_entry_id: str, version: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().inventory.by_id(inventory_entry_id).with_version(version).build()
        return await self._delete(uri)

    # Products

    async def fetch_products(self, page: int, per_page: int, sort: Optional[SortSpec] = None) -> Record:
        await self.ensure_initialized()

        uri = self._builder().products.page(page).per_page(per_page)
        uri = self._apply_sort(uri, sort)

        return await self._execute(uri.build())

    async def fetch_product_by_id(self, product_id: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().products.by_id(product_id).build()
        return await self._execute(uri)

    async def fetch_product_by_ean(self, ean: str) -> Optional[Record]:
        """Product whose current master variant has attribute ``ean`` = ean."""
        await self.ensure_initialized()

        predicate = predicates.master_variant_attribute("ean", ean)
        uri = self._builder().products.where(predicate).build()
        return await self._fetch_first(uri)

    async def fetch_product_by_product_code(self, product_code: str) -> Optional[Record]:
        """Product whose current master variant has attribute ``productCode`` = product_code."""
        await self.ensure_initialized()

        predicate = predicates.master_variant_attribute("productCode", product_code)
        uri = self._builder().products.where(predicate).build()
        return await self._fetch_first(uri)

    async def fetch_product_by_variant_sku(self, sku: str) -> Optional[Record]:
        await self.ensure_initialized()

        uri = self._builder().products.where(predicates.master_variant_sku(sku)).build()
        return await self._fetch_first(uri)

    async def create_product(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().products.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    # Product projections (search)

    async def fetch_product_projection_marked_by_sku(self, sku: str) -> Optional[Record]:
        """First projection with a variant matching ``sku``, matching variant flagged."""
        await self.ensure_initialized()

        uri = (
            self._builder()
            .product_projections_search.filter_by_query(predicates.search_variant_sku(sku))
            .mark_matching_variants()
            .page(1)
            .per_page(1)
            .build()
        )
        return await self._fetch_first(uri)

    async def search_product_projections(
        self,
        search_term: str,
        locale: Optional[str] = None,
        filter_by_product_type_key: Optional[str] = None,
    ) -> Record:
        """Full-text search over product projections.

        Args:
            search_term: Free text to search for
            locale: Language of the text, defaults to the configured locale
            filter_by_product_type_key: Restrict hits to this product type;
                costs one extra request to resolve the type id

        Returns:
            Paged search envelope
        """
        await self.ensure_initialized()

        uri = (
            self._builder()
            .product_projections_search.mark_matching_variants()
            .text(search_term, locale or self.locale)
        )

        if filter_by_product_type_key:
            product_type = await self.fetch_product_type_by_key(filter_by_product_type_key)
            uri = uri.filter_by_query(predicates.search_product_type(product_type["id"]))

        return await self._execute(uri.build())

    async def get_possible_values_for_attribute(self, attribute_name: str) -> list[Any]:
        """All values of a variant attribute across the catalog, from a terms facet."""
        await self.ensure_initialized()

        facet_selector = predicates.attribute_facet(attribute_name)
        uri = (
            self._builder()
            .product_projections_search.facet(facet_selector)
            .page(1)
            .per_page(1)
            .build()
        )

        body = await self._execute(uri)
        return [entry["term"] for entry in body["facets"][facet_selector]["terms"]]

    # Product types

    async def fetch_product_type_by_key(self, key: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().product_types.by_key(key).build()
        return await self._execute(uri)

    async def create_product_type(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().product_types.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def update_product_type(self, key_or_product_type: Any, actions: Sequence[Payload]) -> Record:
        """Apply update actions (e.g. AddAttributeAction) to a product type.

        Args:
            key_or_product_type: Product type key (version is fetched first),
                a fetched product type, or ByKey/ByEntity
            actions: Update actions, applied in order

        Returns:
            Updated product type
        """
        await self.ensure_initialized()

        ref = await self.resolve_key_and_version(key_or_product_type, self.fetch_product_type_by_key)

        uri = self._builder().product_types.by_key(ref.key).with_version(ref.version).build()
        body = {"version": ref.version, "actions": self._actions(actions)}

        return await self._execute(uri, method="POST", body=body)

    async def delete_product_type(self, key_or_product_type: Any) -> Record:
        await self.ensure_initialized()

        ref = await self.resolve_key_and_version(key_or_product_type, self.fetch_product_type_by_key)

        uri = self._builder().product_types.by_key(ref.key).with_version(ref.version).build()
        return await self._delete(uri)

    # Carts

    async def fetch_carts(self, page: int, per_page: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().carts.page(page).per_page(per_page).build()
        return await self._execute(uri)

    # Categories

    async def fetch_categories(self, page: int, per_page: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().categories.page(page).per_page(per_page).build()
        return await self._execute(uri)

    async def fetch_category_by_id(self, category_id: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().categories.by_id(category_id).build()
        return await self._execute(uri)

    # Custom types

    async def fetch_custom_types(self, page: int, per_page: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().types.page(page).per_page(per_page).build()
        return await self._execute(uri)

    async def create_custom_type(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().types.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def delete_custom_type(self, custom_type_id: str, version: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().types.by_id(custom_type_id).with_version(version).build()
        return await self._delete(uri)

    # Extensions

    async def fetch_extensions(self, page: int, per_page: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().extensions.page(page).per_page(per_page).build()
        return await self._execute(uri)

    async def fetch_extension_by_id(self, extension_id: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().extensions.by_id(extension_id).build()
        return await self._execute(uri)

    async def create_extension(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().extensions.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def delete_extension(self, extension_id: str, version: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().extensions.by_id(extension_id).with_version(version).build()
        return await self._delete(uri)

    # Subscriptions

    async def fetch_subscriptions(self, page: int, per_page: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().subscriptions.page(page).per_page(per_page).build()
        return await self._execute(uri)

    async def fetch_subscription_by_id(self, subscription_id: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().subscriptions.by_id(subscription_id).build()
        return await self._execute(uri)

    async def create_subscription(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().subscriptions.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def delete_subscription(self, subscription_id: str, version: int) -> Record:
        await self.ensure_initialized()

        uri = self._builder().subscriptions.by_id(subscription_id).with_version(version).build()
        return await self._delete(uri)

    # Tax categories

    async def fetch_tax_category_by_key(self, key: str) -> Record:
        await self.ensure_initialized()

        uri = self._builder().tax_categories.by_key(key).build()
        return await self._execute(uri)

    async def create_tax_category(self, draft: Payload) -> Record:
        await self.ensure_initialized()

        uri = self._builder().tax_categories.build()
        return await self._execute(uri, method="POST", body=self._payload(draft))

    async def delete_tax_category(self, key_or_tax_category: Any) -> Record:
        """Delete a tax category at its current version.

        Args:
            key_or_tax_category: Tax category key (version is fetched first),
                a fetched tax category, or ByKey/ByEntity
        """
        await self.ensure_initialized()

        ref = await self.resolve_key_and_version(key_or_tax_category, self.fetch_tax_category_by_key)

        uri = self._builder().tax_categories.by_key(ref.key).with_version(ref.version).build()
        return await self._delete(uri)
