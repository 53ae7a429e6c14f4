"""Tests for the request URI builder and query predicates."""

import pytest

from commerce_client.schemas.common import SortStatement
from commerce_client.services.platform import predicates
from commerce_client.services.platform.errors import InvalidArgumentError
from commerce_client.services.platform.request_builder import SearchBuilder, create_request_builder


@pytest.fixture
def builder():
    return create_request_builder("my-project")


class TestServiceBuilder:
    """Tests for collection and single-resource URIs."""

    def test_collection(self, builder):
        assert builder.products.build() == "/my-project/products"

    def test_where_and_paging(self, builder):
        """Should encode the predicate and turn page/per_page into limit/offset."""
        uri = builder.products.where('key="shirt"').page(2).per_page(20).build()

        assert uri == "/my-project/products?where=key%3D%22shirt%22&limit=20&offset=20"

    def test_page_without_per_page_uses_default(self, builder):
        assert builder.carts.page(3).build() == "/my-project/carts?offset=40"

    def test_by_id_and_version(self, builder):
        uri = builder.inventory.by_id("inv-1").with_version(4).build()

        assert uri == "/my-project/inventory/inv-1?version=4"

    def test_by_key(self, builder):
        uri = builder.product_types.by_key("pt-1").with_version(2).build()

        assert uri == "/my-project/product-types/key=pt-1?version=2"

    def test_by_container_and_key(self, builder):
        uri = builder.custom_objects.by_container_and_key("settings", "main").build()

        assert uri == "/my-project/custom-objects/settings/main"

    def test_expand_and_sort(self, builder):
        uri = (
            builder.orders.expand("lineItems[*].supplyChannel")
            .sort("createdAt", ascending=False)
            .build()
        )

        assert uri == (
            "/my-project/orders?expand=lineItems%5B%2A%5D.supplyChannel"
            "&sort=createdAt%20desc"
        )

    def test_parse_options(self, builder):
        """Should accept sort statements as models or dicts."""
        uri = builder.orders.parse(
            {
                "sort": [SortStatement(by="createdAt", direction="desc"), {"by": "id", "direction": "asc"}],
                "page": 1,
                "perPage": 5,
            }
        ).build()

        assert uri == "/my-project/orders?sort=createdAt%20desc&sort=id%20asc&limit=5&offset=0"

    def test_each_access_returns_fresh_builder(self, builder):
        builder.products.where('key="a"')

        assert builder.products.build() == "/my-project/products"

    def test_unknown_resource(self, builder):
        with pytest.raises(AttributeError):
            builder.wishlists

    def test_invalid_page(self, builder):
        with pytest.raises(ValueError):
            builder.products.page(0)

    def test_invalid_version(self, builder):
        with pytest.raises(ValueError):
            builder.products.by_id("p-1").with_version("3")


class TestSearchBuilder:
    """Tests for the product projection search endpoint."""

    def test_is_search_builder(self, builder):
        assert isinstance(builder.product_projections_search, SearchBuilder)

    def test_text_and_mark_matching_variants(self, builder):
        uri = builder.product_projections_search.mark_matching_variants().text("red shirt", "en").build()

        assert uri == "/my-project/product-projections/search?text.en=red%20shirt&markMatchingVariants=true"

    def test_filter_query_and_facet(self, builder):
        uri = (
            builder.product_projections_search.filter_by_query('productType.id:"pt-1"')
            .facet("variants.attributes.color")
            .page(1)
            .per_page(1)
            .build()
        )

        assert uri == (
            "/my-project/product-projections/search?limit=1&offset=0"
            "&facet=variants.attributes.color"
            "&filter.query=productType.id%3A%22pt-1%22"
        )


class TestPredicates:
    """Tests for predicate rendering and value escaping."""

    def test_quote_escapes_quotes_and_backslashes(self):
        assert predicates.quote('say "hi"') == '"say \\"hi\\""'
        assert predicates.quote("a\\b") == '"a\\\\b"'

    def test_injection_stays_inside_literal(self):
        """A crafted key must not add clauses to the predicate."""
        predicate = predicates.key_equals('x" or key="y')

        assert predicate == 'key="x\\" or key=\\"y"'

    def test_inventory_sku_in_channel(self):
        predicate = predicates.inventory_sku_in_channel("S", "c1")

        assert predicate == 'sku="S" and supplyChannel(typeId="channel" and id="c1")'

    def test_master_variant_attribute(self):
        predicate = predicates.master_variant_attribute("ean", "4006381333931")

        assert predicate == (
            'masterData(current(masterVariant(attributes(name="ean" and value="4006381333931"))))'
        )

    def test_search_filters(self):
        assert predicates.search_variant_sku("SKU-1") == 'variants.sku:"SKU-1"'
        assert predicates.search_product_type("pt-1") == 'productType.id:"pt-1"'

    def test_attribute_facet(self):
        assert predicates.attribute_facet("color") == "variants.attributes.color"

    def test_attribute_facet_allows_sub_field(self):
        assert predicates.attribute_facet("color.key") == "variants.attributes.color.key"

    @pytest.mark.parametrize("name", ["color.", ".key", "color..key", "color key", 'color"'])
    def test_attribute_facet_rejects_malformed_path(self, name):
        with pytest.raises(InvalidArgumentError):
            predicates.attribute_facet(name)

    def test_attribute_facet_rejects_expression(self):
        with pytest.raises(InvalidArgumentError):
            predicates.attribute_facet("color:missing")
