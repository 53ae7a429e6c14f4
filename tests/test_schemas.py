"""Tests for platform resource schemas."""

import pytest
from pydantic import ValidationError

from commerce_client.schemas import (
    Channel,
    CustomObjectDraft,
    ExtensionDraft,
    HttpDestination,
    InventoryEntryDraft,
    PagedQueryResult,
    ProductDraft,
    ResourceIdentifier,
    TermFacetResult,
)


class TestPayloads:
    """Tests for request payload serialization."""

    def test_product_draft_uses_camel_case_and_drops_none(self):
        draft = ProductDraft(
            name={"en": "Shirt"},
            slug={"en": "shirt"},
            product_type=ResourceIdentifier(type_id="product-type", key="shirts"),
        )

        assert draft.to_payload() == {
            "name": {"en": "Shirt"},
            "slug": {"en": "shirt"},
            "productType": {"typeId": "product-type", "key": "shirts"},
        }

    def test_inventory_entry_draft(self):
        draft = InventoryEntryDraft(
            sku="S",
            quantity_on_stock=5,
            supply_channel=ResourceIdentifier(type_id="channel", id="c1"),
        )

        assert draft.to_payload() == {
            "sku": "S",
            "quantityOnStock": 5,
            "supplyChannel": {"typeId": "channel", "id": "c1"},
        }

    def test_extension_destination_is_discriminated(self):
        draft = ExtensionDraft.model_validate(
            {
                "destination": {"type": "HTTP", "url": "https://hooks.test/orders"},
                "triggers": [{"resourceTypeId": "order", "actions": ["Create"]}],
            }
        )

        assert isinstance(draft.destination, HttpDestination)

    def test_custom_object_key_pattern(self):
        with pytest.raises(ValidationError):
            CustomObjectDraft(container="settings", key="has space", value=1)


class TestRecords:
    """Tests for validating platform responses."""

    def test_paged_query_result(self):
        result = PagedQueryResult[Channel].model_validate(
            {
                "offset": 0,
                "limit": 20,
                "count": 1,
                "total": 1,
                "results": [{"id": "c1", "version": 3, "key": "warehouse", "roles": ["InventorySupply"]}],
            }
        )

        assert result.results[0].key == "warehouse"
        assert result.results[0].roles == ["InventorySupply"]

    def test_unknown_fields_are_kept(self):
        channel = Channel.model_validate({"id": "c1", "version": 1, "key": "wh", "geoLocation": {"type": "Point"}})

        assert channel.model_dump(by_alias=True, exclude_none=True)["geoLocation"] == {"type": "Point"}

    def test_term_facet_result(self):
        facet = TermFacetResult.model_validate(
            {"type": "terms", "dataType": "text", "total": 4, "terms": [{"term": "red", "count": 3}]}
        )

        assert facet.terms[0].term == "red"
        assert facet.data_type == "text"
