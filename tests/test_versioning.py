"""Tests for key/version resolution."""

from unittest.mock import AsyncMock

import pytest

from commerce_client.schemas.product_types import ProductType
from commerce_client.services.platform.errors import InvalidArgumentError
from commerce_client.services.platform.versioning import (
    ByEntity,
    ByKey,
    coerce_key_or_entity,
    resolve_key_and_version,
)


class TestCoerceKeyOrEntity:
    """Tests for turning caller input into ByKey / ByEntity."""

    def test_string_is_key(self):
        assert coerce_key_or_entity("pt-1") == ByKey("pt-1")

    def test_mapping_is_entity(self):
        assert coerce_key_or_entity({"key": "pt-1", "version": 3, "id": "x"}) == ByEntity("pt-1", 3)

    def test_model_is_entity(self):
        product_type = ProductType.model_validate(
            {
                "id": "pt-id",
                "version": 5,
                "key": "pt-1",
                "name": "Shirt",
                "description": "Shirts",
                "createdAt": "2024-01-01T00:00:00.000Z",
                "lastModifiedAt": "2024-01-02T00:00:00.000Z",
            }
        )

        assert coerce_key_or_entity(product_type) == ByEntity("pt-1", 5)

    def test_variants_pass_through(self):
        ref = ByEntity("pt-1", 2)

        assert coerce_key_or_entity(ref) is ref

    @pytest.mark.parametrize(
        "value",
        [42, None, "", {"key": "pt-1"}, {"version": 3}, {"key": "pt-1", "version": "3"}, {"key": "pt-1", "version": True}],
    )
    def test_invalid_values(self, value):
        with pytest.raises(InvalidArgumentError, match="Invalid value for key_or_entity"):
            coerce_key_or_entity(value)


class TestResolveKeyAndVersion:
    """Tests for the fast (entity) and slow (key lookup) paths."""

    async def test_entity_needs_no_lookup(self):
        fetch = AsyncMock()

        ref = await resolve_key_and_version({"key": "pt-1", "version": 3}, fetch)

        assert (ref.key, ref.version) == ("pt-1", 3)
        fetch.assert_not_awaited()

    async def test_key_is_looked_up_once(self):
        fetch = AsyncMock(return_value={"id": "pt-id", "key": "pt-1", "version": 7})

        ref = await resolve_key_and_version("pt-1", fetch)

        assert (ref.key, ref.version) == ("pt-1", 7)
        fetch.assert_awaited_once_with("pt-1")

    async def test_lookup_finds_nothing(self):
        fetch = AsyncMock(return_value=None)

        with pytest.raises(LookupError):
            await resolve_key_and_version("missing", fetch)

    async def test_invalid_input_does_not_fetch(self):
        fetch = AsyncMock()

        with pytest.raises(InvalidArgumentError):
            await resolve_key_and_version(42, fetch)

        fetch.assert_not_awaited()
