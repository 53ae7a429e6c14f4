"""Query predicates for the platform's filter language.

Caller values are always passed through ``quote`` so a value containing
``"`` or ``\\`` cannot close the string literal and inject extra clauses.
Whole predicates handed in by callers (``condition`` arguments) are not
touched.
"""

from typing import Any
import re

from commerce_client.services.platform.errors import InvalidArgumentError

# Attribute name, optionally followed by a sub-field such as "color.key"
ATTRIBUTE_PATH = re.compile(r"[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+)*")


def quote(value: Any) -> str:
    """Render ``value`` as a double-quoted, escaped predicate literal."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def key_equals(key: str) -> str:
    return f"key={quote(key)}"


def id_equals(resource_id: str) -> str:
    return f"id={quote(resource_id)}"


def supply_channel(channel_id: str) -> str:
    return f'supplyChannel(typeId="channel" and id={quote(channel_id)})'


def inventory_sku_in_channel(sku: str, channel_id: str) -> str:
    """Inventory entries for one SKU held in one supply channel."""
    return f"sku={quote(sku)} and {supply_channel(channel_id)}"


def master_variant_attribute(name: str, value: Any) -> str:
    """Products whose current master variant has attribute ``name`` equal to ``value``."""
    return (
        "masterData(current(masterVariant(attributes("
        f"name={quote(name)} and value={quote(value)}))))"
    )


def master_variant_sku(sku: str) -> str:
    return f"masterData(current(masterVariant(sku={quote(sku)})))"


# Search filter expressions (product projection search)


def search_variant_sku(sku: str) -> str:
    return f"variants.sku:{quote(sku)}"


def search_product_type(product_type_id: str) -> str:
    return f"productType.id:{quote(product_type_id)}"


def attribute_facet(attribute_name: str) -> str:
    """Facet selector enumerating the values of one variant attribute."""
    if not ATTRIBUTE_PATH.fullmatch(attribute_name or ""):
        raise InvalidArgumentError(f"Invalid attribute name for facet: {attribute_name!r}")
    return f"variants.attributes.{attribute_name}"
