"""Click-log aggregation for facet extraction.

Raw log entries are reduced to a one-line summary that is sent to the model,
and the model's reply is decoded into four independent facet lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from aiservice import logger as logger_mod

from . import normalize
from ._schema import invalid_click_fields, validate_click_entry
from .fields import (
    BRANDS,
    CATEGORIES,
    PRICE_RANGES,
    STORES,
    extract_field,
    format_fields,
)

log = logger_mod.get_logger()

Price = Union[int, float]

_CLICK_KEYS = ("title", "source", "price")


@dataclass(frozen=True)
class ClickRecord:
    title: str = ""
    source: str = ""
    price: Price = 0

    @classmethod
    def from_log_entry(cls, entry: Mapping[str, Any]) -> "ClickRecord":
        """Read title/source/price from a click log entry.

        Fields are taken from the entry's ``params`` mapping, or from the entry
        itself when it has no ``params``. Missing, empty or mistyped values fall
        back to the defaults.
        """
        validate_click_entry(entry)

        params = entry.get("params")
        if params is None and any(k in entry for k in _CLICK_KEYS):
            params = entry
        if not isinstance(params, Mapping):
            params = {}
        params = {k: params.get(k) for k in _CLICK_KEYS}

        bad = invalid_click_fields(params)
        if bad:
            log.debug(f"Defaulting mistyped click fields {sorted(bad)}")

        def value(key: str, default):
            v = params[key]
            return default if key in bad or not v else v

        return cls(
            title=value("title", ""),
            source=value("source", ""),
            price=value("price", 0),
        )

    def is_empty(self) -> bool:
        return not self.title and not self.source

    def render(self) -> str:
        price = self.price
        if isinstance(price, float) and price.is_integer():
            price = int(price)
        return f"Title: {self.title}, Store: {self.source}, Price: ${price}"


@dataclass(frozen=True)
class FacetExtraction:
    categories: list[str] = field(default_factory=list)
    brands: list[str] = field(default_factory=list)
    price_ranges: list[str] = field(default_factory=list)
    stores: list[str] = field(default_factory=list)

    def to_text(self) -> str:
        facets = {
            CATEGORIES: self.categories,
            BRANDS: self.brands,
            PRICE_RANGES: self.price_ranges,
            STORES: self.stores,
        }
        return format_fields({name: ",".join(v) for name, v in facets.items() if v})


def to_click_records(
    entries: Iterable[Union[ClickRecord, Mapping[str, Any]]],
) -> list[ClickRecord]:
    return [
        e if isinstance(e, ClickRecord) else ClickRecord.from_log_entry(e)
        for e in entries
    ]


def summarize_clicks(records: Iterable[ClickRecord]) -> str:
    """Render non-empty records as ``Title: .., Store: .., Price: $..`` joined by ``"; "``."""
    return "; ".join(r.render() for r in records if not r.is_empty())


def decode_facets(completion: Optional[str]) -> FacetExtraction:
    """Decode each facet independently; a missing facet only empties itself."""
    return FacetExtraction(
        categories=normalize.to_list(extract_field(completion, CATEGORIES)),
        brands=normalize.to_list(extract_field(completion, BRANDS)),
        price_ranges=normalize.to_list(extract_field(completion, PRICE_RANGES)),
        stores=normalize.to_list(extract_field(completion, STORES)),
    )
