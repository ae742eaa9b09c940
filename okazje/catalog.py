#!/usr/bin/env python3
from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from okazje.errors.exceptions import CatalogError
from okazje.utils.async_helpers import call_threadsafe
from okazje.utils.currency import calculate_discount, convert_to_pln
from okazje.utils.time_helpers import to_iso

log = logging.getLogger("okazje.mcp")

# Table types
Deals = List[Dict[str, Any]]
Products = List[Dict[str, Any]]
Users = List[Dict[str, Any]]

TABLES = ("deals", "products", "users")
PRICE_FIELDS = ("price", "originalPrice", "shippingCost")
TIMESTAMP_FIELDS = ("postedAt", "createdAt", "updatedAt")


@dataclass
class CatalogSnapshot:
    """Immutable-ish snapshot of the catalog tables."""
    ts: float
    deals: Deals = field(default_factory=list)
    products: Products = field(default_factory=list)
    users: Users = field(default_factory=list)

    def table(self, name: str) -> List[Dict[str, Any]]:
        if name not in TABLES:
            raise KeyError(name)
        return getattr(self, name)


# ----------------------------
# Ingestion
# ----------------------------
def _normalize_prices(record: Dict[str, Any]) -> None:
    currency = record.get("currency")
    if not currency or str(currency).upper() == "PLN":
        return
    for key in PRICE_FIELDS:
        value = record.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            record[key] = convert_to_pln(value, currency)
    record["currency"] = "PLN"


def _normalize_timestamps(record: Dict[str, Any]) -> None:
    for key in TIMESTAMP_FIELDS:
        value = record.get(key)
        if value is None or isinstance(value, str):
            continue
        iso = to_iso(value)
        # unrecognised or out-of-range values are kept as they came
        if iso is not None:
            record[key] = iso


def normalize_record(table: str, raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy a raw catalog record into its served shape.

    Prices in foreign currencies become PLN, timestamps become ISO-8601 strings
    and deals get a computed ``discountPercent`` column.
    """
    record = dict(raw)
    if table in ("deals", "products"):
        _normalize_prices(record)
    _normalize_timestamps(record)
    if table == "deals":
        record["discountPercent"] = calculate_discount(record.get("originalPrice"), record.get("price"))
    return record


def load_catalog_file(path: str) -> Dict[str, List[Dict[str, Any]]]:
    """
    Read and normalize the catalog JSON document.

    Args:
        path: Path to a JSON object with optional "deals", "products" and "users" arrays

    Returns:
        Dictionary of normalized record lists per table

    Raises:
        CatalogError: If the file is not valid JSON or has the wrong shape
    """
    p = Path(path)
    if not p.exists():
        log.warning("Catalog file %s not found; serving empty tables", path)
        return {name: [] for name in TABLES}

    try:
        doc = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    if not isinstance(doc, dict):
        raise CatalogError(f"Catalog {path} must be a JSON object")

    out: Dict[str, List[Dict[str, Any]]] = {}
    for name in TABLES:
        rows = doc.get(name) or []
        if not isinstance(rows, list):
            raise CatalogError(f"Catalog table '{name}' must be a list")
        out[name] = [normalize_record(name, r) for r in rows if isinstance(r, dict)]
    return out


class CatalogCache:
    """
    Async cache that periodically reloads the catalog.
    - Readers are lock-free: they take the current snapshot reference
    - The refresher builds a complete new snapshot and swaps it under one lock
    - A failed refresh keeps the previous snapshot and is retried on the next tick
    """

    def __init__(self, interval_seconds: int = 300) -> None:
        self._interval = max(1, int(interval_seconds))

        self._snap: CatalogSnapshot = CatalogSnapshot(ts=0.0)
        self._rw_lock = asyncio.Lock()

        self._refresh_task: Optional[asyncio.Task] = None
        self._stop_event = asyncio.Event()

        # loader returns {"deals": [...], "products": [...], "users": [...]}
        self._loader: Optional[Callable[[], Dict[str, List[Dict[str, Any]]]]] = None

    # ----------------------------
    # Lifecycle
    # ----------------------------
    def wire_loader(self, loader: Callable[[], Dict[str, List[Dict[str, Any]]]]) -> None:
        """Provide the blocking catalog loader (run in a worker thread)."""
        self._loader = loader

    async def start(self) -> None:
        if self._refresh_task is None:
            self._stop_event.clear()
            self._refresh_task = asyncio.create_task(self._periodic_refresh_loop())

    async def stop(self) -> None:
        if self._refresh_task:
            self._stop_event.set()
            try:
                await asyncio.wait_for(self._refresh_task, timeout=5)
            except asyncio.TimeoutError:
                self._refresh_task.cancel()
            self._refresh_task = None

    # ----------------------------
    # Readers
    # ----------------------------
    def snapshot(self) -> CatalogSnapshot:
        return self._snap

    def has_data(self) -> bool:
        s = self._snap
        return s.ts > 0 or bool(s.deals or s.products or s.users)

    # ----------------------------
    # Background refresh
    # ----------------------------
    async def _periodic_refresh_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                await self.refresh_once()
            except Exception:
                log.exception("Catalog refresh failed; keeping previous snapshot")
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                pass

    async def refresh_once(self) -> CatalogSnapshot:
        """Load the catalog once and publish it as the current snapshot."""
        if not self._loader:
            return self._snap
        tables = await call_threadsafe(self._loader)
        snap = CatalogSnapshot(
            ts=time.time(),
            deals=list(tables.get("deals", [])),
            products=list(tables.get("products", [])),
            users=list(tables.get("users", [])),
        )
        async with self._rw_lock:
            self._snap = snap
        log.debug("Catalog refreshed: %d deals, %d products, %d users",
                  len(snap.deals), len(snap.products), len(snap.users))
        return snap
