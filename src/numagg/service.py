# orchestration on top of the pure reducers
# parse catalog payloads into value objects, summarize series, and a compute_all coordinator
# that summarizes any dict of named series on a ThreadPoolExecutor

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence
from .helpers import average, biggest
from .models import Laptop, Price, SeriesSummary
from .client import CatalogClient

logger = logging.getLogger(__name__)

# transform raw catalog payload into typed value objects and check shape
def parse_laptops(payload) -> List[Laptop]:
    # accepts the whole db.json document or the bare "laptops" array a json-server returns
    if isinstance(payload, dict):
        payload = payload.get("laptops")
    if not isinstance(payload, list):
        raise ValueError("Unsupported payload shape for parse_laptops()")

    try:
        return [
            Laptop(
                name=item["name"],
                price=Price(amount=float(item["price"]["amount"]),
                            currency=item["price"]["currency"]),
                only_has_usb_type_c=bool(item["onlyHasUSBTypeC"]),
                built_in_apps=tuple(item.get("builtInApps", ())),
            )
            for item in payload
        ]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed laptop record: {exc!r}") from exc

def find_laptop(laptops: Sequence[Laptop], name: str) -> Optional[Laptop]:
    return next((laptop for laptop in laptops if laptop.name == name), None)

def summarize(name: str, values: Sequence[float]) -> SeriesSummary:
    # small on purpose, this is what gets submitted to the thread pool
    return SeriesSummary(name=name, average=average(values), biggest=biggest(values))

def compute_all(series: Dict[str, Sequence[float]], max_workers: int = 3) -> List[SeriesSummary]:
    results: List[SeriesSummary] = []

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {
            pool.submit(summarize, name, values): name
            for name, values in series.items()
        }
        for fut in as_completed(futures):
            # exceptions propagate to the caller
            results.append(fut.result())

    logger.debug("summarized %d series", len(results))
    # stable ordering so output is deterministic, case-only name differences included
    return sorted(results, key=lambda x: (x.name.lower(), x.name))

def price_summary(client: CatalogClient) -> SeriesSummary:
    laptops = parse_laptops(client.get_laptops())
    return summarize("laptops", [laptop.price.amount for laptop in laptops])
