# truckorder/api/menu_store.py
from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import jsonschema
import yaml

from . import settings

logger = logging.getLogger(__name__)

MENUS_DIR = Path(__file__).resolve().parent / "menus"
DEFAULT_MENU_PATH = MENUS_DIR / "food_truck.yaml"
MENU_SCHEMA_PATH = MENUS_DIR / "menu.schema.json"


class CatalogError(ValueError):
    """Raised when menu data cannot form a valid catalog."""


@dataclass(frozen=True)
class MenuItem:
    id: int
    name: str
    price: float
    category: str
    description: str
    keywords: Tuple[str, ...]


@dataclass(frozen=True)
class MenuCatalog:
    """
    Read-only, ordered collection of orderable items.
    Catalog order is match order.
    """

    items: Tuple[MenuItem, ...]

    def __post_init__(self) -> None:
        # normalize lists -> tuple so the catalog cannot be mutated through `items`
        object.__setattr__(self, "items", tuple(self.items))

        errors: List[str] = []
        seen_ids = set()
        for it in self.items:
            if it.id in seen_ids:
                errors.append(f"duplicate id: {it.id}")
            seen_ids.add(it.id)
            if not it.name:
                errors.append(f"{it.id}: missing name")
            if it.price < 0:
                errors.append(f"{it.id}: price must be >= 0")
            if isinstance(it.keywords, str) or not isinstance(it.keywords, (list, tuple)):
                errors.append(f"{it.id}: keywords must be a list of strings")
            elif not it.keywords:
                errors.append(f"{it.id}: keywords must not be empty")
            elif any(not isinstance(k, str) or not k.strip() for k in it.keywords):
                # "" is a substring of every utterance
                errors.append(f"{it.id}: keywords must not be blank")
        if errors:
            raise CatalogError("Menu validation failed:\n" + "\n".join(errors))

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def get(self, item_id: int) -> Optional[MenuItem]:
        for it in self.items:
            if it.id == item_id:
                return it
        return None

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "MenuCatalog":
        return cls(items=tuple(_to_item(r) for r in records))


def _to_item(d: Dict[str, Any]) -> MenuItem:
    raw_kws = d.get("keywords") if isinstance(d, dict) else None
    if not isinstance(raw_kws, (list, tuple)) or not all(isinstance(k, str) for k in raw_kws):
        # a bare "corn" would otherwise split into ('c', 'o', 'r', 'n')
        raise CatalogError(f"invalid menu item {d!r}: keywords must be a list of strings")
    try:
        return MenuItem(
            id=int(d["id"]),
            name=str(d["name"]).strip(),
            price=float(d["price"]),
            category=str(d.get("category") or ""),
            description=str(d.get("description") or ""),
            keywords=tuple(str(k).strip().lower() for k in raw_kws),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogError(f"invalid menu item {d!r}: {e}") from e


# -------------------------
# File loading
# -------------------------
def _read_document(p: Path) -> Any:
    raw = p.read_text(encoding="utf-8")
    if p.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(raw)
    return json.loads(raw)


def _schema() -> Dict[str, Any]:
    return json.loads(MENU_SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_document(data: Any) -> List[str]:
    """Returns schema errors as readable strings; empty list means valid."""
    validator = jsonschema.Draft7Validator(_schema())
    errors: List[str] = []
    for err in sorted(validator.iter_errors(data), key=lambda e: [str(x) for x in e.path]):
        loc = "/".join(str(x) for x in err.path) or "<root>"
        errors.append(f"{loc}: {err.message}")
    return errors


def load_catalog(path: Union[str, Path]) -> MenuCatalog:
    """
    Loads a menu document (.json, .yaml or .yml):

      items:
        - id: 1
          name: Classic Burger
          price: 12.99
          category: burgers
          description: ...
          keywords: [burger, classic, beef]
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing {p}")

    try:
        data = _read_document(p)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot parse menu file {p}: {e}") from e

    errors = validate_document(data)
    if errors:
        raise CatalogError(f"Menu validation failed for {p}:\n" + "\n".join(errors))

    catalog = MenuCatalog.from_records(data["items"])
    logger.info("Loaded menu catalog path=%s items=%d", p, len(catalog))
    return catalog


_cache: Dict[Path, MenuCatalog] = {}
_cache_lock = threading.Lock()


def default_catalog() -> MenuCatalog:
    """
    The process-wide catalog: MENU_PATH when set, else the bundled food-truck
    menu. Loaded once per path.
    """
    p = Path(settings.MENU_PATH).resolve() if settings.MENU_PATH else DEFAULT_MENU_PATH
    with _cache_lock:
        cached = _cache.get(p)
        if cached is None:
            cached = load_catalog(p)
            _cache[p] = cached
        return cached
