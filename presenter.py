"""
Presentation Binder.
Pure mapping from a fetched payload to a toolkit-independent description of
the five visual regions. Nothing here touches the DOM; app.DomView applies
the description.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import MSG_MALFORMED, PLACEHOLDER_IMAGE, STAT_MAX, STAT_SLOTS
from fetch_gateway import FetchError


class MalformedRecord(FetchError):
    def __init__(self, detail: str):
        super().__init__(f"{MSG_MALFORMED} ({detail})")
        self.detail = detail


# ---
# 1. RECORD
# ---

@dataclass(frozen=True)
class Category:
    name: str


@dataclass(frozen=True)
class Attribute:
    name: str
    value: int


@dataclass(frozen=True)
class Record:
    id: int
    name: str
    categories: Tuple[Category, ...]
    attributes: Tuple[Attribute, ...]
    artwork_url: Optional[str] = None
    sprite_url: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict) -> "Record":
        """Reads the PokeAPI /pokemon/{id} shape. Raises MalformedRecord."""
        try:
            record_id = _require_int(payload["id"], "id")
            name = _require_str(payload["name"], "name")
            categories = tuple(
                Category(_require_str(t["type"]["name"], "type name")) for t in payload.get("types") or []
            )
            attributes = tuple(
                Attribute(_require_str(s["stat"]["name"], "stat name"), _require_int(s["base_stat"], "base_stat"))
                for s in payload.get("stats") or []
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedRecord(f"missing or invalid field {e}") from e

        if not categories:
            raise MalformedRecord("no types")
        if len(attributes) < len(STAT_SLOTS):
            raise MalformedRecord(f"{len(attributes)} stats")

        sprites = _optional_dict(payload.get("sprites"), "sprites")
        other = _optional_dict(sprites.get("other"), "sprites.other")
        artwork = _optional_dict(other.get("official-artwork"), "official-artwork")
        return cls(
            id=record_id,
            name=name,
            categories=categories,
            attributes=attributes,
            artwork_url=_optional_url(artwork.get("front_default")),
            sprite_url=_optional_url(sprites.get("front_default")),
        )


def _require_int(value, field: str) -> int:
    # bool is an int subclass; floats are not truncated
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{field}' must be an integer, got {value!r}")
    return value


def _require_str(value, field: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{field}' must be a string, got {value!r}")
    return value


def _optional_dict(value, field: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MalformedRecord(f"'{field}' must be an object")
    return value


def _optional_url(value) -> Optional[str]:
    return value if isinstance(value, str) and value else None


# ---
# 2. VISUAL DESCRIPTION
# ---

@dataclass(frozen=True)
class ImageView:
    src: str
    alt: str


@dataclass(frozen=True)
class BadgeView:
    text: str
    css_class: str
    hidden: bool = False


@dataclass(frozen=True)
class StatBarView:
    name: str
    width_percent: float
    value_text: str


@dataclass(frozen=True)
class VisualDescription:
    image: ImageView
    name_text: str
    id_text: str
    badges: Tuple[BadgeView, BadgeView]
    stat_bars: Tuple[StatBarView, ...]


HIDDEN_BADGE = BadgeView(text="", css_class="type-badge", hidden=True)


def image_url_for(record: Record) -> str:
    return record.artwork_url or record.sprite_url or PLACEHOLDER_IMAGE


def format_id(n: int) -> str:
    return f"#{n:03d}"


def stat_percentage(value: int) -> float:
    return min(value / STAT_MAX * 100, 100)


def type_css_class(category: Category) -> str:
    return f"type-badge type-{category.name}"


def _badge(category: Category) -> BadgeView:
    return BadgeView(text=category.name.upper(), css_class=type_css_class(category))


def describe_record(record: Record) -> VisualDescription:
    badges: List[BadgeView] = [_badge(record.categories[0])]
    if len(record.categories) > 1:
        badges.append(_badge(record.categories[1]))
    else:
        badges.append(HIDDEN_BADGE)

    bars = tuple(
        StatBarView(name=attr.name, width_percent=stat_percentage(attr.value), value_text=str(attr.value))
        for attr in record.attributes[:len(STAT_SLOTS)]
    )

    return VisualDescription(
        image=ImageView(src=image_url_for(record), alt=record.name),
        name_text=record.name.upper(),
        id_text=format_id(record.id),
        badges=(badges[0], badges[1]),
        stat_bars=bars,
    )
