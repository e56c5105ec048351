"""
Structured-text codec for the recipe and fiber catalog files.

The files look like JSON but are read and written by hand: there is no
escaping, values are either quoted strings or plain decimals, and the reader
is deliberately lenient.

Recipe file
-----------
::

    {
      "Classic Sock Yarn": {
        "f0": { "name": "Virgin Wool", "percentage": 75.00 },
        "f1": { "name": "Polyamide", "percentage": 25.00 }
      }
    }

The ``fN`` keys are positional labels and are ignored on read. Percentages
are written with exactly two decimals and a ``.`` decimal point.

Catalog file
------------
::

    [
      "Cotton",
      "Silk"
    ]

Leniency policy
---------------
Decoding never raises. A block or fragment that cannot be read (no ``:``,
value not wrapped in braces, missing ``name`` or ``percentage``, percentage
not a finite non-negative number) is dropped and logged at DEBUG level.
A recipe left with no fibers is omitted. Names containing ``"``, ``}`` or
``,`` do not survive a round trip.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from yarnblend.schemas.fiber import FiberShare
from yarnblend.store.catalog import FiberCatalog
from yarnblend.store.recipes import RecipeStore

logger = logging.getLogger(__name__)

_FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    key: re.compile(r'"' + key + r'"\s*:\s*"?([^"},]+)"?') for key in ("name", "percentage")
}


# ── Tokenizing ────────────────────────────────────────────────────────────────


def split_top_level(text: str) -> list[str]:
    """
    Split *text* on commas that sit outside braces and outside quotes.

    Every ``"`` toggles the quoted state; braces only change depth outside
    quotes. Pieces are trimmed. A trailing empty piece is not returned.
    """
    pieces: list[str] = []
    depth = 0
    quoted = False
    buf: list[str] = []
    for ch in text:
        if ch == '"':
            quoted = not quoted
        elif not quoted:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
            elif ch == "," and depth == 0:
                pieces.append("".join(buf).strip())
                buf = []
                continue
        buf.append(ch)
    if buf:
        pieces.append("".join(buf).strip())
    return pieces


def _top_level_colon(text: str) -> int:
    """Index of the first ``:`` outside quotes and braces, or -1."""
    depth = 0
    quoted = False
    for i, ch in enumerate(text):
        if ch == '"':
            quoted = not quoted
        elif not quoted:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
            elif ch == ":" and depth == 0:
                return i
    return -1


def _clean(text: str) -> str:
    return text.strip().replace('"', "")


def _extract(text: str, key: str) -> Optional[str]:
    match = _FIELD_PATTERNS[key].search(text)
    return match.group(1).strip() if match else None


# ── Recipes ───────────────────────────────────────────────────────────────────


def encode_recipes(store: RecipeStore) -> str:
    """Serialize *store* in insertion order."""
    recipes = list(store)
    lines = ["{"]
    for i, recipe in enumerate(recipes):
        lines.append(f'  "{recipe.name}": {{')
        last_share = len(recipe.shares) - 1
        for j, share in enumerate(recipe.shares):
            lines.append(
                f'    "f{j}": {{ "name": "{share.name}", "percentage": {share.percentage:.2f} }}'
                + ("," if j < last_share else "")
            )
        lines.append("  }" + ("," if i < len(recipes) - 1 else ""))
    lines.append("}")
    return "\n".join(lines)


def _decode_share(fragment: str) -> Optional[FiberShare]:
    colon = _top_level_colon(fragment)
    if colon < 0:
        logger.debug("Dropping fiber fragment without a key: %r", fragment)
        return None
    props = fragment[colon + 1 :]

    name = _extract(props, "name")
    raw_percentage = _extract(props, "percentage")
    if not name or raw_percentage is None:
        logger.debug("Dropping fiber fragment missing name or percentage: %r", fragment)
        return None

    try:
        percentage = float(raw_percentage)
    except ValueError:
        logger.debug("Dropping fiber fragment with unreadable percentage: %r", fragment)
        return None
    if not math.isfinite(percentage) or percentage < 0:
        logger.debug("Dropping fiber fragment with invalid percentage: %r", fragment)
        return None

    return FiberShare(name=name, percentage=percentage)


def decode_recipes(text: str) -> RecipeStore:
    """Read a recipe file's text; unreadable parts are skipped."""
    store = RecipeStore()
    text = text.strip()
    if text.startswith("{") and text.endswith("}"):
        text = text[1:-1]

    for block in split_top_level(text):
        colon = _top_level_colon(block)
        if colon < 0:
            if block:
                logger.debug("Dropping recipe block without a key: %r", block)
            continue

        name = _clean(block[:colon])
        value = block[colon + 1 :].strip()
        if not (value.startswith("{") and value.endswith("}")):
            logger.debug("Dropping recipe %r: fiber list is not a braced block", name)
            continue

        shares = [
            share
            for share in (_decode_share(fragment) for fragment in split_top_level(value[1:-1]))
            if share is not None
        ]
        if not name or not shares:
            logger.debug("Dropping recipe %r: no readable fibers", name)
            continue
        store.upsert(name, shares)

    return store


# ── Catalog ───────────────────────────────────────────────────────────────────


def encode_catalog(catalog: FiberCatalog) -> str:
    """Serialize *catalog* one name per line, sorted."""
    names = catalog.names()
    lines = ["["]
    lines.extend(f'  "{name}"' + ("," if i < len(names) - 1 else "") for i, name in enumerate(names))
    lines.append("]")
    return "\n".join(lines)


def decode_catalog(text: str) -> FiberCatalog:
    """Read a catalog file's text; anything not bracketed reads as empty."""
    catalog = FiberCatalog()
    text = text.strip()
    if not (text.startswith("[") and text.endswith("]")):
        if text:
            logger.debug("Catalog text is not a bracketed list; ignoring it")
        return catalog

    for piece in text[1:-1].split(","):
        name = _clean(piece)
        if name:
            catalog.add(name)
    return catalog
