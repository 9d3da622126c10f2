"""Box-shadow parsing: named presets or the ``x y blur [spread] [color]`` shorthand."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from pagetree.styles.values import normalize_color, parse_number

GRAMMAR_PATH = Path(__file__).parent / "shadow.lark"

DEFAULT_SHADOW_COLOR = "rgba(0, 0, 0, 0.1)"


@dataclass(frozen=True)
class Shadow:
    """A parsed shadow layer; lengths are in px."""

    x: int | float = 0
    y: int | float = 0
    blur: int | float = 0
    spread: int | float = 0
    color: str = DEFAULT_SHADOW_COLOR
    inset: bool = False


# Keys are compared after whitespace collapsing. ``none`` maps to no shadow.
SHADOW_PRESETS: dict[str, Shadow | None] = {
    "none": None,
    "0 1px 2px rgba(0,0,0,0.05)": Shadow(0, 1, 2, 0, "rgba(0, 0, 0, 0.05)"),
    "0 1px 3px rgba(0,0,0,0.1)": Shadow(0, 1, 3, 0, "rgba(0, 0, 0, 0.1)"),
    "0 4px 6px rgba(0,0,0,0.1)": Shadow(0, 4, 6, 0, "rgba(0, 0, 0, 0.1)"),
    "0 10px 15px rgba(0,0,0,0.1)": Shadow(0, 10, 15, 0, "rgba(0, 0, 0, 0.1)"),
    "0 20px 25px rgba(0,0,0,0.1)": Shadow(0, 20, 25, 0, "rgba(0, 0, 0, 0.1)"),
    "0 25px 50px rgba(0,0,0,0.25)": Shadow(0, 25, 50, 0, "rgba(0, 0, 0, 0.25)"),
    # Named sizes used by data-shadow attributes.
    "sm": Shadow(0, 1, 2, 0, "rgba(0, 0, 0, 0.05)"),
    "md": Shadow(0, 4, 6, 0, "rgba(0, 0, 0, 0.1)"),
    "lg": Shadow(0, 10, 15, 0, "rgba(0, 0, 0, 0.1)"),
    "xl": Shadow(0, 20, 25, 0, "rgba(0, 0, 0, 0.1)"),
    "2xl": Shadow(0, 25, 50, 0, "rgba(0, 0, 0, 0.25)"),
}

_WS_RE = re.compile(r"\s+")


class ShadowTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a shadow parse tree into a :class:`Shadow`."""

    def start(self, items: list[Token]) -> Shadow:
        lengths: list[int | float] = []
        color = DEFAULT_SHADOW_COLOR
        inset = False
        for token in items:
            if token.type == "INSET":
                inset = True
            elif token.type == "LENGTH":
                lengths.append(parse_number(str(token)) or 0)
            else:
                color = normalize_color(str(token)) or DEFAULT_SHADOW_COLOR
        lengths.extend([0] * (4 - len(lengths)))
        x, y, blur, spread = lengths[:4]
        return Shadow(x=x, y=y, blur=blur, spread=spread, color=color, inset=inset)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def _first_layer(value: str) -> str:
    """Return the first comma-separated layer, ignoring commas inside parentheses."""
    depth = 0
    for i, ch in enumerate(value):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            return value[:i]
    return value


def parse_shadow(value: str | None) -> Shadow | None:
    """Parse a box-shadow value; unparsable input returns ``None``."""
    if not value:
        return None
    normalized = _WS_RE.sub(" ", value).strip()
    if normalized in SHADOW_PRESETS:
        return SHADOW_PRESETS[normalized]
    layer = _first_layer(normalized).strip()
    try:
        tree = _parser().parse(layer)
    except LarkError:
        return None
    return ShadowTransformer().transform(tree)


def shadow_params(shadow: Shadow | None) -> dict[str, Any]:
    """Convert a shadow to ``--style-box-shadow-*`` params."""
    if shadow is None:
        return {}
    params: dict[str, Any] = {
        "--style-box-shadow-distance-x": shadow.x,
        "--style-box-shadow-distance-y": shadow.y,
        "--style-box-shadow-blur": shadow.blur,
        "--style-box-shadow-spread": shadow.spread,
        "--style-box-shadow-color": shadow.color,
        "--style-box-shadow-distance-x--unit": "px",
        "--style-box-shadow-distance-y--unit": "px",
        "--style-box-shadow-blur--unit": "px",
        "--style-box-shadow-spread--unit": "px",
    }
    if shadow.inset:
        params["--style-box-shadow-style-type"] = "inset"
    return params
