"""Parser configuration: source markup conventions and target format constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    kind_attribute: str = "data-type"
    root_kind: str = "ContentNode"
    overlay_class: str = "cf-overlay"
    popup_selector: str = '.cf-popup-wrapper[data-type="ModalContainer/V1"]'
    popup_kind: str = "ModalContainer/V1"
    styleguide_script_id: str = "cf-styleguide-data"
    format_version: int = 157
    reference_prefix: str = "id-"
    scroll_prefix: str = "#scroll-"
    reference_kinds: tuple[str, ...] = ("Button/V1",)
    default_text_color: str = "#334155"
    default_link_color: str = "#3b82f6"
