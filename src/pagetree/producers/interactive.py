"""Interactive producers: progress bar, video popup and countdown timer."""

from __future__ import annotations

import re
from typing import Any

from pagetree.engine.registry import ChildParser, Slot
from pagetree.model.context import ParseContext
from pagetree.model.node import Node, SelectorBlock
from pagetree.producers.common import apply_anchor, apply_spacing, apply_surface, new_node, skip_flag
from pagetree.producers.media import image_url_param
from pagetree.source.base import SourceElement
from pagetree.styles.box import Border, parse_border, parse_radius, parse_spacing
from pagetree.styles.shadow import parse_shadow
from pagetree.styles.values import normalize_color, parse_measure, parse_number, parse_text_align

_YOUTUBE_ID_RE = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\s?]+)"
)

COUNTDOWN_LABELS = {
    "years": "Years",
    "months": "Months",
    "weeks": "Weeks",
    "days": "Days",
    "hours": "Hours",
    "minutes": "Minutes",
    "seconds": "Seconds",
}


def _styles(element: SourceElement, selector: str) -> dict[str, str]:
    found = element.select_one(selector)
    return found.inline_style() if found is not None else {}


def youtube_thumbnail(url: str) -> str:
    match = _YOUTUBE_ID_RE.search(url)
    if not match:
        return ""
    return f"https://img.youtube.com/vi/{match.group(1)}/maxresdefault.jpg"


class ProgressBarProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        wrapper = element.inline_style()
        track = _styles(element, ".progress")
        bar = _styles(element, ".progress-bar")
        label = _styles(element, ".progress-label")

        progress = parse_number(element.attribute("data-progress") or "50")
        width = parse_measure(element.attribute("data-width") or wrapper.get("width") or "100%", "%")
        height = parse_measure(track.get("height") or element.attribute("data-height") or "24px")
        radius = parse_radius(track)
        shadow = parse_shadow(track.get("box-shadow"))
        align = element.attribute("data-align") or wrapper.get("text-align") or "center"

        node = new_node(
            "ProgressBar/V1",
            slot,
            attrs={"style": {}},
            params={
                "progress": int(progress) if progress is not None else 50,
                "progress-text": element.attribute("data-text") or "",
                "show_text_outside": (
                    "true" if element.attribute("data-text-outside") == "true" else "false"
                ),
            },
        )
        apply_anchor(node, element, "id", "data-element-id")
        apply_spacing(node, parse_spacing(wrapper))

        track_block = SelectorBlock(
            attrs={
                "style": {
                    "width": width.value if width else 100,
                    "border-radius": radius.value if radius else 9999,
                },
                "data-skip-shadow-settings": skip_flag(shadow),
                "data-skip-corners-settings": skip_flag(radius),
            },
            params={
                "--style-background-color": normalize_color(
                    track.get("background-color") or element.attribute("data-bg") or "#e2e8f0"
                ),
                "border-radius--unit": radius.unit if radius else "px",
                "width--unit": width.unit if width else "%",
            },
        )
        apply_surface(track_block, border=parse_border(track), shadow=shadow)
        node.selectors = {
            ".progress": track_block,
            ".progress-bar": SelectorBlock(
                attrs={"style": {"height": height.value if height else 24}},
                params={
                    "--style-background-color": normalize_color(
                        bar.get("background-color") or element.attribute("data-fill") or "#3b82f6"
                    ),
                    "height--unit": height.unit if height else "px",
                },
            ),
            ".progress-label": SelectorBlock(
                attrs={"style": {"font-size": 16, "text-align": align}},
                params={"font-size--unit": "px"},
            ),
            "& > .progress-label": SelectorBlock(
                attrs={"style": {"color": normalize_color(label.get("color") or "#ffffff")}}
            ),
        }
        return node


class VideoPopupProducer:
    """A thumbnail image that opens the video in a modal."""

    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        video_url = element.attribute("data-video-url") or ""
        thumbnail = element.attribute("data-thumbnail") or youtube_thumbnail(video_url)
        image = element.select_one(".elImage")
        image_styles = image.inline_style() if image is not None else {}
        alt = (image.attribute("alt") if image is not None else None) or ""
        width = parse_measure(
            element.attribute("data-width") or _styles(element, ".elImageWrapper").get("width") or "100%",
            "%",
        )
        radius = parse_radius(image_styles)
        shadow = parse_shadow(image_styles.get("box-shadow"))

        node = new_node(
            "VideoPopup/V1",
            slot,
            attrs={"alt": alt or "Video thumbnail", "style": {}},
            params={"imageUrl": image_url_param(thumbnail)},
        )
        apply_anchor(node, element, "id", "data-element-id")
        apply_spacing(node, parse_spacing(element.inline_style()))

        image_block = SelectorBlock(
            attrs={
                "alt": alt,
                "style": {
                    "width": width.value if width else 100,
                    "border-radius": radius.value if radius else 16,
                },
                "data-skip-corners-settings": skip_flag(radius),
                "data-skip-shadow-settings": skip_flag(shadow),
            },
            params={
                "width--unit": width.unit if width else "%",
                "border-radius--unit": radius.unit if radius else "px",
            },
        )
        apply_surface(image_block, border=parse_border(image_styles), shadow=shadow)
        node.selectors = {
            ".elImage": image_block,
            ".elImageWrapper": SelectorBlock(
                attrs={
                    "style": {
                        "text-align": parse_text_align(element.inline_style().get("text-align"))
                    }
                }
            ),
            ".elVideoWrapper": SelectorBlock(
                attrs={
                    "data-video-type": element.attribute("data-video-type") or "youtube",
                    "data-video-title": alt,
                },
                params={"video_url": video_url},
            ),
            ".elVideoWrapper .elVideoplaceholder_inner": SelectorBlock(
                attrs={"className": "bgCoverCenter"},
                params={"--style-background-image-url": thumbnail},
            ),
            ".elModal": SelectorBlock(
                params={
                    "--style-background-color": element.attribute("data-overlay-bg")
                    or "rgba(0,0,0,0.8)"
                }
            ),
        }
        return node


class CountdownProducer:
    container = False

    def produce(
        self,
        element: SourceElement,
        slot: Slot,
        context: ParseContext,
        parse_children: ChildParser | None,
    ) -> Node | None:
        number_bg = normalize_color(element.attribute("data-number-bg") or "#1C65E1")
        number_color = normalize_color(element.attribute("data-number-color") or "#ffffff")
        label_color = normalize_color(element.attribute("data-label-color") or "#164EAD")
        redirect = element.attribute("data-redirect") or ""

        amount_box = _styles(element, ".elCountdownAmountContainer")
        radius = parse_radius(amount_box)
        shadow = parse_shadow(amount_box.get("box-shadow")) or parse_shadow(
            element.attribute("data-shadow")
        )
        border = parse_border(amount_box)
        if not border and element.attribute("data-border"):
            raw = element.attribute("data-border") or ""
            border = Border(
                width=parse_measure(raw if "px" in raw else f"{raw}px"),
                style="solid",
                color=normalize_color(element.attribute("data-border-color") or number_bg),
            )
        gap = parse_measure(_styles(element, ".elCountdownRow").get("gap") or "0.65em", "em")
        number_size = parse_measure(_styles(element, ".elCountdownAmount").get("font-size") or "28px")
        label_size = parse_measure(_styles(element, ".elCountdownPeriod").get("font-size") or "11px")

        node = new_node("Countdown/V1", slot, attrs={"style": {}})
        assert node.id is not None
        node.params = {
            "type": "countdown",
            "countdown_opts": self._options(element),
            "show_colons": False,
            "timezone": element.attribute("data-timezone") or "America/New_York",
            "timer_action": "redirect_to" if redirect else "none",
            "cookie_policy": "none",
            "expire_days": 0,
            "countdownTexts": dict(COUNTDOWN_LABELS),
            "end_date": element.attribute("data-end-date") or "",
            "countdown_id": node.id,
            "end_time": element.attribute("data-end-time") or "00:00:00",
            "redirect_to": redirect,
        }
        apply_anchor(node, element, "id", "data-element-id")
        apply_spacing(node, parse_spacing(element.inline_style()))

        amount_block = SelectorBlock(
            attrs={
                "style": {
                    "line-height": "100%",
                    "padding-top": 14,
                    "padding-bottom": 14,
                    "border-radius": radius.value if radius else 16,
                },
                "data-skip-corners-settings": skip_flag(radius),
                "data-skip-shadow-settings": skip_flag(shadow),
            },
            params={
                "--style-background-color": number_bg,
                "--style-padding-horizontal": 14,
                "--style-padding-horizontal--unit": "px",
                "padding-top--unit": "px",
                "padding-bottom--unit": "px",
                "border-radius--unit": radius.unit if radius else "px",
            },
        )
        apply_surface(amount_block, border=border, shadow=shadow)
        node.selectors = {
            ".elCountdownAmount": SelectorBlock(
                attrs={
                    "style": {
                        "color": number_color,
                        "font-size": f"{number_size.value}px" if number_size else "28px",
                        "font-weight": "700",
                        "line-height": "100%",
                    }
                }
            ),
            ".elCountdownPeriod": SelectorBlock(
                attrs={
                    "style": {
                        "text-transform": "uppercase",
                        "color": label_color,
                        "text-align": "center",
                        "font-size": f"{label_size.value}px" if label_size else "11px",
                        "font-weight": "600",
                    }
                }
            ),
            ".elCountdownRow": SelectorBlock(
                attrs={"style": {"gap": gap.value if gap else 0.65, "flex-direction": "row"}},
                params={"gap--unit": gap.unit if gap else "em"},
            ),
            ".elCountdownGroupDate": SelectorBlock(
                attrs={"style": {"gap": 0.78}}, params={"gap--unit": "em"}
            ),
            ".elCountdownGroupTime": SelectorBlock(
                attrs={"style": {"gap": "1.1em"}}, params={"gap--unit": "em"}
            ),
            ".elCountdownColumn": SelectorBlock(
                attrs={
                    "style": {
                        "gap": "0.5em",
                        "flex-direction": "column",
                        "border-style": "none",
                        "padding-top": 0,
                        "padding-bottom": 0,
                    },
                    "data-skip-shadow-settings": "true",
                },
                params={"gap--unit": "em", "--style-padding-horizontal": 0},
            ),
            ".elCountdownAmountContainer": amount_block,
        }
        return node

    @staticmethod
    def _options(element: SourceElement) -> dict[str, Any]:
        options: dict[str, Any] = {"show_years": False, "show_months": False, "show_weeks": False}
        for unit in ("days", "hours", "minutes", "seconds"):
            options[f"show_{unit}"] = element.attribute(f"data-show-{unit}") != "false"
        return options
