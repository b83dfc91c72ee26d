from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class BackgroundType(str, Enum):
    color = "color"
    gradient = "gradient"
    image = "image"


GRADIENT_DIRECTIONS: dict[str, str] = {
    "to-r": "to right",
    "to-br": "to bottom right",
    "to-b": "to bottom",
    "to-bl": "to bottom left",
    "to-l": "to left",
    "to-tl": "to top left",
    "to-t": "to top",
    "to-tr": "to top right",
}


class BackgroundSettings(BaseModel):
    type: BackgroundType = BackgroundType.gradient
    color: str | None = None
    gradient_start: str = "#fef7ed"
    gradient_end: str = "#ffffff"
    gradient_direction: str = Field(default="to-b", pattern=r"^to-(r|br|b|bl|l|tl|t|tr)$")
    image_url: str | None = None
    image_position: str = Field(default="center", pattern=r"^(center|top|bottom|left|right)$")
    image_size: str = Field(default="cover", pattern=r"^(cover|contain|auto)$")
    image_repeat: str = Field(default="no-repeat", pattern=r"^(no-repeat|repeat|repeat-x|repeat-y)$")
    opacity: int = Field(default=100, ge=0, le=100)


def background_style(settings: BackgroundSettings) -> dict[str, str]:
    """CSS properties for the page background."""
    style: dict[str, str] = {}
    if settings.type == BackgroundType.color:
        style["background-color"] = settings.color or "#ffffff"
    elif settings.type == BackgroundType.gradient:
        direction = GRADIENT_DIRECTIONS[settings.gradient_direction]
        style["background-image"] = (
            f"linear-gradient({direction}, {settings.gradient_start}, {settings.gradient_end})"
        )
    elif settings.image_url:
        style["background-image"] = f"url({settings.image_url})"
        style["background-position"] = settings.image_position
        style["background-size"] = settings.image_size
        style["background-repeat"] = settings.image_repeat
        if settings.opacity < 100:
            style["position"] = "relative"
    return style


def background_overlay(settings: BackgroundSettings) -> dict[str, str] | None:
    """White wash over an image background to fake reduced opacity."""
    if settings.type != BackgroundType.image or settings.opacity >= 100:
        return None
    return {
        "position": "absolute",
        "inset": "0",
        "background-color": "white",
        "opacity": str(round((100 - settings.opacity) / 100, 2)),
        "pointer-events": "none",
        "z-index": "1",
    }
