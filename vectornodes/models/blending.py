"""Opacity and blend mode carried by every graphic element."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class BlendMode(enum.Enum):
    # Values are the CSS mix-blend-mode keywords
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color-dodge"
    COLOR_BURN = "color-burn"
    HARD_LIGHT = "hard-light"
    SOFT_LIGHT = "soft-light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"
    HUE = "hue"
    SATURATION = "saturation"
    COLOR = "color"
    LUMINOSITY = "luminosity"


@dataclass
class AlphaBlending:
    opacity: float = 1.0
    blend_mode: BlendMode = BlendMode.NORMAL

    def render(self) -> str:
        attrs = ""
        if self.opacity < 1.0:
            attrs += f' opacity="{self.opacity}"'
        if self.blend_mode is not BlendMode.NORMAL:
            attrs += f' style="mix-blend-mode: {self.blend_mode.value};"'
        return attrs
