"""Colours with channels in the range 0..1 and packed integer conversion."""

from __future__ import annotations

from dataclasses import dataclass


def clamp_channel(value: float) -> float:
    """Limit a channel value to the range 0..1."""
    if value > 1:
        return 1.0
    if value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class Color:
    """An RGB colour with an alpha channel that is always 1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    alpha: float = 1.0

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Unpack a 0xRRGGBB integer into channels of 0..255."""
        return cls(
            float((value >> 16) & 0xFF),
            float((value >> 8) & 0xFF),
            float(value & 0xFF),
        )

    def normalized(self) -> Color:
        """Scale channels of 0..255 down to 0..1."""
        return Color(self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def clamped(self) -> Color:
        """Clamp every channel to 0..1."""
        return Color(clamp_channel(self.r), clamp_channel(self.g), clamp_channel(self.b))

    def to_int(self) -> int:
        """Pack channels of 0..1 into a 0xAARRGGBB integer with alpha 1."""
        red = int(self.r * 255)
        green = int(self.g * 255)
        blue = int(self.b * 255)
        return (1 << 24) | (red << 16) | (green << 8) | blue

    def multiply(self, other: Color) -> Color:
        """Channel-wise product, clamped."""
        return Color(self.r * other.r, self.g * other.g, self.b * other.b).clamped()

    def scale(self, value: float) -> Color:
        """Multiply every channel by a scalar, clamped."""
        return Color(self.r * value, self.g * value, self.b * value).clamped()

    def add(self, other: Color) -> Color:
        """Channel-wise sum, clamped."""
        return Color(self.r + other.r, self.g + other.g, self.b + other.b).clamped()

    def add_scalar(self, value: float) -> Color:
        """Add a scalar to every channel, clamped."""
        return Color(self.r + value, self.g + value, self.b + value).clamped()