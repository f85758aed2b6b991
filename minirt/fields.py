"""Scanning of numeric fields in scene description lines."""

from __future__ import annotations

from .errors import ErrorKind, SceneError
from .vectors import Vec3

TINY_VALUE = 0.00001


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _wrap(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def is_number_char(char: str, allow_neg: bool, allow_plus: bool) -> bool:
    """True for a digit, or a sign character when that sign is allowed."""
    if char and "0" <= char <= "9":
        return True
    if allow_neg and char == "-":
        return True
    return bool(allow_plus and char == "+")


def parse_float(text: str, index: int) -> tuple[float, int]:
    """Read a decimal number at ``index``; return it and the index after it."""
    sign = 1.0
    char = _char_at(text, index)
    if char == "-":
        sign = -1.0
        index += 1
    elif char == "+":
        index += 1
    result = 0.0
    while (char := _char_at(text, index)).isdigit() and char.isascii():
        result = result * 10.0 + int(char)
        index += 1
    if _char_at(text, index) == ".":
        index += 1
    fraction = 0.1
    while (char := _char_at(text, index)).isdigit() and char.isascii():
        result += int(char) * fraction
        fraction *= 0.1
        index += 1
    return result * sign, index


def parse_uint8(text: str, index: int) -> tuple[int, int]:
    """Read an unsigned byte; on overflow stop at the digit that overflowed."""
    if _char_at(text, index) == "+":
        index += 1
    result = 0
    while (char := _char_at(text, index)).isdigit() and char.isascii():
        result = result * 10 + int(char)
        index += 1
        if result > 255:
            return result & 0xFF, index - 1
    return result, index


def parse_int(text: str, index: int) -> tuple[int, int]:
    """Read a 32-bit signed integer; on overflow stop at the digit that overflowed."""
    if _char_at(text, index) == "+":
        index += 1
    sign = 1
    if _char_at(text, index) == "-":
        sign = -1
        index += 1
    result = 0
    previous = 0
    while (char := _char_at(text, index)).isdigit() and char.isascii():
        result = _wrap(result * 10 + int(char), 32)
        index += 1
        if previous > result:
            return _wrap(sign * result, 32), index - 1
        previous = result
    return _wrap(sign * result, 32), index


def skip_chars(skippable: str, index: int, text: str) -> int:
    """Skip characters from ``skippable`` starting at ``index``.

    At most one comma may be skipped. When ``skippable`` allows a comma,
    a missing comma or a second comma sends the index to the end of text.
    """
    commas = 0
    for position, char in enumerate(text[index:], start=index):
        if char == ",":
            commas += 1
        if char not in skippable or commas > 1:
            break
    else:
        position = len(text)
    if commas > 1 or (not commas and skippable[1:2] == ","):
        return len(text)
    return position


class LineReader:
    """Reads successive fields from one line of a scene file."""

    def __init__(self, text: str, start: int = 0) -> None:
        self.text = text
        self.index = start

    def _fail(self) -> SceneError:
        return SceneError(ErrorKind.INVALID_INPUT)

    def _skip(self, skippable: str) -> None:
        self.index = skip_chars(skippable, self.index, self.text)

    def _expect_number(self) -> None:
        char = _char_at(self.text, self.index)
        if not char or char == "\n" or not is_number_char(char, True, True):
            raise self._fail()

    def _expect_field_end(self) -> None:
        if is_number_char(_char_at(self.text, self.index), True, True):
            raise self._fail()

    def _component(self, skippable: str) -> float:
        self._skip(skippable)
        self._expect_number()
        value, self.index = parse_float(self.text, self.index)
        self._expect_field_end()
        return value

    def read_float(self) -> float:
        """Read a non-negative decimal number."""
        self._skip(" ")
        self._expect_number()
        value, self.index = parse_float(self.text, self.index)
        self._expect_field_end()
        if value < 0:
            raise self._fail()
        self._skip(" ")
        return value

    def read_vec3(self) -> Vec3:
        """Read three comma separated coordinates."""
        x = self._component(" ")
        y = self._component(" ,")
        z = self._component(" ,")
        self._skip(" ")
        return Vec3(x, y, z)

    def read_unit_vector(self) -> Vec3:
        """Read a non-zero direction whose components lie in -1..1."""
        vector = self.read_vec3()
        if any(abs(c) > 1 for c in (vector.x, vector.y, vector.z)):
            raise self._fail()
        if vector.length() <= TINY_VALUE:
            raise self._fail()
        return vector

    def read_color(self) -> int:
        """Read an R,G,B triple of bytes and pack it as 0xRRGGBB."""
        channels = []
        for skippable in (" ", " ,", " ,"):
            self._skip(skippable)
            self._expect_number()
            value, self.index = parse_uint8(self.text, self.index)
            self._expect_field_end()
            channels.append(value)
        self._skip(" ")
        red, green, blue = channels
        return (red << 16) | (green << 8) | blue

    def read_degrees(self) -> int:
        """Read a whole field of view in degrees, 0..180."""
        self._skip(" ")
        self._expect_number()
        value, self.index = parse_int(self.text, self.index)
        self._expect_field_end()
        value = _wrap(value, 16)
        if value < 0 or value > 180:
            raise self._fail()
        self._skip(" ")
        return value

    def at_end(self) -> bool:
        """True when nothing but an optional newline remains."""
        char = _char_at(self.text, self.index)
        return not char or char == "\n"