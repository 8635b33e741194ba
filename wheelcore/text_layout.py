"""Splitting of long text into lines of roughly equal length for display."""

from __future__ import annotations

import math
from typing import Callable

__all__ = ["Measure", "split_text_lines", "split_text_lines_utf8"]

Measure = Callable[[str, float], float]
"""Returns the rendered width in pixels of a text at a given font size."""


def _line_plan(text: str, max_width: float, font_size: float, measure: Measure) -> tuple[int, int]:
    if max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width}")
    raw_length = measure(text, font_size)
    num_lines = math.ceil(raw_length / max_width)
    if num_lines <= 0:
        return 0, 0
    return num_lines, len(text) // num_lines


def split_text_lines(
    text: str, max_width: float, font_size: float, measure: Measure
) -> list[str]:
    """Split ``text`` into about as many lines as its width needs, breaking at spaces.

    The text is divided into lines of about equal character count; each line
    but the last ends at the last space within reach, or is cut at the
    nominal line length when there is none. The last line takes the rest.
    """
    num_lines, line_length = _line_plan(text, max_width, font_size, measure)
    lines: list[str] = []
    curr = 0
    for index in range(num_lines):
        if index == num_lines - 1:
            if curr >= len(text):
                break
            lines.append(text[curr:])
            break
        last_space = text.rfind(" ", curr, curr + line_length + 1)
        if last_space != -1:
            lines.append(text[curr:last_space])
            curr = last_space + 1
        else:
            lines.append(text[curr:curr + line_length])
            curr += line_length
    return lines


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def split_text_lines_utf8(
    text: str, max_width: float, font_size: float, measure: Measure
) -> list[str]:
    """Like :func:`split_text_lines`, but counting UTF-8 bytes and never splitting a character."""
    data = text.encode("utf-8")
    num_lines, line_length = _line_plan(text, max_width, font_size, measure)
    if num_lines:
        line_length = len(data) // num_lines
    lines: list[bytes] = []
    curr = 0
    for index in range(num_lines):
        if index == num_lines - 1:
            if curr >= len(data):
                break
            lines.append(data[curr:])
            break
        end = curr + line_length
        while end < len(data) and _is_continuation(data[end]):
            end -= 1
        last_space = data.rfind(b" ", 0, end + 1)
        while last_space > curr and _is_continuation(data[last_space]):
            last_space -= 1
        if last_space != -1 and last_space > curr:
            lines.append(data[curr:last_space])
            curr = last_space + 1
        else:
            lines.append(data[curr:end])
            curr = end
    return [line.decode("utf-8") for line in lines]