"""
Terminal bar renderer.

`BarRenderer` is an observer that draws the notified range as vertical bars
with rich. Bar height and colour are normalised by an explicit `max_value`
passed at construction, never by global state. An optional per-frame `delay`
makes sorting observer-paced: the algorithm waits while the frame is shown.
"""

from __future__ import annotations

import time
from typing import Any, List, Optional

from rich.console import Console
from rich.text import Text

from sortwatch.handle import Range

__all__ = ["BarRenderer", "bar_heights"]

_BLOCK = "█"


def bar_heights(values: List[Any], max_value: float, height: int) -> List[int]:
    """Scale each value to a whole number of rows in [0, height]."""
    if max_value <= 0:
        raise ValueError(f"max_value must be positive; got {max_value!r}")
    out = []
    for v in values:
        rows = int(round(float(v) / max_value * height))
        out.append(min(max(rows, 0), height))
    return out


class BarRenderer:
    """
    Draw each notified state to a rich Console.

    Parameters
    ----------
    console : rich.console.Console
        Destination. Pass Console(file=io.StringIO()) to capture output.
    max_value : number
        Largest value that can appear; maps to a full-height bar.
    height : int
        Number of text rows for a full-height bar.
    delay : float
        Seconds to sleep after each frame.
    clear : bool | None
        Clear the screen before each frame. Defaults to console.is_terminal.
    """

    def __init__(
        self,
        console: Console,
        max_value: float,
        *,
        height: int = 16,
        delay: float = 0.0,
        clear: Optional[bool] = None,
    ) -> None:
        if max_value <= 0:
            raise ValueError(f"max_value must be positive; got {max_value!r}")
        if height < 1:
            raise ValueError("height must be >= 1")
        if delay < 0:
            raise ValueError("delay must be nonnegative")
        self.console = console
        self.max_value = max_value
        self.height = height
        self.delay = delay
        self.clear = console.is_terminal if clear is None else clear
        self.frames = 0

    def render(self, values: List[Any]) -> Text:
        heights = bar_heights(values, self.max_value, self.height)
        # red grows with the value, blue shrinks
        styles = []
        for v in values:
            ratio = min(max(float(v) / self.max_value, 0.0), 1.0)
            styles.append(f"rgb({int(255 * ratio)},0,{int(255 * (1.0 - ratio))})")

        text = Text()
        for row in range(self.height, 0, -1):
            for h, style in zip(heights, styles):
                if h >= row:
                    text.append(_BLOCK, style=style)
                else:
                    text.append(" ")
            text.append("\n")
        return text

    def __call__(self, seq: Any, span: Range) -> None:
        values = [seq[i] for i in range(span.first, span.last)]
        if self.clear:
            self.console.clear()
        self.console.print(self.render(values), end="")
        self.frames += 1
        if self.delay:
            time.sleep(self.delay)
