"""Shapes queued for drawing on top of the next frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Tuple

import pygame

TEXT_SIZE = 20


@dataclass
class Line:
    start: Tuple[float, float]
    end: Tuple[float, float]
    color: Any


@dataclass
class Circle:
    x: float
    y: float
    radius: float
    color: Any


@dataclass
class Text:
    x: float
    y: float
    text: str
    color: Any
    ratio_x: float = 0.5
    ratio_y: float = 0.5


class Debug:
    """Collects debug shapes and draws them once."""

    _instance: ClassVar[Optional["Debug"]] = None

    def __init__(self) -> None:
        self.lines: List[Line] = []
        self.texts: List[Text] = []
        self.circles: List[Circle] = []
        self._font: Optional[pygame.font.Font] = None

    @classmethod
    def get(cls) -> "Debug":
        """The shared instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _default_font(self) -> pygame.font.Font:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, TEXT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface, font: Optional[pygame.font.Font] = None) -> None:
        """Draw every queued shape onto ``surface`` and empty the queues."""
        for line in self.lines:
            pygame.draw.line(surface, line.color, line.start, line.end)

        if self.texts:
            font = font or self._default_font()
            for text in self.texts:
                rendered = font.render(text.text, True, text.color)
                width, height = rendered.get_size()
                surface.blit(
                    rendered,
                    (text.x - width * text.ratio_x, text.y - height * text.ratio_y),
                )

        for circle in self.circles:
            pygame.draw.circle(surface, circle.color, (circle.x, circle.y), circle.radius)

        self.clear()

    def clear(self) -> None:
        """Drop every queued shape."""
        self.lines.clear()
        self.texts.clear()
        self.circles.clear()

    @staticmethod
    def draw_line(x1: float, y1: float, x2: float, y2: float, color: Any) -> None:
        Debug.get().lines.append(Line((x1, y1), (x2, y2), color))

    @staticmethod
    def draw_rectangle(x: float, y: float, width: float, height: float, color: Any) -> None:
        Debug.draw_line(x, y, x + width, y, color)
        Debug.draw_line(x + width, y, x + width, y + height, color)
        Debug.draw_line(x + width, y + height, x, y + height, color)
        Debug.draw_line(x, y + height, x, y, color)

    @staticmethod
    def draw_circle(x: float, y: float, radius: float, color: Any) -> None:
        """Queue a filled circle centred on (x, y)."""
        Debug.get().circles.append(Circle(x, y, radius, color))

    @staticmethod
    def draw_text(
        x: float,
        y: float,
        text: str,
        color: Any,
        ratio_x: float = 0.5,
        ratio_y: float = 0.5,
    ) -> None:
        """Queue text anchored at (x, y); the ratios pick the anchor inside its box."""
        if not 0.0 <= ratio_x <= 1.0 or not 0.0 <= ratio_y <= 1.0:
            raise ValueError("text anchor ratios must lie between 0 and 1")
        Debug.get().texts.append(Text(x, y, text, color, ratio_x, ratio_y))