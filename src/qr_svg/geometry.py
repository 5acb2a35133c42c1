"""View box, rectangle and logo placement geometry."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class ViewBox:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                f"view box must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def square(cls, edge: float) -> "ViewBox":
        return cls(edge, edge)


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LogoBox:
    """Area covered by a logo, in view box units."""

    x: float
    y: float
    width: float
    height: float

    def blocks(self, x: float, y: float, module_size: float) -> bool:
        """Return True if the module square at ``(x, y)`` touches the box.

        Contact along an edge or at a corner counts as blocked.
        """

        return (
            x + module_size >= self.x
            and x <= self.x + self.width
            and y + module_size >= self.y
            and y <= self.y + self.height
        )


def logo_bounding_box(view_box: ViewBox, size_percent: float) -> LogoBox:
    """Return the box of a logo covering ``size_percent`` of ``view_box``, centered."""

    if not 0 <= size_percent <= 100:
        raise InvalidArgumentError("logo size must be between 0 and 100 percent")
    width = size_percent / 100.0 * view_box.width
    height = size_percent / 100.0 * view_box.height
    return LogoBox(
        x=view_box.width / 2.0 - width / 2.0,
        y=view_box.height / 2.0 - height / 2.0,
        width=width,
        height=height,
    )
