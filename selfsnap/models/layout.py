from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple


class Rect(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def box(self) -> Tuple[int, int, int, int]:
        """Pixel box (left, top, right, bottom) for cropping and pasting."""
        left, top = round(self.x), round(self.y)
        return left, top, left + round(self.w), top + round(self.h)


class GridLayoutOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    canvas_w: float = Field(alias="canvasW")
    canvas_h: float = Field(alias="canvasH")
    side_margin: Optional[float] = Field(default=None, alias="sideMargin")
    top_margin: Optional[float] = Field(default=None, alias="topMargin")
    bottom_reserved: Optional[float] = Field(default=None, alias="bottomReserved")
    col_gap: Optional[float] = Field(default=None, alias="colGap")
    row_gap: Optional[float] = Field(default=None, alias="rowGap")
    aspect_w: float = Field(default=3, alias="aspectW")
    aspect_h: float = Field(default=4, alias="aspectH")


class GridSlotsResponse(BaseModel):
    slots: List[Rect]
