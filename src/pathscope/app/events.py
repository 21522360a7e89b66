# app/events.py
from dataclasses import dataclass
from typing import Literal

FrameKind = Literal["visited", "path"]


# Playback frames handed to the renderer, in emission order
@dataclass(frozen=True)
class Frame:
    seq: int
    src_id: int
    dst_id: int
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True)
class VisitedFrame(Frame):
    kind: FrameKind = "visited"


@dataclass(frozen=True)
class PathFrame(Frame):
    kind: FrameKind = "path"
