# io/recorder.py
import json
import sys
from dataclasses import asdict

from pathscope.app.events import Frame, PathFrame, VisitedFrame
from pathscope.app.protocols import Sink
from pathscope.domain.entities.graph import SearchResult, Vertex


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, frame) -> None:
        self.fp.write(json.dumps(asdict(frame)) + "\n")


class MemorySink:
    def __init__(self):
        self.frames: list = []

    def write(self, frame) -> None:
        self.frames.append(frame)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, frame: Frame):
        for s in self.sinks:
            s.write(frame)


def replay(result: SearchResult, recorder: Recorder, *, start: Vertex | None = None) -> int:
    """
    Emit the visited trace then the final path as ordered frames.
    Pacing is left to whoever consumes the frames. Returns frames emitted.

    With ``start`` given, a path that never reached it emits no path frames.
    """
    seq = 0
    for e in result.visited:
        recorder.emit(VisitedFrame(seq, e.src.id, e.dst.id, e.src.x, e.src.y, e.dst.x, e.dst.y))
        seq += 1
    if start is not None and not result.found(start):
        return seq
    for a, b in result.path_edges():
        recorder.emit(PathFrame(seq, a.id, b.id, a.x, a.y, b.x, b.y))
        seq += 1
    return seq
