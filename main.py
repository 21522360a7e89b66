# main.py
import argparse

from pathscope.app.build import build
from pathscope.io.config import load_scenario
from pathscope.io.recorder import JsonlSink, Recorder, replay
from pathscope.runtime.registries import find_path, known_algorithms


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Build a random planar graph and search it.")
    p.add_argument("--config", help="scenario JSON file")
    p.add_argument("--seed", type=int, default=7)
    p.add_argument("--count", type=int, default=30, help="vertices to place")
    p.add_argument("--density", type=float, default=0.5, choices=[0.3, 0.5, 0.7])
    p.add_argument("--width", type=float, default=800.0)
    p.add_argument("--height", type=float, default=600.0)
    p.add_argument("--frames", action="store_true", help="dump playback frames as JSON lines")
    return p.parse_args(argv)


def run(argv=None) -> None:
    args = parse_args(argv)
    if args.config:
        cfg = load_scenario(args.config)
    else:
        cfg = {
            "name": "demo",
            "seed": args.seed,
            "plane": {"width": args.width, "height": args.height},
            "placement": {"count": args.count},
            "connection": {"density": args.density},
        }
    bench = build(cfg)
    g = bench.graph
    if len(g) < 2:
        print("not enough vertices to search")
        return

    # opposite corners make for the longest walks
    start = bench.pick(0.0, 0.0)
    end = bench.pick(bench.model.plane.width, bench.model.plane.height)

    for algo in known_algorithms():
        res = find_path(algo, g.vertices, g.edges, start, end)
        if res.found(start):
            hops = " -> ".join(str(v.id) for v in res.path)
            print(f"{algo:>8}: cost={res.cost:.2f} visited={len(res.visited)} path={hops}")
        else:
            print(f"{algo:>8}: no path (visited={len(res.visited)})")

    if args.frames:
        replay(bench.find(start, end), Recorder(JsonlSink()), start=start)


if __name__ == "__main__":
    run()
