#!/usr/bin/env python3
#
# PROJECT: soft-wireframe-engine
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys

from soft_wireframe_engine.demo import load_scene, main, run_headless
from soft_wireframe_engine.errors import FetchFailure, MalformedMeshData
from soft_wireframe_engine.log import setup_logging
from soft_wireframe_engine.rasterizer import RASTERIZERS


def _size(value):
    try:
        w, h = (int(part) for part in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError("width and height must be positive")
    return w, h


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                      Spinning cube (no model needed)
  %(prog)s monkey.babylon                       Load a Babylon JSON scene
  %(prog)s http://localhost/monkey.babylon      Fetch it over HTTP
  %(prog)s monkey.babylon --rasterizer midpoint Midpoint subdivision lines
  %(prog)s monkey.babylon --headless 640x480 --snapshot frame.ppm
"""
    parser = argparse.ArgumentParser(
        description="Software wireframe renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?',
                        help="Path or http(s) URL of a Babylon-style JSON mesh file")
    parser.add_argument("--camera-z", type=float, default=10.0,
                        help="Camera distance on the +Z axis (default: 10.0)")
    parser.add_argument("--rasterizer", choices=sorted(RASTERIZERS), default="bresenham",
                        help="Line drawing algorithm (default: bresenham)")
    parser.add_argument("--wire-color", default="#FFFF00",
                        help="Wireframe color in hex #RRGGBB (default: #FFFF00)")
    parser.add_argument("--spin", type=float, default=0.01,
                        help="Rotation per frame in radians (default: 0.01)")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--mono", action="store_true",
                        help="Force monochrome output")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Give up loading the model after this many seconds")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames")
    parser.add_argument("--headless", type=_size, metavar="WxH",
                        help="Render into memory instead of the terminal")
    parser.add_argument("--snapshot", metavar="PATH",
                        help="With --headless: save the last frame as a PPM image")
    parser.add_argument("--log-file",
                        help="Write log output to this file")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More log output (-v info, -vv debug)")
    args = parser.parse_args(argv)
    if args.snapshot and not args.headless:
        parser.error("--snapshot requires --headless")
    return args


def run(argv=None):
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    if args.log_file or args.headless:
        setup_logging(level, args.log_file)
    elif args.verbose:
        setup_logging(level, 'soft_wireframe.log')
    else:
        # stderr is unusable while curses owns the screen
        setup_logging(level, console=False)

    try:
        scene = load_scene(args)
    except (FetchFailure, MalformedMeshData) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.headless:
        try:
            return run_headless(args, scene)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    try:
        curses.wrapper(lambda s: main(s, args, scene))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
