#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import asyncio
import curses
import logging
import time

from .camera import Camera
from .color import Color4, parse_hex_color
from .config import RenderConfig
from .loader import load_meshes
from .loop import FrameLoop, spin_animation
from .math_utils import Vec3
from .mesh import Mesh
from .renderer import Renderer
from .scene import Scene
from .surface import MemorySurface, TerminalSurface

logger = logging.getLogger(__name__)


def build_config(args, detect=True) -> RenderConfig:
    """RenderConfig from terminal detection plus CLI overrides."""
    overrides = dict(rasterizer=args.rasterizer, spin_step=args.spin)
    wire_rgb = parse_hex_color(args.wire_color)
    if wire_rgb is None:
        raise ValueError(f"invalid --wire-color {args.wire_color!r}, expected #RRGGBB")
    overrides['wire_color'] = Color4.from_rgb8(*wire_rgb)

    config = RenderConfig.detect_terminal(**overrides) if detect else RenderConfig(**overrides)
    if args.mono:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    return config


def load_scene(args) -> Scene:
    """Load the model (or fall back to the cube) and place the camera."""
    if args.model:
        meshes = asyncio.run(load_meshes(args.model, timeout=args.timeout))
    else:
        meshes = [Mesh.cube()]
    camera = Camera(Vec3(0.0, 0.0, args.camera_z), Vec3.zero())
    return Scene(camera, meshes)


def run_headless(args, scene: Scene) -> int:
    """Render ``args.frames`` frames into memory and optionally save the last one."""
    width, height = args.headless
    config = build_config(args, detect=False)
    frames = args.frames if args.frames is not None else 1

    with Renderer(MemorySurface(width, height), config) as renderer:
        loop = FrameLoop(renderer, scene, spin_animation(config.spin_step))
        loop.run(frames=frames)
        if args.snapshot:
            renderer.surface.save_ppm(args.snapshot)
            logger.info("wrote %s", args.snapshot)
    return 0


class DemoApp:
    """
    Interactive curses harness: spins the loaded meshes in front of the
    camera and shows a status line with frame timing.
    """

    def __init__(self, stdscr, args, scene: Scene):
        self.stdscr = stdscr
        self.running = True
        self.paused = False
        self.max_frames = args.frames

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        config = build_config(args)
        self.config = config
        self.scene = scene

        self.renderer = Renderer(TerminalSurface(stdscr, config), config)
        self.loop = FrameLoop(self.renderer, scene, self._animate)

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def _animate(self, scene: Scene):
        if not self.paused:
            step = self.config.spin_step
            scene.spin(step, step)

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        camera = self.scene.camera

        if key == ord('q'):
            self.running = False
        elif key == curses.KEY_UP:
            camera.pan(0.0, 0.1)
        elif key == curses.KEY_DOWN:
            camera.pan(0.0, -0.1)
        elif key == curses.KEY_RIGHT:
            camera.pan(0.1, 0.0)
        elif key == curses.KEY_LEFT:
            camera.pan(-0.1, 0.0)
        elif key in (ord('='), ord('+')):
            camera.zoom(-0.5)
        elif key == ord('-'):
            camera.zoom(0.5)
        elif key == ord(' '):
            self.paused = not self.paused
        elif key == curses.KEY_RESIZE:
            rows, cols = self.stdscr.getmaxyx()
            self.renderer.resize(cols, rows)

    def draw_hud(self, start_time):
        th, tw = self.stdscr.getmaxyx()

        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now

        ms = (now - start_time) * 1000
        vertices = sum(len(m.vertices) for m in self.scene.meshes)
        faces = sum(len(m.faces) for m in self.scene.meshes)
        hdr = (f" MESH:{len(self.scene.meshes)}"
               f" | V:{vertices} F:{faces}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | [{self.renderer.rasterizer.name}"
               f"{' PAUSED' if self.paused else ''}] ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '='),
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        try:
            while self.running:
                if self.max_frames is not None and self.loop.frame_count >= self.max_frames:
                    break
                start_time = time.time()
                self.handle_input()
                self.loop.tick()
                self.draw_hud(start_time)
                self.stdscr.refresh()
        finally:
            self.renderer.dispose()


def main(stdscr, args, scene: Scene):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args, scene)
    app.run()
