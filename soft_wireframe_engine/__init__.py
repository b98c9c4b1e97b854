#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Mat4
from .errors import (SoftEngineError, MalformedMeshData, FetchFailure,
                     SurfaceUnavailable, FrameStateError)
from .color import Color4, WIREFRAME_YELLOW, parse_hex_color
from .config import RenderConfig
from .framebuffer import FrameBuffer
from .surface import PixelSurface, MemorySurface, TerminalSurface
from .mesh import Mesh, Face
from .camera import Camera
from .scene import Scene
from .loader import (create_meshes_from_json, parse_mesh_document,
                     fetch_text, load_meshes, vertex_stride)
from .rasterizer import (LineRasterizer, BresenhamRasterizer,
                         MidpointRasterizer, get_rasterizer)
from .renderer import Renderer, FrameState
from .loop import FrameLoop, spin_animation
from .log import setup_logging
