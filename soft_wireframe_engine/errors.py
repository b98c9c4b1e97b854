#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Exceptions raised by the engine.

All of them derive from SoftEngineError so an embedding application can
catch everything coming out of the engine with a single except clause.
"""

from typing import Optional


class SoftEngineError(Exception):
    """Base class for all engine errors."""


class MalformedMeshData(SoftEngineError):
    """The mesh document cannot be turned into meshes.

    ``mesh_index`` is the position of the offending record in the
    document's ``meshes`` list, or None when the document itself is bad.
    """

    def __init__(self, message: str, mesh_index: Optional[int] = None):
        self.mesh_index = mesh_index
        if mesh_index is not None:
            message = f"mesh #{mesh_index}: {message}"
        super().__init__(message)


class FetchFailure(SoftEngineError):
    """The mesh document could not be fetched.

    ``status`` holds the HTTP status code when the server answered with a
    non-success response, and is None for transport or file errors.
    """

    def __init__(self, source: str, reason: str, status: Optional[int] = None):
        self.source = source
        self.reason = reason
        self.status = status
        detail = f"HTTP {status}: {reason}" if status is not None else reason
        super().__init__(f"could not fetch {source!r} ({detail})")


class SurfaceUnavailable(SoftEngineError):
    """The pixel surface is missing or did not hand out a usable buffer."""


class FrameStateError(SoftEngineError):
    """A renderer call was made in the wrong point of the frame lifecycle."""
