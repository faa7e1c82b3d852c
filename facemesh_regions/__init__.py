"""
Named MediaPipe Face Mesh landmark regions for effects and overlays.
"""

__all__ = [
    "config",
    "export",
    "indices_mediapipe",
    "landmarks",
]
