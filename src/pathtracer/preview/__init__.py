"""Output module: image encoding and export.

Components:
    export: Gamma encoding and bitmap writing via Pillow
"""

from .export import DEFAULT_GAMMA, gamma_encode, save_bmp

__all__ = [
    "DEFAULT_GAMMA",
    "gamma_encode",
    "save_bmp",
]
