from .encoding.code128 import Code128B, encode_to_modules
from .errors import BarcodeError, PatternNotFound, UnsupportedCharacter
from .image.svg import SvgBarcodeImage, render_to_svg
from .options import RenderOptions
from .trim import (
    Bounds,
    ScanOptions,
    compute_horizontal_bounds,
    crop_horizontal_buffer,
)

__version__ = "0.1.0"
