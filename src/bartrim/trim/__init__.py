from .bounds import (
    Bounds,
    CODE128_SCAN_OPTIONS,
    DEFAULT_SCAN_OPTIONS,
    LEGACY_SCAN_OPTIONS,
    ScanOptions,
    compute_horizontal_bounds,
)
from .crop import CroppedBuffer, crop_horizontal_buffer
from .pixels import ChannelLayout, channel_layout
