from collections import namedtuple

from .pixels import RGBA, channel_layout, check_buffer


Bounds = namedtuple("Bounds", "left right")
Bounds.__doc__ = "Inclusive column range containing ink"


class ScanOptions:
    """Parameters of ink detection

    A pixel is ink when its alpha reaches `alpha_floor` and its
    luminance is at most `black_threshold`. A column is ink when at least
    `min_coverage_ratio` of the image height is ink, counting only every
    `sample_step`-th row.
    """
    black_threshold = 64
    min_coverage_ratio = 0.02
    sample_step = 1
    alpha_floor = 16
    # integer approximation of 0.2126, 0.7152, 0.0722 luma weights, sum 256
    luma_weights = (54, 183, 19)
    luma_shift = 8

    _names = (
        "black_threshold", "min_coverage_ratio", "sample_step",
        "alpha_floor", "luma_weights", "luma_shift",
    )

    def __init__(self, **options):
        for name, value in options.items():
            if name not in self._names:
                raise TypeError("Unknown scan option {!r}".format(name))
            setattr(self, name, value)

    def min_hits(self, height):
        ratio = max(0, min(1, self.min_coverage_ratio))
        return max(1, int(height * ratio))

    def __repr__(self):
        return "ScanOptions(black_threshold={!r}, min_coverage_ratio={!r}, "\
            "sample_step={!r})".format(
                self.black_threshold, self.min_coverage_ratio,
                self.sample_step
            )


DEFAULT_SCAN_OPTIONS = ScanOptions()
# single dark pixel marks a column, no noise tolerance
LEGACY_SCAN_OPTIONS = ScanOptions(black_threshold=48, min_coverage_ratio=0)
CODE128_SCAN_OPTIONS = ScanOptions(black_threshold=72)


class ColumnScanner:
    """Counts ink pixels in columns of a pixel buffer"""
    def __init__(self, buffer, width, height, layout=RGBA, options=None):
        self.buffer = buffer
        self.width = width
        self.height = height
        self.layout = layout
        self.options = options or DEFAULT_SCAN_OPTIONS
        self.min_hits = self.options.min_hits(height)
        self.step = max(1, int(self.options.sample_step))

    def is_ink(self, index):
        """Whether pixel starting at byte `index` is dark and visible"""
        buffer = self.buffer
        layout = self.layout
        options = self.options
        if buffer[index + layout.alpha] < options.alpha_floor:
            return False
        red_weight, green_weight, blue_weight = options.luma_weights
        luminance = (
            red_weight * buffer[index + layout.red]
            + green_weight * buffer[index + layout.green]
            + blue_weight * buffer[index + layout.blue]
        ) >> options.luma_shift
        return luminance <= options.black_threshold

    def is_ink_column(self, x):
        """Whether column x has enough ink pixels, stops counting early"""
        bpp = self.layout.bytes_per_pixel
        row_bytes = self.width * bpp
        hits = 0
        for y in range(0, self.height, self.step):
            if self.is_ink(y * row_bytes + x * bpp):
                hits += 1
                if hits >= self.min_hits:
                    return True
        return False

    def first_ink_column(self, columns):
        for x in columns:
            if self.is_ink_column(x):
                return x
        return None


def compute_horizontal_bounds(buffer, width, height, layout=None,
                              options=None):
    """Find first and last column of buffer containing ink

    :param buffer:          Bytes-like object, width * height pixels,
                            4 bytes each, rows tightly packed
    :param width:           Width of image in pixels
    :param height:          Height of image in pixels
    :param layout:          ChannelLayout or pixel format name, RGBA
                            by default
    :param options:         ScanOptions, DEFAULT_SCAN_OPTIONS when omitted
    :return:                Inclusive Bounds; Bounds(0, width - 1) when no
                            column contains ink, meaning "do not trim"
    """
    full_width = Bounds(0, width - 1)
    if width <= 0 or height <= 0:
        return full_width
    layout = channel_layout(layout)
    check_buffer(buffer, width, height, layout.bytes_per_pixel)
    scanner = ColumnScanner(memoryview(buffer).cast("B"), width, height,
                            layout, options)
    left = scanner.first_ink_column(range(width))
    if left is None:
        return full_width
    right = scanner.first_ink_column(range(width - 1, left - 1, -1))
    if right is None or right < left:
        return full_width
    return Bounds(left, right)
