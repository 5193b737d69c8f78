from collections import namedtuple


BYTES_PER_PIXEL = 4

RGBA_8888 = "RGBA_8888"
BGRA_8888 = "BGRA_8888"
ARGB_8888 = "ARGB_8888"


class ChannelLayout(namedtuple(
        "ChannelLayout", "name red green blue alpha bytes_per_pixel")):
    """Byte offsets of color channels within one pixel"""
    __slots__ = ()


RGBA = ChannelLayout(RGBA_8888, 0, 1, 2, 3, BYTES_PER_PIXEL)
BGRA = ChannelLayout(BGRA_8888, 2, 1, 0, 3, BYTES_PER_PIXEL)
ARGB = ChannelLayout(ARGB_8888, 1, 2, 3, 0, BYTES_PER_PIXEL)

_LAYOUTS = {
    RGBA_8888: RGBA,
    BGRA_8888: BGRA,
    ARGB_8888: ARGB,
    "RGBA": RGBA,
    "BGRA": BGRA,
    "ARGB": ARGB,
}


def channel_layout(pixel_format):
    """Channel layout for pixel format name, RGBA for anything unknown

    :param pixel_format:    Format name like "BGRA_8888", a ChannelLayout
                            or None
    """
    if isinstance(pixel_format, ChannelLayout):
        return pixel_format
    if isinstance(pixel_format, str):
        return _LAYOUTS.get(pixel_format.upper(), RGBA)
    return RGBA


def buffer_size(width, height, bytes_per_pixel=BYTES_PER_PIXEL):
    return max(0, width) * max(0, height) * bytes_per_pixel


def check_buffer(buffer, width, height, bytes_per_pixel):
    """Raise ValueError if buffer can't hold width x height pixels"""
    if bytes_per_pixel != BYTES_PER_PIXEL:
        raise ValueError(
            "Only {} bytes per pixel buffers are supported, got {!r}".format(
                BYTES_PER_PIXEL, bytes_per_pixel
            )
        )
    expected = buffer_size(width, height, bytes_per_pixel)
    size = memoryview(buffer).nbytes
    if size < expected:
        raise ValueError(
            "Buffer of {} bytes is too short for {}x{} image "
            "({} bytes)".format(size, width, height, expected)
        )
