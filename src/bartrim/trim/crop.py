from collections import namedtuple

from .pixels import BYTES_PER_PIXEL, check_buffer


CroppedBuffer = namedtuple("CroppedBuffer", "buffer width height")


def crop_horizontal_buffer(buffer, width, height, left, right,
                           bytes_per_pixel=BYTES_PER_PIXEL):
    """Copy columns left..right (inclusive) into a new packed buffer

    Source buffer is never modified. Columns are clamped to the image.
    When the crop is empty or covers the whole width, the source buffer
    itself is returned.

    :param buffer:          Bytes-like object with width * height pixels
    :param left:            First kept column
    :param right:           Last kept column
    :return:                CroppedBuffer(buffer, width, height)
    """
    left = max(0, left)
    right = min(width - 1, right)
    crop_width = right - left + 1
    if crop_width <= 0 or crop_width == width:
        return CroppedBuffer(buffer, width, height)
    check_buffer(buffer, width, height, bytes_per_pixel)
    src = memoryview(buffer).cast("B")
    src_stride = width * bytes_per_pixel
    row_length = crop_width * bytes_per_pixel
    out = bytearray(row_length * height)
    src_start = left * bytes_per_pixel
    dst_start = 0
    for _ in range(height):
        out[dst_start:dst_start + row_length] = \
            src[src_start:src_start + row_length]
        src_start += src_stride
        dst_start += row_length
    return CroppedBuffer(out, crop_width, height)
