from PIL import Image

from .adapter import CODE128_SCAN_TYPE, PillowBackend, trim_code128


BLACK = b"\x00\x00\x00\xff"
WHITE = b"\xff\xff\xff\xff"


def synthetic_barcode_buffer(total_width, height, left_margin, right_margin,
                             bar_width):
    """RGBA buffer with alternating black and white bars between white
    margins, first bar black

    :param int total_width:     Image width in pixels
    :param int height:          Image height in pixels
    :param int left_margin:     Blank columns on the left
    :param int right_margin:    Blank columns on the right
    :param int bar_width:       Width of each bar in pixels
    :return:                    bytearray of total_width * height pixels
    """
    row = bytearray()
    for x in range(total_width):
        is_black = False
        if left_margin <= x < total_width - right_margin:
            is_black = (x - left_margin) // bar_width % 2 == 0
        row += BLACK if is_black else WHITE
    return bytearray(bytes(row) * height)


def run_self_test(native_crop=False):
    """Trim synthetic barcode image and check its size

    :raises AssertionError:     when trimmed size is wrong
    """
    total_width, height = 400, 120
    left_margin, right_margin = 40, 60
    # 300 inked columns make 75 bars of 4, the last one black
    buffer = synthetic_barcode_buffer(
        total_width, height, left_margin, right_margin, 4
    )
    image = Image.frombytes("RGBA", (total_width, height), bytes(buffer))
    trimmed = trim_code128(
        image, CODE128_SCAN_TYPE, backend=PillowBackend(native_crop)
    )
    expected = (total_width - left_margin - right_margin, height)
    assert trimmed.size == expected, \
        "Self test failed: got {}x{}, expected {}x{}".format(
            *trimmed.size, *expected
        )
    return trimmed
