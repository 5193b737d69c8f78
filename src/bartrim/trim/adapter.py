"""Margin trimming of barcode images held by an imaging library.

Image objects are opaque to this module, every operation on them goes
through an `ImageBackend`. Pixel scanning and buffer cropping are done by
`bartrim.trim.bounds` and `bartrim.trim.crop`.
"""
import logging
from abc import ABC, abstractmethod
from collections import namedtuple

from PIL import Image

from .bounds import CODE128_SCAN_OPTIONS, compute_horizontal_bounds
from .crop import crop_horizontal_buffer
from .pixels import ARGB_8888, BGRA_8888, RGBA_8888, channel_layout


logger = logging.getLogger(__name__)

# scan type tag of Code128 symbols
CODE128_SCAN_TYPE = 104

ImageInfo = namedtuple("ImageInfo", "width height pixel_format")


def is_code128(scan_type):
    """Whether scan type tag says the image holds a Code128 symbol

    :param scan_type:       Numeric tag, string like "CODE128_CODE" or
                            enum member with such value
    """
    value = getattr(scan_type, "value", scan_type)
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value == CODE128_SCAN_TYPE
    if isinstance(value, str):
        upper = value.upper()
        return "CODE128" in upper or "CODE_128" in upper
    return False


class ImageBackend(ABC):
    """Access to images of an imaging library

    Backends able to crop images natively set `supports_native_crop`
    and implement `crop`; others get cropped through raw pixel buffers.
    """
    supports_native_crop = False

    @abstractmethod
    def image_info(self, image):
        """Return ImageInfo of image"""

    @abstractmethod
    def read_pixels(self, image, info):
        """Return pixels of image as bytes, 4 bytes per pixel,
        channels ordered as info.pixel_format says"""

    @abstractmethod
    def create_image(self, buffer, width, height, pixel_format):
        """Return new image made of packed pixel buffer"""

    def crop(self, image, left, right, info):
        raise NotImplementedError(
            "{} can't crop natively".format(type(self).__name__)
        )


class PillowBackend(ImageBackend):
    """Backend for PIL.Image.Image objects

    Images are handled as RGBA, pixel buffers have bytes ordered as the
    declared pixel format says.
    """
    # channel of each byte within a pixel
    BYTE_ORDERS = {
        RGBA_8888: "RGBA",
        BGRA_8888: "BGRA",
        ARGB_8888: "ARGB",
    }

    def __init__(self, native_crop=True):
        self.supports_native_crop = native_crop

    @staticmethod
    def _reorder(image, source, target):
        bands = dict(zip(source, image.split()))
        return Image.merge("RGBA", [bands[channel] for channel in target])

    def image_info(self, image):
        return ImageInfo(image.width, image.height, RGBA_8888)

    def read_pixels(self, image, info):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        order = self.BYTE_ORDERS[channel_layout(info.pixel_format).name]
        if order != "RGBA":
            image = self._reorder(image, "RGBA", order)
        return image.tobytes()

    def create_image(self, buffer, width, height, pixel_format):
        image = Image.frombytes("RGBA", (width, height), bytes(buffer))
        order = self.BYTE_ORDERS[channel_layout(pixel_format).name]
        if order != "RGBA":
            image = self._reorder(image, order, "RGBA")
        return image

    def crop(self, image, left, right, info):
        return image.crop((left, 0, right + 1, info.height))


def trim_horizontal_margins(image, info=None, backend=None, options=None):
    """Cut blank columns off both sides of image

    :param image:           Image object understood by backend
    :param info:            ImageInfo, asked from backend when omitted
    :param backend:         ImageBackend, PillowBackend by default
    :param options:         ScanOptions for ink detection
    :return:                New cropped image, or the same image when
                            there is nothing to cut
    """
    backend = backend or PillowBackend()
    info = info or backend.image_info(image)
    width, height = info.width, info.height
    if width <= 0 or height <= 0:
        logger.debug("Empty image %dx%d, nothing to trim", width, height)
        return image
    layout = channel_layout(info.pixel_format)
    buffer = backend.read_pixels(image, info)
    left, right = compute_horizontal_bounds(
        buffer, width, height, layout, options or CODE128_SCAN_OPTIONS
    )
    if left <= 0 and right >= width - 1:
        logger.debug("Ink spans whole width %d, nothing to trim", width)
        return image
    if backend.supports_native_crop:
        logger.debug("Native crop to columns %d..%d", left, right)
        return backend.crop(image, left, right, info)
    logger.debug("Buffer crop to columns %d..%d", left, right)
    cropped = crop_horizontal_buffer(
        buffer, width, height, left, right, layout.bytes_per_pixel
    )
    return backend.create_image(
        cropped.buffer, cropped.width, cropped.height, info.pixel_format
    )


def trim_code128(image, scan_type, info=None, backend=None, options=None):
    """Trim horizontal margins of image if it holds a Code128 symbol

    Images of other symbologies are returned untouched.
    """
    if not is_code128(scan_type):
        logger.debug("Scan type %r is not Code128, image kept", scan_type)
        return image
    return trim_horizontal_margins(image, info, backend, options)
