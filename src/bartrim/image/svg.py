from io import StringIO
from xml.sax.saxutils import escape

from .image import BarcodeImage
from ..encoding.code128 import Code128B
from ..options import RenderOptions


_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value):
    """Escape the five XML special characters"""
    return escape(str(value), _XML_ENTITIES)


def format_number(value):
    """Short decimal form of a coordinate, no trailing zeros"""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return "{:.3f}".format(value).rstrip("0").rstrip(".")
    return str(value)


class SvgBarcodeImage(BarcodeImage):
    """Class for saving barcode image as .svg file"""
    XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
    SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg"'\
        ' width="{width}" height="{height}"'\
        ' viewBox="0 0 {width} {height}" shape-rendering="crispEdges">\n'
    SVG_CLOSE = "</svg>\n"
    RECTANGLE = '    <rect x="{x}" y="{y}" width="{width}"'\
                ' height="{height}" fill="{fill}" />\n'
    TEXT = '    <text x="{x}" y="{y}" text-anchor="middle"'\
           ' font-family="{font_family}" font-size="{font_size}"'\
           ' fill="{fill}">{text}</text>\n'

    def _write_header(self, image_file):
        width = format_number(self.image_width)
        height = format_number(self.image_height)
        image_file.write(self.XML_DECLARATION)
        image_file.write(self.SVG_OPEN.format(width=width, height=height))
        image_file.write(
            self.RECTANGLE.format(
                x=0,
                y=0,
                width=width,
                height=height,
                fill=escape_xml(self.options.background)
            )
        )

    def _write_bars(self, image_file):
        height = format_number(self.options.bars_height)
        fill = escape_xml(self.options.bar_color)
        for x, width in self.bar_runs():
            image_file.write(
                self.RECTANGLE.format(
                    x=format_number(x),
                    y=0,
                    width=format_number(width),
                    height=height,
                    fill=fill
                )
            )

    def _write_text_area(self, image_file):
        options = self.options
        # baseline estimate, fonts metrics are not available here
        y = options.bars_height + options.text_margin + \
            options.font_size * options.baseline_ratio
        image_file.write(
            self.TEXT.format(
                x=format_number(self.image_width / 2),
                y=format_number(y),
                font_family=escape_xml(options.font_family),
                font_size=format_number(options.font_size),
                fill=escape_xml(options.bar_color),
                text=escape_xml(self.text)
            )
        )

    def _write_finish(self, image_file):
        image_file.write(self.SVG_CLOSE)

    def data(self):
        """Whole svg document as a string"""
        out = StringIO()
        self.write(out)
        return out.getvalue()


def render_to_svg(text, options=None, **overrides):
    """Render text as Code128 B barcode into svg document

    :param str text:        Content of barcode, printable ASCII
    :param options:         RenderOptions, defaults when omitted
    :param overrides:       Individual options replacing those in `options`
    :return:                svg markup string
    """
    options = options or RenderOptions()
    if overrides:
        options = options.replace(**overrides)
    modules = Code128B.modules(text)
    return SvgBarcodeImage(modules, options, text=text).data()
