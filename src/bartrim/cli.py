import argparse
import logging
import sys

from PIL import Image

from .errors import BarcodeError
from .image.svg import render_to_svg
from .options import RenderOptions
from .trim.adapter import trim_horizontal_margins
from .trim.bounds import ScanOptions


logger = logging.getLogger(__name__)


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(
            "{!r} is not a positive integer".format(value)
        )
    return number


parser = argparse.ArgumentParser(
    prog="bartrim",
    description="Generate Code128 barcodes and trim barcode images",
)
parser.add_argument(
    "--verbose",
    action="store_true",
    help="Log what is being done."
)
subparsers = parser.add_subparsers(dest="command")
subparsers.required = True

svg_parser = subparsers.add_parser(
    "svg",
    help="Render Code128 B barcode as svg image."
)
svg_parser.add_argument(
    "--module-width",
    type=positive_int,
    default=2,
    help="Width of narrowest bar in pixels."
)
svg_parser.add_argument(
    "--height",
    type=positive_int,
    default=80,
    help="Image height in pixels, caption included."
)
svg_parser.add_argument(
    "--quiet-zone",
    type=int,
    default=10,
    help="Blank margin on each side, in modules."
)
svg_parser.add_argument(
    "--no-label",
    action="store_true",
    help="Do not render text under the bars."
)
svg_parser.add_argument(
    "--font-size",
    type=positive_int,
    default=14,
    help="Caption font size in pixels."
)
svg_parser.add_argument(
    "content",
    type=str,
    nargs="?",
    default="HELLO-128",
    help="Content of barcode."
)
svg_parser.add_argument(
    "out",
    type=str,
    nargs="?",
    default=None,
    help="Output path, standard output when omitted."
)

trim_parser = subparsers.add_parser(
    "trim",
    help="Cut blank margins off left and right side of barcode image."
)
trim_parser.add_argument(
    "--threshold",
    type=int,
    default=72,
    help="Highest luminance (0-255) still considered ink."
)
trim_parser.add_argument(
    "--coverage",
    type=float,
    default=0.02,
    help="Part of column height that must be ink."
)
trim_parser.add_argument("source", type=str, help="Input image path.")
trim_parser.add_argument("out", type=str, help="Output image path.")


def render(args):
    options = RenderOptions(
        module_width=args.module_width,
        height=args.height,
        quiet_zone=args.quiet_zone,
        display_value=not args.no_label,
        font_size=args.font_size,
    )
    svg = render_to_svg(args.content, options)
    if args.out is None:
        sys.stdout.write(svg)
    else:
        with open(args.out, "w") as image_file:
            image_file.write(svg)
        logger.info("Barcode written to %s", args.out)


def trim(args):
    options = ScanOptions(
        black_threshold=args.threshold,
        min_coverage_ratio=args.coverage,
    )
    with Image.open(args.source) as image:
        image.load()
        trimmed = trim_horizontal_margins(image, options=options)
        logger.info(
            "Trimmed %s from %d to %d pixels wide",
            args.source, image.width, trimmed.width
        )
        trimmed.save(args.out)


def main(cmd_args=None):
    args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    commands = {
        "svg": render,
        "trim": trim,
    }
    try:
        commands[args.command](args)
    except BarcodeError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
