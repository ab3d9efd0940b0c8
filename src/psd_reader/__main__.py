import argparse
import logging
from typing import Optional

from psd_reader import read
from psd_reader.exceptions import Error
from psd_reader.psd.document import Document
from psd_reader.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="psd-reader command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Show the file summary")
    show_parser.add_argument("input_file", help="Input PSD file")

    debug_parser = subparsers.add_parser("debug", help="Show the decoded structure")
    debug_parser.add_argument("input_file", help="Input PSD file")

    return parser.parse_args(argv)


def _show(document: Document) -> None:
    header = document.header
    print(
        "%s %dx%d, %d channels, %d bits"
        % (
            header.color_mode.name,
            header.width,
            header.height,
            header.channels,
            header.depth,
        )
    )
    print("%d image resources" % len(document.image_resources))
    layer_info = document.layer_mask_info.layer_info
    print("%d layers" % len(layer_info.layer_records))
    for record in layer_info.layer_records:
        blend_mode = record.blend_mode
        print(
            "  %r %s opacity=%d visible=%s"
            % (
                record.name,
                blend_mode.name if blend_mode else record.blend_mode_key,
                record.opacity,
                record.flags.visible,
            )
        )


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logging.getLogger("psd_reader").setLevel(logging.DEBUG)

    try:
        with open(args.input_file, "rb") as f:
            document = read(f)
    except (OSError, Error) as e:
        logger.error("Failed to read %s: %s" % (args.input_file, e))
        return 1

    if args.command == "show":
        _show(document)

    elif args.command == "debug":
        pprint(document)

    return None


if __name__ == "__main__":
    raise SystemExit(main())
