"""
sozi_export/cli.py -- Command line entry points.

Usage:
    sozi-to-pdf presentation.sozi.html -p a3paper
    sozi-to-pptx presentation.sozi.html --wide
    sozi-to-video presentation.sozi.html -b 4M
    sozi-to-video presentation.sozi.html --images -o frames/

Environment:
    SOZI_EXPORT_PHANTOMJS, SOZI_EXPORT_FRAMES_SCRIPT, SOZI_EXPORT_VIDEO_SCRIPT,
    SOZI_EXPORT_PDFJAM, SOZI_EXPORT_FFMPEG, SOZI_EXPORT_AVCONV
        Override the external tools and renderer scripts.
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from sozi_export.options.models import PDFOptions, PPTXOptions, VideoOptions
from sozi_export.services.converter import (
    ConversionResult,
    ToolConfig,
    convert_to_pdf,
    convert_to_pptx,
    convert_to_video,
)


def _base_parser(description: str, width: float, height: float) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    ap.add_argument("input", help="Sozi presentation (HTML file)")
    ap.add_argument("-o", "--output", default=None, help="Output file (default: derived from input)")
    ap.add_argument("-W", "--width", type=float, default=width, help=f"Frame width (default: {width})")
    ap.add_argument(
        "-H", "--height", type=float, default=height, help=f"Frame height (default: {height})"
    )
    ap.add_argument(
        "-c",
        "--png-compression",
        type=int,
        default=100,
        help="PNG compression level, 0-100 (default: 100)",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def _add_frame_selection(ap: argparse.ArgumentParser, resolution: float):
    ap.add_argument(
        "-r",
        "--resolution",
        type=float,
        default=resolution,
        help=f"Pixels per width/height unit (default: {resolution})",
    )
    ap.add_argument("-i", "--include", default="all", help="Frames to include (default: all)")
    ap.add_argument("-x", "--exclude", default="none", help="Frames to exclude (default: none)")


def pdf_parser() -> argparse.ArgumentParser:
    defaults = PDFOptions()
    ap = _base_parser("Convert a Sozi presentation to PDF.", defaults.width, defaults.height)
    _add_frame_selection(ap, defaults.resolution)
    ap.add_argument("-p", "--paper", default=defaults.paper, help="Page size (default: a4paper)")
    ap.add_argument("-P", "--portrait", action="store_true", help="Portrait pages (default: landscape)")
    return ap


def pptx_parser() -> argparse.ArgumentParser:
    defaults = PPTXOptions()
    ap = _base_parser("Convert a Sozi presentation to PowerPoint.", defaults.width, defaults.height)
    _add_frame_selection(ap, defaults.resolution)
    ap.add_argument("-w", "--wide", action="store_true", help="Use a 16:9 slide size")
    return ap


def video_parser() -> argparse.ArgumentParser:
    defaults = VideoOptions()
    ap = _base_parser("Convert a Sozi presentation to a video.", defaults.width, defaults.height)
    ap.add_argument("-b", "--bit-rate", default=defaults.bit_rate, help="Video bit rate (default: 2M)")
    ap.add_argument(
        "-i",
        "--images",
        action="store_true",
        help="Keep the PNG frames in the output directory instead of encoding a video",
    )
    return ap


def _run(
    ap: argparse.ArgumentParser,
    model,
    convert: Callable[..., ConversionResult],
    argv: Optional[Sequence[str]],
) -> int:
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    values = {k: v for k, v in vars(args).items() if k not in ("input", "verbose")}
    try:
        options = model(**values)
    except ValidationError as e:
        ap.error(str(e))

    result = convert(args.input, options, tools=ToolConfig.from_env())

    if not result.success:
        for err in result.errors:
            print(f"  ✗ {err}", file=sys.stderr)
        return 1
    print(f"Output: {result.output_path}")
    return 0


def pdf_main(argv: Optional[Sequence[str]] = None) -> int:
    return _run(pdf_parser(), PDFOptions, convert_to_pdf, argv)


def pptx_main(argv: Optional[Sequence[str]] = None) -> int:
    return _run(pptx_parser(), PPTXOptions, convert_to_pptx, argv)


def video_main(argv: Optional[Sequence[str]] = None) -> int:
    return _run(video_parser(), VideoOptions, convert_to_video, argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """``python -m sozi_export.cli {pdf,pptx,video} ...``"""
    argv = list(sys.argv[1:] if argv is None else argv)
    commands = {"pdf": pdf_main, "pptx": pptx_main, "video": video_main}
    if not argv or argv[0] not in commands:
        print(f"usage: sozi-export {{{','.join(commands)}}} [options] input", file=sys.stderr)
        return 2
    return commands[argv[0]](argv[1:])


if __name__ == "__main__":
    sys.exit(main())
