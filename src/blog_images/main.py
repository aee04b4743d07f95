"""Main module for the blog-images CLI."""

import sys
import argparse
from typing import List, Optional

from pydantic import ValidationError

from .core import (
    GRAVITY_MAP,
    ConfigurationError,
    TransformationDescriptor,
    UploadConfig,
    build_transformation_url,
    build_variants,
    setup_logger,
    upload_image,
)


def build_descriptors(args: argparse.Namespace) -> List[TransformationDescriptor]:
    """
    Turn parsed ``url`` arguments into transformation descriptors.

    Resize/effect options form one descriptor and the text overlay options
    form a second one, so the overlay layer is applied after resizing.
    """
    descriptors = [
        TransformationDescriptor(
            width=args.width,
            height=args.height,
            focus=args.focus,
            crop_mode=args.crop_mode,
            effect=args.effect,
            background=args.background,
        )
    ]
    if args.overlay_text:
        descriptors.append(
            TransformationDescriptor(
                overlay_text=args.overlay_text,
                overlay_text_font_size=args.font_size,
                overlay_text_color=args.text_color,
                overlay_text_padding=args.padding,
                overlay_background=args.overlay_background,
                gravity=args.gravity,
            )
        )
    return descriptors


def _add_url_arguments(url_parser: argparse.ArgumentParser) -> None:
    url_parser.add_argument("url", help="Image URL, optionally already transformed")
    url_parser.add_argument("--width", type=int, default=None, help="Output width")
    url_parser.add_argument("--height", type=int, default=None, help="Output height")
    url_parser.add_argument("--focus", default=None, help="Focus strategy, e.g. auto")
    url_parser.add_argument(
        "--crop-mode", default=None, help="Crop mode, e.g. maintain_ratio"
    )
    url_parser.add_argument("--effect", default=None, help="Effect, e.g. grayscale")
    url_parser.add_argument("--background", default=None, help="Background color")
    url_parser.add_argument("--overlay-text", default=None, help="Text to overlay")
    url_parser.add_argument(
        "--font-size", type=int, default=None, help="Overlay text font size"
    )
    url_parser.add_argument("--text-color", default=None, help="Overlay text color")
    url_parser.add_argument(
        "--gravity",
        default=None,
        help=f"Overlay position: {', '.join(GRAVITY_MAP)}",
    )
    url_parser.add_argument(
        "--padding", type=int, default=None, help="Overlay text padding"
    )
    url_parser.add_argument(
        "--overlay-background", default=None, help="Overlay background color"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the ``blog-images`` command-line interface.

    Commands:
        url: print an image URL with transformations applied
        variants: print every display variant of an image URL
        upload: upload an image file through the blog's upload endpoint
        version: print version information
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="blog-images",
        description="Blog images - ImageKit transformation URLs and uploads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resize an image
  blog-images url https://ik.imagekit.io/blog/photo.jpg --width 300 --height 200

  # Add a text overlay in the top-left corner
  blog-images url https://ik.imagekit.io/blog/photo.jpg \\
                  --overlay-text "Sale!" --gravity north_west --font-size 24

  # Upload a cover image
  blog-images upload ./cover.jpg --name cover.jpg
        """,
    )

    subparsers: argparse._SubParsersAction = parser.add_subparsers(
        dest="command", help="Available commands"
    )

    url_parser = subparsers.add_parser(
        "url", help="Print an image URL with transformations applied"
    )
    _add_url_arguments(url_parser)

    variants_parser = subparsers.add_parser(
        "variants", help="Print every display variant of an image URL"
    )
    variants_parser.add_argument("url", help="Image URL")

    upload_parser = subparsers.add_parser(
        "upload", help="Upload an image through the blog's upload endpoint"
    )
    upload_parser.add_argument("path", help="Path of the image file to upload")
    upload_parser.add_argument(
        "--name", default=None, help="File name to store (defaults to the path's name)"
    )
    upload_parser.add_argument(
        "--endpoint", default=None, help="Upload endpoint URL (overrides env)"
    )
    upload_parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )

    subparsers.add_parser("version", help="Show version information")

    args: argparse.Namespace = parser.parse_args(argv)

    if args.command == "url":
        try:
            descriptors = build_descriptors(args)
        except ValidationError as exc:
            parser.error(
                "invalid transformation: "
                + "; ".join(f"{e['loc'][0]}: {e['msg']}" for e in exc.errors())
            )
        print(build_transformation_url(args.url, descriptors))

    elif args.command == "variants":
        for name, variant_url in build_variants(args.url).items():
            print(f"{name}: {variant_url}")

    elif args.command == "upload":
        if args.debug:
            setup_logger("blog-images.upload", level="DEBUG")
        try:
            config = UploadConfig.from_env()
        except ConfigurationError as exc:
            parser.error(str(exc))
        if args.endpoint:
            config = config.model_copy(update={"endpoint_url": args.endpoint})
        file_name = args.name or args.path.replace("\\", "/").rsplit("/", 1)[-1]

        result = upload_image(args.path, file_name, config=config)
        if result.success and result.data is not None:
            print(result.data.url)
        else:
            print(f"Upload failed: {result.error}", file=sys.stderr)
            sys.exit(1)

    elif args.command == "version":
        print("Blog Images CLI")
        print("Version 0.1.0")
        print("ImageKit transformation URLs and uploads for the blog")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
