import argparse
import sys
from pathlib import Path

from .client import ConversionClient
from .config import get_logger, get_settings, setup_logging
from .exceptions import ConversionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docservice-client",
        description="Convert and upload documents through the document service",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Request a document conversion")
    convert.add_argument("uri", help="Publicly reachable URI of the source document")
    convert.add_argument("--to", dest="to_extension", required=True, help="Output extension")
    convert.add_argument("--from", dest="from_extension", help="Source extension")
    convert.add_argument("--key", dest="revision_id", help="Document revision key")
    convert.add_argument(
        "--async", dest="is_async", action="store_true", help="Do not wait for the result"
    )

    upload = subparsers.add_parser("upload", help="Upload a document to storage")
    upload.add_argument("file", type=Path, help="File to upload")
    upload.add_argument("--content-type", help="Content type of the file")
    upload.add_argument("--key", dest="revision_id", default="", help="Document revision key")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging("DEBUG" if args.debug or settings.debug else settings.log_level)
    logger = get_logger("cli")

    client = ConversionClient(settings)

    try:
        if args.command == "convert":
            result = client.request_conversion_sync(
                args.uri,
                args.from_extension,
                args.to_extension,
                args.revision_id,
                args.is_async,
            )
        else:
            size = args.file.stat().st_size
            with args.file.open("rb") as stream:
                result = client.upload_document_sync(
                    stream, size, args.content_type, args.revision_id
                )
    except ConversionError as e:
        logger.error("%s", e.message)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", getattr(args, "file", ""), e)
        return 1

    print(result or "in progress")
    return 0


if __name__ == "__main__":
    sys.exit(main())
