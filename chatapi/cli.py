"""
Command line upload of a file to the chat platform.

    python -m chatapi.cli report.pdf -c C123 -c G456 --title "Weekly report"
    chatapi-upload - --filename notes.txt < notes.txt
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from chatapi.client import ChatClient
from chatapi.errors import ChatAPIError
from config.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def run_upload(args: argparse.Namespace) -> int:
    """Upload according to parsed arguments; returns the exit code."""
    if args.path == "-":
        source = sys.stdin.buffer
        filename = args.filename or ""
    else:
        path = Path(args.path)
        if not path.is_file():
            logger.error(f"File not found: {path}")
            return 2
        source = path.open("rb")
        filename = args.filename or path.name

    try:
        async with ChatClient(token=args.token) as client:
            result = await client.upload(
                filename,
                source,
                title=args.title,
                filetype=args.filetype,
                initial_comment=args.comment,
                channels=args.channel
            )
    except ChatAPIError as e:
        logger.error(f"Upload failed [{e.error_code}]: {e.message}")
        return 1
    finally:
        if source is not sys.stdin.buffer:
            source.close()

    if result.file is None:
        logger.error(f"Upload of {filename} succeeded but no file was returned")
        return 1

    print(f"{result.file.id}\t{result.file.name}\t{result.file.permalink}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point of chatapi-upload."""
    parser = argparse.ArgumentParser(
        description="Upload a file to the chat platform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chatapi-upload report.pdf -c C123
  chatapi-upload - --filename log.txt --filetype text < app.log
        """
    )
    parser.add_argument("path", help="File to upload, or - for stdin")
    parser.add_argument("--filename", default=None, help="Name on the platform (required with stdin)")
    parser.add_argument("--title", default="", help="File title")
    parser.add_argument("--filetype", default="", help="File type, e.g. text, pdf")
    parser.add_argument("--comment", default="", help="Initial comment")
    parser.add_argument(
        "--channel", "-c",
        action="append",
        default=[],
        help="Channel id to share the file on (repeatable)"
    )
    parser.add_argument("--token", default=None, help="API token (default: CHAT_API_TOKEN)")
    args = parser.parse_args(argv)

    setup_logging("chatapi-upload")
    return asyncio.run(run_upload(args))


if __name__ == "__main__":
    sys.exit(main())
