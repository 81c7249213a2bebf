"""Main entry point for the application."""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from vidscribe.config import Settings
from vidscribe.errors import ConfigurationError, UserFacingError, ValidationError
from vidscribe.models import Operation, VideoResult
from vidscribe.pipeline import TranscriptPipeline
from vidscribe.youtube_client import extract_video_id

ERROR_PREFIXES = {
    Operation.SUMMARIZE: "Summary error",
    Operation.CLEAN: "Transcription error",
}


def build_pipeline(verbose: bool = False) -> TranscriptPipeline:
    load_dotenv()
    return TranscriptPipeline.from_settings(Settings.from_env(), verbose=verbose)


def print_result(result: VideoResult) -> None:
    """Print each display segment titled with the video title and footed with the channel."""
    for segment in result.segments:
        print(f"## {segment.heading}")
        print()
        print(segment.text)
        print()
        print(f"Channel: {segment.channel_name}")
        print()


def describe_error(operation: Operation, error: UserFacingError) -> str:
    prefix = ERROR_PREFIXES[operation]
    if isinstance(error, ValidationError):
        return f"{prefix}: {error}"
    return f"{prefix}: {error} (the service may be having trouble, try again later)"


def run_command(url: str, operation: Operation, verbose: bool = False) -> int:
    video_id = extract_video_id(url)
    if video_id is None:
        print(f"Could not find a YouTube video ID in: {url}")
        return 2

    try:
        pipeline = build_pipeline(verbose=verbose)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 2

    try:
        result = pipeline.run(video_id, operation)
    except UserFacingError as e:
        print(describe_error(operation, e))
        return 1

    print_result(result)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with subcommands."""
    parser = argparse.ArgumentParser(
        description="vidscribe - Summarize or clean up YouTube video transcripts",
        prog="vidscribe"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    summarize_parser = subparsers.add_parser("summarize", help="Summarize a YouTube video")
    summarize_parser.add_argument("url", help="YouTube video URL or ID")
    summarize_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    transcript_parser = subparsers.add_parser("transcript", help="Produce a cleaned-up transcript")
    transcript_parser.add_argument("url", help="YouTube video URL or ID")
    transcript_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    args = parser.parse_args(argv)

    if args.command == "summarize":
        return run_command(args.url, Operation.SUMMARIZE, verbose=args.verbose)
    elif args.command == "transcript":
        return run_command(args.url, Operation.CLEAN, verbose=args.verbose)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
