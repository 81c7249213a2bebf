import re
from typing import Optional

from pytube import YouTube
from youtube_transcript_api import (
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from vidscribe.errors import RemoteError, TranscriptNotFoundError
from vidscribe.models import VideoInfo

YOUTUBE_WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"

_VIDEO_URL_RE = re.compile(
    r"(?:youtube\.com/watch\?(?:.*&)?v=|youtu\.be/|youtube\.com/shorts/|youtube\.com/embed/)"
    r"(?P<id>[a-zA-Z0-9_-]+)"
)
_VIDEO_ID_RE = re.compile(r"[a-zA-Z0-9_-]{11}")


def extract_video_id(url_or_id: str) -> Optional[str]:
    """Extract a video ID from a YouTube URL, or return a bare ID unchanged."""
    url_or_id = url_or_id.strip()
    match = _VIDEO_URL_RE.search(url_or_id)
    if match:
        return match.group("id")
    if _VIDEO_ID_RE.fullmatch(url_or_id):
        return url_or_id
    return None


class TranscriptFetcher:
    def __init__(self, client: Optional[YouTubeTranscriptApi] = None):
        self.client = client or YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> str:
        """
        Return the caption text of a video as one space-joined string.

        Raises:
            TranscriptNotFoundError: if the video has no usable transcript
            RemoteError: for any other failure talking to YouTube
        """
        try:
            transcript = self.client.fetch(video_id)
        except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as e:
            raise TranscriptNotFoundError(f"No transcript available for video {video_id}") from e
        except Exception as e:
            raise RemoteError(f"Could not fetch transcript for video {video_id}: {e}") from e

        parts = [snippet.text.replace("\n", " ").strip() for snippet in transcript]
        text = " ".join(part for part in parts if part)
        if not text:
            raise TranscriptNotFoundError(f"Transcript for video {video_id} is empty")
        return text


class MetadataFetcher:
    def fetch(self, video_id: str) -> VideoInfo:
        """
        Get video title and channel name using pytube.

        Raises:
            RemoteError: if the metadata cannot be retrieved
        """
        try:
            yt = YouTube(YOUTUBE_WATCH_URL_TEMPLATE.format(video_id=video_id))
            return VideoInfo(title=yt.title, channel_name=yt.author)
        except Exception as e:
            raise RemoteError(f"Could not fetch metadata for video {video_id}: {e}") from e
