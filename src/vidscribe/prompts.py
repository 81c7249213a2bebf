"""
LLM prompts used throughout the application.

All prompts are centralized here for easy maintenance and consistency.
Templates are plain str.format() strings; the header placeholder receives the
optional title/channel lines rendered by render_header().
"""

from typing import Optional

# ============================================================================
# Shared
# ============================================================================

DEFAULT_SPEAKER = "the speaker"


def render_header(title: Optional[str], channel_name: Optional[str]) -> str:
    """Render the "Title: ..." and "Channel: ..." lines, each only when present."""
    header = f"Title: {title}" if title else ""
    if channel_name:
        header += f"\nChannel: {channel_name}"
    return header


# ============================================================================
# Summarize Prompts
# ============================================================================

SUMMARIZE_SYSTEM_MESSAGE_TEMPLATE = """You are a summarization assistant. When the user gives you a message, you respond with a summary of the information inside. Just summarize the information without saying "the speaker says" or similar. The message will be an autogenerated transcript of a youtube video, and may have transcription errors and improperly separated speakers. Your summary should be about {goal_length} words."""

SUMMARIZE_USER_MESSAGE_TEMPLATE = """{header}

Transcript: {transcript}


Be as concise as possible in your summary. Repeat the information without extra fluff like '{speaker} says'. Use full markdown syntax, and break the summary into paragraphs. Emphasize the most important information in **bold**. Remember that your summary should be about {goal_length} words. Just return the summary without repeating the Title or Channel, and don't write `Summary:`"""

# ============================================================================
# Clean Transcript Prompts
# ============================================================================

CLEAN_TRANSCRIPT_SYSTEM_MESSAGE = """You are a transcription assistant. The user will send an autogenerated transcript of a youtube video, which may have transcription errors, punctuation errors, and improperly separated speakers. You respond with a cleaned-up version of the transcript. The channel name and video title will be included in the message for additional context, but you should not include them in your response"""

CLEAN_TRANSCRIPT_USER_MESSAGE_TEMPLATE = """{header}

Transcript: {transcript}


Clean up the transcript above, fixing punctuation, transcription errors, and improperly separated speakers. Use full markdown syntax, and break it into paragraphs. Emphasize the most important information in **bold**. Just return the transcript without repeating the Title or Channel, and don't write `Transcript:`."""
