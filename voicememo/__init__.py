"""
Core package for the voice memo pipeline.

This package contains the components used by the ``voicememo`` entrypoint to
read an audio recording, transcribe it with a speech-to-text API, and
summarise the transcript into a Markdown document with a language model.
"""

__version__ = "0.1.0"
