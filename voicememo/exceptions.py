"""Custom exceptions for the voice memo pipeline."""


class ConfigurationError(Exception):
    """Raised when the environment does not describe a usable configuration."""


class AudioMetadataError(Exception):
    """Raised when the duration of an audio file cannot be determined."""

    def __init__(self, audio_path: str, cause: Exception | None = None):
        self.audio_path = audio_path
        self.cause = cause
        super().__init__(f"Failed to read audio metadata from '{audio_path}'")


class TranscriptionError(Exception):
    """Raised when the transcription API call fails."""

    def __init__(self, audio_path: str, cause: Exception | None = None):
        self.audio_path = audio_path
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{audio_path}'")


class SummarisationError(Exception):
    """Raised when the chat completion API call fails."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Failed to summarise transcript")


class ResponseDecodingError(Exception):
    """Raised when an API response does not have the expected shape."""

    def __init__(self, endpoint: str, cause: Exception | None = None):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"Unexpected response from '{endpoint}'")
