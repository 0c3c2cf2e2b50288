"""PCM audio and bitmap buffers with raw and WAV codecs, colours, lock-guarded containers and TCP socket helpers."""

__version__ = "0.1.0"