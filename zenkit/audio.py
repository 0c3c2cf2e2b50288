"""In-memory PCM audio and the decoder/encoder interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Audio:
    """A block of interleaved PCM samples.

    ``sample_size`` is the number of bytes of one sample frame across all
    channels, so the buffer holds ``sample_count * sample_size`` bytes.
    """

    channel: int = 1
    sample_size: int = 1
    frequency: int = 0
    sample_count: int = 0
    data: bytearray = field(default_factory=bytearray)

    @classmethod
    def create(cls, channel, sample_size, frequency, sample_count):
        """Create silent audio with a zero-filled buffer."""
        channel &= 0xFFFF
        sample_size &= 0xFFFF
        frequency &= 0xFFFFFFFF
        sample_count &= 0xFFFFFFFF
        return cls(
            channel=channel,
            sample_size=sample_size,
            frequency=frequency,
            sample_count=sample_count,
            data=bytearray(sample_count * sample_size),
        )

    @classmethod
    def create_sine(cls, channel, sample_size, frequency, sample_count, tune):
        """Create audio sized for a tone of ``tune`` Hz.

        The buffer is allocated and left silent; no waveform is written.
        """
        return cls.create(channel, sample_size, frequency, sample_count)

    def size(self):
        """Number of bytes in the sample buffer."""
        return len(self.data)


class AudioDecoder(ABC):
    """Turns encoded bytes into :class:`Audio`."""

    @abstractmethod
    def decode(self, data):
        """Decode ``data`` and return an :class:`Audio`."""


class AudioEncoder(ABC):
    """Turns :class:`Audio` into encoded bytes."""

    @abstractmethod
    def encode(self, audio):
        """Encode ``audio`` and return the bytes."""