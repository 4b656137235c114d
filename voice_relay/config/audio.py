"""Audio format constants shared by the recognition and synthesis paths."""

from __future__ import annotations

# Browser clients stream PCM16 mono at 16kHz.
INPUT_ENCODING = "LINEAR16"
INPUT_SAMPLE_RATE_HZ = 16000
INPUT_CHANNELS = 1
INPUT_SAMPLE_WIDTH_BYTES = 2
INPUT_BYTES_PER_SECOND = INPUT_SAMPLE_RATE_HZ * INPUT_CHANNELS * INPUT_SAMPLE_WIDTH_BYTES

OUTPUT_ENCODING = "LINEAR16"

__all__ = [
    "INPUT_BYTES_PER_SECOND",
    "INPUT_CHANNELS",
    "INPUT_ENCODING",
    "INPUT_SAMPLE_RATE_HZ",
    "INPUT_SAMPLE_WIDTH_BYTES",
    "OUTPUT_ENCODING",
]
