"""
Tests for core/audio/samples.py — little-endian i16 packing.

Tests cover:
    - Exact byte layout (little-endian, in order)
    - Round trip including the i16 extremes
    - Odd byte counts and out-of-range values raise MalformedPayloadError
"""

import numpy as np
import pytest

from core.audio.errors import MalformedPayloadError
from core.audio.samples import pack_samples, unpack_samples

# ---------------------------------------------------------------------------
# pack_samples
# ---------------------------------------------------------------------------


class TestPackSamples:
    def test_little_endian_layout(self):
        """0x0102 is written low byte first."""
        assert pack_samples([0x0102]) == b"\x02\x01"

    def test_negative_is_twos_complement(self):
        """-1 packs to 0xFFFF and -32768 to 0x8000 (little-endian)."""
        assert pack_samples([-1, -32768]) == b"\xff\xff\x00\x80"

    def test_samples_concatenated_in_order(self):
        assert pack_samples([1, 2, 3]) == b"\x01\x00\x02\x00\x03\x00"

    def test_two_bytes_per_sample(self):
        assert len(pack_samples(np.arange(100, dtype=np.int16))) == 200

    def test_empty(self):
        assert pack_samples([]) == b""

    def test_accepts_wider_int_arrays_in_range(self):
        assert pack_samples(np.array([32767, -32768], dtype=np.int64)) == b"\xff\x7f\x00\x80"

    def test_out_of_range_raises(self):
        with pytest.raises(MalformedPayloadError, match="Sample values must be in"):
            pack_samples([40000])

    def test_float_samples_raise(self):
        with pytest.raises(MalformedPayloadError, match="must be integers"):
            pack_samples(np.array([0.5, 1.5]))


# ---------------------------------------------------------------------------
# unpack_samples
# ---------------------------------------------------------------------------


class TestUnpackSamples:
    def test_reads_little_endian(self):
        assert unpack_samples(b"\x02\x01").tolist() == [0x0102]

    def test_returns_native_int16(self):
        assert unpack_samples(b"\x00\x00\x01\x00").dtype == np.int16

    def test_odd_byte_count_raises(self):
        with pytest.raises(MalformedPayloadError, match="even byte count"):
            unpack_samples(b"\x00\x01\x02")

    def test_empty(self):
        assert unpack_samples(b"").tolist() == []

    def test_round_trip_extremes(self):
        samples = [0, 1, -1, 32767, -32768, 12345, -12345]
        assert unpack_samples(pack_samples(samples)).tolist() == samples

    def test_round_trip_random_buffer(self):
        rng = np.random.default_rng(7)
        samples = rng.integers(-32768, 32768, size=1000, dtype=np.int16)
        np.testing.assert_array_equal(unpack_samples(pack_samples(samples)), samples)
