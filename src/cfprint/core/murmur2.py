"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/murmur2.py
32-bit MurmurHash2 as used by the legacy fingerprint matching service.

The constants, the little-endian block decoding and the tail fallthrough order
are fixed by the external definition and must stay bit-exact.
"""

import struct

from cfprint.core.preprocess import as_bytes

SEED = 1
M = 0x5BD1E995
R = 24
MASK_32 = 0xFFFFFFFF


def murmur2(data: bytes, seed: int = SEED) -> int:
    """
    Computes the unsigned 32-bit MurmurHash2 of `data`.

    Args:
        data: Bytes-like buffer (already filtered by the caller), read as raw bytes
        seed: Hash seed, 1 for fingerprints

    Returns:
        int: Hash value in range [0, 2**32)
    """
    data = as_bytes(data)
    length = len(data)
    h = (seed ^ length) & MASK_32

    nblocks = length // 4
    if nblocks:
        for k in struct.unpack_from(f"<{nblocks}I", data):
            k = (k * M) & MASK_32
            k ^= k >> R
            k = (k * M) & MASK_32

            h = (h * M) & MASK_32
            h ^= k

    tail_start = nblocks * 4
    remaining = length - tail_start
    # Fallthrough: byte 2, then byte 1, then byte 0
    if remaining == 3:
        h ^= data[tail_start + 2] << 16
    if remaining >= 2:
        h ^= data[tail_start + 1] << 8
    if remaining >= 1:
        h ^= data[tail_start]
        h = (h * M) & MASK_32

    # Avalanche
    h ^= h >> 13
    h = (h * M) & MASK_32
    h ^= h >> 15

    return h
