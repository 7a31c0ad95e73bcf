"""Codeword assembly: byte-mode bitstream, padding, Reed-Solomon and interleaving."""

from __future__ import annotations

from typing import List, Sequence

from .bitbuffer import BitBuffer
from .errors import DataExceedsCapacityError, DataLengthUndeterminableError
from .polynomial import Polynomial, error_correct_polynomial, remainder_coefficients
from .tables import BlockSpec, ErrorCorrectLevel, Mode, length_bits, rs_blocks

PAD0 = 0xEC
PAD1 = 0x11


def reed_solomon_remainder(data: Sequence[int], ec_count: int) -> List[int]:
    """Return the ``ec_count`` error correction codewords for one block."""
    generator = error_correct_polynomial(ec_count)
    remainder = Polynomial(data, shift=len(generator) - 1) % generator
    return remainder_coefficients(remainder, len(generator) - 1)


def create_data(version: int, level: ErrorCorrectLevel, payload: bytes) -> List[int]:
    width = length_bits(Mode.BYTE, version)
    if width is None:
        raise DataLengthUndeterminableError(Mode.BYTE, version)
    blocks = rs_blocks(version, level)
    buffer = BitBuffer()

    buffer.put(Mode.BYTE.value, 4)
    buffer.put(len(payload), width)
    for byte in payload:
        buffer.put(byte, 8)

    total_bits = 8 * sum(block.data_count for block in blocks)
    if buffer.bit_count > total_bits:
        raise DataExceedsCapacityError(buffer.bit_count, total_bits)
    if buffer.bit_count + 4 <= total_bits:
        buffer.put(0, 4)
    while buffer.bit_count % 8:
        buffer.put_bit(False)
    while buffer.bit_count < total_bits:
        buffer.put(PAD0, 8)
        if buffer.bit_count >= total_bits:
            break
        buffer.put(PAD1, 8)

    return create_bytes(buffer, blocks)


def create_bytes(buffer: BitBuffer, blocks: Sequence[BlockSpec]) -> List[int]:
    data = buffer.to_bytes()
    offset = 0
    dc_blocks: List[List[int]] = []
    ec_blocks: List[List[int]] = []
    for block in blocks:
        dc_blocks.append(data[offset:offset + block.data_count])
        offset += block.data_count
        ec_blocks.append(reed_solomon_remainder(dc_blocks[-1], block.ec_count))

    result: List[int] = []
    for i in range(max(block.data_count for block in blocks)):
        for dc in dc_blocks:
            if i < len(dc):
                result.append(dc[i])
    for i in range(max(block.ec_count for block in blocks)):
        for ec in ec_blocks:
            if i < len(ec):
                result.append(ec[i])
    assert len(result) == sum(block.total_count for block in blocks)
    return result
