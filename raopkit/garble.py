"""Byte-rotation helpers and the buffer-scrambling step of the FairPlay SAP hash.

All arithmetic follows 32-bit C semantics: values stored into a buffer keep
only their low eight bits, and every division, modulo or right shift is taken
on the exact non-negative operand.
"""

from __future__ import annotations

from typing import MutableSequence

__all__ = [
    "rol8",
    "rol8x",
    "weird_ror8",
    "weird_rol8",
    "weird_rol32",
    "garble",
]

_MASK8 = 0xFF
_MASK32 = 0xFFFFFFFF

BUFFER0_LEN = 20
BUFFER1_LEN = 210
BUFFER2_LEN = 35
BUFFER3_LEN = 132
BUFFER4_LEN = 21


def _check_count(count: int) -> None:
    if not 0 <= count <= 8:
        raise ValueError(f"rotation count must be between 0 and 8, got {count}")


def rol8(value: int, count: int) -> int:
    """Rotate an 8-bit value left by ``count`` bits."""
    _check_count(count)
    value &= _MASK8
    return ((value << count) & _MASK8) | (value >> (8 - count))


def rol8x(value: int, count: int) -> int:
    """Rotate an 8-bit value left without discarding bits shifted past bit 7."""
    _check_count(count)
    value &= _MASK8
    return ((value << count) | (value >> (8 - count))) & _MASK32


def weird_ror8(value: int, count: int) -> int:
    """Rotate right, keeping the high part unmasked; a count of 0 yields 0."""
    _check_count(count)
    if count == 0:
        return 0
    value &= _MASK8
    return ((value >> count) & _MASK8) | (value << (8 - count))


def weird_rol8(value: int, count: int) -> int:
    """Rotate an 8-bit value left; a count of 0 yields 0."""
    _check_count(count)
    if count == 0:
        return 0
    value &= _MASK8
    return ((value << count) & _MASK8) | (value >> (8 - count))


def weird_rol32(value: int, count: int) -> int:
    """Rotate left into a 32-bit word using XOR; a count of 0 yields 0."""
    _check_count(count)
    if count == 0:
        return 0
    value &= _MASK8
    return ((value << count) ^ (value >> (8 - count))) & _MASK32


def _require(name: str, buf: MutableSequence[int], length: int) -> None:
    if len(buf) < length:
        raise ValueError(f"{name} needs at least {length} bytes, got {len(buf)}")


def garble(
    buffer0: MutableSequence[int],
    buffer1: MutableSequence[int],
    buffer2: MutableSequence[int],
    buffer3: MutableSequence[int],
    buffer4: MutableSequence[int],
) -> None:
    """Scramble the five working buffers in place.

    ``buffer3`` is output only; ``buffer4`` is read but never changed.
    """
    _require("buffer0", buffer0, BUFFER0_LEN)
    _require("buffer1", buffer1, BUFFER1_LEN)
    _require("buffer2", buffer2, BUFFER2_LEN)
    _require("buffer3", buffer3, BUFFER3_LEN)
    _require("buffer4", buffer4, BUFFER4_LEN)

    b0, b1, b2, b3, b4 = buffer0, buffer1, buffer2, buffer3, buffer4
    M8 = _MASK8

    b2[12] = (0x14 + (((b1[64] & 92) | ((b1[99] // 3) & 35))
                      & b4[rol8x(b4[b1[206] % 21], 4) % 21])) & M8

    b1[4] = ((b1[99] // 5) * (b1[99] // 5) * 2) & M8

    b2[34] = 0xB8

    v = b2[b1[203] % 35]
    b1[153] = (b1[153] ^ (v * v * b1[190])) & M8

    b0[3] = (b0[3] - (((b4[b1[205] % 21] >> 1) & 80) | 0xE6440)) & M8

    b0[16] = 0x93
    b0[13] = 0x62

    b1[33] = (b1[33] - (b4[b1[36] % 21] & 0xF6)) & M8

    tmp2 = b2[b1[67] % 35]
    b2[12] = 0x07

    tmp = b0[b1[181] % 20]
    b1[2] = (b1[2] - 3136) & M8

    b0[19] = b4[b1[58] % 21]

    b3[0] = (92 - b2[b1[32] % 35]) & M8

    b3[4] = (b2[b1[15] % 35] + 0x9E) & M8

    b1[34] = (b1[34] + b4[((b2[b1[15] % 35] + 0x9E) & M8) % 21] // 5) & M8

    b0[19] = (b0[19] + 0xFFFFFEE6 - ((b0[b3[4] % 20] >> 1) & 102)) & M8

    v = b4[b1[190] % 21]
    b1[15] = ((3 * (((b1[72] >> (v & 7)) ^ (b1[72] << ((7 - (v - 1)) & 7)))
                    - (3 * b4[b1[126] % 21]))) ^ b1[15]) & M8

    v = b2[b1[181] % 35]
    b0[15] = (b0[15] ^ (v * v * v)) & M8

    b2[4] = (b2[4] ^ (b1[202] // 3)) & M8

    A = (92 - b0[b3[0] % 20]) & _MASK32
    E = (A & 0xC6) | (~b1[105] & 0xC6) | (A & ~b1[105])
    b2[1] = (b2[1] + E * E * E) & M8

    b0[19] = (b0[19] ^ (((224 | (b4[b1[92] % 21] & 27)) * b2[b1[41] % 35]) // 3)) & M8

    b1[140] = (b1[140] + weird_ror8(92, b1[5] & 7)) & M8

    v = (~b1[4]) ^ b2[b1[12] % 35]
    b2[12] = (b2[12] + (((v | b1[182]) & 192) | (v & b1[182]))) & M8

    b1[36] = (b1[36] + 125) & M8

    p = (74 & b1[138]) | ((74 | b1[138]) & b0[15])
    q = b0[b1[43] % 20]
    b1[124] = rol8x((p & q) | ((p | q) & 95), 4) & M8

    b3[8] = ((((b0[b3[4] % 20] & 95)) & ((b4[b1[68] % 21] & 46) << 1)) | 16) ^ 92

    A = b1[177] + b4[b1[79] % 21]
    t = (3 * b1[148]) // 5
    D = (((A >> 1) | t) & b2[1]) | ((A >> 1) & t)
    b3[12] = (-34 - D) & M8

    A = 8 - (b2[22] & 7)
    B = b1[33] >> (A & 7)
    C = b1[33] << (b2[22] & 7)
    b2[16] = (b2[16] + (((b2[b3[0] % 35] & 159) | b0[b3[4] % 20] | 8)
                        - ((B ^ C) | 128))) & M8

    b0[14] = (b0[14] ^ b2[b3[12] % 35]) & M8

    A = weird_rol8(b4[b0[b1[201] % 20] % 21], (b2[b1[112] % 35] << 1) & 7)
    D = (b0[b1[208] % 20] & 131) | (b0[b1[164] % 20] & 124)
    b1[19] = (b1[19] + ((A & (D // 5)) | ((A | (D // 5)) & 37))) & M8

    v = b4[b1[45] % 21] + 92
    b2[8] = weird_ror8(140, (v * v) & 7) & M8

    b1[190] = 56

    b2[8] = (b2[8] ^ b3[0]) & M8

    b1[53] = (~((b0[b1[83] % 20] | 204) // 5)) & M8

    b0[13] = (b0[13] + b0[b1[41] % 20]) & M8

    v = b2[b3[0] % 35]
    b0[10] = (((v & b1[2]) | ((v | b1[2]) & b3[12])) // 15) & M8

    p = b4[b1[2] % 21] & 68
    q = b2[b3[8] % 35]
    A = (((56 | p) | q) & 42) | ((p | 56) & q)
    b3[16] = (A * A + 110) & M8

    b3[20] = (202 - b3[16]) & M8

    b3[24] = b1[151]

    b2[13] = (b2[13] ^ b4[b3[0] % 21]) & M8

    v = b2[b1[179] % 35] - 38
    B = (v & 177) | (b3[12] & 177)
    C = v & b3[12]
    b3[28] = (30 + (B | C) * (B | C)) & M8

    b3[32] = (b3[28] + 62) & M8

    s = b3[20] + (b3[0] & 74)
    nb = ~b4[b3[0] % 21]
    A = (s | nb) & 121
    B = s & nb
    tmp3 = A | B
    x = (A | B) ^ 0xFFFFFFA6
    C = ((x | b3[0]) & 4) | (x & b3[0])
    b1[47] = ((b2[b1[89] % 35] + C) ^ b1[47]) & M8

    b3[36] = (((rol8((tmp & 179) + 68, 2) & b0[3]) | (tmp2 & ~b0[3])) - 15) & M8

    b1[123] = (b1[123] ^ 221) & M8

    A = (b4[b3[0] % 21] // 3) - b2[b3[4] % 35]
    C = (((b3[0] & 163) + 92) & 246) | (b3[0] & 92)
    E = ((C | b3[24]) & 54) | (C & b3[24])
    b3[40] = (A - E) & M8

    b3[44] = (tmp3 ^ 81 ^ (((b3[0] >> 1) & 101) + 26)) & M8

    b3[48] = b2[b3[4] % 35] & 27
    b3[52] = 27
    b3[56] = 199

    w4 = b4[b3[0] % 21]
    left = ((((b3[40] | b3[24]) & 177) | (b3[40] & b3[24]))
            & (((b4[b3[0] % 20] & 177) | 176) | (w4 & ~3)))
    right = ((((b3[40] & b3[24]) | ((b3[40] | b3[24]) & 177)) & 199)
             | ((((w4 & 1) + 176) | (w4 & ~3)) & b3[56]))
    b3[64] = (b3[4] + (((left | right) & ~b3[52]) | b3[48])) & M8

    b2[33] = (b2[33] ^ b1[26]) & M8

    b1[106] = (b1[106] ^ b3[20] ^ 133) & M8

    b2[30] = (((b3[64] // 3) - (275 | (b3[0] & 247))) ^ b0[b1[122] % 20]) & M8

    b1[22] = (b2[b1[90] % 35] & 95) | 68

    A = (b4[b3[36] % 21] & 184) | (b2[b3[44] % 35] & ~184)
    b2[18] = (b2[18] + ((A * A * A) >> 1)) & M8

    b2[5] = (b2[5] - b4[b1[92] % 21]) & M8

    A = ((((b1[41] & ~24) | (b2[b1[183] % 35] & 24)) & (b3[16] + 53))
         | (b3[20] & b2[b3[20] % 35]))
    B = (b1[17] & ~b3[44]) | (b0[b1[59] % 20] & b3[44])
    b2[18] = (b2[18] ^ (A * B)) & M8

    A = weird_ror8(b1[11], b2[b1[28] % 35] & 7) & 7
    B = (((b0[b1[93] % 20] & ~b0[14]) | (b0[14] & 150)) & ~28) | (b1[7] & 28)
    r = weird_rol8(b2[b3[0] % 35], A)
    b2[22] = ((((B | r) & b2[33]) | (B & r)) + 74) & M8

    A = b4[(b0[b1[39] % 20] ^ 217) % 21]
    p = ((b3[20] | b3[0]) & 214) | (b3[20] & b3[0])
    b0[15] = (b0[15] - ((p & A) | ((p | A) & b3[32]))) & M8

    p2 = b2[b1[57] % 35]
    p0 = b0[b3[64] % 20]
    B = ((p2 & p0) | ((p0 | p2) & 95) | (b3[64] & 45) | 82) & 32
    C = ((p2 & p0) | ((p2 | p0) & 95)) & ((b3[64] & 45) | 82)
    D = ((b3[0] // 3) - (b3[64] | b1[22])) ^ (b3[28] + 62) ^ (B | C)
    T = b0[(D & M8) % 20]

    v = b0[b1[99] % 20]
    b3[68] = ((v * v * v * v) | b2[b3[64] % 35]) & M8

    U = b0[b1[50] % 20]
    W = b2[b1[138] % 35]
    X = b4[b1[39] % 21]
    Y = b0[b1[4] % 20]
    Z = b4[b1[202] % 21]
    V = b0[b1[151] % 20]
    S = b2[b1[14] % 35]
    R = b0[b1[145] % 20]

    p2 = b2[b3[68] % 35]
    p0 = b0[b1[209] % 20]
    A = (p2 & p0) | ((p2 | p0) & 24)
    B = weird_rol8(b4[b1[127] % 21], p2 & 7)
    C = (A & b0[10]) | (B & ~b0[10])
    D = 7 ^ (b4[b2[b3[36] % 35] % 21] << 1)
    b3[72] = ((C & 71) | (D & ~71)) & M8

    b2[2] = (b2[2] + ((((b0[b3[20] % 20] << 1) & 159) | (b4[b1[190] % 21] & ~159))
                      & ((((b4[b3[64] % 21] & 110) | (b0[b1[25] % 20] & ~110)) & ~150)
                         | (b1[25] & 150)))) & M8

    b2[14] = (b2[14] - (((b2[b3[20] % 35] & (b3[72] ^ b2[b1[100] % 35])) & ~34)
                        | (b1[97] & 34))) & M8

    b0[17] = 115

    p4 = b4[b1[17] % 21]
    p0 = b0[b3[20] % 20]
    inner = ((p4 | p0) & b3[72]) | (p4 & p0)
    third = b1[50] // 3
    b1[23] = (b1[23] ^ (((inner & third) | ((inner | third) & 246)) << 1)) & M8

    p0 = b0[b3[40] % 20]
    b0[13] = ((((((p0 | b1[10]) & 82) | (p0 & b1[10])) & 209)
               | ((b0[b1[39] % 20] << 1) & 46)) >> 1) & M8

    b2[33] = (b2[33] - (b1[113] & 9)) & M8

    b2[28] = (b2[28] - ((((2 | (b1[110] & 222)) >> 1) & ~223) | (b3[20] & 223))) & M8

    J = weird_rol8(V | Z, U & 7)
    A = (b2[16] & T) | (W & ~b2[16])
    B = (b1[33] & 17) | (X & ~17)
    q = (A + B) // 5
    E = ((Y | q) & 147) | (Y & q)
    mix = (b3[8] + J + E) & M8
    p4 = b4[mix % 21]
    M = (b3[40] & p4) | ((b3[40] | p4) & b2[23])

    v = b4[b3[20] % 21] - 48
    b0[15] = (((v & ~b1[184]) | (v & 189) | (189 & ~b1[184])) & (M * M * M)) & M8

    b2[22] = (b2[22] + b1[183]) & M8

    b3[76] = ((3 * b4[b1[1] % 21]) ^ b3[0]) & M8

    A = b2[mix % 35]
    p4 = b4[b1[178] % 21]
    F = ((((p4 & A) | ((p4 | A) & 209)) * b0[b1[13] % 20])
         * (b4[b1[26] % 21] >> 1)) & _MASK32
    base = F + 0x733FFFF9
    G = (base * 198 - ((base * 396 + 212) & 212) + 85) & _MASK32
    b3[80] = (b3[36] + (G ^ 148) + ((G ^ 107) << 1) - 127) & M8

    b3[84] = (b2[b3[64] % 35] & 245) | (b2[b3[20] % 35] & 10)

    A = b0[b3[68] % 20] | 81
    b2[18] = (b2[18] - (((A * A * A) & ~b0[15]) | ((b3[80] // 15) & b0[15]))) & M8

    b3[88] = (b3[8] + J + E - b0[b1[160] % 20]
              + (b4[b0[mix % 20] % 21] // 3)) & M8

    B = ((R ^ b3[72]) & ~198) | ((S * S) & 198)
    p4 = b4[b1[69] % 21]
    F = (p4 & b1[172]) | ((p4 | b1[172]) & ((b3[12] - B) + 77))
    b0[16] = (147 - ((b3[72] & ((F & 251) | 1)) | (((F & 250) | b3[72]) & 198))) & M8

    p4 = b4[b1[168] % 21]
    p0 = b0[b1[29] % 20]
    C = (p4 & p0 & 7) | ((p4 | p0) & 6)
    p4 = b4[b1[155] % 21]
    F = (p4 & b1[105]) | ((p4 | b1[105]) & 141)
    b0[3] = (b0[3] - b4[weird_rol32(F, C) % 21]) & M8

    b1[5] = (weird_ror8(b0[12], (b0[b1[61] % 20] // 5) & 7)
             ^ (((~b2[b3[84] % 35]) & _MASK32) // 5)) & M8

    b1[198] = (b1[198] + b1[3]) & M8

    A = 162 | b2[b3[64] % 35]
    b1[164] = (b1[164] + (A * A) // 5) & M8

    G = weird_ror8(139, b3[80] & 7)
    v = b4[b3[64] % 21]
    C = ((v * v * v) & 95) | (b0[b3[40] % 20] & ~95)
    p0 = b0[b3[20] % 20]
    b3[92] = ((G & 12) | (p0 & 12) | (G & p0) | C) & M8

    b2[12] = (b2[12] + ((b1[103] & 32) | (b3[92] & (b1[103] | 60)) | 16) // 3) & M8

    b3[96] = b1[143]
    b3[100] = 27

    sel = ((b3[40] & ~b2[8]) | (b1[35] & b2[8])) & b3[64]
    b3[104] = (sel ^ 119) & M8
    b3[108] = (238 & (sel << 1)) & M8

    low = ~b3[64] & (b3[84] // 3)
    b3[112] = (low ^ 49) & M8
    b3[116] = (98 & (low << 1)) & M8

    A = (b1[35] & b2[8]) | (b3[40] & ~b2[8])
    B = (A & b3[64]) | ((b3[84] // 3) & ~b3[64])
    b1[143] = (b3[96] - ((B & (86 + ((b1[172] & 64) >> 1)))
                         | (((((b1[172] & 65) >> 1) ^ 86) | (low | sel)) & b3[100]))) & M8

    b2[29] = 162

    A = ((b4[b3[88] % 21] & 160) | (b0[b1[125] % 20] & 95)) >> 1
    B = b2[b1[149] % 35] ^ (b1[43] * b1[43])
    b0[15] = (b0[15] + ((B & A) | ((A | B) & 115))) & M8

    b3[120] = (b3[64] - b0[b3[40] % 20]) & M8

    b1[95] = b4[b3[20] % 21]

    v = b2[b1[17] % 35]
    A = weird_ror8(b2[b3[80] % 35], (v * v * v) & 7)
    b0[7] = (b0[7] - A * A) & M8

    v = b4[b1[202] % 21]
    b2[8] = (b2[8] - b1[184] + v * v * v) & M8

    b0[16] = ((b2[b1[102] % 35] << 1) & 132) & M8

    b3[124] = ((b4[b3[40] % 21] >> 1) ^ b3[68]) & M8

    b0[7] = (b0[7] - (b0[b1[191] % 20]
                      - (((b4[b1[80] % 21] << 1) & ~177)
                         | (b4[b4[b3[88] % 21] % 21] & 177)))) & M8

    b0[6] = b0[b1[119] % 20]

    A = (b4[b1[190] % 21] & ~209) | (b1[118] & 209)
    v = b0[b3[120] % 20]
    B = v * v
    b0[12] = ((b0[b3[84] % 20] ^ (b2[b1[71] % 35] + b2[b1[15] % 35]))
              & ((A & B) | ((A | B) & 27))) & M8

    p2 = b2[b3[88] % 35]
    B = (b1[32] & p2) | ((b1[32] | p2) & 23)
    D = ((b4[b1[57] % 21] * 231) & 169) | (B & 86)
    F = ((((b0[b1[82] % 20] & ~29) | (b4[b3[124] % 21] & 29)) & 190)
         | (b4[(D // 5) % 21] & ~190))
    v = b0[b3[40] % 20]
    H = v * v * v
    K = (H & b1[82]) | (H & 92) | (b1[82] & 92)
    b3[128] = (((F & K) | ((F | K) & 192)) ^ (D // 5)) & M8

    b2[25] = (b2[25] ^ (((b0[b3[120] % 20] << 1) * b1[5])
                        - (weird_rol8(b3[76], b4[b3[124] % 21] & 7)
                           & (b3[20] + 110)))) & M8