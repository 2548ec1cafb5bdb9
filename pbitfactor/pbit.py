"""Probabilistic bits and the energy terms that drive them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Sequence

_FIXED_ONE = 1 << 24
_RAND_RANGE = 65535


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _wrap64(value: int) -> int:
    return _wrap(value, 64)


def _sigmoid(x: float) -> float:
    try:
        return 1.0 / (1.0 + math.exp(-x))
    except OverflowError:
        return 0.0


@dataclass
class PBitInfo:
    """Settings shared by every p-bit of one factoring run."""

    version: str = ""
    test_num: int = 0
    output_length: int = 0
    fback_temp: float = 1.0
    f_ai: float = 0.0
    fregion_top: float = 0.0
    iback_temp: tuple[int, int, int] = (4, 4, 4)
    i_ai: tuple[int, int] = (4, 5)
    iregion_top: tuple[int, int] = (14, 15)
    supress_type: int = 0
    check_every_bit: bool = True
    quantize: bool = False
    sfa: bool = False
    sigmoid_approx: bool = False
    approx_max: int = 128
    power_approx: bool = False


def inverse_sigmoid(rand_value: int) -> int:
    """Threshold for the quantised sigmoid: 16*ln(2048/r - 1), clamped to [-128, 127]."""
    nrand = rand_value % 2049
    if nrand == 0:
        return 127
    ratio = 2048 / nrand - 1
    if ratio <= 0:
        return -128
    inv = math.log(ratio) * 16
    inv = min(max(inv, -128.0), 127.0)
    return int(inv)


class PBit:
    """One probabilistic bit at position ``k`` of a binary number."""

    def __init__(self, k: int, n: int, info: PBitInfo, rng: random.Random | None = None):
        self.bit_now = 0
        self.k = k
        self.n = n
        self.info = info
        self.rng = rng if rng is not None else random.Random()
        self.u_ai = 0
        self.d_ai = 0.0

    def _suppression(self) -> int:
        return 1 - self.bit_now if self.info.supress_type == 0 else self.bit_now

    def _ik1_int(self, nxy_y: int, y2: int) -> int:
        info = self.info
        s1 = _wrap64(nxy_y << (self.k + 1))
        s2 = _wrap64(y2 << (2 * self.k))
        ik1 = _wrap64(s1 + s2 if self.bit_now == 1 else s1 - s2)
        ik1 = _wrap64(sum(ik1 >> (shift - 4) for shift in info.iback_temp))
        if not info.sigmoid_approx:
            ik1 >>= 4

        ai0, ai1 = info.i_ai
        addvalue = (1 << (24 - ai0)) + (1 << (24 - ai1))
        if info.sfa:
            top = info.iregion_top[0]
            decay = self.u_ai - (self.u_ai >> ai0) - (self.u_ai >> ai1)
            self.u_ai = decay + (addvalue - 2 * (addvalue >> top)) * self._suppression()
        else:
            self.u_ai = 0

        remaining = _FIXED_ONE - self.u_ai
        if info.power_approx:
            ik1 = _wrap64(ik1 << (remaining.bit_length() - 1)) >> 24
        else:
            ik1 = int(ik1 * (remaining / _FIXED_ONE))

        if info.sigmoid_approx:
            limit = info.approx_max
            return _wrap(max(-limit, min(limit, ik1)), 16)
        return ik1

    def _ik1_float(self, nxy_y: int, y2: int) -> float:
        info = self.info
        s1 = float(_wrap64(nxy_y << (self.k + 1)))
        s2 = float(_wrap64(y2 << (2 * self.k)))
        p_supress = self._suppression()
        ik1 = (s1 + s2 if self.bit_now == 1 else s1 - s2) / info.fback_temp
        if info.sfa:
            self.d_ai = self.d_ai * (1 - info.f_ai) + info.fregion_top * p_supress * info.f_ai
        else:
            self.d_ai = 0.0
        return ik1 * (1 - self.d_ai)

    def refresh_bit(self, nxy_y: int, y2: int) -> int:
        """Update the bit once; return 0 if it rose, 2 if it fell, 1 if unchanged."""
        previous = self.bit_now
        draw = self.rng.randrange(_RAND_RANGE)
        info = self.info
        if info.quantize:
            ik1 = self._ik1_int(nxy_y, y2)
            if info.sigmoid_approx:
                self.bit_now = 1 if ik1 > inverse_sigmoid(draw) else 0
                return self._change(previous)
            drive = float(ik1)
        else:
            drive = self._ik1_float(nxy_y, y2)
        self.bit_now = 1 if _sigmoid(drive) > draw / _RAND_RANGE else 0
        return self._change(previous)

    def _change(self, previous: int) -> int:
        if previous == 0 and self.bit_now == 1:
            return 0
        if previous == 1 and self.bit_now == 0:
            return 2
        return 1


def get_x(bits: Sequence[PBit], n: int) -> int:
    """Odd number encoded by the first ``n - 1`` bits (the lowest bit is always 1)."""
    return 1 + sum(bit.bit_now << pos for pos, bit in enumerate(bits[: max(n - 1, 0)], start=1))