import random

import pytest

from pbitfactor.pbit import PBit, PBitInfo, get_x, inverse_sigmoid


def make_info(**overrides):
    base = dict(
        test_num=35,
        output_length=3,
        fback_temp=1.0,
        f_ai=0.01,
        fregion_top=0.5,
        iback_temp=(4, 4, 4),
        i_ai=(4, 5),
        iregion_top=(14, 15),
        supress_type=0,
        check_every_bit=True,
        quantize=False,
        sfa=False,
        sigmoid_approx=False,
        approx_max=128,
        power_approx=False,
    )
    base.update(overrides)
    return PBitInfo(**base)


def test_inverse_sigmoid_edges():
    assert inverse_sigmoid(0) == 127
    assert inverse_sigmoid(2049) == 127
    assert inverse_sigmoid(2048) == -128
    assert inverse_sigmoid(1024) == 0


def test_inverse_sigmoid_monotonic_and_bounded():
    values = [inverse_sigmoid(r) for r in range(1, 2048)]
    assert all(-128 <= v <= 127 for v in values)
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_get_x_all_zero_is_one():
    info = make_info()
    bits = [PBit(i + 1, 6, info, random.Random(0)) for i in range(5)]
    assert get_x(bits, 3) == 1
    assert get_x(bits, 1) == 1


def test_get_x_encodes_bits():
    info = make_info()
    bits = [PBit(i + 1, 6, info, random.Random(0)) for i in range(5)]
    bits[0].bit_now = 1
    bits[2].bit_now = 1
    assert get_x(bits, 4) == 1 + 2 + 8
    assert get_x(bits, 2) == 3
    bits[4].bit_now = 1
    assert get_x(bits, 4) == 11


def test_float_mode_strong_drive_sets_and_clears():
    bit = PBit(1, 6, make_info(), random.Random(1))
    assert bit.refresh_bit(10**6, 0) == 0
    assert bit.bit_now == 1
    assert bit.refresh_bit(10**6, 0) == 1
    assert bit.bit_now == 1
    assert bit.refresh_bit(-(10**6), 0) == 2
    assert bit.bit_now == 0
    assert bit.refresh_bit(-(10**6), 0) == 1
    assert bit.bit_now == 0


def test_quantized_sigmoid_mode_strong_drive():
    info = make_info(quantize=True, sigmoid_approx=True)
    bit = PBit(1, 6, info, random.Random(2))
    assert bit.refresh_bit(10**6, 0) == 0
    assert bit.bit_now == 1
    assert bit.refresh_bit(-(10**6), 0) == 2
    assert bit.bit_now == 0


def test_zero_drive_is_random_and_reproducible():
    info = make_info()
    first = PBit(1, 6, info, random.Random(7))
    second = PBit(1, 6, info, random.Random(7))
    seq_a = []
    seq_b = []
    for _ in range(200):
        first.refresh_bit(0, 0)
        second.refresh_bit(0, 0)
        seq_a.append(first.bit_now)
        seq_b.append(second.bit_now)
    assert seq_a == seq_b
    assert set(seq_a) == {0, 1}


def test_float_sfa_updates_local_temperature():
    info = make_info(sfa=True, supress_type=0)
    bit = PBit(1, 6, info, random.Random(3))
    bit.refresh_bit(0, 0)
    assert bit.d_ai == pytest.approx(info.fregion_top * info.f_ai)


def test_float_without_sfa_keeps_zero_temperature():
    bit = PBit(1, 6, make_info(sfa=False), random.Random(3))
    bit.refresh_bit(5, 1)
    assert bit.d_ai == 0.0


def test_int_sfa_accumulator_value():
    info = make_info(quantize=True, sigmoid_approx=True, sfa=True, supress_type=0)
    bit = PBit(1, 6, info, random.Random(4))
    bit.refresh_bit(0, 0)
    assert bit.u_ai == 1572672
    assert 0 < bit.u_ai < (1 << 24)


def test_int_sfa_suppression_follows_bit():
    info = make_info(quantize=True, sigmoid_approx=True, sfa=True, supress_type=1)
    bit = PBit(1, 6, info, random.Random(4))
    bit.refresh_bit(-(10**6), 0)
    assert bit.u_ai == 0
    assert bit.bit_now == 0