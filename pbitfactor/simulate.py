"""Factor integers with two registers of probabilistic bits."""

from __future__ import annotations

import argparse
import random
import time
from pathlib import Path

from .config import copy_config, read_config
from .pbit import PBit, PBitInfo, get_x

MAX_AB_LEN = 16
MAX_REPEAT = 10000
_REQUIRED_VALUES = 18


def _flag(text: str) -> bool:
    return bool(int(text))


def prepare_info(values: list[str], line: str) -> PBitInfo:
    """Build run settings from configuration values and one data line."""
    if len(values) < _REQUIRED_VALUES:
        raise ValueError(f"configuration needs {_REQUIRED_VALUES} values, got {len(values)}")
    quantize = _flag(values[6])
    sigmoid_approx = _flag(values[8])
    if not quantize and sigmoid_approx:
        print("WARNING, quitfy is not open, sigmoid_cut won't work!")

    test_num = int(line.split(",")[0])
    if test_num <= 0:
        raise ValueError(f"number to factor must be positive, got {test_num}")
    output_length = ((test_num.bit_length() - 1) + 2) // 2

    iback_temp = tuple(int(v) for v in values[11:14])
    i_ai = tuple(int(v) for v in values[14:16])
    iregion_top = tuple(int(v) for v in values[16:18])
    scale = float(1 << 24)

    return PBitInfo(
        version=values[0],
        test_num=test_num,
        output_length=output_length,
        fback_temp=float(sum(1 << t for t in iback_temp)),
        f_ai=sum(1 << (24 - a) for a in i_ai) / scale,
        fregion_top=1 - sum(1 << (24 - t) for t in iregion_top) / scale,
        iback_temp=iback_temp,
        i_ai=i_ai,
        iregion_top=iregion_top,
        supress_type=int(values[4]),
        check_every_bit=_flag(values[5]),
        quantize=quantize,
        sfa=_flag(values[7]),
        sigmoid_approx=sigmoid_approx,
        approx_max=int(values[9]),
        power_approx=_flag(values[10]),
    )


def _solve_once(info: PBitInfo, rng: random.Random) -> tuple[int, int]:
    """Anneal until a factor is found; return (factor, completed sweeps)."""
    length = info.output_length
    a_bits = [PBit(k, length * 2, info, rng) for k in range(1, MAX_AB_LEN)]
    b_bits = [PBit(k, length * 2, info, rng) for k in range(1, MAX_AB_LEN)]
    sweep = length - 1
    steps = 0
    while True:
        for target in a_bits[:sweep]:
            x0 = get_x(a_bits, length)
            y0 = get_x(b_bits, length)
            nxy_y = (info.test_num - x0 * y0) * y0
            if nxy_y == 0 and info.check_every_bit:
                return x0, steps
            target.refresh_bit(nxy_y, y0 * y0)
        for target in b_bits[:sweep]:
            y0 = get_x(a_bits, length)
            x0 = get_x(b_bits, length)
            nxy_y = (info.test_num - x0 * y0) * y0
            if nxy_y == 0 and info.check_every_bit:
                return x0, steps
            target.refresh_bit(nxy_y, y0 * y0)
        check_x = get_x(a_bits, length)
        if info.test_num - check_x * get_x(b_bits, length) == 0:
            return check_x, steps
        steps += 1


def run_number(repeat: int, info: PBitInfo, rng: random.Random | None = None) -> tuple[float, list[int]]:
    """Factor ``info.test_num`` ``repeat`` times; return (mean sweeps, sweeps per run)."""
    if repeat > MAX_REPEAT:
        raise ValueError(f"repeat must not exceed {MAX_REPEAT}, got {repeat}")
    if info.output_length - 1 > MAX_AB_LEN - 1:
        raise ValueError(f"number {info.test_num} needs more bits than supported")
    rng = rng if rng is not None else random.Random()
    mean = 0.0
    steps: list[int] = []
    for _ in range(repeat):
        answer, count = _solve_once(info, rng)
        print(f"Get answer:{answer}")
        mean += count / repeat
        steps.append(count)
    return mean, steps


def format_result(info: PBitInfo, repeat: int, mean: float) -> str:
    """One output CSV line (without newline) for a factored number."""
    parts = [str(info.test_num), str(repeat), "-"]
    if info.quantize:
        parts += [str(t) for t in info.iback_temp] + ["-"]
        if info.sfa:
            parts += [str(v) for v in (*info.i_ai, *info.iregion_top)] + ["-"]
    else:
        parts += [f"{info.fback_temp:g}", "-"]
        if info.sfa:
            parts += [f"{info.f_ai:g}", f"{info.fregion_top:g}", "-"]
    parts.append(f"{mean:g}")
    return ",".join(parts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Factor numbers with probabilistic bits.")
    parser.add_argument("config", help="configuration CSV of name,value lines")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    values = [value for _, value in read_config(args.config)]
    if len(values) < _REQUIRED_VALUES:
        parser.error(f"configuration needs {_REQUIRED_VALUES} values, got {len(values)}")

    output_folder = Path(values[2] + time.strftime("%Y%m%d%H-%M-%S"))
    output_folder.mkdir(exist_ok=True)
    copy_config(args.config, output_folder)

    rng = random.Random(args.seed)
    repeat = int(values[3])
    with open(values[1], encoding="utf-8") as data_in, open(
        output_folder / "data.csv", "w", encoding="utf-8"
    ) as data_out:
        for raw in data_in:
            line = raw.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            info = prepare_info(values, line)
            mean, _ = run_number(repeat, info, rng)
            data_out.write(format_result(info, repeat, mean) + "\n")
            print(f"One line complete!{mean:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())