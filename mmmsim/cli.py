"""Command line entry point running the simulations."""

from __future__ import annotations

import argparse

from mmmsim.models import FourthOrderSystem, ThirdOrderSystem
from mmmsim.signals import (
    InputSignal,
    angular_frequency,
    gaussian_step_input,
    sample_count,
    sine_input,
    step_input,
)
from mmmsim.solvers import simulate_rk4, simulate_taylor3, simulate_taylor4
from mmmsim.storage import write_samples

_TIME_CONSTANTS = ("t1", "t2", "k1", "k2")
_POLYNOMIAL = ("a3", "a2", "a1", "a0", "b3", "b2", "b1", "b0")

_METHODS = {
    "rk4": dict(params=_TIME_CONSTANTS, u_output="fileU.bin", y_output="fileY.bin",
                input="step", periods=2.5, amplitude=8.0),
    "taylor3": dict(params=_TIME_CONSTANTS, u_output="fileUstep.bin", y_output="fileYstep.bin",
                    input="gaussian", periods=5.0, amplitude=1.0),
    "taylor4": dict(params=_POLYNOMIAL, u_output="fileU.bin", y_output="fileY.bin",
                    input="step", periods=5.0, amplitude=8.0),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mmmsim", description="Simulate a linear dynamic system.")
    sub = parser.add_subparsers(dest="method", required=True)
    for name, spec in _METHODS.items():
        p = sub.add_parser(name)
        for param in spec["params"]:
            p.add_argument(f"--{param}", type=float, default=None)
        p.add_argument("--step", type=float, default=0.001)
        p.add_argument("--duration", type=float, default=50.0)
        p.add_argument("--input", choices=("step", "sine", "gaussian"), default=spec["input"])
        p.add_argument("--periods", type=float, default=spec["periods"])
        p.add_argument("--amplitude", type=float, default=spec["amplitude"])
        p.add_argument("--u-output", default=spec["u_output"])
        p.add_argument("--y-output", default=spec["y_output"])
        p.set_defaults(params=spec["params"])
    return parser


def _prompt(parser: argparse.ArgumentParser, name: str) -> float:
    text = input(f"\n {name.upper()} = ")
    try:
        return float(text)
    except ValueError:
        parser.error(f"invalid value for {name.upper()}: {text!r}")


def _make_signal(args: argparse.Namespace) -> InputSignal:
    count = sample_count(args.duration, args.step)
    if args.input == "sine":
        w = angular_frequency(args.periods, args.duration)
        return sine_input(count, args.step, args.amplitude, w)
    if args.input == "gaussian":
        return gaussian_step_input(count)
    return step_input(count)


def main(argv=None) -> int:
    """Run a simulation and write u(t) and y(t) to binary files."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    params = {
        name: value if (value := getattr(args, name)) is not None else _prompt(parser, name)
        for name in args.params
    }
    print("\n")

    try:
        signal = _make_signal(args)
        if args.method == "taylor4":
            output = simulate_taylor4(FourthOrderSystem(**params), signal, args.step)
        else:
            system = ThirdOrderSystem.from_time_constants(**params)
            if args.method == "rk4":
                output = simulate_rk4(system, signal, args.step)
            else:
                output = simulate_taylor3(system, signal, args.step)
                for i in range(0, len(output) - 1, 1000):
                    print(f"{i * args.step:g} {output[i]:g}")
    except ValueError as exc:
        parser.error(str(exc))

    try:
        write_samples(args.u_output, signal.u)
    except OSError:
        print("\n\n Saving u(t): error!\n")
        return 1
    try:
        write_samples(args.y_output, output)
    except OSError:
        print("\n\n Saving y(t): error!\n")
        return 2

    if args.method == "taylor3":
        norm = system.normalized()
        print("\n")
        print(f"{norm.a2:g} {norm.a1:g} {norm.a0:g} {norm.b1:g} {norm.b0:g}")
        print("\n")
    return 0