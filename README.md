# mmmsim

Simulates how a linear dynamic system responds to a test input signal. It
writes the input and output samples to flat binary files of little-endian
64-bit floats.

## Models

`mmmsim.models` has two model types:

- `ThirdOrderSystem`, for
  `a3*y''' + a2*y'' + a1*y' + a0*y = b1*u' + b0*u`.
  - `ThirdOrderSystem.from_time_constants(t1, t2, k1, k2)` builds
    `T1*T2*y''' + T1*y'' + T1*k1*k2*y' + k1*k2*y = T1*k1*k2*u' + k1*k2*u`.
  - `derivatives(state, u, u1p)` returns the time derivative of
    `(y, y', y'')`.
  - `normalized()` scales the equation so that `a3` is one.
  - Both methods raise `ValueError` when `a3` is zero.
- `FourthOrderSystem`, for
  `y'''' = -a3*y''' - a2*y'' - a1*y' - a0*y + b3*u''' + b2*u'' + b1*u' + b0*u`.
  - `highest_derivative(...)` evaluates the right-hand side.

## Input signals

`mmmsim.signals` provides the input signals. Each is an `InputSignal` holding
samples of `u` and of its first three derivatives (`u1p`, `u2p`, `u3p`). Any
derivative that is not given defaults to zeros.

- `sample_count(duration, step)` gives the number of samples on
  `[0, duration]`. For 50 s at 0.001 this is 50 001.
- `step_input(count)` is a unit step.
- `sine_input(count, step, amplitude, frequency)` is
  `amplitude*sin(frequency*t)` together with its analytic derivatives.
- `gaussian_step_input(count)` is a unit step whose first derivative is a
  Gaussian pulse at the start.
- `angular_frequency(periods, duration)` gives the angular frequency that fits
  `periods` sine periods into `duration`.

## Integrators

`mmmsim.solvers` has three integrators. Each starts from zero initial
conditions and returns one output sample per input sample.

- `simulate_rk4(system, signal, step)` uses classical Runge-Kutta on a
  `ThirdOrderSystem`.
- `simulate_taylor3(system, signal, step)` uses a third-order Taylor step on
  the normalized `ThirdOrderSystem`. If an output sample is not finite, it is
  replaced by the last finite one.
- `simulate_taylor4(system, signal, step)` uses a fourth-order Taylor step on
  a `FourthOrderSystem`.

## Storage

`mmmsim.storage` reads and writes the sample files:

- `write_samples(path, values)` writes the values as consecutive
  little-endian 64-bit floats, with no header.
- `read_samples(path)` reads them back. It raises `ValueError` if the file
  size is not a multiple of 8.

## Installation

```
pip install .
```

## Command line

```
mmmsim rk4
mmmsim taylor3
mmmsim taylor4
```

Each command asks on standard input for any model parameter not given as an
option:

- `rk4` and `taylor3` take `--t1`, `--t2`, `--k1` and `--k2`.
- `taylor4` takes `--a3`, `--a2`, `--a1`, `--a0`, `--b3`, `--b2`, `--b1` and
  `--b0`.

Common options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--step` | 0.001 | integration step |
| `--duration` | 50 | simulated time |
| `--input` | see below | input signal: `step`, `sine` or `gaussian` |
| `--periods` | see below | number of sine periods over the duration |
| `--amplitude` | see below | sine amplitude |
| `--u-output` | see below | file for `u(t)` |
| `--y-output` | see below | file for `y(t)` |

Defaults per method:

| Method | Input | Periods | Amplitude | Files |
| --- | --- | --- | --- | --- |
| `rk4` | `step` | 2.5 | 8 | `fileU.bin`, `fileY.bin` |
| `taylor3` | `gaussian` | 5 | 1 | `fileUstep.bin`, `fileYstep.bin` |
| `taylor4` | `step` | 5 | 8 | `fileU.bin`, `fileY.bin` |

`taylor3` also prints every thousandth output sample with its time, and
afterwards the normalized coefficients `a2 a1 a0 b1 b0`.

The command exits with status 1 if `u(t)` cannot be saved and 2 if `y(t)`
cannot be saved.

## Library use

```python
from mmmsim.models import ThirdOrderSystem
from mmmsim.signals import sample_count, step_input
from mmmsim.solvers import simulate_rk4
from mmmsim.storage import write_samples, read_samples

system = ThirdOrderSystem.from_time_constants(1.0, 2.0, 0.5, 0.8)
signal = step_input(sample_count(50.0, 0.001))
output = simulate_rk4(system, signal, 0.001)

write_samples("y.bin", output)
assert read_samples("y.bin") == output
```

## What it does not do

The package produces only raw sample files. It does not plot or display the
results, and the files carry no metadata such as the step or the model
parameters.