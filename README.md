# tapeecho

Pure-Python building blocks for a tape echo: filters, a fractional-delay
line, a wet/dry mixer, a real FFT, uniform and two-stage partitioned FFT
convolution, and the echo's parameter layout with its delay-mode tables.
Nothing outside the standard library is needed.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `tapeecho.biquad`: `BiquadType` (`LPF`, `HPF`, `NOTCH`, `PEAKING`,
  `LOW_SHELF`, `HIGH_SHELF`), `Biquad` with `set_parameters`,
  `set_cutoff`, `set_gain`, `reset` and `process`, and `BiquadCascade`, a
  chain of low-pass biquads at Q 0.707 set up with `init_filters`.
- `tapeecho.filters`: `OnePole` smoothing filter (`set_cutoff`,
  `set_time_constant`), `AllPassFilter` with a fixed coefficient of 0.5,
  and a windowless sinc `FirFilter`.
- `tapeecho.delayline`: `CircularBuffer`, a power-of-two delay line read
  in milliseconds (`read`, optionally linearly interpolated) or in whole
  samples (`read_samples`).
- `tapeecho.mixing`: `WetDryProcessor`, whose `process(dry, wet, mix, scale)`
  returns a new buffer `(dry * (1 - mix) + wet * mix) * scale` per channel.
- `tapeecho.ooura`: `make_tables` and `rdft`, the radix-4 real FFT kernel
  working in place on a list of floats.
- `tapeecho.audiofft`: `AudioFFT` with split-complex `fft` / `ifft`
  (`ifft(*fft(x))` gives back `x`), and `complex_size`.
- `tapeecho.utilities`: `next_power_of_2`, `trim_impulse_response`,
  `copy_and_pad`, `complex_multiply_accumulate`.
- `tapeecho.fftconvolver`: `FFTConvolver`, uniformly partitioned
  convolution that adds no latency.
- `tapeecho.twostage`: `TwoStageFFTConvolver`, a short head block for low
  latency with a long tail block for the bulk of the impulse response.
- `tapeecho.settings`: `FloatParameter`, `ChoiceParameter`,
  `ParameterGroup`, `parameter_layout`, `find_parameter`, and the
  per-mode tables `playhead_states`, `delay_enabled`, `reverb_enabled`.

## Example

```python
from tapeecho.biquad import Biquad, BiquadType
from tapeecho.delayline import CircularBuffer
from tapeecho.twostage import TwoStageFFTConvolver

lowpass = Biquad(BiquadType.LPF, 9000.0, 48000.0, 0.5, 0.0)
tape = CircularBuffer(48000, 700.0)

out = []
for x in [1.0] + [0.0] * 9999:
    y = tape.read(150.0, True)
    tape.write(x + 0.5 * y)
    out.append(lowpass.process(y))

conv = TwoStageFFTConvolver()
conv.init(32, 2048, [1.0, 0.5, 0.25])
print(conv.process([1.0, 0.0, 0.0, 0.0]))   # about [1.0, 0.5, 0.25, 0.0]
```

The echo modes "1" to "11" and "Reverb Only" are indexed 0 to 11 in
`tapeecho.settings`: `playhead_states(3)` gives the on/off states of the
three playheads in mode "4", `reverb_enabled(4)` tells whether reverb is
heard in mode "5", and `playhead_states(11)` returns `None` because the
reverb-only mode leaves the playheads as they were.

## What it does not do

The package provides the parts, not a finished effect. It has no complete
echo processing chain, no tone stack, no tape saturation model, no spring
reverb model or impulse response, no audio file reading or writing, no
plugin host interface and no command-line program. Wiring the parts into
an effect is left to the caller.