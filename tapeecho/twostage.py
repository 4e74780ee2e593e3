"""Partitioned convolution with a short head block and a long tail block."""

from __future__ import annotations

from .fftconvolver import FFTConvolver
from .utilities import next_power_of_2, trim_impulse_response


class TwoStageFFTConvolver:
    """Convolver that splits the impulse response over two block sizes.

    The first ``tail_block_size`` samples of the response are handled by a
    head convolver with the short block size.  The next ``tail_block_size``
    samples are convolved in short blocks as well, and the remainder in long
    blocks.  Both tail parts are computed one long block ahead and added to
    the head output, so the result has no added latency.
    """

    def __init__(self):
        self._head = FFTConvolver()
        self._tail0 = FFTConvolver()
        self._tail = FFTConvolver()
        self.reset()

    def reset(self):
        """Discard the impulse response and all state."""
        self.head_block_size = 0
        self.tail_block_size = 0
        self._head.reset()
        self._tail0.reset()
        self._tail.reset()
        self._tail_output0 = []
        self._tail_precalculated0 = []
        self._tail_output = []
        self._tail_precalculated = []
        self._tail_input = []
        self._tail_input_fill = 0
        self._precalculated_pos = 0
        self._background_input = []

    def init(self, head_block_size, tail_block_size, ir):
        """Prepare to convolve with ``ir``.

        Both block sizes are rounded up to powers of two; if the head block
        is the larger one the two are swapped.  Trailing silence in ``ir`` is
        ignored, and an all-silent response gives silence.
        """
        self.reset()
        if head_block_size <= 0 or tail_block_size <= 0:
            raise ValueError("block sizes must be greater than 0")
        if head_block_size > tail_block_size:
            head_block_size, tail_block_size = tail_block_size, head_block_size

        samples = trim_impulse_response(ir)
        if not samples:
            return

        head = next_power_of_2(head_block_size)
        tail = next_power_of_2(tail_block_size)
        self.head_block_size = head
        self.tail_block_size = tail

        self._head.init(head, samples[:tail])

        if len(samples) > tail:
            self._tail0.init(head, samples[tail:2 * tail])
            self._tail_output0 = [0.0] * tail
            self._tail_precalculated0 = [0.0] * tail

        if len(samples) > 2 * tail:
            self._tail.init(tail, samples[2 * tail:])
            self._tail_output = [0.0] * tail
            self._tail_precalculated = [0.0] * tail
            self._background_input = [0.0] * tail

        if self._tail_precalculated0 or self._tail_precalculated:
            self._tail_input = [0.0] * tail
        self._tail_input_fill = 0
        self._precalculated_pos = 0

    def process(self, samples):
        """Convolve ``samples`` and return as many output samples."""
        samples = [float(x) for x in samples]
        output = self._head.process(samples)
        if not self._tail_input:
            return output

        head = self.head_block_size
        tail = self.tail_block_size
        total = len(samples)
        processed = 0
        while processed < total:
            processing = min(
                total - processed, head - (self._tail_input_fill % head)
            )
            begin, end = processed, processed + processing
            pos = self._precalculated_pos

            for precalculated in (self._tail_precalculated0, self._tail_precalculated):
                if precalculated:
                    output[begin:end] = [
                        y + p
                        for y, p in zip(
                            output[begin:end], precalculated[pos:pos + processing]
                        )
                    ]
            self._precalculated_pos += processing

            fill = self._tail_input_fill
            self._tail_input[fill:fill + processing] = samples[begin:end]
            self._tail_input_fill += processing
            fill = self._tail_input_fill

            if self._tail_precalculated0 and fill % head == 0:
                offset = fill - head
                self._tail_output0[offset:fill] = self._tail0.process(
                    self._tail_input[offset:fill]
                )
                if fill == tail:
                    self._tail_precalculated0, self._tail_output0 = (
                        self._tail_output0,
                        self._tail_precalculated0,
                    )

            if self._tail_precalculated and fill == tail:
                self._tail_precalculated, self._tail_output = (
                    self._tail_output,
                    self._tail_precalculated,
                )
                self._background_input = list(self._tail_input)
                self._tail_output = self._tail.process(self._background_input)

            if fill == tail:
                self._tail_input_fill = 0
                self._precalculated_pos = 0

            processed = end
        return output