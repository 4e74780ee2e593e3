"""Wet/dry blending of multichannel buffers."""

from __future__ import annotations


class WetDryProcessor:
    """Crossfades a dry and a wet buffer and applies an output scale."""

    def __init__(self):
        self.num_channels = 2
        self.mix = 0.0

    def reset(self, num_channels):
        """Set the expected channel count."""
        self.num_channels = num_channels

    def process(self, dry, wet, mix, scale):
        """Return ``(dry * (1 - mix) + wet * mix) * scale`` per channel.

        The channel count follows ``dry``; ``wet`` must have at least as many
        channels, and each pair of channels must be the same length.
        """
        self.num_channels = len(dry)
        if len(wet) < self.num_channels:
            raise ValueError("wet buffer has fewer channels than dry buffer")
        self.mix = mix
        dry_amount = 1.0 - mix
        return [
            [
                (dry_amount * d + mix * w) * scale
                for d, w in zip(dry_channel, wet_channel, strict=True)
            ]
            for dry_channel, wet_channel in zip(dry, wet)
        ]