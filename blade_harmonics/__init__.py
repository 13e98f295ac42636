"""Blade Harmonics -- interactive visualization of phase-shifted blade sinusoids.

For B blades evenly spaced around a rotation, with a global phase offset Δψ,
this package samples ``sin(θ + Δψ + 2πb/B)`` and its square over one
revolution and plots every blade together with the sum over blades.  The
charts make two identities visible:

- the sine sum cancels for B >= 2
- the squared-sine sum is the constant B/2 for B >= 3

Key principles:
- The sampler is a pure function: same inputs, same arrays, no hidden state
- Invalid counts are rejected up front instead of producing NaN/empty data
- Everything is recomputed from scratch on every parameter change

Main subpackages:
- analysis: Sampler, axis/tooltip formatters, identity checks
- gui: Interactive ipywidgets panel with matplotlib charts
- models: Data models (HarmonicsParams, HarmonicsDataset, Sample)
"""

__all__ = []
