"""Textual UI for sampler."""

from sampler.ui.app import SamplerApp
from sampler.ui.blocks import ErrorBlock, SampleBlock

__all__ = [
    "ErrorBlock",
    "SampleBlock",
    "SamplerApp",
]
