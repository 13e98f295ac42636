from .params import HarmonicsParams
from .samples import HarmonicsDataset, Sample

__all__ = [
    "HarmonicsParams",
    "HarmonicsDataset",
    "Sample",
]
