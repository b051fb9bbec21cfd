"""fitplan - deterministic personalized training, fasting and meal plans."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("fitplan")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
