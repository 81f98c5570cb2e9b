"""gocam-analysis: hole detection and structural statistics for GO-CAM models."""

__version__ = "0.1.0"
