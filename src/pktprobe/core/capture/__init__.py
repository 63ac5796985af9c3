"""
Capture file access and frame preprocessing
"""

from .preprocessor import PreprocessedFrame, preprocess_frame
from .reader import CapturedFrame, CaptureReader

__all__ = [
    "CapturedFrame",
    "CaptureReader",
    "PreprocessedFrame",
    "preprocess_frame",
]
