"""Fourier decomposition and reconstruction of closed paths."""

from epicycles.fourier.dft import center_signal, compute_dft, decompose_path, fold_frequency, to_signal
from epicycles.fourier.series import (
    epicycles,
    evaluate,
    evaluate_chain,
    reconstruction_error,
    sample_curve,
)

__all__ = [
    "to_signal",
    "center_signal",
    "fold_frequency",
    "compute_dft",
    "decompose_path",
    "evaluate",
    "evaluate_chain",
    "epicycles",
    "sample_curve",
    "reconstruction_error",
]
