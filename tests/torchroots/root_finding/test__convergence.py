"""Tests for convergence constants and dtype helpers."""

import torch

from torchroots.root_finding import (
    MAX_STEPS,
    SMALL_NUMBER,
    LaguerreStatus,
    complex_dtype,
    default_tolerance,
)


class TestConstants:
    """Tests for module-level defaults."""

    def test_small_number(self):
        assert SMALL_NUMBER == 1e-9

    def test_max_steps(self):
        assert MAX_STEPS == 10000

    def test_status_codes(self):
        assert LaguerreStatus.CONVERGED == 0
        assert LaguerreStatus.STALLED == 1
        assert LaguerreStatus.MAX_ITERATIONS == 2
        assert LaguerreStatus.DIVERGED == 3


class TestDefaultTolerance:
    """Tests for dtype-aware default tolerance."""

    def test_double_precision(self):
        """Double precision uses SMALL_NUMBER."""
        assert default_tolerance(torch.float64) == SMALL_NUMBER
        assert default_tolerance(torch.complex128) == SMALL_NUMBER

    def test_single_precision(self):
        assert default_tolerance(torch.float32) == 1e-5
        assert default_tolerance(torch.complex64) == 1e-5

    def test_half_precision(self):
        assert default_tolerance(torch.float16) == 1e-3
        assert default_tolerance(torch.bfloat16) == 1e-3


class TestComplexDtype:
    """Tests for the complex dtype roots are computed in."""

    def test_float64(self):
        assert complex_dtype(torch.float64) == torch.complex128

    def test_float32(self):
        assert complex_dtype(torch.float32) == torch.complex64

    def test_half(self):
        assert complex_dtype(torch.float16) == torch.complex64
        assert complex_dtype(torch.bfloat16) == torch.complex64

    def test_integer(self):
        assert complex_dtype(torch.int64) == torch.complex128

    def test_complex_is_kept(self):
        assert complex_dtype(torch.complex64) == torch.complex64
        assert complex_dtype(torch.complex128) == torch.complex128
