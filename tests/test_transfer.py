"""Tests for transfer functions and white points."""

import pytest

from colorcore.core import illuminant
from colorcore.core.illuminant import Illuminant, get_illuminant
from colorcore.core.transfer import (
    BT709TransferFunctions,
    GammaTransferFunctions,
    LinearTransferFunctions,
    PQTransferFunctions,
    SRGBTransferFunctions,
)

ALL_TRANSFER_FUNCTIONS = [
    GammaTransferFunctions(2.2),
    LinearTransferFunctions(),
    SRGBTransferFunctions(),
    BT709TransferFunctions(),
    PQTransferFunctions(),
]


class TestTransferFunctions:
    """Encode/decode pairs."""

    @pytest.mark.parametrize("tf", ALL_TRANSFER_FUNCTIONS, ids=lambda tf: type(tf).__name__)
    @pytest.mark.parametrize("x", [0.0, 0.001, 0.02, 0.18, 0.5, 1.0])
    def test_roundtrip(self, tf, x):
        """oetf inverts eotf."""
        assert tf.oetf(tf.eotf(x)) == pytest.approx(x, abs=1e-6)

    @pytest.mark.parametrize("tf", ALL_TRANSFER_FUNCTIONS, ids=lambda tf: type(tf).__name__)
    def test_sign_preserved(self, tf):
        """Negative inputs decode to the negation of the positive result."""
        assert tf.eotf(-0.5) == pytest.approx(-tf.eotf(0.5))
        assert tf.oetf(-0.5) == pytest.approx(-tf.oetf(0.5))

    def test_gamma(self):
        tf = GammaTransferFunctions(2.0)
        assert tf.eotf(0.5) == pytest.approx(0.25)
        assert tf.oetf(0.25) == pytest.approx(0.5)

    def test_srgb_known_values(self):
        tf = SRGBTransferFunctions()
        assert tf.eotf(0.04045) == pytest.approx(0.04045 / 12.92)
        assert tf.eotf(0.5) == pytest.approx(0.214041, abs=1e-6)
        assert tf.eotf(1.0) == pytest.approx(1.0)

    def test_pq_reference_white(self):
        """Linear 1.0 (203 cd/m^2) encodes near 0.58 on the PQ curve."""
        assert PQTransferFunctions().oetf(1.0) == pytest.approx(0.58, abs=0.01)

    def test_equality(self):
        assert GammaTransferFunctions(2.2) == GammaTransferFunctions(2.2)
        assert SRGBTransferFunctions() == SRGBTransferFunctions()
        assert GammaTransferFunctions(2.2) != GammaTransferFunctions(2.4)


class TestIlluminant:
    """Reference white points."""

    def test_d65_tristimulus(self):
        assert illuminant.D65.x == pytest.approx(0.950456, abs=1e-6)
        assert illuminant.D65.y == 1.0
        assert illuminant.D65.z == pytest.approx(1.089058, abs=1e-6)

    def test_chromaticity_roundtrip(self):
        x, y = illuminant.D50.chromaticity
        assert x == pytest.approx(0.34570)
        assert y == pytest.approx(0.35850)

    def test_name_not_part_of_equality(self):
        unnamed = Illuminant.from_chromaticity(0.31270, 0.32900)
        assert unnamed == illuminant.D65

    def test_lookup(self):
        assert get_illuminant("d65") is illuminant.D65
        assert get_illuminant("DCI-P3") is illuminant.DCI_P3
        with pytest.raises(KeyError):
            get_illuminant("F2")
