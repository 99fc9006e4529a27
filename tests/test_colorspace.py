"""
Tests for name-keyed conversion dispatch, component introspection and
round trips across every model.
"""

import math

import numpy as np
import pytest

from colorcore import convert_color, list_models
from colorcore.core.color import ColorComponentInfo
from colorcore.models import (
    CMYK,
    HSL,
    HSV,
    HWB,
    LAB,
    LAB50,
    LCH,
    LUV,
    RGB,
    SRGB,
    XYZ,
    XYZ50,
    Ansi16,
    Ansi256,
    ICtCp,
    Oklab,
    Oklch,
)

MODEL_TYPES = {
    "RGB": RGB,
    "SRGB": RGB,
    "XYZ": XYZ,
    "LAB": LAB,
    "LCH": LCH,
    "LUV": LUV,
    "OKLAB": Oklab,
    "OKLCH": Oklch,
    "HSL": HSL,
    "HSV": HSV,
    "HWB": HWB,
    "CMYK": CMYK,
    "ANSI16": Ansi16,
    "ANSI256": Ansi256,
    "ICTCP": ICtCp,
}

LOSSLESS = [name for name in MODEL_TYPES if not name.startswith("ANSI")]

SAMPLES = [
    (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0),
    (0.5, 0.5, 0.5),
    (1.0, 0.0, 0.0),
    (0.2, 0.4, 0.6),
    (0.9, 0.1, 0.3),
    (0.05, 0.8, 0.02),
]


class TestDispatch:
    """convert_color by model name."""

    @pytest.mark.parametrize("name", sorted(MODEL_TYPES))
    def test_result_type(self, name):
        result = convert_color(SRGB(0.2, 0.4, 0.6), name)
        assert isinstance(result, MODEL_TYPES[name])

    @pytest.mark.parametrize("name", ["lab", "Lab", "LAB"])
    def test_case_insensitive(self, name):
        c = SRGB(1.0, 0.0, 0.0)
        assert convert_color(c, name) == c.to_lab()

    @pytest.mark.parametrize("name", ["ansi-256", "ANSI_256", "Ansi256"])
    def test_separators_ignored(self, name):
        assert convert_color(SRGB(1.0, 0.0, 0.0), name) == Ansi256(196)

    def test_hsb_alias(self):
        c = SRGB(0.2, 0.4, 0.6)
        assert convert_color(c, "HSB") == c.to_hsv()

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="Unknown target color model"):
            convert_color(SRGB(0.0, 0.0, 0.0), "YCbCr")

    def test_list_models(self):
        models = list_models()
        assert "HSB" not in models
        assert "OKLCH" in models
        assert models == sorted(models)
        assert set(models) == set(MODEL_TYPES)

    def test_identity(self):
        """Converting to a value's own model returns it unchanged."""
        lab = LAB50(50.0, 10.0, -10.0)
        assert convert_color(lab, "LAB") is lab
        c = SRGB(0.1, 0.2, 0.3)
        assert convert_color(c, "RGB") is c


class TestRoundTrip:
    """sRGB -> model -> sRGB for every lossless model."""

    @pytest.mark.parametrize("name", LOSSLESS)
    @pytest.mark.parametrize("rgb", SAMPLES)
    def test_roundtrip(self, name, rgb):
        c = SRGB(*rgb, 0.75)
        back = convert_color(c, name).to_srgb()
        assert back.space == SRGB
        np.testing.assert_allclose(
            back.components(), c.components(), atol=1e-5,
            err_msg=f"{name} failed roundtrip",
        )

    @pytest.mark.parametrize("source", sorted(MODEL_TYPES))
    @pytest.mark.parametrize("target", sorted(MODEL_TYPES))
    def test_every_pair_converts(self, source, target):
        """Every model reaches every other model."""
        value = convert_color(SRGB(0.9, 0.1, 0.3), source)
        result = convert_color(value, target)
        assert isinstance(result, MODEL_TYPES[target])

    @pytest.mark.parametrize("name", ["LAB", "LCH", "LUV"])
    def test_d50_pivot(self, name):
        """Values keep the white point of the XYZ they came from."""
        xyz = XYZ50(0.3, 0.4, 0.2)
        value = convert_color(xyz, name)
        assert value.space.white_point == xyz.space.white_point
        back = value.to_xyz()
        np.testing.assert_allclose(back.components(), xyz.components(), atol=1e-9)

    def test_hdr_values_survive(self):
        """Values outside [0, 1] are not clipped along the way."""
        c = SRGB(1.5, -0.2, 0.3)
        back = c.to_lab().to_srgb()
        np.testing.assert_allclose(back.components(), c.components(), atol=1e-7)


class TestComponents:
    """Component introspection and reconstruction."""

    def test_components_alpha_last(self):
        assert SRGB(0.1, 0.2, 0.3, 0.4).components() == [0.1, 0.2, 0.3, 0.4]
        assert CMYK(0.1, 0.2, 0.3, 0.4, 0.5).components() == [0.1, 0.2, 0.3, 0.4, 0.5]

    def test_component_info(self):
        assert LCH.component_info() == (
            ColorComponentInfo("l"),
            ColorComponentInfo("c"),
            ColorComponentInfo("h", is_polar=True),
            ColorComponentInfo("alpha"),
        )

    @pytest.mark.parametrize("model,count", [
        (RGB, 4), (XYZ, 4), (LAB, 4), (HSL, 4), (CMYK, 5), (Oklch, 4), (ICtCp, 4),
    ])
    def test_component_count(self, model, count):
        assert model.component_count() == count

    @pytest.mark.parametrize("model,polar", [
        (HSL, 0), (HSV, 0), (HWB, 0), (LCH, 2), (Oklch, 2),
    ])
    def test_hue_is_polar(self, model, polar):
        for i in range(model.component_count()):
            assert model.component_is_polar(i) == (i == polar)

    def test_rectangular_models_not_polar(self):
        for model in (RGB, XYZ, LAB, LUV, Oklab, CMYK, ICtCp):
            assert not any(info.is_polar for info in model.component_info())

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_component_index_out_of_range(self, index):
        with pytest.raises(ValueError):
            LAB.component_is_polar(index)

    def test_from_components_keeps_space(self):
        lab = LAB50(1.0, 2.0, 3.0, 0.5)
        rebuilt = lab.from_components([4.0, 5.0, 6.0, 0.25])
        assert rebuilt == LAB50(4.0, 5.0, 6.0, 0.25)
        assert rebuilt.space == lab.space

    def test_from_components_default_alpha(self):
        assert SRGB(0.0, 0.0, 0.0, 0.2).from_components([0.1, 0.2, 0.3]).alpha == 1.0

    @pytest.mark.parametrize("values", [[], [0.1, 0.2], [0.1, 0.2, 0.3, 0.4, 0.5]])
    def test_from_components_wrong_length(self, values):
        with pytest.raises(ValueError):
            SRGB(0.0, 0.0, 0.0).from_components(values)

    def test_from_components_roundtrip(self):
        hsl = SRGB(0.2, 0.4, 0.6).to_hsl()
        assert hsl.from_components(hsl.components()) == hsl

    def test_nan_hue_component(self):
        hsv = SRGB(0.5, 0.5, 0.5).to_hsv()
        assert math.isnan(hsv.components()[0])

    def test_immutable(self):
        lab = LAB50(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            lab.l = 5.0
