"""Shared Hypothesis strategies for clifx tests."""

from __future__ import annotations

from hypothesis import strategies as st

from clifx.easing import EasingKind

channels = st.integers(min_value=0, max_value=255)
rgb_colors = st.tuples(channels, channels, channels)

unit_floats = st.floats(min_value=0.0, max_value=1.0, allow_nan=False, allow_infinity=False)
any_floats = st.floats(allow_nan=False, allow_infinity=False, width=32)

easings = st.sampled_from(list(EasingKind))

# Single-line text; periods are the twinkle anchors
line_text = st.text(
    alphabet=st.sampled_from(list("abcxyz .,!")),
    min_size=0,
    max_size=40,
)
