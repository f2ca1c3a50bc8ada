# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""
Constants for the contrast metrics.

APCA values are the W3-compatible SA98G set (APCA 0.0.98G-4g).
See https://github.com/Myndex/SAPC-APCA
"""

from __future__ import annotations

import math

import numpy as np


# =============================================================================
# APCA (polarity-aware perceptual contrast)
# =============================================================================

# Simple monitor gamma used to estimate screen luminance
APCA_MONITOR_GAMMA = 2.4

# Per-channel luminance coefficients (R, G, B)
APCA_SRGB_COEFFICIENTS = np.array([0.2126729, 0.7151522, 0.0721750], dtype=np.float64)

# Luminance outside this range is treated as invalid input (contrast 0)
APCA_INPUT_CLAMP_MIN = 0.0
APCA_INPUT_CLAMP_MAX = 1.1

# Soft clamp for near-black luminance
APCA_BLACK_THRESHOLD = 0.022
APCA_BLACK_CLAMP = 1.414

# Luminance differences below this are imperceptible
APCA_MIN_DELTA_Y = 0.0005

# Dark text on light background
APCA_BOW_BG_EXPONENT = 0.56
APCA_BOW_TXT_EXPONENT = 0.57
APCA_BOW_SCALE = 1.14
APCA_BOW_OFFSET = 0.027

# Light text on dark background
APCA_WOB_BG_EXPONENT = 0.65
APCA_WOB_TXT_EXPONENT = 0.62
APCA_WOB_SCALE = 1.14
APCA_WOB_OFFSET = 0.027

# |raw| below this clips to zero
APCA_LOW_CLIP = 0.1

# Raw contrast to Lc units
APCA_OUTPUT_SCALE = 100.0


# =============================================================================
# Lightness metrics
# =============================================================================

# Golden ratio (√5 + 1) / 2
PHI = 1.618033988749895

# Default perceptual threshold for ΔΦ*
DELTA_PHI_THRESHOLD = 7.5

# Calibration offset subtracted from the ΔΦ* magnitude
DELTA_PHI_OFFSET = 40.0

SQRT2 = math.sqrt(2.0)


# =============================================================================
# Luminance ratios
# =============================================================================

# Returned by Michelson when both luminances are zero
MICHELSON_CLAMP = 0.0

# Flare term added to both luminances by WCAG 2.1
WCAG21_LUMINANCE_OFFSET = 0.05

# Returned by Weber when the darker luminance is zero
WEBER_CLAMP = 5000.0
