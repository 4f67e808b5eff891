"""Package-wide defaults, read once from the environment."""

from __future__ import annotations

import os

# --- Floating-rate coupons ---
# Coupon representation used when a builder is not told explicitly:
# 'up_front' fixes the index at period start, 'in_arrears' at period end.
INDEX_FIXING = os.getenv("COUPONLEGS_INDEX_FIXING", "up_front")

# --- Logging ---
# Only applied by scripts; the library never configures handlers itself.
LOG_LEVEL = os.getenv("COUPONLEGS_LOG_LEVEL", "WARNING")
