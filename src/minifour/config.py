# src/minifour/config.py

from __future__ import annotations

# Fixed short board; not configurable.
ROWS = 5
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = False

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # the computer "thinks" for a second before dropping

# Logging (stays quiet during normal console play)
LOG_LEVEL = "WARNING"
LOG_FORMAT = "simple"
