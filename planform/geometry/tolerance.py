from __future__ import annotations

# Positional epsilon for near-zero distance/length checks (plan units, mm).
EPS_POS = 1e-9

# Angular epsilon (dimensionless tolerance used for parallel/collinear checks).
EPS_ANG = 1e-9

# Area epsilon for degenerate polygon checks (mm^2).
EPS_AREA = 1e-6

# Vertex weld epsilon: consecutive points closer than this are merged.
EPS_WELD = 1e-6

# Axis-alignment tolerance for horizontal/vertical constraint detection (mm).
EPS_ALIGN = 1e-6
