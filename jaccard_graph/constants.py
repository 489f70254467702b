"""
Constants for jaccard_graph package.

Centralizes magic numbers and configuration defaults.
"""

# Pairs are scored only when their shortest-path distance equals this
SIMILARITY_DISTANCE = 2

# Threshold profile: thresholds are i / THRESHOLD_STEPS for i in 1..THRESHOLD_STEPS
THRESHOLD_STEPS = 10
PERCENT_SCALE = 100.0

# Value used when a ratio has a zero denominator (empty union, empty map)
EMPTY_SIMILARITY = 0.0

# Edge list parsing
EDGE_COMMENT_PREFIX = "#"

# Reporting
DEFAULT_TOP_N = 10
