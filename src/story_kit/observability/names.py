# src/story_kit/observability/names.py

"""Standard metric names for story-kit observability.

Use these constants instead of hardcoded strings so every parser and the
differ report under the same names.

Note: All duration metrics are in milliseconds by convention.
Parser metrics carry a ``format`` label with the parser's format tag.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "story_parse_duration"

# Counters
PARSE_REQUESTS_TOTAL = "story_parse_requests_total"
PARSE_ERRORS_TOTAL = "story_parse_errors_total"

# Counters (passages accumulate over time)
PARSE_PASSAGES_TOTAL = "story_parse_passages_total"


# ============================================================================
# Parser Selection Metrics
# ============================================================================

# Counters
SELECTION_MISSES_TOTAL = "story_selection_misses_total"


# ============================================================================
# Diff Metrics
# ============================================================================

# Duration
DIFF_DURATION = "story_diff_duration"

# Gauges
DIFF_PASSAGES_CHANGED = "story_diff_passages_changed"
