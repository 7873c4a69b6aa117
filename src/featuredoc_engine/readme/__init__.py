"""README section generator.

Splices generated Markdown into marked regions of the project README.
Each region is demarcated by a marker pair:
    <!-- BEGIN:FLATTENED_FEATURES -->
    ...
    <!-- END:FLATTENED_FEATURES -->

Anything outside the markers is preserved untouched. A README without
a given marker pair simply doesn't get that section.
"""

# Marker names used by the patcher and sync
FUTURE_NEAR = "FUTURE_NEAR"
FLATTENED_FEATURES = "FLATTENED_FEATURES"
POLICY_MATRIX = "POLICY_MATRIX"

MARKER_NAMES = (FUTURE_NEAR, FLATTENED_FEATURES, POLICY_MATRIX)


def begin_marker(name: str) -> str:
    return f"<!-- BEGIN:{name} -->"


def end_marker(name: str) -> str:
    return f"<!-- END:{name} -->"
