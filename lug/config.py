"""Default configuration values for lug value types."""

from __future__ import annotations

TYPE_NAME_PREFIX = "lug."

# printf-style format used by V2.to_display_string().
DISPLAY_FORMAT = "(%g %g)"

COMPONENT_COUNT = 2
