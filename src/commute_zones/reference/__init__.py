"""Static commute constants.

Reference data that doesn't change with API calls: mode labels and speeds,
default travel-time bands and their colours.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from commute_zones.reference.modes import MODE_PROFILES as MODE_PROFILES
from commute_zones.reference.modes import TRANSIT_FALLBACK_SPEED_KMH as TRANSIT_FALLBACK_SPEED_KMH
from commute_zones.reference.modes import ModeProfile as ModeProfile
from commute_zones.reference.modes import mode_label as mode_label
from commute_zones.reference.thresholds import DEFAULT_THRESHOLDS as DEFAULT_THRESHOLDS
from commute_zones.reference.thresholds import EXTRA_THRESHOLD_COLOR as EXTRA_THRESHOLD_COLOR
from commute_zones.reference.thresholds import TimeThreshold as TimeThreshold
from commute_zones.reference.thresholds import thresholds_for as thresholds_for
