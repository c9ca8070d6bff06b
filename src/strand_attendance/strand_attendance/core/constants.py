"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
ALL_GROUPS = "All"
LOAD_ERROR_MESSAGE = "Unable to load students from the attendance store. Please try again."
REGISTERED_STATUS = "Registered"
