"""
Fixed layouts shared by the parser, the profile store and the chart.
"""

# Block boundary written by the monitor script between two `ps` snapshots
DEFAULT_BLOCK_DELIMITER = "%CPU %MEM ARGS mer."

# Block header, e.g. "01 Jan. 2024 10:00:00 UTC" (zone token handled separately)
HEADER_DATE_FORMAT = "%d %b. %Y %H:%M:%S"

# Time-of-day layout used in the profile file and for chart values
TIME_FORMAT = "%H:%M:%S"

PROFILE_HEADER = ["time", "cpu", "mem", "proc"]
