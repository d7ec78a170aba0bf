"""Air navigation charges calculator.

Estimates the air navigation charge for a flight from the aircraft weight
and the great-circle length of a route through named waypoints.
"""

__version__ = "0.1.0"
