"""
Room Scan - dimension extraction for 3D room scans.

Converts captured wall, floor, door and window surfaces into room
measurements (areas, ceiling height, volume) with metric/imperial display.
"""

__version__ = "1.0.0"
