"""
Global constants used throughout the project
"""
import os


# Directory holding the JSON graph descriptions
DATA = os.getenv("GRAPH_DATA", os.path.join(os.path.dirname(__file__), "data"))
DEFAULT_GRAPH = "cycle.json"

# Smallest 32-bit signed integer, the legacy "no data" answer of max_value
INT_MIN = -(2**31)
