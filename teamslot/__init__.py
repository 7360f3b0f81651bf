"""
teamslot - propose meeting times for teams spread across time zones.
"""

__version__ = "0.1.0"
