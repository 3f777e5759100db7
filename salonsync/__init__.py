"""
SalonSync - salon appointment calendar with a realtime store and an AI receptionist.
"""

__version__ = "0.1.0"
