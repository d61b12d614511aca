"""
Polygon admission errors
"""


class ValidationError(Exception):
    """Candidate polygon rejected for a user-caused reason (never retried)"""
    pass
