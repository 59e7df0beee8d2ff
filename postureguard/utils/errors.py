# postureguard/utils/errors.py


class PostureError(Exception):
    """Base class for every failure raised by the posture classifier."""


class InvalidFrame(PostureError, ValueError):
    """
    Landmark frame cannot be analyzed:
    - wrong number of slots (must be exactly 33)
    - a joint required by the active rule set is absent
    - a landmark fails validation (non-numeric / non-finite, visibility outside [0,1])
    """


class UnsupportedMode(PostureError, ValueError):
    """Analysis mode is not one of the closed set of rule sets."""
