class InvariantViolation(Exception):
    """Raised when persisted section state breaks a domain rule."""
