class IllegalStateError(RuntimeError):
    """
    Raised when a value is accessed on the wrong variant, e.g. `get_value()`
    on a `Failure` or `get_left()` on a `Right`. Signals a defect at the call
    site, check the variant first.
    """
