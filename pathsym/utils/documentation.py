def internal_only(func):
    """Decorator to mark a function or class as deliberately not documented as it is not
    intended for public use."""
    func.__internal_only__ = True
    return func


@internal_only
def is_internal_only(obj) -> bool:
    """
    Whether ``obj`` was marked with ``internal_only``.
    """
    return getattr(obj, "__internal_only__", False)


internal_only(internal_only)
