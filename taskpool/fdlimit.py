"""Raising the soft limit on open file descriptors."""

try:
    import resource
except ImportError:  # pragma: no cover
    resource = None

MIN_OPEN_FILES_LIMIT = 1024


def raise_limit():
    """Raise the soft open-files limit to 1024 if it is lower and the hard limit allows."""
    if resource is None:
        return
    soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    inf = resource.RLIM_INFINITY
    if soft == inf or soft >= MIN_OPEN_FILES_LIMIT:
        return
    if hard != inf and hard < MIN_OPEN_FILES_LIMIT:
        return
    resource.setrlimit(resource.RLIMIT_NOFILE, (MIN_OPEN_FILES_LIMIT, hard))