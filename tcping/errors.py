# tcping/errors.py


class ConfigError(Exception):
    """Bad parameters or an unresolvable target. Fatal, raised before any probing."""
