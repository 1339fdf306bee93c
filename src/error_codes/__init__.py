"""error-codes: look up libeconf, errno and PAM error codes."""

__version__ = "0.1.0"
