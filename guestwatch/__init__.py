"""guestwatch - replay host file modifications inside a Lima guest."""

__version__ = "0.1.0"
