"""Handler modules for controller resources."""

# Import handlers to register them - handlers register themselves via @kopf decorators
from . import bucket  # noqa: F401
