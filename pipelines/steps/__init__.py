# Namespace for pipeline steps
from .assign_field import AssignField  # noqa: F401
