"""rulepred — namespace and tag predicates for rule collections."""

__version__ = "0.1.0"
