"""Small, runnable examples of classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = [
    "aggregation",
    "employee_factory",
    "payments",
    "person_factory",
    "pizza",
    "population",
    "shapes",
    "stock",
    "traffic",
]