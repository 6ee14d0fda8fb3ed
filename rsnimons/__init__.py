"""Hospital simulation: data model, file storage, patient medicine actions and shutdown."""

__version__ = "0.1.0"

__all__ = [
    "belongings",
    "config",
    "containers",
    "disease",
    "display",
    "lookup",
    "matrix",
    "medicine",
    "parsing",
    "pharmacy",
    "prescriptions",
    "shutdown",
    "storage",
    "user",
]