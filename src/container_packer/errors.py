"""Exceptions raised by the packing service."""


class PackingError(Exception):
    """Base class for packing service errors."""


class UnsupportedAlgorithmError(PackingError, ValueError):
    """Algorithm identifier does not name a known packing algorithm."""

    def __init__(self, algorithm_id):
        self.algorithm_id = algorithm_id
        super().__init__(f"Unsupported algorithm type: {algorithm_id}")


class CapacitySearchError(PackingError):
    """Capacity search could not produce a bound."""
