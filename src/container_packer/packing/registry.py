"""Resolution of algorithm identifiers to packing algorithm instances."""

from __future__ import annotations

from container_packer.errors import UnsupportedAlgorithmError
from container_packer.packing.base import AlgorithmType, PackingAlgorithm
from container_packer.packing.first_fit import FirstFit, FirstFitDecreasing

# New algorithms are added here, with a new AlgorithmType member
PACKING_ALGORITHMS: dict[AlgorithmType, type[PackingAlgorithm]] = {
    AlgorithmType.FIRST_FIT_DECREASING: FirstFitDecreasing,
    AlgorithmType.FIRST_FIT: FirstFit,
}


def get_packing_algorithm(algorithm_id: int) -> PackingAlgorithm:
    """
    Resolve an algorithm identifier to a fresh algorithm instance.

    Raises:
        UnsupportedAlgorithmError: if the identifier is not a registered AlgorithmType
    """
    try:
        cls = PACKING_ALGORITHMS[AlgorithmType(algorithm_id)]
    except (KeyError, ValueError):
        raise UnsupportedAlgorithmError(algorithm_id) from None
    return cls()
