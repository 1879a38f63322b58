# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
import random
from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """
    The randomness a `Zoo` needs to pick words.

    Any `random.Random` instance satisfies this protocol, as does `NumpyRandomSource`.
    """

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """
        Draw `k` distinct elements from `population` without replacement.
        """
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """
        Draw a single element from `seq`.
        """
        ...


# Process-wide source used when no explicit source is supplied.
_DEFAULT_RANDOM_SOURCE = random.Random()


def default_random_source() -> random.Random:
    """
    Return the process-wide random source used by `Zoo.generate`.

    Returns:
        random.Random: The default random source.
    """
    return _DEFAULT_RANDOM_SOURCE


class NumpyRandomSource:
    """
    A `RandomSource` backed by a `numpy.random.Generator`.

    Seeding two `NumpyRandomSource` objects with the same value yields the same sequence of draws,
    which makes generated names reproducible.
    """

    def __init__(self, seed_or_generator: int | np.random.Generator | None = None):
        """
        Create a new `NumpyRandomSource`.

        Args:
            seed_or_generator (int | np.random.Generator | None): Either an existing numpy generator
                to draw from, or a seed used to create one with `np.random.default_rng`.
                If None, the generator is seeded from fresh OS entropy.
        """
        if isinstance(seed_or_generator, np.random.Generator):
            self._generator = seed_or_generator
        else:
            self._generator = np.random.default_rng(seed_or_generator)

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def sample(self, population: Sequence[Any], k: int) -> list[Any]:
        if k < 0 or k > len(population):
            raise ValueError(f"Sample size {k} is out of range for a population of size {len(population)}.")
        indices = self._generator.choice(len(population), size=k, replace=False)
        return [population[int(i)] for i in indices]

    def choice(self, seq: Sequence[Any]) -> Any:
        if len(seq) == 0:
            raise IndexError("Cannot choose from an empty sequence.")
        return seq[int(self._generator.integers(len(seq)))]

    def __repr__(self) -> str:
        return f"NumpyRandomSource({self._generator!r})"
