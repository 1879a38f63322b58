# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
import dataclasses
import logging
from typing import Any, Iterator

from .config import ZooConfig
from .random_source import RandomSource, default_random_source
from .species import Species
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


def compose_name(config: ZooConfig, vocabulary: Vocabulary, rng: RandomSource) -> str:
    """
    Compose a single name by drawing adjectives and an animal from a vocabulary.

    The adjectives are drawn without replacement, in the order returned by `rng`, and each is followed
    by the species' delimiter (if any). The name always ends in exactly one animal with no trailing delimiter.
    If more adjectives are requested than the vocabulary contains, every adjective is used.

    Args:
        config (ZooConfig): The species and number of adjectives to use.
        vocabulary (Vocabulary): The words to draw from.
        rng (RandomSource): The source of randomness used to pick the words.

    Returns:
        str: The generated name.
    """
    if config.adjective_count < 0:
        raise ValueError(f"The number of adjectives must be non-negative, got {config.adjective_count}.")

    num_adjectives = config.adjective_count
    if num_adjectives > len(vocabulary.adjectives):
        logger.warning(
            f"Requested {num_adjectives} adjectives but the vocabulary only has {len(vocabulary.adjectives)}. "
            f"Using all of them."
        )
        num_adjectives = len(vocabulary.adjectives)

    species = config.species
    adjectives = rng.sample(vocabulary.adjectives, num_adjectives)
    parts = [species.render_word(adjective, i, is_last=False) for i, adjective in enumerate(adjectives)]

    animal = rng.choice(vocabulary.animals)
    parts.append(species.render_word(animal, len(adjectives), is_last=True))

    return "".join(parts)


class Zoo:
    """
    A friendly zoo which generates animal names.

    Each name is made of `adjective_count` distinct adjectives followed by an animal, written in the
    style of the zoo's `Species`. The default zoo generates snake case names with one adjective
    (_e.g._ `elegant_camel`).

    A `Zoo` is also an infinite iterable of names:

    ```python
    zoo = Zoo(Species.KEBAB, 3)
    print(zoo.generate())  # e.g. poor-ballsy-elegant-camel
    for name in itertools.islice(zoo, 5):
        print(name)
    ```
    """

    def __init__(
        self,
        species: Species = Species.SNAKE,
        adjective_count: int = 1,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ):
        """
        Create a new `Zoo`.

        Args:
            species (Species): The naming convention of generated names.
            adjective_count (int): The number of adjectives preceding the animal.
            vocabulary (Vocabulary): The words to draw from (default is the built-in vocabulary).
        """
        self._config = ZooConfig(species=species, adjective_count=adjective_count)
        self._vocabulary = vocabulary

    @classmethod
    def default(cls) -> "Zoo":
        """
        Create a zoo generating snake case names with one adjective.
        """
        return cls()

    @classmethod
    def from_config(cls, config: ZooConfig, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> "Zoo":
        return cls(species=config.species, adjective_count=config.adjective_count, vocabulary=vocabulary)

    @property
    def config(self) -> ZooConfig:
        """
        Return a copy of the configuration of this zoo.
        """
        return dataclasses.replace(self._config)

    @property
    def species(self) -> Species:
        return self._config.species

    @species.setter
    def species(self, species: Species) -> None:
        self._config.species = species

    @property
    def adjective_count(self) -> int:
        return self._config.adjective_count

    @adjective_count.setter
    def adjective_count(self, n: int) -> None:
        self._config.adjective_count = n

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def set_species(self, species: Species) -> None:
        """
        Change the species used for generating names.
        """
        self.species = species

    def set_adjectives(self, n: int) -> None:
        """
        Change the number of adjectives preceding a generated animal.
        """
        self.adjective_count = n

    def with_species(self, species: Species) -> "Zoo":
        """
        Return a new zoo which is identical to this one but uses the given species.

        Args:
            species (Species): The species of the new zoo.

        Returns:
            Zoo: The new zoo. This zoo is left unchanged.
        """
        return Zoo(species=species, adjective_count=self.adjective_count, vocabulary=self._vocabulary)

    def with_adjectives(self, n: int) -> "Zoo":
        """
        Return a new zoo which is identical to this one but uses `n` adjectives.

        Args:
            n (int): The number of adjectives of the new zoo.

        Returns:
            Zoo: The new zoo. This zoo is left unchanged.
        """
        return Zoo(species=self.species, adjective_count=n, vocabulary=self._vocabulary)

    def generate(self) -> str:
        """
        Generate a name using the process-wide default random source.

        Returns:
            str: The generated name.
        """
        return self.generate_with_rng(default_random_source())

    def generate_with_rng(self, rng: RandomSource) -> str:
        """
        Generate a name using the given random source.

        Equivalent to `generate`, but lets you pass your own (_e.g._ seeded) random source to get
        repeatable results.

        Args:
            rng (RandomSource): The source of randomness, _e.g._ a `random.Random` or a `NumpyRandomSource`.

        Returns:
            str: The generated name.
        """
        return compose_name(self._config, self._vocabulary, rng)

    def generate_n(self, n: int, rng: RandomSource | None = None) -> list[str]:
        """
        Generate `n` names.

        Args:
            n (int): The number of names to generate.
            rng (RandomSource | None): The source of randomness, or None to use the default source.

        Returns:
            list[str]: The generated names.
        """
        if n < 0:
            raise ValueError(f"The number of names must be non-negative, got {n}.")
        if rng is None:
            rng = default_random_source()
        return [self.generate_with_rng(rng) for _ in range(n)]

    def __iter__(self) -> Iterator[str]:
        # Never terminates. Each call to iter() starts a fresh sequence.
        while True:
            yield self.generate()

    def state_dict(self) -> dict[str, Any]:
        return self._config.state_dict()

    @classmethod
    def from_state_dict(cls, state_dict: dict[str, Any], vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> "Zoo":
        return cls.from_config(ZooConfig.from_state_dict(state_dict), vocabulary=vocabulary)

    def __repr__(self) -> str:
        return f"Zoo(species={self.species!r}, adjective_count={self.adjective_count})"


def generate_name(
    species: Species = Species.SNAKE,
    adjective_count: int = 1,
    rng: RandomSource | None = None,
) -> str:
    """
    Generate a random human readable name by choosing `adjective_count` random adjectives and a random
    animal, formatted according to `species`.

    Args:
        species (Species): The naming convention of the name (default is snake case).
        adjective_count (int): The number of adjectives preceding the animal (default is 1).
        rng (RandomSource | None): The source of randomness, or None to use the default source.

    Returns:
        str: A human readable name, _e.g._ "adjective_animal".
    """
    zoo = Zoo(species=species, adjective_count=adjective_count)
    if rng is None:
        return zoo.generate()
    return zoo.generate_with_rng(rng)
