# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
import logging
from dataclasses import dataclass
from typing import Annotated, Literal

import tyro

from ..random_source import NumpyRandomSource, RandomSource, default_random_source
from ..species import Species
from ..zoo import Zoo
from ._base_command import BaseCommand

# species names accepted on the command line
SpeciesName = Literal[
    "snake",
    "screaming_snake",
    "camel",
    "dromedary",
    "kebab",
    "screaming_kebab",
]

# Upper bound on the number of adjectives accepted on the command line.
MAX_ADJECTIVES = 255


@dataclass
class Generate(BaseCommand):
    """
    Print a randomly generated animal name, _e.g._ `poor-ballsy-elegant-camel`.
    """

    # Join the words of the name with this single character (_e.g._ `-d '$'`).
    # Cannot be combined with --species.
    delimiter: Annotated[str | None, tyro.conf.arg(aliases=("-d",))] = None

    # The naming convention of the name. If neither --species nor --delimiter is given,
    # names are written in kebab case.
    species: Annotated[SpeciesName | None, tyro.conf.arg(aliases=("-s",))] = None

    # Number of adjectives preceding the animal (between 0 and 255).
    adjectives: Annotated[int, tyro.conf.arg(aliases=("-n",))] = 1

    # Seed for the random number generator. Use the same seed to get the same names.
    seed: int | None = None

    # Number of names to print, one per line.
    count: int = 1

    # If True, then log verbosely.
    verbose: bool = False

    def resolve_species(self) -> Species:
        """
        Return the species selected by the --delimiter and --species arguments.

        Returns:
            Species: The selected species.
        """
        if self.delimiter is not None and self.species is not None:
            raise ValueError("--delimiter and --species cannot be used together.")
        if self.delimiter is not None:
            return Species.custom_delimiter(self.delimiter)
        if self.species is not None:
            return Species.from_token(self.species)
        return Species.KEBAB

    def build_zoo(self) -> Zoo:
        """
        Validate the arguments and build the `Zoo` they describe.

        Returns:
            Zoo: A zoo generating names as requested on the command line.
        """
        if not 0 <= self.adjectives <= MAX_ADJECTIVES:
            raise ValueError(f"--adjectives must be between 0 and {MAX_ADJECTIVES}, got {self.adjectives}.")
        if self.count < 0:
            raise ValueError(f"--count must be non-negative, got {self.count}.")
        return Zoo(self.resolve_species(), self.adjectives)

    def execute(self) -> None:
        logging.basicConfig(level=logging.DEBUG if self.verbose else logging.INFO, format="%(levelname)s : %(message)s")
        logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

        try:
            zoo = self.build_zoo()
        except ValueError as e:
            logger.error(str(e))
            raise SystemExit(1) from e

        rng: RandomSource
        if self.seed is not None:
            logger.debug(f"Seeding random source with {self.seed}")
            rng = NumpyRandomSource(self.seed)
        else:
            rng = default_random_source()

        logger.debug(f"Generating {self.count} name(s) with {zoo}")
        for name in zoo.generate_n(self.count, rng):
            print(name)
