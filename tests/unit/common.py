# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
from typing import Any, Sequence

from friendly_zoo import Vocabulary

# A small vocabulary containing every word the scripted tests pick.
TEST_VOCABULARY = Vocabulary(
    adjectives=["ballsy", "elegant", "happy", "lazy", "poor", "quick"],
    animals=["camel", "fox", "wolf"],
)


class ScriptedRandomSource:
    """
    A random source which "draws" a predetermined list of adjectives and a predetermined animal.

    Every scripted word must be present in the population it is drawn from. The sizes of all
    requested samples are recorded in `sample_sizes`.
    """

    def __init__(self, adjectives: Sequence[str], animal: str):
        self._adjectives = list(adjectives)
        self._animal = animal
        self.sample_sizes: list[int] = []

    def sample(self, population: Sequence[Any], k: int) -> list[Any]:
        self.sample_sizes.append(k)
        if k > len(self._adjectives):
            raise ValueError(f"Only {len(self._adjectives)} adjectives were scripted but {k} were requested.")
        picked = self._adjectives[:k]
        for word in picked:
            if word not in population:
                raise ValueError(f"Scripted adjective '{word}' is not in the population.")
        return picked

    def choice(self, seq: Sequence[Any]) -> Any:
        if self._animal not in seq:
            raise ValueError(f"Scripted animal '{self._animal}' is not in the sequence.")
        return self._animal
