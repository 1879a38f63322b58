# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
from typing import Any, Iterable

from ._adjectives import ADJECTIVES
from ._animals import ANIMALS


def _validate_words(words: tuple[str, ...], list_name: str) -> None:
    seen = set()
    for word in words:
        if not isinstance(word, str):
            raise TypeError(f"Words in the {list_name} list must be strings, got {type(word).__name__}.")
        if not (word.isascii() and word.isalpha() and word.islower()):
            raise ValueError(
                f"Invalid word '{word}' in the {list_name} list. Words must be non-empty, lowercase, ASCII letters."
            )
        if word in seen:
            raise ValueError(f"Duplicate word '{word}' in the {list_name} list.")
        seen.add(word)


class Vocabulary:
    """
    The word lists names are drawn from: a list of adjectives and a list of animals.

    Both lists are stored as immutable, ordered tuples of unique, lowercase ASCII words.
    The animal list must contain at least one word since every generated name ends in an animal.
    The adjective list may be empty, in which case every name is just an animal.
    """

    def __init__(self, adjectives: Iterable[str], animals: Iterable[str]):
        """
        Create a new `Vocabulary` from the given word lists.

        Args:
            adjectives (Iterable[str]): The adjectives to draw from.
            animals (Iterable[str]): The animals to draw from. Must be non-empty.
        """
        adjectives = tuple(adjectives)
        animals = tuple(animals)

        _validate_words(adjectives, "adjective")
        _validate_words(animals, "animal")
        if len(animals) == 0:
            raise ValueError("The animal list of a vocabulary must contain at least one word.")

        self._adjectives = adjectives
        self._animals = animals

    @property
    def adjectives(self) -> tuple[str, ...]:
        """
        Return the adjectives in this vocabulary.

        Returns:
            tuple[str, ...]: The adjectives, in their original order.
        """
        return self._adjectives

    @property
    def animals(self) -> tuple[str, ...]:
        """
        Return the animals in this vocabulary.

        Returns:
            tuple[str, ...]: The animals, in their original order.
        """
        return self._animals

    def state_dict(self) -> dict[str, Any]:
        return {"adjectives": list(self._adjectives), "animals": list(self._animals)}

    @classmethod
    def from_state_dict(cls, state_dict: dict[str, Any]) -> "Vocabulary":
        return cls(adjectives=state_dict["adjectives"], animals=state_dict["animals"])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._adjectives == other._adjectives and self._animals == other._animals

    def __hash__(self) -> int:
        return hash((self._adjectives, self._animals))

    def __repr__(self) -> str:
        return f"Vocabulary(num_adjectives={len(self._adjectives)}, num_animals={len(self._animals)})"


# The vocabulary shipped with friendly_zoo.
DEFAULT_VOCABULARY = Vocabulary(ADJECTIVES, ANIMALS)


__all__ = ["Vocabulary", "DEFAULT_VOCABULARY", "ADJECTIVES", "ANIMALS"]
