# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class SpeciesKind(Enum):
    """
    Enum representing the naming conventions a generated name can follow.
    """

    SNAKE = "snake"
    SCREAMING_SNAKE = "screaming_snake"
    CAMEL = "camel"
    DROMEDARY = "dromedary"
    KEBAB = "kebab"
    SCREAMING_KEBAB = "screaming_kebab"
    CUSTOM_DELIMITER = "custom_delimiter"


def capitalize(word: str) -> str:
    """
    Uppercase the first character of a word and leave the rest unchanged.

    Unlike `str.capitalize`, the remainder of the word is not lowercased.

    Args:
        word (str): The word to capitalize.

    Returns:
        str: The capitalized word (an empty word is returned as is).
    """
    return word[:1].upper() + word[1:]


@dataclass(frozen=True)
class Species:
    """
    What a generated animal name looks like: which delimiter joins its words and how each word is cased.

    The six fixed conventions are available as class constants (`Species.SNAKE`, `Species.CAMEL`, ...).
    A species joining lowercase words with an arbitrary single character is created with
    `Species.custom_delimiter(c)`.

    | Species              | Example                       |
    |----------------------|-------------------------------|
    | `SNAKE`              | `snake_like_animal`           |
    | `SCREAMING_SNAKE`    | `VERY_LOUD_SNAKE_ANIMAL`      |
    | `CAMEL`              | `CamelLikeAnimal`             |
    | `DROMEDARY`          | `dromedaryLikeAnimal`         |
    | `KEBAB`              | `kebab-animal`                |
    | `SCREAMING_KEBAB`    | `VERY-LOUD-KEBAB-ANIMAL`      |
    | `custom_delimiter(c)`| `rarest$of$animals`           |
    """

    kind: SpeciesKind
    custom_character: str | None = None

    SNAKE: ClassVar["Species"]
    SCREAMING_SNAKE: ClassVar["Species"]
    CAMEL: ClassVar["Species"]
    DROMEDARY: ClassVar["Species"]
    KEBAB: ClassVar["Species"]
    SCREAMING_KEBAB: ClassVar["Species"]

    def __post_init__(self):
        if not isinstance(self.kind, SpeciesKind):
            raise TypeError(f"Species kind must be a SpeciesKind, got {type(self.kind).__name__}.")
        if self.kind == SpeciesKind.CUSTOM_DELIMITER:
            if not isinstance(self.custom_character, str) or len(self.custom_character) != 1:
                raise ValueError(
                    f"A custom delimiter must be exactly one character, got {self.custom_character!r}."
                )
        elif self.custom_character is not None:
            raise ValueError(f"Species {self.kind.value} does not take a custom delimiter.")

    @classmethod
    def custom_delimiter(cls, character: str) -> "Species":
        """
        Create a species which joins lowercase words with the given character.

        Args:
            character (str): The delimiter. Must be exactly one character.

        Returns:
            Species: The custom delimiter species.
        """
        return cls(SpeciesKind.CUSTOM_DELIMITER, character)

    @classmethod
    def from_token(cls, token: str) -> "Species":
        """
        Look up one of the fixed species by its name (e.g. "snake", "screaming_kebab").

        Args:
            token (str): The name of the species.

        Returns:
            Species: The species with the given name.
        """
        try:
            kind = SpeciesKind(token)
        except ValueError:
            kind = None
        if kind is None or kind == SpeciesKind.CUSTOM_DELIMITER:
            valid = ", ".join(k.value for k in SpeciesKind if k != SpeciesKind.CUSTOM_DELIMITER)
            raise ValueError(f"Unknown species '{token}'. Valid species are: {valid}.")
        return cls(kind)

    def delimiter(self) -> str | None:
        """
        Return the character inserted after each adjective, or None if words are joined directly.
        """
        if self.kind in (SpeciesKind.SNAKE, SpeciesKind.SCREAMING_SNAKE):
            return "_"
        elif self.kind in (SpeciesKind.KEBAB, SpeciesKind.SCREAMING_KEBAB):
            return "-"
        elif self.kind == SpeciesKind.CUSTOM_DELIMITER:
            return self.custom_character
        else:
            return None

    def case_word(self, word: str, index: int) -> str:
        """
        Apply this species' casing rule to a single word.

        Args:
            word (str): The (lowercase) word to case.
            index (int): The position of the word in the whole name. Index 0 is the first word emitted,
                which is the first adjective, or the animal if the name has no adjectives.

        Returns:
            str: The cased word.
        """
        if self.kind in (SpeciesKind.SCREAMING_SNAKE, SpeciesKind.SCREAMING_KEBAB):
            return word.upper()
        elif self.kind == SpeciesKind.CAMEL:
            return capitalize(word)
        elif self.kind == SpeciesKind.DROMEDARY:
            # The very first word of a dromedary name keeps its lowercase hump.
            return word if index == 0 else capitalize(word)
        else:
            return word

    def render_word(self, word: str, index: int, is_last: bool) -> str:
        """
        Render the contribution of a single word to a name: the cased word followed by the
        delimiter, unless the word is the last one (the animal) or this species has no delimiter.

        Args:
            word (str): The word to render.
            index (int): The position of the word in the whole name.
            is_last (bool): Whether this is the final word of the name.

        Returns:
            str: The rendered word.
        """
        cased = self.case_word(word, index)
        delimiter = self.delimiter()
        if is_last or delimiter is None:
            return cased
        return cased + delimiter

    def state_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "custom_character": self.custom_character}

    @classmethod
    def from_state_dict(cls, state_dict: dict[str, Any]) -> "Species":
        return cls(SpeciesKind(state_dict["kind"]), state_dict.get("custom_character", None))

    def __repr__(self) -> str:
        if self.kind == SpeciesKind.CUSTOM_DELIMITER:
            return f"Species.custom_delimiter({self.custom_character!r})"
        return f"Species.{self.kind.name}"


Species.SNAKE = Species(SpeciesKind.SNAKE)
Species.SCREAMING_SNAKE = Species(SpeciesKind.SCREAMING_SNAKE)
Species.CAMEL = Species(SpeciesKind.CAMEL)
Species.DROMEDARY = Species(SpeciesKind.DROMEDARY)
Species.KEBAB = Species(SpeciesKind.KEBAB)
Species.SCREAMING_KEBAB = Species(SpeciesKind.SCREAMING_KEBAB)
