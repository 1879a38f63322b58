# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
from dataclasses import dataclass, field
from typing import Any

from .species import Species


@dataclass
class ZooConfig:
    """
    Parameters describing what names a `Zoo` generates.
    No validation happens here; an invalid configuration is reported when a name is generated.
    """

    # The naming convention of generated names
    species: Species = field(default_factory=lambda: Species.SNAKE)
    # Number of distinct adjectives preceding the animal. Saturates at the size of the adjective list.
    adjective_count: int = 1

    def state_dict(self) -> dict[str, Any]:
        """
        Return a state dictionary representing this configuration.

        Returns:
            dict[str, Any]: A dictionary containing the species and adjective count.
        """
        return {"species": self.species.state_dict(), "adjective_count": self.adjective_count}

    @classmethod
    def from_state_dict(cls, state_dict: dict[str, Any]) -> "ZooConfig":
        """
        Create a new `ZooConfig` from a state dictionary.

        Args:
            state_dict (dict[str, Any]): A dictionary produced by `ZooConfig.state_dict`.

        Returns:
            ZooConfig: The deserialized configuration.
        """
        return cls(
            species=Species.from_state_dict(state_dict["species"]),
            adjective_count=int(state_dict["adjective_count"]),
        )
