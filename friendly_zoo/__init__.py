# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#

from .config import ZooConfig
from .random_source import NumpyRandomSource, RandomSource, default_random_source
from .species import Species, SpeciesKind, capitalize
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .zoo import Zoo, compose_name, generate_name

__all__ = [
    "Zoo",
    "ZooConfig",
    "Species",
    "SpeciesKind",
    "Vocabulary",
    "DEFAULT_VOCABULARY",
    "RandomSource",
    "NumpyRandomSource",
    "default_random_source",
    "capitalize",
    "compose_name",
    "generate_name",
]
