# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class BaseCommand(ABC):
    """Base class for all friendly-zoo commands."""

    @abstractmethod
    def execute(self) -> None:
        """
        Run the command with the arguments parsed into this dataclass.
        """
        pass
