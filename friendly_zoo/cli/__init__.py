# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#
from typing import Sequence

import tyro

from ._base_command import BaseCommand
from ._generate import MAX_ADJECTIVES, Generate


def main(args: Sequence[str] | None = None) -> None:
    """
    Entry point of the `friendly-zoo` command.

    Args:
        args (Sequence[str] | None): The command line arguments, or None to read them from `sys.argv`.
    """
    command = tyro.cli(Generate, args=args, prog="friendly-zoo")
    command.execute()


__all__ = ["BaseCommand", "Generate", "MAX_ADJECTIVES", "main"]
