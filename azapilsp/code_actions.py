"""Supported code action kinds and document language identifiers."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

SOURCE_FORMAT_ALL_TERRAFORM = "source.formatAll.terraform"


class CodeActions(dict):
    """A mapping of code action kind to whether it is enabled."""

    def as_list(self) -> list[str]:
        """The action kinds, sorted."""
        return sorted(self)

    def only(self, kinds: Iterable[str]) -> "CodeActions":
        """The subset of these actions whose kinds are among `kinds`."""
        return CodeActions({kind: self[kind] for kind in kinds if kind in self})


SUPPORTED_CODE_ACTIONS = CodeActions({SOURCE_FORMAT_ALL_TERRAFORM: True})


class LanguageID(str, Enum):
    """The coding language of a document."""

    TERRAFORM = "terraform"
    TFVARS = "terraform-vars"

    def __str__(self) -> str:
        return self.value