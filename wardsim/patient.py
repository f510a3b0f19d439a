"""Patient record shared by every ward structure."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass
class Patient:
    """A patient as loaded from the registry and moved through the ward."""

    id: str
    full_name: str = ""
    age: int = 0
    sex: str = ""
    cpf: str = ""
    priority: int = 0
    attended: bool = False
    cycles_admitted: int = 0

    def copy(self) -> Patient:
        """Return an independent copy of this patient."""
        return dataclasses.replace(self)