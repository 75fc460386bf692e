from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    dept_id: int
    dept_name: str
    location: Optional[str] = None
    manager_id: Optional[int] = None

    manager_name: Optional[str] = None
