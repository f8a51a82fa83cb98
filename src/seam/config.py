from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeamConfig:
    project: str = "."
    file: str | None = None  # relative to project; discovered when None
    attribute: str = "className"
    host: str = "127.0.0.1"
    port: int = 5175
