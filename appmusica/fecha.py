"""Calendar date with a time of day, as kept inside the record files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

_RANGES = {
    "dia": (1, 31),
    "mes": (1, 12),
    "anio": (1900, 2100),
    "hora": (0, 23),
    "minuto": (0, 59),
}

_PROMPTS = (
    ("dia", "Ingrese dia (1-31): "),
    ("mes", "Ingrese mes (1-12): "),
    ("anio", "Ingrese anio (1900-2100): "),
    ("hora", "Ingrese hora (0-23): "),
    ("minuto", "Ingrese minuto (0-59): "),
)

_LAYOUT = struct.Struct("<5i")


@dataclass
class Fecha:
    """A date and time; values outside the allowed range are ignored."""

    dia: int = 1
    mes: int = 1
    anio: int = 2000
    hora: int = 0
    minuto: int = 0

    SIZE: ClassVar[int] = _LAYOUT.size

    def __setattr__(self, name: str, value: int) -> None:
        bounds = _RANGES.get(name)
        if bounds is not None and not bounds[0] <= value <= bounds[1]:
            return
        super().__setattr__(name, value)

    def mostrar(self) -> str:
        """Return the date as ``d/m/yyyy - HH : MM``."""
        return f"{self.dia}/{self.mes}/{self.anio} - {self.hora:02d} : {self.minuto:02d}"

    def to_bytes(self) -> bytes:
        return _LAYOUT.pack(self.dia, self.mes, self.anio, self.hora, self.minuto)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Fecha":
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        return cls(*_LAYOUT.unpack(data))


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def pedir_fecha(ask: Callable[[str], str]) -> Fecha:
    """Ask for each part of a date until a value in range is given."""
    fecha = Fecha()
    for name, prompt in _PROMPTS:
        low, high = _RANGES[name]
        while True:
            value = _parse_int(ask(prompt))
            if value is not None and low <= value <= high:
                break
        setattr(fecha, name, value)
    return fecha