"""Record of a subscriber playing a song, and its file."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import ClassVar, Union

from appmusica.fecha import Fecha
from appmusica.storage import RecordFile

_LAYOUT = struct.Struct("<ii")


@dataclass
class Acceso:
    """One access of a subscriber to a song at a given moment."""

    id_suscriptor: int = 0
    id_cancion: int = 0
    fecha_acceso: Fecha = field(default_factory=Fecha)

    SIZE: ClassVar[int] = _LAYOUT.size + Fecha.SIZE

    def to_bytes(self) -> bytes:
        return _LAYOUT.pack(self.id_suscriptor, self.id_cancion) + self.fecha_acceso.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Acceso":
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        id_suscriptor, id_cancion = _LAYOUT.unpack_from(data)
        return cls(id_suscriptor, id_cancion, Fecha.from_bytes(data[_LAYOUT.size:]))


class AccesoArchivo(RecordFile[Acceso]):
    """The file of access records."""

    def __init__(self, path: Union[str, os.PathLike] = "accesos.dat") -> None:
        super().__init__(path, Acceso)