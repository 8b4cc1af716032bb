"""Song record and the file of songs."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from appmusica.fecha import Fecha
from appmusica.storage import RecordFile, _decode_text, _encode_text

_TEXT_SIZE = 30
_LAYOUT = struct.Struct(f"<i{_TEXT_SIZE}s{_TEXT_SIZE}s")


@dataclass
class Cancion:
    """A song with its author and publication date."""

    id_cancion: int = 0
    nombre: str = ""
    autor: str = ""
    fecha_publicacion: Fecha = field(default_factory=Fecha)

    SIZE: ClassVar[int] = _LAYOUT.size + Fecha.SIZE

    def to_bytes(self) -> bytes:
        head = _LAYOUT.pack(
            self.id_cancion,
            _encode_text(self.nombre, _TEXT_SIZE),
            _encode_text(self.autor, _TEXT_SIZE),
        )
        return head + self.fecha_publicacion.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Cancion":
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        id_cancion, nombre, autor = _LAYOUT.unpack_from(data)
        return cls(
            id_cancion,
            _decode_text(nombre),
            _decode_text(autor),
            Fecha.from_bytes(data[_LAYOUT.size:]),
        )


class CancionArchivo(RecordFile[Cancion]):
    """The file of song records."""

    def __init__(self, path: Union[str, os.PathLike] = "canciones.dat") -> None:
        super().__init__(path, Cancion)

    def buscar_por_id(self, id_cancion: int) -> Optional[Cancion]:
        """Return the first song with this id, or None."""
        return next((c for c in self if c.id_cancion == id_cancion), None)