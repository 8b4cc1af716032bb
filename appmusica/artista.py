"""Artist record and the file of artists."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, Union

from appmusica.storage import RecordFile, _decode_text, _encode_text

_NAME_SIZE = 50
_LAYOUT = struct.Struct(f"<i{_NAME_SIZE}s?x")


@dataclass
class Artista:
    """An artist; ``estado`` is False once the artist has been removed."""

    id_artista: int = 0
    nombre: str = ""
    estado: bool = True

    SIZE: ClassVar[int] = _LAYOUT.size

    def mostrar(self) -> str:
        """Return a one-line description of the artist."""
        marca = "[Activo]" if self.estado else "[Inactivo]"
        return f"ID: {self.id_artista} - Nombre: {self.nombre} {marca}"

    def to_csv(self) -> str:
        return f"{self.id_artista},{self.nombre},{1 if self.estado else 0}"

    def to_bytes(self) -> bytes:
        return _LAYOUT.pack(
            self.id_artista,
            _encode_text(self.nombre, _NAME_SIZE),
            self.estado,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Artista":
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        id_artista, nombre, estado = _LAYOUT.unpack(data)
        return cls(id_artista, _decode_text(nombre), estado)

    @classmethod
    def cargar(cls, ask: Callable[[str], str]) -> "Artista":
        """Build an active artist from answers to the id and name prompts."""
        id_artista = int(ask("ID del artista: ").strip())
        nombre = ask("Nombre del artista: ")[: _NAME_SIZE - 1]
        return cls(id_artista, nombre, True)


class ArtistaArchivo(RecordFile[Artista]):
    """The file of artist records."""

    def __init__(self, path: Union[str, os.PathLike] = "artistas.dat") -> None:
        super().__init__(path, Artista)

    def buscar_id_por_nombre(self, nombre: str) -> Optional[int]:
        """Id of the first active artist with this name, or None."""
        return next(
            (a.id_artista for a in self if a.nombre == nombre and a.estado), None
        )

    def existe_por_id(self, id_artista: int) -> bool:
        """Whether an active artist with this id exists."""
        return any(a.id_artista == id_artista and a.estado for a in self)

    def leer_por_id(self, id_artista: int) -> Optional[Artista]:
        """The first artist with this id, active or not, or None."""
        return next((a for a in self if a.id_artista == id_artista), None)

    def max_id(self) -> int:
        """The largest id in the file, never below 0."""
        return max((a.id_artista for a in self), default=0) if self.count() else 0