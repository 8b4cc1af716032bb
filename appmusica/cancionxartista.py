"""Link between a song and an artist, and its file."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import ClassVar, Union

from appmusica.storage import RecordFile, _decode_text, _encode_text

_NAME_SIZE = 50
_LAYOUT = struct.Struct(f"<ii{_NAME_SIZE}s?x")


@dataclass
class CancionXArtista:
    """A song credited to an artist; ``estado`` marks whether it is active."""

    id_cancion: int = 0
    id_artista: int = 0
    estado: bool = True
    nombre_artista: str = ""

    SIZE: ClassVar[int] = _LAYOUT.size

    def to_csv(self) -> str:
        return f"{self.id_cancion},{self.id_artista},{'1' if self.estado else '0'}"

    def to_bytes(self) -> bytes:
        return _LAYOUT.pack(
            self.id_cancion,
            self.id_artista,
            _encode_text(self.nombre_artista, _NAME_SIZE),
            self.estado,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "CancionXArtista":
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        id_cancion, id_artista, nombre, estado = _LAYOUT.unpack(data)
        return cls(id_cancion, id_artista, estado, _decode_text(nombre))


class CancionXArtistaArchivo(RecordFile[CancionXArtista]):
    """The file of song/artist links."""

    def __init__(self, path: Union[str, os.PathLike] = "cancionxartista.dat") -> None:
        super().__init__(path, CancionXArtista)