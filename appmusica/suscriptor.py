"""Subscriber record and the file of subscribers."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from appmusica.fecha import Fecha
from appmusica.storage import RecordFile, _decode_text, _encode_text

_TEXT_SIZE = 50
_LAYOUT = struct.Struct(f"<i{_TEXT_SIZE}s{_TEXT_SIZE}s{_TEXT_SIZE}s{_TEXT_SIZE}s{_TEXT_SIZE}s?x")


@dataclass
class Suscriptor:
    """A subscriber; ``activo`` is False once the subscriber has been removed."""

    id_suscriptor: int = 0
    dni: str = ""
    nombre: str = ""
    apellido: str = ""
    telefono: str = ""
    email: str = ""
    fecha_nacimiento: Fecha = field(default_factory=Fecha)
    activo: bool = True

    SIZE: ClassVar[int] = _LAYOUT.size + Fecha.SIZE

    def to_csv(self) -> str:
        f = self.fecha_nacimiento
        return (
            f"{self.id_suscriptor},{self.dni},{self.nombre},{self.apellido},"
            f"{self.telefono},{self.email},"
            f"{f.dia:02d}/{f.mes:02d}/{f.anio:04d} {f.hora:02d}:{f.minuto:02d}"
        )

    def to_bytes(self) -> bytes:
        head = _LAYOUT.pack(
            self.id_suscriptor,
            _encode_text(self.dni, _TEXT_SIZE),
            _encode_text(self.nombre, _TEXT_SIZE),
            _encode_text(self.apellido, _TEXT_SIZE),
            _encode_text(self.telefono, _TEXT_SIZE),
            _encode_text(self.email, _TEXT_SIZE),
            self.activo,
        )
        return head + self.fecha_nacimiento.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Suscriptor":
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        ident, dni, nombre, apellido, telefono, email, activo = _LAYOUT.unpack_from(data)
        return cls(
            ident,
            _decode_text(dni),
            _decode_text(nombre),
            _decode_text(apellido),
            _decode_text(telefono),
            _decode_text(email),
            Fecha.from_bytes(data[_LAYOUT.size:]),
            activo,
        )


class SuscriptorArchivo(RecordFile[Suscriptor]):
    """The file of subscriber records."""

    def __init__(self, path: Union[str, os.PathLike] = "suscriptores.dat") -> None:
        super().__init__(path, Suscriptor)

    def buscar(self, dni: str) -> Optional[int]:
        """Position of the first subscriber with this DNI, or None.

        Raises FileNotFoundError when the file does not exist.
        """
        if not self.path.exists():
            raise FileNotFoundError(self.path)
        return next((pos for pos, s in enumerate(self) if s.dni == dni), None)

    def buscar_por_id(self, id_suscriptor: int) -> Optional[Suscriptor]:
        return next((s for s in self if s.id_suscriptor == id_suscriptor), None)