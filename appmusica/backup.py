"""Backup and restore of the subscriber file."""

from __future__ import annotations

import os
from typing import Union

from appmusica.suscriptor import Suscriptor

PathLike = Union[str, os.PathLike]


class BackupError(Exception):
    """A backup or restore could not be carried out."""


def _copiar(origen: PathLike, destino: PathLike, error_origen: str, error_destino: str) -> int:
    size = Suscriptor.SIZE
    try:
        src = open(origen, "rb")
    except OSError as exc:
        raise BackupError(error_origen) from exc
    with src:
        try:
            dst = open(destino, "wb")
        except OSError as exc:
            raise BackupError(error_destino) from exc
        with dst:
            copiados = 0
            while len(chunk := src.read(size)) == size:
                dst.write(chunk)
                copiados += 1
    return copiados


def hacer_backup_suscriptores(
    origen: PathLike = "suscriptores.dat", destino: PathLike = "suscriptores.bkp"
) -> int:
    """Copy every whole subscriber record to the backup; return how many."""
    return _copiar(
        origen,
        destino,
        "No se pudo abrir el archivo original de suscriptores.",
        "No se pudo crear el archivo de backup.",
    )


def recuperar_backup_suscriptores(
    origen: PathLike = "suscriptores.bkp", destino: PathLike = "suscriptores.dat"
) -> int:
    """Replace the subscriber file with the backup; return the records restored."""
    return _copiar(
        origen,
        destino,
        "No se pudo abrir el archivo de backup de suscriptores.",
        "No se pudo crear el archivo original de suscriptores.",
    )