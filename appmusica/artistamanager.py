"""Interactive operations on the artist file."""

from __future__ import annotations

from typing import Callable, Optional

from appmusica.artista import Artista, ArtistaArchivo


class ArtistaManager:
    """Loads, lists, finds and removes artists, reporting through ``out``."""

    def __init__(
        self,
        archivo: Optional[ArtistaArchivo] = None,
        out: Callable[[str], None] = print,
    ) -> None:
        self.archivo = archivo if archivo is not None else ArtistaArchivo()
        self.out = out

    def cargar_artista(self, ask: Callable[[str], str] = input) -> bool:
        """Ask for a new artist and append it to the file."""
        artista = Artista.cargar(ask)
        try:
            self.archivo.append(artista)
        except OSError:
            self.out("Error al guardar el artista.")
            return False
        self.out("Artista guardado.")
        return True

    def listar_artistas(self) -> None:
        for artista in self.archivo:
            if artista.estado:
                self.out(artista.mostrar())

    def buscar_artista_por_id(self, id_artista: int) -> Optional[Artista]:
        """Show and return the active artist with this id, if any."""
        for artista in self.archivo:
            if artista.id_artista == id_artista and artista.estado:
                self.out(artista.mostrar())
                return artista
        self.out(f"No se encontro el artista con el ID {id_artista}")
        return None

    def dar_de_baja_artista(self, id_artista: int) -> bool:
        """Mark the active artist with this id as removed."""
        encontrado = None
        for pos, artista in enumerate(self.archivo):
            if artista.id_artista == id_artista and artista.estado:
                encontrado = (pos, artista)
                break
        if encontrado is None:
            return False
        pos, artista = encontrado
        artista.estado = False
        try:
            self.archivo.write(artista, pos)
        except OSError:
            return False
        return True

    def obtener_nombre_por_id(self, id_artista: int) -> str:
        for artista in self.archivo:
            if artista.id_artista == id_artista:
                return artista.nombre
        return "Artista desconocido"