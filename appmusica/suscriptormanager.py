"""Interactive operations on the subscriber file."""

from __future__ import annotations

from typing import Callable, Optional

from appmusica.fecha import pedir_fecha
from appmusica.suscriptor import Suscriptor, SuscriptorArchivo


def _first_word(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


class SuscriptorManager:
    """Creates, edits, removes and lists subscribers."""

    def __init__(
        self,
        archivo: Optional[SuscriptorArchivo] = None,
        ask: Callable[[str], str] = input,
        out: Callable[[str], None] = print,
    ) -> None:
        self.archivo = archivo if archivo is not None else SuscriptorArchivo()
        self.ask = ask
        self.out = out

    def cargar_suscriptor(self) -> Optional[Suscriptor]:
        """Ask for a new subscriber, give it the next id and save it."""
        ultimo = max((s.id_suscriptor for s in self.archivo), default=0)
        suscriptor = Suscriptor(id_suscriptor=max(ultimo, 0) + 1)
        suscriptor.dni = _first_word(self.ask("Ingrese DNI: "))
        suscriptor.nombre = self.ask("Ingrese nombre: ")
        suscriptor.apellido = self.ask("Ingrese apellido: ")
        suscriptor.telefono = self.ask("Ingrese telefono: ")
        suscriptor.email = self.ask("Ingrese email: ")
        self.out("Ingrese Fecha de Nacimiento: ")
        suscriptor.fecha_nacimiento = pedir_fecha(self.ask)
        try:
            self.archivo.append(suscriptor)
        except OSError:
            self.out("Hubo un error inesperado.")
            return None
        self.out("Se guardo correctamente!")
        return suscriptor

    def _posicion(self, prompt: str) -> Optional[int]:
        dni = _first_word(self.ask(prompt))
        try:
            pos = self.archivo.buscar(dni)
        except OSError:
            self.out("Error al abrir el archivo.")
            return None
        if pos is None:
            self.out("No existe el suscriptor.")
        return pos

    def modificar_suscriptor(self) -> bool:
        pos = self._posicion("Ingrese el DNI del suscriptor a modificar: ")
        if pos is None:
            return False
        reg = self.archivo.read(pos)
        reg.nombre = self.ask("Ingrese nuevo nombre: ")
        reg.apellido = self.ask("Ingrese nuevo apellido: ")
        reg.telefono = self.ask("Ingrese nuevo telefono: ")
        reg.email = self.ask("Ingrese nuevo email: ")
        self.out("Ingrese nueva fecha de nacimiento: ")
        reg.fecha_nacimiento = pedir_fecha(self.ask)
        try:
            self.archivo.write(reg, pos)
        except OSError:
            self.out("Error al modificar el suscriptor.")
            return False
        self.out("Suscriptor modificado correctamente.")
        return True

    def eliminar_suscriptor(self) -> bool:
        pos = self._posicion("Ingrese el DNI del suscriptor a eliminar: ")
        if pos is None:
            return False
        reg = self.archivo.read(pos)
        reg.activo = False
        try:
            self.archivo.write(reg, pos)
        except OSError:
            self.out("Error al dar de baja el suscriptor.")
            return False
        self.out("Suscriptor dado de baja correctamente-")
        return True

    def mostrar_cantidad_suscriptores(self) -> int:
        cantidad = self.archivo.count()
        self.out(f"La cantidad total de suscriptores es de: {cantidad}")
        return cantidad

    def listar_todos(self) -> None:
        for suscriptor in self.archivo:
            self.out(suscriptor.to_csv())

    def existe_suscriptor(self, id_suscriptor: int) -> bool:
        return self.archivo.buscar_por_id(id_suscriptor) is not None