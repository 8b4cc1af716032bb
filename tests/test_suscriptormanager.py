import pytest

from appmusica.fecha import Fecha
from appmusica.suscriptor import Suscriptor, SuscriptorArchivo
from appmusica.suscriptormanager import SuscriptorManager

DATE_ANSWERS = ["5", "3", "1990", "8", "7"]


def _manager(archivo, answers):
    it = iter(answers)
    lines = []
    return SuscriptorManager(archivo, lambda prompt: next(it), lines.append), lines


@pytest.fixture
def archivo(tmp_path):
    arch = SuscriptorArchivo(tmp_path / "s.dat")
    arch.append(Suscriptor(4, "A1", "Ana", "Gomez", "555", "ana@example.com"))
    return arch


def test_cargar_assigns_next_id(archivo):
    manager, lines = _manager(
        archivo, ["B2 extra", "Luis", "Paz", "777", "luis@example.com", *DATE_ANSWERS]
    )
    nuevo = manager.cargar_suscriptor()
    assert nuevo.id_suscriptor == 5
    assert archivo.read(1) == nuevo
    assert nuevo.dni == "B2"
    assert nuevo.fecha_nacimiento == Fecha(5, 3, 1990, 8, 7)
    assert lines[-1] == "Se guardo correctamente!"


def test_cargar_on_empty_file_starts_at_one(tmp_path):
    archivo = SuscriptorArchivo(tmp_path / "e.dat")
    manager, _ = _manager(archivo, ["C3", "a", "b", "c", "d@example.com", *DATE_ANSWERS])
    assert manager.cargar_suscriptor().id_suscriptor == 1


def test_modificar_updates_record(archivo):
    manager, lines = _manager(
        archivo, ["A1", "Ana Maria", "Lopez", "556", "am@example.com", *DATE_ANSWERS]
    )
    assert manager.modificar_suscriptor()
    reg = archivo.read(0)
    assert (reg.id_suscriptor, reg.dni, reg.nombre) == (4, "A1", "Ana Maria")
    assert lines[-1] == "Suscriptor modificado correctamente."


def test_modificar_unknown_dni(archivo):
    manager, lines = _manager(archivo, ["ZZ"])
    assert not manager.modificar_suscriptor()
    assert lines == ["No existe el suscriptor."]


def test_eliminar_marks_inactive(archivo):
    manager, lines = _manager(archivo, ["A1"])
    assert manager.eliminar_suscriptor()
    assert archivo.read(0).activo is False
    assert lines == ["Suscriptor dado de baja correctamente-"]


def test_eliminar_missing_file(tmp_path):
    manager, lines = _manager(SuscriptorArchivo(tmp_path / "x.dat"), ["A1"])
    assert not manager.eliminar_suscriptor()
    assert lines == ["Error al abrir el archivo."]


def test_cantidad_and_listar(archivo):
    manager, lines = _manager(archivo, [])
    assert manager.mostrar_cantidad_suscriptores() == 1
    manager.listar_todos()
    assert lines == [
        "La cantidad total de suscriptores es de: 1",
        archivo.read(0).to_csv(),
    ]


def test_existe_suscriptor(archivo):
    manager, _ = _manager(archivo, [])
    assert manager.existe_suscriptor(4)
    assert not manager.existe_suscriptor(5)