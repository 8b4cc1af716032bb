import pytest

from appmusica.fecha import Fecha
from appmusica.suscriptor import Suscriptor, SuscriptorArchivo


def _sample(ident=3, dni="A1", activo=True):
    return Suscriptor(ident, dni, "Ana", "Gomez", "555", "ana@example.com",
                      Fecha(5, 3, 1990, 8, 7), activo)


def test_bytes_round_trip():
    s = _sample(activo=False)
    data = s.to_bytes()
    assert len(data) == Suscriptor.SIZE
    assert Suscriptor.from_bytes(data) == s


def test_from_bytes_rejects_wrong_size():
    with pytest.raises(ValueError):
        Suscriptor.from_bytes(b"")


def test_to_csv_format():
    assert _sample().to_csv() == "3,A1,Ana,Gomez,555,ana@example.com,05/03/1990 08:07"


def test_to_csv_does_not_include_state():
    assert _sample(activo=False).to_csv() == _sample(activo=True).to_csv()


def test_default_path_name():
    assert SuscriptorArchivo().path.name == "suscriptores.dat"


def test_buscar_by_dni(tmp_path):
    archivo = SuscriptorArchivo(tmp_path / "s.dat")
    archivo.append(_sample(1, "A1"))
    archivo.append(_sample(2, "B2"))
    assert archivo.buscar("B2") == 1
    assert archivo.buscar("ZZ") is None


def test_buscar_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SuscriptorArchivo(tmp_path / "none.dat").buscar("A1")


def test_buscar_por_id(tmp_path):
    archivo = SuscriptorArchivo(tmp_path / "s.dat")
    archivo.append(_sample(1, "A1"))
    archivo.append(_sample(2, "B2"))
    assert archivo.buscar_por_id(2).dni == "B2"
    assert archivo.buscar_por_id(9) is None