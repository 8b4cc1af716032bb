import pytest

from appmusica.backup import BackupError, hacer_backup_suscriptores, recuperar_backup_suscriptores
from appmusica.suscriptor import Suscriptor, SuscriptorArchivo


@pytest.fixture
def datos(tmp_path):
    path = tmp_path / "suscriptores.dat"
    archivo = SuscriptorArchivo(path)
    archivo.append(Suscriptor(1, "A1", "Ana"))
    archivo.append(Suscriptor(2, "B2", "Luis"))
    return path


def test_backup_copies_all_records(datos, tmp_path):
    bkp = tmp_path / "suscriptores.bkp"
    assert hacer_backup_suscriptores(datos, bkp) == 2
    assert bkp.read_bytes() == datos.read_bytes()


def test_backup_drops_partial_record(datos, tmp_path):
    with datos.open("ab") as stream:
        stream.write(b"\1\2\3")
    bkp = tmp_path / "suscriptores.bkp"
    assert hacer_backup_suscriptores(datos, bkp) == 2
    assert bkp.stat().st_size == 2 * Suscriptor.SIZE


def test_backup_missing_origin(tmp_path):
    with pytest.raises(BackupError, match="archivo original"):
        hacer_backup_suscriptores(tmp_path / "none.dat", tmp_path / "x.bkp")
    assert not (tmp_path / "x.bkp").exists()


def test_backup_cannot_create_destination(datos, tmp_path):
    with pytest.raises(BackupError, match="crear el archivo de backup"):
        hacer_backup_suscriptores(datos, tmp_path / "nodir" / "x.bkp")


def test_restore_round_trip(datos, tmp_path):
    bkp = tmp_path / "suscriptores.bkp"
    original = datos.read_bytes()
    hacer_backup_suscriptores(datos, bkp)
    datos.write_bytes(b"")
    assert recuperar_backup_suscriptores(bkp, datos) == 2
    assert datos.read_bytes() == original
    assert SuscriptorArchivo(datos).read(1).nombre == "Luis"


def test_restore_missing_backup_leaves_original(datos, tmp_path):
    before = datos.read_bytes()
    with pytest.raises(BackupError, match="backup de suscriptores"):
        recuperar_backup_suscriptores(tmp_path / "none.bkp", datos)
    assert datos.read_bytes() == before