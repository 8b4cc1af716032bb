# appmusica

A small library for a music subscription catalogue. It keeps songs, artists,
the artists credited on each song, subscribers, and song plays ("accesos").
Each kind of record has its own file of fixed-size binary records.

## Installation

```
pip install .
```

You need Python 3.10 or later. The package has no runtime dependencies.

## Records and their files

- `appmusica.fecha.Fecha` holds a day, month, year, hour and minute. The
  defaults are 1/1/2000 00:00. A value outside its range (day 1-31, month
  1-12, year 1900-2100, hour 0-23, minute 0-59) is ignored, and the field
  keeps its previous or default value. `mostrar()` returns the date as text,
  for example `5/3/1990 - 07 : 09`. `appmusica.fecha.pedir_fecha(ask)` keeps
  asking for each part until it gets a value in range.
- `appmusica.cancion.Cancion` and `CancionArchivo` (default file
  `canciones.dat`) hold songs. `buscar_por_id` returns the first matching
  song, or `None`.
- `appmusica.artista.Artista` and `ArtistaArchivo` (default file
  `artistas.dat`) hold artists. `ArtistaArchivo` provides:
  - `buscar_id_por_nombre`: returns the id of the first active artist with that name.
  - `existe_por_id`: checks whether an active artist with that id exists.
  - `leer_por_id`: returns the artist with that id, active or not.
  - `max_id`: returns the highest id, or 0.
- `appmusica.cancionxartista.CancionXArtista` and `CancionXArtistaArchivo`
  (default file `cancionxartista.dat`) link songs to artists. `to_csv()`
  returns `id_cancion,id_artista,1|0`.
- `appmusica.suscriptor.Suscriptor` and `SuscriptorArchivo` (default file
  `suscriptores.dat`) hold subscribers.
  - `buscar(dni)` returns the position of the first subscriber with that DNI,
    or `None`. It raises `FileNotFoundError` if the file does not exist.
  - `buscar_por_id` returns the matching subscriber, or `None`.
- `appmusica.acceso.Acceso` and `AccesoArchivo` (default file `accesos.dat`)
  hold one record per play of a song by a subscriber.

Each record has `to_bytes()` and `from_bytes()`. Text fields are cut to fit
their fixed width.

## Record files

`appmusica.storage.RecordFile` is the common base of every `...Archivo` class.
It has these members:

- `append(record)`: adds the record at the end and creates the file if it is
  missing.
- `write(record, pos)`: overwrites the record at that position. The file must
  already exist.
- `read(pos)`: returns the record at that position. It returns an empty
  default record if there is no record there or the file is missing.
- `count()`: returns the number of whole records.
- Iterating over the file yields every record in order.

## Example

```python
from appmusica.fecha import Fecha
from appmusica.cancion import Cancion, CancionArchivo

canciones = CancionArchivo("canciones.dat")
canciones.append(Cancion(1, "Zamba de mi esperanza", "Anonimo", Fecha(1, 5, 1950, 12, 0)))

print(canciones.count())
print(canciones.buscar_por_id(1).nombre)
```

## Managers

Both managers write their messages through an `out` callable, which defaults
to `print`.

`appmusica.artistamanager.ArtistaManager(archivo, out)` provides:

- `cargar_artista(ask)`: reads an id and a name, then appends the artist.
- `listar_artistas()`: shows the active artists.
- `buscar_artista_por_id`: shows and returns an active artist.
- `dar_de_baja_artista`: marks an artist inactive.
- `obtener_nombre_por_id`: returns the artist's name, or
  `"Artista desconocido"` if there is none.

`appmusica.suscriptormanager.SuscriptorManager(archivo, ask, out)` reads
answers through `ask`, which defaults to `input`. It provides:

- `cargar_suscriptor()`: gives the new subscriber the next free id.
- `modificar_suscriptor()`
- `eliminar_suscriptor()`: marks the subscriber inactive.
- `mostrar_cantidad_suscriptores()`
- `listar_todos()`: prints one CSV line per subscriber.
- `existe_suscriptor(id)`

The modify and remove workflows find the subscriber by DNI.

## Backups

`appmusica.backup.hacer_backup_suscriptores(origen, destino)` copies every
whole subscriber record from `suscriptores.dat` to `suscriptores.bkp`.
`recuperar_backup_suscriptores(origen, destino)` copies them back. Both
functions return the number of records copied. Both raise
`appmusica.backup.BackupError` if a file cannot be opened or created.

## What it does not do

The package is a library only:

- It has no command to run and no menus.
- It has no workflows for songs, song/artist links or plays. Those records
  have files, but no manager.
- It does not log in subscribers or play songs.
- It produces no reports, such as most-played songs or artists.

## Tests

```
pip install .[test]
pytest
```