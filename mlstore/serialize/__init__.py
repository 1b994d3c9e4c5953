"""
I/O serialization plug-ins for mlstore.

This subpackage contains all reader and writer plug-ins for supported file formats.
Each plug-in registers itself with the global registry on import, keyed by payload kind
and file type (matrices) or by model format (models).

Supported formats
-----------------
Dense matrices (read and write):
- CSV, RawASCII, ArmaASCII          : writers/dense_text.py, readers/dense_text.py
- RawBinary, ArmaBinary             : writers/dense_binary.py, readers/dense_binary.py
- PGM, PPM                          : writers/dense_image.py, readers/dense_image.py
- HDF5                              : writers/dense_hdf5.py, readers/dense_hdf5.py

Sparse matrices (read and write):
- CoordASCII                        : writers/sparse_coord.py, readers/sparse_coord.py
- RawBinary, ArmaBinary             : writers/sparse_binary.py, readers/sparse_binary.py

Models (read and write):
- JSON, XML, BIN                    : writers/model_*.py, readers/model_*.py

Usage
-----
Plug-ins are registered automatically by ``mlstore.serialize_boot``. To add support
for a new format, implement a MatrixWriter/MatrixReader (or ModelWriter/ModelReader)
and decorate it with the matching ``register_*`` decorator from ``mlstore.registry``.
"""
