"""
Tests for dense matrix saves (mlstore.save).

This module tests:
  - Extension-driven format selection and explicit overrides.
  - Orientation (transpose on by default, caller's matrix untouched).
  - Byte layouts of every dense format.
  - The fatal / non-fatal failure contract and idempotent output.

All tests use temporary directories (via tmp_path fixture).
"""

import numpy as np
import pytest

import mlstore
from mlstore import (
    EncodingFailure,
    FileType,
    IOWarning,
    UnknownExtension,
    UnsupportedForPayloadKind,
)


# ============================================================================
# End-to-end scenarios
# ============================================================================

def test_csv_save_transposes_3x2_to_2x3(tmp_path, matrix_3x2):
    """save('out.csv', M) on a 3x2 matrix writes 2 lines of 3 values."""
    before = matrix_3x2.copy()
    path = tmp_path / "out.csv"

    assert mlstore.save(path, matrix_3x2, False, True) is True

    assert path.read_text() == "1.0,3.0,5.0\n2.0,4.0,6.0\n"
    np.testing.assert_array_equal(matrix_3x2, before)


def test_unknown_extension_warns_and_creates_nothing(tmp_path, matrix_3x2):
    path = tmp_path / "out.weird"

    with pytest.warns(IOWarning, match="Unknown extension") as record:
        assert mlstore.save(path, matrix_3x2, False) is False

    assert len(record) == 1
    assert not path.exists()


def test_unknown_extension_raises_when_fatal(tmp_path, matrix_3x2):
    path = tmp_path / "out.weird"
    with pytest.raises(UnknownExtension):
        mlstore.save(path, matrix_3x2, fatal=True)
    assert not path.exists()


def test_missing_extension_fails(tmp_path, matrix_3x2):
    with pytest.warns(IOWarning, match="no extension"):
        assert mlstore.save(tmp_path / "points", matrix_3x2) is False


# ============================================================================
# Format selection
# ============================================================================

def test_no_transpose_keeps_rows(tmp_path, matrix_3x2):
    path = tmp_path / "out.csv"
    assert mlstore.save(path, matrix_3x2, transpose=False)
    assert path.read_text() == "1.0,2.0\n3.0,4.0\n5.0,6.0\n"


def test_txt_is_written_as_csv(tmp_path, matrix_3x2):
    path = tmp_path / "out.txt"
    assert mlstore.save(path, matrix_3x2)
    assert path.read_text() == "1.0,3.0,5.0\n2.0,4.0,6.0\n"


def test_explicit_type_overrides_extension(tmp_path, matrix_3x2):
    path = tmp_path / "out.dat"
    assert mlstore.save(path, matrix_3x2, file_type=FileType.RAW_ASCII)
    assert path.read_text() == "1.0 3.0 5.0\n2.0 4.0 6.0\n"


def test_explicit_type_as_string(tmp_path, matrix_3x2):
    path = tmp_path / "out.csv"
    assert mlstore.save(path, matrix_3x2, file_type="raw_ascii")
    assert "," not in path.read_text()


def test_tsv_is_unsupported_for_dense(tmp_path, matrix_3x2):
    path = tmp_path / "out.tsv"
    with pytest.warns(IOWarning):
        assert mlstore.save(path, matrix_3x2) is False
    assert not path.exists()
    with pytest.raises(UnsupportedForPayloadKind):
        mlstore.save(path, matrix_3x2, fatal=True)


def test_explicit_coord_ascii_is_unsupported_for_dense(tmp_path, matrix_3x2):
    with pytest.raises(UnsupportedForPayloadKind):
        mlstore.save(
            tmp_path / "out.txt", matrix_3x2, fatal=True, file_type=FileType.COORD_ASCII
        )


def test_sparse_payload_is_rejected(tmp_path, sparse_2x3):
    with pytest.raises(TypeError):
        mlstore.save(tmp_path / "out.csv", sparse_2x3)


# ============================================================================
# Byte layouts
# ============================================================================

def test_arma_ascii_layout(tmp_path, matrix_3x2):
    path = tmp_path / "out.txt"
    assert mlstore.save(path, matrix_3x2, file_type=FileType.ARMA_ASCII)
    assert path.read_text() == "ARMA_MAT_TXT_FN008\n2 3\n1.0 3.0 5.0\n2.0 4.0 6.0\n"


def test_arma_binary_layout(tmp_path, matrix_3x2):
    path = tmp_path / "out.bin"
    assert mlstore.save(path, matrix_3x2)

    data = path.read_bytes()
    header = b"ARMA_MAT_BIN_FN008\n2 3\n"
    assert data.startswith(header)
    body = np.frombuffer(data[len(header):], dtype="<f8")
    # column-major order of the transposed (2x3) matrix
    np.testing.assert_array_equal(body, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])


def test_arma_binary_integer_header(tmp_path):
    path = tmp_path / "ints.bin"
    assert mlstore.save(path, np.arange(6, dtype=np.int32).reshape(2, 3))
    assert path.read_bytes().startswith(b"ARMA_MAT_BIN_IS004\n3 2\n")


def test_raw_binary_layout(tmp_path, matrix_3x2):
    path = tmp_path / "out.bin"
    assert mlstore.save(path, matrix_3x2, file_type=FileType.RAW_BINARY)
    assert path.read_bytes() == matrix_3x2.T.astype("<f8").tobytes(order="F")


def test_pgm_layout(tmp_path):
    matrix = np.array([[0, 300], [128, -5], [255, 7.6]])
    path = tmp_path / "img.pgm"
    assert mlstore.save(path, matrix)

    # transposed: 2 rows x 3 columns, clipped and rounded
    assert path.read_bytes() == b"P5\n3 2\n255\n" + bytes([0, 128, 255, 255, 0, 8])


def test_ppm_layout(tmp_path):
    matrix = np.array([[10, 20, 30], [40, 50, 60]])
    path = tmp_path / "img.ppm"
    assert mlstore.save(path, matrix, transpose=False)
    assert path.read_bytes() == b"P6\n1 2\n255\n" + bytes([10, 20, 30, 40, 50, 60])


def test_ppm_needs_rgb_triples(tmp_path, matrix_3x2):
    with pytest.warns(IOWarning, match="multiple of 3"):
        assert mlstore.save(tmp_path / "img.ppm", matrix_3x2, transpose=False) is False


def test_hdf5_file_holds_dataset(tmp_path, matrix_3x2):
    import xarray as xr

    path = tmp_path / "out.h5"
    assert mlstore.save(path, matrix_3x2)

    with xr.open_dataset(path, engine="h5netcdf") as ds:
        np.testing.assert_array_equal(ds["dataset"].values, matrix_3x2.T)


# ============================================================================
# Failure contract and idempotence
# ============================================================================

def test_encoder_io_error_is_encoding_failure(tmp_path, matrix_3x2):
    path = tmp_path / "missing_dir" / "out.csv"

    with pytest.warns(IOWarning):
        assert mlstore.save(path, matrix_3x2) is False

    with pytest.raises(EncodingFailure) as exc_info:
        mlstore.save(path, matrix_3x2, fatal=True)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_non_numeric_matrix_is_encoding_failure(tmp_path):
    with pytest.raises(EncodingFailure):
        mlstore.save(tmp_path / "out.csv", [["a", "b"]], fatal=True)


@pytest.mark.parametrize("filename", ["out.weird", "out.tsv", "missing/out.csv"])
def test_fatal_flag_symmetry(tmp_path, matrix_3x2, filename):
    """Every input that returns False when non-fatal raises when fatal."""
    path = tmp_path / filename
    with pytest.warns(IOWarning):
        assert mlstore.save(path, matrix_3x2, fatal=False) is False
    with pytest.raises(mlstore.MlstoreError):
        mlstore.save(path, matrix_3x2, fatal=True)


@pytest.mark.parametrize("filename", ["a.csv", "a.txt", "a.bin", "a.pgm"])
def test_repeated_saves_are_byte_identical(tmp_path, random_matrix, filename):
    path = tmp_path / filename
    matrix = np.abs(random_matrix) * 40

    assert mlstore.save(path, matrix)
    first = path.read_bytes()
    assert mlstore.save(path, matrix)
    assert path.read_bytes() == first

