"""
Tests for model saves and loads (mlstore.save_model / mlstore.load_model).

This module tests:
  - JSON, XML and BIN archives and their round-trips.
  - Registered-name handling on save and load.
  - Serialization failures (bad names, unsupported state values).
  - The binary reader's refusal to unpickle globals.
"""

import collections
import json
import pickle
import xml.etree.ElementTree as ET

import numpy as np
import pytest

import mlstore
from mlstore import (
    DecodingFailure,
    IOWarning,
    ModelFormat,
    SerializationFailure,
    Serializable,
    UnknownExtension,
)


class NotAModel:
    pass


class SetHolder(Serializable):
    """Model whose state cannot be reduced to a plain tree."""

    def tag(self):
        return "set_holder"

    def to_state(self):
        return {"items": {1, 2, 3}}

    @classmethod
    def from_state(cls, state):
        return cls()


class Unregistered(Serializable):
    def tag(self):
        return "never_registered"

    def to_state(self):
        return {}

    @classmethod
    def from_state(cls, state):
        return cls()


# ============================================================================
# End-to-end scenarios
# ============================================================================

def test_json_save_and_load_round_trip(tmp_path, linear_model):
    """save_model('model.json', 'myModel', obj, True) then load reproduces obj."""
    path = tmp_path / "model.json"

    assert mlstore.save_model(path, "myModel", linear_model, True) is True

    document = json.loads(path.read_text())
    assert list(document) == ["myModel"]
    assert document["myModel"]["tag"] == "linear_model"

    assert mlstore.load_model(path, "myModel") == linear_model


@pytest.mark.parametrize("filename", ["model.xml", "model.bin"])
def test_round_trip_other_formats(tmp_path, linear_model, filename):
    path = tmp_path / filename
    assert mlstore.save_model(path, "myModel", linear_model, fatal=True)
    assert mlstore.load_model(path, "myModel", fatal=True) == linear_model


def test_xml_layout(tmp_path, linear_model):
    path = tmp_path / "model.xml"
    assert mlstore.save_model(path, "myModel", linear_model)

    root = ET.parse(path).getroot()
    assert root.tag == "archive"
    obj = root.find("object")
    assert obj.get("name") == "myModel"
    assert obj.get("tag") == "linear_model"
    assert obj.find("item").get("type") == "dict"


def test_bin_archive_starts_with_magic(tmp_path, linear_model):
    path = tmp_path / "model.bin"
    assert mlstore.save_model(path, "myModel", linear_model)
    assert path.read_bytes().startswith(b"MLSTORE_BIN\n")


def test_explicit_format_overrides_extension(tmp_path, linear_model):
    path = tmp_path / "model.dat"
    assert mlstore.save_model(path, "m", linear_model, fmt=ModelFormat.XML)
    assert path.read_text(encoding="utf-8").startswith("<?xml")
    assert mlstore.load_model(path, "m", fmt="xml") == linear_model


def test_state_arrays_keep_dtype_and_shape(tmp_path, linear_model):
    path = tmp_path / "model.json"
    assert mlstore.save_model(path, "m", linear_model)
    loaded = mlstore.load_model(path, "m")
    assert loaded.weights.dtype == np.float64
    assert loaded.weights.shape == (2, 2)


# ============================================================================
# Failures
# ============================================================================

def test_unknown_extension_warns(tmp_path, linear_model):
    path = tmp_path / "model.csv"
    with pytest.warns(IOWarning, match="Unknown extension"):
        assert mlstore.save_model(path, "m", linear_model) is False
    assert not path.exists()
    with pytest.raises(UnknownExtension):
        mlstore.save_model(path, "m", linear_model, fatal=True)


def test_non_serializable_object_is_a_type_error(tmp_path):
    with pytest.raises(TypeError):
        mlstore.save_model(tmp_path / "model.json", "m", NotAModel())


@pytest.mark.parametrize("name", ["", None, 42])
def test_invalid_registered_name(tmp_path, linear_model, name):
    path = tmp_path / "model.json"
    with pytest.warns(IOWarning, match="Invalid registered name"):
        assert mlstore.save_model(path, name, linear_model) is False
    assert not path.exists()


def test_unsupported_state_is_serialization_failure(tmp_path):
    path = tmp_path / "model.json"
    with pytest.raises(SerializationFailure) as exc_info:
        mlstore.save_model(path, "m", SetHolder(), fatal=True)
    assert isinstance(exc_info.value.__cause__, TypeError)
    assert not path.exists()


@pytest.mark.parametrize("text", ["a\x01b", "line\rbreak", "\x00"])
def test_xml_rejects_strings_it_cannot_store(tmp_path, linear_model, text):
    linear_model.name = text
    path = tmp_path / "model.xml"

    with pytest.warns(IOWarning, match="XML archives cannot store"):
        assert mlstore.save_model(path, "m", linear_model) is False
    assert not path.exists()

    # the same state is fine where the format can hold it
    json_path = tmp_path / "model.json"
    assert mlstore.save_model(json_path, "m", linear_model, fatal=True)


def test_xml_rejects_names_it_cannot_store(tmp_path, linear_model):
    path = tmp_path / "model.xml"
    with pytest.raises(SerializationFailure, match="XML archives cannot store"):
        mlstore.save_model(path, "a\x01b", linear_model, fatal=True)
    assert not path.exists()


def test_xml_keeps_tabs_newlines_and_non_ascii(tmp_path, linear_model):
    linear_model.name = "tab\there\nnew line é 𝜃"
    path = tmp_path / "model.xml"
    assert mlstore.save_model(path, "m", linear_model, fatal=True)
    assert mlstore.load_model(path, "m", fatal=True) == linear_model


def test_load_with_wrong_name(tmp_path, linear_model):
    path = tmp_path / "model.json"
    assert mlstore.save_model(path, "myModel", linear_model)

    with pytest.warns(IOWarning, match="No object named 'other'"):
        assert mlstore.load_model(path, "other") is None
    with pytest.raises(DecodingFailure):
        mlstore.load_model(path, "other", fatal=True)


def test_load_unregistered_tag(tmp_path):
    path = tmp_path / "model.json"
    assert mlstore.save_model(path, "m", Unregistered())
    with pytest.raises(DecodingFailure, match="unregistered model tag"):
        mlstore.load_model(path, "m", fatal=True)


def test_load_missing_file(tmp_path):
    with pytest.warns(IOWarning, match="no such file"):
        assert mlstore.load_model(tmp_path / "absent.json", "m") is None


def test_load_malformed_json(tmp_path):
    path = tmp_path / "model.json"
    path.write_text("{not json")
    with pytest.raises(DecodingFailure):
        mlstore.load_model(path, "m", fatal=True)


def test_bin_reader_refuses_globals(tmp_path):
    path = tmp_path / "model.bin"
    payload = pickle.dumps({"m": {"tag": "linear_model", "state": collections.OrderedDict()}})
    path.write_bytes(b"MLSTORE_BIN\n" + payload)

    with pytest.raises(DecodingFailure, match="Refusing to load global"):
        mlstore.load_model(path, "m", fatal=True)


def test_bin_reader_rejects_foreign_files(tmp_path):
    path = tmp_path / "model.bin"
    path.write_bytes(b"ARMA_MAT_BIN_FN008\n1 1\n" + bytes(8))
    with pytest.raises(DecodingFailure, match="not an mlstore binary archive"):
        mlstore.load_model(path, "m", fatal=True)


# ============================================================================
# Idempotence
# ============================================================================

@pytest.mark.parametrize("filename", ["model.json", "model.xml", "model.bin"])
def test_repeated_saves_are_byte_identical(tmp_path, linear_model, filename):
    path = tmp_path / filename
    assert mlstore.save_model(path, "m", linear_model)
    first = path.read_bytes()
    assert mlstore.save_model(path, "m", linear_model)
    assert path.read_bytes() == first
