"""
Error taxonomy for mlstore.

Resolution errors are detected before any file is opened. Encoding, serialization and
decoding errors come from the format plug-ins and may leave a partial file behind.
"""


class MlstoreError(RuntimeError):
    """Base class for every failure reported by mlstore."""


class ResolutionError(MlstoreError):
    """The file type could not be determined for a filename/payload pair."""


class UnknownExtension(ResolutionError):
    """No file type of the active family is known for the filename's extension."""


class UnsupportedForPayloadKind(ResolutionError):
    """The file type exists but cannot hold this kind of payload."""


class EncodingFailure(MlstoreError):
    """A matrix encoder failed while writing."""


class SerializationFailure(MlstoreError):
    """A model could not be reduced to an archive entry, or the archive write failed."""


class DecodingFailure(MlstoreError):
    """A file could not be read back into a matrix or model."""


class IOWarning(UserWarning):
    """Category used for non-fatal save/load failures."""
