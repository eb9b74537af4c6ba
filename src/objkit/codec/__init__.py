from objkit.codec.errors import CodecError, EncodeError, ParseError
from objkit.codec.json_codec import decode, encode
from objkit.codec.record import CapabilitySet, Record

__all__ = [
    "CapabilitySet",
    "CodecError",
    "EncodeError",
    "ParseError",
    "Record",
    "decode",
    "encode",
]
