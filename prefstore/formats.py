"""
Dispatches between the supported storage formats.

Each format maps to one codec, a pair of pure functions converting between a
plain Python structure and bytes. The actual encoding is left to the format's
own library; this module only chooses the codec and turns every failure into a
``FormatError``.
"""

from __future__ import annotations

import io
import json
import yaml
import pickle
import logging
import tomli_w
import tomllib
import configparser
from collections.abc import Mapping
from typing import Any, Callable, Dict, NamedTuple
from prefstore.models import Format
from prefstore.errors import FormatError
from prefstore.constants import INI_ROOT_SECTION

logger = logging.getLogger(__name__)

# never written, so sections do not inherit anything
_INI_DEFAULTS_SECTION = "__prefstore_defaults__"

class Codec(NamedTuple):
    encode: Callable[[Any], bytes]
    decode: Callable[[bytes], Any]

def _encode_json(value: Any) -> bytes:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")

def _decode_json(data: bytes) -> Any:
    return json.loads(data.decode("utf-8"))

def _encode_yaml(value: Any) -> bytes:
    return yaml.safe_dump(value, allow_unicode=True, sort_keys=False).encode("utf-8")

def _decode_yaml(data: bytes) -> Any:
    return yaml.safe_load(data.decode("utf-8"))

def _encode_toml(value: Any) -> bytes:
    if not isinstance(value, Mapping):
        raise TypeError(f"top-level value must be a table, got {type(value).__name__}")
    return tomli_w.dumps(value).encode("utf-8")

def _decode_toml(data: bytes) -> Any:
    return tomllib.loads(data.decode("utf-8"))

def _new_ini_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, default_section=_INI_DEFAULTS_SECTION)
    # keep key case as written
    parser.optionxform = str
    return parser

def _ini_scalar(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"value of {key!r} cannot be stored in an INI file ({type(value).__name__})")

def _encode_ini(value: Any) -> bytes:
    if not isinstance(value, Mapping):
        raise TypeError(f"top-level value must be a mapping, got {type(value).__name__}")

    parser = _new_ini_parser()
    root: Dict[str, str] = {}
    sections: Dict[str, Dict[str, str]] = {}

    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeError(f"keys must be strings, got {key!r}")
        if isinstance(item, Mapping):
            if key == INI_ROOT_SECTION:
                raise TypeError(f"section name {INI_ROOT_SECTION!r} is reserved")
            section: Dict[str, str] = {}
            for sub_key, sub_item in item.items():
                if not isinstance(sub_key, str):
                    raise TypeError(f"keys must be strings, got {sub_key!r}")
                section[sub_key] = _ini_scalar(f"{key}.{sub_key}", sub_item)
            sections[key] = section
        else:
            root[key] = _ini_scalar(key, item)

    if root:
        parser[INI_ROOT_SECTION] = root
    for name, section in sections.items():
        parser[name] = section

    buffer = io.StringIO()
    parser.write(buffer)
    return buffer.getvalue().encode("utf-8")

def _decode_ini(data: bytes) -> Any:
    parser = _new_ini_parser()
    parser.read_string(data.decode("utf-8"))

    result: Dict[str, Any] = {}
    for name in parser.sections():
        items = dict(parser.items(name))
        if name == INI_ROOT_SECTION:
            result.update(items)
        else:
            result[name] = items
    return result

def _encode_pickle(value: Any) -> bytes:
    return pickle.dumps(value)

def _decode_pickle(data: bytes) -> Any:
    # only load pickles this application wrote itself
    return pickle.loads(data)

CODECS: Dict[Format, Codec] = {
    Format.JSON: Codec(_encode_json, _decode_json),
    Format.YAML: Codec(_encode_yaml, _decode_yaml),
    Format.TOML: Codec(_encode_toml, _decode_toml),
    Format.INI: Codec(_encode_ini, _decode_ini),
    Format.PICKLE: Codec(_encode_pickle, _decode_pickle),
}

def extension_for(fmt: Format) -> str:
    return fmt.extension

def serialize(fmt: Format, value: Any) -> bytes:
    """
    Encodes a plain structure into the byte representation of the given format.
    """
    try:
        return CODECS[fmt].encode(value)
    except Exception as exc:
        logger.warning("Encoding %s failed: %s", fmt.label, exc)
        raise FormatError(fmt.label, f"cannot encode value: {exc}") from exc

def deserialize(fmt: Format, data: bytes) -> Any:
    """
    Decodes bytes written in the given format back into a plain structure.
    """
    try:
        return CODECS[fmt].decode(data)
    except Exception as exc:
        logger.warning("Decoding %s failed: %s", fmt.label, exc)
        raise FormatError(fmt.label, f"cannot decode data: {exc}") from exc
