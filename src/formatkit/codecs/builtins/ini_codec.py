# formatkit/codecs/builtins/ini_codec.py
"""
INI via `configparser`.

Shape mapping:
  - top-level scalars and lists are written before the first section
  - top-level mappings become `[section]`, nested mappings `[parent.child]`
  - lists become indexed keys `key[0]`, `key[1]`, ... and are regrouped on decode
  - list items that are themselves mappings or lists are written as JSON text
  - scalars decode as strings, except `true`/`false` (bool) and `null` (None)
  - keys the format cannot carry back (`=`, `:`, line breaks, a leading
    `[`, `;` or `#`, surrounding blanks, or a `name[n]` shape; `.`, `[` and
    `]` in section names) raise ValueError on encode

So `{"a": 1, "b": [2, 3]}` comes back as `{"a": "1", "b": ["2", "3"]}`.
"""

import configparser
import io
import json
import re
from collections.abc import Mapping

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec

# Holds the keys that sit above the first section header.
_ROOT = "formatkit:root"
# Keeps configparser from treating a user's [DEFAULT] section specially.
_NO_DEFAULT = "formatkit:default"

_INDEXED_KEY = re.compile(r"(?P<name>.+)\[(?P<index>\d+)\]")

_LITERALS = {"true": True, "false": False, "null": None}

_UNSAFE_OPTION = re.compile(r"[=:\r\n]|^[\[;#]|^\s|\s$")
_UNSAFE_SECTION = re.compile(r"[.\[\]\r\n]")


def _format_scalar(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _check_key(key, pattern: re.Pattern, kind: str) -> str:
    key = str(key)
    if not key or pattern.search(key):
        raise ValueError(f"INI {kind} name {key!r} cannot be written without changing its meaning")
    return key


def _parse_scalar(raw: str):
    return _LITERALS.get(raw, raw)


@builtin_codec
class IniCodec(BaseCodec):
    """INI files; lists and nesting are reshaped, scalars decode as strings."""

    name = "ini"

    def _parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None, default_section=_NO_DEFAULT)
        parser.optionxform = str
        return parser

    # --- encode ---

    def _flatten(self, node: Mapping, path: tuple, sections: dict) -> None:
        options: dict[str, str] = {}
        children: list[tuple] = []
        for key, value in node.items():
            if isinstance(value, Mapping):
                children.append((_check_key(key, _UNSAFE_SECTION, "section"), value))
                continue
            key = _check_key(key, _UNSAFE_OPTION, "key")
            if _INDEXED_KEY.fullmatch(key):
                raise ValueError(f"INI key name {key!r} would be read back as a list item")
            if isinstance(value, (list, tuple)):
                for index, item in enumerate(value):
                    options[f"{key}[{index}]"] = _format_scalar(item)
            else:
                options[key] = _format_scalar(value)

        name = ".".join(str(p) for p in path) if path else _ROOT
        if options or not children:
            sections[name] = options
        for key, value in children:
            self._flatten(value, path + (key,), sections)

    def encode(self, value):
        if not isinstance(value, Mapping):
            raise TypeError(f"INI documents encode mappings, not {type(value).__name__}")

        sections: dict[str, dict[str, str]] = {}
        self._flatten(value, (), sections)
        root = sections.pop(_ROOT, {})

        parser = self._parser()
        if root:
            parser.read_dict({_ROOT: root})
        parser.read_dict(sections)

        output = io.StringIO()
        parser.write(output)
        text = output.getvalue()
        header = f"[{_ROOT}]\n"
        if text.startswith(header):
            text = text[len(header):]
        return text.rstrip("\n") + "\n" if text.strip() else ""

    # --- decode ---

    def _section_values(self, items) -> dict:
        values: dict = {}
        indexed: dict[str, dict[int, object]] = {}
        for key, raw in items:
            match = _INDEXED_KEY.fullmatch(key)
            if match:
                name = match.group("name")
                indexed.setdefault(name, {})[int(match.group("index"))] = _parse_scalar(raw)
                values.setdefault(name, None)
            else:
                values[key] = _parse_scalar(raw)
        for name, items_by_index in indexed.items():
            values[name] = [items_by_index[i] for i in sorted(items_by_index)]
        return values

    def decode(self, text, reviver=None):
        parser = self._parser()
        parser.read_string(f"[{_ROOT}]\n{text}")

        result: dict = {}
        for section in parser.sections():
            target = result
            if section != _ROOT:
                for part in section.split("."):
                    child = target.setdefault(part, {})
                    if not isinstance(child, dict):
                        raise ValueError(f"INI section [{section}] conflicts with key '{part}'")
                    target = child
            target.update(self._section_values(parser.items(section, raw=True)))
        return result
