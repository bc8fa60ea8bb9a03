# formatkit/codecs/builtins/json_codec.py

import json
import re

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec

# A string literal, a line comment or a block comment; strings are matched
# first so comment markers inside them survive.
_TOKENS = re.compile(r'"(?:\\.|[^"\\])*"|//[^\r\n]*|/\*.*?\*/', re.DOTALL)


def _blank(comment: str) -> str:
    return "".join(c if c in "\r\n" else " " for c in comment)


def strip_json_comments(text: str) -> str:
    """
    Replace `//` and `/* */` comments with whitespace.

    Line breaks inside comments are kept so parser error positions still
    point at the right line of the original text.
    """
    return _TOKENS.sub(lambda m: m.group(0) if m.group(0)[0] == '"' else _blank(m.group(0)), text)


@builtin_codec
class JsonCodec(BaseCodec):
    """JSON, pretty-printed with 4 spaces; comments are tolerated on decode."""

    name = "json"
    supports_reviver = True

    def encode(self, value):
        return json.dumps(value, indent=4, ensure_ascii=False)

    def decode(self, text, reviver=None):
        return self.revive(json.loads(strip_json_comments(text)), reviver)
