# formatkit/codecs/builtins/json5_codec.py

import json5

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec


@builtin_codec
class Json5Codec(BaseCodec):
    """JSON5 via the `json5` package, indented with 4 spaces."""

    name = "json5"
    supports_reviver = True

    def encode(self, value):
        return json5.dumps(value, indent=4)

    def decode(self, text, reviver=None):
        return self.revive(json5.loads(text), reviver)
