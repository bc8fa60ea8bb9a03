# formatkit/codecs/builtins/cson_codec.py

import cson

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec


@builtin_codec
class CsonCodec(BaseCodec):
    """CoffeeScript Object Notation, indented with 2 spaces."""

    name = "cson"
    supports_reviver = True

    def encode(self, value):
        return cson.dumps(value, indent=2)

    def decode(self, text, reviver=None):
        return self.revive(cson.loads(text), reviver)
