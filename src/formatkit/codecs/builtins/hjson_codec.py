# formatkit/codecs/builtins/hjson_codec.py

import hjson

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec


@builtin_codec
class HjsonCodec(BaseCodec):
    """Human JSON via the `hjson` package."""

    name = "hjson"
    supports_reviver = True

    def encode(self, value):
        return hjson.dumps(value)

    def decode(self, text, reviver=None):
        # hjson hands back OrderedDicts by default
        return self.revive(hjson.loads(text, object_pairs_hook=dict), reviver)
