# formatkit/codecs/builtins/yaml_codec.py

import yaml

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec


@builtin_codec
class YamlCodec(BaseCodec):
    """YAML restricted to the safe subset (no arbitrary object construction)."""

    name = "yaml"
    extensions = ("yml",)

    def encode(self, value):
        return yaml.safe_dump(value, default_flow_style=False, allow_unicode=True, sort_keys=False)

    def decode(self, text, reviver=None):
        return yaml.safe_load(text)
