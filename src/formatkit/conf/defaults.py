"""Default configuration values for formatkit."""

# Prefix of environment variables and settings-module names
NAMESPACE = "FORMATKIT"

# Environment variable naming an importable settings module
SETTINGS_MODULE_ENVVAR = "FORMATKIT_SETTINGS_MODULE"

BUILTIN_FORMATS: tuple[str, ...] = (
    "cson",
    "csv",
    "hjson",
    "ini",
    "json",
    "json5",
    "xls",
    "xlsx",
    "xml",
    "yaml",
)

DEFAULTS: dict[str, object] = {
    # Codecs registered in the default registry
    "FORMATS": BUILTIN_FORMATS,
    # Raise instead of ignoring a reviver passed to a codec without a hook
    "STRICT_REVIVER": False,
    # Codec-level knobs
    "XML_ROOT_TAG": "formatkit",
    "CSV_DIALECT": "excel",
    "SHEET_NAME": "Sheet1",
}
