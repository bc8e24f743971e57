"""Public API surface for devtool.processing."""
__all__ = [
    "case_ops",
    "encoding_ops",
    "envctx",
    "identifiers",
    "reformat",
    "version_bump",
]
