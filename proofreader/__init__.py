"""
Proofreader

Streaming schema validator for compressed, delimited text records. Each
field is checked against a declared per-column type format and deviations
are reported without halting the stream.
"""

__version__ = "1.0.0"
