"""CodecConfig: output options shared by the encoders.

CodecConfig is a frozen (immutable) dataclass.  It only affects encoding;
decoding is fully determined by the input text.  JSON indentation is fixed
at two spaces and deliberately not configurable.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CodecConfig"]


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable encoder options.

    Attributes:
        sort_keys: Sort mapping keys on JSON and YAML output.  TOML output
            keeps insertion order (tomli-w has no sorting option).
            Default False.
        allow_unicode: Emit non-ASCII characters as-is.  When False, JSON
            escapes them as ``\\uXXXX`` and YAML quotes and escapes them.
            Default True.
        yaml_width: Preferred YAML line width (>= 20).  Default 80.
        yaml_indent: YAML block indentation in [2, 9].  Default 2.
    """

    sort_keys: bool = False
    allow_unicode: bool = True
    yaml_width: int = 80
    yaml_indent: int = 2

    def __post_init__(self) -> None:
        if self.yaml_width < 20:
            msg = f"yaml_width must be >= 20, got {self.yaml_width}"
            raise ValueError(msg)
        if not 2 <= self.yaml_indent <= 9:
            msg = f"yaml_indent must be in [2, 9], got {self.yaml_indent}"
            raise ValueError(msg)
