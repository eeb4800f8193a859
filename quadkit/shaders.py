"""Shader source preprocessing: resolution of #include directives."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["PreprocessorConfig", "preprocess_shader"]

_DIRECTIVE = "#include"


@dataclass
class PreprocessorConfig:
    """Named include files that #include directives may refer to."""

    includes: list[tuple[str, str]] = field(default_factory=list)

    def lookup(self, filename: str) -> str:
        """Return the content of the include called filename."""
        for name, content in self.includes:
            if name == filename:
                return content
        raise ValueError(f'Include file {filename} is not on "includes" list')


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every `#include "name"` directive with the named include's content."""
    result = source
    position = 0
    while True:
        start = result.find(_DIRECTIVE, position)
        if start < 0:
            return result
        cursor = start + len(_DIRECTIVE)
        while cursor < len(result) and result[cursor] == " ":
            cursor += 1
        if cursor >= len(result) or result[cursor] != '"':
            raise ValueError(f"expected '\"' after {_DIRECTIVE} at offset {start}")
        name_start = cursor + 1
        name_end = result.find('"', name_start)
        if name_end < 0:
            raise ValueError(f"unterminated include file name at offset {start}")
        content = config.lookup(result[name_start:name_end])
        result = result[:start] + content + result[name_end + 1 :]
        position = start + len(content)