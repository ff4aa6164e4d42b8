# application/services/completion_parser.py
from __future__ import annotations

import re

from domain.generation import ParsedCompletion

FENCE_LANGUAGE = "typescript"


class CompletionParser:
    """
    Split a completion into the first fenced code block and the surrounding prose.

    - Only the first block tagged with the target language counts as code;
      any later block stays inside the explanation untouched.
    - No block at all gives code == "" (never an exception).
    """

    def __init__(self, language: str = FENCE_LANGUAGE):
        self._pattern = re.compile(r"```" + re.escape(language) + r"\n([\s\S]*?)```")

    def parse(self, text: str) -> ParsedCompletion:
        text = text or ""
        m = self._pattern.search(text)
        if m is None:
            return ParsedCompletion(code="", explanation=text.strip())

        code = m.group(1)
        explanation = (text[: m.start()] + text[m.end():]).strip()
        return ParsedCompletion(code=code, explanation=explanation)
