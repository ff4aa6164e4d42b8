# domain/generation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedCompletion:
    """
    code が空文字列 = フェンス付きコードブロックが見つからなかった。
    例外ではなく、呼び出し側が明示的に扱う。
    """
    code: str
    explanation: str

    @property
    def has_code(self) -> bool:
        return self.code != ""


@dataclass(frozen=True)
class GeneratedTest:
    __test__ = False

    code: str
    # 空なら ArtifactStore がタイムスタンプ名を決める
    filename: str = ""
    explanation: Optional[str] = None
