# application/services/prompt_compiler.py
from __future__ import annotations

from typing import List, Optional

from domain.prompt import Prompt
from domain.scenario import Scenario, ScenarioOptions

SYSTEM_PROMPT = """You are an expert in end-to-end testing with Playwright.
Generate a Playwright test based on the test scenario provided by the user.

Follow these guidelines:

1. Write the test in TypeScript and follow current Playwright best practices.
2. The test must be runnable and free of errors.
3. Include appropriate assertions.
4. Comment each step to explain its purpose.
5. Return the test code in exactly one block of the following form:

```typescript
// test code goes here
```

6. After the code block, explain the code in prose.

Notes:
- If no URL is given, comment out the part of the test that navigates to a URL.
- If options such as browser type, headless mode or screenshots are given, follow them.
- Otherwise use the defaults (chromium, headless mode enabled, screenshots disabled).
"""

USER_INTRO = "Generate a Playwright test based on the following test scenario:"


def _on_off(flag: bool) -> str:
    return "enabled" if flag else "disabled"


class PromptCompiler:
    """
    Scenario -> Prompt の純粋変換。
    同じ入力からは常にバイト単位で同一の出力を返す。
    """

    def __init__(self, system_prompt: str = SYSTEM_PROMPT):
        self._system = system_prompt

    def compile(self, scenario: Scenario, default_base_url: Optional[str] = None) -> Prompt:
        user = f"{USER_INTRO}\n\n{scenario.description}\n\n"

        target_url = scenario.url or default_base_url
        if target_url:
            user += f"Target URL: {target_url}\n\n"

        option_lines = self._option_lines(scenario.options)
        if option_lines:
            user += "Test options:\n"
            user += "".join(f"- {line}\n" for line in option_lines)

        return Prompt(system=self._system, user=user)

    def _option_lines(self, options: Optional[ScenarioOptions]) -> List[str]:
        if options is None:
            return []
        # 順序固定: browser, headless, screenshot, timeout
        lines: List[str] = []
        if options.browser is not None:
            lines.append(f"browser: {options.browser}")
        if options.headless is not None:
            lines.append(f"headless: {_on_off(options.headless)}")
        if options.screenshot is not None:
            lines.append(f"screenshot: {_on_off(options.screenshot)}")
        if options.timeout is not None:
            lines.append(f"timeout: {options.timeout}ms")
        return lines
