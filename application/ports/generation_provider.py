# application/ports/generation_provider.py
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.prompt import Prompt


class GenerationProviderPort(ABC):
    name: str = "unknown"

    @abstractmethod
    def generate(self, prompt: Prompt) -> str:
        """
        Send the prompt to the backend and return the completion text.

        Raises ConfigurationError when a credential or endpoint is missing
        (nothing is sent), ProviderError on a non-2xx response, a transport
        failure or an unexpected envelope.
        """
        ...
