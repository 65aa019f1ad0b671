# app/infra/clients/gemini.py
from typing import Optional

import google.generativeai as genai

from app.core.config import settings


class GeminiClient:
    """Wrapper mínimo sobre google-generativeai: un prompt de texto -> texto."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_MODEL
        self.timeout_seconds = timeout_seconds or settings.GEMINI_TIMEOUT_SECONDS
        self._model = None

    def _get_model(self):
        if not self.api_key:
            raise RuntimeError("GEMINI_API_KEY not configured")
        if self._model is None:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.model_name)
        return self._model

    def generate(self, prompt: str) -> str:
        model = self._get_model()
        response = model.generate_content(
            prompt,
            request_options={"timeout": self.timeout_seconds},
        )
        if not response or not response.text:
            raise RuntimeError("Empty response from Gemini")
        return response.text
