"""
AI Reasoning Layer for SkillSync

Fetches free-text interview questions from an LLM provider:
- OpenAI chat completions when an OpenAI key is configured
- Gemini generateContent when only a Gemini key is configured
- Local fallback questions otherwise

Provider failures never reach the caller. They are logged and the
fallback question set is returned instead.

When Langfuse tracing is enabled, every generation is recorded as a
span whose output notes the provider used or the fallback reason.
"""

import logging

import httpx

from skillsync.config.settings import Settings, get_settings
from skillsync.prompts.interviewer import InterviewerPrompts

logger = logging.getLogger(__name__)


class AIReasoningLayer:
    """
    Central AI component used to seed interview sessions.

    Provider selection:
    - OpenAI: preferred when configured
    - Gemini: used when OpenAI is not configured
    - Fallback: static question set, no network

    Observability:
    - Optional Langfuse tracing of question generation
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        langfuse=None,
    ):
        """
        Initialize the AI layer.

        Args:
            settings: Application settings (defaults to cached settings)
            client: HTTP client to use, mainly for tests
            langfuse: Langfuse client; built from settings when omitted
        """
        self.settings = settings or get_settings()
        self.client = client or httpx.AsyncClient(timeout=self.settings.ai_timeout_seconds)
        self.prompts = InterviewerPrompts()

        # Langfuse for observability
        self.langfuse = langfuse if langfuse is not None else self._init_langfuse()

    def _init_langfuse(self):
        """Build a Langfuse client when tracing is enabled and configured."""
        if not self.settings.langfuse_enabled:
            return None

        if not (self.settings.langfuse_secret_key and self.settings.langfuse_public_key):
            logger.info("Langfuse keys not configured, tracing disabled")
            return None

        # Installed with the "tracing" extra
        from langfuse import Langfuse

        try:
            client = Langfuse(
                secret_key=self.settings.langfuse_secret_key,
                public_key=self.settings.langfuse_public_key,
                host=self.settings.langfuse_base_url,
            )
        except Exception as e:
            logger.warning(f"Failed to initialize Langfuse: {e}")
            return None

        logger.info("Langfuse initialized for LLM observability")
        return client

    @property
    def provider_name(self) -> str:
        if self.settings.openai_enabled:
            return "openai"
        if self.settings.gemini_enabled:
            return "gemini"
        return "fallback"

    @property
    def model_name(self) -> str | None:
        if self.provider_name == "openai":
            return self.settings.openai_model
        if self.provider_name == "gemini":
            return self.settings.gemini_model
        return None

    async def close(self):
        """Close the HTTP client and flush Langfuse."""
        await self.client.aclose()
        if self.langfuse:
            try:
                self.langfuse.flush()
            except Exception as e:
                logger.warning(f"Failed to flush Langfuse: {e}")

    # =========================================================================
    # TRACING
    # =========================================================================

    def _start_span(self, job_role: str, skills: list[str]):
        if not self.langfuse:
            return None
        try:
            return self.langfuse.start_span(
                name="generate_interview_questions",
                input={"job_role": job_role, "skills": skills},
                metadata={"provider": self.provider_name, "model": self.model_name},
            )
        except Exception as e:
            logger.warning(f"Langfuse span start failed: {e}")
            return None

    def _end_span(self, span, output: dict) -> None:
        if span is None:
            return
        try:
            span.update(output=output)
            span.end()
        except Exception as e:
            logger.warning(f"Langfuse span end failed: {e}")

    # =========================================================================
    # PROVIDER CALLS
    # =========================================================================

    async def _call_openai(self, job_role: str, skills: list[str]) -> str:
        """Call the OpenAI chat completions endpoint."""
        payload = {
            "model": self.settings.openai_model,
            "messages": [
                {"role": "system", "content": self.prompts.SYSTEM_CONTEXT},
                {"role": "user", "content": self.prompts.question_generation_prompt(job_role, skills)},
            ],
            "temperature": 0.7,
            "max_tokens": 1500,
        }

        response = await self.client.post(
            f"{self.settings.openai_base_url.rstrip('/')}/chat/completions",
            json=payload,
            headers={"Authorization": f"Bearer {self.settings.openai_api_key}"},
        )
        response.raise_for_status()

        result = response.json()
        return result["choices"][0]["message"]["content"]

    async def _call_gemini(self, job_role: str, skills: list[str]) -> str:
        """Call the Gemini generateContent endpoint."""
        payload = {
            "contents": [
                {"parts": [{"text": self.prompts.full_prompt(job_role, skills)}]}
            ],
        }

        response = await self.client.post(
            f"{self.settings.gemini_base_url.rstrip('/')}/models/"
            f"{self.settings.gemini_model}:generateContent",
            params={"key": self.settings.gemini_api_key},
            json=payload,
        )
        response.raise_for_status()

        return self._extract_gemini_text(response.json())

    def _extract_gemini_text(self, result: dict) -> str:
        """Join the text parts of the first Gemini candidate."""
        parts = result["candidates"][0]["content"]["parts"]
        return "".join(part.get("text", "") for part in parts if isinstance(part, dict))

    # =========================================================================
    # QUESTION GENERATION
    # =========================================================================

    async def generate_interview_questions(self, job_role: str, skills: list[str]) -> str:
        """
        Generate free-text interview questions for a role.

        Args:
            job_role: Target career role
            skills: Candidate's skills, used to personalize questions

        Returns:
            Raw question text, from the provider or the local fallback
        """
        provider = self.provider_name
        span = self._start_span(job_role, skills)

        if provider == "fallback":
            logger.info("No AI provider configured, using fallback interview questions")
            self._end_span(span, {"fallback_used": True, "reason": "no_provider"})
            return self.prompts.fallback_questions(job_role, skills)

        try:
            if provider == "openai":
                text = await self._call_openai(job_role, skills)
            else:
                text = await self._call_gemini(job_role, skills)
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"AI provider {provider} unavailable, using fallback questions: {e}")
            self._end_span(
                span,
                {"fallback_used": True, "reason": "provider_error", "error": str(e)},
            )
            return self.prompts.fallback_questions(job_role, skills)

        if not text or not text.strip():
            logger.warning(f"AI provider {provider} returned empty content, using fallback questions")
            self._end_span(span, {"fallback_used": True, "reason": "empty_content"})
            return self.prompts.fallback_questions(job_role, skills)

        self._end_span(
            span,
            {"fallback_used": False, "provider": provider, "characters": len(text)},
        )
        logger.info(f"Generated interview questions with {provider} for role: {job_role}")
        return text
