from app.infra.llm.base import BaseLLMClient, LangChainLLMClient
from app.infra.llm.client import generate_summary_text
from app.infra.llm.factory import LLMProvider, create_client, resolve_provider
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient
from app.infra.llm.openrouter_client import OpenRouterClient

__all__ = [
    "BaseLLMClient",
    "LangChainLLMClient",
    "OpenAIClient",
    "OpenRouterClient",
    "GeminiClient",
    "LLMProvider",
    "create_client",
    "resolve_provider",
    "generate_summary_text",
]
