"""Client package exports for external provider integrations."""

from .gemini_client import build_gemini_http_client, build_generation_payload, post_generate_content

__all__ = ["build_gemini_http_client", "build_generation_payload", "post_generate_content"]
