"""Infrastructure layer: Gemini adapter, fake adapter, retry, prompt fragments."""
