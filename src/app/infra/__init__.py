"""Implementações concretas de IO (OpenAI, SendGrid, Google, stores)."""
