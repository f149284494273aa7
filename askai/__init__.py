"""Ask-AI backend -- fan one prompt out to many LLM providers and collect the answers."""

__version__ = "0.3.0"
