"""codeprobs-cli - companion client for the codeprobs practice site."""

__version__ = "0.1.0"
