"""sitechat - a small website assistant chat widget powered by Gemini."""

__version__ = "0.1.0"
