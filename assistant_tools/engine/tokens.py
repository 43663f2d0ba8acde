"""Token counting for prompt budget checks.

Encoders are loaded lazily; tiktoken may fetch encoding data on first use,
so nothing in the assembly path proper calls into this module.
"""

import tiktoken

_encoders: dict[str, tiktoken.Encoding] = {}


def get_encoder(encoding_name: str = "cl100k_base") -> tiktoken.Encoding:
    """Get or create the tiktoken encoder for an encoding name."""
    encoder = _encoders.get(encoding_name)
    if encoder is None:
        encoder = tiktoken.get_encoding(encoding_name)
        _encoders[encoding_name] = encoder
    return encoder


def count_tokens(text: str, encoding_name: str = "cl100k_base") -> int:
    """Count tokens in text.

    Args:
        text: Text to count tokens for
        encoding_name: tiktoken encoding to count with

    Returns:
        Number of tokens in the text
    """
    if not text:
        return 0
    return len(get_encoder(encoding_name).encode(text))
