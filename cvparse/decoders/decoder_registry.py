"""
Decoder registry keyed by MIME type.

Lets callers plug in extra formats or replace a built-in decoder without
touching the orchestrator.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from .base import DocumentDecoder


# Global decoder registry
_DECODER_REGISTRY: Dict[str, Type[DocumentDecoder]] = {}


def normalize_mime_type(mime_type: str) -> str:
    """Lower-case a MIME type and drop parameters such as ``; charset=utf-8``."""
    return (mime_type or "").split(";", 1)[0].strip().lower()


def register_decoder(mime_type: str, decoder_class: Type[DocumentDecoder]) -> None:
    """
    Register a decoder class for a MIME type.

    Args:
        mime_type: The MIME type handled (e.g., "application/pdf")
        decoder_class: The decoder class to register
    """
    _DECODER_REGISTRY[normalize_mime_type(mime_type)] = decoder_class


def get_decoder(mime_type: str, **kwargs) -> Optional[DocumentDecoder]:
    """
    Get a decoder instance for a MIME type.

    Args:
        mime_type: Declared MIME type of the document
        **kwargs: Arguments to pass to the decoder constructor

    Returns:
        Decoder instance, or None if the type is not supported
    """
    decoder_class = _DECODER_REGISTRY.get(normalize_mime_type(mime_type))
    if decoder_class:
        return decoder_class(**kwargs)
    return None


def is_supported(mime_type: str) -> bool:
    return normalize_mime_type(mime_type) in _DECODER_REGISTRY


def list_decoders() -> List[Dict[str, str]]:
    """
    List all registered decoders with their descriptions.

    Returns:
        List of dicts with 'mime_type', 'name' and 'description' keys
    """
    decoders = []
    for mime_type, decoder_class in _DECODER_REGISTRY.items():
        description = decoder_class.__doc__ or "No description available"
        description = description.strip().split('\n')[0]
        decoders.append({
            'mime_type': mime_type,
            'name': decoder_class.__name__,
            'description': description,
        })
    return sorted(decoders, key=lambda x: x['mime_type'])


def unregister_decoder(mime_type: str) -> None:
    """
    Unregister the decoder for a MIME type.

    Args:
        mime_type: The MIME type to unregister
    """
    _DECODER_REGISTRY.pop(normalize_mime_type(mime_type), None)


__all__ = [
    "normalize_mime_type",
    "register_decoder",
    "get_decoder",
    "is_supported",
    "list_decoders",
    "unregister_decoder",
]
