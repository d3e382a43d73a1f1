#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markup2md/utils/encoding.py
"""Character encoding detection for markup given as bytes.

Ticket descriptions exported from the tracker and files read by the command
line tool arrive as bytes. chardet is tried first, then a list of fallback
encodings.
"""

from __future__ import annotations

import logging
from typing import IO, Any

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or confidence is
        below the threshold

    """
    import chardet

    sample = data[:sample_size] if len(data) > sample_size else data
    result = chardet.detect(sample)

    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0

    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence >= confidence_threshold:
        return encoding

    logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
    return None


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | None = None,
    use_chardet: bool = True,
) -> str:
    """Read binary data as text with automatic encoding detection.

    Attempts to decode binary data using:
    1. chardet-based detection (if enabled)
    2. Fallback encodings in order
    3. Final fallback with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list[str] | None, default None
        List of encodings to try in order. If None, uses
        ['utf-8', 'utf-8-sig', 'latin-1']
    use_chardet : bool, default True
        Whether to attempt chardet-based detection first

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection(b"h1. Title\\n")
    'h1. Title\\n'

    """
    if fallback_encodings is None:
        fallback_encodings = ["utf-8", "utf-8-sig", "latin-1"]

    if use_chardet and data:
        detected_encoding = detect_encoding(data)
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug(f"Failed to decode with chardet-detected encoding {detected_encoding}: {e}")

    for encoding in fallback_encodings:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
            continue
        except LookupError as e:
            logger.debug(f"Unknown encoding {encoding}: {e}")
            continue

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(stream: IO[Any]) -> str:
    """Read a binary or text stream fully and return its text.

    Parameters
    ----------
    stream : IO
        File-like object opened in binary or text mode

    Returns
    -------
    str
        Stream content as text

    """
    content = stream.read()
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content)
    return content
