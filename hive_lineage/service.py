"""
Input decoding and result rendering around the extractor.

This module accepts either literal SQL text or a file's contents encoded as
Base64, decodes the latter, runs the extractor and renders the source-table
list (one name per line) or an error description. Decoding failures are
reported separately from SQL parse failures and never reach the extractor.
"""

import base64
import binascii
from typing import Optional

from hive_lineage.analyzer.lineage_parser import HiveLineageParser
from hive_lineage.exceptions import InputDecodingError, LineageError
from hive_lineage.models.config import LineageConfig

NO_INPUT_MESSAGE = "No input provided"
BASE64_ERROR_MESSAGE = "Failed to decode Base64 content"


def decode_file_content(file_content: str) -> str:
    """Decode Base64-encoded file contents to UTF-8 SQL text.

    Args:
        file_content: Base64 text.

    Returns:
        Decoded SQL text.

    Raises:
        InputDecodingError: If the content is not valid Base64 or does not
            decode to UTF-8 text.

    Example:
        >>> decode_file_content("c2VsZWN0ICogZnJvbSB0")
        'select * from t'
    """
    try:
        raw = base64.b64decode(file_content, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InputDecodingError(BASE64_ERROR_MESSAGE) from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputDecodingError(f"Failed to convert: {e}") from e


def resolve_input(
    input_text: Optional[str], file_content: Optional[str] = None
) -> str:
    """Pick the SQL text to analyze.

    Non-empty literal text wins over file contents.

    Raises:
        InputDecodingError: If there is no input or it cannot be decoded.
    """
    if input_text:
        return input_text
    if file_content is not None:
        return decode_file_content(file_content)
    raise InputDecodingError(NO_INPUT_MESSAGE)


def gen_all_source_table(
    input_text: Optional[str],
    file_content: Optional[str] = None,
    config: Optional[LineageConfig] = None,
) -> str:
    """Extract source tables and render them as text.

    Args:
        input_text: Literal SQL text; used when non-empty.
        file_content: Base64-encoded file contents, used otherwise.
        config: Optional LineageConfig.

    Returns:
        The source tables joined by newlines, or an error description:
        the decoding message for unusable input, ``"error: <message>"`` for
        extraction failures.

    Example:
        >>> gen_all_source_table("select * from test.a; select * from b")
        'test.a\\ndefault.b'
        >>> gen_all_source_table("", None)
        'No input provided'
    """
    try:
        sql = resolve_input(input_text, file_content)
    except InputDecodingError as e:
        return e.message

    parser = HiveLineageParser(config)
    try:
        parser.parse(sql)
    except LineageError as e:
        return f"error: {e}"
    return "\n".join(parser.get_table_names())
