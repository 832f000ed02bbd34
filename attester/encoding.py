"""Hex rendering and parsing of attestations for display."""

import json
from pathlib import Path
from typing import Dict, Any, List, Tuple

from .attester import Attestation
from .commitment import HASH_ALGORITHM
from .errors import InvalidArgumentError

RECORD_FIELDS = ("value", "salt", "signature", "public_key")


def to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex."""
    return bytes(data).hex()


def from_hex(text: str, field: str = "value") -> bytes:
    """
    Decode a hex string, tolerating an optional ``0x`` prefix.

    Args:
        text: Hex string
        field: Field name used in error messages

    Returns:
        Decoded bytes

    Raises:
        InvalidArgumentError: If text is not valid hex
    """
    text = text.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise InvalidArgumentError(f"{field} is not valid hex: {e}") from e


def attestation_to_record(attestation: Attestation, public_key: bytes) -> Dict[str, Any]:
    """
    Build a hex-encoded attestation record.

    Args:
        attestation: Attestation to render
        public_key: Raw public key bytes of the attester

    Returns:
        Dictionary suitable for JSON output
    """
    return {
        "value": to_hex(attestation.value),
        "salt": to_hex(attestation.salt),
        "signature": to_hex(attestation.signature),
        "public_key": to_hex(public_key),
        "algorithm": "Ed25519",
        "hash": HASH_ALGORITHM,
    }


def record_to_attestation(record: Dict[str, Any]) -> Tuple[Attestation, bytes]:
    """
    Parse a hex-encoded attestation record.

    Args:
        record: Dictionary produced by attestation_to_record

    Returns:
        Tuple of (attestation, raw public key bytes)

    Raises:
        InvalidArgumentError: If a field is missing or not valid hex
    """
    if not isinstance(record, dict):
        raise InvalidArgumentError("Attestation record must be a JSON object")

    for field in RECORD_FIELDS:
        if not isinstance(record.get(field), str):
            raise InvalidArgumentError(f"Attestation record missing '{field}' field")

    attestation = Attestation(
        value=from_hex(record["value"], "value"),
        salt=from_hex(record["salt"], "salt"),
        signature=from_hex(record["signature"], "signature"),
    )
    return attestation, from_hex(record["public_key"], "public_key")


def load_records(input_path: str) -> List[Tuple[Attestation, bytes]]:
    """
    Load attestation records from a JSON file.

    Accepts either a single record or the document written by
    ``rng-attester run --json``, whose entries may omit ``public_key`` in
    favour of the top-level one.

    Args:
        input_path: Path to JSON file

    Returns:
        List of (attestation, raw public key bytes) tuples

    Raises:
        InvalidArgumentError: If the file cannot be read or parsed
    """
    try:
        data = json.loads(Path(input_path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Invalid JSON in attestation record: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidArgumentError(f"Attestation record is not UTF-8 text: {e}") from e
    except OSError as e:
        raise InvalidArgumentError(f"Cannot read attestation record: {e}") from e

    if isinstance(data, dict) and "attestations" in data:
        entries = data["attestations"]
        if not isinstance(entries, list) or not entries:
            raise InvalidArgumentError("'attestations' must be a non-empty list")

        records = []
        for entry in entries:
            if isinstance(entry, dict) and "public_key" not in entry:
                entry = {**entry, "public_key": data.get("public_key")}
            records.append(record_to_attestation(entry))
        return records

    return [record_to_attestation(data)]
