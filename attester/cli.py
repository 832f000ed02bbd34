"""Command-line interface for attested random values."""

import json
import logging
import sys

import click

from . import __version__
from .attester import Attestation, RngAttester, VerificationResult
from .config import AttesterConfig, load_config, load_default_config
from .encoding import attestation_to_record, from_hex, load_records, to_hex
from .errors import AttesterError, ConfigError, InvalidArgumentError, KeyGenerationError
from .random_source import generate as generate_random


def _load_config(config_path, length=None, count=None, output_format=None) -> AttesterConfig:
    """Resolve configuration: CLI > environment > file > defaults."""
    try:
        if config_path:
            attester_config = load_config(config_path)
        else:
            attester_config = load_default_config()
        attester_config = attester_config.apply_environment_overrides()
        return attester_config.merge_with_cli_args(
            length=length, count=count, output_format=output_format
        )
    except (FileNotFoundError, ConfigError) as e:
        click.echo(f"❌ Config error: {e}", err=True)
        sys.exit(1)


def _report_verification(result: VerificationResult) -> None:
    if result:
        click.echo("Verification Result: SUCCESS!")
        click.echo("The random value and salt are authentic.")
    else:
        click.echo("Verification Result: FAILED!", err=True)
        click.echo(f"Reason: {result.reason}", err=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose):
    """Generate and verify cryptographically attested random values."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@main.command()
@click.option("--length", type=int, help="Random value length in bytes (default: 32)")
@click.option("--count", type=int, help="Number of values to attest (default: 1)")
@click.option("--json", "as_json", is_flag=True, help="Emit attestations as JSON")
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Configuration file (YAML). Defaults to .attester/config.yaml if present.",
)
def run(length, count, as_json, config):
    """Generate, attest and verify random values."""
    attester_config = _load_config(
        config, length=length, count=count, output_format="json" if as_json else None
    )
    json_output = attester_config.output_format == "json"
    echo = (lambda *args, **kwargs: None) if json_output else click.echo

    echo("Starting RNG attester...")
    try:
        attester = RngAttester()
    except KeyGenerationError as e:
        click.echo(f"❌ Failed to initialize attester: {e}", err=True)
        sys.exit(2)
    echo("Attester initialized and key pair generated.")

    public_key = attester.public_key_bytes()
    echo(f"Attester's Public Key (hex): {to_hex(public_key)}")

    records = []
    failed = False
    for _ in range(attester_config.run_count):
        try:
            value = generate_random(attester_config.random_length)
            attestation = attester.attest(value)
        except AttesterError as e:
            click.echo(f"❌ Attestation failed: {e}", err=True)
            sys.exit(1)

        echo(f"\nGenerated Random Value (hex): {to_hex(attestation.value)}")
        echo(f"Generated Salt (hex): {to_hex(attestation.salt)}")
        echo(f"Generated Signature (hex): {to_hex(attestation.signature)}")

        echo("\nVerifying attestation...")
        result = RngAttester.verify(attester.public_key(), *attestation)
        if not json_output:
            _report_verification(result)

        record = attestation_to_record(attestation, public_key)
        record["verified"] = result.valid
        if result.reason:
            record["reason"] = result.reason
        records.append(record)
        failed = failed or not result

    if json_output:
        output = {"public_key": to_hex(public_key), "attestations": records}
        click.echo(json.dumps(output, indent=2))

    if failed:
        sys.exit(1)
    echo("\n✅ RNG attester finished successfully.")


@main.command()
@click.option("--length", type=int, help="Random value length in bytes (default: 32)")
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Configuration file (YAML). Defaults to .attester/config.yaml if present.",
)
def generate(length, config):
    """Print a random value in hex."""
    attester_config = _load_config(config, length=length)
    try:
        value = generate_random(attester_config.random_length)
    except AttesterError as e:
        click.echo(f"❌ Failed to generate random value: {e}", err=True)
        sys.exit(1)
    click.echo(to_hex(value))


@main.command()
@click.option(
    "--record",
    type=click.Path(exists=True),
    help="Attestation record or run --json output (JSON)",
)
@click.option("--public-key", help="Attester public key (hex)")
@click.option("--value", help="Random value (hex)")
@click.option("--salt", help="Salt (hex)")
@click.option("--signature", help="Signature (hex)")
def verify(record, public_key, value, salt, signature):
    """Verify an attestation against a public key."""
    try:
        if record:
            entries = load_records(record)
        else:
            missing = [
                name
                for name, given in (
                    ("--public-key", public_key),
                    ("--value", value),
                    ("--salt", salt),
                    ("--signature", signature),
                )
                if not given
            ]
            if missing:
                click.echo(f"❌ Missing options: {', '.join(missing)}", err=True)
                sys.exit(2)
            entries = [
                (
                    Attestation(
                        value=from_hex(value, "value"),
                        salt=from_hex(salt, "salt"),
                        signature=from_hex(signature, "signature"),
                    ),
                    from_hex(public_key, "public_key"),
                )
            ]
    except InvalidArgumentError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(2)

    failed = False
    for index, (attestation, key_bytes) in enumerate(entries):
        if len(entries) > 1:
            click.echo(f"\nAttestation {index}:")
        result = RngAttester.verify(key_bytes, *attestation)
        _report_verification(result)
        failed = failed or not result

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
