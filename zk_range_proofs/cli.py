"""
Command-Line Interface for zk_range_proofs

Provides commands to inspect group parameters, create and verify range
proofs, and run the business-scenario demonstration.
"""

import sys
import time
from pathlib import Path
from typing import Optional

import click

from zk_range_proofs import __version__, print_disclaimer
from zk_range_proofs.zk_engine import (
    OutOfRangeError,
    Proof,
    ZKApplications,
    ZKProofEngine,
)
from zk_range_proofs.zk_engine.config import SECONDS_PER_YEAR
from zk_range_proofs.zk_engine.exceptions import (
    ConfigurationError,
    SerializationError,
)


def _load_engine(params_file: Optional[str]) -> ZKProofEngine:
    try:
        return ZKProofEngine.from_config(params_file)
    except ConfigurationError as e:
        raise click.ClickException(f"Invalid parameters: {e}") from e


_PARAMS_OPTION = click.option(
    '--params-file',
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file with group parameters (default: $ZK_PROOF_PARAMS_FILE or built-in)'
)

# Lets negative bounds like -20 through as arguments
_NUMERIC_ARGS = {"ignore_unknown_options": True}

_FORMAT_OPTION = click.option(
    '--format',
    'fmt',
    type=click.Choice(['json', 'cbor'], case_sensitive=False),
    default='json',
    help='Proof encoding (default: json)'
)


@click.group()
@click.version_option(version=__version__)
def main():
    """
    zk_range_proofs - prove numeric facts without revealing the value.

    ⚠️  PROTOTYPE - NOT AUDITED
    """
    pass


@main.command()
@_PARAMS_OPTION
def params(params_file):
    """Show the active group parameters."""
    engine = _load_engine(params_file)
    p = engine.parameters

    click.echo(click.style("Group parameters", fg="cyan", bold=True))
    click.echo(f"  generator: {p.generator}")
    click.echo(f"  modulus:   {p.modulus}")
    click.echo(f"  bits:      {p.modulus.bit_length()}")


@main.command('prove-range', context_settings=_NUMERIC_ARGS)
@click.argument('value', type=int)
@click.argument('lower', type=int)
@click.argument('upper', type=int)
@_PARAMS_OPTION
@_FORMAT_OPTION
@click.option(
    '--output',
    type=click.Path(dir_okay=False),
    help='Write the proof to this file (required for cbor)'
)
def prove_range(value, lower, upper, params_file, fmt, output):
    """
    Create a proof that VALUE lies in [LOWER, UPPER].

    Examples:

        # Print a JSON proof
        zk-range-proofs prove-range 75000 50000 100000

        # Write a CBOR proof
        zk-range-proofs prove-range 75000 50000 100000 --format cbor --output p.cbor
    """
    fmt = fmt.lower()
    if fmt == 'cbor' and not output:
        raise click.UsageError("--output is required for cbor format")

    engine = _load_engine(params_file)
    result = engine.try_create_range_proof(value, lower, upper)
    if not result.ok:
        click.echo(click.style(f"✗ {result.error}", fg="red"), err=True)
        sys.exit(1)

    proof = result.proof
    if fmt == 'cbor':
        Path(output).write_bytes(proof.serialize())
    elif output:
        Path(output).write_text(proof.to_json() + "\n", encoding="utf-8")
    else:
        click.echo(proof.to_json())
        return

    click.echo(click.style(f"✓ Proof written to {output}", fg="green"), err=True)


@main.command('verify-range', context_settings=_NUMERIC_ARGS)
@click.argument('proof_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('lower', type=int)
@click.argument('upper', type=int)
@_PARAMS_OPTION
@_FORMAT_OPTION
def verify_range(proof_file, lower, upper, params_file, fmt):
    """
    Verify a range proof stored in PROOF_FILE against [LOWER, UPPER].

    Exits 0 when the proof is valid and 1 otherwise.
    """
    engine = _load_engine(params_file)
    path = Path(proof_file)

    try:
        if fmt.lower() == 'cbor':
            proof = Proof.deserialize(path.read_bytes())
        else:
            proof = Proof.from_json(path.read_text(encoding="utf-8"))
    except (SerializationError, UnicodeDecodeError) as e:
        click.echo(click.style(f"✗ Malformed proof: {e}", fg="red"), err=True)
        sys.exit(1)

    if engine.verify_range_proof(proof, lower, upper):
        click.echo(click.style("✓ Proof is valid", fg="green"))
    else:
        click.echo(click.style("✗ Proof is invalid", fg="red"))
        sys.exit(1)


@main.command()
@_PARAMS_OPTION
def demo(params_file):
    """
    Run the business scenarios: salary, age, credit score, funds.

    Each scenario creates one proof that should verify and attempts one
    claim that should be refused at creation time.
    """
    apps = ZKApplications(engine=_load_engine(params_file))
    now = int(time.time())
    year = SECONDS_PER_YEAR

    click.echo("\n" + "=" * 70)
    click.echo(click.style("Zero-Knowledge Range Proof Demonstrations", fg="cyan", bold=True))
    click.echo("=" * 70)

    scenarios = [
        (
            "Salary 75000 in [50000, 100000]",
            lambda: apps.verify_salary_proof(
                apps.create_salary_proof(75000, 50000, 100000)
            ),
        ),
        (
            "Salary 40000 in [50000, 100000]",
            lambda: apps.verify_salary_proof(
                apps.create_salary_proof(40000, 50000, 100000)
            ),
        ),
        (
            "Birth 17 years ago, 18-year window",
            lambda: apps.verify_age_proof(
                apps.create_age_proof(now - 17 * year, 18)
            ),
        ),
        (
            "Birth 21 years ago, 18-year window",
            lambda: apps.verify_age_proof(
                apps.create_age_proof(now - 21 * year, 18)
            ),
        ),
        (
            "Credit score 750 >= 700",
            lambda: apps.verify_credit_score_proof(
                apps.create_credit_score_proof(750, 700, "Experian")
            ),
        ),
        (
            "Credit score 650 >= 700",
            lambda: apps.verify_credit_score_proof(
                apps.create_credit_score_proof(650, 700, "Experian")
            ),
        ),
        (
            "Balance 100000 >= 50000",
            lambda: apps.verify_proof_of_funds(
                apps.create_proof_of_funds(100000, 50000), 50000
            ),
        ),
        (
            "Balance 40000 >= 50000",
            lambda: apps.verify_proof_of_funds(
                apps.create_proof_of_funds(40000, 50000), 50000
            ),
        ),
    ]

    for label, run in scenarios:
        try:
            verified = run()
        except OutOfRangeError:
            click.echo(f"  {label:<40} " + click.style("refused (out of range)", fg="yellow"))
            continue
        status = click.style("verified", fg="green") if verified else click.style("REJECTED", fg="red")
        click.echo(f"  {label:<40} {status}")

    click.echo("=" * 70 + "\n")


@main.command()
def version():
    """Show version and disclaimer information."""
    click.echo(f"\nzk_range_proofs v{__version__}")
    click.echo("Prototype - Not Production Ready\n")
    print_disclaimer()


if __name__ == '__main__':
    main()
