# /app.py

import sys

import click

from ean13_gen import app
from ean13_gen.generator.forms import validate_line, validate_weight
from ean13_gen.generator.pipeline import calculate_checksum, process


@app.shell_context_processor
def make_shell_context():
    """Create a shell context for the application -
    for trying the barcode pipeline in the Flask shell"""
    return {
        'process': process,
        'validate_line': validate_line,
        'validate_weight': validate_weight,
        'calculate_checksum': calculate_checksum,
    }


@app.cli.command("generate")
@click.argument("lines", nargs=-1, required=True)
@click.option("--weight", default="", help="Weight in grams, up to 5 digits.")
@click.option("--drop-label", is_flag=True, help="Drop the '-label' suffix once a weight is encoded.")
def generate_command(lines, weight, drop_label):
    """Print complete EAN-13 codes for the given partial barcodes."""
    result = process(list(lines), weight, keep_label=not drop_label)
    if not result.ok:
        click.echo(result.error.message, err=True)
        sys.exit(1)
    for code in result.codes:
        click.echo(code)
