"""Command-line interface for genescan.

Commands:
    scan: Find start/stop codon delimited genes in a sequence file
    config: Show the effective configuration

Example:
    $ genescan --help
    $ genescan scan genome.txt
    $ genescan scan genome.fa --fasta --format tsv -o genes.tsv
    $ genescan -v scan genome.txt --config genescan.toml --unterminated warn
"""

from __future__ import annotations

import sys
import warnings
from pathlib import Path
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape

from genescan import __version__
from genescan.config import UNTERMINATED_POLICIES, Config
from genescan.core.exceptions import GeneScanError, UnterminatedGeneWarning

# Diagnostics go to stderr; gene output goes to stdout or --output
console = Console(stderr=True)


def _load_config(ctx: click.Context, config_path: Optional[Path]) -> Config:
    try:
        config = Config.load(config_path)
    except GeneScanError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if ctx.obj.get("verbose"):
        config.logging.verbosity = 2
    elif ctx.obj.get("quiet"):
        config.logging.verbosity = 0
    return config


@click.group()
@click.version_option(version=__version__, prog_name="genescan")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """genescan: find genes between start and stop codons.

    Scans a lowercase acgt sequence for regions that open with the start
    codon atg and close with the nearest in-frame stop codon (tga, taa, tag).
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# =============================================================================
# scan command
# =============================================================================


@main.command()
@click.argument(
    "input_file",
    metavar="INPUT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--fasta",
    is_flag=True,
    help="Treat INPUT as FASTA and scan every record.",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML configuration file.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write genes to this file instead of stdout.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "tsv"]),
    default="text",
    show_default=True,
    help="Output format: count line plus one gene per line, or a TSV table.",
)
@click.option(
    "--unterminated",
    type=click.Choice(UNTERMINATED_POLICIES),
    default=None,
    help="Start codons without a stop codon: drop silently or warn. [default: from config]",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write debug log to this file.",
)
@click.pass_context
def scan(
    ctx: click.Context,
    input_file: Path,
    fasta: bool,
    config_path: Optional[Path],
    output: Optional[Path],
    output_format: str,
    unterminated: Optional[str],
    log_file: Optional[Path],
) -> None:
    """Find genes in INPUT and report them in detection order.

    INPUT is a file holding nothing but the bases (a trailing newline is
    allowed), or a FASTA file with --fasta.

    \b
    Examples:
        $ genescan scan genome.txt
        $ genescan scan genome.fa --fasta --format tsv -o genes.tsv
    """
    from genescan.core.pipeline import ScanResult, find_genes
    from genescan.io.sequence import iter_fasta_records, read_sequence
    from genescan.utils.logging import Timer, setup_logging

    config = _load_config(ctx, config_path)
    if unterminated is not None:
        config.scan.unterminated = unterminated
    if log_file is not None:
        config.logging.log_file = str(log_file)

    logger = setup_logging(config.logging.verbosity, config.logging.log_file)

    # Everything is scanned before anything is written: a fatal error
    # leaves no partial output.
    results: list[tuple[str, ScanResult, list]] = []
    try:
        with Timer("Scan", logger), warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", UnterminatedGeneWarning)
            if fasta:
                records = list(iter_fasta_records(input_file))
            else:
                sequence = read_sequence(input_file, config.scan.strip_line_endings)
                records = [(input_file.stem, sequence)]

            for name, sequence in records:
                result = find_genes(sequence, config.scan)
                results.append((name, result, list(result.genes())))
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if ctx.obj.get("verbose"):
            import traceback
            traceback.print_exc()
        raise SystemExit(1)

    for w in caught:
        if issubclass(w.category, UnterminatedGeneWarning):
            console.print(f"[yellow]Warning:[/yellow] {escape(str(w.message))}")

    if output is None:
        _write_results(sys.stdout, results, output_format, fasta)
    else:
        with open(output, "w") as f:
            _write_results(f, results, output_format, fasta)
        total = sum(len(genes) for _, _, genes in results)
        logger.info(f"Wrote {total} genes to {output}")


def _write_results(out: TextIO, results: list, output_format: str, fasta: bool) -> None:
    if output_format == "tsv":
        out.write("seqid\trecord\tstart\tstop\tlength\tgene\n")
        for name, _, genes in results:
            for i, gene in enumerate(genes, start=1):
                out.write(f"{name}\t{i}\t{gene.start}\t{gene.stop}\t{gene.length}\t{gene.sequence}\n")
        return

    for name, _, genes in results:
        prefix = f"{name}: " if fasta else ""
        out.write(f"{prefix}{len(genes)} genes found\n")
        for gene in genes:
            out.write(f"{gene.sequence}\n")


# =============================================================================
# config command
# =============================================================================


@main.command("config")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML configuration file.",
)
@click.pass_context
def show_config(ctx: click.Context, config_path: Optional[Path]) -> None:
    """Print the effective configuration as TOML."""
    config = _load_config(ctx, config_path)
    click.echo(config.to_toml())


if __name__ == "__main__":
    main()
