#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for cgstats.

This module provides the main CLI entry point and the scoring subcommands.
FASTA is read from standard input (or --input), BedGraph is written to
standard output (or --output).
"""

import logging
import sys
from importlib import metadata

import Bio
import click

from .version import __version__
from .config import DEFAULTS, RunConfig
from .driver import run
from .errors import CgStatsError, OutputWriteError
from .io.fasta import open_input
from .utils.scoring import ScoreKind

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    cgstats: windowed CG content and CpG frequency
    
    Splits every sequence of a FASTA stream into fixed-size, non-overlapping
    windows and writes one BedGraph line (name, start, end, score) per window.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet
    
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    
    # Logs go to stderr; stdout carries the BedGraph stream
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )
    logging.getLogger('cgstats').setLevel(level)


def _scoring_options(func):
    """Options shared by the scoring subcommands."""
    func = click.option('--output', '-o', type=click.Path(dir_okay=False, allow_dash=True),
                        default=DEFAULTS['output_path'], show_default=True,
                        help='Output BedGraph file (- for stdout)')(func)
    func = click.option('--input', '-i', 'input_path',
                        type=click.Path(exists=True, dir_okay=False, allow_dash=True),
                        default=DEFAULTS['input_path'], show_default=True,
                        help='Input FASTA file, optionally gzipped (- for stdin)')(func)
    func = click.option('--window-size', '-w', required=True, type=int,
                        help='Window size in bases (positive integer)')(func)
    return func


def _run_scoring(ctx, kind, window_size, input_path, output):
    """Validate the run, stream input to output, exit 1 on any cgstats error."""
    try:
        config = RunConfig(
            window_size=window_size,
            kind=kind,
            input_path=input_path,
            output_path=output,
        ).validate()
        logger.debug("Run configuration: %s", config.to_dict())
        
        with open_input(config.input_path) as in_handle:
            try:
                out_handle = click.open_file(config.output_path, 'w')
            except OSError as e:
                raise OutputWriteError(f"Cannot open output {config.output_path}: {e}") from e
            with out_handle:
                summary = run(in_handle, out_handle, config.window_size, config.kind)
    except CgStatsError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    
    ctx.obj['SUMMARY'] = summary


# ============================================================================
# Scoring Commands
# ============================================================================

@main.command('cg')
@_scoring_options
@click.pass_context
def cg(ctx, window_size, input_path, output):
    """
    Fraction of C and G bases per window.
    
    Score = (count of C + count of G) / window length.
    
    Examples:
        cgstats cg -w 1000 < genome.fa > cg.bedgraph
    """
    _run_scoring(ctx, ScoreKind.CG_CONTENT, window_size, input_path, output)


@main.command('cpg')
@_scoring_options
@click.pass_context
def cpg(ctx, window_size, input_path, output):
    """
    Fraction of adjacent base pairs equal to CG per window.
    
    Score = (count of "CG" pairs) / (window length - 1). Windows shorter
    than two bases score 0.
    
    Examples:
        cgstats cpg -w 1000 -i genome.fa.gz -o cpg.bedgraph
    """
    _run_scoring(ctx, ScoreKind.CPG_FREQUENCY, window_size, input_path, output)


# ============================================================================
# Utility Commands
# ============================================================================

@main.command()
def version():
    """Show version information."""
    click.echo(f"cgstats v{__version__}")
    click.echo("\nDependencies:")
    
    click.echo(f"  BioPython: {Bio.__version__}")
    click.echo(f"  Click: {metadata.version('click')}")


if __name__ == '__main__':
    sys.exit(main())
