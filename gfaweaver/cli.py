#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for GFAWeaver.

This module provides the main CLI entry point and the subcommands for
inspecting, validating and converting GFA assembly graphs.
"""

import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.schema import load_config, save_config_template, validate_config
from .gfa.errors import GFAParseError, ParserTolerance
from .handle_graph.errors import GraphError
from .handle_graph.handle import Direction
from .io_utils.gfa_export import (
    export_graph_to_gfa,
    export_graph_to_gfa2,
    export_paths_fasta,
    export_segments_fasta,
)
from .parser.file_driver import parse_file, parse_file_to_graph

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FASTA_SUFFIXES = ('.fa', '.fasta', '.fna')

tolerance_option = click.option(
    '--tolerance',
    type=click.Choice([t.value for t in ParserTolerance]),
    default=None,
    help='Error tolerance (overrides the configuration)',
)


def _tolerance(value):
    return ParserTolerance(value) if value else None


def _fail(message: str):
    click.echo(f"✗ {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML configuration file')
@click.pass_context
def main(ctx, verbose, quiet, config_file):
    """
    GFAWeaver: Handle-Graph Toolkit for GFA1 / GFA2 Assembly Graphs

    Parse GFA files into a bidirected sequence graph, inspect it, and
    write it back out as GFA1, GFA2 or FASTA.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    config = load_config(Path(config_file) if config_file else None)
    ctx.obj['CONFIG'] = config
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, str(config['logging']['level']).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


# ============================================================================
# Graph Commands
# ============================================================================

@main.command()
@click.argument('gfa_file', type=click.Path(exists=True))
@tolerance_option
@click.option('--threads', '-t', type=int, default=None,
              help='Worker threads for degree statistics (default: config / CPU count)')
@click.pass_context
def stats(ctx, gfa_file, tolerance, threads):
    """Print node, edge and path statistics of a GFA file."""
    config = ctx.obj['CONFIG']
    try:
        graph = parse_file_to_graph(gfa_file, config, _tolerance(tolerance))
    except (GFAParseError, GraphError, ValueError) as e:
        _fail(f"Error reading {gfa_file}: {e}")

    threads = threads or config['parallel']['threads']
    degrees = graph.handles_par(
        lambda h: graph.degree(h, Direction.LEFT) + graph.degree(h, Direction.RIGHT),
        threads,
    )
    summary = graph.summary()

    click.echo(f"Graph: {gfa_file}")
    click.echo("=" * 60)
    click.echo(f"  Nodes:        {summary['nodes']:,}")
    click.echo(f"  Edges:        {summary['edges']:,}")
    click.echo(f"  Paths:        {summary['paths']:,}")
    click.echo(f"  Total length: {summary['total_length']:,} bp")
    if summary['nodes']:
        click.echo(f"  Node ids:     {summary['min_id']} .. {summary['max_id']}")
        click.echo(f"  Max degree:   {max(degrees)}")
        click.echo(f"  Dead ends:    {sum(1 for d in degrees if d == 0)} isolated nodes")
    for path_id in graph.path_ids():
        click.echo(
            f"  Path {graph.path_handle_to_name(path_id)}: "
            f"{graph.step_count(path_id)} steps, {graph.path_bases_len(path_id):,} bp"
        )


@main.command()
@click.argument('gfa_file', type=click.Path(exists=True))
@tolerance_option
@click.pass_context
def validate(ctx, gfa_file, tolerance):
    """Parse a GFA file without building a graph and report record counts."""
    click.echo(f"Validating GFA file: {gfa_file}")
    try:
        document = parse_file(gfa_file, ctx.obj['CONFIG'], _tolerance(tolerance))
    except GFAParseError as e:
        _fail(f"Validation failed: {e}")

    click.echo("✓ File is valid")
    for kind, count in document.counts().items():
        click.echo(f"  {kind}: {count}")


@main.command()
@click.argument('input_file', type=click.Path(exists=True))
@click.argument('output_file', type=click.Path())
@tolerance_option
@click.option('--paths', 'write_paths', is_flag=True,
              help='FASTA output: write path sequences instead of segments')
@click.option('--gfa-version', type=click.Choice(['1', '2']), default=None,
              help='GFA version written to a .gfa output (default: config)')
@click.pass_context
def convert(ctx, input_file, output_file, tolerance, write_paths, gfa_version):
    """
    Convert between GFA1 and GFA2, or extract FASTA.

    The output format follows the OUTPUT_FILE suffix: .gfa (GFA1 unless
    --gfa-version 2), .gfa2 (GFA2), .fa / .fasta / .fna (FASTA).
    """
    config = ctx.obj['CONFIG']
    suffix = Path(output_file).suffix.lower()
    if suffix not in ('.gfa', '.gfa2') + FASTA_SUFFIXES:
        _fail(f"Unsupported output format: {output_file}")

    try:
        graph = parse_file_to_graph(input_file, config, _tolerance(tolerance))
    except (GFAParseError, GraphError, ValueError) as e:
        _fail(f"Error reading {input_file}: {e}")

    overlap = config['export']['overlap']
    version = int(gfa_version or config['export']['gfa_version'])
    if suffix == '.gfa' and version == 1:
        count = export_graph_to_gfa(graph, output_file, overlap)
    elif suffix in ('.gfa', '.gfa2'):
        count = export_graph_to_gfa2(graph, output_file, overlap)
    elif write_paths:
        count = export_paths_fasta(graph, output_file)
    else:
        count = export_segments_fasta(graph, output_file)

    click.echo(f"✓ Wrote {count} records to {output_file}")


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='gfaweaver_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t',
              type=click.Choice(['default', 'strict', 'lenient']),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
    except OSError as e:
        _fail(f"Error creating configuration: {e}")
    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except yaml.YAMLError as e:
        _fail(f"Error reading configuration: {e}")

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)
    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True), required=False)
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
@click.pass_context
def config_show(ctx, config_file, format):
    """Display configuration settings (the active configuration by default)."""
    config = load_config(Path(config_file)) if config_file else ctx.obj['CONFIG']

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    parser = config['parser']
    click.echo(f"Configuration from: {config_file or 'defaults'}")
    click.echo("=" * 60)
    click.echo("\nParser:")
    click.echo(f"  Tolerance: {parser['tolerance']}")
    click.echo(f"  Integer ids: {parser['integer_ids']}")
    for gfa_format, kinds in parser['line_types'].items():
        enabled = [kind for kind, on in kinds.items() if on]
        click.echo(f"  {gfa_format.upper()} line types: {', '.join(enabled) or 'none'}")
    click.echo("\nExport:")
    click.echo(f"  GFA version: {config['export']['gfa_version']}")
    click.echo(f"  Overlap: {config['export']['overlap']}")
    click.echo("\nParallel:")
    click.echo(f"  Threads: {config['parallel']['threads'] or 'auto'}")


if __name__ == '__main__':
    sys.exit(main())
