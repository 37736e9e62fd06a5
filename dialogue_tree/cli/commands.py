"""
CLI commands for dialogue tree
"""

import logging
import sys
from pathlib import Path

import click

from dialogue_tree.cli.play_cmd import DialoguePlayer
from dialogue_tree.cli.validate_cmd import GraphValidator, report_guides
from dialogue_tree.content.guides import DEFAULT_GUIDES_ROOT, GuideValidator
from dialogue_tree.errors import DialogueError
from dialogue_tree.export.exporter import DialogueExporter
from dialogue_tree.graph.story import STORY
from dialogue_tree.session import DialogueSession


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log state transitions')
@click.pass_context
def cli(ctx, verbose):
    """Dialogue Tree - play and inspect a branching adventure"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj['graph'] = STORY
    ctx.obj['verbose'] = verbose


@cli.command()
@click.pass_context
def play(ctx):
    """Play the adventure in the terminal"""
    session = DialogueSession(ctx.obj['graph'])
    try:
        DialoguePlayer(session, verbose=ctx.obj['verbose']).play()
    except DialogueError as e:
        click.echo(f"\n❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option('--detailed', '-d', is_flag=True, help='Show detailed validation output')
@click.pass_context
def validate(ctx, detailed):
    """Check that every option leads to a defined node"""
    graph = ctx.obj['graph']
    validator = GraphValidator(graph)
    is_valid = validator.validate()
    validator.report_results()

    if detailed:
        click.echo("\n📊 Detailed Analysis:")
        click.echo("-" * 40)
        reachable = graph.reachable_from()
        for node_id, node in graph.items():
            marker = "■" if node.is_terminal() else "→"
            status = "" if node_id in reachable else " (unreachable)"
            click.echo(f"  {marker} [{node_id}] {len(node.options)} option(s){status}")

    if not is_valid:
        sys.exit(1)


@cli.command()
@click.pass_context
def stats(ctx):
    """Show statistics for the dialogue graph"""
    stats = ctx.obj['graph'].stats()

    click.echo("\n📊 Statistics for dialogue graph")
    click.echo("=" * 50)

    click.echo("\n📝 Content:")
    click.echo(f"  Nodes:   {stats['nodes']:>6}")
    click.echo(f"  Options: {stats['options']:>6}")

    avg_options = stats['options'] / stats['nodes'] if stats['nodes'] > 0 else 0
    click.echo("\n📈 Averages:")
    click.echo(f"  Options per node: {avg_options:>6.1f}")

    click.echo("\n🌳 Structure:")
    click.echo(f"  Branching nodes: {stats['branching']:>6}")
    click.echo(f"  Linear nodes:    {stats['linear']:>6}")
    click.echo(f"  Terminal nodes:  {stats['terminal']:>6}")
    click.echo()


@cli.command()
@click.argument('node_id')
@click.pass_context
def show_node(ctx, node_id):
    """Display a specific node of the dialogue graph"""
    graph = ctx.obj['graph']

    try:
        node = graph.get_node(node_id)
    except DialogueError as e:
        click.echo(f"❌ {e}", err=True)
        click.echo("\nAvailable nodes:")
        for nid in sorted(graph):
            click.echo(f"  • {nid}")
        sys.exit(1)

    click.echo(f"\n📍 Node: [{node_id}]")
    click.echo("=" * 50)
    click.echo(f"\n💬 {node.text}")

    if node.options:
        click.echo("\n🔀 Options:")
        for option in node.options:
            click.echo(f"  -> {option.next_node}: \"{option.text}\"")
    else:
        click.echo("\n🏁 Terminal node")

    click.echo()


@cli.command()
@click.argument('output_path', type=click.Path(dir_okay=False), default='dialogue.json')
@click.option('--format', 'fmt', type=click.Choice(['json', 'csv']), default='json', help='Output format')
@click.pass_context
def export(ctx, output_path, fmt):
    """Export the dialogue graph to JSON or CSV"""
    graph = ctx.obj['graph']
    exporter = DialogueExporter()

    try:
        if fmt == 'csv':
            written = exporter.export_to_csv(graph, Path(output_path))
        else:
            written = exporter.export_to_json(graph, Path(output_path))
    except OSError as e:
        click.echo(f"❌ Export failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Exported to: {written}")
    click.echo(f"   • {len(graph)} nodes")


@cli.command()
@click.argument('directory', type=click.Path(file_okay=False), default=str(DEFAULT_GUIDES_ROOT))
def guides(directory):
    """Validate the frontmatter of every guide in DIRECTORY"""
    validator = GuideValidator(Path(directory))
    is_valid = validator.validate()
    report_guides(validator)

    if not is_valid:
        sys.exit(1)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
