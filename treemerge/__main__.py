import logging
import sys

import click

from .config import MERGE_STRATEGIES, Config, config


@click.group()
def main():
    pass


@main.command()
@click.option('--strategy',
              '-s',
              type=click.Choice(MERGE_STRATEGIES),
              default=None,
              help='Heap merge strategy')
@click.option('--config',
              '-c',
              'config_path',
              type=click.Path(exists=True, dir_okay=False),
              default=None,
              help='JSON config file')
@click.option('--verbose', '-v', is_flag=True, help='Log every merge step')
@click.argument('files', nargs=-1, type=str)
def mst(strategy, config_path, verbose, files):
    """Find the minimum spanning tree of graph files."""
    from .errors import TreeMergeError
    from .mst import total_weight
    from .partial_tree_list import execute, initialize
    from .structures.graph import Graph

    if config_path is not None:
        config.reset()
        config.update(Config.load(config_path))
    level = 'DEBUG' if verbose else str(config['log_level']).upper()
    logging.basicConfig(level=level,
                        format='%(levelname)s %(name)s: %(message)s')

    failed = 0
    for file_name in files:
        click.echo(f'Now testing file: {file_name}')
        try:
            graph = Graph.load(file_name)
        except (OSError, TreeMergeError) as e:
            click.echo(f'Error reading {file_name}: {e}', err=True)
            failed += 1
            continue

        ptlist = initialize(graph)
        for tree in ptlist:
            click.echo(str(tree))

        arcs = execute(ptlist, strategy)
        click.echo(f'MST: [{", ".join(str(arc) for arc in arcs)}]')
        click.echo(f'Total weight: {total_weight(arcs)}')
        if ptlist.size() > 1:
            click.echo(f'Graph is disconnected, {ptlist.size()} trees left')
        click.echo('')

    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
