import logging

import click


@click.group()
@click.option('--config',
              '-c',
              type=click.Path(exists=True, dir_okay=False),
              default=None,
              help='JSON configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Log debug messages')
def main(config, verbose):
    from fibheap.config import configure_logging, load_config

    load_config(config)
    logging.basicConfig(format='%(name)s %(levelname)s: %(message)s')
    configure_logging('DEBUG' if verbose else None)


@main.command()
@click.argument('keys', type=int, nargs=-1)
def sort(keys):
    """Sort integers with a Fibonacci heap."""
    from fibheap import FibonacciHeap

    heap = FibonacciHeap()
    for key in keys:
        heap.insert(key)
    ret = []
    while len(heap):
        ret.append(heap.extract_min())
    click.echo(' '.join(str(key) for key in ret))


@main.command()
@click.option('--pop', '-p', default=0, help='Number of delete-min calls')
@click.argument('keys', type=int, nargs=-1)
def view(pop, keys):
    """Show the forest built from KEYS."""
    from fibheap import FibonacciHeap
    from fibheap.view import heap_view

    heap = FibonacciHeap()
    for key in keys:
        heap.insert(key)
    for _ in range(min(pop, len(heap))):
        heap.delete_min()
    click.echo(heap_view(heap).show(stdout=False))
    click.echo(f'ranks: {heap.counters_rep()}')
    click.echo(f'potential: {heap.potential()}')


@main.command()
@click.option('--size',
              '-n',
              type=int,
              multiple=True,
              default=[100, 1000, 10000],
              help='Number of keys, may be repeated')
@click.option('--seed', '-s', type=int, default=None, help='Random seed')
def audit(size, seed):
    """Measure actual and amortized costs of random workloads."""
    from fibheap.analysis import fit_log_growth, run_workload, summarize

    sizes, costs = [], []
    for n in size:
        summary = summarize(run_workload(n, seed=seed))
        click.echo(f'n = {n}')
        for op, stats in summary.items():
            click.echo(f"  {op:<13s}{stats['count']:>8d}"
                       f"  actual {stats['actual']:8.3f}"
                       f"  amortized {stats['amortized']:8.3f}"
                       f"  max {stats['max_amortized']:4d}")
        if 'delete_min' in summary:
            sizes.append(n)
            costs.append(summary['delete_min']['actual'])
    if len(sizes) > 2:
        a, b = fit_log_growth(sizes, costs)
        click.echo(f'delete_min actual cost ~ {a:.3f} ln(n) + {b:.3f}')


if __name__ == '__main__':
    main()
