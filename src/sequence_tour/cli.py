import click
from sequence_tour.tour import run_tour


@click.group()
def cli():
    pass

cli.add_command(run_tour)

if __name__ == "__main__":
    cli()
