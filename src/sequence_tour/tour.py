import click

from sequence_tour.commons import debug, error, set_config, warn
from sequence_tour.sequence_ops import (
    SequenceIndexError,
    all_of,
    count_equal,
    count_if,
    display,
    element_at,
    erase_at,
    erase_if,
    find,
    find_if,
    greater_than,
    is_even,
    less_than,
    none_of,
    pop_last,
    populate,
    sequences_equal,
    traverse,
)

ERASE_POSITION = 2


def _show_first_elements(ages):
    if len(ages) < 2:
        warn(f"need at least 2 values to step through the vector, have {len(ages)}")
        return
    click.echo(f"Dereferencing the Iterator to get first element in vector, value = {element_at(ages, 0)}")
    click.echo(f"Increment by one (iter++;) Dereferencing the Iterator to get value = {element_at(ages, 1)}")


def _erase_third(ages):
    if len(ages) <= ERASE_POSITION:
        warn(f"cannot erase the third element, vector only has {len(ages)} values")
        return
    click.echo("Vector content before erasing the third element")
    display(ages)
    removed = erase_at(ages, ERASE_POSITION)
    debug(f"erased {removed} at position {ERASE_POSITION}")
    click.echo("Vector content AFTER erasing the third element")
    display(ages)


def _repopulate(ages):
    click.echo("Re-populating vector:", nl=False)
    populate(ages)
    display(ages)


def tour(ages, populate_first=True):
    """
    Walk through the iterator, counting, erasing and searching steps on ages.

    When populate_first is False the opening steps run against ages as given, which
    lets the bounds guards be exercised; later steps always re-populate.
    """
    click.echo("sam206 - vector - using Iterators")

    if populate_first:
        populate(ages)
    display(ages)

    _show_first_elements(ages)

    click.echo("Output vector elements using for loop and iterator : ", nl=False)
    for value in traverse(ages):
        click.echo(f"{value}, ", nl=False)
    click.echo()

    age = 21
    click.echo(f"Count of students aged {age} = {count_equal(ages, age)}")
    click.echo(f"Count of students aged under 18 = {count_if(ages, less_than(18))}")

    last = pop_last(ages)
    debug(f"popped last value {last}")

    _erase_third(ages)

    _repopulate(ages)

    click.echo("Iterating over vector to remove even elements")
    erase_if(ages, is_even)
    click.echo("After removal of even elements vector contains : ", nl=False)
    display(ages)

    _repopulate(ages)

    if all_of(ages, greater_than(16)):
        click.echo("all_of() : All values in ages_vector are greater than 16")
    else:
        click.echo("all_of() : One or more values are not greater than 16")

    if none_of(ages, less_than(17)):
        click.echo("none_of() : None of the values in vector are less than 17")
    else:
        click.echo("none_of() : One or more values are less than 17")

    click.echo("Using find() to find value 17 in the vector.")
    position = find(ages, 17)
    if position is not None:
        debug(f"17 first found at position {position}")
        click.echo("Found at least one value 17")
    else:
        click.echo("NO value 17 in vector ")

    position = find_if(ages, is_even)
    if position is not None:
        debug(f"first even value found at position {position}")
        click.echo(" found one value that satisfied the is_even lambda expression ")
    else:
        click.echo("NO even values found")

    lotto_draw = [2, 10, 13, 22, 35, 47]
    my_numbers = [2, 10, 13, 22, 35, 47]
    if sequences_equal(lotto_draw, my_numbers):
        click.echo("Horray, I have won the lotto")
    else:
        click.echo("No luck today")

    click.echo("Program finished - goodbye.")


@click.command()
@click.option('--debug', 'show_debug', is_flag=True, help='Show debug tracing on stderr')
def run_tour(show_debug):
    """
    Run the vector iterator walkthrough on the sample ages and print each step.
    """
    set_config(show_debug)
    try:
        tour([])
    except SequenceIndexError as e:
        error(str(e))
        raise click.ClickException(str(e))
