"""Tests for the run-tour command."""

import click
from click.testing import CliRunner

from sequence_tour.cli import cli
from sequence_tour.tour import run_tour, tour

EXPECTED = """sam206 - vector - using Iterators
18,17,21,18,21
Dereferencing the Iterator to get first element in vector, value = 18
Increment by one (iter++;) Dereferencing the Iterator to get value = 17
Output vector elements using for loop and iterator : 18, 17, 21, 18, 21, 
Count of students aged 21 = 2
Count of students aged under 18 = 1
Vector content before erasing the third element
18,17,21,18
Vector content AFTER erasing the third element
18,17,18
Re-populating vector:18,17,21,18,21
Iterating over vector to remove even elements
After removal of even elements vector contains : 17,21,21
Re-populating vector:18,17,21,18,21
all_of() : All values in ages_vector are greater than 16
none_of() : None of the values in vector are less than 17
Using find() to find value 17 in the vector.
Found at least one value 17
 found one value that satisfied the is_even lambda expression 
Horray, I have won the lotto
Program finished - goodbye.
"""


def _run_tour_on(values):
    @click.command()
    def wrapper():
        tour(values, populate_first=False)

    return CliRunner().invoke(wrapper, [])


class TestRunTourCommand:
    """Tests for the run_tour CLI command."""

    def test_full_output(self):
        result = CliRunner().invoke(run_tour, [])
        assert result.exit_code == 0
        assert result.stdout == EXPECTED

    def test_via_group(self):
        result = CliRunner().invoke(cli, ['run-tour'])
        assert result.exit_code == 0
        assert "Program finished - goodbye." in result.output

    def test_debug_flag(self):
        result = CliRunner().invoke(run_tour, ['--debug'])
        assert result.exit_code == 0
        assert "D populated sequence with 5 values" in result.output
        assert "D erased 21 at position 2" in result.output


class TestTourGuards:
    """Tests for the bounds guards on short sequences."""

    def test_empty_sequence(self):
        values = []
        result = _run_tour_on(values)
        assert result.exit_code == 0
        assert "need at least 2 values" in result.output
        assert "cannot erase the third element" in result.output
        assert "Dereferencing the Iterator" not in result.output
        assert "Count of students aged 21 = 0" in result.output
        assert "Program finished - goodbye." in result.output
        # later steps always re-populate
        assert values == [18, 17, 21, 18, 21]

    def test_three_values_pop_leaves_too_few_to_erase(self):
        result = _run_tour_on([18, 17, 21])
        assert result.exit_code == 0
        assert "value = 18" in result.output
        assert "cannot erase the third element, vector only has 2 values" in result.output
