# tests/conftest.py
import pytest

from utils.data_workspace import Dataset


@pytest.fixture
def sales_records():
    """Mixed-type rows as they arrive from a CSV upload (all text)"""
    return [
        {'region': 'North', 'units': '12', 'price': '2.50', 'date': '2024-01-05'},
        {'region': 'South', 'units': '7', 'price': '3.10', 'date': '2024-01-06'},
        {'region': 'East', 'units': '15', 'price': '2.75', 'date': '2024-01-07'},
        {'region': 'West', 'units': '9', 'price': '4.00', 'date': '2024-01-08'},
        {'region': 'North', 'units': '11', 'price': '2.95', 'date': '2024-01-09'},
    ]


@pytest.fixture
def sales_dataset(sales_records):
    return Dataset.from_records(sales_records, name='sales.csv')


@pytest.fixture
def linear_dataset():
    """Columns with known pairwise correlations"""
    rows = [
        {'a': 1.0, 'b': 2.0, 'c': 4.0, 'k': 7.0},
        {'a': 2.0, 'b': 4.0, 'c': 3.0, 'k': 7.0},
        {'a': 3.0, 'b': 6.0, 'c': 2.0, 'k': 7.0},
        {'a': 4.0, 'b': 8.0, 'c': 1.0, 'k': 7.0},
    ]
    return Dataset.from_records(rows, name='linear')


@pytest.fixture
def pie_dataset():
    return Dataset.from_records(
        [{'category': 'A', 'amount': 10}, {'category': 'B', 'amount': 20}],
        name='pie',
    )
