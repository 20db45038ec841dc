# tests/test_chart_projection.py
import pytest
from plotly.basedatatypes import BaseTraceType

from plotting_utils import (
    ChartType,
    create_chart,
    default_selection,
    project,
    required_fields,
)


class TestChartType:

    def test_parse_known_tags(self):
        assert ChartType.parse('pie') is ChartType.PIE
        assert ChartType.parse(' Histogram ') is ChartType.HISTOGRAM
        assert ChartType.parse(ChartType.BOX) is ChartType.BOX

    def test_unknown_tag_falls_back_to_bar(self):
        assert ChartType.parse('sparkline') is ChartType.BAR
        assert ChartType.parse(None) is ChartType.BAR

    def test_required_fields(self):
        assert required_fields(ChartType.HISTOGRAM) == ('x',)
        assert required_fields('scatter') == ('x', 'y')


class TestProject:

    def test_pie(self, pie_dataset):
        descriptor = project('pie', pie_dataset, 'category', 'amount')
        assert descriptor['labels'] == ['A', 'B']
        assert descriptor['values'] == [10, 20]
        assert descriptor.title == "Pie Plot"

    def test_pie_keeps_duplicate_labels(self):
        rows = [{'c': 'A', 'v': 1}, {'c': 'A', 'v': 2}]
        descriptor = project('pie', rows, 'c', 'v')
        assert descriptor['labels'] == ['A', 'A']

    @pytest.mark.parametrize("tag", ['bar', 'line', 'scatter'])
    def test_xy_charts_pass_rows_through(self, sales_dataset, tag):
        descriptor = project(tag, sales_dataset, 'region', 'units')
        assert descriptor['x'] == ['North', 'South', 'East', 'West', 'North']
        assert descriptor['y'] == [12.0, 7.0, 15.0, 9.0, 11.0]
        assert descriptor.series[0].name == 'units'

    def test_unknown_type_draws_bar(self, pie_dataset):
        descriptor = project('sparkline', pie_dataset, 'category', 'amount')
        assert descriptor.chart_type is ChartType.BAR
        assert descriptor['x'] == ['A', 'B']

    def test_missing_field_gives_empty_series(self, pie_dataset):
        assert project('bar', pie_dataset, 'category', None).is_empty
        assert project('bar', pie_dataset, 'nope', 'amount').is_empty
        assert project('histogram', pie_dataset, None).is_empty

    def test_box_has_one_series_per_field(self, pie_dataset):
        descriptor = project('box', pie_dataset, 'category', 'amount')
        assert [s.name for s in descriptor.series] == ['amount', 'category']
        assert descriptor.series[0]['y'] == [10, 20]
        assert descriptor.series[1]['y'] == ['A', 'B']

    def test_histogram_ignores_y(self, sales_dataset):
        descriptor = project('histogram', sales_dataset, 'units', 'price')
        assert descriptor.y_field is None
        assert descriptor.bin_count == 10
        assert len(descriptor.series) == 1
        assert descriptor['x'] == [12.0, 7.0, 15.0, 9.0, 11.0]

    def test_empty_dataset(self):
        assert project('bar', [], 'a', 'b').is_empty


class TestDefaultSelection:

    def test_second_numeric_field(self):
        assert default_selection(['region', 'units', 'price'], ['units', 'price']) == ('region', 'price')

    def test_single_numeric_field(self):
        assert default_selection(['region', 'units'], ['units']) == ('region', 'units')

    def test_nothing_to_select(self):
        assert default_selection(['region'], []) == ('region', None)
        assert default_selection([], []) == (None, None)


class TestCreateChart:

    @pytest.mark.parametrize("tag, n_traces", [
        ('bar', 1), ('line', 1), ('scatter', 1), ('pie', 1), ('box', 2), ('histogram', 1),
    ])
    def test_trace_count(self, sales_dataset, tag, n_traces):
        fig = create_chart(project(tag, sales_dataset, 'region', 'units'))
        assert len(fig.data) == n_traces

    def test_traces_are_plotly_traces(self, sales_dataset):
        fig = create_chart(project('box', sales_dataset, 'region', 'units'))
        assert all(isinstance(t, BaseTraceType) for t in fig.data)

    def test_histogram_bins(self, sales_dataset):
        fig = create_chart(project('histogram', sales_dataset, 'units'))
        assert fig.data[0].nbinsx == 10

    def test_empty_descriptor(self, pie_dataset):
        fig = create_chart(project('bar', pie_dataset, 'category', None))
        assert len(fig.data) == 0
        assert len(fig.layout.annotations) == 1
