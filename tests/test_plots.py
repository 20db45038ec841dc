# tests/test_plots.py
import plotly.graph_objects as go

from eda_utils import empty_figure, plot_column_boxplot, plot_skewness_report, skewness_stats


class TestBoxPlot:

    def test_single_box_trace(self):
        fig = plot_column_boxplot([1, 2, 3, 50], column_name='units')
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert fig.data[0].type == 'box'
        assert fig.data[0].name == 'units'


class TestSkewnessReport:

    def test_traces_with_modes(self):
        fig = plot_skewness_report([1, 2, 2, 3, 4, 7, 9], column_name='units')
        # histogram, normal curve, mean, median, mode
        assert [t.name for t in fig.data] == ['Data', 'Normal Curve', 'Mean', 'Median', 'Mode']
        assert fig.data[0].nbinsx == 10
        assert len(fig.data[1].x) == 100

    def test_all_unique_has_no_mode_marker(self):
        fig = plot_skewness_report([1, 2, 3, 4, 5])
        assert 'Mode' not in [t.name for t in fig.data]

    def test_precomputed_stats(self):
        values = [1, 2, 3, 10]
        fig = plot_skewness_report(values, stats=skewness_stats(values))
        assert fig.data[2].x[0] == 4.0
        assert fig.data[3].x[0] == 2.5

    def test_no_values(self):
        fig = plot_skewness_report([None, None])
        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "No values to plot"


class TestEmptyFigure:

    def test_message(self):
        fig = empty_figure("Nothing here", height=250)
        assert fig.layout.height == 250
        assert fig.layout.annotations[0].text == "Nothing here"
