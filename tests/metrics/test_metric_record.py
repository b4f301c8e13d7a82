"""Tests for Metric records and report ordering."""

from oo_metrics.metrics import Metric, MetricName, NumericValue, sort_metrics


class TestMetric:
    def test_of_accepts_int_float_and_value(self):
        assert Metric.of(MetricName.Md, "d", 3).value == NumericValue.of(3)
        assert Metric.of(MetricName.MIF, "d", 0.5).value == NumericValue.of(0.5)
        value = NumericValue.of_rational(1, 3)
        assert Metric.of(MetricName.MIF, "d", value).value is value

    def test_equality_covers_all_fields(self):
        base = Metric.of(MetricName.Md, "Number of Methods Defined", 3)
        assert base == Metric.of(MetricName.Md, "Number of Methods Defined", 3)
        assert base != Metric.of(MetricName.Mi, "Number of Methods Defined", 3)
        assert base != Metric.of(MetricName.Md, "other", 3)
        assert base != Metric.of(MetricName.Md, "Number of Methods Defined", 4)
        assert len({base, Metric.of(MetricName.Md, "Number of Methods Defined", 3)}) == 1

    def test_str(self):
        assert str(Metric.of(MetricName.Ma, "Number of Methods (All)", 2)) == "Ma: 2"

    def test_to_dict(self):
        metric = Metric.of(MetricName.MIF, "Method Inheritance Factor", NumericValue.of_rational(2, 3))
        assert metric.to_dict(decimal_places=2) == {
            "name": "MIF",
            "description": "Method Inheritance Factor",
            "value": 0.67,
        }
        assert Metric.of(MetricName.Md, "x", 5).to_dict()["value"] == 5

    def test_formatted_value(self):
        metric = Metric.of(MetricName.NMIR, "x", NumericValue.of_rational(200, 3))
        assert metric.formatted_value(2) == "66.67"


class TestSortMetrics:
    def test_follows_declaration_order(self):
        metrics = {
            Metric.of(MetricName.AHF, "a", 1),
            Metric.of(MetricName.RTLOC, "b", 10),
            Metric.of(MetricName.Mit, "c", 0),
        }
        assert [m.name for m in sort_metrics(metrics)] == [
            MetricName.RTLOC,
            MetricName.Mit,
            MetricName.AHF,
        ]

    def test_positions_are_unique(self):
        positions = [name.position for name in MetricName]
        assert positions == list(range(len(MetricName)))
        assert len(MetricName) == 22
