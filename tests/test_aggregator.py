"""Tests for the multi-provider chart lookup."""

import threading

import pytest

from aip_charts.aggregator import ChartAggregator
from aip_charts.config import ChartSettings
from aip_charts.exceptions import DocumentNotFoundError, NoChartsFoundError, TransportError
from aip_charts.models.chart import Chart, ChartCategory
from aip_charts.sources.base import ChartSource


def make_chart(url, source, subtitle=''):
    return Chart(category=ChartCategory.VAC, subtitle=subtitle, filename=url.rsplit('/', 1)[-1],
                 url=url, source=source)


class StaticSource(ChartSource):
    """Provider returning fixed charts, or raising a fixed error."""

    def __init__(self, name, charts=None, error=None, barrier=None):
        self.name = name
        self.charts = charts or []
        self.error = error
        self.barrier = barrier
        self.calls = []

    def get_source_name(self):
        return self.name

    def get_charts(self, icao):
        self.calls.append(icao)
        if self.barrier is not None:
            self.barrier.wait()
        if self.error is not None:
            raise self.error
        return list(self.charts)


def make_aggregator(sources, **settings):
    settings.setdefault('airac_date', '2026-01-22')
    return ChartAggregator(
        settings=ChartSettings(**settings),
        providers={name: (lambda source=source: source) for name, source in sources.items()},
    )


class TestSelectProviders:

    @pytest.fixture
    def aggregator(self):
        names = ['SIA', 'SUPAIP', 'ATLAS', 'UK']
        return make_aggregator({name: StaticSource(name) for name in names})

    def test_french_aerodrome(self, aggregator):
        assert aggregator.select_providers('LFPG') == ['SIA', 'SUPAIP']

    def test_uk_aerodrome(self, aggregator):
        assert aggregator.select_providers('EGLL') == ['UK']

    def test_other_identifier(self, aggregator):
        assert aggregator.select_providers('EDDF') == ['SIA']

    def test_atlas_enabled(self):
        names = ['SIA', 'SUPAIP', 'ATLAS', 'UK']
        aggregator = make_aggregator({name: StaticSource(name) for name in names}, enable_atlas_vac=True)
        assert aggregator.select_providers('LFPN') == ['SIA', 'SUPAIP', 'ATLAS']
        assert aggregator.select_providers('EGLL') == ['UK']

    def test_unregistered_providers_skipped(self):
        aggregator = make_aggregator({'UK': StaticSource('UK')})
        assert aggregator.select_providers('LFPG') == []

    def test_default_providers_registered(self):
        aggregator = ChartAggregator(ChartSettings(airac_date='2026-01-22'))
        assert set(aggregator.providers) == {'SIA', 'SUPAIP', 'ATLAS', 'UK'}


class TestLookup:

    def test_merge_in_provider_order(self):
        sia = StaticSource('SIA', [make_chart('https://a/1.pdf', 'SIA'), make_chart('https://a/2.pdf', 'SIA')])
        supaip = StaticSource('SUPAIP', [make_chart('https://b/1.pdf', 'SUPAIP')])
        aggregator = make_aggregator({'SIA': sia, 'SUPAIP': supaip})

        lookup = aggregator.lookup('LFPG')

        assert [chart.url for chart in lookup.charts] == ['https://a/1.pdf', 'https://a/2.pdf', 'https://b/1.pdf']
        assert lookup.providers == ['SIA', 'SUPAIP']
        assert lookup.failures == {}
        assert sia.calls == ['LFPG']
        assert supaip.calls == ['LFPG']

    def test_first_provider_wins_duplicates(self):
        sia = StaticSource('SIA', [make_chart('https://a/1.pdf', 'SIA', 'first')])
        supaip = StaticSource('SUPAIP', [make_chart('https://a/1.pdf', 'SUPAIP', 'second'),
                                         make_chart('https://b/1.pdf', 'SUPAIP')])
        aggregator = make_aggregator({'SIA': sia, 'SUPAIP': supaip})

        charts = aggregator.lookup('LFPG').charts

        assert len(charts) == 2
        assert charts[0].subtitle == 'first'
        assert charts[0].source == 'SIA'

    def test_providers_run_concurrently(self):
        # Both providers must be running at the same time to pass the barrier
        barrier = threading.Barrier(2, timeout=5)
        sia = StaticSource('SIA', [make_chart('https://a/1.pdf', 'SIA')], barrier=barrier)
        supaip = StaticSource('SUPAIP', [make_chart('https://b/1.pdf', 'SUPAIP')], barrier=barrier)
        aggregator = make_aggregator({'SIA': sia, 'SUPAIP': supaip})

        lookup = aggregator.lookup('LFPG')

        assert len(lookup.charts) == 2
        assert lookup.failures == {}

    def test_failure_does_not_abort_others(self):
        sia = StaticSource('SIA', error=TransportError("timed out", url='https://a/page.html'))
        supaip = StaticSource('SUPAIP', [make_chart('https://b/1.pdf', 'SUPAIP')])
        aggregator = make_aggregator({'SIA': sia, 'SUPAIP': supaip})

        lookup = aggregator.lookup('LFPG')

        assert [chart.url for chart in lookup.charts] == ['https://b/1.pdf']
        assert lookup.failures == {'SIA': 'timed out'}
        assert lookup.not_found == []

    def test_not_found_reported_separately(self):
        sia = StaticSource('SIA', error=DocumentNotFoundError("not found"))
        supaip = StaticSource('SUPAIP', [make_chart('https://b/1.pdf', 'SUPAIP')])
        aggregator = make_aggregator({'SIA': sia, 'SUPAIP': supaip})

        lookup = aggregator.lookup('LFXX')

        assert lookup.not_found == ['SIA']
        assert lookup.failures == {}
        assert lookup.found

    def test_unexpected_error_contained(self):
        sia = StaticSource('SIA', error=RuntimeError("parser bug"))
        supaip = StaticSource('SUPAIP', [make_chart('https://b/1.pdf', 'SUPAIP')])
        aggregator = make_aggregator({'SIA': sia, 'SUPAIP': supaip})

        lookup = aggregator.lookup('LFPG')

        assert lookup.failures == {'SIA': 'parser bug'}
        assert len(lookup.charts) == 1

    def test_explicit_sources(self):
        sia = StaticSource('SIA', [make_chart('https://a/1.pdf', 'SIA')])
        uk = StaticSource('UK', [make_chart('https://c/1.pdf', 'UK')])
        aggregator = make_aggregator({'SIA': sia, 'UK': uk})

        lookup = aggregator.lookup('LFPG', sources=['UK'])

        assert lookup.providers == ['UK']
        assert sia.calls == []
        assert [chart.source for chart in lookup.charts] == ['UK']

    def test_no_provider(self):
        aggregator = make_aggregator({})
        lookup = aggregator.lookup('LFPG')
        assert not lookup.found
        assert lookup.providers == []

    def test_to_dict(self):
        sia = StaticSource('SIA', [make_chart('https://a/1.pdf', 'SIA')])
        supaip = StaticSource('SUPAIP', error=TransportError("HTTP 503"))
        data = make_aggregator({'SIA': sia, 'SUPAIP': supaip}).lookup('LFPG').to_dict()

        assert data['icao'] == 'LFPG'
        assert data['count'] == 1
        assert data['charts'][0]['url'] == 'https://a/1.pdf'
        assert data['failures'] == {'SUPAIP': 'HTTP 503'}


class TestGetCharts:

    def test_charts_returned(self):
        aggregator = make_aggregator({'UK': StaticSource('UK', [make_chart('https://c/1.pdf', 'UK')])})
        assert len(aggregator.get_charts('EGLL')) == 1

    def test_nothing_found_when_all_fail(self):
        aggregator = make_aggregator({
            'SIA': StaticSource('SIA', error=TransportError("down")),
            'SUPAIP': StaticSource('SUPAIP'),
        })
        with pytest.raises(NoChartsFoundError) as excinfo:
            aggregator.get_charts('LFPG')
        assert excinfo.value.icao == 'LFPG'
        assert str(excinfo.value) == "No charts found for LFPG"
